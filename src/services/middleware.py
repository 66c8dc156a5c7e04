"""
Middleware for EventBus

Pipeline functions that see every event before the handlers do.
"""

from models.events import Event
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.EVENT)


def log_middleware(event: Event) -> Event:
    """
    Log all events at DEBUG level.

    Usage:
        event_bus.add_middleware(log_middleware)
    """
    source = event.source.name if event.source is not None else "-"
    log.debug(f"Event: {event.type.name} from {source}", **event.to_data())
    return event
