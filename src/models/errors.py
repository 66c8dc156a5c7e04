"""
Domain errors

Every failure the lightstage core can report derives from LightstageError, so
the entry point can tell domain errors apart from bugs.
"""

from typing import Optional


class LightstageError(Exception):
    """Base class for lightstage domain errors"""


class NodeIndexError(LightstageError, IndexError):
    """Node index outside [0, node_count)"""

    def __init__(self, index: int, node_count: int):
        self.index = index
        self.node_count = node_count
        super().__init__(f"Node index {index} out of range (0..{node_count - 1})")


class ReadOnlyFrameError(LightstageError):
    """Attempt to modify a frame that belongs to a scene"""


class FormatError(LightstageError, ValueError):
    """
    Malformed scene file content.

    Attributes:
        line_number: 1-based line number of the offending line
        token: Token that failed to parse (None when the whole line is at fault)
        line: Raw line text
        reason: Short description of the problem
    """

    def __init__(self, line_number: int, line: str, reason: str, token: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        self.token = token

        where = f"line {line_number}"
        if token is not None:
            where += f", token '{token}'"
        super().__init__(f"{where}: {reason} ({line!r})")


class EmptySceneError(LightstageError):
    """Node query on a scene that has no committed frames"""

    def __init__(self, message: str = "Scene has no frames (every frame must end with 'show')"):
        super().__init__(message)


class TransportError(LightstageError):
    """Hardware write failed; in-memory state is unaffected"""
