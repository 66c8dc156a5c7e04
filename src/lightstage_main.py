#!/usr/bin/env python3
"""
Lightstage Controller - entry point

Modes:
    lightstage                  interactive uniform color picker
    lightstage --file SCENE     scene player (Left/Right step through frames)

Wires configuration, light transport, keyboard adapters and the mode
controller, then runs the single control loop until quit.
"""

import asyncio
import dataclasses
import sys
from pathlib import Path
from typing import Optional

import click

from controllers import ColorPickerController, ScenePlayerController, LightstageController
from engine.scene_store import SceneStore
from hardware.input.keyboard import start_keyboard
from hardware.led.transport_factory import create_transport
from hardware.led.transport_interface import ILightTransport
from managers import ConfigManager, ColorResolver
from models.config import LightstageConfig, InputConfig
from models.enums import LogCategory, LogLevel, TransportKind, KeyboardKind
from models.errors import LightstageError, TransportError
from services import EventBus, KeyEventStream, log_middleware
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)

PICKER_HELP = """\
Press to choose the lighting colour (uniform):
Non-Polarized           Polarized (Cool White)
    R - Red                 C - Circular
    G - Green               V - Vertical
    B - Blue                H - Horizontal
    W - Warm White          D - Diagonal
    N - Neutral White       P - All Polarized

Other Controls
    A - All lights
    O - Turn off all lights
    Esc - Turn off lights and quit
    Up Arrow - Increase brightness
    Down Arrow - Decrease brightness
"""

PLAYER_HELP = """\
Controls for Scene Player:
    Right Arrow - Next scene
    Left Arrow - Previous scene
    Esc - Quit
"""


# ---------------------------------------------------------------------------
# SESSION
# ---------------------------------------------------------------------------

async def run_session(controller: LightstageController, input_config: InputConfig) -> None:
    """
    Run the controller against live keyboard input.

    The keyboard adapter is the only other task; it just feeds the stream.
    """
    event_bus = EventBus()
    event_bus.add_middleware(log_middleware)
    stream = KeyEventStream(event_bus)

    keyboard_task = asyncio.create_task(start_keyboard(event_bus, input_config))
    keyboard_task.add_done_callback(lambda _: stream.close())

    try:
        await controller.run(stream)
    finally:
        if not keyboard_task.done():
            keyboard_task.cancel()
        results = await asyncio.gather(keyboard_task, return_exceptions=True)

    if isinstance(results[0], Exception):
        raise results[0]


def shutdown_lights(transport: ILightTransport) -> None:
    """Best-effort lights off after an abnormal exit."""
    try:
        transport.clear()
        log.info("Lights off", category=LogCategory.SHUTDOWN)
    except TransportError as ex:
        log.error("Could not turn lights off", category=LogCategory.SHUTDOWN, error=str(ex))


def apply_overrides(
    config: LightstageConfig,
    transport: Optional[str],
    keyboard: Optional[str],
) -> LightstageConfig:
    if transport:
        config = dataclasses.replace(
            config, transport=dataclasses.replace(config.transport, kind=TransportKind(transport))
        )
    if keyboard:
        config = dataclasses.replace(
            config, input=dataclasses.replace(config.input, keyboard=KeyboardKind(keyboard))
        )
    return config


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

@click.command()
@click.version_option(version="1.0.0", prog_name="lightstage")
@click.option(
    '--file', '-f', 'scene_file',
    type=click.Path(path_type=Path),
    default=None,
    help='Scene file to play (omit for the interactive color picker)'
)
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Configuration file (default: src/config/config.yaml, factory defaults if unreadable)'
)
@click.option(
    '--transport',
    type=click.Choice([k.value for k in TransportKind], case_sensitive=False),
    default=None,
    help='Override the light transport from config'
)
@click.option(
    '--keyboard',
    type=click.Choice([k.value for k in KeyboardKind], case_sensitive=False),
    default=None,
    help='Override the keyboard adapter from config'
)
@click.option('-v', '--verbose', count=True, help='Show debug logs')
@click.option('--no-color', is_flag=True, help='Disable ANSI colors in logs')
def main(
    scene_file: Optional[Path],
    config_path: Optional[Path],
    transport: Optional[str],
    keyboard: Optional[str],
    verbose: int,
    no_color: bool,
) -> None:
    """Runs interactive mode or scene player mode."""
    configure_logger(LogLevel.DEBUG if verbose else LogLevel.INFO, use_colors=not no_color)

    if scene_file is not None and not scene_file.exists():
        click.echo(f"Error: File '{scene_file}' does not exist.")
        sys.exit(1)

    manager = ConfigManager(config_path.resolve()) if config_path else ConfigManager()
    try:
        config = apply_overrides(manager.load(), transport, keyboard)
    except ValueError as ex:
        log.error("Invalid configuration", error=str(ex))
        sys.exit(1)

    nodes = config.stage.node_count
    channels = config.stage.channel_count

    scene = None
    if scene_file is not None:
        try:
            scene = SceneStore.load(scene_file, nodes, channels)
        except (LightstageError, OSError) as ex:
            log.error("Cannot load scene", file=str(scene_file), error=str(ex))
            sys.exit(1)

    try:
        light_transport = create_transport(config)
    except (LightstageError, ImportError) as ex:
        log.error("Light transport unavailable", error=str(ex))
        sys.exit(1)

    if scene is not None:
        controller: LightstageController = ScenePlayerController(light_transport, scene)
        click.echo(PLAYER_HELP)
    else:
        controller = ColorPickerController(
            light_transport, ColorResolver(channels), config.brightness
        )
        click.echo(PICKER_HELP)

    try:
        asyncio.run(run_session(controller, config.input))
    except KeyboardInterrupt:
        log.info("Interrupted")
        shutdown_lights(light_transport)
    except (LightstageError, RuntimeError) as ex:
        log.error("Session stopped", error=f"{type(ex).__name__}: {ex}")
        shutdown_lights(light_transport)
        sys.exit(1)


if __name__ == "__main__":
    main()
