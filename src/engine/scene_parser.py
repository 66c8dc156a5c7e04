"""
Scene text-format parser.

Line grammar, evaluated top to bottom:

    # comment                     ignored
    show                          commit the frame built so far, start a blank one
    <node> <ch0> <ch1> ...        assign channels 0.. of one node (partial allowed)

Channels not listed on an assignment line keep their value from earlier lines
of the same frame. A frame is only committed by `show`: assignments after the
last `show` are discarded at end of input.

Parsing is all-or-nothing. The first malformed line raises FormatError and no
SceneStore is returned.
"""

import re
from typing import Iterable, List

from engine.scene_store import SceneStore
from models.errors import FormatError
from models.frame import FrameBuffer
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SCENE)

COMMENT_PREFIX = "#"
COMMIT_TOKEN = "show"

_UNSIGNED = re.compile(r"\+?[0-9]+")


class SceneParser:
    """
    Builds a SceneStore from scene lines for a fixed node/channel geometry.

    Example:
        parser = SceneParser(node_count=143, channel_count=9)
        scene = parser.parse(open("scene.txt"))
    """

    def __init__(self, node_count: int, channel_count: int):
        self.node_count = node_count
        self.channel_count = channel_count

    def parse(self, lines: Iterable[str]) -> SceneStore:
        scene = SceneStore(self.node_count, self.channel_count)
        pending = scene.new_frame()
        pending_assignments = 0

        line_number = 0
        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")

            if line.startswith(COMMENT_PREFIX):
                continue

            if line == COMMIT_TOKEN:
                scene.add_frame(pending)
                pending = scene.new_frame()
                pending_assignments = 0
                continue

            tokens = line.split()
            if not tokens:
                continue

            self._apply_assignment(pending, tokens, line_number, line)
            pending_assignments += 1

        if pending_assignments:
            log.warn(
                "Frame without trailing 'show' discarded",
                assignments=pending_assignments,
                last_line=line_number,
            )

        log.info(
            "Scene parsed",
            frames=scene.frame_count(),
            geometry=f"{self.node_count}x{self.channel_count}",
        )
        return scene

    def _apply_assignment(self, frame: FrameBuffer, tokens: List[str], line_number: int, line: str) -> None:
        index_token, value_tokens = tokens[0], tokens[1:]

        index = self._parse_unsigned(index_token, line_number, line, "node index is not an unsigned integer")
        if index >= self.node_count:
            raise FormatError(
                line_number, line,
                f"node index {index} out of range (0..{self.node_count - 1})",
                token=index_token,
            )

        if len(value_tokens) > self.channel_count:
            raise FormatError(
                line_number, line,
                f"{len(value_tokens)} channel values given, node has {self.channel_count}",
                token=value_tokens[self.channel_count],
            )

        channels = frame.get_node(index)
        for channel, token in enumerate(value_tokens):
            value = self._parse_unsigned(token, line_number, line, "channel value is not an unsigned integer")
            if value > 255:
                raise FormatError(line_number, line, f"channel value {value} outside 0..255", token=token)
            channels[channel] = value

        frame.set_node(index, channels)

    @staticmethod
    def _parse_unsigned(token: str, line_number: int, line: str, reason: str) -> int:
        if not _UNSIGNED.fullmatch(token):
            raise FormatError(line_number, line, reason, token=token)
        return int(token)


def parse_scene(lines: Iterable[str], node_count: int, channel_count: int) -> SceneStore:
    """Shortcut for SceneParser(node_count, channel_count).parse(lines)."""
    return SceneParser(node_count, channel_count).parse(lines)
