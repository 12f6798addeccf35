"""Reading an ant farm description.

The description is a number of ants, then rooms ("name x y", optionally
preceded by the commands ``##start`` or ``##end``), then links
("name1-name2"). Lines starting with ``#`` are comments. Any malformed
line ends parsing with :class:`FarmParseError`.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import IO, Iterable, Optional, Tuple

from antfarm.chars import is_alnum
from antfarm.lines import iter_lines
from antfarm.model import Farm, Room, is_valid_num, trim_newline
from antfarm.strings import atoi, split

START_COMMAND = "##start"
END_COMMAND = "##end"

PHASE_ANTS = 0
PHASE_ROOMS = 1
PHASE_LINKS = 2


class LineType(Enum):
    ANT_COUNT = auto()
    COMMAND = auto()
    COMMENT = auto()
    ROOM = auto()
    LINK = auto()
    EMPTY = auto()
    INVALID = auto()


class FarmParseError(ValueError):
    """The farm description is malformed."""


def is_room_name_format(name: Optional[str]) -> bool:
    """True if ``name`` may name a room: no leading 'L' or '#', only [A-Za-z0-9_-]."""
    if name is None:
        return False
    if name[:1] in ("L", "#"):
        return False
    return all(is_alnum(ch) or ch in "_-" for ch in name)


def is_link_format(line: str) -> bool:
    """True for a line of two valid room names joined by '-'."""
    names = split(line, "-")
    return len(names) == 2 and all(is_room_name_format(name) for name in names)


def is_room_format(line: str) -> bool:
    """True for a line "name x y" with a valid name and two unsigned numbers."""
    parts = split(line, " ")
    return (
        len(parts) == 3
        and is_room_name_format(parts[0])
        and is_valid_num(parts[1])
        and is_valid_num(parts[2])
    )


def classify_line(line: Optional[str], phase: int) -> Tuple[LineType, int]:
    """Classify ``line`` read during ``phase``; returns the type and the new phase.

    The first link moves the phase from rooms to links. An ant count with a
    leading zero raises :class:`FarmParseError`.
    """
    if phase == PHASE_ANTS and line is not None and is_valid_num(line):
        if line[0] == "0":
            raise FarmParseError(f"invalid ant count {line!r}")
        return LineType.ANT_COUNT, phase
    if not line:
        return LineType.EMPTY, phase
    if phase == PHASE_ROOMS and is_room_format(line):
        return LineType.ROOM, phase
    if phase in (PHASE_ROOMS, PHASE_LINKS) and is_link_format(line):
        return LineType.LINK, PHASE_LINKS
    if phase == PHASE_ROOMS and line.startswith("##"):
        return LineType.COMMAND, phase
    if line.startswith("#"):
        return LineType.COMMENT, phase
    return LineType.INVALID, phase


class FarmParser:
    """Builds a :class:`Farm` from description lines fed one at a time."""

    def __init__(self) -> None:
        self.farm = Farm()
        self.phase = PHASE_ANTS
        self._next_is_start = False
        self._next_is_end = False

    def feed(self, line: str) -> LineType:
        """Process one line (a trailing newline is ignored) and return its type."""
        line = trim_newline(line)
        line_type, self.phase = classify_line(line, self.phase)
        self.farm.input_lines.append(line)

        if line_type is LineType.ANT_COUNT:
            self.phase = PHASE_ROOMS
            self.farm.ant_count = atoi(line)
        elif line_type is LineType.COMMAND:
            self._command(line)
        elif line_type is LineType.ROOM:
            self._room(line)
            self._next_is_start = False
            self._next_is_end = False
        elif line_type is LineType.LINK:
            self._link(line)
        elif line_type in (LineType.EMPTY, LineType.INVALID):
            raise FarmParseError(f"invalid line {line!r}")
        return line_type

    def _command(self, line: str) -> None:
        if line == START_COMMAND:
            self._next_is_start, self._next_is_end = True, False
        elif line == END_COMMAND:
            self._next_is_start, self._next_is_end = False, True

    def _room(self, line: str) -> None:
        name, x, y = split(line, " ")
        room = Room(
            name,
            x=atoi(x),
            y=atoi(y),
            is_start=self._next_is_start,
            is_end=self._next_is_end,
        )
        try:
            self.farm.add_room(room)
        except ValueError as exc:
            raise FarmParseError(str(exc)) from exc

    def _link(self, line: str) -> None:
        first_name, second_name = split(line, "-")
        if first_name == second_name:
            raise FarmParseError(f"room {first_name!r} linked to itself")
        first = self.farm.find_room(first_name)
        second = self.farm.find_room(second_name)
        if first is None or second is None:
            raise FarmParseError(f"link {line!r} names an unknown room")
        if first.is_connected(second):
            raise FarmParseError(f"duplicate link {line!r}")
        first.connect(second)

    def finish(self) -> Farm:
        """Return the farm, which must have both a start and an end room."""
        if self.farm.start_room is None or self.farm.end_room is None:
            raise FarmParseError("ERROR")
        return self.farm


def parse_farm(lines: Iterable[str]) -> Farm:
    """Parse a farm from an iterable of lines."""
    parser = FarmParser()
    for line in lines:
        parser.feed(line)
    return parser.finish()


def read_farm(stream: IO[str]) -> Farm:
    """Parse a farm from a text stream."""
    return parse_farm(iter_lines(stream))