"""Rooms, farms and paths through them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from antfarm.chars import is_digit


@dataclass(eq=False)
class Room:
    """A room in the farm; rooms compare and hash by identity."""

    name: str
    x: int = 0
    y: int = 0
    is_start: bool = False
    is_end: bool = False
    connections: List["Room"] = field(default_factory=list, repr=False)
    parent: Optional["Room"] = field(default=None, repr=False)
    score: int = 0
    issues: int = 0

    def is_connected(self, other: "Room") -> bool:
        """True if a tunnel leads from this room to ``other``."""
        return any(room is other for room in self.connections)

    def connect(self, other: "Room") -> None:
        """Join this room and ``other`` with a tunnel in both directions."""
        if other is self:
            raise ValueError(f"room {self.name!r} cannot be linked to itself")
        if self.is_connected(other):
            raise ValueError(f"rooms {self.name!r} and {other.name!r} are already linked")
        self.connections.append(other)
        other.connections.append(self)


@dataclass
class Farm:
    """An ant farm: the number of ants, its rooms and the input it came from."""

    ant_count: int = 0
    rooms: Dict[str, Room] = field(default_factory=dict)
    start_room: Optional[Room] = None
    end_room: Optional[Room] = None
    input_lines: List[str] = field(default_factory=list)

    def find_room(self, name: str) -> Optional[Room]:
        """The room called ``name``, or None."""
        return self.rooms.get(name)

    def add_room(self, room: Room) -> Room:
        """Add ``room``, recording it as start or end room if it is flagged so."""
        if room.is_start and room.is_end:
            raise ValueError(f"room {room.name!r} cannot be both start and end")
        if room.is_start and self.start_room is not None:
            raise ValueError("the farm already has a start room")
        if room.is_end and self.end_room is not None:
            raise ValueError("the farm already has an end room")
        if room.name in self.rooms:
            raise ValueError(f"duplicate room name {room.name!r}")
        if room.is_start:
            self.start_room = room
        elif room.is_end:
            self.end_room = room
        self.rooms[room.name] = room
        return room


@dataclass
class Path:
    """A route of rooms from the start room to the end room."""

    rooms: List[Room]
    score: float = 0.0
    issues: int = 0

    @property
    def length(self) -> int:
        """Number of moves along the path."""
        return len(self.rooms) - 1

    def inner_rooms(self) -> List[Room]:
        """The rooms of the path that are neither the start nor the end."""
        return [room for room in self.rooms if not (room.is_start or room.is_end)]

    def names(self) -> List[str]:
        """Room names along the path, in order."""
        return [room.name for room in self.rooms]


@dataclass
class PathSet:
    """A group of paths chosen to be used together."""

    paths: List[Path] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.paths)


def is_valid_num(text: Optional[str]) -> bool:
    """True for a non-empty string of decimal digits only."""
    if not text:
        return False
    return all(is_digit(ch) for ch in text)


def trim_newline(line: str) -> str:
    """Remove a single trailing newline, if there is one."""
    return line[:-1] if line.endswith("\n") else line