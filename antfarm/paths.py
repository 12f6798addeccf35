"""Enumerating every simple path from the start room to the end room."""

from __future__ import annotations

from typing import Iterator, List

from antfarm.model import Farm, Path


def iter_paths(farm: Farm) -> Iterator[Path]:
    """Yield every path from start to end that visits no room twice.

    Paths come in depth-first order, following each room's tunnels in the
    order they were declared. A path stops at the end room.
    """
    start, end = farm.start_room, farm.end_room
    if start is None or end is None:
        raise ValueError("the farm needs both a start and an end room")
    if start is end:
        yield Path([start])
        return

    stack = [start]
    on_path = {start}
    pending = [iter(start.connections)]
    while pending:
        for neighbour in pending[-1]:
            if neighbour in on_path:
                continue
            neighbour.parent = stack[-1]
            if neighbour is end:
                yield Path(stack + [neighbour])
                continue
            stack.append(neighbour)
            on_path.add(neighbour)
            pending.append(iter(neighbour.connections))
            break
        else:
            pending.pop()
            on_path.discard(stack.pop())


def find_all_paths(farm: Farm) -> List[Path]:
    """All paths from start to end, as a list."""
    return list(iter_paths(farm))


def format_path(path: Path) -> str:
    """The room names run together, followed by the path length."""
    return f"{''.join(path.names())} path len: {path.length}"