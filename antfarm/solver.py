"""Choosing a set of paths for the ants and estimating the turns they need."""

from __future__ import annotations

import sys
from itertools import combinations
from typing import List, Optional, Sequence, TextIO, Tuple

from antfarm.lines import iter_lines
from antfarm.model import Farm, Path, PathSet, Room
from antfarm.parsing import FarmParseError, FarmParser
from antfarm.paths import format_path, iter_paths

CONFLICT_PENALTY = 3.0
LENGTH_BONUS = 1.5
LENGTH_BONUS_THRESHOLD = 3


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def paths_conflict(first: Path, second: Path) -> bool:
    """True if an inner room of ``first`` also lies on ``second``."""
    return any(room in second.rooms for room in first.inner_rooms())


def count_issues(first: Path, second: Path) -> List[Room]:
    """Record the rooms the two paths share and return them.

    Every inner room of ``first`` that lies on ``second`` adds one issue
    to each of the two paths.
    """
    shared = [room for room in first.inner_rooms() if room in second.rooms]
    first.issues += len(shared)
    second.issues += len(shared)
    return shared


def can_finish_in_turns(paths: Sequence[Path], total_ants: int, target_turns: int) -> bool:
    """True if ``total_ants`` ants can all arrive within ``target_turns`` turns."""
    placed = 0
    for path in paths:
        capacity = target_turns - path.length + 1
        if capacity <= 0:
            continue
        placed += min(capacity, total_ants - placed)
        if placed >= total_ants:
            return True
    return False


def longest_path_length(paths: Sequence[Path]) -> int:
    """Length of the longest path, or 0 when there are none."""
    return max((path.length for path in paths), default=0)


def calc_least_turns(paths: Sequence[Path], total_ants: int) -> int:
    """Smallest number of turns in which the ants can cross using ``paths``."""
    low = 1
    high = total_ants + longest_path_length(paths) - 1
    while low < high:
        middle = (low + high) // 2
        if can_finish_in_turns(paths, total_ants, middle):
            high = middle
        else:
            low = middle + 1
    return low


def assign_scores(paths: Sequence[Path], ant_count: int) -> None:
    """Score every path; a lower score makes a path more attractive.

    The score starts from the turns needed with that path alone, adds a
    penalty for each conflict and subtracts a bonus for length beyond
    three moves.
    """
    for path in paths:
        turns_alone = ant_count + path.length - 1
        penalty = path.issues * CONFLICT_PENALTY
        bonus = 0.0
        if path.length > LENGTH_BONUS_THRESHOLD:
            bonus = -(path.length - LENGTH_BONUS_THRESHOLD) * LENGTH_BONUS
        path.score = float(turns_alone) + penalty + bonus


def select_paths(paths: List[Path], ant_count: int, out: Optional[TextIO] = None) -> PathSet:
    """Pick paths shortest first, letting a better-scored path replace a rival.

    Conflicts and the decisions taken are reported on ``out``.
    """
    stream = _stream(out)
    for path in paths:
        path.issues = 0
    for first, second in combinations(paths, 2):
        for room in count_issues(first, second):
            stream.write(f"    Conflict: room {room.name}\n")
    assign_scores(paths, ant_count)

    selected: List[Path] = []
    for current in sorted(paths, key=lambda path: path.length):
        stream.write(f"Current path: len={current.length}, score={current.score:.1f}\n")
        rival = next(
            (index for index, chosen in enumerate(selected) if paths_conflict(current, chosen)),
            None,
        )
        if rival is None:
            selected.append(current)
            continue
        kept = selected[rival]
        stream.write(f"  Conflicts with path: len={kept.length}, score={kept.score:.1f}\n")
        if current.score < kept.score:
            stream.write("  -> Replacing!\n")
            selected[rival] = current
        else:
            stream.write("  -> Keeping existing\n")
    return PathSet(selected)


def solve(farm: Farm, out: Optional[TextIO] = None) -> Tuple[PathSet, Optional[int]]:
    """Find the paths of ``farm``, choose a set and report the turns needed.

    Returns the chosen paths and the turn count, which is None when no
    path leads from start to end.
    """
    stream = _stream(out)
    paths: List[Path] = []
    for path in iter_paths(farm):
        stream.write(format_path(path) + "\n")
        paths.append(path)

    chosen = select_paths(paths, farm.ant_count, stream)
    if chosen.count == 0:
        stream.write("No valid paths found\n")
        return chosen, None
    turns = calc_least_turns(chosen.paths, farm.ant_count)
    stream.write(f"Best solution: {turns} turns using {chosen.count} paths\n")
    return chosen, turns


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a farm from standard input and print the best path set found."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        sys.stdout.write("ERROR: No arguments allowed\n")
        return 1

    parser = FarmParser()
    try:
        for line in iter_lines(sys.stdin):
            parser.feed(line)
    except FarmParseError:
        return 1
    try:
        farm = parser.finish()
    except FarmParseError:
        sys.stdout.write("ERROR\n")
        return 1

    solve(farm)
    return 0


if __name__ == "__main__":
    sys.exit(main())