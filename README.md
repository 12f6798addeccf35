# antfarm

Reads an ant-farm map, finds every simple path from the start room to the
end room, picks a set of paths that avoids shared rooms, and reports the
fewest turns needed to move all ants across on that set.

## Installing

```
pip install .
```

## Map format

```
3
##start
a 0 0
b 1 0
##end
c 2 0
a-b
b-c
```

- The first line is the number of ants, a positive integer without a
  leading zero.
- A room is `name x y`, where `x` and `y` are unsigned integers. Names may
  not start with `L` or `#` and may hold only letters, digits, `_` and `-`.
- `##start` and `##end` mark the room that comes next. Other `##` lines
  among the rooms are ignored.
- A link is `name1-name2`. Once links begin, no further rooms may follow.
- Lines starting with `#` are comments.

An empty line, a malformed line, a duplicate room name, a second start or
end room, a room linked to itself, a link naming an unknown room, a
duplicate link, or a missing start or end room makes the map invalid.

## Command line

The `antfarm` command reads the map from standard input and takes no
arguments:

```
antfarm < farm.map
```

For the map above it prints:

```
abc path len: 2
Current path: len=2, score=4.0
Best solution: 4 turns using 1 paths
```

It first lists every path it finds (room names run together, then the
number of moves), then the rooms that paths share, then, shortest path
first, whether each path is taken, replaces a conflicting one with a
worse score, or is dropped. If no path reaches the end it prints
`No valid paths found`.

Given any argument it prints `ERROR: No arguments allowed` and exits with
status 1. A map without a start or end room prints `ERROR` and exits with
status 1; any other invalid map exits with status 1 without a message.

## Library use

```python
from antfarm.parsing import parse_farm
from antfarm.paths import find_all_paths
from antfarm.solver import select_paths, calc_least_turns

with open("farm.map") as handle:
    farm = parse_farm(handle.read().splitlines())
paths = find_all_paths(farm)
chosen = select_paths(paths, farm.ant_count)
print(calc_least_turns(chosen.paths, farm.ant_count))
```

- `antfarm.parsing` — `parse_farm`, `read_farm` (from a text stream), the
  incremental `FarmParser` (`feed`, `finish`), `classify_line` and
  `LineType`. Invalid maps raise `FarmParseError`, a `ValueError`.
- `antfarm.model` — `Room`, `Farm`, `Path` and `PathSet`.
- `antfarm.paths` — `iter_paths` and `find_all_paths` enumerate paths
  depth first; `format_path` renders one.
- `antfarm.solver` — `paths_conflict`, `count_issues`, `assign_scores`,
  `select_paths`, `can_finish_in_turns`, `calc_least_turns` and `solve`,
  which runs the whole search, writes its report and returns the chosen
  `PathSet` with the turn count (or `None` when no path exists).
  `select_paths` and `solve` write to standard output unless given a stream.

Small general helpers used by the above are also available:
`antfarm.chars` (ASCII classification), `antfarm.strings` (C-style string
routines such as `atoi`, `split`, `strlcpy`), `antfarm.memory` (byte-buffer
fill, copy and search), `antfarm.output` (`format_printf`, `printf`,
`put_str` and friends), `antfarm.linkedlist` (`LinkedList`) and
`antfarm.lines` (`LineReader`, `iter_lines`).

## What it does not do

The package does not simulate or print the ants' moves turn by turn; it
only reports how many turns the chosen paths need. Path selection is
greedy, so the reported set is not guaranteed to be the best possible.

## Tests

```
pip install .[test]
pytest
```