import io

import pytest

from antfarm.model import Path, Room
from antfarm.parsing import parse_farm
from antfarm.solver import (
    assign_scores,
    calc_least_turns,
    can_finish_in_turns,
    count_issues,
    longest_path_length,
    main,
    paths_conflict,
    select_paths,
    solve,
)

TWO_ROUTES = """3
##start
s 0 0
a 1 0
b 2 0
##end
e 3 0
s-a
a-e
s-b
b-e
"""

SHARED_ROOM = """1
##start
s 0 0
a 1 0
b 2 0
##end
e 3 0
s-a
a-e
a-b
b-e
"""

LONG_DETOUR = """1
##start
s 0 0
a 1 0
c1 2 0
c2 3 0
c3 4 0
c4 5 0
##end
e 6 0
s-a
a-e
a-c1
c1-c2
c2-c3
c3-c4
c4-e
"""

NO_ROUTE = """2
##start
s 0 0
a 1 0
##end
e 2 0
s-a
"""


def _farm(text):
    return parse_farm(text.splitlines())


def _path(length, prefix="r"):
    rooms = [Room(f"{prefix}{i}") for i in range(length + 1)]
    rooms[0].is_start = True
    rooms[-1].is_end = True
    return Path(rooms)


def _shared_paths():
    start = Room("s", is_start=True)
    end = Room("e", is_end=True)
    middle = Room("m")
    first = Path([start, middle, end])
    second = Path([start, Room("x"), middle, end])
    third = Path([start, Room("y"), end])
    return first, second, third


def test_paths_conflict_on_shared_inner_room():
    first, second, _ = _shared_paths()
    assert paths_conflict(first, second) is True
    assert paths_conflict(second, first) is True


def test_paths_sharing_only_start_and_end_do_not_conflict():
    first, _, third = _shared_paths()
    assert paths_conflict(first, third) is False
    assert paths_conflict(third, first) is False


def test_count_issues_increments_both_paths():
    first, second, _ = _shared_paths()
    shared = count_issues(first, second)
    assert [room.name for room in shared] == ["m"]
    assert first.issues == len(shared)
    assert second.issues == len(shared)


def test_count_issues_without_conflict_changes_nothing():
    first, _, third = _shared_paths()
    assert count_issues(first, third) == []
    assert first.issues == 0
    assert third.issues == 0


def test_longest_path_length():
    assert longest_path_length([]) == 0
    paths = [_path(2), _path(5), _path(3)]
    assert longest_path_length(paths) == 5


def test_can_finish_single_path_bounds():
    path = _path(4)
    ants = 6
    needed = ants + path.length - 1
    assert can_finish_in_turns([path], ants, needed) is True
    assert can_finish_in_turns([path], ants, needed - 1) is False


def test_can_finish_false_when_target_shorter_than_every_path():
    paths = [_path(5), _path(6)]
    assert can_finish_in_turns(paths, 1, 3) is False


def test_calc_least_turns_single_path():
    path = _path(3)
    for ants in (1, 2, 7):
        assert calc_least_turns([path], ants) == ants + path.length - 1


@pytest.mark.parametrize("ants", [1, 2, 5, 10, 23])
def test_calc_least_turns_is_the_minimum(ants):
    paths = [_path(2, "a"), _path(3, "b"), _path(5, "c")]
    turns = calc_least_turns(paths, ants)
    assert can_finish_in_turns(paths, ants, turns) is True
    if turns > 1:
        assert can_finish_in_turns(paths, ants, turns - 1) is False


def test_more_paths_never_need_more_turns():
    short = [_path(2, "a")]
    more = short + [_path(4, "b")]
    assert calc_least_turns(more, 9) <= calc_least_turns(short, 9)


def test_assign_scores_conflict_penalty():
    clean = _path(2, "a")
    troubled = _path(2, "b")
    troubled.issues = 1
    assign_scores([clean, troubled], 4)
    assert troubled.score - clean.score == 3.0


def test_assign_scores_favour_long_paths():
    medium = _path(3, "a")
    long = _path(5, "b")
    assign_scores([medium, long], 4)
    assert long.score < medium.score


def test_select_paths_keeps_disjoint_paths():
    farm = _farm(TWO_ROUTES)
    out = io.StringIO()
    from antfarm.paths import find_all_paths

    chosen = select_paths(find_all_paths(farm), farm.ant_count, out)
    assert chosen.count == 2
    assert "Conflict" not in out.getvalue()
    assert out.getvalue().count("Current path: len=2") == 2


def test_select_paths_keeps_existing_on_conflict():
    from antfarm.paths import find_all_paths

    farm = _farm(SHARED_ROOM)
    out = io.StringIO()
    chosen = select_paths(find_all_paths(farm), farm.ant_count, out)
    text = out.getvalue()
    assert "    Conflict: room a\n" in text
    assert "  -> Keeping existing\n" in text
    assert [path.names() for path in chosen.paths] == [["s", "a", "e"]]


def test_select_paths_replaces_with_better_score():
    from antfarm.paths import find_all_paths

    farm = _farm(LONG_DETOUR)
    out = io.StringIO()
    chosen = select_paths(find_all_paths(farm), farm.ant_count, out)
    assert "  -> Replacing!\n" in out.getvalue()
    assert [path.names() for path in chosen.paths] == [
        ["s", "a", "c1", "c2", "c3", "c4", "e"]
    ]


def test_select_paths_empty():
    out = io.StringIO()
    chosen = select_paths([], 3, out)
    assert chosen.count == 0
    assert out.getvalue() == ""


def test_solve_reports_best_solution():
    farm = _farm(TWO_ROUTES)
    out = io.StringIO()
    chosen, turns = solve(farm, out)
    text = out.getvalue()
    assert chosen.count == 2
    assert "sae path len: 2\n" in text
    assert "sbe path len: 2\n" in text
    assert text.endswith(f"Best solution: {turns} turns using {chosen.count} paths\n")
    assert turns == calc_least_turns(chosen.paths, farm.ant_count)


def test_solve_without_route():
    out = io.StringIO()
    chosen, turns = solve(_farm(NO_ROUTE), out)
    assert turns is None
    assert chosen.count == 0
    assert out.getvalue() == "No valid paths found\n"


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    assert capsys.readouterr().out == "ERROR: No arguments allowed\n"


def test_main_solves_farm_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TWO_ROUTES))
    assert main([]) == 0
    assert "Best solution:" in capsys.readouterr().out


def test_main_missing_end_prints_error(monkeypatch, capsys):
    text = "2\n##start\ns 0 0\na 1 0\ns-a\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 1
    assert capsys.readouterr().out == "ERROR\n"


def test_main_invalid_line_fails_quietly(monkeypatch, capsys):
    text = "2\n##start\ns 0 0\nthis is not valid here\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 1
    assert capsys.readouterr().out == ""