"""Tests for move resolution: blocked moves, steps and pushes."""

import pytest

from pushbox.grid import CellKind, EngineIntegrityError, Grid
from pushbox.moves import Direction, MoveResolver, resolve_move
from pushbox.schemas import TransitionKind, TransitionResult
from pushbox.win import is_solved

W, S, P, B = CellKind.WALL, CellKind.SPACE, CellKind.PERSON, CellKind.BOX


def open_board() -> Grid:
    """7x6 board with the person in the middle of a free interior."""
    grid = Grid.blank(6, 7)
    grid.set(grid.index_at(2, 3), P)
    return grid


def test_scenario_walled_in_person_is_always_blocked():
    grid = Grid(width=3, height=3, cells=[W, W, W, W, P, W, W, W, W])
    before = list(grid.cells)

    for direction in Direction:
        result = resolve_move(grid, direction)
        assert result == TransitionResult.blocked()
        assert grid.cells == before

    assert is_solved(grid) is True


def test_scenario_step_right():
    grid = Grid(width=4, height=3, cells=[W, W, W, W, W, P, S, W, W, W, W, W])

    result = resolve_move(grid, Direction.RIGHT)

    assert result.kind == TransitionKind.STEP
    assert (result.person_from, result.person_to) == (5, 6)
    assert grid.index_of_person() == 6
    assert grid.get(5) == S


def test_scenario_push_box_onto_target_solves_board():
    grid = Grid(
        width=5,
        height=3,
        cells=[W, W, W, W, W, W, P, B, S, W, W, W, W, W, W],
        targets=frozenset({8}),
    )
    assert is_solved(grid) is False

    result = resolve_move(grid, Direction.RIGHT)

    assert result == TransitionResult.push(6, 7, 7, 8)
    assert grid.cells == [W, W, W, W, W, W, S, P, B, W, W, W, W, W, W]
    assert is_solved(grid) is True


@pytest.mark.parametrize(
    "direction, expected_offset",
    [
        (Direction.LEFT, -1),
        (Direction.RIGHT, 1),
        (Direction.UP, -7),
        (Direction.DOWN, 7),
    ],
)
def test_step_changes_only_two_cells(direction, expected_offset):
    grid = open_board()
    start = grid.index_of_person()
    before = list(grid.cells)

    result = resolve_move(grid, direction)

    assert result.kind == TransitionKind.STEP
    assert result.person_to == start + expected_offset
    changed = [i for i, (old, new) in enumerate(zip(before, grid.cells)) if old != new]
    assert changed == sorted([start, start + expected_offset])
    assert grid.get(start) == S
    assert grid.get(start + expected_offset) == P


def test_moving_into_wall_leaves_board_unchanged():
    grid = open_board()
    # Walk to the top interior row, then one more step up hits the border
    resolve_move(grid, Direction.UP)
    before = list(grid.cells)

    result = resolve_move(grid, Direction.UP)

    assert result.is_blocked
    assert grid.cells == before


def test_horizontal_move_at_row_edge_never_wraps():
    grid = Grid.blank(6, 7)
    left_edge = grid.index_at(3, 1)
    right_edge = grid.index_at(3, 5)
    grid.set(left_edge, P)

    assert resolve_move(grid, Direction.LEFT).is_blocked
    assert grid.index_of_person() == left_edge

    grid.set(left_edge, S)
    grid.set(right_edge, P)
    assert resolve_move(grid, Direction.RIGHT).is_blocked
    assert grid.index_of_person() == right_edge


def test_push_moves_box_and_person_together():
    grid = open_board()
    person = grid.index_of_person()
    box = person + 7
    grid.set(box, B)
    before = list(grid.cells)

    result = resolve_move(grid, Direction.DOWN)

    assert result.kind == TransitionKind.PUSH
    assert (result.person_from, result.person_to) == (person, box)
    assert (result.box_from, result.box_to) == (box, box + 7)
    changed = [i for i, (old, new) in enumerate(zip(before, grid.cells)) if old != new]
    assert changed == [person, box, box + 7]
    assert [grid.get(i) for i in changed] == [S, P, B]


def test_push_into_wall_is_blocked():
    grid = Grid(width=5, height=3, cells=[W, W, W, W, W, W, S, P, B, W, W, W, W, W, W])
    before = list(grid.cells)

    assert resolve_move(grid, Direction.RIGHT).is_blocked
    assert grid.cells == before


def test_push_into_second_box_is_blocked():
    grid = Grid.blank(5, 7)
    grid.set(grid.index_at(2, 1), P)
    grid.set(grid.index_at(2, 2), B)
    grid.set(grid.index_at(2, 3), B)
    before = list(grid.cells)

    assert resolve_move(grid, Direction.RIGHT).is_blocked
    assert grid.cells == before


def test_targets_survive_person_and_box_passing_over():
    grid = Grid(
        width=6,
        height=3,
        cells=[W] * 6 + [W, P, B, S, S, W] + [W] * 6,
        targets=frozenset({9}),
    )

    resolve_move(grid, Direction.RIGHT)  # box onto target
    resolve_move(grid, Direction.RIGHT)  # box off target, person onto it
    assert grid.get(9) == P
    assert grid.targets == frozenset({9})

    resolve_move(grid, Direction.LEFT)
    assert grid.get(9) == S
    assert grid.is_target(9)


def test_results_never_leave_the_board():
    grid = Grid.blank(6, 6)
    grid.set(grid.index_at(1, 1), P)
    grid.set(grid.index_at(2, 2), B)
    grid.set(grid.index_at(3, 3), B)
    pattern = [Direction.RIGHT, Direction.DOWN, Direction.DOWN, Direction.LEFT, Direction.UP] * 8

    for direction in pattern:
        result = resolve_move(grid, direction)
        for index in result.changed_indices:
            assert 0 <= index < len(grid)
        assert grid.count(P) == 1
        assert grid.count(B) == 2


def test_missing_person_is_an_integrity_error():
    grid = Grid.blank(4, 4)

    with pytest.raises(EngineIntegrityError) as excinfo:
        resolve_move(grid, Direction.LEFT)

    assert excinfo.value.person_count == 0


def test_two_persons_is_an_integrity_error_without_mutation():
    grid = Grid.blank(5, 5)
    grid.set(grid.index_at(1, 1), P)
    grid.set(grid.index_at(3, 3), P)
    before = list(grid.cells)

    with pytest.raises(EngineIntegrityError) as excinfo:
        resolve_move(grid, Direction.RIGHT)

    assert excinfo.value.person_count == 2
    assert grid.cells == before


def test_direction_accepts_plain_strings():
    grid = open_board()
    assert resolve_move(grid, "left").kind == TransitionKind.STEP


def test_move_resolver_counts_moves_and_pushes():
    grid = Grid(width=6, height=3, cells=[W] * 6 + [W, P, B, S, S, W] + [W] * 6)
    resolver = MoveResolver(grid)

    resolver.resolve(Direction.RIGHT)  # push
    resolver.resolve(Direction.UP)  # blocked
    resolver.resolve(Direction.LEFT)  # step

    assert resolver.moves == 2
    assert resolver.pushes == 1

    resolver.reset(Grid.blank(4, 4))
    assert (resolver.moves, resolver.pushes) == (0, 0)
