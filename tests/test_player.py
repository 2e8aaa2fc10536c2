import pytest

from qix.grid import Cell
from qix.player import Direction, MoveResult, PlayerMode, PlayerState


@pytest.fixture
def board(grid):
    g = grid()
    return g, PlayerState.spawn(g)


def test_spawn_at_bottom_center_in_traverse_mode(board):
    g, player = board
    assert player.position == (5, 9)
    assert player.mode == PlayerMode.TRAVERSE
    assert player.facing == Direction.UP
    assert player.line_path == []


def test_direction_helpers():
    assert Direction.UP.opposite == Direction.DOWN
    assert Direction.LEFT.opposite == Direction.RIGHT
    assert Direction.RIGHT.delta == (1, 0)
    assert Direction.UP.delta == (0, -1)


def test_out_of_bounds_move_changes_nothing(board):
    g, player = board

    result = player.attempt_move(Direction.DOWN, g, draw_modifier_held=True)

    assert result == MoveResult()
    assert player.position == (5, 9)
    assert player.facing == Direction.UP


def test_traverse_along_border(board):
    g, player = board

    result = player.attempt_move(Direction.RIGHT, g, False)

    assert result.moved
    assert player.position == (6, 9)
    assert player.facing == Direction.RIGHT
    assert player.mode == PlayerMode.TRAVERSE


def test_entering_empty_requires_draw_modifier(board):
    g, player = board
    player.facing = Direction.LEFT

    result = player.attempt_move(Direction.UP, g, False)

    assert not result.moved
    assert player.position == (5, 9)
    assert player.mode == PlayerMode.TRAVERSE
    # Facing is committed even though the move was rejected
    assert player.facing == Direction.UP
    assert g.get_cell(5, 8) == Cell.EMPTY


def test_draw_modifier_starts_a_line(board):
    g, player = board

    result = player.attempt_move(Direction.UP, g, True)

    assert result.moved and not result.completed_shape
    assert player.mode == PlayerMode.DRAW
    assert player.line_path == [(5, 8)]
    assert g.get_cell(5, 8) == Cell.LINE


def test_drawing_continues_without_modifier(board):
    g, player = board
    player.attempt_move(Direction.UP, g, True)

    result = player.attempt_move(Direction.UP, g, False)

    assert result.moved
    assert player.line_path == [(5, 8), (5, 7)]
    assert g.get_cell(5, 7) == Cell.LINE


def test_reversal_while_drawing_is_rejected(board):
    g, player = board
    player.attempt_move(Direction.UP, g, True)
    player.attempt_move(Direction.UP, g, True)
    before = g.snapshot()

    result = player.attempt_move(Direction.DOWN, g, True)

    assert not result.moved and not result.died
    assert player.position == (5, 7)
    assert player.facing == Direction.UP
    assert g.snapshot() == before


def test_reversal_allowed_while_traversing(board):
    g, player = board
    player.attempt_move(Direction.RIGHT, g, False)

    result = player.attempt_move(Direction.LEFT, g, False)

    assert result.moved
    assert player.position == (5, 9)


def test_self_collision_reports_death_without_touching_grid(board):
    g, player = board
    for direction in (Direction.UP, Direction.UP, Direction.UP,
                      Direction.LEFT, Direction.DOWN):
        assert player.attempt_move(direction, g, True).moved
    before = g.snapshot()
    path_before = list(player.line_path)

    result = player.attempt_move(Direction.RIGHT, g, True)

    assert result.died
    assert not result.moved and not result.game_over
    assert player.position == (4, 7)
    assert player.facing == Direction.RIGHT
    assert player.line_path == path_before
    assert g.snapshot() == before


def test_reaching_border_completes_shape(board):
    g, player = board
    for _ in range(8):
        result = player.attempt_move(Direction.UP, g, True)
        assert result.moved and not result.completed_shape

    result = player.attempt_move(Direction.UP, g, True)

    assert result.moved and result.completed_shape
    assert result.captured_path == [(5, y) for y in range(8, 0, -1)]
    assert player.position == (5, 0)
    assert player.mode == PlayerMode.TRAVERSE
    assert player.line_path == []
    # Resolving the line is left to the caller
    assert g.count(Cell.LINE) == 8


def test_reaching_filled_completes_shape(board):
    g, player = board
    g.set_cell(5, 6, Cell.FILLED)
    player.attempt_move(Direction.UP, g, True)
    player.attempt_move(Direction.UP, g, True)

    result = player.attempt_move(Direction.UP, g, True)

    assert result.completed_shape
    assert result.captured_path == [(5, 8), (5, 7)]
    assert player.position == (5, 6)


def test_captured_path_is_a_copy(board):
    g, player = board
    player.attempt_move(Direction.UP, g, True)
    path = player.line_path
    g.set_cell(5, 7, Cell.FILLED)

    result = player.attempt_move(Direction.UP, g, True)

    assert result.captured_path == [(5, 8)]
    assert result.captured_path is not path


def test_interior_filled_is_not_walkable(board):
    g, player = board
    for y in range(5, 9):
        for x in range(1, 9):
            g.set_cell(x, y, Cell.FILLED)

    result = player.attempt_move(Direction.UP, g, True)

    assert not result.moved
    assert player.position == (5, 9)
    assert player.mode == PlayerMode.TRAVERSE


def test_frontier_filled_is_walkable(board):
    g, player = board
    g.set_cell(5, 8, Cell.FILLED)

    result = player.attempt_move(Direction.UP, g, False)

    assert result.moved
    assert player.position == (5, 8)
    assert player.mode == PlayerMode.TRAVERSE
