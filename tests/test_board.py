"""Unit tests for the Board grid model."""

from __future__ import annotations

import numpy as np
import pytest

from broadside.battleship import AttackResult, Board, CellState
from broadside.coord_utils import Direction, Point

H = Direction.HORIZONTAL
V = Direction.VERTICAL


def snapshot(board: Board) -> tuple:
    """Everything observable about a board, for before/after comparisons."""
    rows = board.catalog.rows()
    cols = board.catalog.cols()
    cells = tuple(board.cell(Point(r, c)) for r in range(rows) for c in range(cols))
    blocked = tuple(board.is_blocked(Point(r, c)) for r in range(rows) for c in range(cols))
    return cells, blocked, board.placed_ships


def test_place_ship_marks_exactly_its_footprint(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(5, 5, [3]))
    before = snapshot(board)
    assert board.place_ship(Point(1, 1), 0, V)

    footprint = {Point(1, 1), Point(2, 1), Point(3, 1)}
    for r in range(5):
        for c in range(5):
            cell = board.cell(Point(r, c))
            if Point(r, c) in footprint:
                assert cell.state is CellState.OCCUPIED and cell.ship_id == 0
            else:
                assert before[0][r * 5 + c] == cell
    assert board.placed_ships == {0}
    assert board.grid_rows() == [".....", ".A...", ".A...", ".A...", "....."]


@pytest.mark.parametrize(
    "origin, direction",
    [
        (Point(0, 2), H),  # 2 + 4 > 4 columns
        (Point(1, 0), V),  # 1 + 4 > 4 rows
        (Point(-1, 0), H),
        (Point(0, -1), V),
        (Point(4, 0), H),
    ],
)
def test_place_ship_outside_board_is_rejected(catalog_factory, board_factory, origin, direction) -> None:
    board = board_factory(catalog_factory(4, 4, [4]))
    before = snapshot(board)
    assert not board.place_ship(origin, 0, direction)
    assert snapshot(board) == before


def test_place_ship_rejects_overlap_duplicates_and_bad_ids(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(5, 5, [3, 2]))
    assert board.place_ship(Point(0, 0), 0, H)
    before = snapshot(board)

    assert not board.place_ship(Point(0, 2), 1, V)  # overlaps ship 0 at (0,2)
    assert not board.place_ship(Point(2, 0), 0, H)  # already placed
    assert not board.place_ship(Point(2, 0), 2, H)  # no such ship
    assert not board.place_ship(Point(2, 0), -1, H)
    assert snapshot(board) == before

    # Adjacency is allowed by the board itself
    assert board.place_ship(Point(1, 0), 1, H)


def test_unplace_round_trip_restores_board(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(5, 5, [3, 2]))
    assert board.place_ship(Point(4, 0), 1, H)
    before = snapshot(board)

    assert board.place_ship(Point(0, 4), 0, V)
    assert board.unplace_ship(Point(0, 4), 0, V)
    assert snapshot(board) == before


def test_unplace_requires_matching_footprint(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(5, 5, [3, 2]))
    assert board.place_ship(Point(0, 0), 0, H)
    before = snapshot(board)

    assert not board.unplace_ship(Point(0, 0), 0, V)  # wrong direction
    assert not board.unplace_ship(Point(0, 1), 0, H)  # shifted origin
    assert not board.unplace_ship(Point(0, 0), 1, H)  # ship 1 not placed
    assert not board.unplace_ship(Point(0, 4), 0, H)  # footprint leaves board
    assert snapshot(board) == before


def test_attack_scenario_sinks_ship_and_wins(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(5, 5, [3]))
    assert board.place_ship(Point(0, 0), 0, H)

    assert board.attack(Point(0, 0)) == AttackResult(valid=True, shot_hit=True)
    assert board.attack(Point(0, 1)) == AttackResult(valid=True, shot_hit=True)
    assert not board.all_ships_destroyed()
    assert board.attack(Point(0, 2)) == AttackResult(valid=True, shot_hit=True, ship_destroyed=True, ship_id=0)
    assert board.all_ships_destroyed()


def test_attack_miss_and_repeat(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(5, 5, [3]))
    assert board.place_ship(Point(0, 0), 0, H)

    assert board.attack(Point(3, 3)) == AttackResult(valid=True)
    after_first = snapshot(board)
    assert board.attack(Point(3, 3)) == AttackResult(valid=False)
    assert snapshot(board) == after_first

    board.attack(Point(0, 0))
    after_hit = snapshot(board)
    assert not board.attack(Point(0, 0)).valid
    assert snapshot(board) == after_hit


@pytest.mark.parametrize("point", [Point(-1, 0), Point(0, -1), Point(5, 0), Point(0, 5)])
def test_attack_out_of_bounds_is_invalid(catalog_factory, board_factory, point) -> None:
    board = board_factory(catalog_factory(5, 5, [3]))
    assert board.place_ship(Point(0, 0), 0, H)
    before = snapshot(board)
    assert board.attack(point) == AttackResult(valid=False)
    assert snapshot(board) == before


def test_destroyed_ship_stays_destroyed(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(5, 5, [2, 2]))
    assert board.place_ship(Point(0, 0), 0, H)
    assert board.place_ship(Point(2, 0), 1, H)
    board.attack(Point(0, 0))
    assert board.attack(Point(0, 1)).ship_destroyed
    assert board.placed_ships == {1}

    for point in (Point(0, 0), Point(0, 1)):
        result = board.attack(point)
        assert not result.valid and not result.shot_hit
    assert board.placed_ships == {1}
    assert not board.all_ships_destroyed()


def test_all_ships_destroyed_by_brute_force(standard_catalog, board_factory) -> None:
    board = board_factory(standard_catalog)
    for k in range(standard_catalog.n_ships()):
        assert board.place_ship(Point(k * 2, 0), k, H)

    destroyed = []
    for r in range(10):
        for c in range(10):
            result = board.attack(Point(r, c))
            assert result.valid
            if result.ship_destroyed:
                destroyed.append(result.ship_id)
    assert sorted(destroyed) == [0, 1, 2, 3, 4]
    assert board.all_ships_destroyed()


def test_block_unblock_is_exact_inverse(catalog_factory, board_factory, rng) -> None:
    board = board_factory(catalog_factory(6, 6, [4, 3]))
    assert board.place_ship(Point(0, 0), 0, H)
    board.attack(Point(5, 5))
    before = snapshot(board)

    board.block(rng)
    blocked = [Point(r, c) for r in range(6) for c in range(6) if board.is_blocked(Point(r, c))]
    # 36 squares, 4 occupied, 1 missed: half of the 31 free ones
    assert len(blocked) == 15
    assert all(board.cell(p).state is CellState.EMPTY for p in blocked)

    board.unblock()
    assert snapshot(board) == before


def test_blocked_squares_refuse_ships(catalog_factory, board_factory, rng) -> None:
    board = board_factory(catalog_factory(1, 4, [1]))
    board.block(rng)
    blocked = [Point(0, c) for c in range(4) if board.is_blocked(Point(0, c))]
    free = [Point(0, c) for c in range(4) if not board.is_blocked(Point(0, c))]
    assert len(blocked) == 2
    assert not board.place_ship(blocked[0], 0, H)
    assert board.place_ship(free[0], 0, H)


def test_shots_only_view_hides_ships(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(3, 4, [2]))
    assert board.place_ship(Point(1, 1), 0, H)
    board.attack(Point(1, 1))
    board.attack(Point(0, 0))

    assert board.grid_rows() == ["o...", ".XA.", "...."]
    assert board.grid_rows(shots_only=True) == ["o...", ".X..", "...."]


def test_observation_channels(catalog_factory, board_factory) -> None:
    board = board_factory(catalog_factory(3, 3, [2]))
    assert board.place_ship(Point(0, 0), 0, V)
    board.attack(Point(0, 0))
    board.attack(Point(2, 2))

    obs = board.observation()
    assert obs.shape == (2, 3, 3)
    assert obs.dtype == np.float32
    assert obs[0].sum() == 1.0 and obs[0, 0, 0] == 1.0
    assert obs[1].sum() == 1.0 and obs[1, 2, 2] == 1.0


def test_clear_resets_everything(catalog_factory, board_factory, rng) -> None:
    board = board_factory(catalog_factory(4, 4, [2]))
    empty = snapshot(board)
    assert board.place_ship(Point(0, 0), 0, H)
    board.attack(Point(3, 3))
    board.block(rng)
    board.clear()
    assert snapshot(board) == empty
    assert board.all_ships_destroyed()
