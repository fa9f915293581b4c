"""
Fleet placement helpers used by automated players.

    ok = place_backtracking(board, catalog)
    ok = place_with_blocking(board, catalog, rng)
    ok = place_randomized(board, catalog, rng)

Each returns True once every ship is on the board and False when no legal
arrangement was found. A failed search leaves the board as it found it.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from . import config as _cfg
from .battleship import Board
from .catalog import ShipCatalog
from .coord_utils import CARDINALS, Direction, Point, footprint

logger = logging.getLogger(__name__)


def place_backtracking(board: Board, catalog: ShipCatalog, ship_ids: Sequence[int] | None = None) -> bool:
    """
    Exhaustive depth-first search: for each ship try every horizontal origin
    in row-major order, then every vertical origin in column-major order,
    recursing on success and unplacing on a dead end.
    """
    ids = list(range(catalog.n_ships())) if ship_ids is None else list(ship_ids)
    ok = _place_from(board, catalog, ids, 0)
    logger.debug("place_backtracking() – ships=%d ok=%s", len(ids), ok)
    return ok


def _place_from(board: Board, catalog: ShipCatalog, ids: list[int], k: int) -> bool:
    if k == len(ids):
        return True
    ship_id = ids[k]
    rows, cols = catalog.rows(), catalog.cols()

    horizontal = (Point(r, c) for r in range(rows) for c in range(cols))
    vertical = (Point(r, c) for c in range(cols) for r in range(rows))
    for direction, origins in ((Direction.HORIZONTAL, horizontal), (Direction.VERTICAL, vertical)):
        for origin in origins:
            if not board.place_ship(origin, ship_id, direction):
                continue
            if _place_from(board, catalog, ids, k + 1):
                return True
            board.unplace_ship(origin, ship_id, direction)
    return False


def place_with_blocking(
    board: Board,
    catalog: ShipCatalog,
    rng: random.Random,
    attempts: int = _cfg.PLACEMENT_ATTEMPTS,
) -> bool:
    """Backtracking search over a randomly half-blocked board, retried *attempts* times."""
    for attempt in range(attempts):
        board.block(rng)
        ok = place_backtracking(board, catalog)
        board.unblock()
        if ok:
            logger.debug("place_with_blocking() – succeeded on attempt %d", attempt + 1)
            return True
    logger.info("place_with_blocking() – gave up after %d attempts", attempts)
    return False


def _touches(cells: list[Point], taken: set[Point]) -> bool:
    """True if any of *cells* overlaps or is orthogonally adjacent to *taken*."""
    for r, c in cells:
        if (r, c) in taken:
            return True
        for dr, dc in CARDINALS:
            if (r + dr, c + dc) in taken:
                return True
    return False


def _random_attempt(board: Board, catalog: ShipCatalog, rng: random.Random, draws: int) -> bool:
    """Drop every ship at a random spot keeping them apart; undo everything on failure."""
    taken: set[Point] = set()
    placed: list[tuple[Point, int, Direction]] = []
    for ship_id in range(catalog.n_ships()):
        length = catalog.ship_length(ship_id)
        for _ in range(draws):
            origin = catalog.random_point(rng)
            direction = Direction(rng.randrange(2))
            cells = list(footprint(origin, length, direction))
            if not all(catalog.is_valid(p) for p in cells) or _touches(cells, taken):
                continue
            if board.place_ship(origin, ship_id, direction):
                taken.update(cells)
                placed.append((origin, ship_id, direction))
                break
        else:
            for origin, placed_id, direction in reversed(placed):
                board.unplace_ship(origin, placed_id, direction)
            return False
    return True


def place_randomized(
    board: Board,
    catalog: ShipCatalog,
    rng: random.Random,
    attempts: int = _cfg.PLACEMENT_ATTEMPTS,
) -> bool:
    """
    Spread the fleet out at random, keeping ships from touching each other.
    If no attempt succeeds the board is cleared and the exhaustive search
    takes over.
    """
    for attempt in range(attempts):
        if _random_attempt(board, catalog, rng, attempts):
            logger.debug("place_randomized() – succeeded on attempt %d", attempt + 1)
            return True
    logger.info("place_randomized() – falling back to backtracking after %d attempts", attempts)
    board.clear()
    return place_backtracking(board, catalog)
