"""
battleship.py

Contains the authoritative grid model for one player's fleet, including:
 - Cell / CellState describing what occupies a single square
 - AttackResult, the outcome of firing at a square
 - Board, which validates placement, resolves attacks and detects victory

"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from . import config as _cfg
from .catalog import ShipCatalog
from .coord_utils import Direction, Point, footprint, format_coord

logger = logging.getLogger(__name__)

NO_SHIP = -1


class CellState(IntEnum):
    EMPTY = 0
    OCCUPIED = 1
    HIT = 2
    MISS = 3


@dataclass(frozen=True)
class Cell:
    state: CellState
    ship_id: int | None = None


@dataclass(frozen=True)
class AttackResult:
    valid: bool
    shot_hit: bool = False
    ship_destroyed: bool = False
    ship_id: int | None = None


class Board:
    """
    Represents a single player's board with hidden ships.
    We store:
      - self._state: CellState of every square (EMPTY, OCCUPIED, HIT, MISS)
      - self._owner: ship id occupying each square, NO_SHIP elsewhere; kept
        on HIT squares so the full view can still be reconstructed
      - self._blocked: temporary placement-avoidance overlay, never touches
        _state
      - self._placed: ids of ships currently on the board and not destroyed,
        mapped to the number of their squares not yet hit

    In a full two-player game each player has their own Board instance and
    the orchestrator calls opponent_board.attack(...) on their behalf.
    """

    def __init__(self, catalog: ShipCatalog, *, rng: random.Random | None = None) -> None:
        """Initialise an empty board sized by *catalog* with no ships placed."""
        self.catalog = catalog
        self._rng = rng if rng is not None else random.Random()
        shape = (catalog.rows(), catalog.cols())
        self._state = np.full(shape, CellState.EMPTY, dtype=np.int8)
        self._owner = np.full(shape, NO_SHIP, dtype=np.int16)
        self._blocked = np.zeros(shape, dtype=bool)
        self._placed: dict[int, int] = {}

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def clear(self) -> None:
        """Remove every ship, shot and block mark."""
        self._state.fill(CellState.EMPTY)
        self._owner.fill(NO_SHIP)
        self._blocked.fill(False)
        self._placed.clear()

    def block(self, rng: random.Random | None = None) -> None:
        """Block a random half of the empty, unblocked squares."""
        rng = rng if rng is not None else self._rng
        free = [
            Point(int(r), int(c))
            for r, c in zip(*np.nonzero((self._state == CellState.EMPTY) & ~self._blocked))
        ]
        chosen = rng.sample(free, len(free) // 2)
        for r, c in chosen:
            self._blocked[r, c] = True
        logger.debug("block() – blocked=%d of free=%d", len(chosen), len(free))

    def unblock(self) -> None:
        """Lift every block mark placed by block()."""
        self._blocked.fill(False)

    # ------------------------------------------------------------------ #
    # Placement
    # ------------------------------------------------------------------ #
    def _fits(self, origin: Point, length: int, direction: Direction) -> bool:
        """Return `True` if the whole footprint lies on the board."""
        r, c = origin
        if direction == Direction.HORIZONTAL:
            return 0 <= r < self.catalog.rows() and c >= 0 and c + length <= self.catalog.cols()
        return 0 <= c < self.catalog.cols() and r >= 0 and r + length <= self.catalog.rows()

    def _valid_id(self, ship_id: int) -> bool:
        return 0 <= ship_id < self.catalog.n_ships()

    def place_ship(self, origin: Point, ship_id: int, direction: Direction) -> bool:
        """Put ship *ship_id* on the board; return False and change nothing if it can't go there."""
        if not self._valid_id(ship_id) or ship_id in self._placed:
            return False
        length = self.catalog.ship_length(ship_id)
        if not self._fits(origin, length, direction):
            return False
        cells = list(footprint(origin, length, direction))
        for r, c in cells:
            if self._state[r, c] != CellState.EMPTY or self._blocked[r, c]:
                return False

        for r, c in cells:
            self._state[r, c] = CellState.OCCUPIED
            self._owner[r, c] = ship_id
        self._placed[ship_id] = length
        logger.debug(
            "place_ship() – id=%d origin=%s dir=%s", ship_id, format_coord(origin), direction.name
        )
        return True

    def unplace_ship(self, origin: Point, ship_id: int, direction: Direction) -> bool:
        """Take ship *ship_id* back off the board; the stated footprint must match exactly."""
        if not self._valid_id(ship_id) or ship_id not in self._placed:
            return False
        length = self.catalog.ship_length(ship_id)
        if not self._fits(origin, length, direction):
            return False
        cells = list(footprint(origin, length, direction))
        for r, c in cells:
            if self._state[r, c] != CellState.OCCUPIED or self._owner[r, c] != ship_id:
                return False

        for r, c in cells:
            self._state[r, c] = CellState.EMPTY
            self._owner[r, c] = NO_SHIP
        del self._placed[ship_id]
        logger.debug(
            "unplace_ship() – id=%d origin=%s dir=%s", ship_id, format_coord(origin), direction.name
        )
        return True

    # ------------------------------------------------------------------ #
    # Combat
    # ------------------------------------------------------------------ #
    def attack(self, point: Point) -> AttackResult:
        """Process a shot at *point* and report what it did."""
        if not self.catalog.is_valid(point):
            return AttackResult(valid=False)
        r, c = point
        state = self._state[r, c]
        if state in (CellState.HIT, CellState.MISS):
            return AttackResult(valid=False)

        if state == CellState.EMPTY:
            self._state[r, c] = CellState.MISS
            logger.debug("attack() – point=%s result=miss", format_coord(point))
            return AttackResult(valid=True)

        self._state[r, c] = CellState.HIT
        ship_id = int(self._owner[r, c])
        self._placed[ship_id] -= 1
        if self._placed[ship_id] > 0:
            logger.debug("attack() – point=%s result=hit", format_coord(point))
            return AttackResult(valid=True, shot_hit=True)

        del self._placed[ship_id]
        logger.debug("attack() – point=%s result=destroyed id=%d", format_coord(point), ship_id)
        return AttackResult(valid=True, shot_hit=True, ship_destroyed=True, ship_id=ship_id)

    def all_ships_destroyed(self) -> bool:
        """Return True if no ship is left afloat."""
        return not self._placed

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    @property
    def placed_ships(self) -> frozenset[int]:
        return frozenset(self._placed)

    def cell(self, point: Point) -> Cell:
        r, c = point
        state = CellState(int(self._state[r, c]))
        owner = int(self._owner[r, c])
        return Cell(state, owner if owner != NO_SHIP else None)

    def is_blocked(self, point: Point) -> bool:
        r, c = point
        return bool(self._blocked[r, c])

    def grid_rows(self, shots_only: bool = False) -> list[str]:
        """Board → one string per row; ship symbols hidden when *shots_only*."""
        rows: list[str] = []
        for r in range(self.catalog.rows()):
            marks = []
            for c in range(self.catalog.cols()):
                state = self._state[r, c]
                if state == CellState.HIT:
                    marks.append(_cfg.HIT_MARK)
                elif state == CellState.MISS:
                    marks.append(_cfg.MISS_MARK)
                elif state == CellState.OCCUPIED and not shots_only:
                    marks.append(self.catalog.ship_symbol(int(self._owner[r, c])))
                else:
                    marks.append(_cfg.EMPTY_MARK)
            rows.append("".join(marks))
        return rows

    def observation(self) -> np.ndarray:
        """
        2-channel (2, rows, cols) float32 tensor of the shots fired so far:
          chan 0 = 1.0 where a shot hit
          chan 1 = 1.0 where a shot missed
        """
        obs = np.zeros((2, self.catalog.rows(), self.catalog.cols()), dtype=np.float32)
        obs[0][self._state == CellState.HIT] = 1.0
        obs[1][self._state == CellState.MISS] = 1.0
        return obs
