"""Board dimensions and ship roster shared by both players of a match.

A catalog is built once at setup time and is read-only afterwards. Ship ids
are dense integers assigned in the order ships are added.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from . import config as _cfg
from .coord_utils import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShipSpec:
    length: int
    symbol: str
    name: str


class ShipCatalog:
    """Rows, columns and the ship roster for one game."""

    def __init__(self, rows: int, cols: int) -> None:
        if not 1 <= rows <= _cfg.MAXROWS:
            raise ValueError(f"Number of rows must be >= 1 and <= {_cfg.MAXROWS}")
        if not 1 <= cols <= _cfg.MAXCOLS:
            raise ValueError(f"Number of columns must be >= 1 and <= {_cfg.MAXCOLS}")
        self._rows = rows
        self._cols = cols
        self._ships: list[ShipSpec] = []

    @classmethod
    def standard(cls, rows: int = 10, cols: int = 10) -> "ShipCatalog":
        """Catalog holding the standard five-ship roster from config."""
        catalog = cls(rows, cols)
        for name, length, symbol in _cfg.SHIPS:
            if not catalog.add_ship(length, symbol, name):
                raise ValueError(f"Standard roster does not fit a {rows}x{cols} board")
        return catalog

    # ------------------------------------------------------------------ #
    # Setup
    # ------------------------------------------------------------------ #
    def add_ship(self, length: int, symbol: str, name: str) -> bool:
        """Append a ship to the roster; return False (and log why) if rejected."""
        if length < 1:
            logger.warning("Bad ship length %d; it must be >= 1", length)
            return False
        if length > self._rows and length > self._cols:
            logger.warning("Bad ship length %d; it won't fit on the board", length)
            return False
        if len(symbol) != 1 or not symbol.isascii() or not symbol.isprintable() or symbol.isspace():
            logger.warning("Unprintable symbol %r must not be used as a ship symbol", symbol)
            return False
        if symbol in _cfg.RESERVED_MARKS:
            logger.warning("Character %s must not be used as a ship symbol", symbol)
            return False
        if any(ship.symbol == symbol for ship in self._ships):
            logger.warning("Ship symbol %s must not be used for more than one ship", symbol)
            return False
        if sum(ship.length for ship in self._ships) + length > self._rows * self._cols:
            logger.warning("Board is too small to fit all ships")
            return False
        self._ships.append(ShipSpec(length, symbol, name))
        logger.debug("add_ship() – id=%d name=%s length=%d", len(self._ships) - 1, name, length)
        return True

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    def n_ships(self) -> int:
        return len(self._ships)

    def ship_length(self, ship_id: int) -> int:
        return self._ships[ship_id].length

    def ship_symbol(self, ship_id: int) -> str:
        return self._ships[ship_id].symbol

    def ship_name(self, ship_id: int) -> str:
        return self._ships[ship_id].name

    def is_valid(self, point: Point) -> bool:
        r, c = point
        return 0 <= r < self._rows and 0 <= c < self._cols

    def random_point(self, rng: random.Random) -> Point:
        """Uniformly random in-bounds point drawn from the caller's *rng*."""
        return Point(rng.randrange(self._rows), rng.randrange(self._cols))
