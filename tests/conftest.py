import logging
import random
import sys
from pathlib import Path

import pytest

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from broadside.battleship import Board
from broadside.catalog import ShipCatalog

# Suppress INFO & DEBUG logs from the engine during tests
logging.basicConfig(level=logging.WARNING)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so every test run sees the same draws."""
    return random.Random(1234)


@pytest.fixture
def catalog_factory():
    """Factory building a catalog from (rows, cols, [lengths])."""

    def _factory(rows: int, cols: int, lengths: list[int]) -> ShipCatalog:
        catalog = ShipCatalog(rows, cols)
        symbols = "ABCDEFGHIJ"
        for i, length in enumerate(lengths):
            assert catalog.add_ship(length, symbols[i], f"ship{i}")
        return catalog

    return _factory


@pytest.fixture
def standard_catalog() -> ShipCatalog:
    return ShipCatalog.standard()


@pytest.fixture
def board_factory(rng):
    """Factory returning an empty Board for a catalog, sharing the seeded rng."""

    def _factory(catalog: ShipCatalog) -> Board:
        return Board(catalog, rng=rng)

    return _factory
