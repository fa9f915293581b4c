"""Automated players.

Every player offers the same capabilities to the match runner:
``place_ships``, ``recommend_attack``, ``record_attack_result``,
``record_attack_by_opponent`` and ``is_human``. The implementations share no
state beyond their name and the catalog they were built for.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol

from .battleship import Board
from .bot_logic import HuntStrategy, PopOrder, Seeding, TargetingState
from .catalog import ShipCatalog
from .coord_utils import Direction, Point
from .placement import place_randomized, place_with_blocking

logger = logging.getLogger(__name__)


class Player(Protocol):
    name: str
    catalog: ShipCatalog

    def is_human(self) -> bool: ...

    def place_ships(self, board: Board) -> bool: ...

    def recommend_attack(self) -> Point: ...

    def record_attack_result(
        self, point: Point, valid_shot: bool, shot_hit: bool, ship_destroyed: bool, ship_id: int | None
    ) -> None: ...

    def record_attack_by_opponent(self, point: Point) -> None: ...


class AwfulPlayer:
    """Clusters its fleet in the top-left corner and sweeps the board backwards."""

    def __init__(self, name: str, catalog: ShipCatalog) -> None:
        self.name = name
        self.catalog = catalog
        self._last = Point(0, 0)

    def is_human(self) -> bool:
        return False

    def place_ships(self, board: Board) -> bool:
        for k in range(self.catalog.n_ships()):
            if not board.place_ship(Point(k, 0), k, Direction.HORIZONTAL):
                return False
        return True

    def recommend_attack(self) -> Point:
        r, c = self._last
        if c > 0:
            c -= 1
        else:
            c = self.catalog.cols() - 1
            r = r - 1 if r > 0 else self.catalog.rows() - 1
        self._last = Point(r, c)
        return self._last

    def record_attack_result(
        self, point: Point, valid_shot: bool, shot_hit: bool, ship_destroyed: bool, ship_id: int | None
    ) -> None:
        pass

    def record_attack_by_opponent(self, point: Point) -> None:
        pass


class MediocrePlayer:
    """
    Places ships by backtracking over a half-blocked board, hunts uniformly
    at random and, after a hit, tries the squares around it in random order.
    """

    def __init__(self, name: str, catalog: ShipCatalog, rng: random.Random) -> None:
        self.name = name
        self.catalog = catalog
        self._rng = rng
        self.targeting = TargetingState(
            catalog,
            rng,
            hunt=HuntStrategy.UNIFORM,
            seeding=Seeding.RAYS,
            pop=PopOrder.RANDOM,
            extend_axis=False,
        )

    def is_human(self) -> bool:
        return False

    def place_ships(self, board: Board) -> bool:
        return place_with_blocking(board, self.catalog, self._rng)

    def recommend_attack(self) -> Point:
        return self.targeting.recommend_attack()

    def record_attack_result(
        self, point: Point, valid_shot: bool, shot_hit: bool, ship_destroyed: bool, ship_id: int | None
    ) -> None:
        self.targeting.record_attack_result(point, valid_shot, shot_hit, ship_destroyed, ship_id)

    def record_attack_by_opponent(self, point: Point) -> None:
        self.targeting.record_attack_by_opponent(point)


class GoodPlayer:
    """
    Spreads its fleet out at random (falling back to exhaustive search),
    hunts along stripes sized by the shortest surviving ship and chases hits
    along their axis.
    """

    def __init__(self, name: str, catalog: ShipCatalog, rng: random.Random) -> None:
        self.name = name
        self.catalog = catalog
        self._rng = rng
        self.targeting = TargetingState(catalog, rng)

    def is_human(self) -> bool:
        return False

    def place_ships(self, board: Board) -> bool:
        return place_randomized(board, self.catalog, self._rng)

    def recommend_attack(self) -> Point:
        return self.targeting.recommend_attack()

    def record_attack_result(
        self, point: Point, valid_shot: bool, shot_hit: bool, ship_destroyed: bool, ship_id: int | None
    ) -> None:
        self.targeting.record_attack_result(point, valid_shot, shot_hit, ship_destroyed, ship_id)

    def record_attack_by_opponent(self, point: Point) -> None:
        self.targeting.record_attack_by_opponent(point)


PLAYER_KINDS = ("awful", "mediocre", "good")


def create_player(kind: str, name: str, catalog: ShipCatalog, rng: random.Random) -> Player | None:
    """Build an automated player by kind; None for unknown kinds."""
    if kind == "awful":
        return AwfulPlayer(name, catalog)
    if kind == "mediocre":
        return MediocrePlayer(name, catalog, rng)
    if kind == "good":
        return GoodPlayer(name, catalog, rng)
    logger.warning("Unknown player kind %r", kind)
    return None
