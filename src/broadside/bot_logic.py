from __future__ import annotations

import logging
import random
from enum import Enum, auto

from . import config as _cfg
from .catalog import ShipCatalog
from .coord_utils import CARDINALS, Point, format_coord

logger = logging.getLogger(__name__)


class Mode(Enum):
    HUNT = auto()  # no live hit to chase
    TARGET = auto()  # chasing a confirmed hit


class HuntStrategy(Enum):
    UNIFORM = auto()  # any undiscovered square, uniformly at random
    STRIPED = auto()  # diagonal stripes spaced by the shortest surviving ship


class Seeding(Enum):
    RAYS = auto()  # every square out to the radius in all four directions
    NEAREST = auto()  # the closest undiscovered square in each direction


class PopOrder(Enum):
    LIFO = auto()
    RANDOM = auto()


class TargetingState:
    """
    Hunt / target attack selection against one opponent board.

    1. Hunt: pick squares either uniformly at random or along a striped
       pattern whose stride is the length of the shortest ship still afloat,
       so every placement of that ship crosses at least one scanned square.
    2. Target: after a hit that did not sink anything, queue candidate
       squares around it in the four cardinal directions and work through
       them. Further hits extend the queue along the established axis.
       A sinking (or running out of candidates) returns to Hunt.
    """

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        catalog: ShipCatalog,
        rng: random.Random,
        *,
        hunt: HuntStrategy = HuntStrategy.STRIPED,
        seeding: Seeding = Seeding.NEAREST,
        pop: PopOrder = PopOrder.LIFO,
        extend_axis: bool = True,
        queue_limit: int = _cfg.QUEUE_LIMIT,
    ) -> None:
        self.catalog = catalog
        self._rng = rng
        self.hunt = hunt
        self.seeding = seeding
        self.pop = pop
        self.extend_axis = extend_axis
        self.queue_limit = queue_limit

        # Row-major ordered set of squares we have never fired at
        self.undiscovered: dict[Point, None] = {
            Point(r, c): None for r in range(catalog.rows()) for c in range(catalog.cols())
        }
        self.mode = Mode.HUNT
        self.candidates: list[Point] = []
        self.anchor: Point | None = None  # first hit of the ship being chased
        self.hunt_cursor = Point(0, 0)

        self.destroyed: set[int] = set()
        self.shortest_remaining = self._shortest_alive()
        longest = max((catalog.ship_length(i) for i in range(catalog.n_ships())), default=1)
        # A ship of length L spans at most L-1 squares beyond any one of its hits
        self.radius = max(longest - 1, 1)

    # ------------------------------------------------------------------ #
    # Helper utilities
    # ------------------------------------------------------------------ #
    def _shortest_alive(self) -> int:
        lengths = [
            self.catalog.ship_length(i) for i in range(self.catalog.n_ships()) if i not in self.destroyed
        ]
        return min(lengths, default=1)

    def _legal(self, point: Point) -> bool:
        """Inside board and never fired before."""
        return point in self.undiscovered

    def _first_undiscovered(self) -> Point:
        return next(iter(self.undiscovered))

    # ------------------------------------------------------------------ #
    # Shot selection
    # ------------------------------------------------------------------ #
    def recommend_attack(self) -> Point:
        """Return a square this player has never fired at."""
        if self.mode is Mode.TARGET:
            shot = self._next_candidate()
            if shot is not None:
                return shot
            logger.debug("recommend_attack() – candidates exhausted, back to hunt")
            self.mode = Mode.HUNT
        return self._hunt_shot()

    def _hunt_shot(self) -> Point:
        if self.hunt is HuntStrategy.UNIFORM:
            return self._rng.choice(list(self.undiscovered))
        return self._striped_shot()

    def _striped_shot(self) -> Point:
        """
        Advance the cursor by the current stride along the row; on wrapping,
        start the next row at the first column with (col + row) % stride == 0
        so consecutive rows are diagonally staggered.
        """
        stride = self.shortest_remaining
        r, c = self.hunt_cursor
        while Point(r, c) not in self.undiscovered:
            c += stride
            if c >= self.catalog.cols():
                r += 1
                if r >= self.catalog.rows():
                    self.hunt_cursor = Point(r, c)
                    return self._first_undiscovered()
                c = 0
                while (c + r) % stride != 0:
                    c += 1
        self.hunt_cursor = Point(r, c)
        return self.hunt_cursor

    def _next_candidate(self) -> Point | None:
        """Drop stale candidates and return the next usable one without consuming it."""
        if len(self.candidates) > self.queue_limit:
            logger.debug("recommend_attack() – candidate queue over %d, abandoning chase", self.queue_limit)
            self.candidates.clear()
            return None
        while self.candidates:
            if self.pop is PopOrder.LIFO:
                idx = len(self.candidates) - 1
            else:
                idx = self._rng.randrange(len(self.candidates))
            if self._legal(self.candidates[idx]):
                return self.candidates[idx]
            del self.candidates[idx]
        return None

    # ------------------------------------------------------------------ #
    # Result handling
    # ------------------------------------------------------------------ #
    def record_attack_result(
        self,
        point: Point,
        valid_shot: bool,
        shot_hit: bool,
        ship_destroyed: bool,
        ship_id: int | None,
    ) -> None:
        """Fold the outcome of firing at *point* into the hunt / target state."""
        if point not in self.undiscovered:
            raise ValueError(f"{format_coord(point)} was already recorded")
        del self.undiscovered[point]

        if ship_destroyed and ship_id is not None:
            self.destroyed.add(ship_id)
            self.shortest_remaining = self._shortest_alive()

        if self.mode is Mode.HUNT:
            if shot_hit and not ship_destroyed:
                self.mode = Mode.TARGET
                self.anchor = point
                self._seed(point)
                logger.debug("record_attack_result() – hit at %s, targeting", format_coord(point))
            return

        if ship_destroyed:
            logger.debug("record_attack_result() – ship %s destroyed, back to hunt", ship_id)
            self._reset_cluster_state()
            return

        if shot_hit and self.extend_axis:
            self._extend(point)

        if not self._has_live_candidate():
            # Adjacent ships can leave us with hits but nothing left to try
            self._reset_cluster_state()

    def record_attack_by_opponent(self, point: Point) -> None:
        """The opponent's shots don't influence our targeting."""

    # ------------------------------------------------------------------ #
    # Target-mode helpers
    # ------------------------------------------------------------------ #
    def _seed(self, hit: Point) -> None:
        """Queue candidates around a fresh hit in all four cardinal directions."""
        for dr, dc in CARDINALS:
            for step in range(1, self.radius + 1):
                cand = Point(hit.r + dr * step, hit.c + dc * step)
                if not self.catalog.is_valid(cand):
                    break
                if not self._legal(cand):
                    continue
                self.candidates.append(cand)
                if self.seeding is Seeding.NEAREST:
                    break

    def _extend(self, hit: Point) -> None:
        """Push the next square past *hit* along the anchor → hit axis, if within reach."""
        assert self.anchor is not None  # for type-checkers
        dr = (hit.r > self.anchor.r) - (hit.r < self.anchor.r)
        dc = (hit.c > self.anchor.c) - (hit.c < self.anchor.c)
        if (dr == 0) == (dc == 0):
            return  # not on a cardinal line through the anchor
        nxt = Point(hit.r + dr, hit.c + dc)
        if abs(nxt.r - self.anchor.r) + abs(nxt.c - self.anchor.c) > self.radius:
            return
        if self._legal(nxt):
            self.candidates.append(nxt)

    def _has_live_candidate(self) -> bool:
        return any(self._legal(p) for p in self.candidates)

    def _reset_cluster_state(self) -> None:
        """Clear all transient state after a ship is resolved or abandoned."""
        self.mode = Mode.HUNT
        self.anchor = None
        self.candidates.clear()
