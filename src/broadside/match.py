"""Two-player match loop.

Alternates shots between two players on their opponents' boards until one
fleet is gone. The loop never prints; it reports progress through
``Event`` objects handed to an optional callback, and through logging.

TURN events
-----------
shot     {"attacker", "coord", "result": "hit"|"miss", "sunk": ship name or None}
wasted   {"attacker", "coord"} – the attack was out of bounds or repeated

SYSTEM events
-------------
placement_failed  {"player"}
end               {"winner", "shots"}
"""

from __future__ import annotations

import logging
import random

from .battleship import Board
from .catalog import ShipCatalog
from .coord_utils import format_coord
from .events import Category, Event, EventSink
from .players import Player

logger = logging.getLogger(__name__)


def _emit(on_event: EventSink | None, category: Category, type_: str, **payload) -> None:
    if on_event is not None:
        on_event(Event(category, type_, payload))


def _take_turn(
    attacker: Player,
    defender: Player,
    target: Board,
    on_event: EventSink | None,
) -> bool:
    """Let *attacker* fire once at *target*; return True if that ended the match."""
    point = attacker.recommend_attack()
    result = target.attack(point)
    coord = format_coord(point)
    if not result.valid:
        logger.debug("%s wasted a shot at %s", attacker.name, coord)
        _emit(on_event, Category.TURN, "wasted", attacker=attacker.name, coord=coord)
    else:
        sunk = target.catalog.ship_name(result.ship_id) if result.ship_destroyed else None
        logger.debug(
            "%s attacked %s – %s%s",
            attacker.name,
            coord,
            "hit" if result.shot_hit else "miss",
            f", destroyed the {sunk}" if sunk else "",
        )
        _emit(
            on_event,
            Category.TURN,
            "shot",
            attacker=attacker.name,
            coord=coord,
            result="hit" if result.shot_hit else "miss",
            sunk=sunk,
        )

    if target.all_ships_destroyed():
        return True

    attacker.record_attack_result(point, result.valid, result.shot_hit, result.ship_destroyed, result.ship_id)
    defender.record_attack_by_opponent(point)
    return False


def play_match(
    p1: Player,
    p2: Player,
    catalog: ShipCatalog,
    *,
    rng: random.Random | None = None,
    on_event: EventSink | None = None,
) -> Player | None:
    """
    Run a full match and return the winner, or None if either player failed
    to place their fleet (or the catalog has no ships).
    """
    if catalog.n_ships() == 0:
        return None
    rng = rng if rng is not None else random.Random()
    board_p1 = Board(catalog, rng=rng)
    board_p2 = Board(catalog, rng=rng)

    for player, board in ((p1, board_p1), (p2, board_p2)):
        if not player.place_ships(board):
            logger.info("%s could not place their ships", player.name)
            _emit(on_event, Category.SYSTEM, "placement_failed", player=player.name)
            return None

    logger.info("Match started: %s vs %s", p1.name, p2.name)
    shots = 0
    turns = ((p1, p2, board_p2), (p2, p1, board_p1))
    while True:
        for attacker, defender, target in turns:
            shots += 1
            if _take_turn(attacker, defender, target, on_event):
                logger.info("%s wins after %d shots", attacker.name, shots)
                _emit(on_event, Category.SYSTEM, "end", winner=attacker.name, shots=shots)
                return attacker
