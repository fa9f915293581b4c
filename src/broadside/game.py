"""Game utilities re-exporting core classes and functions for external import."""

from __future__ import annotations

from .battleship import AttackResult, Board, Cell, CellState
from .bot_logic import HuntStrategy, Mode, TargetingState
from .catalog import ShipCatalog, ShipSpec
from .coord_utils import Direction, Point
from .match import play_match
from .placement import place_backtracking, place_randomized, place_with_blocking
from .players import AwfulPlayer, GoodPlayer, MediocrePlayer, Player, create_player

__all__ = [
    "AttackResult",
    "AwfulPlayer",
    "Board",
    "Cell",
    "CellState",
    "Direction",
    "GoodPlayer",
    "HuntStrategy",
    "MediocrePlayer",
    "Mode",
    "Player",
    "Point",
    "ShipCatalog",
    "ShipSpec",
    "TargetingState",
    "create_player",
    "place_backtracking",
    "place_randomized",
    "place_with_blocking",
    "play_match",
]
