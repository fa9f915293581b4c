"""Lightweight event model used by the match runner to decouple game flow from output.

The goal is to emit strongly-typed events that an external front end can
render and other subscribers (e.g. logging or statistics) can consume
without parsing free-text strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict


class Category(Enum):
    """High-level event categories."""

    TURN = auto()  # per-turn lifecycle (shot, wasted shot)
    SYSTEM = auto()  # placement failure, match end


@dataclass(slots=True)
class Event:
    """Immutable event emitted by play_match."""

    category: Category
    type: str  # finer-grained identifier, e.g. "shot", "wasted", "end"
    payload: Dict[str, Any]


EventSink = Callable[[Event], None]


class EventRouter:
    """Dispatch events to per-type handlers; unhandled types are dropped."""

    def __init__(self) -> None:
        self.handlers: Dict[str, EventSink] = {}

    def register_handler(self, event_type: str, handler: EventSink) -> None:
        self.handlers[event_type] = handler

    def route_event(self, event: Event) -> None:
        handler = self.handlers.get(event.type)
        if handler is not None:
            handler(event)

    __call__ = route_event
