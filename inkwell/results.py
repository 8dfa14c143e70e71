# -*- coding: utf-8 -*-
"""
Operation result module
Every engine operation reports its outcome through one of these records
instead of raising into the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .card import HandCard
    from .exceptions import GameError


class ActionStatus(Enum):
    """Outcome of an engine operation"""

    OK = "ok"
    UNKNOWN_PLAYER = "unknown_player"
    INVALID_INDEX = "invalid_index"
    UNKNOWN_CARD = "unknown_card"
    INSUFFICIENT_RESOURCES = "insufficient_resources"
    ENGINE_ERROR = "engine_error"  # configuration or card table failures


@dataclass
class ActionResult:
    """Base operation result"""

    status: ActionStatus = ActionStatus.OK
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is ActionStatus.OK

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def from_error(cls, error: GameError, **fields: Any) -> ActionResult:
        """Build a failed result of this class from a run error"""
        if error.status is ActionStatus.OK:
            raise ValueError(f"{type(error).__name__} carries no failure status")
        return cls(
            status=error.status,
            message=error.message,
            details=dict(error.details),
            **fields,
        )


@dataclass
class DrawResult(ActionResult):
    """Draw outcome

    Attributes:
        requested: number of cards asked for
        drawn: ids moved into the hand, in draw order
        exhausted: deck and discard ran dry before the request was met
        reshuffles: times the discard pile was shuffled back mid-draw
    """

    requested: int = 0
    drawn: list[str] = field(default_factory=list)
    exhausted: bool = False
    reshuffles: int = 0

    @property
    def count(self) -> int:
        return len(self.drawn)


@dataclass
class PlayResult(ActionResult):
    """Card play outcome"""

    card_id: Optional[str] = None
    cohesion_triggered: bool = False
    gained: list[str] = field(default_factory=list)  # cards added by effects


@dataclass
class SnapshotResult(ActionResult):
    """Hand snapshot outcome"""

    hand: tuple[HandCard, ...] = ()

    def __iter__(self):
        return iter(self.hand)

    def __len__(self) -> int:
        return len(self.hand)
