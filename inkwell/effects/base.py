# -*- coding: utf-8 -*-
"""
Card effect base classes
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..card import CardDefinition
    from ..engine import RunEngine
    from ..player import PlayerState


@dataclass
class EffectContext:
    """
    Everything an effect may touch while a card resolves.

    ``drawn`` and ``gained`` collect the cards that effects moved into the
    hand or added to the player's collection, so the engine can report them.
    """
    engine: 'RunEngine'
    state: 'PlayerState'
    card: 'CardDefinition'
    drawn: List[str] = field(default_factory=list)
    gained: List[str] = field(default_factory=list)


class CardEffect(ABC):
    """
    Abstract card effect

    A card's ``on_play`` and its cohesion bonus are both CardEffect
    instances; the registry builds them from declarative steps.
    """

    @abstractmethod
    def apply(self, ctx: EffectContext) -> None:
        """
        Apply the effect to ``ctx.state``
        """
        pass

    def referenced_cards(self) -> tuple[str, ...]:
        """Card ids this effect can add to a player's collection"""
        return ()
