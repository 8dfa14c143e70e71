"""Basic card effects
Resource gain/loss, drawing and gaining cards.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..card import Resource
from .base import CardEffect, EffectContext


@dataclass(frozen=True)
class GainResource(CardEffect):
    """Add ``amount`` to one resource"""

    resource: Resource
    amount: int = 1

    def apply(self, ctx: EffectContext) -> None:
        ctx.state.gain(self.resource, self.amount)


@dataclass(frozen=True)
class LoseResource(CardEffect):
    """Remove up to ``amount`` from one resource, never going below zero"""

    resource: Resource
    amount: int = 1

    def apply(self, ctx: EffectContext) -> None:
        ctx.state.lose(self.resource, self.amount)


@dataclass(frozen=True)
class GainPerHandCard(CardEffect):
    """Add ``per_card`` of a resource for every card currently in hand"""

    resource: Resource
    per_card: int = 1

    def apply(self, ctx: EffectContext) -> None:
        ctx.state.gain(self.resource, len(ctx.state.hand) * self.per_card)


@dataclass(frozen=True)
class DrawCards(CardEffect):
    """Draw through the engine so reshuffles and events behave as usual"""

    count: int = 1

    def apply(self, ctx: EffectContext) -> None:
        result = ctx.engine.draw_for(ctx.state, self.count)
        ctx.drawn.extend(result.drawn)


@dataclass(frozen=True)
class GainCard(CardEffect):
    """Add a card to the discard pile at no cost (flaws, mostly)"""

    card_id: str

    def apply(self, ctx: EffectContext) -> None:
        ctx.engine.gain_card_for(ctx.state, self.card_id)
        ctx.gained.append(self.card_id)

    def referenced_cards(self) -> tuple[str, ...]:
        return (self.card_id,)


@dataclass(frozen=True)
class EffectSequence(CardEffect):
    """Apply several effects in order"""

    effects: tuple[CardEffect, ...] = ()

    def apply(self, ctx: EffectContext) -> None:
        for effect in self.effects:
            effect.apply(ctx)

    def referenced_cards(self) -> tuple[str, ...]:
        refs: list[str] = []
        for effect in self.effects:
            refs.extend(effect.referenced_cards())
        return tuple(refs)

    def __len__(self) -> int:
        return len(self.effects)
