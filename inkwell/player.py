# -*- coding: utf-8 -*-
"""
Player state module
Zones (deck, hand, discard), resource counters and the cohesion chain of a
single run, plus the deck-cycle primitives the engine builds on.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Hashable
import copy
import random

from .card import Resource
from .results import DrawResult


def _zeroed_resources() -> Dict[Resource, int]:
    return {resource: 0 for resource in Resource}


@dataclass
class PlayerState:
    """
    Mutable per-player run state

    deck[0] is the next card to draw; hand order is the instance-index
    order shown to the player.
    """
    player_id: Hashable

    # Zones
    deck: List[str] = field(default_factory=list)
    hand: List[str] = field(default_factory=list)
    discard: List[str] = field(default_factory=list)

    # Resources
    resources: Dict[Resource, int] = field(default_factory=_zeroed_resources)

    # Tags of the last resolved card, None at run start and after a turn reset
    last_played_tags: Optional[tuple[str, ...]] = None

    # ==================== Resources ====================

    def resource(self, resource: Resource) -> int:
        """Current amount of a resource"""
        return self.resources.get(resource, 0)

    def gain(self, resource: Resource, amount: int) -> int:
        """
        Add to a resource

        Returns:
            the new amount
        """
        self.resources[resource] = self.resource(resource) + amount
        return self.resources[resource]

    def lose(self, resource: Resource, amount: int) -> int:
        """
        Remove up to ``amount`` from a resource, stopping at zero

        Returns:
            how much was actually removed
        """
        current = self.resource(resource)
        removed = min(current, max(amount, 0))
        self.resources[resource] = current - removed
        return removed

    # ==================== Zones ====================

    @property
    def total_cards(self) -> int:
        """Cards owned across deck, hand and discard"""
        return len(self.deck) + len(self.hand) + len(self.discard)

    def shuffle(self, rng: random.Random) -> int:
        """
        Move the discard pile into the deck and shuffle the deck in place

        ``random.Random.shuffle`` is a Fisher-Yates shuffle, so every
        permutation is equally likely.

        Returns:
            number of cards recycled from the discard pile
        """
        recycled = len(self.discard)
        self.deck.extend(self.discard)
        self.discard.clear()
        rng.shuffle(self.deck)
        return recycled

    def draw(self, count: int, rng: random.Random) -> DrawResult:
        """
        Draw ``count`` cards from the front of the deck into the hand

        Checked per card: an empty deck is refilled from the discard pile;
        when both are empty the remaining draws are forfeited.

        Args:
            count: cards to draw
            rng: shuffle source for mid-draw reshuffles

        Returns:
            the draw outcome
        """
        result = DrawResult(requested=count)
        for _ in range(count):
            if not self.deck:
                if not self.discard:
                    result.exhausted = True
                    break
                self.shuffle(rng)
                result.reshuffles += 1

            card_id = self.deck.pop(0)
            self.hand.append(card_id)
            result.drawn.append(card_id)

        return result

    def take_from_hand(self, instance_id: int) -> str:
        """Remove and return the card at a 1-based hand position"""
        return self.hand.pop(instance_id - 1)

    def has_hand_index(self, instance_id: int) -> bool:
        # bool is an int subclass but never a hand position
        if not isinstance(instance_id, int) or isinstance(instance_id, bool):
            return False
        return 1 <= instance_id <= len(self.hand)

    # ==================== Turn ====================

    def reset_turn(self) -> None:
        """Zero per-turn resources and break the cohesion chain"""
        for resource in Resource:
            if resource.per_turn:
                self.resources[resource] = 0
        self.last_played_tags = None

    # ==================== Views ====================

    def copy(self) -> PlayerState:
        """Deep copy, safe to hand to callers"""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict"""
        return {
            "player_id": self.player_id,
            "deck": list(self.deck),
            "hand": list(self.hand),
            "discard": list(self.discard),
            "resources": {r.value: n for r, n in self.resources.items()},
            "last_played_tags": list(self.last_played_tags) if self.last_played_tags is not None else None,
        }
