# -*- coding: utf-8 -*-
"""
Card model module
Defines card types, resources, static card definitions and the read-only
hand projection handed to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .effects.base import CardEffect


class CardType(Enum):
    """Card type enum"""

    SKILL = "skill"  # techniques the writer has learned
    FLAW = "flaw"  # dead weight, usually harmful when played
    IDEA = "idea"  # raw material for the story


class Resource(Enum):
    """Per-player resource counters"""

    INSPIRATION = "inspiration"  # per turn, spent on acquisitions
    INK = "ink"  # per turn
    GRIT = "grit"  # persists across turns
    HYPE = "hype"  # persists across turns

    @property
    def per_turn(self) -> bool:
        """Whether the counter is zeroed by a turn reset"""
        return self in (Resource.INSPIRATION, Resource.INK)


@dataclass(frozen=True, slots=True)
class CohesionRule:
    """Bonus granted when the previous card carried ``required_tag``."""

    required_tag: str
    bonus: CardEffect

    def matches(self, previous_tags: Optional[tuple[str, ...]]) -> bool:
        """Check whether the previous card's tags trigger this rule"""
        if previous_tags is None:
            return False
        return self.required_tag in previous_tags


@dataclass(frozen=True, slots=True)
class CardDefinition:
    """Static card definition

    Attributes:
        id: unique card identifier, used as the registry key
        name: display name
        card_type: skill / flaw / idea
        tags: tags in authoring order
        description: rules text
        inspiration_cost: Inspiration paid to acquire the card
        ink_cost: printed Ink cost, None when not applicable
        on_play: effect applied when the card resolves
        cohesion: optional tag-chain bonus
    """

    id: str
    name: str
    card_type: CardType
    tags: tuple[str, ...]
    on_play: CardEffect
    description: str = ""
    inspiration_cost: int = 0
    ink_cost: Optional[int] = None
    cohesion: Optional[CohesionRule] = None

    def __post_init__(self):
        # frozen dataclass: go through object.__setattr__ for normalisation
        if isinstance(self.card_type, str):
            object.__setattr__(self, "card_type", CardType(self.card_type))
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))
        if self.inspiration_cost < 0:
            raise ValueError(f"inspiration_cost must be >= 0: {self.id}")
        if self.ink_cost is not None and self.ink_cost < 0:
            raise ValueError(f"ink_cost must be >= 0: {self.id}")

    @property
    def has_cohesion(self) -> bool:
        return self.cohesion is not None

    def has_tag(self, tag: str) -> bool:
        """Check whether the card carries ``tag``"""
        return tag in self.tags

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"CardDefinition({self.id}, {self.name})"


@dataclass(frozen=True, slots=True)
class HandCard:
    """Read-only projection of a card sitting in a player's hand.

    ``instance_id`` is the card's 1-based position in the hand at the time
    the snapshot was taken; any change to the hand order invalidates it.
    """

    instance_id: int
    id: str
    name: str
    card_type: CardType
    tags: tuple[str, ...]
    description: str
    inspiration_cost: int
    ink_cost: Optional[int]
    cohesion_tag: Optional[str]

    @classmethod
    def project(cls, definition: CardDefinition, instance_id: int) -> HandCard:
        """Copy a definition's display fields into a new hand card"""
        return cls(
            instance_id=instance_id,
            id=definition.id,
            name=definition.name,
            card_type=definition.card_type,
            tags=tuple(definition.tags),
            description=definition.description,
            inspiration_cost=definition.inspiration_cost,
            ink_cost=definition.ink_cost,
            cohesion_tag=definition.cohesion.required_tag if definition.cohesion else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict"""
        return {
            "instance_id": self.instance_id,
            "id": self.id,
            "name": self.name,
            "type": self.card_type.value,
            "tags": list(self.tags),
            "description": self.description,
            "inspiration_cost": self.inspiration_cost,
            "ink_cost": self.ink_cost,
            "cohesion_tag": self.cohesion_tag,
        }


class CardId:
    """Card id constants"""

    # starter cards
    SPARK = "spark"
    ROUGH_DRAFT = "rough_draft"

    # flaws
    SELF_DOUBT = "self_doubt"
    WRITERS_BLOCK = "writers_block"

    # market
    CHARACTER_SKETCH = "character_sketch"
    DIALOGUE = "dialogue"
    PLOT_TWIST = "plot_twist"
    ENSEMBLE_CAST = "ensemble_cast"
    WORLD_BUILDING = "world_building"
    REVISION = "revision"
    DEADLINE = "deadline"
