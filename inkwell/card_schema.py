"""Card table Pydantic validation models

Strict input checks for inkwell/data/cards.json. The registry parses the raw
JSON, validates it here, and only then builds the internal CardDefinition
dataclasses, so malformed entries never reach the engine.

Design:
  - validation models are kept apart from the frozen definitions
    (validation layer vs. game layer)
  - failures raise pydantic.ValidationError; the registry turns them into
    DataLoadError
  - entries use extra="forbid" so a misspelled field is an error, not a
    silently ignored key
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .card import CardType


class CohesionModel(BaseModel):
    """Cohesion rule of one card"""

    model_config = ConfigDict(extra="forbid")

    required_tag: str = Field(min_length=1)
    bonus: list[dict[str, Any]] = Field(default_factory=list)


class CardEntryModel(BaseModel):
    """One card table entry"""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1, max_length=50)
    name: Optional[str] = None
    type: CardType
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    inspiration_cost: int = Field(default=0, ge=0)
    ink_cost: Optional[int] = Field(default=None, ge=0)
    on_play: list[dict[str, Any]] = Field(default_factory=list)
    cohesion: Optional[CohesionModel] = None

    @field_validator("tags")
    @classmethod
    def tags_not_blank(cls, v: list[str]) -> list[str]:
        if any(not tag.strip() for tag in v):
            raise ValueError("tags must not be blank")
        return v

    @property
    def display_name(self) -> str:
        return self.name or self.id


class CardTableModel(BaseModel):
    """The whole card table; top-level keys other than ``cards`` are notes"""

    model_config = ConfigDict(extra="ignore")

    cards: list[dict[str, Any]]


def validate_card_entry(data: Any) -> CardEntryModel:
    """Validate one raw card entry.

    Raises:
        pydantic.ValidationError: validation failed
    """
    return CardEntryModel.model_validate(data)


def validate_card_table(raw: Any) -> CardTableModel:
    """Validate the outer structure of a parsed card table.

    Entries are checked one by one by ``validate_card_entry`` so errors can
    name the offending card.

    Raises:
        pydantic.ValidationError: validation failed
    """
    return CardTableModel.model_validate(raw)
