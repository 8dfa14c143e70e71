# -*- coding: utf-8 -*-
"""
Card registry
An immutable lookup table from card id to card definition, built once from
the card table (inkwell/data/cards.json).
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from .card import CardDefinition, CardType, CohesionRule
from .card_schema import validate_card_entry, validate_card_table
from .effects.data_driven import compile_steps
from .exceptions import CardNotFoundError, DataLoadError

logger = logging.getLogger(__name__)

DEFAULT_CARD_TABLE = Path(__file__).parent / "data" / "cards.json"


class CardRegistry:
    """
    Card registry

    Read-only after construction: there is no register() and the mapping
    handed out is a proxy. Definitions themselves are frozen.
    """

    def __init__(self, definitions: Iterable[CardDefinition]):
        table: Dict[str, CardDefinition] = {}
        for definition in definitions:
            if definition.id in table:
                raise DataLoadError(reason=f"duplicate card id '{definition.id}'")
            table[definition.id] = definition
        self._definitions = table
        self._view: Mapping[str, CardDefinition] = MappingProxyType(table)

    def lookup(self, card_id: str) -> CardDefinition:
        """
        Look up a card definition

        Raises:
            CardNotFoundError: no card with that id
        """
        definition = self._definitions.get(card_id)
        if definition is None:
            raise CardNotFoundError(card_id=card_id)
        return definition

    def get(self, card_id: str) -> Optional[CardDefinition]:
        """Look up a card definition, None when absent"""
        return self._definitions.get(card_id)

    def has(self, card_id: str) -> bool:
        """Check whether a card id is registered"""
        return card_id in self._definitions

    def ids(self) -> List[str]:
        """Registered ids in table order"""
        return list(self._definitions)

    def by_type(self, card_type: CardType) -> List[CardDefinition]:
        """Definitions of one card type, in table order"""
        return [d for d in self._definitions.values() if d.card_type == card_type]

    @property
    def definitions(self) -> Mapping[str, CardDefinition]:
        """Read-only id -> definition mapping"""
        return self._view

    def validate(self, extra_ids: Iterable[str] = ()) -> List[str]:
        """
        Check that every card an effect can add, plus ``extra_ids`` (for
        example a starter deck), is registered

        Returns:
            problems found (empty list = valid)
        """
        errors: List[str] = []
        for definition in self._definitions.values():
            refs = list(definition.on_play.referenced_cards())
            if definition.cohesion is not None:
                refs.extend(definition.cohesion.bonus.referenced_cards())
            for ref in refs:
                if ref not in self._definitions:
                    errors.append(f"{definition.id}: effect references unknown card '{ref}'")
        for card_id in extra_ids:
            if card_id not in self._definitions:
                errors.append(f"unknown card '{card_id}'")
        return errors

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __str__(self) -> str:
        return f"CardRegistry({len(self)} cards)"


# ==================== Loading ====================


def definition_from_dict(data: Dict[str, Any]) -> CardDefinition:
    """
    Build a card definition from one card table entry

    Raises:
        DataLoadError: a required field is missing or malformed
    """
    try:
        entry = validate_card_entry(data)
    except ValidationError as e:
        card_id = data.get("id") if isinstance(data, dict) else None
        raise DataLoadError(reason=f"{card_id or 'card entry'}: {e}") from e

    cohesion = None
    if entry.cohesion is not None:
        cohesion = CohesionRule(
            required_tag=entry.cohesion.required_tag,
            bonus=compile_steps(entry.cohesion.bonus, source=f"{entry.id}.cohesion"),
        )

    return CardDefinition(
        id=entry.id,
        name=entry.display_name,
        card_type=entry.type,
        tags=tuple(entry.tags),
        description=entry.description,
        inspiration_cost=entry.inspiration_cost,
        ink_cost=entry.ink_cost,
        on_play=compile_steps(entry.on_play, source=f"{entry.id}.on_play"),
        cohesion=cohesion,
    )


def load_card_table(path: Optional[str | Path] = None) -> List[CardDefinition]:
    """
    Load card definitions from a JSON card table

    Args:
        path: table path, defaults to the bundled inkwell/data/cards.json

    Returns:
        definitions in table order
    """
    table_path = Path(path) if path is not None else DEFAULT_CARD_TABLE
    if not table_path.exists():
        raise DataLoadError(file_path=str(table_path), reason="file not found")

    try:
        with open(table_path, encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise DataLoadError(file_path=str(table_path), reason=str(e)) from e

    try:
        table = validate_card_table(raw)
    except ValidationError as e:
        raise DataLoadError(file_path=str(table_path), reason=f"expected a 'cards' list: {e}") from e

    definitions = [definition_from_dict(entry) for entry in table.cards]
    logger.info("Loaded %d card definitions from %s", len(definitions), table_path.name)
    return definitions


def create_default_registry(path: Optional[str | Path] = None) -> CardRegistry:
    """
    Build a registry from the card table and check its internal references
    """
    registry = CardRegistry(load_card_table(path))
    errors = registry.validate()
    if errors:
        raise DataLoadError(reason="; ".join(errors))
    return registry


# Process-wide registry, built on first use
_default_registry: Optional[CardRegistry] = None


def get_default_registry() -> CardRegistry:
    """Return the process-wide registry (lazily built)"""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry
