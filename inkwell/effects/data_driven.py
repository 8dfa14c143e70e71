"""Data-driven card effects

Compiles the declarative step lists of the card table into effect objects.

Supported steps::

    {"gain": {"resource": "ink", "amount": 2}}
    {"lose": {"resource": "grit"}}                  # amount defaults to 1
    {"draw": 1}  /  {"draw": {"count": 2}}
    {"gain_card": "self_doubt"}
    {"gain_per_hand_card": {"resource": "hype", "per_card": 1}}
"""

from __future__ import annotations

from typing import Any

from ..card import Resource
from ..exceptions import DataLoadError
from .base import CardEffect
from .basic import (
    DrawCards,
    EffectSequence,
    GainCard,
    GainPerHandCard,
    GainResource,
    LoseResource,
)


def compile_steps(steps: list[dict[str, Any]] | None, source: str = "") -> CardEffect:
    """Compile a list of steps into one effect.

    Args:
        steps: declarative steps, applied in order
        source: where the steps came from, for error messages

    Returns:
        an EffectSequence (empty when ``steps`` is empty)

    Raises:
        DataLoadError: a step is malformed or unknown
    """
    effects = tuple(_compile_step(step, source) for step in steps or [])
    return EffectSequence(effects)


def _compile_step(step: dict[str, Any], source: str) -> CardEffect:
    if not isinstance(step, dict) or len(step) != 1:
        raise DataLoadError(reason=f"{source}: a step must be a single-key object, got {step!r}")

    (kind, info), = step.items()

    if kind == "gain":
        return GainResource(_resource(info, source), _int(info, "amount", 1, source))

    if kind == "lose":
        return LoseResource(_resource(info, source), _int(info, "amount", 1, source))

    if kind == "draw":
        count = info if isinstance(info, int) else _int(info, "count", 1, source)
        if count < 0:
            raise DataLoadError(reason=f"{source}: draw count must be non-negative, got {count}")
        return DrawCards(count)

    if kind == "gain_card":
        card_id = info if isinstance(info, str) else (info or {}).get("card")
        if not card_id:
            raise DataLoadError(reason=f"{source}: gain_card needs a card id")
        return GainCard(card_id)

    if kind == "gain_per_hand_card":
        return GainPerHandCard(_resource(info, source), _int(info, "per_card", 1, source))

    raise DataLoadError(reason=f"{source}: unknown effect step '{kind}'")


def _resource(info: Any, source: str) -> Resource:
    """Parse the resource named by a step"""
    name = info.get("resource") if isinstance(info, dict) else info
    try:
        return Resource(str(name).lower())
    except ValueError:
        raise DataLoadError(reason=f"{source}: unknown resource '{name}'") from None


def _int(info: Any, key: str, default: int, source: str) -> int:
    """Read a non-negative integer field from a step"""
    value = info.get(key, default) if isinstance(info, dict) else default
    if not isinstance(value, int) or value < 0:
        raise DataLoadError(reason=f"{source}: '{key}' must be a non-negative integer, got {value!r}")
    return value
