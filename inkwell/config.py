"""Run configuration (single source of truth)

Every tunable run parameter lives here; most can be overridden from the
environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional


def _get_env_int(key: str, default: int) -> int:
    """Read an integer from the environment"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_optional_int(key: str) -> Optional[int]:
    """Read an optional integer from the environment (unset or bad = None)"""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class RunConfig:
    """Run configuration (immutable)

    Environment overrides:
    - INKWELL_STARTING_GRIT: Grit a new run starts with
    - INKWELL_OPENING_HAND: cards the demo runner draws per turn
    - INKWELL_SEED: RNG seed (unset = system entropy)
    - INKWELL_EVENT_HISTORY: events kept by the event bus
    - INKWELL_LOG_LEVEL: log level
    - INKWELL_LOCALE: message locale
    """
    # ==================== Run setup ====================
    starter_deck: tuple[tuple[str, int], ...] = (
        ("spark", 7),
        ("rough_draft", 3),
    )
    starting_grit: int = field(
        default_factory=lambda: _get_env_int("INKWELL_STARTING_GRIT", 1)
    )
    opening_hand_size: int = field(
        default_factory=lambda: _get_env_int("INKWELL_OPENING_HAND", 5)
    )
    seed: Optional[int] = field(
        default_factory=lambda: _get_env_optional_int("INKWELL_SEED")
    )

    # ==================== Events and logging ====================
    event_history: int = field(
        default_factory=lambda: _get_env_int("INKWELL_EVENT_HISTORY", 100)
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("INKWELL_LOG_LEVEL", "INFO")
    )
    locale: str = field(
        default_factory=lambda: os.environ.get("INKWELL_LOCALE", "en_US")
    )

    @classmethod
    def from_env(cls) -> RunConfig:
        """Build a config from the environment"""
        return cls()

    @property
    def starter_deck_size(self) -> int:
        return sum(count for _, count in self.starter_deck)

    def starter_cards(self) -> list[str]:
        """The starting deck, unshuffled, in composition order"""
        cards: list[str] = []
        for card_id, count in self.starter_deck:
            cards.extend([card_id] * count)
        return cards

    def validate(self) -> list[str]:
        """Check the configuration

        Returns:
            problems found (empty list = valid)
        """
        errors: list[str] = []
        if self.starting_grit < 0:
            errors.append(f"starting_grit must be >= 0, got {self.starting_grit}")
        if self.opening_hand_size < 0:
            errors.append(f"opening_hand_size must be >= 0, got {self.opening_hand_size}")
        if self.event_history < 1:
            errors.append(f"event_history must be >= 1, got {self.event_history}")
        if not self.starter_deck:
            errors.append("starter_deck must not be empty")
        for card_id, count in self.starter_deck:
            if count < 1:
                errors.append(f"starter_deck count for '{card_id}' must be >= 1, got {count}")
        if self.locale not in ("en_US", "zh_CN"):
            errors.append(f"locale must be en_US or zh_CN, got {self.locale}")
        return errors

    def get(self, key: str, default: Any = None) -> Any:
        """Dict-style access"""
        return getattr(self, key, default)


# Process-wide instance
_config: RunConfig | None = None


def get_config() -> RunConfig:
    """Return the process-wide config (lazily built)"""
    global _config
    if _config is None:
        _config = RunConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the process-wide config (tests)"""
    global _config
    _config = None
