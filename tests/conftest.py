"""Shared fixtures for the inkwell test suite."""

from __future__ import annotations

import random

import pytest

from i18n import get_locale, set_locale
from inkwell.card import CardDefinition, CardType, CohesionRule
from inkwell.card_registry import CardRegistry, create_default_registry
from inkwell.config import RunConfig
from inkwell.effects import EffectSequence
from inkwell.engine import RunEngine
from inkwell.player import PlayerState


@pytest.fixture(autouse=True)
def _english_messages():
    """Run every test with en_US messages, restoring the previous locale."""
    original = get_locale()
    set_locale("en_US")
    yield
    set_locale(original)


def make_card(card_id, tags=("Idea",), on_play=None, cohesion=None, cost=0,
              card_type=CardType.IDEA, ink_cost=None):
    """Build a test card definition; no effect unless ``on_play`` is given."""
    return CardDefinition(
        id=card_id,
        name=card_id.replace("_", " ").title(),
        card_type=card_type,
        tags=tuple(tags),
        on_play=on_play if on_play is not None else EffectSequence(()),
        description=f"test card {card_id}",
        inspiration_cost=cost,
        ink_cost=ink_cost,
        cohesion=cohesion,
    )


def set_zones(engine: RunEngine, player_id, deck=(), hand=(), discard=()) -> PlayerState:
    """Overwrite a player's zones in place and return the live state."""
    state = engine.players.require(player_id)
    state.deck[:] = list(deck)
    state.hand[:] = list(hand)
    state.discard[:] = list(discard)
    return state


@pytest.fixture
def registry() -> CardRegistry:
    return create_default_registry()


@pytest.fixture
def config() -> RunConfig:
    return RunConfig(seed=1234, starting_grit=1)


@pytest.fixture
def engine(registry, config) -> RunEngine:
    return RunEngine(registry=registry, config=config, rng=random.Random(1234))


@pytest.fixture
def player(engine) -> str:
    """An initialized player id."""
    engine.initialize_player("p1")
    return "p1"
