# -*- coding: utf-8 -*-
"""RunConfig tests: defaults, environment overrides and validation."""

from __future__ import annotations

import dataclasses

import pytest

from inkwell.config import RunConfig, get_config, reset_config

_ENV_KEYS = (
    "INKWELL_STARTING_GRIT",
    "INKWELL_OPENING_HAND",
    "INKWELL_SEED",
    "INKWELL_EVENT_HISTORY",
    "INKWELL_LOG_LEVEL",
    "INKWELL_LOCALE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


class TestDefaults:

    def test_defaults(self):
        config = RunConfig()
        assert config.starter_deck == (("spark", 7), ("rough_draft", 3))
        assert config.starting_grit == 1
        assert config.opening_hand_size == 5
        assert config.seed is None
        assert config.event_history == 100
        assert config.log_level == "INFO"
        assert config.locale == "en_US"

    def test_starter_cards(self):
        config = RunConfig()
        assert config.starter_deck_size == 10
        cards = config.starter_cards()
        assert cards == ["spark"] * 7 + ["rough_draft"] * 3

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RunConfig().starting_grit = 5

    def test_dict_style_get(self):
        config = RunConfig()
        assert config.get("opening_hand_size") == 5
        assert config.get("missing", "fallback") == "fallback"

    def test_valid(self):
        assert RunConfig().validate() == []


class TestEnvironment:

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("INKWELL_STARTING_GRIT", "3")
        monkeypatch.setenv("INKWELL_OPENING_HAND", "6")
        monkeypatch.setenv("INKWELL_SEED", "42")
        monkeypatch.setenv("INKWELL_EVENT_HISTORY", "20")
        monkeypatch.setenv("INKWELL_LOCALE", "zh_CN")
        config = RunConfig.from_env()
        assert config.starting_grit == 3
        assert config.opening_hand_size == 6
        assert config.seed == 42
        assert config.event_history == 20
        assert config.locale == "zh_CN"

    @pytest.mark.parametrize("value", ["", "abc"])
    def test_bad_seed_means_unseeded(self, monkeypatch, value):
        monkeypatch.setenv("INKWELL_SEED", value)
        assert RunConfig().seed is None

    def test_bad_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("INKWELL_STARTING_GRIT", "lots")
        assert RunConfig().starting_grit == 1

    def test_process_wide_config(self, monkeypatch):
        first = get_config()
        assert get_config() is first
        monkeypatch.setenv("INKWELL_STARTING_GRIT", "7")
        assert get_config().starting_grit == 1
        reset_config()
        assert get_config().starting_grit == 7


class TestValidate:

    @pytest.mark.parametrize("kwargs, fragment", [
        ({"starting_grit": -1}, "starting_grit"),
        ({"opening_hand_size": -1}, "opening_hand_size"),
        ({"event_history": 0}, "event_history"),
        ({"starter_deck": ()}, "starter_deck"),
        ({"starter_deck": (("spark", 0),)}, "spark"),
        ({"locale": "fr_FR"}, "locale"),
    ])
    def test_invalid(self, kwargs, fragment):
        errors = RunConfig(**kwargs).validate()
        assert len(errors) == 1
        assert fragment in errors[0]
