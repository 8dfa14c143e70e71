"""Tests for the i18n module."""

import pytest

import i18n as i18n_mod
from i18n import card_name, card_type_name, get_available_locales, get_locale, resource_name, set_locale, t


class TestSetLocale:
    def test_tests_run_in_english(self):
        assert get_locale() == "en_US"

    def test_switch_to_zh(self):
        set_locale("zh_CN")
        assert get_locale() == "zh_CN"

    def test_invalid_locale(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            set_locale("ja_JP")
        assert get_locale() == "en_US"

    def test_available_locales(self):
        assert get_available_locales() == ["en_US", "zh_CN"]


class TestTranslation:
    def test_basic_key_en(self):
        assert t("resource.ink") == "Ink"

    def test_basic_key_zh(self):
        set_locale("zh_CN")
        assert t("resource.ink") == "墨水"

    def test_format_params(self):
        assert t("engine.card_played", player="p1", card="Spark") == "p1 plays [Spark]"

    def test_format_params_zh(self):
        set_locale("zh_CN")
        result = t("engine.card_played", player="p1", card="火花")
        assert "p1" in result
        assert "火花" in result

    def test_missing_key_returns_bracketed_key(self):
        assert t("nonexistent.key") == "[nonexistent.key]"

    def test_fallback_to_en_US(self):
        """When zh_CN is missing a key, fall back to en_US."""
        set_locale("zh_CN")
        zh_table = i18n_mod._tables["zh_CN"]
        saved = zh_table.pop("resource.grit")
        try:
            assert t("resource.grit") == "Grit"
        finally:
            zh_table["resource.grit"] = saved

    def test_format_map_missing_param_returns_template(self):
        result = t("engine.drawn", player="p1")
        assert result == "{player} draws {count} card(s)"

    def test_underscore_is_t(self):
        from i18n import _ as translate

        assert translate("resource.hype") == t("resource.hype")


class TestStringTables:
    def test_same_keys(self):
        """Both locale tables must have exactly the same keys."""
        from i18n.en_US import STRINGS as en
        from i18n.zh_CN import STRINGS as zh

        assert set(zh) == set(en), (
            f"Key mismatch: zh-only={set(zh) - set(en)}, en-only={set(en) - set(zh)}"
        )

    def test_every_card_has_a_name(self, registry):
        from i18n.en_US import STRINGS as en

        for card_id in registry.ids():
            assert f"card.{card_id}" in en


class TestDomainHelpers:
    def test_card_name(self):
        assert card_name("dialogue") == "Dialogue"
        set_locale("zh_CN")
        assert card_name("dialogue") == "对白"
        assert card_name("deadline") == "截稿日"

    def test_card_name_unknown(self):
        assert card_name("nonexistent") == "nonexistent"

    def test_resource_name(self):
        assert resource_name("inspiration") == "Inspiration"
        assert resource_name("gold") == "gold"

    def test_card_type_name(self):
        assert card_type_name("flaw") == "Flaw"
        set_locale("zh_CN")
        assert card_type_name("skill") == "技巧"


class TestLocalizedErrors:
    def test_error_message_follows_locale(self):
        from inkwell.exceptions import CardNotFoundError

        set_locale("zh_CN")
        assert CardNotFoundError(card_id="x").message == "未知卡牌: x"
