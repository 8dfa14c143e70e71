"""Lightweight i18n layer, no external dependencies.

Usage::

    from i18n import t, set_locale

    set_locale("zh_CN")
    print(t("engine.card_played", player="p1", card="Spark"))

    # shorthand alias
    from i18n import _
    print(_("resource.ink"))  # -> "Ink" (en_US) / "墨水" (zh_CN)

    # domain helpers
    from i18n import card_name, resource_name
    print(card_name("rough_draft"))  # -> "Rough Draft" / "草稿"
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

_DEFAULT_LOCALE = "en_US"
_SUPPORTED = ("en_US", "zh_CN")

_locale: str = os.environ.get("INKWELL_LOCALE", _DEFAULT_LOCALE)
if _locale not in _SUPPORTED:
    _locale = _DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """Load a translation table on demand."""
    if locale == "en_US":
        from .en_US import STRINGS
    elif locale == "zh_CN":
        from .zh_CN import STRINGS
    else:
        raise ValueError(f"Unsupported locale: {locale}")
    return STRINGS


def set_locale(locale: str) -> None:
    """Switch the active locale."""
    global _locale
    # preload so an invalid locale fails here, not at first lookup
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    _locale = locale


def get_locale() -> str:
    """Return the active locale."""
    return _locale


def get_available_locales() -> list[str]:
    """Return every supported locale."""
    return list(_SUPPORTED)


def t(key: str, **kwargs: object) -> str:
    """Translate ``key``.

    Looks the key up in the active locale and formats it with ``kwargs``.
    Falls back to en_US, then to ``"[key]"``.

    Args:
        key: translation key, e.g. ``"engine.card_played"``.
        **kwargs: format arguments, e.g. ``player="p1"``.
    """
    if _locale not in _tables:
        _tables[_locale] = _load_table(_locale)

    template = _tables[_locale].get(key)

    if template is None and _locale != _DEFAULT_LOCALE:
        if _DEFAULT_LOCALE not in _tables:
            _tables[_DEFAULT_LOCALE] = _load_table(_DEFAULT_LOCALE)
        template = _tables[_DEFAULT_LOCALE].get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using %s", key, _locale, _DEFAULT_LOCALE)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


# ── shorthand ──
_ = t


# ── domain helpers ──


def _is_missing(key: str, result: str) -> bool:
    """Whether ``t()`` reported ``key`` as missing."""
    return result == f"[{key}]"


def card_name(card_id: str) -> str:
    """Localized card name, or the id itself when untranslated.

    Args:
        card_id: card identifier, e.g. ``"spark"``.
    """
    key = f"card.{card_id}"
    result = t(key)
    return result if not _is_missing(key, result) else card_id


def resource_name(value: str) -> str:
    """Localized resource name.

    Args:
        value: resource value, e.g. ``"inspiration"``.
    """
    key = f"resource.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value


def card_type_name(value: str) -> str:
    """Localized card type name.

    Args:
        value: card type value, e.g. ``"flaw"``.
    """
    key = f"card_type.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value
