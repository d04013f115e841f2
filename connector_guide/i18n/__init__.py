"""
Internationalization (i18n)

Translations are stored in JSON files next to this module, one per language:
- connector_guide/i18n/en.json
- connector_guide/i18n/de.json

Keys are dotted paths into the nested JSON ("connector_guide.step1.title").
Parameters use str.format syntax ("{count} connectors found").

A missing key falls back to the default language, then to the key itself
(logged as a warning) so a page never fails on a missing translation.

Usage:
    from connector_guide.i18n import t, translate

    t('connector_guide.step5.sockets.found', count=3)       # session language
    translate('de', 'connector_guide.navigation.next')      # explicit language
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import streamlit as st

from connector_guide.config import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

I18N_DIR = Path(__file__).parent

SESSION_KEY_LANGUAGE = "ui_language"

SUPPORTED_LANGUAGES: Dict[str, str] = {
    "en": "English",
    "de": "Deutsch",
}

LANGUAGE_FLAGS: Dict[str, str] = {
    "en": "🇬🇧",
    "de": "🇩🇪",
}


@lru_cache(maxsize=None)
def load_messages(lang: str) -> Dict[str, Any]:
    """Load the message tree for a language (cached)."""
    path = I18N_DIR / f"{lang}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _lookup(messages: Dict[str, Any], key: str) -> Optional[Any]:
    node: Any = messages
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def normalize_language(lang: Optional[str]) -> str:
    """Return a supported language code (default language otherwise)."""
    if lang and lang.lower() in SUPPORTED_LANGUAGES:
        return lang.lower()
    return DEFAULT_LANGUAGE


def _resolve(lang: str, key: str) -> Optional[Any]:
    lang = normalize_language(lang)
    value = _lookup(load_messages(lang), key)
    if value is None and lang != DEFAULT_LANGUAGE:
        value = _lookup(load_messages(DEFAULT_LANGUAGE), key)
        if value is not None:
            logger.warning(f"Missing translation for '{key}' in '{lang}', using '{DEFAULT_LANGUAGE}'")
    return value


def translate(lang: str, key: str, **params: Any) -> str:
    """
    Translate `key` into `lang`, formatting `params` into the message.

    Returns the key itself if no language defines it.
    """
    value = _resolve(lang, key)
    if not isinstance(value, str):
        logger.warning(f"Missing translation: {key}")
        return key
    if not params:
        return value
    try:
        return value.format(**params)
    except (KeyError, IndexError, ValueError):
        logger.warning(f"Could not format translation '{key}' with {sorted(params)}")
        return value


def translate_list(lang: str, key: str) -> List[Any]:
    """Return a list-valued message (e.g. installation steps); empty if missing."""
    value = _resolve(lang, key)
    if not isinstance(value, list):
        logger.warning(f"Missing translation list: {key}")
        return []
    return value


def get_language() -> str:
    """Current session language."""
    return normalize_language(st.session_state.get(SESSION_KEY_LANGUAGE, DEFAULT_LANGUAGE))


def set_language(lang: str) -> None:
    """Set the session language (unsupported codes fall back to the default)."""
    st.session_state[SESSION_KEY_LANGUAGE] = normalize_language(lang)


def t(key: str, **params: Any) -> str:
    """Translate `key` into the current session language."""
    return translate(get_language(), key, **params)


__all__ = [
    "SUPPORTED_LANGUAGES",
    "LANGUAGE_FLAGS",
    "SESSION_KEY_LANGUAGE",
    "load_messages",
    "normalize_language",
    "translate",
    "translate_list",
    "get_language",
    "set_language",
    "t",
]
