"""
Localization utilities for yuzupack.
Handles message ID to display text lookups and UI language selection.
"""

import os
import json
import locale

from ..data import I18N_DIR

DEFAULT_LANGUAGE = "zh-CN"
SUPPORTED_LANGUAGES = ["zh-CN", "zh-TW", "en-US"]

# Module-level caches
_catalog_cache = {}  # language tag -> {message_id: text}
_active_language = DEFAULT_LANGUAGE


def load_catalog(language):
    """Load i18n/<language>.json with caching"""
    if language not in _catalog_cache:
        path = os.path.join(I18N_DIR, f"{language}.json")
        try:
            if os.path.exists(path):
                with open(path, 'r', encoding='utf-8') as f:
                    _catalog_cache[language] = json.load(f)
            else:
                _catalog_cache[language] = {}
        except (OSError, ValueError) as e:
            print(f"[Localization] Error loading {language}: {e}")
            _catalog_cache[language] = {}
    return _catalog_cache[language]


def clear_cache():
    _catalog_cache.clear()


def normalize_tag(tag):
    """
    Turn a POSIX or BCP 47 locale name into a language tag.

    "en_US.UTF-8" -> "en-US", "zh_Hant_TW" -> "zh-Hant-TW", "C" -> ""
    """
    if not tag:
        return ""
    tag = tag.split('.')[0].split('@')[0].replace('_', '-')
    if tag in ("C", "POSIX"):
        return ""
    parts = tag.split('-')
    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4:
            normalized.append(part.title())  # Script subtag (Hans/Hant)
        else:
            normalized.append(part.upper())
    return '-'.join(normalized)


def match_language(tag):
    """
    Pick the closest supported UI language for a tag.

    Exact match first, then Chinese script/region rules, then base language.
    Returns DEFAULT_LANGUAGE when nothing fits.
    """
    tag = normalize_tag(tag)
    if not tag:
        return DEFAULT_LANGUAGE
    if tag in SUPPORTED_LANGUAGES:
        return tag

    parts = tag.split('-')
    base = parts[0]
    if base == "zh":
        # Traditional script or a region that uses it
        if "Hant" in parts or any(p in ("TW", "HK", "MO") for p in parts):
            return "zh-TW"
        return "zh-CN"
    for supported in SUPPORTED_LANGUAGES:
        if supported.split('-')[0] == base:
            return supported
    return DEFAULT_LANGUAGE


def detect_system_locale():
    """Best-effort system locale query. Returns a normalized tag or ""."""
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = normalize_tag(os.getenv(var, ""))
        if value:
            return value
    try:
        lang, _ = locale.getlocale()
    except ValueError:
        return ""
    return normalize_tag(lang or "")


def set_language(language):
    """Activate a UI language (matched against supported languages)"""
    global _active_language
    _active_language = match_language(language)
    return _active_language


def T(message_id):
    """
    Translate a message ID.

    Looks up the active language, then the default language.
    A miss returns the ID itself.
    """
    for language in (_active_language, DEFAULT_LANGUAGE):
        text = load_catalog(language).get(message_id)
        if text:
            return text
    return message_id
