"""
Settings management for yuzupack.
Handles loading and merging of configuration settings.
"""

import os
import json
import copy

from dotenv import load_dotenv

from ..data import ASSETS_DIR


def get_config_dir():
    """Per-user config directory (YUZUPACK_HOME overrides ~/.yuzupack)"""
    return os.path.expanduser(os.getenv("YUZUPACK_HOME", os.path.join("~", ".yuzupack")))


def get_settings_file():
    return os.path.join(get_config_dir(), "settings.json")


DEFAULT_SETTINGS = {
    "ui": {
        "language": "",  # Empty = follow YUZUPACK_LANG, then the system locale
        "mouse": True
    },
    "build": {
        "output_dir": "",  # Empty = current working directory
        "strict_missing": False  # Exit 1 when any asset had to be skipped
    },
    "assets": {
        "root": ""  # Empty = bundled asset store
    },
    "events": {
        "enabled": True,
        "max_events": 100
    }
}


def load_env():
    """Load .env from the config directory (existing environment wins)"""
    return load_dotenv(os.path.join(get_config_dir(), ".env"))


def deep_merge(base, override):
    """Deep merge override into base dict"""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_settings():
    """Load settings from JSON file"""
    settings_file = get_settings_file()
    try:
        if os.path.exists(settings_file):
            with open(settings_file, 'r', encoding='utf-8') as f:
                settings = json.load(f)
            if not isinstance(settings, dict):
                raise ValueError("top level is not an object")
            # Merge with defaults to ensure all keys exist
            return deep_merge(copy.deepcopy(DEFAULT_SETTINGS), settings)
    except (OSError, ValueError) as e:
        print(f"[Settings] Error loading: {e}")
    return copy.deepcopy(DEFAULT_SETTINGS)


def get_setting(path, default=None, settings=None):
    """Get a setting by dot-notation path (e.g., 'build.output_dir')"""
    value = settings if settings is not None else load_settings()
    for part in path.split('.'):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default
    return value


def resolve_assets_root(settings, override=None):
    """Asset store root: CLI override -> settings -> YUZUPACK_ASSETS -> bundled store"""
    root = override or get_setting('assets.root', settings=settings) or os.getenv("YUZUPACK_ASSETS", "")
    return os.path.abspath(os.path.expanduser(root)) if root else str(ASSETS_DIR)


def resolve_output_dir(settings, override=None):
    """Output directory: CLI override -> settings -> YUZUPACK_OUTPUT_DIR -> cwd"""
    out = override or get_setting('build.output_dir', settings=settings) or os.getenv("YUZUPACK_OUTPUT_DIR", "")
    return os.path.abspath(os.path.expanduser(out)) if out else os.getcwd()
