"""
yuzupack utility modules.

Re-exports all public functions from submodules for convenient imports.
"""

from .settings import (
    DEFAULT_SETTINGS,
    get_config_dir,
    get_settings_file,
    load_env,
    load_settings,
    deep_merge,
    get_setting,
    resolve_assets_root,
    resolve_output_dir,
)

from .localization import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    load_catalog,
    normalize_tag,
    match_language,
    detect_system_locale,
    set_language,
    T,
)

from .docpatch import (
    get_path,
    set_path,
    append_path,
)
