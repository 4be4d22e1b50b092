import json
from pathlib import Path

from yuzupack.utils import settings as settings_mod
from yuzupack.utils import (
    DEFAULT_SETTINGS,
    deep_merge,
    get_setting,
    load_settings,
    resolve_assets_root,
    resolve_output_dir,
)
from yuzupack.data import ASSETS_DIR


def test_deep_merge_keeps_unrelated_keys() -> None:
    merged = deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}


def test_defaults_without_file() -> None:
    assert load_settings() == DEFAULT_SETTINGS


def test_load_merges_file_over_defaults(config_home: Path) -> None:
    config_home.mkdir(parents=True)
    (config_home / "settings.json").write_text(json.dumps({"build": {"strict_missing": True}}), encoding="utf-8")

    loaded = load_settings()
    assert loaded["build"]["strict_missing"] is True
    assert loaded["build"]["output_dir"] == ""
    assert loaded["ui"]["mouse"] is True


def test_broken_file_falls_back_to_defaults(config_home: Path) -> None:
    config_home.mkdir(parents=True)
    (config_home / "settings.json").write_text("{not json", encoding="utf-8")
    assert load_settings() == DEFAULT_SETTINGS


def test_loaded_copy_does_not_touch_defaults() -> None:
    data = load_settings()
    data["ui"]["language"] = "en-US"
    assert DEFAULT_SETTINGS["ui"]["language"] == ""


def test_get_setting_dot_path() -> None:
    data = {"a": {"b": {"c": 5}}}
    assert get_setting("a.b.c", settings=data) == 5
    assert get_setting("a.x", "dflt", settings=data) == "dflt"


def test_resolve_assets_root(monkeypatch, tmp_path: Path) -> None:
    assert resolve_assets_root(DEFAULT_SETTINGS) == str(ASSETS_DIR)
    monkeypatch.setenv("YUZUPACK_ASSETS", str(tmp_path / "env"))
    assert resolve_assets_root(DEFAULT_SETTINGS) == str(tmp_path / "env")
    assert resolve_assets_root(DEFAULT_SETTINGS, str(tmp_path / "cli")) == str(tmp_path / "cli")


def test_resolve_output_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    assert Path(resolve_output_dir(DEFAULT_SETTINGS)).resolve() == tmp_path.resolve()
    configured = deep_merge(DEFAULT_SETTINGS, {"build": {"output_dir": str(tmp_path / "out")}})
    assert resolve_output_dir(configured) == str(tmp_path / "out")


def test_config_dir_follows_env(config_home: Path) -> None:
    assert settings_mod.get_settings_file() == str(config_home / "settings.json")


def test_non_object_sections_fall_back(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    broken = deep_merge(DEFAULT_SETTINGS, {"assets": "elsewhere", "build": 3})
    assert resolve_assets_root(broken) == str(ASSETS_DIR)
    assert Path(resolve_output_dir(broken)).resolve() == tmp_path.resolve()


def test_non_object_file_falls_back_to_defaults(config_home: Path) -> None:
    config_home.mkdir(parents=True)
    (config_home / "settings.json").write_text("[1, 2]", encoding="utf-8")
    assert load_settings() == DEFAULT_SETTINGS
