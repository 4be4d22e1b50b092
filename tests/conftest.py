import shutil
from pathlib import Path

import pytest

from yuzupack.constants import CHARACTERS, GUI_TEXTURES, SOUND_CATEGORIES
from yuzupack.data import ASSETS_DIR
from yuzupack.utils import localization


def make_store(root: Path, characters=None, locales=("zh-TW", "en-US")) -> Path:
    """Asset store on disk with fake clip/texture bytes."""
    others = root / "sounds" / "others"
    others.mkdir(parents=True)
    shutil.copy(ASSETS_DIR / "sounds" / "others" / "sounds.json", others / "sounds.json")
    (others / "pack.mcmeta").write_text('{"pack": {"pack_format": 15}}', encoding="utf-8")
    (others / "pack.png").write_bytes(b"\x89PNG-icon")

    if characters is None:
        characters = range(len(CHARACTERS))
    for index in characters:
        folder = CHARACTERS[index]
        char_dir = root / "sounds" / folder
        char_dir.mkdir(parents=True, exist_ok=True)
        for category in SOUND_CATEGORIES:
            (char_dir / f"{folder[1:]}_{category}.ogg").write_bytes(f"OggS:{folder}:{category}".encode())

    for locale in locales:
        tex_dir = others / "textures" / "gui" / locale
        tex_dir.mkdir(parents=True)
        for name in GUI_TEXTURES:
            (tex_dir / f"{name}.png").write_bytes(f"{locale}:{name}".encode())
    return root


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    return make_store(tmp_path / "assets")


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("YUZUPACK_HOME", str(home))
    for var in ("YUZUPACK_LANG", "YUZUPACK_ASSETS", "YUZUPACK_OUTPUT_DIR"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_language():
    localization.set_language(localization.DEFAULT_LANGUAGE)
    yield
    localization.set_language(localization.DEFAULT_LANGUAGE)
