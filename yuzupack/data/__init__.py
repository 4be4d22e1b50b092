"""
yuzupack data directory.

Contains bundled, read-only data files:
- i18n/*.json: UI message catalogs, one per language tag
- assets/: the asset store (voice clips, GUI textures, pack metadata,
  and the sounds.json template rewritten on every build)
"""
from pathlib import Path

DATA_DIR = Path(__file__).parent
I18N_DIR = DATA_DIR / "i18n"
ASSETS_DIR = DATA_DIR / "assets"
