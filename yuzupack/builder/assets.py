"""
Read-only asset store.

Assets are addressed by '/'-separated keys relative to the store root,
e.g. "sounds/1yoshino/yoshino_load.ogg".
"""

from pathlib import Path


class AssetStore:
    def __init__(self, root):
        self.root = Path(root)

    def _path(self, key) -> Path:
        parts = [p for p in key.split('/') if p]
        if not parts or any(p == ".." for p in parts):
            raise ValueError(f"Invalid asset key: {key!r}")
        return self.root.joinpath(*parts)

    def exists(self, key):
        return self._path(key).is_file()

    def has_dir(self, key):
        return self._path(key).is_dir()

    def open(self, key):
        """Open an asset as a binary stream. Raises FileNotFoundError if absent."""
        return self._path(key).open('rb')

    def read_text(self, key):
        return self._path(key).read_text(encoding='utf-8')

    def __repr__(self):
        return f"AssetStore({str(self.root)!r})"
