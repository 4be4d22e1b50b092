"""
yuzupack pack builder.

Submodules:
- assets: Read-only asset store addressed by '/' keys
- assemble: Plans the manifest + sound document and writes the zip
"""
from .assets import AssetStore
from .assemble import (
    ArchiveWriteError,
    BuildPlan,
    BuildReport,
    ManifestEntry,
    SOUNDS_DEST,
    assemble,
    output_name_for,
    write_archive,
)
