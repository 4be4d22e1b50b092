"""
Pack assembly: turns a FinalSelection into an archive.

assemble() is pure planning: output name, ordered manifest, and the
patched sounds.json document. write_archive() copies the manifest into
a fresh zip file, skipping (and reporting) sources the store lacks.
"""

import json
import shutil
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..constants import (
    CHARACTERS,
    GUI_TEXTURES,
    LOCALES,
    NAMESPACE,
    OUTPUT_NAME,
    OUTPUT_NAME_REPLACE,
    SKIP_INDEX,
    SOUND_CATEGORIES,
)
from ..utils.docpatch import append_path, set_path

SOUNDS_TEMPLATE_KEY = "sounds/others/sounds.json"
SOUNDS_DEST = f"assets/{NAMESPACE}/sounds.json"
TEXTURES_KEY = "sounds/others/textures/gui"
PACK_META = ("sounds/others/pack.mcmeta", "pack.mcmeta")
PACK_ICON = ("sounds/others/pack.png", "pack.png")


class ArchiveWriteError(Exception):
    """The output archive could not be created or written."""


@dataclass(frozen=True)
class ManifestEntry:
    """Copy instruction. Generated entries carry data instead of a source."""
    source: Optional[str]
    dest: str
    data: Optional[bytes] = None


@dataclass
class BuildPlan:
    output_name: str
    replace: bool
    locale: str
    characters: List[str]
    entries: List[ManifestEntry]
    document: Dict[str, Any]


@dataclass
class BuildReport:
    path: Path
    written: List[str] = field(default_factory=list)
    skipped: List[ManifestEntry] = field(default_factory=list)

    @property
    def ok(self):
        return not self.skipped


def output_name_for(selection):
    """Keeping the default voice gives an additive pack, otherwise a replacing one."""
    return OUTPUT_NAME if selection.keeps_default else OUTPUT_NAME_REPLACE


def load_sound_document(store):
    if not store.exists(SOUNDS_TEMPLATE_KEY):
        print(f"[WARN] Sound document template missing, starting empty: {SOUNDS_TEMPLATE_KEY}")
        return {}
    try:
        document = json.loads(store.read_text(SOUNDS_TEMPLATE_KEY))
    except ValueError as e:
        print(f"[WARN] Sound document template unreadable, starting empty: {e}")
        return {}
    if not isinstance(document, dict):
        print(f"[WARN] Sound document template is not an object, starting empty: {SOUNDS_TEMPLATE_KEY}")
        return {}
    return document


def serialize_document(document):
    return (json.dumps(document, indent=2, ensure_ascii=False) + "\n").encode('utf-8')


def character_sound_key(character_index, category):
    """Store key stem, e.g. (0, "load") -> "1yoshino/yoshino_load" """
    folder = CHARACTERS[character_index]
    return f"{folder}/{folder[1:]}_{category}"


def assemble(selection, store) -> BuildPlan:
    """
    Plan the archive for a final selection.

    Args:
        selection: FinalSelection from the wizard
        store: AssetStore to read the sound document template from

    Returns:
        BuildPlan with the output name, manifest entries (in write order)
        and the patched sound document
    """
    replace = not selection.keeps_default
    locale = LOCALES[selection.locale]
    document = load_sound_document(store)
    entries = []

    if replace:
        for event in SOUND_CATEGORIES.values():
            set_path(document, f"{event}.replace", True)

    characters = []
    for index in sorted(selection.characters):
        if index == SKIP_INDEX:
            continue
        characters.append(CHARACTERS[index])
        for category, event in SOUND_CATEGORIES.items():
            key = character_sound_key(index, category)
            entries.append(ManifestEntry(f"sounds/{key}.ogg", f"assets/{NAMESPACE}/sounds/{key}.ogg"))
            append_path(document, f"{event}.sounds", f"{NAMESPACE}:{key}")

    entries.append(ManifestEntry(None, SOUNDS_DEST, serialize_document(document)))

    # Locales without their own texture directory use the pack's built-in textures
    texture_dir = f"{TEXTURES_KEY}/{locale}"
    if store.has_dir(texture_dir):
        for name in GUI_TEXTURES:
            entries.append(ManifestEntry(f"{texture_dir}/{name}.png", f"assets/{NAMESPACE}/textures/gui/{name}.png"))

    entries.append(ManifestEntry(*PACK_META))
    entries.append(ManifestEntry(*PACK_ICON))

    return BuildPlan(
        output_name=output_name_for(selection),
        replace=replace,
        locale=locale,
        characters=characters,
        entries=entries,
        document=document,
    )


def write_archive(plan, store, output_dir) -> BuildReport:
    """
    Write the plan's manifest into a new zip in output_dir.

    An existing file with the same name is removed first. Missing sources
    are skipped with a warning and listed in the report.

    Raises:
        ArchiveWriteError: the archive could not be created or written
    """
    path = Path(output_dir) / plan.output_name
    report = BuildReport(path=path)

    try:
        if path.exists():
            path.unlink()
        with zipfile.ZipFile(path, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
            for entry in plan.entries:
                if entry.data is not None:
                    zf.writestr(entry.dest, entry.data)
                    report.written.append(entry.dest)
                    continue

                try:
                    src = store.open(entry.source)
                except OSError:
                    print(f"[WARN] Missing asset, skipped: {entry.source}")
                    report.skipped.append(entry)
                    continue

                with src, zf.open(entry.dest, 'w') as dst:
                    shutil.copyfileobj(src, dst)
                report.written.append(entry.dest)
    except OSError as e:
        raise ArchiveWriteError(f"Failed to write {path}: {e}") from e

    return report
