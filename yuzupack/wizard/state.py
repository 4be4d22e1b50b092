"""
Selection state for the pack wizard.

One WizardState record holds every page and the active page index.
Input handling and rendering both read from it; nothing rebinds page
references on navigation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Set

from ..constants import CHARACTERS, DEFAULT_LOCALE_INDEX, LOCALES, SKIP_INDEX


class PageKind(Enum):
    MULTI = "multi"    # Any subset of items
    SINGLE = "single"  # Exactly one item


@dataclass(frozen=True)
class Item:
    label: str
    index: int


@dataclass
class Page:
    key: str
    kind: PageKind
    items: List[Item]
    selected: Set[int] = field(default_factory=set)
    cursor: int = 0

    def __post_init__(self):
        if not self.items:
            raise ValueError(f"Page '{self.key}' has no items")
        if self.kind is PageKind.SINGLE and len(self.selected) != 1:
            raise ValueError(f"Single-select page '{self.key}' needs exactly one selection")

    def move_cursor(self, delta):
        """Move cursor by delta, clamped to the item range (no wraparound)."""
        self.cursor = max(0, min(len(self.items) - 1, self.cursor + delta))

    def toggle(self, index):
        if not 0 <= index < len(self.items):
            raise IndexError(f"Item {index} out of range for page '{self.key}'")
        if self.kind is PageKind.MULTI:
            # Symmetric difference: add if absent, remove if present
            self.selected ^= {index}
        else:
            self.selected = {index}

    def is_selected(self, index):
        return index in self.selected


@dataclass(frozen=True)
class FinalSelection:
    """Snapshot of the wizard taken on normal termination."""
    characters: FrozenSet[int]
    locale: int

    @property
    def keeps_default(self):
        """True when the skip (default voice) entry is part of the selection."""
        return SKIP_INDEX in self.characters


class WizardState:
    """Active page plus per-page cursor and selection."""

    def __init__(self, pages):
        if not pages:
            raise ValueError("Wizard needs at least one page")
        self.pages = list(pages)
        self.page_index = 0

    @property
    def page_count(self):
        return len(self.pages)

    def active_page(self) -> Page:
        return self.pages[self.page_index]

    def has_prev(self):
        return self.page_index > 0

    def has_next(self):
        return self.page_index < self.page_count - 1

    def move_cursor(self, delta):
        self.active_page().move_cursor(delta)

    def toggle_at_cursor(self):
        page = self.active_page()
        page.toggle(page.cursor)

    def toggle_at(self, index):
        self.active_page().toggle(index)

    def next_page(self):
        if self.has_next():
            self.page_index += 1
            return True
        return False

    def prev_page(self):
        if self.has_prev():
            self.page_index -= 1
            return True
        return False

    def page(self, key) -> Page:
        for page in self.pages:
            if page.key == key:
                return page
        raise KeyError(key)

    def snapshot(self) -> FinalSelection:
        """Combine the final selection of every page (read-only)."""
        locale = self.page("locale").selected
        return FinalSelection(
            characters=frozenset(self.page("characters").selected),
            locale=next(iter(locale)),
        )


def build_initial_state(translate=None):
    """
    Wizard with the character page (multi, skip pre-selected) and
    the locale page (single, first locale pre-selected).

    Args:
        translate: Message lookup for item labels (defaults to identity)
    """
    translate = translate or (lambda message_id: message_id)
    characters = Page(
        key="characters",
        kind=PageKind.MULTI,
        items=[Item(translate(f"char.{c}"), i) for i, c in enumerate(CHARACTERS)],
        selected={SKIP_INDEX},
    )
    locales = Page(
        key="locale",
        kind=PageKind.SINGLE,
        items=[Item(translate(f"lang.{lang}"), i) for i, lang in enumerate(LOCALES)],
        selected={DEFAULT_LOCALE_INDEX},
    )
    return WizardState([characters, locales])
