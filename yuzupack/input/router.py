"""
Input routing for the pack wizard.

Turns key presses and pointer presses into WizardState calls.
Events are applied one at a time, in arrival order, each to completion.
"""

from enum import Enum

from ..wizard.state import PageKind
from . import keys
from .zones import BTN_NEXT, BTN_OK, BTN_PREV, item_zone_id


class Outcome(Enum):
    CONTINUE = "continue"    # Keep running, redraw
    QUIT = "quit"            # Normal end: snapshot and build
    INTERRUPT = "interrupt"  # Abort: no snapshot, no build


class InputRouter:
    def __init__(self, state, zones):
        self.state = state
        self.zones = zones

    def handle_key(self, key):
        """Apply one key press. Unbound keys are ignored."""
        action = keys.action_for_key(key)
        if action is None:
            return Outcome.CONTINUE
        if action == keys.QUIT:
            return Outcome.QUIT
        if action == keys.INTERRUPT:
            return Outcome.INTERRUPT

        if action == keys.CURSOR_UP:
            self.state.move_cursor(-1)
        elif action == keys.CURSOR_DOWN:
            self.state.move_cursor(1)
        elif action == keys.PREV_PAGE:
            self.state.prev_page()
        elif action == keys.NEXT_PAGE:
            self.state.next_page()
        elif action == keys.TOGGLE:
            self.state.toggle_at_cursor()
        return Outcome.CONTINUE

    def handle_press(self, x, y, button=keys.MOUSE_LEFT):
        """
        Apply one pointer press at cell (x, y) against the latest zones.

        Precedence: prev button, next button, ok button, then item rows of
        the active page. At most one transition per press.
        """
        if button != keys.MOUSE_LEFT:
            return Outcome.CONTINUE

        state = self.state
        if state.has_prev() and self.zones.hit(BTN_PREV, x, y):
            state.prev_page()
            return Outcome.CONTINUE
        if state.has_next() and self.zones.hit(BTN_NEXT, x, y):
            state.next_page()
            return Outcome.CONTINUE
        if self.zones.hit(BTN_OK, x, y):
            return Outcome.QUIT

        page = state.active_page()
        for item in page.items:
            zone = self.zones.get(item_zone_id(state.page_index, item.index))
            # Only the row the item was drawn on counts
            if zone is not None and zone.contains(x, y) and y == zone.y0:
                state.toggle_at(item.index)
                if page.kind is PageKind.MULTI:
                    page.cursor = item.index
                break
        return Outcome.CONTINUE
