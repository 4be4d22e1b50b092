"""
Wizard key bindings.

Keys use textual's key names ("up", "pageup", "space", "ctrl+c", ...).
"""

# Actions
CURSOR_UP = "cursor_up"
CURSOR_DOWN = "cursor_down"
PREV_PAGE = "prev_page"
NEXT_PAGE = "next_page"
TOGGLE = "toggle"
QUIT = "quit"
INTERRUPT = "interrupt"

KEY_ACTION_MAP = {
    'up': CURSOR_UP, 'k': CURSOR_UP, 'w': CURSOR_UP,
    'down': CURSOR_DOWN, 'j': CURSOR_DOWN, 's': CURSOR_DOWN,
    'left': PREV_PAGE, 'h': PREV_PAGE, 'pageup': PREV_PAGE, 'a': PREV_PAGE,
    'right': NEXT_PAGE, 'l': NEXT_PAGE, 'pagedown': NEXT_PAGE, 'd': NEXT_PAGE,
    'space': TOGGLE, 'enter': TOGGLE,
    'q': QUIT,
    'ctrl+c': INTERRUPT,
}

# Mouse button numbers as reported by the terminal
MOUSE_LEFT = 1


def action_for_key(key):
    """Map a key name to a wizard action, or None if the key is unbound."""
    if not key:
        return None
    return KEY_ACTION_MAP.get(key.lower() if len(key) > 1 else key)
