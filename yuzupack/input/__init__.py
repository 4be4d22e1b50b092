"""
yuzupack input handling.

Submodules:
- keys: Key name to wizard action bindings
- zones: Per-render-pass hit regions for clickable controls
- router: Applies key and pointer presses to the wizard state
"""
from .keys import KEY_ACTION_MAP, MOUSE_LEFT, action_for_key
from .zones import BTN_NEXT, BTN_OK, BTN_PREV, Zone, ZoneMap, item_zone_id
from .router import InputRouter, Outcome
