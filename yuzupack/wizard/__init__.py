"""
yuzupack wizard.

Submodules:
- state: Page / selection state and the final snapshot
- view: Renders the state and records clickable zones
- app: textual application driving the wizard (import explicitly)
"""
from .state import (
    FinalSelection,
    Item,
    Page,
    PageKind,
    WizardState,
    build_initial_state,
)
