"""
Full-screen pack wizard built on textual.

The app owns one WizardState and one ZoneMap. Every key or mouse press
goes through the InputRouter, then the canvas is redrawn (which rebuilds
the zones). The app exits with a FinalSelection on a normal quit and with
None on interrupt.
"""

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from ..constants import EXIT_INTERRUPTED
from ..input import InputRouter, Outcome, ZoneMap
from ..utils.localization import T
from .view import render


class WizardCanvas(Static):
    """Static canvas; coordinates of mouse events are canvas cells."""

    def on_mouse_down(self, event: events.MouseDown) -> None:
        event.stop()
        self.app.handle_press(event.x, event.y, event.button)


class PackWizardApp(App):
    CSS = """
    Screen {
        overflow: hidden;
    }
    WizardCanvas {
        width: 100%;
        height: auto;
        padding: 0;
        margin: 0;
    }
    """

    BINDINGS = [
        # Priority so no widget can swallow the abort key
        Binding("ctrl+c", "interrupt", show=False, priority=True),
    ]

    def __init__(self, state, translate=T, **kwargs):
        super().__init__(**kwargs)
        self.state = state
        self.zones = ZoneMap()
        self.router = InputRouter(self.state, self.zones)
        self.translate = translate

    def compose(self) -> ComposeResult:
        yield WizardCanvas(id="canvas")

    def on_mount(self) -> None:
        self.redraw()

    def redraw(self):
        self.query_one("#canvas", WizardCanvas).update(render(self.state, self.zones, self.translate))

    def dispatch_outcome(self, outcome):
        if outcome is Outcome.QUIT:
            self.exit(self.state.snapshot())
        elif outcome is Outcome.INTERRUPT:
            self.action_interrupt()
        else:
            self.redraw()

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.dispatch_outcome(self.router.handle_key(event.key))

    def handle_press(self, x, y, button):
        self.dispatch_outcome(self.router.handle_press(x, y, button))

    def action_interrupt(self) -> None:
        self.exit(None, return_code=EXIT_INTERRUPTED)


def run_wizard(state, mouse=True):
    """
    Run the wizard until the user finishes or aborts.

    Returns:
        FinalSelection on normal quit, None on interrupt
    """
    app = PackWizardApp(state)
    return app.run(mouse=mouse)
