"""
Renders the wizard state into styled terminal lines and records the
clickable zones of the pass.
"""

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from ..input.zones import BTN_NEXT, BTN_OK, BTN_PREV, item_zone_id
from .state import PageKind

GREEN = Style(color="#008000")
GRAY = Style(color="#808080")
DOT_ACTIVE = Style(color="grey93")
DOT_INACTIVE = Style(color="grey27")


def render(state, zones, translate):
    """
    Render one pass of the wizard.

    Starts a new zone generation, so zones from earlier passes stop matching.

    Args:
        state: WizardState to draw
        zones: ZoneMap to fill for this pass
        translate: Message lookup (T)

    Returns:
        rich Text, one line per canvas row
    """
    zones.begin_pass()
    page = state.active_page()
    lines = []

    if page.kind is PageKind.MULTI:
        lines.append(Text(translate("choose.muti.help.head")))
    else:
        lines.append(Text(translate("choose.single.help.head")))

    for item in page.items:
        selected = page.is_selected(item.index)
        line = Text()
        line.append(">" if item.index == page.cursor else " ")
        line.append(" ")
        line.append("[x]" if selected else "[ ]", style=GREEN if selected else None)
        line.append(" ")
        line.append(item.label, style=None if selected else GRAY)
        row = len(lines)
        zones.mark(item_zone_id(state.page_index, item.index), 0, row, cell_len(line.plain) - 1, row)
        lines.append(line)

    lines.append(Text())
    dots = Text("  ")
    for i in range(state.page_count):
        dots.append("•", style=DOT_ACTIVE if i == state.page_index else DOT_INACTIVE)
    lines.append(dots)
    lines.append(Text())

    row = len(lines)
    buttons = Text()
    for zone_id, message_id in ((BTN_PREV, "choose.button.pg.prev"),
                                (BTN_NEXT, "choose.button.pg.next"),
                                (BTN_OK, "choose.button.pg.ok")):
        if buttons.plain:
            buttons.append("  ")
        label = f"[ {translate(message_id)} ]"
        start = cell_len(buttons.plain)
        buttons.append(label)
        zones.mark(zone_id, start, row, start + cell_len(label) - 1, row)
    lines.append(buttons)

    lines.append(Text())
    lines.append(Text(translate("choose.help.foot")))

    canvas = Text("\n").join(lines)
    canvas.no_wrap = True
    canvas.overflow = "crop"
    return canvas
