import pytest

from yuzupack.constants import SKIP_INDEX
from yuzupack.input import (
    BTN_NEXT,
    BTN_OK,
    BTN_PREV,
    InputRouter,
    Outcome,
    ZoneMap,
    action_for_key,
    item_zone_id,
)
from yuzupack.wizard import FinalSelection, build_initial_state
from yuzupack.wizard.view import render


def identity(message_id: str) -> str:
    return message_id


@pytest.fixture
def state():
    return build_initial_state()


@pytest.fixture
def zones() -> ZoneMap:
    return ZoneMap()


@pytest.fixture
def router(state, zones) -> InputRouter:
    return InputRouter(state, zones)


def redraw(state, zones) -> None:
    render(state, zones, identity)


def press_zone(router: InputRouter, zone_id: str) -> Outcome:
    zone = router.zones.get(zone_id)
    assert zone is not None
    return router.handle_press(zone.x0, zone.y0)


@pytest.mark.parametrize("key,action", [
    ("up", "cursor_up"), ("k", "cursor_up"), ("w", "cursor_up"),
    ("down", "cursor_down"), ("j", "cursor_down"), ("s", "cursor_down"),
    ("left", "prev_page"), ("pageup", "prev_page"), ("a", "prev_page"), ("h", "prev_page"),
    ("right", "next_page"), ("pagedown", "next_page"), ("d", "next_page"), ("l", "next_page"),
    ("space", "toggle"), ("enter", "toggle"),
    ("q", "quit"), ("ctrl+c", "interrupt"),
])
def test_key_bindings(key: str, action: str) -> None:
    assert action_for_key(key) == action


def test_unbound_keys_are_ignored(router, state) -> None:
    assert router.handle_key("x") is Outcome.CONTINUE
    assert router.handle_key("") is Outcome.CONTINUE
    assert state.page("characters").selected == {SKIP_INDEX}


def test_quit_and_interrupt_outcomes(router) -> None:
    assert router.handle_key("q") is Outcome.QUIT
    assert router.handle_key("ctrl+c") is Outcome.INTERRUPT


def test_keyboard_scenario_replace_pack(router, state) -> None:
    router.handle_key("space")         # character 0 on
    router.handle_key("down")
    router.handle_key("down")
    router.handle_key("enter")         # skip off
    router.handle_key("right")
    router.handle_key("s")
    router.handle_key("s")
    router.handle_key("space")         # locale 2
    assert router.handle_key("q") is Outcome.QUIT

    assert state.snapshot() == FinalSelection(frozenset({0}), 2)


def test_click_item_toggles_and_moves_cursor(router, state, zones) -> None:
    redraw(state, zones)
    press_zone(router, item_zone_id(0, 5))
    page = state.active_page()
    assert page.selected == {SKIP_INDEX, 5}
    assert page.cursor == 5

    redraw(state, zones)
    press_zone(router, item_zone_id(0, 5))
    assert page.selected == {SKIP_INDEX}


def test_click_on_single_page_replaces_selection(router, state, zones) -> None:
    state.next_page()
    redraw(state, zones)
    press_zone(router, item_zone_id(1, 2))
    page = state.active_page()
    assert page.selected == {2}
    assert page.cursor == 0


def test_click_must_hit_the_item_row(router, state, zones) -> None:
    redraw(state, zones)
    zone = zones.get(item_zone_id(0, 0))
    router.handle_press(zone.x1 + 5, zone.y0)
    assert state.active_page().selected == {SKIP_INDEX}


def test_prev_button_only_with_previous_page(router, state, zones) -> None:
    redraw(state, zones)
    assert press_zone(router, BTN_PREV) is Outcome.CONTINUE
    assert state.page_index == 0

    press_zone(router, BTN_NEXT)
    assert state.page_index == 1

    redraw(state, zones)
    press_zone(router, BTN_NEXT)
    assert state.page_index == 1

    press_zone(router, BTN_PREV)
    assert state.page_index == 0


def test_ok_button_quits(router, state, zones) -> None:
    redraw(state, zones)
    assert press_zone(router, BTN_OK) is Outcome.QUIT


def test_non_left_buttons_are_ignored(router, state, zones) -> None:
    redraw(state, zones)
    zone = zones.get(BTN_OK)
    assert router.handle_press(zone.x0, zone.y0, button=3) is Outcome.CONTINUE


def test_stale_zones_never_match(router, state, zones) -> None:
    redraw(state, zones)
    stale = zones.get(item_zone_id(0, 5))

    state.next_page()
    redraw(state, zones)
    assert zones.get(item_zone_id(0, 5)) is None

    router.handle_press(stale.x0, stale.y0)
    assert state.page("characters").selected == {SKIP_INDEX}
    assert state.page("locale").selected == {0}


def test_no_zones_before_first_render(router, state) -> None:
    assert router.handle_press(0, 1) is Outcome.CONTINUE
    assert state.page("characters").selected == {SKIP_INDEX}
