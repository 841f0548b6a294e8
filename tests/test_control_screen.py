import pytest

from jetmon.control_screen import ControlScreen, ControlStats


def sample_stats(**overrides):
    values = dict(
        fan_speed=50,
        fan_mode="Auto",
        jetson_clocks=False,
        jetson_clocks_status="inactive",
        nvpmodel_id=0,
        nvpmodel_name="MAXN",
    )
    values.update(overrides)
    return ControlStats(**values)


def test_control_screen_initialization():
    screen = ControlScreen()
    assert screen.stats is None
    assert screen.selected_item == 0


def test_control_screen_update():
    screen = ControlScreen()
    stats = sample_stats()
    screen.update(stats)
    assert screen.stats == stats


def test_loading_render():
    assert ControlScreen().render() == ["Control", "Loading..."]


def test_render_items():
    screen = ControlScreen()
    screen.update(sample_stats())
    lines = screen.render()
    assert ">> Fan Speed: 50% (Auto)" in lines
    assert "   Jetson Clocks: OFF (inactive)" in lines
    assert "   NVP Model: 0 (MAXN)" in lines
    assert lines[-1] == "q: quit | ↑↓: navigate | Enter: select | 1-8: screens | h: help"


def test_render_clocks_on():
    screen = ControlScreen()
    screen.update(sample_stats(jetson_clocks=True, jetson_clocks_status="active"))
    assert "   Jetson Clocks: ON (active)" in screen.render()


def test_navigation_clamps():
    screen = ControlScreen()
    screen.handle_key("up")
    assert screen.selected_item == 0
    for _ in range(5):
        screen.handle_key("down")
    assert screen.selected_item == 2
    screen.handle_key("Up")
    assert screen.selected_item == 1


def test_other_keys_ignored():
    screen = ControlScreen()
    assert screen.handle_key("x") is None
    assert screen.selected_item == 0


@pytest.mark.parametrize(
    "downs, label", [(0, "Fan Speed"), (1, "Jetson Clocks"), (2, "NVP Model")]
)
def test_enter_selects(downs, label):
    screen = ControlScreen()
    for _ in range(downs):
        screen.handle_key("down")
    assert screen.handle_key("enter") == label
    assert screen.select() == label


def test_selection_marker_moves():
    screen = ControlScreen()
    screen.update(sample_stats())
    screen.handle_key("down")
    lines = screen.render()
    assert ">> Jetson Clocks: OFF (inactive)" in lines
    assert sum(line.startswith(">> ") for line in lines) == 1