import pytest

from firefly2d.geometry import Vec2
from firefly2d.gui_droplist import GuiDroplist
from firefly2d.gui_element import GuiAction, PointerState


@pytest.fixture
def droplist():
    widget = GuiDroplist(1, 3, 10, 11, 12, 0.25, (0.0, 0.0), (2.0, 1.0), 1)
    widget.add_entries(["a", "b", "c"])
    return widget


def click(widget, y):
    widget.apply_action(GuiAction.LEFT_BUTTON_DOWN)
    actions = widget.update(0.1, PointerState(Vec2(0.0, y), released=True))
    for action in actions:
        widget.apply_action(action)
    return actions


def test_nothing_selected_initially(droplist):
    assert droplist.selected_id == -1
    assert droplist.selected_name() == ""
    assert droplist.entries == ("a", "b", "c")
    assert all(not text.visible for text in droplist.texts)


def test_select_by_id_shows_entry(droplist):
    droplist.select_by_id(1)
    assert droplist.selected_name() == "b"
    text = droplist.texts[1]
    assert text.visible
    assert text.transform.position.get() == Vec2(0.25, 0.0)


def test_select_by_name_hides_previous(droplist):
    droplist.select_by_id(1)
    droplist.select_by_name("c")
    assert droplist.selected_id == 2
    assert not droplist.texts[1].visible
    assert droplist.texts[2].visible


def test_select_out_of_range_is_ignored(droplist):
    droplist.select_by_id(0)
    droplist.select_by_id(5)
    droplist.select_by_id(-1)
    assert droplist.selected_name() == "a"


def test_open_and_close(droplist):
    droplist.select_by_id(1)
    droplist.open()
    assert droplist.status
    assert droplist.panel.visible
    assert droplist.panel.transform.scale.get() == Vec2(2.0, 2.0)
    assert all(text.visible for text in droplist.texts)
    droplist.close()
    assert not droplist.status
    assert not droplist.panel.visible
    assert [text.visible for text in droplist.texts] == [False, True, False]


def test_click_opens_then_selects(droplist):
    assert click(droplist, 0.0) == [GuiAction.LEFT_BUTTON_UP]
    assert droplist.status
    click(droplist, -1.0)
    assert droplist.selected_name() == "a"
    assert not droplist.status


def test_click_skips_selected_row(droplist):
    droplist.select_by_id(1)
    click(droplist, 0.0)
    click(droplist, -2.0)
    assert droplist.selected_name() == "c"


def test_click_on_header_closes_without_change(droplist):
    droplist.select_by_id(2)
    click(droplist, 0.0)
    click(droplist, 0.0)
    assert droplist.selected_name() == "c"
    assert not droplist.status


def test_press_outside_closes_open_list(droplist):
    droplist.open()
    actions = droplist.update(0.1, PointerState(Vec2(30.0, 30.0), pressed=True))
    assert actions == []
    assert not droplist.status
    assert not droplist.panel.visible


def test_hover_actions(droplist):
    assert droplist.update(0.1, PointerState(Vec2(0.0, 0.0))) == [GuiAction.MOUSE_MOVED_OVER]
    droplist.apply_action(GuiAction.MOUSE_MOVED_OVER)
    assert droplist.update(0.1, PointerState(Vec2(0.0, 0.0))) == [GuiAction.MOUSE_HOVERING]
    assert droplist.update(0.1, PointerState(Vec2(9.0, 0.0))) == [GuiAction.MOUSE_MOVED_OUT]
    assert not droplist.is_mouse_on


def test_set_inactive_closes(droplist):
    droplist.open()
    droplist.set_active(False)
    assert not droplist.active
    assert not droplist.panel.visible