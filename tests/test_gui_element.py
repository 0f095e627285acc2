from firefly2d.geometry import Vec2
from firefly2d.gui_element import GuiAction, GuiElement, PointerState


def make_element():
    return GuiElement(name=1, element_code=7, position=(0, 0), scale=(2, 2), layer=3)


def test_contains_inside_and_on_edge():
    element = make_element()
    assert element.contains((0, 0))
    assert element.contains((1, 1))
    assert element.contains((-1, -1))


def test_contains_outside():
    element = make_element()
    assert not element.contains((1.01, 0))
    assert not element.contains((0, -1.5))


def test_contains_follows_transform():
    element = make_element()
    element.transform.position.set(Vec2(10, 0))
    assert element.contains((10.5, 0))
    assert not element.contains((0, 0))


def test_mouse_over_then_out():
    element = make_element()
    element.apply_action(GuiAction.MOUSE_MOVED_OVER)
    assert element.is_mouse_on
    element.apply_action(GuiAction.LEFT_BUTTON_DOWN)
    assert element.is_pressed
    element.apply_action(GuiAction.MOUSE_MOVED_OUT)
    assert not element.is_mouse_on
    assert not element.is_pressed


def test_left_button_up_releases():
    element = make_element()
    element.apply_action(GuiAction.LEFT_BUTTON_DOWN)
    element.apply_action(GuiAction.LEFT_BUTTON_UP)
    assert element.is_pressed is False


def test_set_active_clears_pressed():
    element = make_element()
    element.apply_action(GuiAction.LEFT_BUTTON_DOWN)
    element.set_active(False)
    assert element.active is False
    assert element.is_pressed is False


def test_base_update_requests_nothing():
    element = make_element()
    assert element.update(0.1, PointerState((0, 0), pressed=True)) == []


def test_pointer_state_coerces_position():
    pointer = PointerState((1, 2))
    assert pointer.position == Vec2(1.0, 2.0)
    assert not pointer.pressed