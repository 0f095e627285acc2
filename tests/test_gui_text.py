import pytest

from firefly2d.gui_text import CURSOR_BLINK_INTERVAL, GuiText


def make_text(content=""):
    text = GuiText(0, 0, 42, (0, 0), (4, 1), 1)
    text.set_text(content)
    return text


def test_starts_empty_without_cursor():
    text = GuiText(0, 0, 42, (0, 0), (4, 1), 1)
    assert text.text == ""
    assert text.cursor_pos == -1
    assert text.drawn_cursor == -1


def test_insert_in_middle_returns_length():
    text = make_text("held")
    assert text.insert_text("l", 3) == 1
    assert text.text == "helld"


def test_insert_at_start():
    text = make_text("bc")
    text.insert_text("a", 0)
    assert text.text == "abc"


def test_insert_past_end_appends():
    text = make_text("ab")
    text.insert_text("cd", 10)
    assert text.text == "abcd"


def test_insert_negative_index_appends():
    text = make_text("ab")
    text.insert_text("c", -1)
    assert text.text == "abc"


def test_append_and_len():
    text = make_text("foo")
    text.append_text("bar")
    assert text.text == "foobar"
    assert len(text) == len("foobar")


def test_delete_char_removes_one():
    text = make_text("abc")
    text.delete_char(1)
    assert text.text == "ac"


@pytest.mark.parametrize("index", [-1, 3])
def test_delete_char_out_of_range(index):
    text = make_text("abc")
    with pytest.raises(IndexError):
        text.delete_char(index)


def test_cursor_blinks_after_interval():
    text = make_text("abc")
    text.cursor_pos = 2
    text.show_cursor(True)
    assert text.drawn_cursor == 2
    text.update(CURSOR_BLINK_INTERVAL / 2)
    assert text.cursor_visible
    text.update(CURSOR_BLINK_INTERVAL)
    assert not text.cursor_visible
    assert text.drawn_cursor == -1
    text.update(CURSOR_BLINK_INTERVAL + 0.01)
    assert text.cursor_visible


def test_hidden_cursor_does_not_blink():
    text = make_text("abc")
    text.cursor_pos = 1
    text.update(CURSOR_BLINK_INTERVAL * 3)
    assert text.drawn_cursor == -1
    text.show_cursor(False)
    assert not text.cursor_shown