import pytest

from firefly2d.options import (
    AudioOptions,
    GameEvent,
    GraphicsOptions,
    TextureFlip,
    WindowMode,
)


def test_window_mode_values_match_source():
    assert [m.value for m in WindowMode] == [1, 2, 3]
    assert WindowMode(2) is WindowMode.WINDOW_MAX_SIZE


def test_texture_flip_combines():
    both = TextureFlip(1 | 2)
    assert TextureFlip.HORIZONTAL in both
    assert TextureFlip.VERTICAL in both
    assert TextureFlip(0) is TextureFlip.NONE


def test_graphics_options_coerces_mode():
    options = GraphicsOptions(mode=3, width=800, height=600)
    assert options.mode is WindowMode.WINDOW
    assert (options.width, options.height) == (800, 600)


@pytest.mark.parametrize("field", ["width", "height", "active_layers"])
def test_graphics_options_rejects_out_of_range(field):
    with pytest.raises(ValueError):
        GraphicsOptions(**{field: 70000})


def test_graphics_options_rejects_unknown_mode():
    with pytest.raises(ValueError):
        GraphicsOptions(mode=7)


def test_audio_options_copies_channel_list():
    channels = [10]
    options = AudioOptions(group_channels=channels)
    channels.append(5)
    assert options.group_channels == [10]


def test_audio_options_default_lists_are_independent():
    first = AudioOptions()
    second = AudioOptions()
    first.group_channels.append(4)
    assert second.group_channels == []


def test_audio_options_rejects_loud_volume():
    with pytest.raises(ValueError):
        AudioOptions(default_music_volume=256)


def test_game_events_round_trip_by_value():
    quit_event = GameEvent(GameEvent.GAME_QUIT.value)
    no_event = GameEvent(GameEvent.NO_EVENT.value)
    assert quit_event is GameEvent.GAME_QUIT
    assert no_event is GameEvent.NO_EVENT
    assert quit_event is not no_event