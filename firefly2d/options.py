"""Engine option records and the small enumerations shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag

__all__ = [
    "WindowMode",
    "TextureFlip",
    "LightingQuality",
    "GameEvent",
    "TransformPivotPoint",
    "GraphicsOptions",
    "AudioOptions",
]

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF


class WindowMode(IntEnum):
    FULLSCREEN = 1
    WINDOW_MAX_SIZE = 2
    WINDOW = 3


class TextureFlip(IntFlag):
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


class LightingQuality(Enum):
    LOW = "720p"
    MEDIUM = "1080p"
    HIGH = "1440p"


class GameEvent(Enum):
    NO_EVENT = "no_event"
    GAME_QUIT = "game_quit"


class TransformPivotPoint(Enum):
    PARENT_CENTER = "parent_center"
    OBJECT_CENTER = "object_center"


def _check_range(name: str, value: int, upper: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= upper:
        raise ValueError(f"{name} must be an integer in 0..{upper}, got {value!r}")


@dataclass
class GraphicsOptions:
    """How the window is opened and how many screen layers are drawn."""

    mode: WindowMode = WindowMode.WINDOW_MAX_SIZE
    width: int = 0
    height: int = 0
    active_layers: int = 10

    def __post_init__(self) -> None:
        self.mode = WindowMode(self.mode)
        _check_range("width", self.width, _UINT16_MAX)
        _check_range("height", self.height, _UINT16_MAX)
        _check_range("active_layers", self.active_layers, _UINT16_MAX)


@dataclass
class AudioOptions:
    """Channel counts of each audio group and the starting volumes."""

    group_channels: list[int] = field(default_factory=list)
    default_music_volume: int = 128
    default_track_volume: int = 128

    def __post_init__(self) -> None:
        self.group_channels = list(self.group_channels)
        for count in self.group_channels:
            _check_range("group channel count", count, _UINT16_MAX)
        _check_range("default_music_volume", self.default_music_volume, _UINT8_MAX)
        _check_range("default_track_volume", self.default_track_volume, _UINT8_MAX)