"""Display creation settings, options and monitor geometry."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, Tuple

WINDOW_TITLE_MAX_SIZE = 255
DEFAULT_DISPLAY_ADAPTER = -1


class DisplayFlag(enum.IntFlag):
    """Flags that describe how a display is created."""

    NONE = 0
    WINDOWED = 1 << 0
    FULLSCREEN = 1 << 1
    OPENGL = 1 << 2
    DIRECT3D_INTERNAL = 1 << 3
    RESIZABLE = 1 << 4
    FRAMELESS = 1 << 5
    NOFRAME = FRAMELESS
    GENERATE_EXPOSE_EVENTS = 1 << 6
    OPENGL_3_0 = 1 << 7
    OPENGL_FORWARD_COMPATIBLE = 1 << 8
    FULLSCREEN_WINDOW = 1 << 9
    MINIMIZED = 1 << 10
    PROGRAMMABLE_PIPELINE = 1 << 11
    GTK_TOPLEVEL_INTERNAL = 1 << 12
    MAXIMIZED = 1 << 13
    OPENGL_ES_PROFILE = 1 << 14
    OPENGL_CORE_PROFILE = 1 << 15
    DRAG_AND_DROP = 1 << 16


class DisplayOption(enum.IntEnum):
    """Options that can be requested for a new display."""

    RED_SIZE = 0
    GREEN_SIZE = 1
    BLUE_SIZE = 2
    ALPHA_SIZE = 3
    RED_SHIFT = 4
    GREEN_SHIFT = 5
    BLUE_SHIFT = 6
    ALPHA_SHIFT = 7
    ACC_RED_SIZE = 8
    ACC_GREEN_SIZE = 9
    ACC_BLUE_SIZE = 10
    ACC_ALPHA_SIZE = 11
    STEREO = 12
    AUX_BUFFERS = 13
    COLOR_SIZE = 14
    DEPTH_SIZE = 15
    STENCIL_SIZE = 16
    SAMPLE_BUFFERS = 17
    SAMPLES = 18
    RENDER_METHOD = 19
    FLOAT_COLOR = 20
    FLOAT_DEPTH = 21
    SINGLE_BUFFER = 22
    SWAP_METHOD = 23
    COMPATIBLE_DISPLAY = 24
    UPDATE_DISPLAY_REGION = 25
    VSYNC = 26
    MAX_BITMAP_SIZE = 27
    SUPPORT_NPOT_BITMAP = 28
    CAN_DRAW_INTO_BITMAP = 29
    SUPPORT_SEPARATE_ALPHA = 30
    AUTO_CONVERT_BITMAPS = 31
    SUPPORTED_ORIENTATIONS = 32
    OPENGL_MAJOR_VERSION = 33
    OPENGL_MINOR_VERSION = 34
    DEFAULT_SHADER_PLATFORM = 35


class Importance(enum.IntEnum):
    """How strongly a display option is wanted."""

    DONTCARE = 0
    REQUIRE = 1
    SUGGEST = 2


class Orientation(enum.IntFlag):
    """Display orientations, usable as a bit set."""

    UNKNOWN = 0
    DEG_0 = 1
    DEG_90 = 2
    DEG_180 = 4
    DEG_270 = 8
    PORTRAIT = 5
    LANDSCAPE = 10
    ALL = 15
    FACE_UP = 16
    FACE_DOWN = 32


@dataclass(frozen=True)
class MonitorInfo:
    """The desktop rectangle a monitor covers; x2 and y2 are exclusive."""

    x1: int
    y1: int
    x2: int
    y2: int

    def width(self) -> int:
        """Horizontal size in pixels."""
        return self.x2 - self.x1

    def height(self) -> int:
        """Vertical size in pixels."""
        return self.y2 - self.y1

    def contains(self, x: int, y: int) -> bool:
        """Whether the desktop point lies on this monitor."""
        return self.x1 <= x < self.x2 and self.y1 <= y < self.y2


@dataclass
class DisplaySettings:
    """Settings applied to displays created from now on."""

    flags: DisplayFlag = DisplayFlag.NONE
    refresh_rate: int = 0
    adapter: int = DEFAULT_DISPLAY_ADAPTER
    window_title: str = ""
    _options: Dict[DisplayOption, Tuple[int, Importance]] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.flags = DisplayFlag(self.flags)
        self.set_window_title(self.window_title)

    def set_option(self, option: DisplayOption, value: int, importance: Importance) -> None:
        """Request ``value`` for ``option``; DONTCARE forgets the request."""
        option = DisplayOption(option)
        importance = Importance(importance)
        if importance is Importance.DONTCARE:
            self._options.pop(option, None)
        else:
            self._options[option] = (int(value), importance)

    def get_option(self, option: DisplayOption) -> Tuple[int, Importance]:
        """Return the requested value and its importance for ``option``."""
        return self._options.get(DisplayOption(option), (0, Importance.DONTCARE))

    def reset(self) -> None:
        """Forget every requested option."""
        self._options.clear()

    def set_window_title(self, title: str) -> None:
        """Set the title for new windows, cut to the maximum title size."""
        encoded = title.encode("utf-8")[:WINDOW_TITLE_MAX_SIZE]
        self.window_title = encoded.decode("utf-8", errors="ignore")