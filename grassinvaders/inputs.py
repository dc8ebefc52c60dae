"""Snapshots of mouse, keyboard and touch input."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, List, Optional, Set

MOUSE_MAX_EXTRA_AXES = 4
TOUCH_INPUT_MAX_TOUCH_COUNT = 16


class MouseButton(enum.IntEnum):
    """Standard mouse buttons, numbered from one."""

    LEFT = 1
    RIGHT = 2
    MIDDLE = 3


@dataclass
class MouseState:
    """Position, wheel, extra axes and pressed buttons of the mouse."""

    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0
    more_axes: List[int] = field(default_factory=lambda: [0] * MOUSE_MAX_EXTRA_AXES)
    buttons: int = 0
    pressure: float = 0.0
    display: Optional[Any] = None

    def button_down(self, button: int) -> bool:
        """Whether the numbered button is held; buttons start at one."""
        if button < 1:
            raise ValueError(f"mouse buttons are numbered from 1, got {button}")
        return bool(self.buttons & (1 << (button - 1)))

    def axis(self, axis: int) -> int:
        """Value of an axis: x, y, z, w, then the extra axes."""
        main = (self.x, self.y, self.z, self.w)
        if 0 <= axis < len(main):
            return main[axis]
        extra = axis - len(main)
        if 0 <= extra < len(self.more_axes):
            return self.more_axes[extra]
        raise ValueError(f"no mouse axis {axis}")


@dataclass
class KeyboardState:
    """Which keys are held down."""

    display: Optional[Any] = None
    _down: Set[int] = field(default_factory=set, init=False, repr=False)

    @staticmethod
    def _check(keycode: int) -> int:
        if keycode < 0:
            raise ValueError(f"invalid key code {keycode}")
        return keycode

    def press(self, keycode: int) -> None:
        """Mark a key as held."""
        self._down.add(self._check(keycode))

    def release(self, keycode: int) -> None:
        """Mark a key as released."""
        self._down.discard(self._check(keycode))

    def key_down(self, keycode: int) -> bool:
        """Whether the key is held."""
        return self._check(keycode) in self._down


@dataclass
class TouchState:
    """One touch point; its id is positive while the touch is valid."""

    id: int = -1
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    primary: bool = False
    display: Optional[Any] = None

    def is_valid(self) -> bool:
        """Whether this slot holds a live touch."""
        return self.id > 0


@dataclass
class TouchInputState:
    """Fixed set of touch slots updated as touches begin, move and end."""

    touches: List[TouchState] = field(
        default_factory=lambda: [TouchState() for _ in range(TOUCH_INPUT_MAX_TOUCH_COUNT)]
    )

    def _find(self, touch_id: int) -> int:
        for slot, touch in enumerate(self.touches):
            if touch.is_valid() and touch.id == touch_id:
                return slot
        raise KeyError(touch_id)

    def begin(self, touch_id: int, x: float, y: float) -> TouchState:
        """Start a touch in a free slot and return it."""
        if touch_id <= 0:
            raise ValueError("touch ids must be positive")
        if any(t.is_valid() and t.id == touch_id for t in self.touches):
            raise ValueError(f"touch {touch_id} is already active")
        slot = next((i for i, t in enumerate(self.touches) if not t.is_valid()), None)
        if slot is None:
            raise RuntimeError("no free touch slot")
        touch = TouchState(id=touch_id, x=x, y=y, primary=not self.active())
        self.touches[slot] = touch
        return touch

    def move(self, touch_id: int, x: float, y: float) -> TouchState:
        """Move an active touch, recording the relative motion."""
        touch = self.touches[self._find(touch_id)]
        touch.dx = x - touch.x
        touch.dy = y - touch.y
        touch.x = x
        touch.y = y
        return touch

    def end(self, touch_id: int) -> TouchState:
        """End an active touch, free its slot and return its last state."""
        slot = self._find(touch_id)
        ended = self.touches[slot]
        self.touches[slot] = TouchState()
        return ended

    def active(self) -> List[TouchState]:
        """The touches that are currently live."""
        return [t for t in self.touches if t.is_valid()]