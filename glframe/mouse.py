"""Raw mouse input: buttons, holds, double clicks, wheel and pointer motion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, List

from .vectors import Vector2

DEFAULT_SENSITIVITY = 0.07
DEFAULT_CLICK_LIMIT = 200.0
WHEEL_UP_DATA = 120


class MouseButton(IntEnum):
    """The five buttons a raw input mouse reports."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    FOUR = 3
    FIVE = 4


class RawMouseFlag(IntFlag):
    """Button transition flags carried by a raw mouse packet."""

    BUTTON_1_DOWN = 0x0001
    BUTTON_1_UP = 0x0002
    BUTTON_2_DOWN = 0x0004
    BUTTON_2_UP = 0x0008
    BUTTON_3_DOWN = 0x0010
    BUTTON_3_UP = 0x0020
    BUTTON_4_DOWN = 0x0040
    BUTTON_4_UP = 0x0080
    BUTTON_5_DOWN = 0x0100
    BUTTON_5_UP = 0x0200
    WHEEL = 0x0400


_BUTTON_DOWN_FLAGS = (
    RawMouseFlag.BUTTON_1_DOWN,
    RawMouseFlag.BUTTON_2_DOWN,
    RawMouseFlag.BUTTON_3_DOWN,
    RawMouseFlag.BUTTON_4_DOWN,
    RawMouseFlag.BUTTON_5_DOWN,
)

_BUTTON_UP_FLAGS = (
    RawMouseFlag.BUTTON_1_UP,
    RawMouseFlag.BUTTON_2_UP,
    RawMouseFlag.BUTTON_3_UP,
    RawMouseFlag.BUTTON_4_UP,
    RawMouseFlag.BUTTON_5_UP,
)


@dataclass(frozen=True)
class RawMouseInput:
    """One raw mouse packet: relative motion, button flags and wheel data."""

    last_x: int = 0
    last_y: int = 0
    button_flags: int = 0
    button_data: int = 0


class InputDevice(ABC):
    """An input device that can be put to sleep and woken again."""

    def __init__(self) -> None:
        self.is_awake = True

    @abstractmethod
    def update(self, raw: Any) -> None:
        """Apply one raw input packet."""

    def update_holds(self) -> None:
        """Note which inputs have stayed down since the last frame."""

    def sleep(self) -> None:
        self.is_awake = False

    def wake(self) -> None:
        self.is_awake = True


def _falses() -> List[bool]:
    return [False] * len(MouseButton)


class Mouse(InputDevice):
    """A mouse with button holds, double clicks and a clamped pointer."""

    def __init__(self) -> None:
        super().__init__()
        self.buttons = _falses()
        self.hold_buttons = _falses()
        self.double_clicks = _falses()
        self.last_click_time = [0.0] * len(MouseButton)
        self.absolute_position = Vector2()
        self.absolute_position_bounds = Vector2()
        self.relative_position = Vector2()
        self.frame_wheel = 0
        self.click_limit = DEFAULT_CLICK_LIMIT
        self._sensitivity = DEFAULT_SENSITIVITY

    @property
    def sensitivity(self) -> float:
        """Scale applied to relative motion; setting zero selects 1.0."""
        return self._sensitivity

    @sensitivity.setter
    def sensitivity(self, amount: float) -> None:
        self._sensitivity = 1.0 if amount == 0.0 else float(amount)

    def update(self, raw: RawMouseInput) -> None:
        """Apply one raw packet; ignored while the mouse is asleep."""
        if not self.is_awake:
            return

        self.relative_position.x += raw.last_x * self._sensitivity
        self.relative_position.y += raw.last_y * self._sensitivity

        pos, bounds = self.absolute_position, self.absolute_position_bounds
        pos.x = min(max(pos.x + raw.last_x, 0.0), bounds.x)
        pos.y = min(max(pos.y + raw.last_y, 0.0), bounds.y)

        flags = raw.button_flags
        if flags & RawMouseFlag.WHEEL:
            self.frame_wheel = 1 if raw.button_data == WHEEL_UP_DATA else -1

        for button, down, up in zip(MouseButton, _BUTTON_DOWN_FLAGS, _BUTTON_UP_FLAGS):
            if flags & down:
                self.buttons[button] = True
                if self.last_click_time[button] > 0:
                    self.double_clicks[button] = True
                self.last_click_time[button] = self.click_limit
            elif flags & up:
                self.buttons[button] = False
                self.hold_buttons[button] = False

    def update_holds(self) -> None:
        """Carry pressed buttons into holds and reset per-frame motion."""
        self.hold_buttons = list(self.buttons)
        self.relative_position.to_zero()
        self.frame_wheel = 0

    def sleep(self) -> None:
        """Stop processing input and release every button."""
        super().sleep()
        self.hold_buttons = _falses()
        self.buttons = _falses()

    def update_double_click(self, msec: float) -> None:
        """Advance the double click timers by ``msec`` milliseconds."""
        for button in MouseButton:
            if self.last_click_time[button] > 0:
                self.last_click_time[button] -= msec
                if self.last_click_time[button] <= 0.0:
                    self.double_clicks[button] = False
                    self.last_click_time[button] = 0.0

    def set_absolute_position(self, x: int, y: int) -> None:
        self.absolute_position.x = float(x)
        self.absolute_position.y = float(y)

    def set_absolute_position_bounds(self, max_x: int, max_y: int) -> None:
        self.absolute_position_bounds.x = float(max_x)
        self.absolute_position_bounds.y = float(max_y)

    def button_down(self, button: MouseButton) -> bool:
        return self.buttons[MouseButton(button)]

    def button_held(self, button: MouseButton) -> bool:
        return self.hold_buttons[MouseButton(button)]

    def double_clicked(self, button: MouseButton) -> bool:
        button = MouseButton(button)
        return self.buttons[button] and self.double_clicks[button]

    def wheel_moved(self) -> bool:
        return self.frame_wheel != 0

    def wheel_movement(self) -> int:
        """Positive for scrolling up, negative for down, zero for none."""
        return self.frame_wheel