import pytest

from glframe.mouse import (
    InputDevice,
    Mouse,
    MouseButton,
    RawMouseFlag,
    RawMouseInput,
)


def press(button_flag):
    return RawMouseInput(button_flags=int(button_flag))


@pytest.fixture
def mouse():
    return Mouse()


def test_default_sensitivity(mouse):
    assert mouse.sensitivity == pytest.approx(0.07)


def test_zero_sensitivity_becomes_one(mouse):
    mouse.sensitivity = 0.0
    assert mouse.sensitivity == 1.0


def test_sensitivity_set(mouse):
    mouse.sensitivity = 2.5
    assert mouse.sensitivity == 2.5


def test_input_device_is_abstract():
    with pytest.raises(TypeError):
        InputDevice()


def test_press_and_hold(mouse):
    mouse.update(press(RawMouseFlag.BUTTON_1_DOWN))
    assert mouse.button_down(MouseButton.LEFT)
    assert not mouse.button_held(MouseButton.LEFT)
    mouse.update_holds()
    assert mouse.button_held(MouseButton.LEFT)
    assert not mouse.button_down(MouseButton.RIGHT)


def test_release_clears_down_and_hold(mouse):
    mouse.update(press(RawMouseFlag.BUTTON_2_DOWN))
    mouse.update_holds()
    mouse.update(press(RawMouseFlag.BUTTON_2_UP))
    assert not mouse.button_down(MouseButton.RIGHT)
    assert not mouse.button_held(MouseButton.RIGHT)


@pytest.mark.parametrize(
    "button, flag",
    list(
        zip(
            MouseButton,
            [
                RawMouseFlag.BUTTON_1_DOWN,
                RawMouseFlag.BUTTON_2_DOWN,
                RawMouseFlag.BUTTON_3_DOWN,
                RawMouseFlag.BUTTON_4_DOWN,
                RawMouseFlag.BUTTON_5_DOWN,
            ],
        )
    ),
)
def test_each_button_maps_to_its_flag(mouse, button, flag):
    mouse.update(press(flag))
    assert [mouse.button_down(b) for b in MouseButton] == [b == button for b in MouseButton]


def test_double_click_within_limit(mouse):
    mouse.update(press(RawMouseFlag.BUTTON_1_DOWN))
    assert not mouse.double_clicked(MouseButton.LEFT)
    mouse.update(press(RawMouseFlag.BUTTON_1_UP))
    mouse.update_double_click(mouse.click_limit / 2)
    mouse.update(press(RawMouseFlag.BUTTON_1_DOWN))
    assert mouse.double_clicked(MouseButton.LEFT)


def test_double_click_expires_at_limit(mouse):
    mouse.update(press(RawMouseFlag.BUTTON_1_DOWN))
    mouse.update(press(RawMouseFlag.BUTTON_1_UP))
    mouse.update_double_click(mouse.click_limit)
    mouse.update(press(RawMouseFlag.BUTTON_1_DOWN))
    assert not mouse.double_clicked(MouseButton.LEFT)


def test_double_click_cleared_by_timer(mouse):
    for flag in (RawMouseFlag.BUTTON_1_DOWN, RawMouseFlag.BUTTON_1_UP, RawMouseFlag.BUTTON_1_DOWN):
        mouse.update(press(flag))
    assert mouse.double_clicked(MouseButton.LEFT)
    mouse.update_double_click(mouse.click_limit)
    assert not mouse.double_clicked(MouseButton.LEFT)
    assert mouse.last_click_time[MouseButton.LEFT] == 0.0


def test_double_click_needs_button_down(mouse):
    for flag in (RawMouseFlag.BUTTON_1_DOWN, RawMouseFlag.BUTTON_1_UP, RawMouseFlag.BUTTON_1_DOWN):
        mouse.update(press(flag))
    mouse.update(press(RawMouseFlag.BUTTON_1_UP))
    assert not mouse.double_clicked(MouseButton.LEFT)


def test_wheel_up(mouse):
    mouse.update(RawMouseInput(button_flags=int(RawMouseFlag.WHEEL), button_data=120))
    assert mouse.wheel_moved()
    assert mouse.wheel_movement() == 1


def test_wheel_down(mouse):
    mouse.update(RawMouseInput(button_flags=int(RawMouseFlag.WHEEL), button_data=65416))
    assert mouse.wheel_movement() == -1


def test_wheel_data_without_flag_ignored(mouse):
    mouse.update(RawMouseInput(button_data=120))
    assert not mouse.wheel_moved()
    assert mouse.wheel_movement() == 0


def test_update_holds_resets_frame_state(mouse):
    mouse.sensitivity = 1.0
    mouse.update(RawMouseInput(last_x=5, last_y=7, button_flags=int(RawMouseFlag.WHEEL), button_data=120))
    mouse.update_holds()
    assert mouse.wheel_movement() == 0
    assert (mouse.relative_position.x, mouse.relative_position.y) == (0.0, 0.0)


def test_relative_motion_accumulates(mouse):
    mouse.sensitivity = 1.0
    mouse.update(RawMouseInput(last_x=10, last_y=-4))
    mouse.update(RawMouseInput(last_x=10, last_y=-4))
    assert mouse.relative_position.x == pytest.approx(20.0)
    assert mouse.relative_position.y == pytest.approx(-8.0)


def test_relative_motion_scales_with_sensitivity(mouse):
    mouse.sensitivity = 1.0
    mouse.update(RawMouseInput(last_x=6))
    unit = mouse.relative_position.x
    mouse.update_holds()
    mouse.sensitivity = 3.0
    mouse.update(RawMouseInput(last_x=6))
    assert mouse.relative_position.x == pytest.approx(unit * 3.0)


def test_absolute_position_clamped_to_bounds(mouse):
    mouse.set_absolute_position_bounds(100, 50)
    mouse.update(RawMouseInput(last_x=500, last_y=-20))
    assert (mouse.absolute_position.x, mouse.absolute_position.y) == (100.0, 0.0)


def test_absolute_position_moves_within_bounds(mouse):
    mouse.set_absolute_position_bounds(100, 50)
    mouse.set_absolute_position(10, 10)
    mouse.update(RawMouseInput(last_x=5, last_y=3))
    assert (mouse.absolute_position.x, mouse.absolute_position.y) == (15.0, 13.0)


def test_set_absolute_position(mouse):
    mouse.set_absolute_position(30, 40)
    assert (mouse.absolute_position.x, mouse.absolute_position.y) == (30.0, 40.0)


def test_sleep_releases_buttons_and_ignores_input(mouse):
    mouse.update(press(RawMouseFlag.BUTTON_1_DOWN))
    mouse.update_holds()
    mouse.sleep()
    assert not mouse.is_awake
    assert not mouse.button_down(MouseButton.LEFT)
    assert not mouse.button_held(MouseButton.LEFT)
    mouse.update(press(RawMouseFlag.BUTTON_3_DOWN))
    assert not mouse.button_down(MouseButton.MIDDLE)


def test_wake_resumes_input(mouse):
    mouse.sleep()
    mouse.wake()
    mouse.update(press(RawMouseFlag.BUTTON_3_DOWN))
    assert mouse.is_awake
    assert mouse.button_down(MouseButton.MIDDLE)


def test_invalid_button_rejected(mouse):
    with pytest.raises(ValueError):
        mouse.button_down(7)