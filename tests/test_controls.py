from __future__ import annotations

import pytest

from desertdash.app.controls import ControlState
from desertdash.domain.input_state import InputState


def test_nothing_held():
    assert ControlState().sample() == InputState()


@pytest.mark.parametrize(
    "keysym, expected",
    [
        ("Left", InputState(left=True)),
        ("a", InputState(left=True)),
        ("Right", InputState(right=True)),
        ("D", InputState(right=True)),
        ("Up", InputState(jump=True)),
        ("space", InputState(jump=True)),
        ("q", InputState()),
    ],
)
def test_keys(keysym, expected):
    controls = ControlState()
    controls.key_down(keysym)
    assert controls.sample() == expected


def test_held_until_released():
    controls = ControlState()
    controls.key_down("Right")
    assert controls.sample().right
    assert controls.sample().right  # sampling does not consume

    controls.key_up("Right")
    assert not controls.sample().right


def test_two_keys_same_control():
    controls = ControlState()
    controls.key_down("Left")
    controls.key_down("a")
    controls.key_up("Left")
    assert controls.sample().left


def test_on_screen_buttons():
    controls = ControlState()
    controls.press("jump")
    controls.key_down("Right")
    assert controls.sample() == InputState(right=True, jump=True)

    controls.release("jump")
    assert controls.sample() == InputState(right=True)


def test_unknown_button():
    with pytest.raises(ValueError):
        ControlState().press("fire")


def test_release_all():
    controls = ControlState()
    controls.key_down("Left")
    controls.press("jump")
    controls.release_all()
    assert controls.sample() == InputState()


@pytest.mark.parametrize("pressed, released", [("d", "D"), ("D", "d"), ("a", "A"), ("w", "W")])
def test_shift_between_press_and_release(pressed, released):
    controls = ControlState()
    controls.key_down(pressed)
    controls.key_up(released)
    assert controls.sample() == InputState()


def test_custom_keymap_letters_case_insensitive():
    controls = ControlState({"J": "jump"})
    controls.key_down("j")
    assert controls.sample().jump
    controls.key_up("J")
    assert not controls.sample().jump
