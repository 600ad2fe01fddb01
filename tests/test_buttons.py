import pytest

from pocketcalc.buttons import (
    ADD_BUTTON,
    CLEAR_BUTTON,
    DIGIT_BUTTONS,
    DIVIDE_BUTTON,
    EQUAL_BUTTON,
    MULTIPLY_BUTTON,
    SUB_BUTTON,
    ButtonState,
    button_layout,
)


def _channels(hex_value):
    return [int(hex_value[i : i + 2], 16) for i in (1, 3, 5)]


def test_layout_starts_with_clear_and_ends_with_equal():
    layout = button_layout()
    assert layout[0] == CLEAR_BUTTON
    assert layout[-1] == EQUAL_BUTTON


def test_layout_has_no_duplicates():
    layout = button_layout()
    assert len(set(layout)) == len(layout)


def test_layout_contains_every_digit():
    assert set(DIGIT_BUTTONS) <= set(button_layout())


def test_operators_close_their_rows():
    layout = button_layout()
    last_column = [layout[i] for i in range(3, len(layout), 4)]
    assert last_column == [DIVIDE_BUTTON, MULTIPLY_BUTTON, SUB_BUTTON, ADD_BUTTON]


def test_layout_size():
    assert len(button_layout()) == 19


@pytest.mark.parametrize(
    "state",
    [ButtonState.NORMAL, ButtonState.HOVERED, ButtonState.PRESSED],
)
def test_hex_format(state):
    hex_value = state.hex()
    assert len(hex_value) == 7
    assert hex_value[0] == "#"
    assert f"#{int(hex_value[1:], 16):06x}" == hex_value


@pytest.mark.parametrize(
    "state",
    [ButtonState.NORMAL, ButtonState.HOVERED, ButtonState.PRESSED],
)
def test_hex_is_grey(state):
    red, green, blue = _channels(state.hex())
    assert red == green == blue


def test_hex_pressed():
    assert ButtonState.PRESSED.hex() == "#bfbfbf"


def test_states_get_brighter():
    normal = int(ButtonState.NORMAL.hex()[1:3], 16)
    hovered = int(ButtonState.HOVERED.hex()[1:3], 16)
    pressed = int(ButtonState.PRESSED.hex()[1:3], 16)
    assert normal < hovered < pressed


def test_rgb_matches_value():
    assert ButtonState.HOVERED.rgb == (0.25, 0.25, 0.25)
    assert ButtonState.PRESSED.rgb == (0.75, 0.75, 0.75)
    assert ButtonState.PRESSED.hex() == "#bfbfbf"