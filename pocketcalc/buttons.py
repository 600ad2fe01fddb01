"""Button labels, button colours and the keypad layout."""

from __future__ import annotations

from enum import Enum

CLEAR_BUTTON = "C"
INVERT_BUTTON = "+/-"
POURCENT_BUTTON = "%"
DIVIDE_BUTTON = "/"
MULTIPLY_BUTTON = "*"
SUB_BUTTON = "-"
ADD_BUTTON = "+"
EQUAL_BUTTON = "="
DOT_BUTTON = "."
ZERO_BUTTON = "0"
ONE_BUTTON = "1"
TWO_BUTTON = "2"
THREE_BUTTON = "3"
FOUR_BUTTON = "4"
FIVE_BUTTON = "5"
SIX_BUTTON = "6"
SEVEN_BUTTON = "7"
EIGHT_BUTTON = "8"
NINE_BUTTON = "9"

DIGIT_BUTTONS = (
    ZERO_BUTTON,
    ONE_BUTTON,
    TWO_BUTTON,
    THREE_BUTTON,
    FOUR_BUTTON,
    FIVE_BUTTON,
    SIX_BUTTON,
    SEVEN_BUTTON,
    EIGHT_BUTTON,
    NINE_BUTTON,
)

_LAYOUT = (
    # Row 1
    CLEAR_BUTTON,
    INVERT_BUTTON,
    POURCENT_BUTTON,
    DIVIDE_BUTTON,
    # Row 2
    SEVEN_BUTTON,
    EIGHT_BUTTON,
    NINE_BUTTON,
    MULTIPLY_BUTTON,
    # Row 3
    FOUR_BUTTON,
    FIVE_BUTTON,
    SIX_BUTTON,
    SUB_BUTTON,
    # Row 4
    ONE_BUTTON,
    TWO_BUTTON,
    THREE_BUTTON,
    ADD_BUTTON,
    # Row 5
    ZERO_BUTTON,
    DOT_BUTTON,
    EQUAL_BUTTON,
)


class ButtonState(Enum):
    """Background colour of a button for each of its states, as sRGB floats."""

    NORMAL = (0.15, 0.15, 0.15)
    HOVERED = (0.25, 0.25, 0.25)
    PRESSED = (0.75, 0.75, 0.75)

    @property
    def rgb(self) -> tuple[float, float, float]:
        """The red, green and blue channels in the range 0..1."""
        return self.value

    def hex(self) -> str:
        """The colour as a ``#rrggbb`` string."""
        return "#" + "".join(f"{round(channel * 255):02x}" for channel in self.value)


def button_layout() -> tuple[str, ...]:
    """Button labels of the keypad, row by row, four per row."""
    return _LAYOUT