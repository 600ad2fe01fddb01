"""Keypad behaviour: what each button press does to the display and the operation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Iterable

from pocketcalc.buttons import (
    CLEAR_BUTTON,
    DIGIT_BUTTONS,
    DOT_BUTTON,
    EQUAL_BUTTON,
    INVERT_BUTTON,
    POURCENT_BUTTON,
    ZERO_BUTTON,
    ButtonState,
)
from pocketcalc.operation import CalcOperator, OperationMetadata

logger = logging.getLogger(__name__)

BORDER_BLACK = "#000000"
BORDER_WHITE = "#ffffff"

_OPERATOR_BUTTONS = {operator.button(): operator for operator in CalcOperator}


class Interaction(Enum):
    """What the pointer is doing with a button."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class ButtonStyle:
    """Background and border colour of a button."""

    background: ButtonState = ButtonState.NORMAL
    border: str = BORDER_BLACK


_NORMAL_STYLE = ButtonStyle()


def format_number(value: float) -> str:
    """Render a number the way the display shows it: no exponent, no trailing ``.0``."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _read_display(text: str) -> float:
    probe = OperationMetadata()
    probe.set_left_operand(text)
    assert probe.left_operand is not None
    return probe.left_operand


@dataclass
class Calculator:
    """The calculator's display text together with the operation being typed in."""

    display: str = ZERO_BUTTON
    operation: OperationMetadata = field(default_factory=OperationMetadata)

    def press(self, label: str) -> str:
        """Handle a press of the button with this label and return the new display."""
        logger.debug("Clicking on button: %s", label)

        if label in DIGIT_BUTTONS:
            self._press_digit(label)
        elif label == CLEAR_BUTTON:
            self.display = ZERO_BUTTON
            self.operation.reset()
        elif label == INVERT_BUTTON:
            if self.display.startswith("-"):
                self.display = self.display[1:]
            elif self.display != ZERO_BUTTON:
                self.display = "-" + self.display
        elif label == POURCENT_BUTTON:
            value = _read_display(self.display)
            result = value / 100.0
            logger.info("Calculating: %s %s = %s", value, "%", result)
            self.display = format_number(result)
            self.operation.reset()
        elif label in _OPERATOR_BUTTONS:
            # An operator may be chosen before any digit has been typed.
            if self.operation.left_operand is None:
                self.operation.set_left_operand(self.display)
            self.operation.set_operator(_OPERATOR_BUTTONS[label])
        elif label == DOT_BUTTON:
            if "." not in self.display:
                self.display += "."
        elif label == EQUAL_BUTTON:
            if self.operation.is_under_operation():
                result = self.operation.calculate()
                self.display = format_number(result)
                self.operation.reset()
        return self.display

    def _press_digit(self, digit: str) -> None:
        if self.display == ZERO_BUTTON or self.operation.is_new_operand():
            self.display = digit
        else:
            self.display += digit
        self.operation.set_operand(self.display)

    def press_all(self, labels: Iterable[str]) -> str:
        """Press each button in turn and return the final display."""
        for label in labels:
            self.press(label)
        return self.display

    def interaction_style(
        self, label: str, interaction: Interaction, current: ButtonStyle
    ) -> ButtonStyle:
        """Style of a button right after its interaction changed."""
        logger.debug("Interaction '%s' on button: %s", interaction.name, label)

        if interaction is Interaction.PRESSED:
            return replace(current, background=ButtonState.PRESSED)
        if interaction is Interaction.HOVERED:
            return ButtonStyle(ButtonState.HOVERED, BORDER_WHITE)

        # The button of the current operator stays highlighted.
        operator = self.operation.operator
        if operator is not None and operator.button() == label:
            return current
        return _NORMAL_STYLE

    def refresh_style(
        self, label: str, interaction: Interaction, current: ButtonStyle
    ) -> ButtonStyle:
        """Style of a button given the state of the ongoing operation."""
        operator = self.operation.operator
        if (
            self.operation.is_under_operation()
            and operator is not None
            and operator.button() == label
        ):
            return replace(current, border=BORDER_WHITE)
        if interaction is not Interaction.HOVERED:
            return _NORMAL_STYLE
        return current