"""The calculator's ongoing operation: operands, operator and evaluation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from pocketcalc.buttons import ADD_BUTTON, DIVIDE_BUTTON, MULTIPLY_BUTTON, SUB_BUTTON

logger = logging.getLogger(__name__)


class OperationError(ValueError):
    """Raised when an operand cannot be read or an operation is incomplete."""


def _parse_number(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise OperationError(f"invalid number: {text!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise OperationError(f"invalid number: {text!r}") from exc


class CalcOperator(Enum):
    """All the operators the calculator knows."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value

    def button(self) -> str:
        """The label of the button that selects this operator."""
        return {
            CalcOperator.ADD: ADD_BUTTON,
            CalcOperator.SUB: SUB_BUTTON,
            CalcOperator.MUL: MULTIPLY_BUTTON,
            CalcOperator.DIV: DIVIDE_BUTTON,
        }[self]

    def apply(self, left: float, right: float) -> float:
        """Apply the operator with IEEE semantics; division by zero gives inf or nan."""
        if self is CalcOperator.ADD:
            return left + right
        if self is CalcOperator.SUB:
            return left - right
        if self is CalcOperator.MUL:
            return left * right
        if right == 0:
            if left == 0 or math.isnan(left):
                return math.nan
            return math.copysign(math.inf, left) * math.copysign(1.0, right)
        return left / right


@dataclass
class OperationMetadata:
    """State of the operation being typed in."""

    left_operand: float | None = None
    right_operand: float | None = None
    operator: CalcOperator | None = None

    def set_operand(self, operand: str) -> None:
        """Store the operand on the side currently being typed."""
        if self.is_under_operation():
            self._set_right_operand(operand)
        else:
            self.set_left_operand(operand)

    def set_left_operand(self, left_operand: str) -> None:
        """Parse and store the left operand."""
        self.left_operand = _parse_number(left_operand)

    def _set_right_operand(self, right_operand: str) -> None:
        self.right_operand = _parse_number(right_operand)

    def set_operator(self, operator: CalcOperator) -> None:
        """Select the operator."""
        self.operator = operator

    def calculate(self) -> float:
        """Evaluate the operation; raise OperationError if a part is missing."""
        if self.left_operand is None:
            raise OperationError("Left operand not found")
        if self.right_operand is None:
            raise OperationError("Right operand not found")
        if self.operator is None:
            raise OperationError("Operator not found")

        result = self.operator.apply(self.left_operand, self.right_operand)
        logger.info(
            "Calculating: %s %s %s = %s",
            self.left_operand,
            self.operator,
            self.right_operand,
            result,
        )
        return result

    def is_new_operand(self) -> bool:
        """Whether the operand being typed has not been started yet."""
        if self.is_under_operation():
            return self.right_operand is None
        return self.left_operand is None

    def is_under_operation(self) -> bool:
        """Whether an operator has been chosen."""
        return self.operator is not None

    def reset(self) -> None:
        """Forget operands and operator."""
        self.left_operand = None
        self.right_operand = None
        self.operator = None