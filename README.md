# pocketcalc

A small borderless desktop calculator with the keypad of a classic pocket
calculator, plus the calculation engine behind it as a plain Python library.

## The keypad

```
 C   +/-   %   /
 7    8    9   *
 4    5    6   -
 1    2    3   +
 0    .    =
```

- Digits build up the number on the display. A leading `0` is replaced
  instead of being extended. The first digit after an operator starts the
  right-hand operand. The first digit after a result starts a new number.
- `.` adds a decimal point if the number does not have one yet.
- `+/-` flips the sign of the displayed number. It does nothing while the
  display shows `0`.
- `%` divides the displayed number by 100 and starts a fresh calculation.
- `/`, `*`, `-` and `+` choose the operator. If no number has been entered
  yet, the number on the display becomes the left operand. The chosen
  operator's button keeps a white border until the calculation finishes.
- `=` works out the pending calculation and shows the result. Dividing by
  zero shows `inf`, `-inf` or `NaN`.
- `C` clears the display and any pending calculation.
- `Esc` closes the window.

## Running it

Install the package, then start the window:

```
pip install .
pocketcalc
```

The window is 330 by 315 pixels, cannot be resized, has no title bar and is
drawn at 80% opacity where the window system allows it. It uses Tk, so the
Python installation must include `tkinter`.

Pass `-v` or `--verbose` to log every button interaction at debug level;
without it, calculations are logged at info level.

## Using the engine

The calculator's logic can be driven without a window, which makes it easy to
script or test:

```python
from pocketcalc.calculator import Calculator, format_number
from pocketcalc.operation import CalcOperator, OperationMetadata

calc = Calculator()
calc.press_all(["1", "2", "+", "3", "="])   # returns "15"
calc.press("%")                             # returns "0.15"

op = OperationMetadata()
op.set_left_operand("7")
op.set_operator(CalcOperator.MUL)
op.set_operand("6")
format_number(op.calculate())               # "42"
```

- `Calculator.press(label)` handles one button by its label and returns the
  new display text; `Calculator.press_all(labels)` presses several in turn.
- `Calculator.interaction_style` and `Calculator.refresh_style` give the
  `ButtonStyle` (background `ButtonState` and border colour) a button should
  have for a given `Interaction`, the same rules the window uses.
- `OperationMetadata.calculate` raises `OperationError` when the left operand,
  the right operand or the operator is missing; setting an operand from text
  that is not a number raises it too.
- `format_number` shows numbers the short way: no exponent and no trailing
  `.0` on whole results.
- `pocketcalc.buttons.button_layout()` gives the keypad labels row by row,
  and `pocketcalc.app.grid_positions()` pairs each label with its grid row
  and column.

## Tests

```
pip install .[test]
pytest
```