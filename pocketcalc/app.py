"""Desktop window for the calculator and the command that opens it."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Sequence

from pocketcalc.buttons import ButtonState, button_layout
from pocketcalc.calculator import (
    BORDER_BLACK,
    ButtonStyle,
    Calculator,
    Interaction,
)
from pocketcalc.operation import OperationError

logger = logging.getLogger(__name__)

TITLE = "Calculator"
WINDOW_WIDTH = 330
WINDOW_HEIGHT = 315
COLUMNS = 4
ROWS = 6

_BACKGROUND = "#000000"
_RESULT_BACKGROUND = ButtonState.HOVERED.hex()
_TEXT_COLOUR = "#ffffff"


def grid_positions() -> tuple[tuple[str, int, int], ...]:
    """Each button label with its 1-based grid row and column; row 1 holds the result."""
    return tuple(
        (label, index // COLUMNS + 2, index % COLUMNS + 1)
        for index, label in enumerate(button_layout())
    )


@dataclass
class _KeypadButton:
    widget: Any
    interaction: Interaction = Interaction.NONE
    style: ButtonStyle = ButtonStyle()


class CalculatorWindow:
    """A fixed-size, undecorated window showing the display and the keypad."""

    def __init__(self, calculator: Calculator | None = None) -> None:
        import tkinter as tk

        self.calculator = calculator if calculator is not None else Calculator()
        self._root = root = tk.Tk()
        root.title(TITLE)
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        root.resizable(False, False)
        root.configure(bg=_BACKGROUND)
        try:
            root.overrideredirect(True)
            root.attributes("-alpha", 0.8)
        except tk.TclError:
            logger.debug("Window transparency is not available")
        root.bind("<Escape>", lambda _event: root.destroy())

        for column in range(COLUMNS):
            root.grid_columnconfigure(column, weight=1, uniform="column")
        for row in range(ROWS):
            root.grid_rowconfigure(row, weight=1, uniform="row")

        self._display = tk.StringVar(value=self.calculator.display)
        result = tk.Label(
            root,
            textvariable=self._display,
            fg=_TEXT_COLOUR,
            bg=_RESULT_BACKGROUND,
            highlightthickness=2,
            highlightbackground=BORDER_BLACK,
            highlightcolor=BORDER_BLACK,
        )
        result.grid(row=0, column=0, columnspan=COLUMNS, sticky="nsew", padx=(3, 10), pady=3)

        self._buttons: dict[str, _KeypadButton] = {}
        for label, row, column in grid_positions():
            widget = tk.Label(root, text=label, fg=_TEXT_COLOUR, highlightthickness=2)
            widget.grid(row=row - 1, column=column - 1, sticky="nsew", padx=3, pady=3)
            widget.bind("<Enter>", lambda _e, name=label: self._interact(name, Interaction.HOVERED))
            widget.bind("<Leave>", lambda _e, name=label: self._interact(name, Interaction.NONE))
            widget.bind(
                "<ButtonPress-1>", lambda _e, name=label: self._interact(name, Interaction.PRESSED)
            )
            widget.bind("<ButtonRelease-1>", lambda _e, name=label: self._release(name))
            button = _KeypadButton(widget)
            self._buttons[label] = button
            self._paint(button)

    def _release(self, label: str) -> None:
        if self._buttons[label].interaction is Interaction.PRESSED:
            self._interact(label, Interaction.HOVERED)

    def _interact(self, label: str, interaction: Interaction) -> None:
        button = self._buttons[label]
        button.interaction = interaction

        if interaction is Interaction.PRESSED:
            try:
                self.calculator.press(label)
            except OperationError as exc:
                logger.error("Button %s failed: %s", label, exc)
            self._display.set(self.calculator.display)

        button.style = self.calculator.interaction_style(label, interaction, button.style)
        for name, other in self._buttons.items():
            other.style = self.calculator.refresh_style(name, other.interaction, other.style)
            self._paint(other)

    @staticmethod
    def _paint(button: _KeypadButton) -> None:
        button.widget.configure(
            bg=button.style.background.hex(),
            highlightbackground=button.style.border,
            highlightcolor=button.style.border,
        )

    def run(self) -> None:
        """Show the window until it is closed or Escape is pressed."""
        self._root.mainloop()


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Read the command-line options."""
    parser = argparse.ArgumentParser(prog="pocketcalc", description="A small desktop calculator.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every button interaction"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the calculator window."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    CalculatorWindow().run()
    return 0