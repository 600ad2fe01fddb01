"""A pocket calculator: a keypad window and the calculation engine behind it."""

__version__ = "1.0.0"