"""
errors.py: Exception types raised by the widget.
"""


class FlappyWidgetError(Exception):
    """Base class for widget errors."""


class InvariantViolation(FlappyWidgetError):
    """A game-state invariant was broken while running in strict mode."""
