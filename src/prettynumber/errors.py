"""Exceptions raised by prettynumber."""

from __future__ import annotations


class OutOfRangeError(ValueError):
    """An argument lies outside its supported range.

    Attributes:
        argument: Name of the offending argument.
        value: The rejected value.
    """

    def __init__(self, argument: str, value: int, low: int, high: int) -> None:
        self.argument = argument
        self.value = value
        super().__init__(
            f"{argument} must be between {low:,} and {high:,}, got {value:,}"
        )
