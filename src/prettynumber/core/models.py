"""Data models for prettynumber configuration and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_SIGNIFICANT_DIGITS = 3


class Scale(str, Enum):
    """Unit suffixes, in increasing order of magnitude (x1000 each)."""
    BYTES = "B"
    KILO = "K"
    MEGA = "M"
    GIGA = "G"

    @property
    def position(self) -> int:
        """Scale index, 0 for bytes."""
        return SCALES.index(self)

    @property
    def multiplier(self) -> int:
        return 1000 ** self.position


SCALES = list(Scale)


@dataclass(frozen=True)
class ScaledValue:
    """A byte count reduced to a scale.

    ``reduced`` carries up to three integer digits of the scale followed by
    the three digits of the remainder left over from the last division.
    """
    reduced: int
    scale_index: int

    @property
    def scale(self) -> Scale:
        return SCALES[self.scale_index]


@dataclass(frozen=True)
class FormattedSize:
    """Numeric text and unit of a formatted byte count."""
    number: str
    scale: Scale

    def __str__(self) -> str:
        return f"{self.number}{self.scale.value}"


@dataclass(frozen=True)
class FormatterConfig:
    """Formatter settings."""
    max_significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS

    def __post_init__(self) -> None:
        digits = self.max_significant_digits
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 1:
            raise ValueError(
                f"max_significant_digits must be a positive integer, got {digits!r}"
            )


@dataclass(frozen=True)
class Sample:
    """A demonstration value with its expected rendering."""
    number_of_bytes: int
    expected: str
    note: str = ""
