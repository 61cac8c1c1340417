"""High-level Formatter API for prettynumber.

Wraps scale resolution and digit rounding behind a single call that turns
a byte count into a compact string such as ``"54.1K"``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from prettynumber.core.digits import normalize, render_digits, round_half_up
from prettynumber.core.models import (
    DEFAULT_SIGNIFICANT_DIGITS,
    SCALES,
    FormattedSize,
    FormatterConfig,
    Scale,
)
from prettynumber.core.scale import MAX_SUPPORTED_SIZE, resolve_scale
from prettynumber.errors import OutOfRangeError

logger = logging.getLogger(__name__)


class Formatter:
    """Format byte counts with B/K/M/G suffixes.

    Args:
        max_significant_digits: Digits kept in the numeric part (default 3).

    Example:
        >>> fmt = Formatter()
        >>> fmt.format(5_915_000)
        '5.92M'
        >>> Formatter(max_significant_digits=2).format(54_123)
        '54K'
    """

    def __init__(self, max_significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> None:
        self.config = FormatterConfig(max_significant_digits=max_significant_digits)

    @classmethod
    def from_config(cls, path: Union[str, Path]) -> "Formatter":
        """Build a formatter from a YAML config file.

        See :func:`prettynumber.loader.load_config` for the file layout.
        """
        from prettynumber.loader import load_config

        config = load_config(path)
        return cls(max_significant_digits=config.max_significant_digits)

    @property
    def max_significant_digits(self) -> int:
        return self.config.max_significant_digits

    def format(self, number_of_bytes: int) -> str:
        """Format a byte count, e.g. ``10054 → '10.1K'``.

        Raises:
            OutOfRangeError: If ``number_of_bytes`` is negative or above
                ``MAX_SUPPORTED_SIZE``.
            TypeError: If ``number_of_bytes`` is not an integer.
        """
        return str(self.format_parts(number_of_bytes))

    def format_parts(self, number_of_bytes: int) -> FormattedSize:
        """Format a byte count, keeping the number and unit apart."""
        _check_number_of_bytes(number_of_bytes)

        if number_of_bytes == 0:
            result = FormattedSize(number="0", scale=Scale.BYTES)
        elif number_of_bytes == MAX_SUPPORTED_SIZE:
            result = FormattedSize(number="1", scale=Scale.GIGA)
        else:
            scaled = resolve_scale(number_of_bytes)
            buffer = render_digits(scaled.reduced)
            rounded = round_half_up(buffer, self.max_significant_digits)
            number, scale_index = normalize(rounded, scaled.scale_index)
            result = FormattedSize(number=number, scale=SCALES[scale_index])

        logger.debug(
            "Formatted %d bytes as %s (%d significant digits)",
            number_of_bytes, result, self.max_significant_digits,
        )
        return result

    def __repr__(self) -> str:
        return f"Formatter(max_significant_digits={self.max_significant_digits})"


def _check_number_of_bytes(number_of_bytes: int) -> None:
    if isinstance(number_of_bytes, bool) or not isinstance(number_of_bytes, int):
        raise TypeError(
            f"number_of_bytes must be an int, got {type(number_of_bytes).__name__}"
        )
    if number_of_bytes < 0 or number_of_bytes > MAX_SUPPORTED_SIZE:
        raise OutOfRangeError("number_of_bytes", number_of_bytes, 0, MAX_SUPPORTED_SIZE)


def format_bytes(
    number_of_bytes: int,
    max_significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    """Format a byte count with at most ``max_significant_digits`` digits.

    Examples:
        341 → '341B'
        34_200 → '34.2K'
        567_900 → '568K'
        999_999 → '1M'
    """
    return Formatter(max_significant_digits).format(number_of_bytes)
