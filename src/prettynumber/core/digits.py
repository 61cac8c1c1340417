"""Digit rendering and significant-digit rounding.

The reduced value from scale resolution is turned into a digit buffer
(a list of single characters, most significant first, with at most one
decimal point), rounded half-up to the significant-digit budget and
normalized into the final numeric text.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from prettynumber.core.models import SCALES
from prettynumber.core.scale import SCALE_DIGITS

logger = logging.getLogger(__name__)

DECIMAL_POINT = "."


def render_digits(reduced: int) -> List[str]:
    """Render a reduced value into a digit buffer.

    The last ``SCALE_DIGITS`` digits are the sub-scale remainder, so a
    decimal point goes in front of them when more digits follow.

    Examples:
        341 → ['3', '4', '1']
        10054 → ['1', '0', '.', '0', '5', '4']
    """
    buffer: List[str] = []
    while reduced:
        if len(buffer) == SCALE_DIGITS:
            buffer.append(DECIMAL_POINT)
        reduced, digit = divmod(reduced, 10)
        buffer.append(str(digit))

    buffer.reverse()
    return buffer or ["0"]


def _first_dropped(buffer: List[str], budget: int) -> Optional[int]:
    """Index of the first digit past the budget, or None if all fit."""
    kept = 0
    for index, char in enumerate(buffer):
        if char == DECIMAL_POINT:
            continue
        if kept == budget:
            return index
        kept += 1
    return None


def round_half_up(buffer: List[str], budget: int) -> List[str]:
    """Round a digit buffer to ``budget`` significant digits.

    Digits past the budget are replaced by zeros. When the first of them
    is 5 or more, a carry walks left over the kept digits, stepping over
    the decimal point; a carry out of the leading digit prepends a '1'.

    Args:
        buffer: Digit buffer from :func:`render_digits`.
        budget: Number of significant digits to keep (>= 1).

    Returns:
        A new rounded buffer. The input is left untouched.
    """
    rounded = list(buffer)
    cut = _first_dropped(rounded, budget)
    if cut is None:
        return rounded

    carry = rounded[cut] >= "5"
    for index in range(cut, len(rounded)):
        if rounded[index] != DECIMAL_POINT:
            rounded[index] = "0"

    index = cut - 1
    while carry and index >= 0:
        if rounded[index] != DECIMAL_POINT:
            digit = int(rounded[index]) + 1
            carry = digit == 10
            rounded[index] = str(digit % 10)
        index -= 1

    if carry:
        rounded.insert(0, "1")
    return rounded


def integer_length(buffer: List[str]) -> int:
    """Number of digits before the decimal point."""
    if DECIMAL_POINT in buffer:
        return buffer.index(DECIMAL_POINT)
    return len(buffer)


def normalize(buffer: List[str], scale_index: int) -> Tuple[str, int]:
    """Turn a rounded buffer into the final numeric text.

    A buffer whose integer part no longer fits the scale (999 rounded up to
    1000) is promoted to the next scale as "1". Otherwise trailing
    fractional zeros and a dangling decimal point are stripped.

    Returns:
        Tuple of (numeric text, final scale index).
    """
    if integer_length(buffer) > SCALE_DIGITS:
        logger.debug(
            "Rounding overflowed %s, promoting to %s",
            SCALES[scale_index].value,
            SCALES[scale_index + 1].value,
        )
        return "1", scale_index + 1

    text = "".join(buffer)
    if DECIMAL_POINT in text:
        text = text.rstrip("0").rstrip(DECIMAL_POINT)
    return text, scale_index
