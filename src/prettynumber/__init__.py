"""prettynumber: compact, human-readable byte counts.

Quick start:
    >>> from prettynumber import format_bytes
    >>> format_bytes(54_123)
    '54.1K'
    >>> format_bytes(999_999)
    '1M'
"""

from prettynumber.core.models import (
    DEFAULT_SIGNIFICANT_DIGITS,
    SCALES,
    FormattedSize,
    FormatterConfig,
    Sample,
    Scale,
    ScaledValue,
)
from prettynumber.core.scale import MAX_SUPPORTED_SIZE, SCALE_BASE
from prettynumber.errors import OutOfRangeError
from prettynumber.formatter import Formatter, format_bytes
from prettynumber.loader import list_sample_values, load_config, load_samples

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Formatter",
    "format_bytes",
    # Data models
    "FormattedSize",
    "FormatterConfig",
    "ScaledValue",
    "Sample",
    # Enums and constants
    "Scale",
    "SCALES",
    "SCALE_BASE",
    "MAX_SUPPORTED_SIZE",
    "DEFAULT_SIGNIFICANT_DIGITS",
    # Errors
    "OutOfRangeError",
    # Data loaders
    "load_samples",
    "list_sample_values",
    "load_config",
]
