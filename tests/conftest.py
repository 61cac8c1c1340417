"""Shared test fixtures."""

import pytest
from prettynumber import Formatter


@pytest.fixture
def formatter():
    """Formatter with the default budget of 3 significant digits."""
    return Formatter()


@pytest.fixture
def two_digit_formatter():
    """Formatter keeping 2 significant digits."""
    return Formatter(max_significant_digits=2)


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(text):
        path = tmp_path / "prettynumber.yaml"
        path.write_text(text)
        return path
    return _write
