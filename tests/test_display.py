"""Tests for Rich display helpers."""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from prettynumber import Formatter, Sample, load_samples
from prettynumber.cli import display


@pytest.fixture
def output(monkeypatch):
    """Redirect the display console to a plain-text buffer."""
    buffer = io.StringIO()
    monkeypatch.setattr(display, "console", Console(file=buffer, width=120, color_system=None))
    return buffer


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("prettynumber")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestDisplay:

    def test_print_samples(self, output):
        display.print_samples(load_samples())
        out = output.getvalue()
        assert "5.92M" in out
        assert "differ" not in out

    def test_print_samples_reports_mismatch(self, output):
        display.print_samples([Sample(number_of_bytes=341, expected="0.3K")])
        assert "1 sample(s) differ" in output.getvalue()

    def test_print_samples_custom_budget(self, output):
        display.print_samples([Sample(341, "340B")], Formatter(2))
        out = output.getvalue()
        assert "2 digits" in out
        assert "differ" not in out

    def test_budget_sweep(self, output):
        display.print_budget_sweep(999_999, budgets=[3, 6])
        out = output.getvalue()
        assert "1M" in out
        assert "999.999K" in out

    def test_header(self, output):
        display.print_header()
        assert "prettynumber" in output.getvalue()

    def test_setup_logging(self, clean_logger):
        display.setup_logging("debug")
        assert clean_logger.level == logging.DEBUG
        assert len(clean_logger.handlers) == 1
        assert isinstance(clean_logger.handlers[0], RichHandler)


class TestFormattingHelpers:

    def test_format_byte_count(self):
        from prettynumber.utils.formatting import format_byte_count

        assert format_byte_count(5_915_000) == "5,915,000 B"

    def test_format_digits(self):
        from prettynumber.utils.formatting import format_digits

        assert format_digits(1) == "1 digit"
        assert format_digits(3) == "3 digits"
