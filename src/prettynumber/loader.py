"""Load demo samples and formatter settings from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml

from prettynumber.core.models import FormatterConfig, Sample

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

# Module-level cache
_samples_cache: Optional[List[Sample]] = None


def _load_yaml(path: Path) -> dict:
    """Load a YAML file, treating an empty file as an empty mapping."""
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    logger.debug("Loaded %s", path)
    return data or {}


def load_samples() -> List[Sample]:
    """Load the bundled demonstration samples from samples.yaml.

    Returns:
        Samples in file order, each with the expected formatted string.
    """
    global _samples_cache
    if _samples_cache is not None:
        return _samples_cache

    data = _load_yaml(_DATA_DIR / "samples.yaml")
    samples = [Sample(**entry) for entry in data.get("samples", [])]

    _samples_cache = samples
    return samples


def list_sample_values() -> List[int]:
    """List the byte counts of all bundled samples."""
    return [s.number_of_bytes for s in load_samples()]


def load_config(path: Union[str, Path]) -> FormatterConfig:
    """Load formatter settings from a YAML file.

    The file holds a ``formatter`` mapping::

        formatter:
          max_significant_digits: 4

    Missing keys fall back to the defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file has unknown keys or invalid values.
    """
    data = _load_yaml(Path(path))
    section = data.get("formatter", {}) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'formatter' in {path} must be a mapping")

    known = set(FormatterConfig.__dataclass_fields__)
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(
            f"Unknown formatter setting(s) in {path}: {', '.join(unknown)}. "
            f"Known settings: {', '.join(sorted(known))}"
        )
    return FormatterConfig(**section)
