"""Centralized configuration constants for the decoder.

Values that callers may want to tune come from the environment; everything
else is a plain constant shared by the registry and the default rule set.
"""

from __future__ import annotations

import os


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class ConversionConfig:
    """Configuration constants for registration and the default converters."""

    # Format names understood by the default rule set
    EPOCH_FORMAT = "epoch"
    STRING_FORMAT = "string"
    RADIX_PREFIX = "radix:"
    RADIX_PATTERN = r"radix:(\d+)"

    # Catch-all pattern for date formats (e.g. "yyyy-MM-dd")
    DATE_PATTERN_FORMAT = r".*"

    # Log a warning when a new rule hides an earlier one with the same
    # source check and format for the same destination type
    WARN_ON_SHADOWED_RULES = _env_flag("TYPEDECODE_WARN_ON_SHADOWED_RULES", default=False)
