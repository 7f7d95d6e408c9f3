"""Pluggable type conversions for decoding document store values."""
from __future__ import annotations

from typing import Any, TypeVar

from typedecode.conversions import ConversionRegistry, ConversionRule, register_defaults
from typedecode.core import (
    ExactFormat,
    FormatPattern,
    InvalidStateError,
    NoApplicableConverterError,
    RegexFormat,
    SourceCheck,
    TypedecodeError,
)
from typedecode.dependencies import get_default_registry

T = TypeVar("T")

__version__ = "0.1.0"


def convert(value: Any, destination: type[T], format: str | None = None) -> T:
    """Convert ``value`` with the default registry."""
    return get_default_registry().convert(value, destination, format)


__all__ = [
    "ConversionRegistry",
    "ConversionRule",
    "ExactFormat",
    "FormatPattern",
    "InvalidStateError",
    "NoApplicableConverterError",
    "RegexFormat",
    "SourceCheck",
    "TypedecodeError",
    "convert",
    "get_default_registry",
    "register_defaults",
]
