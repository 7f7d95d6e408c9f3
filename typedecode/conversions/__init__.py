"""Value conversion system.

Provides the conversion registry and the default rule set used to decode
loosely-typed document values.
"""
from typedecode.conversions.registry import (
    ConversionRegistry,
    ConversionRule,
)
from typedecode.conversions.defaults import register_defaults

__all__ = [
    "ConversionRegistry",
    "ConversionRule",
    "register_defaults",
]
