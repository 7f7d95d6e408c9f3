"""Exceptions raised by the conversion registry.

Converter callables raise their own errors (``ValueError`` for malformed
text, pydantic ``ValidationError`` for bad URLs, ...). Those are never
wrapped and reach the caller unchanged.
"""
from __future__ import annotations

from typing import Any


class TypedecodeError(Exception):
    """Base class for all exceptions raised by the registry itself."""

    pass


class InvalidStateError(TypedecodeError, RuntimeError):
    """Raised when an operation is not allowed in the registry's lifecycle state.

    Registering on a sealed registry and converting with an open one both
    raise this.
    """

    pass


class NoApplicableConverterError(TypedecodeError, ValueError):
    """Raised when no registered rule accepts a value for a destination type."""

    def __init__(self, value: Any, destination: Any, format: str | None = None):
        self.value = value
        self.destination = destination
        self.format = format
        type_name = getattr(destination, "__name__", repr(destination))
        message = f"Decoding of `{value!r}` to type {type_name} not supported"
        if format is not None:
            message += f" (format: {format!r})"
        super().__init__(message)
