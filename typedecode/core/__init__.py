"""Building blocks shared by the conversion registry."""
from typedecode.core.errors import (
    InvalidStateError,
    NoApplicableConverterError,
    TypedecodeError,
)
from typedecode.core.patterns import (
    FormatSpec,
    ExactFormat,
    FormatPattern,
    RegexFormat,
    as_format_pattern,
)
from typedecode.core.types import SourceCheck, SourceSpec, as_source_check

__all__ = [
    "ExactFormat",
    "FormatPattern",
    "FormatSpec",
    "InvalidStateError",
    "NoApplicableConverterError",
    "RegexFormat",
    "SourceCheck",
    "SourceSpec",
    "TypedecodeError",
    "as_format_pattern",
    "as_source_check",
]
