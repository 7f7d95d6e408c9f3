"""Format patterns attached to conversion rules.

A rule either has no pattern (it only handles requests without a format) or
one of two variants that test a requested format string as a whole:

- ``ExactFormat``: the format must equal a literal string.
- ``RegexFormat``: scanning the format must produce a match spanning all of it.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class FormatPattern(Protocol):
    """Anything that can decide whether a requested format is fully matched."""

    def matches_fully(self, candidate: str) -> bool:
        ...


@dataclass(frozen=True)
class ExactFormat:
    """Matches a single literal format string."""

    text: str

    def matches_fully(self, candidate: str) -> bool:
        return candidate == self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class RegexFormat:
    """Matches format strings covered entirely by one regular expression match.

    Matches are scanned left to right without overlap, and the format is
    accepted only when one of them is the whole string. A match on a prefix
    or an inner substring is not enough.
    """

    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, source: str, flags: int = 0) -> RegexFormat:
        return cls(re.compile(source, flags))

    def matches_fully(self, candidate: str) -> bool:
        return any(m.group(0) == candidate for m in self.pattern.finditer(candidate))

    def __str__(self) -> str:
        return f"/{self.pattern.pattern}/"


# What `register` accepts for its `format` argument
FormatSpec = Union[str, re.Pattern[str], FormatPattern, None]


def as_format_pattern(format: FormatSpec) -> FormatPattern | None:
    """Coerce a user-supplied format into a pattern variant.

    ``None`` stays ``None``, strings become ``ExactFormat`` and compiled
    regular expressions become ``RegexFormat``.
    """
    if format is None:
        return None
    if isinstance(format, str):
        return ExactFormat(format)
    if isinstance(format, re.Pattern):
        return RegexFormat(format)
    if isinstance(format, FormatPattern):
        return format
    raise TypeError(
        f"Format must be a string, a compiled regular expression or a FormatPattern, "
        f"not {type(format).__name__}"
    )
