"""Parsing of dates written with ICU-style patterns such as ``yyyy-MM-dd``.

Patterns are translated once into ``strptime`` directives. Month and weekday
names are matched against the current process locale, like ``strptime``.
The hour fields ``k`` (1-24) and ``K`` (0-11) have no directive and are
rejected with the other unsupported fields.
"""
from __future__ import annotations

from datetime import datetime
from functools import lru_cache


def _year(width: int) -> str:
    return "%y" if width == 2 else "%Y"


def _month(width: int) -> str:
    if width <= 2:
        return "%m"
    return "%b" if width == 3 else "%B"


def _weekday(width: int) -> str:
    return "%A" if width >= 4 else "%a"


# Pattern letter -> directive for a run of ``width`` letters
_FIELDS = {
    "y": _year,
    "M": _month,
    "L": _month,
    "d": lambda width: "%d",
    "D": lambda width: "%j",
    "E": _weekday,
    "a": lambda width: "%p",
    "h": lambda width: "%I",
    "H": lambda width: "%H",
    "m": lambda width: "%M",
    "s": lambda width: "%S",
    "S": lambda width: "%f",
    "Z": lambda width: "%z",
    "x": lambda width: "%z",
    "X": lambda width: "%z",
}


@lru_cache(maxsize=128)
def to_strptime(pattern: str) -> str:
    """Translate an ICU date pattern into a ``strptime`` format string.

    Raises:
        ValueError: The pattern uses a field that cannot be parsed, or has
            an unterminated quote.
    """
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            # '' is a literal quote, 'text' is literal text
            if i + 1 < n and pattern[i + 1] == "'":
                out.append("'")
                i += 2
                continue
            end = i + 1
            literal: list[str] = []
            while True:
                if end >= n:
                    raise ValueError(f"Unterminated quote in date pattern: {pattern!r}")
                if pattern[end] == "'":
                    if end + 1 < n and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            out.append("".join(literal).replace("%", "%%"))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            width = 1
            while i + width < n and pattern[i + width] == ch:
                width += 1
            field = _FIELDS.get(ch)
            if field is None:
                raise ValueError(f"Unsupported field {ch * width!r} in date pattern: {pattern!r}")
            out.append(field(width))
            i += width
        else:
            out.append("%%" if ch == "%" else ch)
            i += 1
    return "".join(out)


def parse_date_pattern(value: str, pattern: str) -> datetime:
    """Parse ``value`` written in the ICU date ``pattern``."""
    return datetime.strptime(value, to_strptime(pattern))
