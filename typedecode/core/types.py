"""Runtime source-type checks for conversion rules.

A rule captures the concrete source type it accepts when it is registered,
so lookups only need to call the stored check on the incoming value.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

# What ``register`` accepts for its ``source`` argument
SourceSpec = Union[type, tuple[type, ...], "SourceCheck"]


@dataclass(frozen=True)
class SourceCheck:
    """Predicate deciding whether a value can be fed to a rule's converter.

    Either an ``isinstance`` test against ``types`` (minus ``exclude``) or an
    arbitrary predicate. Two checks built from the same types compare equal.
    """

    types: tuple[type, ...] = ()
    exclude: tuple[type, ...] = ()
    predicate: Callable[[Any], bool] | None = None
    label: str | None = None

    def __call__(self, value: Any) -> bool:
        if self.predicate is not None:
            return bool(self.predicate(value))
        return isinstance(value, self.types) and not isinstance(value, self.exclude)

    @classmethod
    def of(cls, *types: type, exclude: tuple[type, ...] = ()) -> SourceCheck:
        """Accept instances of any of ``types``."""
        if not types:
            raise ValueError("SourceCheck.of() requires at least one type")
        for tp in types:
            if not isinstance(tp, type):
                raise TypeError(f"Source type must be a class, not {tp!r}")
        return cls(types=tuple(types), exclude=tuple(exclude))

    @classmethod
    def where(cls, predicate: Callable[[Any], bool], label: str | None = None) -> SourceCheck:
        """Accept every value for which ``predicate`` returns true."""
        return cls(predicate=predicate, label=label or getattr(predicate, "__name__", None))

    @classmethod
    def number(cls) -> SourceCheck:
        """Accept ints and floats, but not bools."""
        return cls.of(int, float, exclude=(bool,))

    def __str__(self) -> str:
        if self.label:
            return self.label
        if self.predicate is not None:
            return repr(self.predicate)
        names = "|".join(tp.__name__ for tp in self.types)
        if self.exclude:
            names += " (not " + "|".join(tp.__name__ for tp in self.exclude) + ")"
        return names


def as_source_check(source: SourceSpec) -> SourceCheck:
    """Coerce a class, a tuple of classes or a ``SourceCheck`` into a check."""
    if isinstance(source, SourceCheck):
        return source
    if isinstance(source, type):
        return SourceCheck.of(source)
    if isinstance(source, tuple):
        return SourceCheck.of(*source)
    raise TypeError(
        f"Source must be a class, a tuple of classes or a SourceCheck, not {source!r}"
    )
