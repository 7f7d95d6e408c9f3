"""Conversion registry for decoding loosely-typed values.

Maps a value plus an optional format discriminator to a registered converter
producing a value of the requested destination type. Rules are grouped by
destination type and tried most-recently-registered first, so registering a
rule after construction overrides or extends the defaults.

A registry starts open. Rules can only be registered while open and
conversions can only run once it is sealed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from typedecode.config import ConversionConfig
from typedecode.core.errors import InvalidStateError, NoApplicableConverterError
from typedecode.core.patterns import FormatPattern, FormatSpec, as_format_pattern
from typedecode.core.types import SourceCheck, SourceSpec, as_source_check

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ConversionRule:
    """A registered conversion to ``destination``."""

    source: SourceCheck
    destination: type
    format: FormatPattern | None
    converter: Callable[[Any, str | None], Any]

    def can_handle(self, value: Any, format: str | None) -> bool:
        if not self.source(value):
            return False
        return self._handles_format(format)

    def _handles_format(self, format: str | None) -> bool:
        if self.format is None:
            return format is None
        if format is None:
            return False
        return self.format.matches_fully(format)

    def apply(self, value: Any, format: str | None) -> Any:
        return self.converter(value, format)

    def __str__(self) -> str:
        fmt = "" if self.format is None else f" [{self.format}]"
        return f"{self.source} -> {_type_name(self.destination)}{fmt}"


class ConversionRegistry:
    """Registry of conversion rules, indexed by destination type."""

    def __init__(self, *, warn_on_shadowed: bool | None = None) -> None:
        self._rules: dict[type, list[ConversionRule]] = {}
        self._sealed = False
        self._warn_on_shadowed = warn_on_shadowed

    @classmethod
    def with_defaults(cls, *, warn_on_shadowed: bool | None = None) -> ConversionRegistry:
        """Create an open registry holding the default rule set."""
        from typedecode.conversions.defaults import register_defaults

        registry = cls(warn_on_shadowed=warn_on_shadowed)
        register_defaults(registry)
        return registry

    @classmethod
    def from_registry(
        cls, other: ConversionRegistry, *, warn_on_shadowed: bool | None = None
    ) -> ConversionRegistry:
        """Create an open registry holding the rules of ``other``.

        The rule lists are copied, the (immutable) rules themselves are shared.
        """
        registry = cls(warn_on_shadowed=warn_on_shadowed)
        for destination, rules in other._rules.items():
            registry._rules[destination] = list(rules)
        return registry

    @classmethod
    def default(cls) -> ConversionRegistry:
        """The process-wide sealed registry holding the default rule set."""
        from typedecode.dependencies import get_default_registry

        return get_default_registry()

    def copy(self) -> ConversionRegistry:
        """Open copy of this registry, see ``from_registry``."""
        return type(self).from_registry(self, warn_on_shadowed=self._warn_on_shadowed)

    # -- lifecycle -----------------------------------------------------------

    @property
    def is_sealed(self) -> bool:
        """True once ``seal`` was called; conversions need a sealed registry."""
        return self._sealed

    def seal(self) -> None:
        """Close the registry for registration. Sealing twice is a no-op."""
        if not self._sealed:
            self._sealed = True
            logger.debug("Sealed conversion registry with %d rules", self.rule_count())

    # -- registration --------------------------------------------------------

    def register(
        self,
        source: SourceSpec,
        destination: type[T],
        converter: Callable[[Any], T],
        format: FormatSpec = None,
    ) -> ConversionRule:
        """Register a converter from ``source`` to ``destination``.

        Without ``format`` the converter only handles requests without a
        format. A string ``format`` must be matched exactly, a compiled regular
        expression must match the whole requested format.

        Rules are tried in reverse order of registration, so a new rule takes
        precedence over any earlier rule accepting the same request.
        """
        return self._add(source, destination, lambda value, _format: converter(value), format)

    def register_with_format(
        self,
        source: SourceSpec,
        destination: type[T],
        converter: Callable[[Any, str], T],
        format: FormatSpec,
    ) -> ConversionRule:
        """Register a converter that also receives the requested format.

        Same as ``register`` except that ``format`` is required and the
        converter is called as ``converter(value, format)``. For example, to
        parse any non-null format as a date pattern::

            registry.register_with_format(
                str, datetime, parse_date_pattern, format=re.compile(".*")
            )
        """
        if format is None:
            raise ValueError("register_with_format() requires a format")
        return self._add(source, destination, converter, format)

    def _add(
        self,
        source: SourceSpec,
        destination: type,
        converter: Callable[[Any, str | None], Any],
        format: FormatSpec,
    ) -> ConversionRule:
        if self._sealed:
            raise InvalidStateError("Cannot register new conversion methods when sealed.")
        if not isinstance(destination, type):
            raise TypeError(
                f"Destination must be a class usable with isinstance(), not {destination!r}"
            )
        rule = ConversionRule(
            source=as_source_check(source),
            destination=destination,
            format=as_format_pattern(format),
            converter=converter,
        )
        rules = self._rules.setdefault(destination, [])
        if self._should_warn_on_shadowed():
            for earlier in rules:
                if earlier.source == rule.source and earlier.format == rule.format:
                    logger.warning("Conversion rule %s overrides an earlier registration", rule)
                    break
        rules.append(rule)
        logger.debug("Registered conversion rule %s", rule)
        return rule

    def _should_warn_on_shadowed(self) -> bool:
        if self._warn_on_shadowed is not None:
            return self._warn_on_shadowed
        return ConversionConfig.WARN_ON_SHADOWED_RULES

    # -- lookup --------------------------------------------------------------

    def convert(self, value: Any, destination: type[T], format: str | None = None) -> T:
        """Convert ``value`` to an instance of ``destination``.

        Values that already are instances of ``destination`` are returned
        unchanged. Errors raised by the selected converter propagate as-is.

        Raises:
            InvalidStateError: The registry is not sealed.
            NoApplicableConverterError: No rule accepts the value and format.
        """
        self._require_sealed()
        if isinstance(value, destination):
            return value
        rule = self._find(value, destination, format)
        if rule is None:
            raise NoApplicableConverterError(value, destination, format)
        return rule.apply(value, format)

    def find_rule(
        self, value: Any, destination: type, format: str | None = None
    ) -> ConversionRule | None:
        """Return the rule ``convert`` would use, if any.

        Returns None both when no rule applies and when the value already is
        an instance of ``destination`` (no rule is needed).
        """
        self._require_sealed()
        if isinstance(value, destination):
            return None
        return self._find(value, destination, format)

    def can_convert(self, value: Any, destination: type, format: str | None = None) -> bool:
        """Check if ``convert`` would find a way to produce ``destination``.

        Only rule selection is checked; the converter itself may still fail.
        """
        self._require_sealed()
        return isinstance(value, destination) or self._find(value, destination, format) is not None

    def _find(self, value: Any, destination: type, format: str | None) -> ConversionRule | None:
        for rule in reversed(self._rules.get(destination, ())):
            if rule.can_handle(value, format):
                return rule
        return None

    def _require_sealed(self) -> None:
        if not self._sealed:
            raise InvalidStateError("Cannot be used when not sealed.")

    # -- introspection -------------------------------------------------------

    def destinations(self) -> list[type]:
        """Destination types with at least one rule, in first-registration order."""
        return list(self._rules)

    def rules_for(self, destination: type) -> tuple[ConversionRule, ...]:
        """Rules for ``destination`` in registration order."""
        return tuple(self._rules.get(destination, ()))

    def rule_count(self) -> int:
        return sum(len(rules) for rules in self._rules.values())

    def as_mapping(self) -> Mapping[type, tuple[ConversionRule, ...]]:
        """Snapshot of all rules grouped by destination type."""
        return {destination: tuple(rules) for destination, rules in self._rules.items()}

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"<{type(self).__name__} {state}, {self.rule_count()} rules>"


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))
