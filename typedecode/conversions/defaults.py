"""Default conversions for values read from a document store.

| from | to | format | description
| ---- | -- | ------ | -----------
| str | datetime | None | ``datetime.fromisoformat``
| int, float | datetime | ``epoch`` | milliseconds since epoch, UTC
| str | AnyUrl | None | pydantic URL validation
| str | int | ``radix:{radix}`` | ``int`` with radix
| str | int | ``string`` | ``int``
| str | float | ``string`` | ``float``
| str | Number | ``string`` | int when integral, float otherwise
| str | datetime | any other format | ICU date pattern, e.g. ``yyyy-MM-dd``
"""
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from numbers import Number
from typing import TYPE_CHECKING

from pydantic import AnyUrl

from typedecode.config import ConversionConfig
from typedecode.conversions.date_patterns import parse_date_pattern
from typedecode.core.types import SourceCheck

if TYPE_CHECKING:
    from typedecode.conversions.registry import ConversionRegistry

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def datetime_from_epoch_millis(millis: int | float) -> datetime:
    """UTC datetime ``millis`` milliseconds after the epoch, to the microsecond."""
    return _EPOCH + timedelta(microseconds=int(millis * 1000))


def int_with_radix(value: str, format: str) -> int:
    radix = int(format[len(ConversionConfig.RADIX_PREFIX):])
    return int(value, radix)


def parse_number(value: str) -> int | float:
    try:
        return int(value)
    except ValueError:
        return float(value)


def register_defaults(registry: ConversionRegistry) -> None:
    """Register the default rule set on an open registry."""
    string_format = ConversionConfig.STRING_FORMAT

    registry.register(str, datetime, datetime.fromisoformat)
    registry.register(
        SourceCheck.number(),
        datetime,
        datetime_from_epoch_millis,
        format=ConversionConfig.EPOCH_FORMAT,
    )
    registry.register(str, AnyUrl, AnyUrl)
    registry.register_with_format(
        str, int, int_with_radix, format=re.compile(ConversionConfig.RADIX_PATTERN)
    )
    registry.register(str, int, int, format=string_format)
    registry.register(str, float, float, format=string_format)
    registry.register(str, Number, parse_number, format=string_format)
    registry.register_with_format(
        str,
        datetime,
        parse_date_pattern,
        format=re.compile(ConversionConfig.DATE_PATTERN_FORMAT),
    )
