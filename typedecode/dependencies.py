"""Process-wide shared instances.

The default registry is built and sealed on first use and never mutated
afterwards, so it can be read from any thread without locking.

Usage:
    from typedecode.dependencies import get_default_registry

    when = get_default_registry().convert("2020-01-01T00:00:00Z", datetime)

In tests, call ``get_default_registry.cache_clear()`` after changing the
configuration to get a freshly built registry.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typedecode.conversions.registry import ConversionRegistry

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_default_registry() -> ConversionRegistry:
    """Get the sealed default registry singleton."""
    from typedecode.conversions.registry import ConversionRegistry

    registry = ConversionRegistry.with_defaults()
    registry.seal()
    logger.debug("Built default conversion registry")
    return registry
