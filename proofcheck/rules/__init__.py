"""Rule data tables, one module per issue family."""

from __future__ import annotations

from functools import lru_cache

from ..engine.registry import DetectorRegistry
from . import (
    academic,
    clarity,
    grammar,
    professionalism,
    research,
    spelling,
    structure,
    style,
    tone,
)

# Registration order decides which detector wins when two issues start at the
# same offset, so keep it stable.
RULE_MODULES = (
    spelling,
    grammar,
    style,
    tone,
    structure,
    professionalism,
    clarity,
    academic,
    research,
)


def build_default_registry() -> DetectorRegistry:
    """Build a fresh registry holding every built-in rule."""

    registry = DetectorRegistry()
    for module in RULE_MODULES:
        module.register(registry)
    return registry


@lru_cache(maxsize=1)
def default_registry() -> DetectorRegistry:
    """Shared registry used when callers do not supply their own; never mutate it."""

    return build_default_registry()


__all__ = ["RULE_MODULES", "build_default_registry", "default_registry"]
