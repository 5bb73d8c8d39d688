"""Shorthand expanders and the registry used to dispatch them."""

from __future__ import annotations

from typing import Any, Callable

from sassy_native.model.style import PropertyMap
from sassy_native.shorthand.gap import expand_gap
from sassy_native.shorthand.inset import expand_inset
from sassy_native.shorthand.spacing import expand_spacing

ShorthandHandler = Callable[[str, Any], PropertyMap]

SHORTHAND_HANDLERS: dict[str, ShorthandHandler] = {
    "inset": expand_inset,
    "margin": expand_spacing,
    "padding": expand_spacing,
    "gap": expand_gap,
}

SHORTHAND_KEYS = frozenset(SHORTHAND_HANDLERS)


def expand_shorthand(key: str, value: Any) -> PropertyMap:
    """Expand *value* with the handler registered for *key*.

    Raises KeyError if *key* is not a shorthand property.
    """
    handler = SHORTHAND_HANDLERS[key]
    return handler(key, value)


__all__ = [
    "SHORTHAND_HANDLERS",
    "SHORTHAND_KEYS",
    "ShorthandHandler",
    "expand_gap",
    "expand_inset",
    "expand_shorthand",
    "expand_spacing",
]
