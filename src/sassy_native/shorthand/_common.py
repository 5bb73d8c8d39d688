"""Helpers shared by the shorthand expanders."""

from __future__ import annotations

from typing import Any, Callable

from sassy_native.errors import InvalidShorthandLength, InvalidShorthandValue
from sassy_native.model.style import PropertyMap
from sassy_native.shorthand.names import Layout, apply_layout


def is_sequence(value: Any) -> bool:
    """Shorthand sequences are lists or tuples, never strings."""
    return isinstance(value, (list, tuple))


def expand_sequence(
    key: str,
    family: str,
    value: Any,
    layouts: dict[int, Layout],
    accepts: Callable[[Any], bool],
    message: str,
) -> PropertyMap:
    """Expand a sequence shorthand through its per-arity *layouts*.

    Raises InvalidShorthandValue when *value* is not a sequence of accepted
    elements, and InvalidShorthandLength when its arity has no layout.
    """
    if not is_sequence(value) or not all(accepts(item) for item in value):
        received = type(value).__name__
        raise InvalidShorthandValue(key, value, message.format(key=key, received=received))
    layout = layouts.get(len(value))
    if layout is None:
        raise InvalidShorthandLength(key, value, tuple(sorted(layouts)))
    return apply_layout(family, layout, value)
