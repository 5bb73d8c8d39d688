"""Spacing shorthand: ``margin`` and ``padding``."""

from __future__ import annotations

from typing import Any

from sassy_native.model.dimension import is_dimension_value
from sassy_native.model.style import PropertyMap
from sassy_native.shorthand._common import expand_sequence
from sassy_native.shorthand.names import (
    SPACING_FAMILIES,
    SPACING_LAYOUTS,
    SPACING_SCALAR_LAYOUT,
    apply_layout,
)

_MESSAGE = (
    "Invalid value for {key}: Expected a number, 'auto', a percentage, "
    "or an array with only those values, got {received}."
)


def expand_spacing(key: str, value: Any) -> PropertyMap:
    """Expand a ``margin`` or ``padding`` shorthand.

    Unlike inset, a one-element sequence yields the bare shorthand property
    (``{"margin": v}``) while a scalar is split into vertical/horizontal.
    A three-element sequence sets top, horizontal and bottom.
    """
    if key not in SPACING_FAMILIES:
        raise KeyError(f"Not a spacing shorthand: {key!r}")
    if is_dimension_value(value):
        return apply_layout(key, SPACING_SCALAR_LAYOUT, (value,))
    return expand_sequence(key, key, value, SPACING_LAYOUTS, is_dimension_value, _MESSAGE)
