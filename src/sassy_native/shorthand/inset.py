"""Inset shorthand: ``inset`` -> top/right/bottom/left."""

from __future__ import annotations

from typing import Any

from sassy_native.model.dimension import is_dimension_value
from sassy_native.model.style import PropertyMap
from sassy_native.shorthand._common import expand_sequence
from sassy_native.shorthand.names import INSET, INSET_LAYOUTS, apply_layout

_MESSAGE = (
    "Invalid value for {key}: Expected a number, 'auto', a percentage, "
    "or an array with only those values, got {received}."
)


def expand_inset(key: str, value: Any) -> PropertyMap:
    """Expand an inset shorthand with CSS-style corner inheritance.

    A single dimension value sets all four sides. A sequence of 1-4
    dimension values follows the usual top/right/bottom/left rules, with a
    missing side copying its opposite.
    """
    if is_dimension_value(value):
        return apply_layout(INSET, INSET_LAYOUTS[1], (value,))
    return expand_sequence(key, INSET, value, INSET_LAYOUTS, is_dimension_value, _MESSAGE)
