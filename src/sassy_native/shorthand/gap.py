"""Gap shorthand: ``gap`` -> gap or rowGap/columnGap."""

from __future__ import annotations

from typing import Any

from sassy_native.model.dimension import is_number
from sassy_native.model.style import PropertyMap
from sassy_native.shorthand._common import expand_sequence
from sassy_native.shorthand.names import GAP, GAP_LAYOUTS, apply_layout

_MESSAGE = (
    "Invalid value for {key}: Expected a number or an array of numbers, "
    "got {received}."
)


def expand_gap(key: str, value: Any) -> PropertyMap:
    """Expand a gap shorthand. Only plain numbers are accepted."""
    if is_number(value):
        return apply_layout(GAP, GAP_LAYOUTS[1], (value,))
    return expand_sequence(key, GAP, value, GAP_LAYOUTS, is_number, _MESSAGE)
