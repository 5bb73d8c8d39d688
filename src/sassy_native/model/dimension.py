"""Dimension value classification.

A dimension value is anything a spacing or position property accepts:
numbers, ``"auto"``, numeric/percentage strings, ``None``, or an animated
handle supplied by the host UI layer.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

__all__ = [
    "ANIMATED_CAPABILITIES",
    "AUTO",
    "DimensionKind",
    "classify_dimension",
    "is_dimension_value",
    "is_number",
]

AUTO = "auto"

# Callables that mark an animated handle; host nodes wrapped from JS
# bridges keep the camelCase spelling.
ANIMATED_CAPABILITIES = ("add_listener", "addListener")

# Digits, optional decimal fraction, optional trailing percent sign.
_PERCENTAGE_RE = re.compile(r"[0-9]+(\.[0-9]+)?%?")


class DimensionKind(Enum):
    """The variant a dimension value belongs to."""

    NUMBER = "number"
    AUTO = "auto"
    PERCENTAGE = "percentage"
    NULL = "null"
    ANIMATED = "animated"


def is_number(value: Any) -> bool:
    """Return True for ints and floats (``bool`` is not a number here)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify_dimension(value: Any) -> DimensionKind | None:
    """Return the :class:`DimensionKind` of *value*, or None if it is not one.

    Any object exposing a callable ``add_listener`` or ``addListener`` is an
    animated handle and is not inspected further.
    """
    if value is None:
        return DimensionKind.NULL
    if is_number(value):
        return DimensionKind.NUMBER
    if isinstance(value, str):
        if value == AUTO:
            return DimensionKind.AUTO
        if _PERCENTAGE_RE.fullmatch(value):
            return DimensionKind.PERCENTAGE
        return None
    if any(callable(getattr(value, name, None)) for name in ANIMATED_CAPABILITIES):
        return DimensionKind.ANIMATED
    return None


def is_dimension_value(value: Any) -> bool:
    return classify_dimension(value) is not None
