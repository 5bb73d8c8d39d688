"""Enumerated output property names for every shorthand family.

Each expander picks values out of its input by *layout*: for a given arity,
a tuple of ``(slot, index)`` pairs saying which input element lands in
which slot. The slot is then resolved to a concrete property name through
:data:`PROPERTY_NAMES`.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from sassy_native.model.style import PropertyMap, StyleValue


class Slot(Enum):
    """A position a shorthand value can be written to."""

    ALL = "all"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    ROW = "row"
    COLUMN = "column"


Layout = tuple[tuple[Slot, int], ...]

INSET = "inset"
MARGIN = "margin"
PADDING = "padding"
GAP = "gap"

SPACING_FAMILIES = frozenset({MARGIN, PADDING})

PROPERTY_NAMES: dict[tuple[str, Slot], str] = {
    (INSET, Slot.TOP): "top",
    (INSET, Slot.RIGHT): "right",
    (INSET, Slot.BOTTOM): "bottom",
    (INSET, Slot.LEFT): "left",
    (MARGIN, Slot.ALL): "margin",
    (MARGIN, Slot.TOP): "marginTop",
    (MARGIN, Slot.RIGHT): "marginRight",
    (MARGIN, Slot.BOTTOM): "marginBottom",
    (MARGIN, Slot.LEFT): "marginLeft",
    (MARGIN, Slot.VERTICAL): "marginVertical",
    (MARGIN, Slot.HORIZONTAL): "marginHorizontal",
    (PADDING, Slot.ALL): "padding",
    (PADDING, Slot.TOP): "paddingTop",
    (PADDING, Slot.RIGHT): "paddingRight",
    (PADDING, Slot.BOTTOM): "paddingBottom",
    (PADDING, Slot.LEFT): "paddingLeft",
    (PADDING, Slot.VERTICAL): "paddingVertical",
    (PADDING, Slot.HORIZONTAL): "paddingHorizontal",
    (GAP, Slot.ALL): "gap",
    (GAP, Slot.ROW): "rowGap",
    (GAP, Slot.COLUMN): "columnGap",
}

# CSS corner inheritance: missing sides copy their opposite.
INSET_LAYOUTS: dict[int, Layout] = {
    1: ((Slot.TOP, 0), (Slot.RIGHT, 0), (Slot.BOTTOM, 0), (Slot.LEFT, 0)),
    2: ((Slot.TOP, 0), (Slot.RIGHT, 1), (Slot.BOTTOM, 0), (Slot.LEFT, 1)),
    3: ((Slot.TOP, 0), (Slot.RIGHT, 1), (Slot.BOTTOM, 2), (Slot.LEFT, 1)),
    4: ((Slot.TOP, 0), (Slot.RIGHT, 1), (Slot.BOTTOM, 2), (Slot.LEFT, 3)),
}

# A scalar margin/padding is split per axis; a one-element list is not.
SPACING_SCALAR_LAYOUT: Layout = ((Slot.VERTICAL, 0), (Slot.HORIZONTAL, 0))

SPACING_LAYOUTS: dict[int, Layout] = {
    1: ((Slot.ALL, 0),),
    2: ((Slot.VERTICAL, 0), (Slot.HORIZONTAL, 1)),
    3: ((Slot.TOP, 0), (Slot.HORIZONTAL, 1), (Slot.BOTTOM, 2)),
    4: ((Slot.TOP, 0), (Slot.RIGHT, 1), (Slot.BOTTOM, 2), (Slot.LEFT, 3)),
}

GAP_LAYOUTS: dict[int, Layout] = {
    1: ((Slot.ALL, 0),),
    2: ((Slot.ROW, 0), (Slot.COLUMN, 1)),
}


def property_name(family: str, slot: Slot) -> str:
    """Return the output property name for *slot* of a *family* shorthand."""
    return PROPERTY_NAMES[(family, slot)]


def apply_layout(
    family: str, layout: Layout, values: Sequence[StyleValue]
) -> PropertyMap:
    """Build the explicit property map described by *layout*."""
    return {property_name(family, slot): values[index] for slot, index in layout}
