"""Type aliases shared by the expanders, flattener and walker."""

from __future__ import annotations

from typing import Any

# A single declaration value: scalar, shorthand sequence, or nested mapping.
StyleValue = Any

# Explicit property name -> value, as produced by a shorthand expander.
PropertyMap = dict[str, StyleValue]

# Selector name -> explicit properties. The final output artifact.
FlatStyleMapping = dict[str, PropertyMap]

# Scoped selector -> partial style, built for one shared declaration block.
SharedStyleMap = dict[str, PropertyMap]
