"""Key flattening, selector scoping and shared-selector merging.

Every function that writes into a mapping follows the same accumulator
contract: the caller owns the mapping and passes it in, and a missing
selector bucket is created on first write.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sassy_native.config import DEFAULT_CONFIG, FlattenConfig
from sassy_native.model.style import (
    FlatStyleMapping,
    PropertyMap,
    SharedStyleMap,
    StyleValue,
)
from sassy_native.shorthand import SHORTHAND_KEYS, expand_shorthand

logger = logging.getLogger(__name__)

# Compound styles that are copied as-is rather than flattened.
IGNORED_KEYS = DEFAULT_CONFIG.ignored_keys

__all__ = [
    "IGNORED_KEYS",
    "apply_shared_styles",
    "assign_flat_style",
    "assign_ignored_key_style",
    "capitalize",
    "flatten",
    "handle_shared_styles",
    "is_object",
    "scoped_key",
    "split_selectors",
]


def capitalize(text: str) -> str:
    """Uppercase the first character only; ``str.capitalize`` lowercases the rest."""
    return text[:1].upper() + text[1:]


def scoped_key(parent_key: str, selector: str) -> str:
    """Join *selector* onto *parent_key*: ``("card", "title") -> "cardTitle"``."""
    if parent_key:
        return f"{parent_key}{capitalize(selector)}"
    return selector


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def split_selectors(key: str, separator: str = ",") -> list[str]:
    return [segment.strip() for segment in key.split(separator)]


def _bucket(styles: dict[str, PropertyMap], selector: str) -> PropertyMap:
    return styles.setdefault(selector, {})


def assign_flat_style(
    native_styles: FlatStyleMapping, parent_key: str, key: str, value: StyleValue
) -> None:
    """Write ``native_styles[parent_key][key] = value``."""
    _bucket(native_styles, parent_key)[key] = value


def assign_ignored_key_style(
    native_styles: FlatStyleMapping, parent_key: str, key: str, value: StyleValue
) -> None:
    """Copy a compound (ignored) property verbatim, without expansion."""
    _bucket(native_styles, parent_key)[key] = value


def flatten(
    parent_key: str,
    key: str,
    value: StyleValue,
    native_styles: FlatStyleMapping,
    config: FlattenConfig | None = None,
) -> None:
    """Flatten a single declaration into ``native_styles[parent_key]``.

    Shorthand keys are expanded and merged over whatever the bucket already
    holds. Ignored keys and plain properties are stored as given. Shorthand
    errors propagate to the caller.
    """
    config = config or DEFAULT_CONFIG
    if key in config.ignored_keys:
        assign_ignored_key_style(native_styles, parent_key, key, value)
    elif key in SHORTHAND_KEYS:
        _bucket(native_styles, parent_key).update(expand_shorthand(key, value))
    else:
        assign_flat_style(native_styles, parent_key, key, value)


def handle_shared_styles(
    key: str,
    parent_key: str,
    value: Mapping[str, StyleValue],
    shared_map: SharedStyleMap,
    config: FlattenConfig | None = None,
) -> None:
    """Expand a comma-joined selector block into *shared_map*.

    ``handle_shared_styles("title, subtitle", "card", {...}, shared)`` gives
    both ``cardTitle`` and ``cardSubtitle`` a copy of the declared
    properties, with shorthands expanded.
    """
    config = config or DEFAULT_CONFIG
    selectors = split_selectors(key, config.selector_separator)
    logger.debug("Shared block %r under %r -> %s", key, parent_key, selectors)

    # Expand before touching shared_map so a bad shorthand writes nothing.
    expanded: PropertyMap = {}
    for prop, prop_value in value.items():
        if prop in SHORTHAND_KEYS:
            expanded.update(expand_shorthand(prop, prop_value))
        else:
            expanded[prop] = prop_value

    for selector in selectors:
        _bucket(shared_map, scoped_key(parent_key, selector)).update(expanded)


def apply_shared_styles(
    native_styles: FlatStyleMapping, shared_map: SharedStyleMap
) -> None:
    """Merge every selector in *shared_map* into *native_styles* (last write wins)."""
    for selector, properties in shared_map.items():
        _bucket(native_styles, selector).update(properties)
