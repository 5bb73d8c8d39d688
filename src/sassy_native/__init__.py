"""Flatten nested, SASS-like style trees for native UI styling engines."""

from sassy_native.config import DEFAULT_CONFIG, FlattenConfig
from sassy_native.errors import (
    InvalidShorthandLength,
    InvalidShorthandValue,
    InvalidStyleTree,
    StyleError,
)
from sassy_native.flatten import (
    IGNORED_KEYS,
    apply_shared_styles,
    assign_flat_style,
    assign_ignored_key_style,
    capitalize,
    flatten,
    handle_shared_styles,
    scoped_key,
)
from sassy_native.model import (
    Diagnostic,
    DimensionKind,
    Severity,
    classify_dimension,
    is_dimension_value,
)
from sassy_native.sheet import StyleSheetFlattener, create_style_sheet
from sassy_native.shorthand import (
    SHORTHAND_HANDLERS,
    SHORTHAND_KEYS,
    expand_gap,
    expand_inset,
    expand_shorthand,
    expand_spacing,
)
from sassy_native.validation import ValidationError, validate_or_raise, validate_styles

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Diagnostic",
    "DimensionKind",
    "FlattenConfig",
    "IGNORED_KEYS",
    "InvalidShorthandLength",
    "InvalidShorthandValue",
    "InvalidStyleTree",
    "SHORTHAND_HANDLERS",
    "SHORTHAND_KEYS",
    "Severity",
    "StyleError",
    "StyleSheetFlattener",
    "ValidationError",
    "apply_shared_styles",
    "assign_flat_style",
    "assign_ignored_key_style",
    "capitalize",
    "classify_dimension",
    "create_style_sheet",
    "expand_gap",
    "expand_inset",
    "expand_shorthand",
    "expand_spacing",
    "flatten",
    "handle_shared_styles",
    "is_dimension_value",
    "scoped_key",
    "validate_or_raise",
    "validate_styles",
]
