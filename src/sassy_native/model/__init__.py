from sassy_native.model.diagnostic import Diagnostic, Severity
from sassy_native.model.dimension import (
    DimensionKind,
    classify_dimension,
    is_dimension_value,
    is_number,
)
from sassy_native.model.style import (
    FlatStyleMapping,
    PropertyMap,
    SharedStyleMap,
    StyleValue,
)

__all__ = [
    "Diagnostic",
    "DimensionKind",
    "FlatStyleMapping",
    "PropertyMap",
    "Severity",
    "SharedStyleMap",
    "StyleValue",
    "classify_dimension",
    "is_dimension_value",
    "is_number",
]
