from sassy_native.validation.validator import (
    ValidationError,
    validate_or_raise,
    validate_styles,
)

__all__ = ["ValidationError", "validate_or_raise", "validate_styles"]
