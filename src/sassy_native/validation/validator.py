"""Style-tree validator: reports problems without producing output."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping

from sassy_native.config import DEFAULT_CONFIG, FlattenConfig
from sassy_native.model.diagnostic import Diagnostic
from sassy_native.sheet import StyleSheetFlattener


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def validate_styles(
    styles: Mapping[str, Any], config: FlattenConfig | None = None
) -> list[Diagnostic]:
    """Walk *styles* in skip mode and return every diagnostic found."""
    config = replace(config or DEFAULT_CONFIG, skip_invalid=True)
    flattener = StyleSheetFlattener(config)
    flattener.flatten(styles)
    return list(flattener.diagnostics)


def validate_or_raise(
    styles: Mapping[str, Any], config: FlattenConfig | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate_styles(styles, config)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
