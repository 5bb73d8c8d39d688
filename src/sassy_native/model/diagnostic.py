"""Diagnostic model: structured findings about a style tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a style declaration.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: The scoped selector involved, if applicable.
        property_name: The property name involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    property_name: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        parts = []
        if self.selector is not None:
            parts.append(f"selector={self.selector}")
        if self.property_name is not None:
            parts.append(f"property={self.property_name}")
        location = f" [{' '.join(parts)}]" if parts else ""
        return f"{self.severity.value}{location}: {self.message}"
