"""Error hierarchy for style flattening and shorthand expansion."""
from __future__ import annotations

from typing import Any


class StyleError(Exception):
    """Base error for all sassy_native errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidShorthandValue(StyleError):
    """A shorthand property received a value it cannot expand."""

    def __init__(
        self,
        key: str,
        value: Any,
        message: str | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.key = key
        self.value = value
        self.received = type(value).__name__
        if message is None:
            message = f"Invalid value for {key}: got {self.received}."
        super().__init__(message, cause=cause)


class InvalidShorthandLength(InvalidShorthandValue):
    """A shorthand sequence has a length outside the supported set."""

    def __init__(
        self,
        key: str,
        value: Any,
        expected: tuple[int, ...],
        *,
        cause: Exception | None = None,
    ) -> None:
        self.expected = expected
        self.actual = len(value)
        super().__init__(
            key,
            value,
            f"Invalid {key} array length: Expected {_describe_lengths(expected)}, "
            f"got {self.actual}.",
            cause=cause,
        )


class InvalidStyleTree(StyleError):
    """A top-level selector does not map to a style object."""

    def __init__(self, selector: str, value: Any) -> None:
        self.selector = selector
        self.value = value
        super().__init__(
            f"Selector {selector!r} must map to a style object, "
            f"got {type(value).__name__}."
        )


def _describe_lengths(expected: tuple[int, ...]) -> str:
    """Render ``(1, 2, 3)`` as ``1, 2, or 3``."""
    names = [str(n) for n in expected]
    if len(names) <= 1:
        return "".join(names)
    if len(names) == 2:
        return f"{names[0]} or {names[1]}"
    return ", ".join(names[:-1]) + f", or {names[-1]}"
