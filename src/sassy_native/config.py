from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlattenConfig:
    ignored_keys: frozenset[str] = frozenset({"shadowOffset"})
    selector_separator: str = ","
    skip_invalid: bool = False  # log and drop bad shorthands instead of raising


DEFAULT_CONFIG = FlattenConfig()
