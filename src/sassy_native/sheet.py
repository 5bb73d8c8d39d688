"""Style-tree walker: turns a nested style description into a flat mapping.

Example::

    create_style_sheet({
        "card": {
            "padding": [10, 20],
            "title, subtitle": {"color": "black", "margin": 4},
            "footer": {"inset": [0, 8]},
        },
    })

produces ``card``, ``cardTitle``, ``cardSubtitle`` and ``cardFooter``
buckets with every shorthand expanded to explicit properties.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sassy_native.config import DEFAULT_CONFIG, FlattenConfig
from sassy_native.errors import InvalidShorthandValue, InvalidStyleTree
from sassy_native.flatten import (
    apply_shared_styles,
    assign_ignored_key_style,
    flatten,
    handle_shared_styles,
    is_object,
    scoped_key,
    split_selectors,
)
from sassy_native.model.diagnostic import Diagnostic, Severity
from sassy_native.model.style import FlatStyleMapping, SharedStyleMap
from sassy_native.shorthand import SHORTHAND_KEYS

logger = logging.getLogger(__name__)

__all__ = ["StyleSheetFlattener", "create_style_sheet"]


class StyleSheetFlattener:
    """Walk a nested style tree and flatten it.

    Nested selectors are scoped onto their parent, so ``card`` > ``title``
    becomes ``cardTitle``. Comma-joined keys are shared blocks. Plain and
    shorthand declarations go through :func:`sassy_native.flatten.flatten`.

    With ``config.skip_invalid`` set, bad shorthand declarations are logged,
    recorded in :attr:`diagnostics` and dropped instead of raising.
    """

    def __init__(self, config: FlattenConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.diagnostics: list[Diagnostic] = []

    def flatten(self, styles: Mapping[str, Any]) -> FlatStyleMapping:
        self.diagnostics = []
        native_styles: FlatStyleMapping = {}
        for selector, body in styles.items():
            if not is_object(body):
                self._invalid_tree(selector, body)
            elif self._is_shared(selector):
                self._shared(native_styles, selector, "", body)
            else:
                self._walk(native_styles, selector, body)
        return native_styles

    # -- walking ---------------------------------------------------------

    def _walk(
        self, native_styles: FlatStyleMapping, scope: str, body: Mapping[str, Any]
    ) -> None:
        logger.debug("Flattening selector %r", scope)
        native_styles.setdefault(scope, {})
        for key, value in body.items():
            if key in self.config.ignored_keys:
                assign_ignored_key_style(native_styles, scope, key, value)
            elif key in SHORTHAND_KEYS:
                self._declare(native_styles, scope, key, value)
            elif is_object(value) and self._is_shared(key):
                self._shared(native_styles, key, scope, value)
            elif is_object(value):
                self._walk(native_styles, scoped_key(scope, key), value)
            else:
                self._declare(native_styles, scope, key, value)

    def _declare(
        self, native_styles: FlatStyleMapping, scope: str, key: str, value: Any
    ) -> None:
        try:
            flatten(scope, key, value, native_styles, self.config)
        except InvalidShorthandValue as exc:
            if not self.config.skip_invalid:
                raise
            self._record_skip(exc, scope, key)

    def _shared(
        self,
        native_styles: FlatStyleMapping,
        key: str,
        parent_key: str,
        body: Mapping[str, Any],
    ) -> None:
        for segment in split_selectors(key, self.config.selector_separator):
            if not segment:
                self._empty_segment(key, parent_key)

        shared_map: SharedStyleMap = {}
        if not self.config.skip_invalid:
            handle_shared_styles(key, parent_key, body, shared_map, self.config)
        else:
            # Empty pass first so every selector keeps a bucket.
            handle_shared_styles(key, parent_key, {}, shared_map, self.config)
            # One property at a time so a bad one only drops itself.
            for prop, value in body.items():
                try:
                    handle_shared_styles(
                        key, parent_key, {prop: value}, shared_map, self.config
                    )
                except InvalidShorthandValue as exc:
                    separator = self.config.selector_separator
                    for segment in split_selectors(key, separator):
                        selector = scoped_key(parent_key, segment)
                        self._record_skip(exc, selector, prop)
        apply_shared_styles(native_styles, shared_map)

    def _is_shared(self, key: str) -> bool:
        return self.config.selector_separator in key

    # -- diagnostics -----------------------------------------------------

    def _record_skip(
        self, exc: InvalidShorthandValue, selector: str, prop: str
    ) -> None:
        logger.warning("Skipping %s on %r: %s", prop, selector, exc)
        self.diagnostics.append(
            Diagnostic(
                rule="invalid_shorthand",
                severity=Severity.ERROR,
                message=str(exc),
                selector=selector,
                property_name=prop,
            )
        )

    def _invalid_tree(self, selector: str, body: Any) -> None:
        exc = InvalidStyleTree(selector, body)
        if not self.config.skip_invalid:
            raise exc
        logger.warning("Skipping selector %r: %s", selector, exc)
        self.diagnostics.append(
            Diagnostic(
                rule="invalid_style_tree",
                severity=Severity.ERROR,
                message=str(exc),
                selector=selector,
            )
        )

    def _empty_segment(self, key: str, parent_key: str) -> None:
        target = parent_key or "<root>"
        logger.warning("Empty selector in shared key %r under %s", key, target)
        self.diagnostics.append(
            Diagnostic(
                rule="empty_selector",
                severity=Severity.WARNING,
                message=f"Shared key {key!r} contains an empty selector",
                selector=parent_key or None,
            )
        )


def create_style_sheet(
    styles: Mapping[str, Any], config: FlattenConfig | None = None
) -> FlatStyleMapping:
    """Flatten a nested style tree into ``selector -> properties``."""
    return StyleSheetFlattener(config).flatten(styles)
