"""Tests for the inset, spacing and gap shorthand expanders."""

import pytest

from sassy_native.errors import InvalidShorthandLength, InvalidShorthandValue
from sassy_native.shorthand import (
    SHORTHAND_HANDLERS,
    SHORTHAND_KEYS,
    expand_gap,
    expand_inset,
    expand_shorthand,
    expand_spacing,
)


class _AnimatedValue:
    def add_listener(self, callback):
        return None


# ---------------------------------------------------------------------------
# Inset
# ---------------------------------------------------------------------------


class TestExpandInset:
    @pytest.mark.parametrize("value", [0, 8, 2.5, "auto", "50%", None])
    def test_single_value_sets_all_sides(self, value):
        assert expand_inset("inset", value) == {
            "top": value,
            "right": value,
            "bottom": value,
            "left": value,
        }

    def test_animated_handle_sets_all_sides(self):
        anim = _AnimatedValue()
        result = expand_inset("inset", anim)
        assert all(v is anim for v in result.values())

    def test_one_element(self):
        assert expand_inset("inset", [4]) == {
            "top": 4, "right": 4, "bottom": 4, "left": 4,
        }

    def test_two_elements(self):
        assert expand_inset("inset", [1, 2]) == {
            "top": 1, "right": 2, "bottom": 1, "left": 2,
        }

    def test_three_elements(self):
        assert expand_inset("inset", [1, 2, 3]) == {
            "top": 1, "right": 2, "bottom": 3, "left": 2,
        }

    def test_four_elements(self):
        assert expand_inset("inset", [5, 10, 15, 20]) == {
            "top": 5, "right": 10, "bottom": 15, "left": 20,
        }

    def test_tuple_accepted(self):
        assert expand_inset("inset", (1, "auto")) == {
            "top": 1, "right": "auto", "bottom": 1, "left": "auto",
        }

    @pytest.mark.parametrize("value", [[], [1, 2, 3, 4, 5]])
    def test_bad_length(self, value):
        with pytest.raises(InvalidShorthandLength) as exc_info:
            expand_inset("inset", value)
        assert exc_info.value.expected == (1, 2, 3, 4)
        assert exc_info.value.actual == len(value)

    def test_bad_length_is_also_invalid_value(self):
        with pytest.raises(InvalidShorthandValue):
            expand_inset("inset", [1, 2, 3, 4, 5])

    @pytest.mark.parametrize("value", ["10px", True, {"top": 1}, [1, "10px"]])
    def test_invalid_value(self, value):
        with pytest.raises(InvalidShorthandValue) as exc_info:
            expand_inset("inset", value)
        assert not isinstance(exc_info.value, InvalidShorthandLength)
        assert exc_info.value.key == "inset"
        assert "Invalid value for inset" in str(exc_info.value)


# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------


class TestExpandSpacing:
    @pytest.mark.parametrize("key", ["margin", "padding"])
    def test_single_value_splits_axes(self, key):
        assert expand_spacing(key, 6) == {
            f"{key}Vertical": 6,
            f"{key}Horizontal": 6,
        }

    def test_one_element_is_bare_shorthand(self):
        assert expand_spacing("margin", [6]) == {"margin": 6}

    def test_two_elements(self):
        assert expand_spacing("margin", [1, 2]) == {
            "marginVertical": 1,
            "marginHorizontal": 2,
        }

    def test_three_elements(self):
        assert expand_spacing("padding", [1, 2, 3]) == {
            "paddingTop": 1,
            "paddingHorizontal": 2,
            "paddingBottom": 3,
        }

    def test_four_elements(self):
        assert expand_spacing("padding", [1, "auto", "5%", None]) == {
            "paddingTop": 1,
            "paddingRight": "auto",
            "paddingBottom": "5%",
            "paddingLeft": None,
        }

    def test_null_scalar(self):
        assert expand_spacing("margin", None) == {
            "marginVertical": None,
            "marginHorizontal": None,
        }

    @pytest.mark.parametrize("value", [[], [1, 2, 3, 4, 5]])
    def test_bad_length(self, value):
        with pytest.raises(InvalidShorthandLength) as exc_info:
            expand_spacing("margin", value)
        assert exc_info.value.expected == (1, 2, 3, 4)
        assert "Expected 1, 2, 3, or 4" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["wide", False, {"top": 1}, [1, [2]]])
    def test_invalid_value(self, value):
        with pytest.raises(InvalidShorthandValue) as exc_info:
            expand_spacing("padding", value)
        assert exc_info.value.key == "padding"
        assert exc_info.value.value is value

    def test_unknown_family(self):
        with pytest.raises(KeyError):
            expand_spacing("border", 1)


# ---------------------------------------------------------------------------
# Gap
# ---------------------------------------------------------------------------


class TestExpandGap:
    @pytest.mark.parametrize("value", [0, 4, 7.5])
    def test_number(self, value):
        assert expand_gap("gap", value) == {"gap": value}

    def test_one_element(self):
        assert expand_gap("gap", [3]) == {"gap": 3}

    def test_two_elements(self):
        assert expand_gap("gap", [4, 8]) == {"rowGap": 4, "columnGap": 8}

    @pytest.mark.parametrize("value", [[], [1, 2, 3]])
    def test_bad_length(self, value):
        with pytest.raises(InvalidShorthandLength) as exc_info:
            expand_gap("gap", value)
        assert exc_info.value.expected == (1, 2)
        assert str(exc_info.value) == (
            f"Invalid gap array length: Expected 1 or 2, got {len(value)}."
        )

    @pytest.mark.parametrize("value", ["auto", "10%", None, True, [1, "2"]])
    def test_only_numbers_accepted(self, value):
        with pytest.raises(InvalidShorthandValue) as exc_info:
            expand_gap("gap", value)
        assert "Expected a number or an array of numbers" in str(exc_info.value)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_keys(self):
        assert SHORTHAND_KEYS == {"inset", "margin", "padding", "gap"}
        assert set(SHORTHAND_HANDLERS) == SHORTHAND_KEYS

    def test_dispatch(self):
        assert expand_shorthand("padding", [10, 20]) == {
            "paddingVertical": 10,
            "paddingHorizontal": 20,
        }
        assert expand_shorthand("gap", [1, 2]) == {"rowGap": 1, "columnGap": 2}

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            expand_shorthand("border", 1)
