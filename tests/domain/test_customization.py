"""Tests for customization formatting and validation."""

from __future__ import annotations

import pytest

from craftstore.domain.customization import (
    NO_CUSTOMIZATION_LABEL,
    format_customizations,
    unknown_customization_keys,
    validate_customizations,
)
from craftstore.domain.errors import ValidationError


# ==============================================================================
# Formatting
# ==============================================================================


def test_formats_keys_and_color_value() -> None:
    result = format_customizations({"color": "brown", "engraving_text": "Hi"})

    assert result == "Color: Brown, Engraving Text: Hi"


def test_empty_map_uses_placeholder() -> None:
    assert format_customizations({}) == "No customization"
    assert NO_CUSTOMIZATION_LABEL == "No customization"


def test_color_capitalizes_first_letter_only() -> None:
    assert format_customizations({"color": "navy blue"}) == "Color: Navy blue"


def test_non_color_values_are_kept_verbatim() -> None:
    result = format_customizations({"monogram": "abc", "size_cm": 12, "gift_wrap": True})

    assert result == "Monogram: abc, Size Cm: 12, Gift Wrap: True"


def test_preserves_insertion_order() -> None:
    result = format_customizations({"engraving": "x", "color": "red"})

    assert result == "Engraving: x, Color: Red"


# ==============================================================================
# Validation
# ==============================================================================


def test_accepts_flat_primitive_map() -> None:
    validate_customizations({"color": "brown", "size": 3, "ratio": 1.5, "gift": False})


def test_rejects_non_mapping() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_customizations(["color"])

    assert exc_info.value.errors[0]["code"] == "INVALID_TYPE"


@pytest.mark.parametrize("value", [None, {"nested": "x"}, ["a", "b"]])
def test_rejects_non_primitive_values(value: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_customizations({"color": value})

    assert exc_info.value.errors == [
        {
            "field": "customizations.color",
            "message": "Must be a string, number or boolean",
            "code": "INVALID_VALUE",
        }
    ]


def test_rejects_empty_key() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_customizations({"": "x"})

    assert exc_info.value.errors[0]["code"] == "INVALID_KEY"


def test_unknown_keys_are_reported_in_order() -> None:
    keys = unknown_customization_keys(
        {"engraving": "A", "color": "red", "engraving_text": "B"},
        ["engraving", "color_options"],
    )

    assert keys == ["color", "engraving_text"]
