from __future__ import annotations

from typing import Iterable, Mapping, Union

from craftstore.domain.errors import ValidationError

CustomizationValue = Union[str, int, float, bool]
Customizations = Mapping[str, CustomizationValue]

NO_CUSTOMIZATION_LABEL = "No customization"


def format_customizations(customizations: Customizations) -> str:
    """
    Render a customization map as a single display string.

    {"color": "brown", "engraving_text": "Hi"} -> "Color: Brown, Engraving Text: Hi"
    Keys keep their insertion order.
    """
    if not customizations:
        return NO_CUSTOMIZATION_LABEL

    return ", ".join(
        f"{_format_key(key)}: {_format_value(key, value)}" for key, value in customizations.items()
    )


def _format_key(key: str) -> str:
    return " ".join(_capitalize_first(segment) for segment in key.split("_"))


def _format_value(key: str, value: CustomizationValue) -> str:
    if key == "color" and isinstance(value, str):
        # Only the first letter; "navy blue" stays "Navy blue"
        return _capitalize_first(value)
    return str(value)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def validate_customizations(customizations: object) -> None:
    """
    Check a customization map is flat: string keys, primitive values.

    Raises:
        ValidationError: With one entry per offending key
    """
    if not isinstance(customizations, Mapping):
        raise ValidationError(
            errors=[{"field": "customizations", "message": "Must be an object", "code": "INVALID_TYPE"}]
        )

    errors: list[dict[str, str]] = []

    for key, value in customizations.items():
        if not isinstance(key, str) or not key:
            errors.append(
                {
                    "field": "customizations",
                    "message": f"Keys must be non-empty strings, got {key!r}",
                    "code": "INVALID_KEY",
                }
            )
        elif value is None or not isinstance(value, (str, int, float, bool)):
            errors.append(
                {
                    "field": f"customizations.{key}",
                    "message": "Must be a string, number or boolean",
                    "code": "INVALID_VALUE",
                }
            )

    if errors:
        raise ValidationError(errors=errors)


def unknown_customization_keys(
    customizations: Customizations, known_type_names: Iterable[str]
) -> list[str]:
    """Keys that do not name a known customization type, in insertion order."""
    known = set(known_type_names)
    return [key for key in customizations if key not in known]
