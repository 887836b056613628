from __future__ import annotations

from craftstore.domain.errors import ValidationError


def parse_entity_id(value: int | str, field: str) -> int:
    """
    Parse an entity identifier coming from outside the domain.

    Identifiers are positive integers assigned sequentially from 1.
    Accepts ints and base-10 digit strings ("7", " 7 ").

    Raises:
        ValidationError: If the value is not a positive integer
    """
    parsed: int | None = None

    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            parsed = int(stripped)

    if parsed is None or parsed < 1:
        raise ValidationError(
            errors=[
                {
                    "field": field,
                    "message": "Must be a positive integer",
                    "code": "INVALID_ID",
                }
            ]
        )

    return parsed
