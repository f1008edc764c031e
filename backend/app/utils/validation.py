"""
Request payload validation shared by the generation endpoints.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from app.utils.errors import ValidationError


def _is_missing(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def validate_payload(
    body: Any,
    required: Sequence[str],
    optional: Sequence[str] = (),
) -> dict[str, str]:
    """
    Check that every required field is present and non-empty.

    Raises ValidationError listing the missing fields in declaration order.
    Returns a new dict holding only the recognized fields, each coerced to a
    trimmed string. Optional fields are kept only when they are non-empty.
    """
    data: Mapping[str, Any] = body if isinstance(body, Mapping) else {}

    missing = [field for field in required if _is_missing(data.get(field))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    payload = {field: str(data[field]).strip() for field in required}
    for field in optional:
        if not _is_missing(data.get(field)):
            payload[field] = str(data[field]).strip()
    return payload
