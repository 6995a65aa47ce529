from __future__ import annotations

from uuid import UUID, uuid4

from car_store.domain.errors import ValidationError


def new_id() -> str:
    return str(uuid4())


def parse_id(value: str | None, label: str) -> str:
    """
    Normalize an opaque identifier coming from a client.

    Args:
        value: Raw identifier (path segment, query or body value)
        label: Human label used in the error message (e.g. "car")

    Returns:
        Canonical string form of the identifier

    Raises:
        ValidationError: If the value is empty or not a valid UUID
    """
    if not value:
        raise ValidationError(f"Invalid {label} ID", field=f"{label}_id")
    try:
        return str(UUID(value))
    except (ValueError, AttributeError, TypeError):
        raise ValidationError(f"Invalid {label} ID", field=f"{label}_id", value=value)
