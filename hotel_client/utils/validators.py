"""
Input validation utilities for the Hotel Mania API client.
"""

import re
from typing import Any

from hotel_client.utils.exceptions import ValidationError


def validate_resource_id(resource_id: Any, label: str) -> str:
    """
    Validate a resource identifier before it is put into a URL path.

    Args:
        resource_id: Identifier supplied by the caller
        label: Resource name used in the error, e.g. ``Room``

    Returns:
        The identifier as a string

    Raises:
        ValidationError: If the identifier is empty
    """
    if resource_id is None or str(resource_id).strip() == "":
        raise ValidationError(f"{label} ID is required")
    return str(resource_id).strip()


def validate_email(email: str) -> str:
    """
    Validate email address format.

    Raises:
        ValidationError: If email format is invalid
    """
    if not email:
        raise ValidationError("Email address cannot be empty")

    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    if not re.match(email_pattern, email):
        raise ValidationError(f"Invalid email address format '{email}'")

    return email.lower()


def validate_required_fields(data: dict[str, Any], required_fields: list[str]) -> None:
    """
    Validate that required fields are present in data.

    Raises:
        ValidationError: If any required fields are missing or empty
    """
    missing_fields = [field for field in required_fields if field not in data]

    if missing_fields:
        raise ValidationError(f"Missing required fields: {', '.join(missing_fields)}")

    empty_fields = [
        field
        for field in required_fields
        if not data.get(field) and data.get(field) != 0
    ]

    if empty_fields:
        raise ValidationError(f"Empty required fields: {', '.join(empty_fields)}")
