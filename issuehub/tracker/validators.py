# ============================================
# tracker/validators.py
# ============================================
import uuid
from typing import Iterable, List, Optional

from issuehub.exceptions import Invalid, InvalidId


def validate_id(value, field_name: str = "ID") -> uuid.UUID:
    """Parse a resource identifier or raise InvalidId"""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise InvalidId(f"Invalid {field_name} submitted")


def validate_ids(values: Iterable, field_name: str = "ID") -> List[uuid.UUID]:
    """Parse every identifier, failing on the first malformed one"""
    return [validate_id(value, field_name) for value in values]


def clean_title(title: Optional[str], resource: str) -> str:
    title = (title or '').strip()
    if not title:
        raise Invalid(f"{resource} title cannot be empty")
    return title


def clean_description(description: Optional[str]) -> str:
    return (description or '').strip()


def clean_choice(value, choices, field_name: str) -> str:
    if value not in choices.values:
        raise Invalid(f"Invalid {field_name}: {value!r}")
    return value
