from __future__ import annotations

from typing import Optional

from ..core.enums import RecordType
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_record_type(value) -> RecordType:
    try:
        return RecordType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in RecordType)
        raise ValidationError(f"Invalid record type: {value!r} (expected one of: {allowed})")


def require_optional_str(value, field_name: str) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value
