from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import format_iso_date, parse_hhmm, parse_iso_date

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value, default: str = "") -> str:
    if value is None:
        return default
    return str(value).strip()


def require_email(value: str, field_name: str = "email") -> str:
    v = require_non_empty(value, field_name)
    local, _, domain = v.partition("@")
    if not local or "." not in domain:
        raise ValidationError(f"{field_name} is not a valid address")
    return v


def require_iso_date(value: str, field_name: str) -> str:
    if not value:
        raise ValidationError(f"{field_name} is required")
    return format_iso_date(parse_iso_date(value))


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[str]:
    if value in (None, ""):
        return None
    return require_iso_date(value, field_name)


def require_time(value: str, field_name: str = "time") -> str:
    if not value:
        raise ValidationError(f"{field_name} is required")
    return parse_hhmm(value)


def require_choice(value: str, enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls((value or "").strip().lower())
    except (ValueError, AttributeError):
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


_MISSING = object()


def pick(payload: dict, key: str, default=_MISSING):
    """Read a payload field; a missing required field is a ValidationError."""
    value = payload.get(key, _MISSING) if payload is not None else _MISSING
    if value is _MISSING or value is None:
        if default is _MISSING:
            raise ValidationError(f"{key} is required")
        return default
    return value
