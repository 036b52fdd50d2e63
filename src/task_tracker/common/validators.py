from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class _Unset:
    """Marker for "field absent from payload" (distinct from an explicit null)."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def require_non_empty(value: Any, field_name: str, *, max_len: Optional[int] = None) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required", {field_name: "Required"})
    value = value.strip()
    if max_len is not None and len(value) > max_len:
        raise ValidationError(
            f"{field_name} is too long",
            {field_name: f"Must be at most {max_len} characters"},
        )
    return value


def optional_text(value: Any, field_name: str, *, max_len: Optional[int] = None) -> Optional[str]:
    """Stripped string or None; blank strings count as None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string", {field_name: "Expected string"})
    value = value.strip()
    if not value:
        return None
    if max_len is not None and len(value) > max_len:
        raise ValidationError(
            f"{field_name} is too long",
            {field_name: f"Must be at most {max_len} characters"},
        )
    return value


def require_email(value: Any, field_name: str = "email", *, max_len: Optional[int] = None) -> str:
    value = require_non_empty(value, field_name, max_len=max_len)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email", {field_name: "Invalid email"})
    return value


def require_enum(value: Any, enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(
            f"Invalid {field_name}",
            {field_name: f"Must be one of: {allowed}"},
        )


def parse_id(value: Any) -> Optional[int]:
    """Positive integer id, or None when the value is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value > 0 else None
    if isinstance(value, str) and value.strip().isdecimal():
        n = int(value.strip())
        return n if n > 0 else None
    return None


def optional_id(value: Any, field_name: str) -> Optional[int]:
    if value is None:
        return None
    parsed = parse_id(value)
    if parsed is None:
        raise ValidationError(f"Invalid {field_name}", {field_name: "Must be a positive integer"})
    return parsed


class ErrorCollector:
    """Run several field checks and raise one ValidationError with every failure."""

    def __init__(self, message: str):
        self._message = message
        self.errors: dict[str, str] = {}

    def check(self, fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except ValidationError as e:
            self.errors.update(e.errors or {"payload": e.message})
            return None

    def raise_if_any(self) -> None:
        if self.errors:
            raise ValidationError(self._message, self.errors)
