"""Validation of raw employee payloads.

Raw payloads are JSON objects using wire names; anything that is not a
known mutable field (``id``, ``createdAt``, ``updatedAt``, unknown keys) is
ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..common.validators import UNSET, ErrorCollector, optional_text, require_email, require_non_empty
from ..core.constants import MAX_DEPARTMENT_LENGTH, MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_POSITION_LENGTH
from ..core.exceptions import ValidationError

INVALID_EMPLOYEE_DATA = "Invalid employee data"


@dataclass(frozen=True)
class NewEmployee:
    name: str
    email: str
    department: Optional[str] = None
    position: Optional[str] = None


@dataclass(frozen=True)
class EmployeeChanges:
    """Partial update; fields left as UNSET are not touched."""

    name: Any = UNSET
    email: Any = UNSET
    department: Any = UNSET
    position: Any = UNSET

    def provided(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}


def _require_mapping(raw: Any) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise ValidationError(INVALID_EMPLOYEE_DATA, {"payload": "Expected a JSON object"})
    return raw


def parse_new_employee(raw: Any) -> NewEmployee:
    raw = _require_mapping(raw)
    errors = ErrorCollector(INVALID_EMPLOYEE_DATA)

    name = errors.check(require_non_empty, raw.get("name"), "name", max_len=MAX_NAME_LENGTH)
    email = errors.check(require_email, raw.get("email"), "email", max_len=MAX_EMAIL_LENGTH)
    department = errors.check(optional_text, raw.get("department"), "department", max_len=MAX_DEPARTMENT_LENGTH)
    position = errors.check(optional_text, raw.get("position"), "position", max_len=MAX_POSITION_LENGTH)
    errors.raise_if_any()

    return NewEmployee(name=name, email=email, department=department, position=position)


def parse_employee_changes(raw: Any) -> EmployeeChanges:
    raw = _require_mapping(raw)
    errors = ErrorCollector(INVALID_EMPLOYEE_DATA)
    values: dict[str, Any] = {}

    if "name" in raw:
        values["name"] = errors.check(require_non_empty, raw["name"], "name", max_len=MAX_NAME_LENGTH)
    if "email" in raw:
        values["email"] = errors.check(require_email, raw["email"], "email", max_len=MAX_EMAIL_LENGTH)
    if "department" in raw:
        values["department"] = errors.check(
            optional_text, raw["department"], "department", max_len=MAX_DEPARTMENT_LENGTH
        )
    if "position" in raw:
        values["position"] = errors.check(optional_text, raw["position"], "position", max_len=MAX_POSITION_LENGTH)
    errors.raise_if_any()

    return EmployeeChanges(**values)
