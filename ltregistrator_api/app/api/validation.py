"""
Request validation for the employee endpoints.

Bodies and query values are accepted raw by the routes and checked
here, before any service is touched.  Every function returns a
``ValidationResult``: either a typed ``value`` or a list of error
dicts in the same shape pydantic uses (``loc``, ``msg``, ``type``),
which the routes raise as ``core.exceptions.ValidationError`` (status 400).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError
from ..schemas.leave import LeaveInput, LeaveUpdate

T = TypeVar("T")

_leave_inputs = TypeAdapter(List[LeaveInput])
_leave_updates = TypeAdapter(List[LeaveUpdate])


@dataclass
class ValidationResult(Generic[T]):
    value: Optional[T] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValidationError("Invalid request", self.errors)


def _error(loc: List[Any], msg: str, type_: str) -> Dict[str, Any]:
    return {"loc": loc, "msg": msg, "type": type_}


def _validate_body(adapter: TypeAdapter, payload: Any) -> ValidationResult:
    if payload is None:
        return ValidationResult(errors=[_error(["body"], "Request body is required", "missing")])
    try:
        items = adapter.validate_python(payload)
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        return ValidationResult(errors=[_error(["body", *e["loc"]], e["msg"], e["type"]) for e in errors])
    if not items:
        return ValidationResult(errors=[_error(["body"], "At least one leave is required", "too_short")])
    return ValidationResult(value=items)


def validate_leave_inputs(payload: Any) -> ValidationResult[List[LeaveInput]]:
    """Validate the body of ``POST /{employee_id}/leaves``."""
    return _validate_body(_leave_inputs, payload)


def validate_leave_updates(payload: Any) -> ValidationResult[List[LeaveUpdate]]:
    """Validate the body of ``PUT /{employee_id}/leaves``.

    Besides the item schema, a leave id may appear only once per batch.
    """
    result = _validate_body(_leave_updates, payload)
    if not result.is_valid:
        return result
    seen = set()
    for index, item in enumerate(result.value):
        if item.id in seen:
            return ValidationResult(
                errors=[_error(["body", index, "id"], f"Leave {item.id} is listed more than once", "duplicate")]
            )
        seen.add(item.id)
    return result


def validate_leave_ids(raw_ids: Optional[List[str]]) -> ValidationResult[List[int]]:
    """Validate the ``leaveID`` query values of ``DELETE /{employee_id}/leaves``."""
    if not raw_ids:
        return ValidationResult(errors=[_error(["query", "leaveID"], "At least one leaveID is required", "missing")])
    errors = []
    ids: List[int] = []
    for index, raw in enumerate(raw_ids):
        value = raw.strip()
        if not (value.isascii() and value.isdigit()) or int(value) <= 0:
            errors.append(_error(["query", "leaveID", index], "Leave id must be a positive integer", "int_parsing"))
            continue
        ids.append(int(value))
    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=ids)
