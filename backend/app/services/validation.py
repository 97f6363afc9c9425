"""
Store Admin Backend — Request Validator
========================================

What:  Ordered presence checks over a decoded JSON request body.
How:   Each entity declares a tuple of FieldCheck(field, message, predicate).
       Checks run in declaration order; the first failure is returned as a
       ValidationError (422). Later fields are not inspected.
Who:   Used by EntityService.create and StoreService.create.

Presence semantics follow JSON clients: null, false, 0 and "" count as
missing; every other value (including "0", [] and {}) counts as present.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional

from app.exceptions import ValidationError


def is_present(value: Any) -> bool:
    """
    True unless the value is one of the "empty" JSON values.

    >>> [is_present(v) for v in (None, False, 0, 0.0, "", "x", "0", [], {})]
    [False, False, False, False, False, True, True, True, True]
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # NaN compares unequal to itself and is treated as missing too
        return value == value and value != 0
    return True


def is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


@dataclass(frozen=True)
class FieldCheck:
    field: str
    message: str
    predicate: Callable[[Any], bool] = is_present


def required(field: str, message: str) -> FieldCheck:
    return FieldCheck(field=field, message=message)


def first_violation(
    body: Mapping[str, Any],
    checks: Iterable[FieldCheck],
) -> Optional[ValidationError]:
    """
    Return the ValidationError for the first failing check, or None.

    Pure: never raises for a failing field, never touches the body.
    """
    for check in checks:
        if not check.predicate(body.get(check.field)):
            return ValidationError(message=check.message, field=check.field)
    return None


def validate_body(body: Mapping[str, Any], checks: Iterable[FieldCheck]) -> None:
    """Raise the first violation found, if any."""
    violation = first_violation(body, checks)
    if violation is not None:
        raise violation


def require_store_id(store_id: Optional[str]) -> None:
    if not store_id:
        raise ValidationError(message="Store ID is required", field="storeId")
