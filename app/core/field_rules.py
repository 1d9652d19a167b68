from __future__ import annotations

import re
from typing import Any, Callable

from app.core.values import is_absent, parse_number, stringify
from app.schemas.forms import ValidationRule
from app.schemas.validation import ValidationError

EMAIL_RE = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

INVALID_NUMBER_MESSAGE = "Invalid number format"


def field_error(field: str, message: str) -> ValidationError:
    return ValidationError(field=field, message=message, validation_type="field")


def _required(name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    if rule.value is True and is_absent(value):
        return field_error(name, rule.error_message)
    return None


def _required_true(name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    if rule.value is True and value is not True:
        return field_error(name, rule.error_message)
    return None


def _min_length(name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    if len(stringify(value)) < rule.value:
        return field_error(name, rule.error_message)
    return None


def _max_length(name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    if len(stringify(value)) > rule.value:
        return field_error(name, rule.error_message)
    return None


def _min(name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    try:
        x = parse_number(value)
    except ValueError:
        return field_error(name, INVALID_NUMBER_MESSAGE)
    if x < rule.value:
        return field_error(name, rule.error_message)
    return None


def _max(name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    try:
        x = parse_number(value)
    except ValueError:
        return field_error(name, INVALID_NUMBER_MESSAGE)
    if x > rule.value:
        return field_error(name, rule.error_message)
    return None


def _email(name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    if rule.value is True and not EMAIL_RE.fullmatch(stringify(value)):
        return field_error(name, rule.error_message)
    return None


def _pattern(name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    if not re.fullmatch(rule.value, stringify(value)):
        return field_error(name, rule.error_message)
    return None


RuleCheck = Callable[[str, Any, ValidationRule], "ValidationError | None"]

# presence rules see absent values; the others only run on present ones
PRESENCE_CHECKS: dict[str, RuleCheck] = {
    "required": _required,
    "requiredTrue": _required_true,
}

VALUE_CHECKS: dict[str, RuleCheck] = {
    "minLength": _min_length,
    "maxLength": _max_length,
    "min": _min,
    "max": _max,
    "email": _email,
    "pattern": _pattern,
}


def evaluate_rule(field_name: str, value: Any, rule: ValidationRule) -> ValidationError | None:
    """
    Apply one rule to one submitted value. Unknown rule names yield no error.
    """
    check = PRESENCE_CHECKS.get(rule.name)
    if check is not None:
        return check(field_name, value, rule)

    check = VALUE_CHECKS.get(rule.name)
    if check is None or is_absent(value):
        return None
    return check(field_name, value, rule)
