from __future__ import annotations

import operator
from typing import Any, Callable, Mapping

from app.core.values import is_absent, parse_iso_date, parse_number, stringify
from app.schemas.forms import CrossFieldValidation
from app.schemas.validation import ValidationError

INVALID_DATE_MESSAGE = "Invalid date format"
INVALID_NUMBER_MESSAGE = "Invalid number format"

# conditionalRequired fires when the trigger field holds this value
CONDITIONAL_REQUIRED_TRIGGER = "custom"

NUMERIC_OPERATORS: dict[str, Callable[[float, float], bool]] = {
    "lessThan": operator.lt,
    "lessThanOrEqual": operator.le,
    "greaterThan": operator.gt,
    "greaterThanOrEqual": operator.ge,
}


def cross_field_error(rule: CrossFieldValidation, message: str) -> ValidationError:
    return ValidationError(
        field=rule.target_field,
        message=message,
        validation_type="cross-field",
    )


def _operands(rule: CrossFieldValidation, data: Mapping[str, Any]) -> tuple[Any, Any]:
    return data.get(rule.fields[0]), data.get(rule.fields[1])


def _field_match(rule: CrossFieldValidation, data: Mapping[str, Any]) -> ValidationError | None:
    a, b = _operands(rule, data)
    if a is None or b is None or stringify(a) != stringify(b):
        return cross_field_error(rule, rule.error_message)
    return None


def _date_range(rule: CrossFieldValidation, data: Mapping[str, Any]) -> ValidationError | None:
    a, b = _operands(rule, data)
    if a is None or b is None:
        # presence belongs to the fields' own required rules
        return None

    try:
        start = parse_iso_date(a)
        end = parse_iso_date(b)
    except ValueError:
        return cross_field_error(rule, INVALID_DATE_MESSAGE)

    if rule.operator == "lessThan" and not start < end:
        return cross_field_error(rule, rule.error_message)
    return None


def _numeric_comparison(rule: CrossFieldValidation, data: Mapping[str, Any]) -> ValidationError | None:
    a, b = _operands(rule, data)
    if a is None or b is None:
        return None

    try:
        x = parse_number(a)
        y = parse_number(b)
    except ValueError:
        return cross_field_error(rule, INVALID_NUMBER_MESSAGE)

    compare = NUMERIC_OPERATORS.get(rule.operator or "")
    if compare is not None and not compare(x, y):
        return cross_field_error(rule, rule.error_message)
    return None


def _conditional_required(rule: CrossFieldValidation, data: Mapping[str, Any]) -> ValidationError | None:
    trigger, dependent = _operands(rule, data)
    if trigger is None or stringify(trigger) != CONDITIONAL_REQUIRED_TRIGGER:
        return None
    if is_absent(dependent):
        return cross_field_error(rule, rule.error_message)
    return None


CROSS_FIELD_CHECKS: dict[str, Callable[[CrossFieldValidation, Mapping[str, Any]], "ValidationError | None"]] = {
    "fieldMatch": _field_match,
    "dateRange": _date_range,
    "numericComparison": _numeric_comparison,
    "conditionalRequired": _conditional_required,
}


def evaluate_cross_field(rule: CrossFieldValidation, data: Mapping[str, Any]) -> ValidationError | None:
    """
    Apply one cross-field rule to the whole payload. Rules naming fewer than
    two fields, and unknown validation types, yield no error.
    """
    if len(rule.fields) < 2:
        return None

    check = CROSS_FIELD_CHECKS.get(rule.validation_type)
    if check is None:
        return None
    return check(rule, data)
