from __future__ import annotations

import logging
from typing import Any, Mapping

from app.core.cross_field import evaluate_cross_field
from app.core.field_rules import evaluate_rule
from app.core.schema_service import FormCatalog
from app.core.visibility import is_visible
from app.schemas.forms import FormConfig, FormField
from app.schemas.validation import (
    INVALID_MESSAGE,
    VALID_MESSAGE,
    FormSubmission,
    ValidationError,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def _form_not_found() -> ValidationResult:
    return ValidationResult(
        valid=False,
        errors=[
            ValidationError(
                field="formId",
                message="Form configuration not found",
                validation_type="system",
            )
        ],
        message=INVALID_MESSAGE,
    )


def _validate_field(field: FormField, data: Mapping[str, Any]) -> list[ValidationError]:
    """Every declared rule runs; errors keep rule declaration order."""
    errors: list[ValidationError] = []
    value = data.get(field.name)
    for rule in field.validations:
        error = evaluate_rule(field.name, value, rule)
        if error is not None:
            errors.append(error)
    return errors


def validate_form_data(
    form: FormConfig,
    data: Mapping[str, Any],
    *,
    skip_hidden_fields: bool = False,
) -> ValidationResult:
    """
    Field rules in field declaration order, then cross-field rules in
    declaration order. With skip_hidden_fields, rules of fields whose
    conditions currently hide them are not evaluated.
    """
    errors: list[ValidationError] = []

    for field in form.fields:
        if skip_hidden_fields and not is_visible(field, data):
            continue
        errors.extend(_validate_field(field, data))

    for rule in form.cross_field_validations:
        error = evaluate_cross_field(rule, data)
        if error is not None:
            errors.append(error)

    valid = not errors
    return ValidationResult(
        valid=valid,
        errors=errors,
        message=VALID_MESSAGE if valid else INVALID_MESSAGE,
    )


def validate_submission(
    submission: FormSubmission,
    catalog: FormCatalog,
    *,
    skip_hidden_fields: bool = False,
) -> ValidationResult:
    form = catalog.get_form_config(submission.form_id)
    if form is None:
        logger.warning("Validation requested for unknown form %r", submission.form_id)
        return _form_not_found()

    result = validate_form_data(form, submission.data, skip_hidden_fields=skip_hidden_fields)
    logger.debug(
        "Validated form %r: valid=%s errors=%d",
        submission.form_id,
        result.valid,
        len(result.errors),
    )
    return result
