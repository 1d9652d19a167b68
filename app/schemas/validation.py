from typing import Any, Literal

from pydantic import Field

from app.schemas.forms import CamelModel

ValidationType = Literal["field", "cross-field", "system"]

VALID_MESSAGE = "Form is valid"
INVALID_MESSAGE = "Form validation failed"


class FormSubmission(CamelModel):
    form_id: str
    data: dict[str, Any] = Field(default_factory=dict)


class ValidationError(CamelModel):
    """Individual validation error"""
    field: str
    message: str
    validation_type: ValidationType


class ValidationResult(CamelModel):
    """Response from the validation endpoint"""
    valid: bool
    errors: list[ValidationError]
    message: str
