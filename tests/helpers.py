from app.schemas.form_schema import SchemaCreateRequest
from app.schemas.forms import CrossFieldValidation, FormConfig, FormField, ValidationRule


def rule(name: str, value=True, message: str | None = None) -> ValidationRule:
    return ValidationRule(name=name, value=value, error_message=message or f"{name} failed")


def field(name: str, *rules: ValidationRule, **kwargs) -> FormField:
    return FormField(name=name, label=name.title(), validations=rules, **kwargs)


def cross(validation_type: str, fields, operator=None, message="cross failed", error_field=None) -> CrossFieldValidation:
    return CrossFieldValidation(
        validation_type=validation_type,
        fields=tuple(fields),
        operator=operator,
        error_message=message,
        error_field=error_field,
    )


def make_form(*fields: FormField, form_id: str = "test-form", cross_field=()) -> FormConfig:
    return FormConfig(form_id=form_id, form_title="Test", fields=fields, cross_field_validations=tuple(cross_field))


def schema_request(
    name: str = "survey",
    *,
    tags: list[str] | None = None,
    form: FormConfig | None = None,
    version: str | None = None,
) -> SchemaCreateRequest:
    return SchemaCreateRequest(
        schema_name=name,
        schema_version=version,
        description=f"{name} schema",
        form_config=form if form is not None else make_form(field("answer", rule("required", message="Answer is required"))),
        tags=tags,
    )


def schema_payload(name: str = "survey", **extra) -> dict:
    """Wire (camelCase) body for POST/PUT /api/schemas."""
    body = {
        "schemaName": name,
        "description": f"{name} schema",
        "formConfig": {
            "formId": name,
            "formTitle": name.title(),
            "fields": [
                {
                    "name": "answer",
                    "label": "Answer",
                    "validations": [
                        {"name": "required", "value": True, "errorMessage": "Answer is required"},
                        {"name": "minLength", "value": 2, "errorMessage": "Answer is too short"},
                    ],
                }
            ],
        },
    }
    body.update(extra)
    return body
