"""
Form definition models.

A FormConfig is built once (from the built-in catalog, a request body or a
stored row) and is read-only afterwards. Everything the validation engine
relies on about rule parameters is checked here, at load time, so evaluation
never has to second-guess a rule's operand type.
"""

from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.core.visibility import find_condition_cycle

# tagged rule operand: which member is expected depends on ValidationRule.name
RuleValue = bool | int | float | str | list[str] | None

BOOLEAN_RULES = {"required", "requiredTrue", "email"}
LENGTH_RULES = {"minLength", "maxLength"}
NUMERIC_RULES = {"min", "max"}
PATTERN_RULES = {"pattern"}
KNOWN_RULES = BOOLEAN_RULES | LENGTH_RULES | NUMERIC_RULES | PATTERN_RULES


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _none_as_empty(v: Any) -> Any:
    # clients send null for an absent list
    return () if v is None else v


class ValidationRule(CamelModel):
    name: str = Field(min_length=1)
    value: RuleValue = None
    error_message: str = ""

    @model_validator(mode="after")
    def check_value_matches_rule(self) -> "ValidationRule":
        name, value = self.name, self.value

        if name in BOOLEAN_RULES and not isinstance(value, bool):
            raise ValueError(f"Rule '{name}' expects a boolean value")

        if name in LENGTH_RULES and (
            isinstance(value, bool) or not isinstance(value, int) or value < 0
        ):
            raise ValueError(f"Rule '{name}' expects a non-negative integer value")

        if name in NUMERIC_RULES and (
            isinstance(value, bool) or not isinstance(value, (int, float))
        ):
            raise ValueError(f"Rule '{name}' expects a numeric value")

        if name in PATTERN_RULES:
            if not isinstance(value, str):
                raise ValueError(f"Rule '{name}' expects a regular expression string")
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Rule '{name}' has an invalid regular expression: {e}")

        return self


class SelectOption(CamelModel):
    label: str
    value: Any = None


class FieldCondition(CamelModel):
    depends_on: str = Field(min_length=1)
    operator: Literal["equals", "in"] = "equals"
    value: Any = None
    values: tuple[Any, ...] | None = None
    action: str = "show"

    @model_validator(mode="after")
    def check_operands(self) -> "FieldCondition":
        if self.operator == "in" and self.values is None:
            raise ValueError("Condition operator 'in' requires 'values'")
        return self


class FormField(CamelModel):
    name: str = Field(min_length=1)
    label: str = ""
    control_type: str = "input"  # input|select|radio|checkbox|textarea
    input_type: str | None = None  # text|email|password|tel|number|date...
    default_value: Any = None
    placeholder: str | None = None
    validations: tuple[ValidationRule, ...] = ()
    options: tuple[SelectOption, ...] | None = None
    attributes: dict[str, Any] | None = None
    order: int | None = None
    css_class: str | None = None
    hidden: bool = False
    conditions: tuple[FieldCondition, ...] = ()

    @field_validator("validations", "conditions", mode="before")
    @classmethod
    def null_lists_as_empty(cls, v: Any) -> Any:
        return _none_as_empty(v)


class CrossFieldValidation(CamelModel):
    validation_type: str  # fieldMatch|dateRange|numericComparison|conditionalRequired
    fields: tuple[str, ...] = ()
    operator: str | None = None
    error_message: str = ""
    error_field: str | None = None

    @field_validator("fields", mode="before")
    @classmethod
    def null_fields_as_empty(cls, v: Any) -> Any:
        return _none_as_empty(v)

    @property
    def target_field(self) -> str:
        """Field the error is reported on: errorField, else the second operand."""
        return self.error_field if self.error_field is not None else self.fields[1]


class FormConfig(CamelModel):
    form_id: str = Field(min_length=1)
    form_title: str = ""
    form_description: str | None = None
    fields: tuple[FormField, ...] = ()
    submit_button_text: str = "Submit"
    cancel_button_text: str = "Cancel"
    cross_field_validations: tuple[CrossFieldValidation, ...] = ()

    @field_validator("cross_field_validations", mode="before")
    @classmethod
    def null_cross_fields_as_empty(cls, v: Any) -> Any:
        return _none_as_empty(v)

    @model_validator(mode="after")
    def check_references(self) -> "FormConfig":
        names = [f.name for f in self.fields]
        declared = set(names)

        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"Duplicate field names: {dupes}")

        for f in self.fields:
            for c in f.conditions:
                if c.depends_on not in declared:
                    raise ValueError(
                        f"Field '{f.name}' has a condition on unknown field '{c.depends_on}'"
                    )

        cycle = find_condition_cycle(self.fields)
        if cycle:
            raise ValueError(f"Cyclic field conditions: {' -> '.join(cycle)}")

        for cf in self.cross_field_validations:
            unknown = [n for n in cf.fields if n not in declared]
            if cf.error_field is not None and cf.error_field not in declared:
                unknown.append(cf.error_field)
            if unknown:
                raise ValueError(
                    f"Cross-field validation '{cf.validation_type}' references unknown fields: {unknown}"
                )

        return self

    def get_field(self, name: str) -> FormField | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None
