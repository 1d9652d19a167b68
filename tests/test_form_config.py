import pytest
from pydantic import ValidationError as PydanticValidationError

from app.core.builtin_forms import BUILTIN_FORMS
from app.schemas.forms import FieldCondition, FormConfig, FormField, ValidationRule
from tests.helpers import cross, field, make_form, rule


@pytest.mark.parametrize(
    "name,value",
    [
        ("required", "yes"),
        ("requiredTrue", 1),
        ("email", None),
        ("minLength", "3"),
        ("minLength", -1),
        ("maxLength", 2.5),
        ("maxLength", True),
        ("min", "18"),
        ("max", False),
        ("pattern", 42),
        ("pattern", "([a-z"),
    ],
)
def test_rule_operand_type_is_checked_at_load_time(name, value):
    with pytest.raises(PydanticValidationError):
        ValidationRule(name=name, value=value, error_message="x")


def test_well_typed_rules_load():
    assert ValidationRule(name="min", value=0.5).value == 0.5
    assert ValidationRule(name="maxLength", value=0).value == 0
    assert ValidationRule(name="required", value=False).value is False


def test_unknown_rule_names_are_accepted():
    r = ValidationRule(name="somethingNew", value=["a", "b"])
    assert r.value == ["a", "b"]


def test_camel_case_wire_format():
    form = FormConfig.model_validate(
        {
            "formId": "f",
            "fields": [
                {
                    "name": "email",
                    "controlType": "input",
                    "inputType": "email",
                    "validations": [{"name": "email", "value": True, "errorMessage": "Bad"}],
                }
            ],
            "crossFieldValidations": [],
        }
    )
    dumped = form.model_dump(by_alias=True)
    assert dumped["formId"] == "f"
    assert dumped["fields"][0]["inputType"] == "email"
    assert dumped["fields"][0]["validations"][0]["errorMessage"] == "Bad"


def test_form_config_is_immutable():
    form = make_form(field("a"))
    with pytest.raises(PydanticValidationError):
        form.form_id = "other"


def test_duplicate_field_names_rejected():
    with pytest.raises(PydanticValidationError, match="Duplicate field names"):
        make_form(field("a"), field("a"))


def test_condition_on_unknown_field_rejected():
    with pytest.raises(PydanticValidationError, match="unknown field"):
        make_form(FormField(name="b", conditions=[FieldCondition(depends_on="ghost", value="x")]))


def test_in_condition_requires_values():
    with pytest.raises(PydanticValidationError):
        FieldCondition(depends_on="a", operator="in")


def test_unknown_condition_operator_rejected():
    with pytest.raises(PydanticValidationError):
        FieldCondition(depends_on="a", operator="contains", value="x")


def test_cyclic_conditions_rejected():
    with pytest.raises(PydanticValidationError, match="Cyclic field conditions"):
        make_form(
            FormField(name="a", conditions=[FieldCondition(depends_on="b", value="1")]),
            FormField(name="b", conditions=[FieldCondition(depends_on="a", value="1")]),
        )


def test_cross_field_validation_must_reference_declared_fields():
    with pytest.raises(PydanticValidationError, match="unknown fields"):
        make_form(field("a"), cross_field=[cross("fieldMatch", ["a", "b"])])

    with pytest.raises(PydanticValidationError, match="unknown fields"):
        make_form(field("a"), field("b"), cross_field=[cross("fieldMatch", ["a", "b"], error_field="c")])


def test_builtin_forms_load():
    assert set(BUILTIN_FORMS) == {"registration", "contact", "conditional", "cross-validation"}
    assert BUILTIN_FORMS["registration"].form_id == "user-registration"
    assert len(BUILTIN_FORMS["cross-validation"].cross_field_validations) == 4
    assert BUILTIN_FORMS["contact"].get_field("message").attributes == {"rows": 5}
    assert BUILTIN_FORMS["contact"].get_field("nope") is None
    assert [f.name for f in BUILTIN_FORMS["registration"].fields][:3] == ["username", "email", "password"]


def test_rule_helper_defaults():
    r = rule("required")
    assert r.value is True
    assert r.error_message == "required failed"
