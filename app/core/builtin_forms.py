"""
Built-in form definitions served under /api/forms and validated by id.

Keys of BUILTIN_FORMS are the ids clients submit as formId; each form also
carries its own descriptive formId.
"""

from app.schemas.forms import FormConfig

PHONE_PATTERN = r"^[+]?[(]?[0-9]{1,4}[)]?[-\s\.]?[(]?[0-9]{1,4}[)]?[-\s\.]?[0-9]{1,9}$"
PASSWORD_PATTERN = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]+$"


def _rule(name: str, value, message: str) -> dict:
    return {"name": name, "value": value, "errorMessage": message}


def _required(message: str) -> dict:
    return _rule("required", True, message)


def _options(*pairs: tuple[str, str]) -> list[dict]:
    return [{"label": label, "value": value} for label, value in pairs]


def registration_form() -> FormConfig:
    return FormConfig.model_validate(
        {
            "formId": "user-registration",
            "formTitle": "User Registration",
            "formDescription": "Please fill out the form to create your account",
            "submitButtonText": "Register",
            "cancelButtonText": "Cancel",
            "fields": [
                {
                    "name": "username",
                    "label": "Username",
                    "controlType": "input",
                    "inputType": "text",
                    "placeholder": "Enter your username",
                    "order": 1,
                    "validations": [
                        _required("Username is required"),
                        _rule("minLength", 4, "Username must be at least 4 characters"),
                        _rule("maxLength", 20, "Username cannot exceed 20 characters"),
                        _rule("pattern", "^[a-zA-Z0-9_]+$", "Username can only contain letters, numbers, and underscores"),
                    ],
                },
                {
                    "name": "email",
                    "label": "Email Address",
                    "controlType": "input",
                    "inputType": "email",
                    "placeholder": "your.email@example.com",
                    "order": 2,
                    "validations": [
                        _required("Email is required"),
                        _rule("email", True, "Please enter a valid email address"),
                    ],
                },
                {
                    "name": "password",
                    "label": "Password",
                    "controlType": "input",
                    "inputType": "password",
                    "placeholder": "Enter a strong password",
                    "order": 3,
                    "validations": [
                        _required("Password is required"),
                        _rule("minLength", 8, "Password must be at least 8 characters"),
                        _rule("pattern", PASSWORD_PATTERN, "Password must contain uppercase, lowercase, number, and special character"),
                    ],
                },
                {
                    "name": "phone",
                    "label": "Phone Number",
                    "controlType": "input",
                    "inputType": "tel",
                    "placeholder": "+1 (555) 123-4567",
                    "order": 4,
                    "validations": [
                        _required("Phone number is required"),
                        _rule("pattern", PHONE_PATTERN, "Please enter a valid phone number"),
                    ],
                },
                {
                    "name": "age",
                    "label": "Age",
                    "controlType": "input",
                    "inputType": "number",
                    "placeholder": "Enter your age",
                    "order": 5,
                    "validations": [
                        _required("Age is required"),
                        _rule("min", 18, "You must be at least 18 years old"),
                        _rule("max", 120, "Please enter a valid age"),
                    ],
                },
                {
                    "name": "gender",
                    "label": "Gender",
                    "controlType": "radio",
                    "order": 6,
                    "options": _options(
                        ("Male", "male"),
                        ("Female", "female"),
                        ("Other", "other"),
                        ("Prefer not to say", "not_specified"),
                    ),
                    "validations": [_required("Please select your gender")],
                },
                {
                    "name": "country",
                    "label": "Country",
                    "controlType": "select",
                    "placeholder": "Select your country",
                    "order": 7,
                    "options": _options(
                        ("United States", "US"),
                        ("United Kingdom", "UK"),
                        ("Canada", "CA"),
                        ("Australia", "AU"),
                        ("India", "IN"),
                        ("Germany", "DE"),
                        ("France", "FR"),
                    ),
                    "validations": [_required("Please select your country")],
                },
                {
                    "name": "bio",
                    "label": "Bio",
                    "controlType": "textarea",
                    "placeholder": "Tell us about yourself...",
                    "order": 8,
                    "attributes": {"rows": 4, "cols": 50},
                    "validations": [_rule("maxLength", 500, "Bio cannot exceed 500 characters")],
                },
                {
                    "name": "terms",
                    "label": "I agree to the Terms and Conditions",
                    "controlType": "checkbox",
                    "order": 9,
                    "validations": [_rule("requiredTrue", True, "You must accept the terms and conditions")],
                },
            ],
        }
    )


def contact_form() -> FormConfig:
    return FormConfig.model_validate(
        {
            "formId": "contact-form",
            "formTitle": "Contact Us",
            "formDescription": "We'd love to hear from you",
            "submitButtonText": "Send Message",
            "cancelButtonText": "Clear",
            "fields": [
                {
                    "name": "name",
                    "label": "Full Name",
                    "controlType": "input",
                    "inputType": "text",
                    "placeholder": "Enter your full name",
                    "order": 1,
                    "validations": [
                        _required("Name is required"),
                        _rule("minLength", 3, "Name must be at least 3 characters"),
                    ],
                },
                {
                    "name": "email",
                    "label": "Email Address",
                    "controlType": "input",
                    "inputType": "email",
                    "placeholder": "your.email@example.com",
                    "order": 2,
                    "validations": [
                        _required("Email is required"),
                        _rule("email", True, "Please enter a valid email address"),
                    ],
                },
                {
                    "name": "subject",
                    "label": "Subject",
                    "controlType": "select",
                    "placeholder": "Select a subject",
                    "order": 3,
                    "options": _options(
                        ("General Inquiry", "general"),
                        ("Technical Support", "support"),
                        ("Billing Question", "billing"),
                        ("Feedback", "feedback"),
                    ),
                    "validations": [_required("Please select a subject")],
                },
                {
                    "name": "message",
                    "label": "Message",
                    "controlType": "textarea",
                    "placeholder": "Type your message here...",
                    "order": 4,
                    "attributes": {"rows": 5},
                    "validations": [
                        _required("Message is required"),
                        _rule("minLength", 10, "Message must be at least 10 characters"),
                        _rule("maxLength", 500, "Message cannot exceed 500 characters"),
                    ],
                },
            ],
        }
    )


def conditional_form() -> FormConfig:
    return FormConfig.model_validate(
        {
            "formId": "conditional-form",
            "formTitle": "Conditional Fields Example",
            "formDescription": "Form demonstrating conditional field visibility",
            "submitButtonText": "Submit",
            "cancelButtonText": "Cancel",
            "fields": [
                {
                    "name": "employmentStatus",
                    "label": "Employment Status",
                    "controlType": "select",
                    "placeholder": "Select your employment status",
                    "order": 1,
                    "options": _options(
                        ("Employed", "employed"),
                        ("Self-Employed", "self-employed"),
                        ("Unemployed", "unemployed"),
                        ("Student", "student"),
                    ),
                    "validations": [_required("Employment status is required")],
                },
                {
                    "name": "companyName",
                    "label": "Company Name",
                    "controlType": "input",
                    "inputType": "text",
                    "placeholder": "Enter company name",
                    "order": 2,
                    "hidden": True,
                    "conditions": [
                        {
                            "dependsOn": "employmentStatus",
                            "operator": "in",
                            "values": ["employed", "self-employed"],
                            "action": "show",
                        }
                    ],
                    "validations": [_required("Company name is required")],
                },
                {
                    "name": "universityName",
                    "label": "University Name",
                    "controlType": "input",
                    "inputType": "text",
                    "placeholder": "Enter university name",
                    "order": 3,
                    "hidden": True,
                    "conditions": [
                        {"dependsOn": "employmentStatus", "operator": "equals", "value": "student", "action": "show"}
                    ],
                    "validations": [_required("University name is required")],
                },
                {
                    "name": "hasExperience",
                    "label": "Do you have previous experience?",
                    "controlType": "checkbox",
                    "order": 4,
                },
                {
                    "name": "yearsExperience",
                    "label": "Years of Experience",
                    "controlType": "input",
                    "inputType": "number",
                    "placeholder": "Enter years of experience",
                    "order": 5,
                    "hidden": True,
                    "conditions": [
                        {"dependsOn": "hasExperience", "operator": "equals", "value": True, "action": "show"}
                    ],
                    "validations": [
                        _required("Years of experience is required"),
                        _rule("min", 0, "Years cannot be negative"),
                    ],
                },
                {
                    "name": "contactMethod",
                    "label": "Preferred Contact Method",
                    "controlType": "radio",
                    "order": 6,
                    "options": _options(("Email", "email"), ("Phone", "phone"), ("SMS", "sms")),
                    "validations": [_required("Please select a contact method")],
                },
                {
                    "name": "phoneNumber",
                    "label": "Phone Number",
                    "controlType": "input",
                    "inputType": "tel",
                    "placeholder": "+1 (555) 123-4567",
                    "order": 7,
                    "hidden": True,
                    "conditions": [
                        {
                            "dependsOn": "contactMethod",
                            "operator": "in",
                            "values": ["phone", "sms"],
                            "action": "show",
                        }
                    ],
                    "validations": [
                        _required("Phone number is required"),
                        _rule("pattern", PHONE_PATTERN, "Please enter a valid phone number"),
                    ],
                },
                {
                    "name": "emailAddress",
                    "label": "Email Address",
                    "controlType": "input",
                    "inputType": "email",
                    "placeholder": "your.email@example.com",
                    "order": 8,
                    "hidden": True,
                    "conditions": [
                        {"dependsOn": "contactMethod", "operator": "equals", "value": "email", "action": "show"}
                    ],
                    "validations": [
                        _required("Email is required"),
                        _rule("email", True, "Please enter a valid email address"),
                    ],
                },
            ],
        }
    )


def cross_field_validation_form() -> FormConfig:
    return FormConfig.model_validate(
        {
            "formId": "cross-field-validation-form",
            "formTitle": "Cross-Field Validation Example",
            "formDescription": "Form demonstrating cross-field validations",
            "submitButtonText": "Submit",
            "cancelButtonText": "Cancel",
            "fields": [
                {
                    "name": "password",
                    "label": "Password",
                    "controlType": "input",
                    "inputType": "password",
                    "placeholder": "Enter password",
                    "order": 1,
                    "validations": [
                        _required("Password is required"),
                        _rule("minLength", 8, "Password must be at least 8 characters"),
                    ],
                },
                {
                    "name": "confirmPassword",
                    "label": "Confirm Password",
                    "controlType": "input",
                    "inputType": "password",
                    "placeholder": "Re-enter password",
                    "order": 2,
                    "validations": [_required("Please confirm your password")],
                },
                {
                    "name": "startDate",
                    "label": "Start Date",
                    "controlType": "input",
                    "inputType": "date",
                    "order": 3,
                    "validations": [_required("Start date is required")],
                },
                {
                    "name": "endDate",
                    "label": "End Date",
                    "controlType": "input",
                    "inputType": "date",
                    "order": 4,
                    "validations": [_required("End date is required")],
                },
                {
                    "name": "minBudget",
                    "label": "Minimum Budget",
                    "controlType": "input",
                    "inputType": "number",
                    "placeholder": "Enter minimum budget",
                    "order": 5,
                    "validations": [
                        _required("Minimum budget is required"),
                        _rule("min", 0, "Budget cannot be negative"),
                    ],
                },
                {
                    "name": "maxBudget",
                    "label": "Maximum Budget",
                    "controlType": "input",
                    "inputType": "number",
                    "placeholder": "Enter maximum budget",
                    "order": 6,
                    "validations": [
                        _required("Maximum budget is required"),
                        _rule("min", 0, "Budget cannot be negative"),
                    ],
                },
                {
                    "name": "agreementType",
                    "label": "Agreement Type",
                    "controlType": "select",
                    "placeholder": "Select agreement type",
                    "order": 7,
                    "options": _options(("Standard", "standard"), ("Custom", "custom")),
                    "validations": [_required("Agreement type is required")],
                },
                {
                    "name": "customAgreementDetails",
                    "label": "Custom Agreement Details",
                    "controlType": "textarea",
                    "placeholder": "Provide custom agreement details",
                    "order": 8,
                    "hidden": True,
                    "conditions": [
                        {"dependsOn": "agreementType", "operator": "equals", "value": "custom", "action": "show"}
                    ],
                },
            ],
            "crossFieldValidations": [
                {
                    "validationType": "fieldMatch",
                    "fields": ["password", "confirmPassword"],
                    "operator": "equals",
                    "errorMessage": "Passwords do not match",
                    "errorField": "confirmPassword",
                },
                {
                    "validationType": "dateRange",
                    "fields": ["startDate", "endDate"],
                    "operator": "lessThan",
                    "errorMessage": "End date must be after start date",
                    "errorField": "endDate",
                },
                {
                    "validationType": "numericComparison",
                    "fields": ["minBudget", "maxBudget"],
                    "operator": "lessThanOrEqual",
                    "errorMessage": "Maximum budget must be greater than or equal to minimum budget",
                    "errorField": "maxBudget",
                },
                {
                    "validationType": "conditionalRequired",
                    "fields": ["agreementType", "customAgreementDetails"],
                    "operator": "requiredIf",
                    "errorMessage": "Custom agreement details are required when agreement type is 'Custom'",
                    "errorField": "customAgreementDetails",
                },
            ],
        }
    )


BUILTIN_FORMS: dict[str, FormConfig] = {
    "registration": registration_form(),
    "contact": contact_form(),
    "conditional": conditional_form(),
    "cross-validation": cross_field_validation_form(),
}
