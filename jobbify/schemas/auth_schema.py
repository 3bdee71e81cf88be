from marshmallow import Schema, fields, validate, validates, ValidationError, EXCLUDE

from jobbify.models.user import User
from jobbify.schemas.fields import FlexibleString, JsonText, TrimmedString


def required_string(label, max_length=255, trim=True):
    field_class = TrimmedString if trim else fields.String
    return field_class(
        required=True,
        validate=[
            validate.Length(min=1, error=f"The {label} field is required."),
            validate.Length(max=max_length),
        ],
        error_messages={"required": f"The {label} field is required."}
    )


def optional_string(max_length=255):
    return FlexibleString(
        required=False,
        allow_none=True,
        load_default=None,
        validate=validate.Length(max=max_length)
    )


class RegisterSchema(Schema):
    """
    Registration Request Validation Schema

    Personal fields are required; the company profile fields are accepted
    but optional. These key names are the canonical request names; the
    onboarding service maps them onto CompanyDetails columns.

    Example:
        schema = RegisterSchema()
        result = schema.load(request_data)
    """

    class Meta:
        unknown = EXCLUDE

    first_name = required_string('first name', 100)
    last_name = required_string('last name', 100)
    birthday = fields.Date(required=True, error_messages={
        "required": "The birthday field is required.",
        "invalid": "The birthday field must be a valid date."
    })
    email = fields.Email(required=True, validate=validate.Length(max=255), error_messages={
        "required": "The email field is required.",
        "invalid": "The email field must be a valid email address."
    })
    password = required_string('password', trim=False)
    company_name = required_string('company name')

    staffs_no = JsonText(required=False, allow_none=True, load_default=None)
    current_revenue = JsonText(required=False, allow_none=True, load_default=None)
    business = optional_string()
    phone_number = optional_string(50)
    address = optional_string()
    address_line_2 = optional_string()
    city = optional_string()
    postal_code = optional_string(50)
    country = optional_string()

    @validates('email')
    def validate_email_unique(self, value, **kwargs):
        if User.query.filter_by(email=value).first():
            raise ValidationError("The email has already been taken.")


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True, error_messages={
        "required": "The email field is required.",
        "invalid": "The email field must be a valid email address."
    })
    password = required_string('password', trim=False)


class ResetPasswordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True, error_messages={
        "required": "The email field is required.",
        "invalid": "The email field must be a valid email address."
    })
    token = required_string('token', trim=False)
    password = fields.String(
        required=True,
        validate=validate.Length(min=8, error="The password field must be at least 8 characters."),
        error_messages={"required": "The password field is required."}
    )


class UserResponseSchema(Schema):
    """
    User Response Schema

    Defines what user data is returned to the frontend.
    Never return password_hash!
    """
    id = fields.Integer()
    name = fields.String()
    first_name = fields.String()
    last_name = fields.String()
    birthday = fields.Date()
    email = fields.Email()
    mobile_no = fields.String()
    note = fields.String()
    trial_ends_at = fields.DateTime()
    created_at = fields.DateTime()
