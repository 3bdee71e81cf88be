from marshmallow import Schema, fields, validate, validates, pre_load, ValidationError, EXCLUDE

from jobbify.extensions import db
from jobbify.models.role import Role
from jobbify.models.user import User
from jobbify.schemas.auth_schema import required_string, UserResponseSchema
from jobbify.schemas.fields import FlexibleString


class StaffSchema(Schema):
    """
    Staff create validation. `role` is the id of an existing Role.

    Pass user_id when updating so the staff member's own email does not
    count as a duplicate.
    """

    class Meta:
        unknown = EXCLUDE

    name = required_string('name')
    email = fields.Email(required=True, validate=validate.Length(max=255), error_messages={
        "required": "The email field is required.",
        "invalid": "The email field must be a valid email address."
    })
    mobile_no = FlexibleString(
        required=True,
        validate=[
            validate.Length(min=1, error="The mobile no field is required."),
            validate.Length(max=20),
        ],
        error_messages={"required": "The mobile no field is required."}
    )
    role = fields.Integer(required=True, error_messages={
        "required": "The role field is required.",
        "invalid": "The selected role is invalid."
    })
    note = fields.String(allow_none=True, load_default=None)

    def __init__(self, *args, user_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id

    @validates('email')
    def validate_email_unique(self, value, **kwargs):
        query = User.query.filter(User.email == value)
        if self.user_id is not None:
            query = query.filter(User.id != self.user_id)
        if query.first():
            raise ValidationError("The email has already been taken.")

    @validates('role')
    def validate_role_exists(self, value, **kwargs):
        if db.session.get(Role, value) is None:
            raise ValidationError("The selected role is invalid.")


class StaffUpdateSchema(StaffSchema):
    password = fields.String(
        allow_none=True,
        load_default=None,
        validate=validate.Length(min=8, error="The password field must be at least 8 characters.")
    )

    @pre_load
    def blank_password_to_none(self, data, **kwargs):
        if isinstance(data, dict) and data.get('password') == '':
            data = dict(data, password=None)
        return data


class StaffResponseSchema(UserResponseSchema):
    roles = fields.Method('get_roles')

    def get_roles(self, user):
        return [role.name for role in user.roles]


def staff_to_dict(user, team):
    """Serialize a staff member together with their membership in `team`."""
    data = StaffResponseSchema().dump(user)
    membership = user.membership_in(team) if team else None
    data["membership"] = {
        "team_id": membership.team_id,
        "role": membership.role,
    } if membership else None
    return data
