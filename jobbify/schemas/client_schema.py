from marshmallow import Schema, fields, validate, validates, ValidationError, EXCLUDE

from jobbify.models.client import Client
from jobbify.schemas.auth_schema import required_string
from jobbify.schemas.fields import NumericString


class ClientSchema(Schema):
    """
    Client create/update validation.

    Pass client_id when updating so the record's own email does not count
    as a duplicate.
    """

    class Meta:
        unknown = EXCLUDE

    first_name = required_string('first name')
    last_name = required_string('last name')
    email = fields.Email(required=True, validate=validate.Length(max=255), error_messages={
        "required": "The email field is required.",
        "invalid": "The email field must be a valid email address."
    })
    mobile_no = NumericString(required=True, error_messages={
        "required": "The mobile no field is required."
    })
    street_address = required_string('street address')
    city = required_string('city')
    region = required_string('region')
    postal_code = NumericString(required=True, error_messages={
        "required": "The postal code field is required."
    })
    status = fields.Integer(required=True, error_messages={
        "required": "The status field is required.",
        "invalid": "The status field must be an integer."
    })
    note = fields.String(allow_none=True, load_default=None, validate=validate.Length(max=1000))
    tags = fields.List(fields.String(validate=validate.Length(max=255)), required=False)

    def __init__(self, *args, client_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.client_id = client_id

    @validates('email')
    def validate_email_unique(self, value, **kwargs):
        query = Client.query.filter(Client.email == value)
        if self.client_id is not None:
            query = query.filter(Client.id != self.client_id)
        if query.first():
            raise ValidationError("The email has already been taken.")


class ClientResponseSchema(Schema):
    id = fields.Integer()
    user_id = fields.Integer()
    team_id = fields.Integer()
    first_name = fields.String()
    last_name = fields.String()
    email = fields.Email()
    mobile_no = fields.String()
    street_address = fields.String()
    city = fields.String()
    region = fields.String()
    postal_code = fields.String()
    status = fields.Integer()
    note = fields.String()
    tags = fields.Method('get_tags')
    created_at = fields.DateTime()
    updated_at = fields.DateTime()

    def get_tags(self, client):
        return [tag.tag for tag in client.tags]
