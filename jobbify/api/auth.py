from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from jobbify.errors import ApiError, ErrorKind
from jobbify.schemas.auth_schema import RegisterSchema, LoginSchema, ResetPasswordSchema, UserResponseSchema
from jobbify.services.credentials import authenticate, issue_token
from jobbify.services.onboarding import register_user
from jobbify.services.password_reset import reset_password as reset_user_password

# Create Blueprint
bp = Blueprint('auth', __name__)

# Initialize schemas
register_schema = RegisterSchema()
login_schema = LoginSchema()
reset_password_schema = ResetPasswordSchema()
user_schema = UserResponseSchema()

BAD_CREDENTIALS_MESSAGE = 'Email & Password does not match with our record.'


@bp.route('/register', methods=['POST'])
def register():
    """
    User Registration Endpoint

    Creates the user, their personal team, a 14 day trial and the company
    profile in one transaction, then returns a bearer token.

    Request Body:
        {
            "first_name": "John",
            "last_name": "Doe",
            "birthday": "1990-01-01",
            "email": "john@doe.com",
            "password": "secret",
            "company_name": "Doe Inc",
            "staffs_no": "1-5",
            "current_revenue": "0-50k",
            "business": "Plumbing",
            "phone_number": "5551234",
            "address": "1 Main St",
            "address_line_2": "Suite 2",
            "city": "Springfield",
            "postal_code": "12345",
            "country": "US"
        }

    Returns:
        200: {status, message, user, token}
        401: Validation error (field-level `errors`)
        500: Server error
    """
    data = request.get_json(silent=True) or {}

    try:
        validated_data = register_schema.load(data)
    except ValidationError as err:
        current_app.logger.warning(f"Register: Validation failed for fields={sorted(err.messages)}")
        raise ApiError(ErrorKind.VALIDATION, "Validation error", status_code=401, errors=err.messages)

    user, team, token = register_user(validated_data)
    current_app.logger.info(f"Register: Created user_id={user.id} team_id={team.id}")

    return jsonify({
        "status": True,
        "message": "User Created Successfully",
        "user": user_schema.dump(user),
        "token": token
    }), 200


@bp.route('/login', methods=['POST'])
def login():
    """
    Login Endpoint

    Unknown email and wrong password produce the same 401 response.

    Responses:
      200: {status, message, user, token}
      401: Validation error or bad credentials
    """
    data = request.get_json(silent=True) or {}

    try:
        validated_data = login_schema.load(data)
    except ValidationError as err:
        raise ApiError(ErrorKind.VALIDATION, "Validation error", status_code=401, errors=err.messages)

    user = authenticate(validated_data['email'], validated_data['password'])
    if user is None:
        current_app.logger.warning("Login: Rejected credentials")
        raise ApiError(ErrorKind.UNAUTHENTICATED, BAD_CREDENTIALS_MESSAGE)

    return jsonify({
        "status": True,
        "message": "User Logged In Successfully",
        "user": user_schema.dump(user),
        "token": issue_token(user)
    }), 200


@bp.route('/reset-password', methods=['POST'])
def reset_password():
    """
    Consume a password reset token (from a staff invitation link).

    Request Body:
        {"email": "...", "token": "...", "password": "at least 8 chars"}
    """
    data = request.get_json(silent=True) or {}

    try:
        validated_data = reset_password_schema.load(data)
    except ValidationError as err:
        raise ApiError(ErrorKind.VALIDATION, "Validation error", status_code=400, errors=err.messages)

    reset_user_password(validated_data['email'], validated_data['token'], validated_data['password'])

    return jsonify({
        "status": True,
        "message": "Your password has been reset."
    }), 200
