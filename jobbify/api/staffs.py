from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from jobbify.api.pagination import page_from_request, paginate
from jobbify.errors import ApiError, ErrorKind
from jobbify.schemas.staff_schema import StaffSchema, StaffUpdateSchema, staff_to_dict
from jobbify.services.credentials import load_actor, require_personal_team
from jobbify.services.staff_provisioning import (
    create_staff,
    delete_staff,
    find_team_member,
    team_members_query,
    update_staff,
)

bp = Blueprint('staffs', __name__)


def _validation_error(err):
    return ApiError(ErrorKind.VALIDATION, "Validation error", status_code=400, errors=err.messages)


@bp.route('/', methods=['GET'], strict_slashes=False)
@jwt_required()
def list_staffs():
    """Members of the signed-in user's personal team, 50 per page."""
    actor = load_actor()
    team = require_personal_team(actor)
    page = page_from_request()

    staffs, pagination = paginate(team_members_query(team), page)

    return jsonify({
        "staffs": [staff_to_dict(user, team) for user in staffs],
        "pagination": pagination
    }), 200


@bp.route('/<int:staff_id>', methods=['GET'])
@jwt_required()
def show(staff_id):
    actor = load_actor()
    team = require_personal_team(actor)
    user = find_team_member(team, staff_id)
    return jsonify(staff_to_dict(user, team)), 200


@bp.route('/', methods=['POST'], strict_slashes=False)
@jwt_required()
def create():
    """
    Create a staff member in the signed-in user's personal team.

    Request Body:
        {"name": "...", "email": "...", "mobile_no": "...", "role": <role id>, "note": "optional"}

    Returns:
        201: {message, user, reset_url}
        400: Validation error
        401: Unauthenticated

    The generated initial password is never returned; the staff member sets
    one through reset_url.
    """
    actor = load_actor()
    data = request.get_json(silent=True) or {}

    try:
        validated_data = StaffSchema().load(data)
    except ValidationError as err:
        current_app.logger.warning(f"Create staff: Validation failed for fields={sorted(err.messages)}")
        raise _validation_error(err)

    user, reset_url = create_staff(actor, validated_data)
    current_app.logger.info(f"Create staff: user_id={user.id} created by user_id={actor.id}")

    return jsonify({
        "message": "Staff successfully created",
        "user": staff_to_dict(user, actor.personal_team),
        "reset_url": reset_url
    }), 201


@bp.route('/<int:staff_id>', methods=['PUT'])
@jwt_required()
def update(staff_id):
    """
    Update a staff member; `password` is optional and re-hashed when given.

    Returns:
        200: {message, user} plus reset_url when an email change re-issued
             a pending invitation link
        400: Validation error
        404: Not a member of the signed-in user's team
    """
    actor = load_actor()
    data = request.get_json(silent=True) or {}

    try:
        validated_data = StaffUpdateSchema(user_id=staff_id).load(data)
    except ValidationError as err:
        current_app.logger.warning(f"Update staff: Validation failed staff_id={staff_id}")
        raise _validation_error(err)

    user, reset_url = update_staff(actor, staff_id, validated_data)

    body = {
        "message": "Staff successfully updated",
        "user": staff_to_dict(user, actor.personal_team)
    }
    if reset_url:
        body["reset_url"] = reset_url
    return jsonify(body), 200


@bp.route('/<int:staff_id>', methods=['DELETE'])
@jwt_required()
def destroy(staff_id):
    actor = load_actor()
    delete_staff(actor, staff_id)
    return jsonify({"message": "Staff successfully deleted"}), 200
