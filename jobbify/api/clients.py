from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from jobbify.api.pagination import page_from_request, paginate
from jobbify.errors import ApiError, ErrorKind
from jobbify.schemas.client_schema import ClientSchema, ClientResponseSchema
from jobbify.services.clients import (
    create_client,
    delete_client,
    find_team_client,
    lead_statuses,
    team_clients_query,
    update_client,
)
from jobbify.services.credentials import load_actor

bp = Blueprint('clients', __name__)

client_response_schema = ClientResponseSchema()


def _validation_error(err):
    return ApiError(ErrorKind.VALIDATION, "Validation error", status_code=422, errors=err.messages)


@bp.route('/', methods=['GET'], strict_slashes=False)
@jwt_required()
def list_clients():
    """
    List the team's clients, 50 per page.

    Query Parameters:
        - page: int (default: 1)

    Returns:
        - clients: array of client objects (with tags)
        - pagination: {page, limit, total, pages}
    """
    actor = load_actor()
    page = page_from_request()

    clients, pagination = paginate(team_clients_query(actor), page)
    current_app.logger.debug(
        f"List clients: user_id={actor.id} page={page} returned={len(clients)} total={pagination['total']}"
    )

    return jsonify({
        "clients": client_response_schema.dump(clients, many=True),
        "pagination": pagination
    }), 200


@bp.route('/statuses', methods=['GET'])
@jwt_required()
def statuses():
    """Lead status labels keyed by status value."""
    return jsonify(lead_statuses()), 200


@bp.route('/', methods=['POST'], strict_slashes=False)
@jwt_required()
def create():
    """
    Create a client.

    Request Body:
        {
            "first_name": "Ada", "last_name": "Lovelace",
            "email": "ada@example.com", "mobile_no": "5551234",
            "street_address": "1 Main St", "city": "London",
            "region": "Greater London", "postal_code": "12345",
            "status": 1, "note": "optional", "tags": ["vip"]
        }

    Returns:
        201: {message, client}
        422: Validation error
    """
    actor = load_actor()
    data = request.get_json(silent=True) or {}

    try:
        validated_data = ClientSchema().load(data)
    except ValidationError as err:
        current_app.logger.warning(f"Create client: Validation failed for fields={sorted(err.messages)}")
        raise _validation_error(err)

    client = create_client(actor, validated_data)

    return jsonify({
        "message": "Client created successfully",
        "client": client_response_schema.dump(client)
    }), 201


@bp.route('/<int:client_id>', methods=['PUT'])
@jwt_required()
def update(client_id):
    """Update a client; the tag list replaces all existing tags."""
    actor = load_actor()
    client = find_team_client(actor, client_id)
    data = request.get_json(silent=True) or {}

    try:
        validated_data = ClientSchema(client_id=client.id).load(data)
    except ValidationError as err:
        current_app.logger.warning(f"Update client: Validation failed client_id={client_id}")
        raise _validation_error(err)

    client = update_client(client, validated_data)

    return jsonify({
        "status": True,
        "message": "Client updated successfully",
        "client": client_response_schema.dump(client)
    }), 200


@bp.route('/<int:client_id>', methods=['DELETE'])
@jwt_required()
def destroy(client_id):
    actor = load_actor()
    client = find_team_client(actor, client_id)
    delete_client(client)

    return jsonify({
        "status": True,
        "message": "Client and associated tags deleted successfully"
    }), 200
