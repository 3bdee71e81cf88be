from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from jobbify.models.role import Role

bp = Blueprint('roles', __name__)


@bp.route('/roles', methods=['GET'])
@jwt_required()
def list_roles():
    """Map of role id -> role name, for the staff role picker."""
    roles = Role.query.order_by(Role.id).all()
    return jsonify({str(role.id): role.name for role in roles}), 200
