from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from jobbify.schemas.fields import decode_json_text
from jobbify.services.credentials import load_actor

bp = Blueprint('users', __name__)


def _company_profile(team):
    if team is None:
        return {}

    company = {"company_name": team.name}
    details = team.company_details
    if details:
        company.update({
            "business": details.business_name,
            "phone_number": details.business_number,
            "staffs_no": decode_json_text(details.staffs_no),
            "current_revenue": decode_json_text(details.current_revenue),
            "street_line_1": details.street_line_1,
            "street_line_2": details.street_line_2,
            "city": details.city,
            "zip_code": details.zip_code,
            "country": details.country
        })
    return company


@bp.route('/user', methods=['GET'])
@jwt_required()
def me():
    """Return the signed-in user's profile merged with their company profile."""
    user = load_actor()

    user_info = {
        "name": user.name,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "birthday": user.birthday.isoformat() if user.birthday else None,
        "email": user.email
    }

    return jsonify({
        "user": user_info,
        "company": _company_profile(user.personal_team)
    }), 200
