"""
Credential Store helpers: password hashing, login checks, bearer tokens and
resolution of the acting user from the request's token.
"""
from flask_jwt_extended import create_access_token, get_jwt_identity
from werkzeug.security import generate_password_hash, check_password_hash

from jobbify.errors import ApiError, ErrorKind
from jobbify.extensions import db
from jobbify.models.user import User

# Compared against when the email is unknown so both login failures cost the same
_DUMMY_HASH = generate_password_hash('jobbify-dummy-password')


def hash_password(raw_password):
    return generate_password_hash(raw_password)


def verify_password(user, raw_password):
    if user is None:
        check_password_hash(_DUMMY_HASH, raw_password or '')
        return False
    return check_password_hash(user.password_hash, raw_password or '')


def authenticate(email, password):
    """Return the user for a valid email/password pair, otherwise None."""
    user = User.query.filter_by(email=email).first()
    if not verify_password(user, password):
        return None
    return user


def issue_token(user):
    team = user.personal_team
    return create_access_token(
        identity=str(user.id),
        additional_claims={
            "email": user.email,
            "team_id": team.id if team else None
        }
    )


def load_actor():
    """Resolve the authenticated user of the current request (inside @jwt_required)."""
    try:
        user_id = int(get_jwt_identity())
    except (TypeError, ValueError):
        raise ApiError(ErrorKind.UNAUTHENTICATED, "Unauthenticated.")

    user = db.session.get(User, user_id)
    if user is None:
        raise ApiError(ErrorKind.UNAUTHENTICATED, "Unauthenticated.")
    return user


def require_personal_team(actor):
    team = actor.personal_team
    if team is None:
        raise ApiError(ErrorKind.NOT_FOUND, "Personal team not found.")
    return team
