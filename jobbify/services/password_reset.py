"""
Single-use password reset tokens.

Only a hash of the token is stored (one row per user). The plain token
travels in the reset URL and is consumed by reset_password().
"""
import logging
import secrets
from datetime import datetime
from urllib.parse import urlencode

from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash

from jobbify.errors import ApiError, ErrorKind
from jobbify.extensions import db
from jobbify.models.password_reset import PasswordResetToken
from jobbify.models.user import User
from jobbify.services.credentials import hash_password

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "This password reset token is invalid."


def issue_reset_token(user):
    """Create (or replace) the user's reset token. Caller commits."""
    token = secrets.token_hex(32)
    record = user.reset_token
    if record is None:
        record = PasswordResetToken(user=user)
        db.session.add(record)
    record.token_hash = generate_password_hash(token)
    record.created_at = datetime.utcnow()
    db.session.flush()
    return token


def build_reset_url(token, email):
    base = current_app.config['APP_URL'].rstrip('/')
    path = current_app.config['PASSWORD_RESET_PATH']
    return f"{base}{path}/{token}?{urlencode({'email': email})}"


def _is_expired(record):
    return datetime.utcnow() - record.created_at > current_app.config['PASSWORD_RESET_EXPIRES']


def reset_password(email, token, new_password):
    user = User.query.filter_by(email=email).first()
    record = user.reset_token if user else None
    if record is None or not check_password_hash(record.token_hash, token) or _is_expired(record):
        raise ApiError(ErrorKind.VALIDATION, INVALID_TOKEN_MESSAGE, status_code=400)

    user.password_hash = hash_password(new_password)
    db.session.delete(record)
    db.session.commit()
    logger.info("Password reset", extra={"user_id": user.id})
    return user
