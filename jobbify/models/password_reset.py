from jobbify.extensions import db
from datetime import datetime


class PasswordResetToken(db.Model):
    __tablename__ = 'password_reset_tokens'

    """
    One outstanding reset token per user. Only the hash is stored; the
    plain token exists in the reset URL handed out once. Deleting the user
    deletes the token.
    """

    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    token_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
