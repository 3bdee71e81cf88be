from jobbify.extensions import db
from datetime import datetime


class Client(db.Model):
    __tablename__ = 'clients'

    """
    Client Model - A contact record (lead or customer) kept by a team.

    user_id/team_id are stamped from the acting user when the client is
    created. Tags live in client_tags and are replaced wholesale on update.
    """

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    team_id = db.Column(db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False, index=True)
    first_name = db.Column(db.String(255), nullable=False)
    last_name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    mobile_no = db.Column(db.String(50), nullable=False)
    street_address = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(255), nullable=False)
    region = db.Column(db.String(255), nullable=False)
    postal_code = db.Column(db.String(50), nullable=False)
    status = db.Column(db.Integer, nullable=False)
    note = db.Column(db.String(1000))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    tags = db.relationship('ClientTag', backref='client', cascade='all, delete-orphan', order_by='ClientTag.id')


class ClientTag(db.Model):
    __tablename__ = 'client_tags'

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey('clients.id', ondelete='CASCADE'), nullable=False, index=True)
    tag = db.Column(db.String(255), nullable=False)
