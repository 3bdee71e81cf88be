from jobbify.extensions import db
from datetime import datetime


user_roles = db.Table(
    'user_roles',
    db.Column('user_id', db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
    db.Column('role_id', db.Integer, db.ForeignKey('roles.id', ondelete='CASCADE'), primary_key=True),
)


class User(db.Model):
    __tablename__ = 'users'

    """
    User Model - Anyone who can sign in to Jobbify.

    Account owners register themselves (and get a personal team); staff are
    created by an owner and attached to the owner's personal team.

    Attributes:
        id (int): Primary key
        name (str): Display name ("First Last" for self-registered users)
        email (str): Login email (unique across the whole system)
        password_hash (str): werkzeug hash, never returned by the API
        trial_ends_at (datetime): End of the trial window, set at registration
        mobile_no (str): Staff contact number
        note (str): Free-text note kept on staff records
    """

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    birthday = db.Column(db.Date)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    mobile_no = db.Column(db.String(20))
    note = db.Column(db.Text)
    trial_ends_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    owned_teams = db.relationship('Team', backref='owner', cascade='all, delete-orphan')
    memberships = db.relationship('TeamMembership', backref='user', cascade='all, delete-orphan')
    roles = db.relationship('Role', secondary=user_roles, backref='users')
    reset_token = db.relationship('PasswordResetToken', backref='user', uselist=False, cascade='all, delete-orphan')

    @property
    def personal_team(self):
        for team in self.owned_teams:
            if team.personal_team:
                return team
        return None

    def membership_in(self, team):
        for membership in self.memberships:
            if membership.team_id == team.id:
                return membership
        return None

    def __repr__(self):
        return f'<User {self.id} {self.email}>'
