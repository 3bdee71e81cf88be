from jobbify.extensions import db
from datetime import datetime


class Team(db.Model):
    __tablename__ = 'teams'

    """
    Team Model - A workspace owned by one user.

    Every registered user owns exactly one team with personal_team=True.
    Staff join that team through TeamMembership.
    """

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    personal_team = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships - deleting a team removes its members' pivots and its company profile
    memberships = db.relationship('TeamMembership', backref='team', cascade='all, delete-orphan')
    company_details = db.relationship('CompanyDetails', backref='team', uselist=False, cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Team {self.id} {self.name}>'


class TeamMembership(db.Model):
    __tablename__ = 'team_user'

    """
    Pivot between teams and member users.

    `role` is a copy of the role name taken when the member was assigned;
    renaming the Role later does not touch existing rows.
    """

    id = db.Column(db.Integer, primary_key=True)
    team_id = db.Column(db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    role = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint('team_id', 'user_id', name='uq_team_user'),
    )
