from jobbify.extensions import db
from datetime import datetime


class CompanyDetails(db.Model):
    __tablename__ = 'company_details'

    """
    CompanyDetails Model - Business profile captured at registration.

    One row per team, created by the onboarding workflow. staffs_no and
    current_revenue are stored as the client sent them (often JSON ranges).
    """

    id = db.Column(db.Integer, primary_key=True)
    team_id = db.Column(db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False, unique=True)
    business_name = db.Column(db.String(255))
    business_number = db.Column(db.String(50))
    phone_number = db.Column(db.String(50))
    staffs_no = db.Column(db.String(255))
    current_revenue = db.Column(db.String(255))
    street_line_1 = db.Column(db.String(255))
    street_line_2 = db.Column(db.String(255))
    city = db.Column(db.String(255))
    zip_code = db.Column(db.String(50))
    country = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
