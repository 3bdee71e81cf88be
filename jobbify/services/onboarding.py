"""
Onboarding Workflow

Registration creates, in this order:
    1. the User (hashed password, display name "First Last")
    2. the user's personal Team
    3. the trial window (created_at + TRIAL_DAYS)
    4. the CompanyDetails row for that team
and then issues a bearer token.

Steps 1-4 share one transaction: if any of them fails nothing is kept.
"""
import logging
from datetime import datetime, timedelta

from flask import current_app

from jobbify.extensions import db
from jobbify.models.company_details import CompanyDetails
from jobbify.models.team import Team
from jobbify.models.user import User
from jobbify.services.credentials import hash_password, issue_token

logger = logging.getLogger(__name__)

# request key -> CompanyDetails column
COMPANY_FIELD_MAP = {
    'business': 'business_name',
    'phone_number': 'phone_number',
    'staffs_no': 'staffs_no',
    'current_revenue': 'current_revenue',
    'address': 'street_line_1',
    'address_line_2': 'street_line_2',
    'city': 'city',
    'postal_code': 'zip_code',
    'country': 'country',
}


def company_details_from_payload(team_id, data):
    """Build the CompanyDetails row from a validated registration payload."""
    values = {column: data.get(key) for key, column in COMPANY_FIELD_MAP.items()}
    # The business contact number is the phone number given at sign-up
    values['business_number'] = data.get('phone_number')
    return CompanyDetails(team_id=team_id, **values)


def default_team_name(user):
    return f"{user.name.split(' ', 1)[0]}'s Team"


def create_user(data):
    now = datetime.utcnow()
    user = User(
        first_name=data['first_name'],
        last_name=data['last_name'],
        birthday=data.get('birthday'),
        name=f"{data['first_name']} {data['last_name']}",
        email=data['email'],
        password_hash=hash_password(data['password']),
        created_at=now,
        updated_at=now
    )
    db.session.add(user)
    db.session.flush()
    return user


def create_personal_team(user, team_name=None):
    team = Team(
        owner=user,
        name=(team_name or '').strip() or default_team_name(user),
        personal_team=True
    )
    db.session.add(team)
    db.session.flush()
    return team


def start_trial(user):
    user.trial_ends_at = user.created_at + timedelta(days=current_app.config['TRIAL_DAYS'])
    db.session.flush()


def add_company_details(team, data):
    details = company_details_from_payload(team.id, data)
    db.session.add(details)
    db.session.flush()
    return details


def register_user(data):
    """
    Run the onboarding workflow for a validated RegisterSchema payload.

    Returns:
        tuple: (user, team, token)
    """
    try:
        user = create_user(data)
        team = create_personal_team(user, data.get('company_name'))
        start_trial(user)
        add_company_details(team, data)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Onboarding failed, registration rolled back", extra={"email": data.get('email')})
        raise

    logger.info("User registered", extra={"user_id": user.id, "team_id": team.id})
    return user, team, issue_token(user)
