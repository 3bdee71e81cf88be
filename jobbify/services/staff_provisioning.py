"""
Staff Provisioning Workflow

An account owner (the actor) creates staff users inside their personal
team. A staff member gets exactly one role and a membership row whose
`role` column is a copy of the role name at assignment time. Instead of a
usable password the workflow returns a password reset link.
"""
import logging
import secrets

from flask import current_app

from jobbify.errors import ApiError, ErrorKind
from jobbify.extensions import db
from jobbify.models.role import Role
from jobbify.models.team import Team, TeamMembership
from jobbify.models.user import User
from jobbify.services.credentials import hash_password, require_personal_team
from jobbify.services.password_reset import issue_reset_token, build_reset_url

logger = logging.getLogger(__name__)

INITIAL_PASSWORD_BYTES = 12


def team_members_query(team):
    return (
        User.query
        .join(TeamMembership, TeamMembership.user_id == User.id)
        .filter(TeamMembership.team_id == team.id)
        .order_by(User.id)
    )


def find_team_member(team, staff_id):
    user = team_members_query(team).filter(User.id == staff_id).first()
    if user is None:
        raise ApiError(ErrorKind.NOT_FOUND, "Staff member not found")
    return user


def get_role(role_id):
    role = db.session.get(Role, role_id)
    if role is None:
        raise ApiError(ErrorKind.NOT_FOUND, "Role not found")
    return role


def assign_team_role(team, user, role):
    """Insert or update the user's membership in `team` with the role's current name."""
    membership = user.membership_in(team)
    if membership is None:
        membership = TeamMembership(team=team, user=user, role=role.name)
        db.session.add(membership)
    else:
        membership.role = role.name
    return membership


def send_invitation(user, reset_url):
    """Queue the set-password mail when invitation emails are enabled."""
    if current_app.config.get('STAFF_INVITE_EMAILS_ENABLED'):
        from jobbify.tasks.staff_tasks import send_staff_invitation_task
        send_staff_invitation_task.delay(user.id, reset_url)


def create_staff(actor, data):
    """
    Create a staff user in the actor's personal team.

    Returns:
        tuple: (user, reset_url)
    """
    team = require_personal_team(actor)

    try:
        user = User(
            name=data['name'],
            email=data['email'],
            mobile_no=data['mobile_no'],
            note=data.get('note'),
            password_hash=hash_password(secrets.token_urlsafe(INITIAL_PASSWORD_BYTES))
        )
        db.session.add(user)
        db.session.flush()

        role = get_role(data['role'])
        user.roles = [role]
        assign_team_role(team, user, role)

        token = issue_reset_token(user)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Staff provisioning failed, rolled back", extra={"actor_id": actor.id})
        raise

    reset_url = build_reset_url(token, user.email)
    logger.info("Staff created", extra={"actor_id": actor.id, "user_id": user.id, "team_id": team.id})
    send_invitation(user, reset_url)

    return user, reset_url


def update_staff(actor, staff_id, data):
    """
    Update a member of the actor's team.

    When the email changes while an invitation is still outstanding, a new
    reset link is issued for the new address (and mailed when enabled); the
    old link stops working.

    Returns:
        tuple: (user, reset_url or None)
    """
    team = require_personal_team(actor)
    user = find_team_member(team, staff_id)
    email_changed = user.email != data['email']
    token = None

    try:
        user.name = data['name']
        user.email = data['email']
        user.mobile_no = data['mobile_no']
        if data.get('note') is not None:
            user.note = data['note']
        if data.get('password'):
            user.password_hash = hash_password(data['password'])
            # A chosen password supersedes any pending set-password link
            user.reset_token = None
        elif email_changed and user.reset_token is not None:
            token = issue_reset_token(user)

        role = get_role(data['role'])
        # Exactly one role afterwards; memberships in other teams are untouched
        user.roles = [role]
        assign_team_role(team, user, role)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Staff update failed, rolled back", extra={"actor_id": actor.id, "user_id": staff_id})
        raise

    logger.info("Staff updated", extra={"actor_id": actor.id, "user_id": user.id})

    reset_url = None
    if token:
        reset_url = build_reset_url(token, user.email)
        send_invitation(user, reset_url)
    return user, reset_url


def delete_staff(actor, staff_id):
    """
    Delete a staff member of the actor's team.

    Teams *owned* by the staff user are deleted with them; teams they only
    belong to just lose the membership row.
    """
    team = require_personal_team(actor)
    user = find_team_member(team, staff_id)

    try:
        for owned in Team.query.filter_by(user_id=user.id).all():
            db.session.delete(owned)
        db.session.delete(user)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Staff delete failed, rolled back", extra={"actor_id": actor.id, "user_id": staff_id})
        raise

    logger.info("Staff deleted", extra={"actor_id": actor.id, "user_id": staff_id})
