import logging

from jobbify.celery_app import celery_app
from jobbify.extensions import db
from jobbify.models.user import User
from jobbify.services.email_sender import send_email_via_ses

logger = logging.getLogger(__name__)

INVITATION_SUBJECT = "You have been added to {team_name} on Jobbify"

INVITATION_BODY = """Hi {name},

{inviter} added you to {team_name} on Jobbify.

Set your password to sign in:
{reset_url}

This link can be used once.
"""


def render_invitation(user, reset_url):
    team = user.memberships[0].team if user.memberships else None
    team_name = team.name if team else "a team"
    inviter = team.owner.name if team else "Your administrator"
    subject = INVITATION_SUBJECT.format(team_name=team_name)
    body = INVITATION_BODY.format(
        name=user.name,
        inviter=inviter,
        team_name=team_name,
        reset_url=reset_url
    )
    return subject, body


@celery_app.task(name='send_staff_invitation')
def send_staff_invitation_task(user_id, reset_url):
    """Mail a new staff member their set-password link (never a password)."""
    user = db.session.get(User, user_id)
    if not user:
        logger.error("Staff invitation: user not found", extra={"user_id": user_id})
        return {"sent": False}

    subject, body = render_invitation(user, reset_url)
    result = send_email_via_ses(recipient_email=user.email, subject=subject, body=body)
    return {"sent": True, "message_id": result['message_id']}
