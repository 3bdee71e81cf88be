# =============================================================================
# tests/test_password_reset.py - Staff invitation reset links
# =============================================================================

from datetime import datetime, timedelta
from urllib.parse import urlparse, parse_qs

import pytest

from jobbify.extensions import db
from jobbify.models import PasswordResetToken, User
from jobbify.tasks import staff_tasks


@pytest.fixture
def invitation(client, owner, roles):
    """Create a staff member and return {"email", "token"} parsed from the reset link."""
    response = client.post('/staffs/', json={
        "name": "Sam Staff",
        "email": "sam@x.com",
        "mobile_no": "0700123456",
        "role": roles["Staff"].id,
    }, headers=owner["headers"])
    assert response.status_code == 201, response.get_json()

    url = urlparse(response.get_json()["reset_url"])
    return {
        "email": parse_qs(url.query)["email"][0],
        "token": url.path.rsplit('/', 1)[-1],
    }


def reset(client, invitation, **overrides):
    payload = dict(invitation, password="fresh-password")
    payload.update(overrides)
    return client.post('/auth/reset-password', json=payload)


def test_reset_then_login(client, invitation):
    response = reset(client, invitation)

    assert response.status_code == 200
    assert response.get_json()["status"] is True

    login = client.post('/auth/login', json={"email": "sam@x.com", "password": "fresh-password"})
    assert login.status_code == 200


def test_token_is_single_use(client, invitation):
    assert reset(client, invitation).status_code == 200

    again = reset(client, invitation, password="another-password")

    assert again.status_code == 400
    assert again.get_json()["message"] == "This password reset token is invalid."
    assert PasswordResetToken.query.count() == 0


def test_wrong_token_is_rejected(client, invitation):
    response = reset(client, invitation, token="0" * 64)

    assert response.status_code == 400
    login = client.post('/auth/login', json={"email": "sam@x.com", "password": "fresh-password"})
    assert login.status_code == 401


def test_expired_token_is_rejected(client, invitation):
    record = User.query.filter_by(email="sam@x.com").one().reset_token
    record.created_at = datetime.utcnow() - timedelta(hours=2)
    db.session.commit()

    response = reset(client, invitation)

    assert response.status_code == 400


def test_short_password_is_rejected(client, invitation):
    response = reset(client, invitation, password="short")

    assert response.status_code == 400
    assert "password" in response.get_json()["errors"]


class TestEmailChange:
    """A pending invitation follows the staff member to their new address."""

    def change_email(self, client, owner, roles, **overrides):
        staff = User.query.filter_by(email="sam@x.com").one()
        payload = {
            "name": "Sam Staff",
            "email": "samuel@x.com",
            "mobile_no": "0700123456",
            "role": roles["Staff"].id,
        }
        payload.update(overrides)
        return client.put(f'/staffs/{staff.id}', json=payload, headers=owner["headers"])

    def test_new_link_is_issued_and_works(self, client, owner, roles, invitation):
        response = self.change_email(client, owner, roles)

        assert response.status_code == 200
        url = urlparse(response.get_json()["reset_url"])
        assert parse_qs(url.query)["email"] == ["samuel@x.com"]

        fresh = {"email": "samuel@x.com", "token": url.path.rsplit('/', 1)[-1]}
        assert reset(client, fresh).status_code == 200
        login = client.post('/auth/login', json={"email": "samuel@x.com", "password": "fresh-password"})
        assert login.status_code == 200

    def test_old_link_stops_working(self, client, owner, roles, invitation):
        self.change_email(client, owner, roles)

        assert reset(client, invitation).status_code == 400
        assert reset(client, invitation, email="samuel@x.com").status_code == 400

    def test_no_link_when_email_unchanged(self, client, owner, roles, invitation):
        response = self.change_email(client, owner, roles, email="sam@x.com")

        assert response.status_code == 200
        assert "reset_url" not in response.get_json()
        assert reset(client, invitation).status_code == 200

    def test_new_link_is_mailed_when_enabled(self, app, client, owner, roles, invitation, monkeypatch):
        sent = []
        monkeypatch.setattr(
            staff_tasks, "send_email_via_ses",
            lambda recipient_email, subject, body: sent.append(recipient_email) or {"message_id": "msg-2"}
        )
        app.config["STAFF_INVITE_EMAILS_ENABLED"] = True

        self.change_email(client, owner, roles)

        assert sent == ["samuel@x.com"]

    def test_owner_set_password_cancels_link(self, client, owner, roles, invitation):
        response = self.change_email(client, owner, roles, password="chosen-by-owner")

        assert response.status_code == 200
        assert "reset_url" not in response.get_json()
        assert PasswordResetToken.query.count() == 0

    def test_delete_after_email_change_leaves_no_token(self, client, owner, roles, invitation):
        self.change_email(client, owner, roles)
        staff = User.query.filter_by(email="samuel@x.com").one()

        response = client.delete(f'/staffs/{staff.id}', headers=owner["headers"])

        assert response.status_code == 200
        assert PasswordResetToken.query.count() == 0
