# =============================================================================
# tests/test_staffs.py - Staff provisioning
# =============================================================================

import logging
from types import SimpleNamespace
from urllib.parse import urlparse, parse_qs

import pytest

from jobbify.extensions import db
from jobbify.models import CompanyDetails, PasswordResetToken, Team, TeamMembership, User
from jobbify.services import staff_provisioning
from jobbify.tasks import staff_tasks


def staff_payload(role, **overrides):
    payload = {
        "name": "Sam Staff",
        "email": "sam@x.com",
        "mobile_no": "0700123456",
        "role": role.id,
        "note": "Evenings only",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def staff(client, owner, roles):
    response = client.post('/staffs/', json=staff_payload(roles["Staff"]), headers=owner["headers"])
    assert response.status_code == 201, response.get_json()
    return response.get_json()


class TestCreateStaff:

    def test_create_assigns_role_and_membership(self, owner, staff, roles):
        assert staff["message"] == "Staff successfully created"
        user = staff["user"]
        assert user["email"] == "sam@x.com"
        assert user["roles"] == ["Staff"]
        assert user["membership"] == {"team_id": owner["team"].id, "role": "Staff"}
        assert "password" not in user and "password_hash" not in user

        record = User.query.filter_by(email="sam@x.com").one()
        assert [role.name for role in record.roles] == ["Staff"]
        membership = TeamMembership.query.filter_by(user_id=record.id).one()
        assert membership.team_id == owner["team"].id

    def test_reset_url_points_at_reset_page(self, app, staff):
        url = urlparse(staff["reset_url"])

        assert staff["reset_url"].startswith(app.config["APP_URL"] + "/reset-password/")
        assert parse_qs(url.query)["email"] == ["sam@x.com"]
        assert PasswordResetToken.query.filter_by(user_id=staff["user"]["id"]).count() == 1

    def test_pivot_role_label_is_a_copy(self, client, owner, staff, roles):
        role = roles["Staff"]
        role.name = "Crew"
        db.session.commit()

        response = client.get(f'/staffs/{staff["user"]["id"]}', headers=owner["headers"])

        body = response.get_json()
        assert body["membership"]["role"] == "Staff"
        assert body["roles"] == ["Crew"]

    def test_unknown_role_is_400(self, client, owner):
        response = client.post(
            '/staffs/',
            json=staff_payload(SimpleNamespace(id=999)),
            headers=owner["headers"]
        )

        assert response.status_code == 400
        assert "role" in response.get_json()["errors"]
        assert User.query.filter_by(email="sam@x.com").count() == 0

    def test_duplicate_email_is_400(self, client, owner, roles):
        response = client.post(
            '/staffs/',
            json=staff_payload(roles["Staff"], email="j@x.com"),
            headers=owner["headers"]
        )

        assert response.status_code == 400
        assert "email" in response.get_json()["errors"]

    def test_missing_fields_are_400(self, client, owner):
        response = client.post('/staffs/', json={}, headers=owner["headers"])

        assert response.status_code == 400
        errors = response.get_json()["errors"]
        for field in ("name", "email", "mobile_no", "role"):
            assert field in errors

    def test_requires_authentication(self, client, roles):
        response = client.post('/staffs/', json=staff_payload(roles["Staff"]))
        assert response.status_code == 401

    def test_failure_midway_leaves_no_staff(self, client, owner, roles, monkeypatch):
        def broken_token(user):
            raise RuntimeError("token table unavailable")

        monkeypatch.setattr(staff_provisioning, "issue_reset_token", broken_token)

        response = client.post('/staffs/', json=staff_payload(roles["Staff"]), headers=owner["headers"])

        assert response.status_code == 500
        assert "unavailable" not in response.get_data(as_text=True)
        assert User.query.filter_by(email="sam@x.com").count() == 0
        assert TeamMembership.query.count() == 0

    def test_invitation_mail_carries_reset_link(self, app, client, owner, roles, monkeypatch):
        sent = []

        def fake_send(recipient_email, subject, body):
            sent.append((recipient_email, subject, body))
            return {"success": True, "message_id": "msg-1"}

        monkeypatch.setattr(staff_tasks, "send_email_via_ses", fake_send)
        app.config["STAFF_INVITE_EMAILS_ENABLED"] = True

        response = client.post('/staffs/', json=staff_payload(roles["Staff"]), headers=owner["headers"])

        assert response.status_code == 201
        assert len(sent) == 1
        recipient, subject, body = sent[0]
        assert recipient == "sam@x.com"
        assert "Doe Inc" in subject
        assert response.get_json()["reset_url"] in body

    def test_invitation_not_sent_when_disabled(self, client, owner, roles, monkeypatch):
        sent = []
        monkeypatch.setattr(staff_tasks, "send_email_via_ses", lambda **kwargs: sent.append(kwargs))

        response = client.post('/staffs/', json=staff_payload(roles["Staff"]), headers=owner["headers"])

        assert response.status_code == 201
        assert sent == []


class TestListAndShowStaff:

    def test_pages_hold_at_most_fifty(self, client, owner):
        for i in range(55):
            user = User(name=f"Member {i}", email=f"member{i}@x.com", password_hash="x")
            db.session.add(user)
            db.session.add(TeamMembership(team=owner["team"], user=user, role="Staff"))
        db.session.commit()

        first = client.get('/staffs/', headers=owner["headers"]).get_json()
        second = client.get('/staffs/?page=2', headers=owner["headers"]).get_json()

        assert len(first["staffs"]) == 50
        assert first["pagination"]["total"] == 55
        assert first["pagination"]["pages"] == 2
        assert len(second["staffs"]) == 5

    def test_show_member(self, client, owner, staff):
        response = client.get(f'/staffs/{staff["user"]["id"]}', headers=owner["headers"])

        assert response.status_code == 200
        assert response.get_json()["email"] == "sam@x.com"

    def test_show_unknown_is_404(self, client, owner):
        response = client.get('/staffs/999', headers=owner["headers"])

        assert response.status_code == 404
        assert response.get_json()["message"] == "Staff member not found"

    def test_other_team_cannot_see_member(self, client, other_owner, staff):
        response = client.get(f'/staffs/{staff["user"]["id"]}', headers=other_owner["headers"])
        assert response.status_code == 404


class TestUpdateStaff:

    def test_update_resyncs_single_role(self, client, owner, staff, roles):
        response = client.put(
            f'/staffs/{staff["user"]["id"]}',
            json=staff_payload(roles["Manager"], name="Sam Senior"),
            headers=owner["headers"]
        )

        assert response.status_code == 200
        user = response.get_json()["user"]
        assert user["name"] == "Sam Senior"
        assert user["roles"] == ["Manager"]
        assert user["membership"]["role"] == "Manager"
        assert TeamMembership.query.filter_by(user_id=user["id"]).count() == 1

    def test_update_keeps_memberships_in_other_teams(self, client, owner, other_owner, staff, roles):
        record = db.session.get(User, staff["user"]["id"])
        db.session.add(TeamMembership(team=other_owner["team"], user=record, role="Staff"))
        db.session.commit()

        client.put(
            f'/staffs/{record.id}',
            json=staff_payload(roles["Admin"]),
            headers=owner["headers"]
        )

        other = TeamMembership.query.filter_by(user_id=record.id, team_id=other_owner["team"].id).one()
        assert other.role == "Staff"
        mine = TeamMembership.query.filter_by(user_id=record.id, team_id=owner["team"].id).one()
        assert mine.role == "Admin"

    def test_update_with_password_allows_login(self, client, owner, staff, roles):
        response = client.put(
            f'/staffs/{staff["user"]["id"]}',
            json=staff_payload(roles["Staff"], password="brand-new-pass"),
            headers=owner["headers"]
        )
        assert response.status_code == 200

        login = client.post('/auth/login', json={"email": "sam@x.com", "password": "brand-new-pass"})
        assert login.status_code == 200

    def test_short_password_is_400(self, client, owner, staff, roles):
        response = client.put(
            f'/staffs/{staff["user"]["id"]}',
            json=staff_payload(roles["Staff"], password="short"),
            headers=owner["headers"]
        )

        assert response.status_code == 400
        assert "password" in response.get_json()["errors"]

    def test_update_unknown_staff_is_404(self, client, owner, roles):
        response = client.put(
            '/staffs/999',
            json=staff_payload(roles["Staff"], email="nobody@x.com"),
            headers=owner["headers"]
        )
        assert response.status_code == 404

    def test_failed_update_is_logged_and_rolled_back(self, client, owner, staff, roles, monkeypatch, caplog):
        def broken_role(role_id):
            raise RuntimeError("roles table unavailable")

        monkeypatch.setattr(staff_provisioning, "get_role", broken_role)
        caplog.set_level(logging.ERROR, logger="jobbify.services.staff_provisioning")

        response = client.put(
            f'/staffs/{staff["user"]["id"]}',
            json=staff_payload(roles["Staff"], name="Never Saved"),
            headers=owner["headers"]
        )

        assert response.status_code == 500
        assert "Staff update failed, rolled back" in caplog.text
        assert db.session.get(User, staff["user"]["id"]).name == "Sam Staff"


class TestDeleteStaff:

    def test_delete_removes_user_and_owned_teams(self, client, owner, staff):
        staff_id = staff["user"]["id"]
        side_team = Team(user_id=staff_id, name="Sam's Side Gig", personal_team=True)
        db.session.add(side_team)
        db.session.flush()
        db.session.add(CompanyDetails(team_id=side_team.id, business_name="Side Gig"))
        db.session.commit()

        response = client.delete(f'/staffs/{staff_id}', headers=owner["headers"])

        assert response.status_code == 200
        assert response.get_json()["message"] == "Staff successfully deleted"
        assert db.session.get(User, staff_id) is None
        assert Team.query.filter_by(user_id=staff_id).count() == 0
        assert CompanyDetails.query.filter_by(business_name="Side Gig").count() == 0
        assert TeamMembership.query.filter_by(user_id=staff_id).count() == 0
        assert PasswordResetToken.query.filter_by(user_id=staff_id).count() == 0
        assert db.session.get(Team, owner["team"].id) is not None

    def test_delete_unknown_staff_is_404(self, client, owner):
        response = client.delete('/staffs/999', headers=owner["headers"])
        assert response.status_code == 404

    def test_owner_cannot_be_deleted_through_staff_endpoint(self, client, owner):
        response = client.delete(f'/staffs/{owner["user"]["id"]}', headers=owner["headers"])
        assert response.status_code == 404
