# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Every test gets a fresh app bound to an in-memory SQLite database with the
# default roles and lead statuses seeded.
#
# Run with: pytest -v
# =============================================================================

import pytest

from jobbify import create_app
from jobbify.config import TestingConfig
from jobbify.extensions import db
from jobbify.models import Role, Team
from jobbify.seed import seed_reference_data


REGISTRATION = {
    "first_name": "John",
    "last_name": "Doe",
    "birthday": "1990-01-01",
    "email": "j@x.com",
    "password": "p",
    "company_name": "Doe Inc",
    "staffs_no": "1-5",
    "current_revenue": "0-50k",
    "business": "Plumbing",
    "phone_number": "5551234",
    "address": "1 Main St",
    "address_line_2": "Suite 2",
    "city": "Springfield",
    "postal_code": "12345",
    "country": "US",
}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        seed_reference_data()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    """Call POST /auth/register with the default payload plus overrides."""
    def _register(**overrides):
        payload = dict(REGISTRATION, **overrides)
        return client.post('/auth/register', json=payload)
    return _register


@pytest.fixture
def owner(register):
    """A registered account owner: {"user", "token", "headers", "team"}."""
    response = register()
    assert response.status_code == 200, response.get_json()
    body = response.get_json()
    team = Team.query.filter_by(user_id=body["user"]["id"], personal_team=True).one()
    return {
        "user": body["user"],
        "token": body["token"],
        "headers": {"Authorization": f"Bearer {body['token']}"},
        "team": team,
    }


@pytest.fixture
def other_owner(register):
    response = register(email="other@x.com", first_name="Mary", last_name="Major", company_name="Major Co")
    assert response.status_code == 200, response.get_json()
    body = response.get_json()
    team = Team.query.filter_by(user_id=body["user"]["id"], personal_team=True).one()
    return {
        "user": body["user"],
        "headers": {"Authorization": f"Bearer {body['token']}"},
        "team": team,
    }


@pytest.fixture
def roles(app):
    """Seeded roles keyed by name."""
    return {role.name: role for role in Role.query.all()}
