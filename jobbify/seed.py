"""
Reference data every installation needs: assignable staff roles and the
status labels used by the client (lead) module.

Usage:
    flask --app run seed-data
"""
import logging

import click
from flask.cli import with_appcontext

from jobbify.extensions import db
from jobbify.models.role import Role
from jobbify.models.status import Status

logger = logging.getLogger(__name__)

DEFAULT_ROLES = ['Admin', 'Manager', 'Staff']

LEAD_MODULE = 'lead'

LEAD_STATUSES = {
    1: 'New',
    2: 'Contacted',
    3: 'Qualified',
    4: 'Converted',
    5: 'Lost',
}


def seed_reference_data():
    """Insert missing roles and lead statuses. Safe to run repeatedly."""
    created = 0
    existing_roles = {role.name for role in Role.query.all()}
    for name in DEFAULT_ROLES:
        if name not in existing_roles:
            db.session.add(Role(name=name))
            created += 1

    existing_statuses = {
        status.value for status in Status.query.filter_by(module=LEAD_MODULE).all()
    }
    for value, label in LEAD_STATUSES.items():
        if value not in existing_statuses:
            db.session.add(Status(module=LEAD_MODULE, value=value, label=label))
            created += 1

    db.session.commit()
    logger.info("Reference data seeded", extra={"rows_created": created})
    return created


@click.command('seed-data')
@with_appcontext
def seed_data_command():
    """Seed default roles and lead statuses."""
    created = seed_reference_data()
    click.echo(f"Seeded {created} reference rows")
