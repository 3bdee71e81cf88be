"""
Client Registry

Clients belong to the team of the user who created them. Tags are a plain
side table: an update deletes every existing tag row before inserting the
new list, so tag ids and order are not preserved.
"""
import logging

from jobbify.errors import ApiError, ErrorKind
from jobbify.extensions import db
from jobbify.models.client import Client, ClientTag
from jobbify.models.status import Status
from jobbify.seed import LEAD_MODULE
from jobbify.services.credentials import require_personal_team

logger = logging.getLogger(__name__)

CLIENT_FIELDS = (
    'first_name',
    'last_name',
    'email',
    'mobile_no',
    'street_address',
    'city',
    'region',
    'postal_code',
    'status',
    'note',
)


def team_clients_query(actor):
    team = require_personal_team(actor)
    return Client.query.filter_by(team_id=team.id).order_by(Client.id)


def find_team_client(actor, client_id):
    client = team_clients_query(actor).filter(Client.id == client_id).first()
    if client is None:
        raise ApiError(ErrorKind.NOT_FOUND, "Client not found")
    return client


def lead_statuses():
    statuses = Status.query.filter_by(module=LEAD_MODULE).order_by(Status.value).all()
    return {str(status.value): status.label for status in statuses}


def _replace_tags(client, tags):
    client.tags.clear()
    db.session.flush()
    for tag in tags:
        client.tags.append(ClientTag(tag=tag))


def create_client(actor, data):
    team = require_personal_team(actor)
    try:
        client = Client(
            user_id=actor.id,
            team_id=team.id,
            **{field: data.get(field) for field in CLIENT_FIELDS}
        )
        db.session.add(client)
        db.session.flush()
        for tag in data.get('tags') or []:
            client.tags.append(ClientTag(tag=tag))
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Client create failed, rolled back", extra={"team_id": team.id})
        raise

    logger.info("Client created", extra={"client_id": client.id, "team_id": team.id})
    return client


def update_client(client, data):
    client_id = client.id
    try:
        for field in CLIENT_FIELDS:
            setattr(client, field, data.get(field))
        _replace_tags(client, data.get('tags') or [])
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Client update failed, rolled back", extra={"client_id": client_id})
        raise

    logger.info("Client updated", extra={"client_id": client_id})
    return client


def delete_client(client):
    client_id = client.id
    try:
        # Tags go first so stores enforcing the foreign key accept the delete
        client.tags.clear()
        db.session.flush()
        db.session.delete(client)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Client delete failed, rolled back", extra={"client_id": client_id})
        raise

    logger.info("Client deleted", extra={"client_id": client_id})
