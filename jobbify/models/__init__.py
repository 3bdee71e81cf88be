from jobbify.models.user import User, user_roles
from jobbify.models.team import Team, TeamMembership
from jobbify.models.company_details import CompanyDetails
from jobbify.models.client import Client, ClientTag
from jobbify.models.role import Role
from jobbify.models.status import Status
from jobbify.models.password_reset import PasswordResetToken

__all__ = [
    'User',
    'user_roles',
    'Team',
    'TeamMembership',
    'CompanyDetails',
    'Client',
    'ClientTag',
    'Role',
    'Status',
    'PasswordResetToken',
]
