"""
Appwrite Client Factory

Every outbound call runs under exactly one credential context: the end
user's session, or the project API key. Clients are built per call and never
shared between requests.
"""

import logging
from dataclasses import dataclass, field

from appwrite.client import Client

from appwrite_demo.errors import ConfigurationIncomplete, NoSession
from appwrite_demo.services.cookies import SESSION_COOKIE_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionCredentials:
    """Acts on behalf of one signed-in user."""
    endpoint: str
    project_id: str
    token: str = field(repr=False)


@dataclass(frozen=True)
class AdminCredentials:
    """Acts with project-wide privilege through the API key."""
    endpoint: str
    project_id: str
    api_key: str = field(repr=False)


def build_client(credentials):
    """Build an Appwrite client for the given credential context."""
    if isinstance(credentials, SessionCredentials):
        return Client() \
            .set_endpoint(credentials.endpoint) \
            .set_project(credentials.project_id) \
            .set_session(credentials.token)
    if isinstance(credentials, AdminCredentials):
        return Client() \
            .set_endpoint(credentials.endpoint) \
            .set_project(credentials.project_id) \
            .set_key(credentials.api_key)
    raise TypeError(f'Unsupported credential context: {type(credentials).__name__}')


def build_session_client(cookies, settings):
    """Client scoped to the user identified by the request's session cookie.

    Raises NoSession when the cookie is missing or empty, and
    ConfigurationIncomplete when the endpoint or project id is not set.
    """
    token = cookies.get(SESSION_COOKIE_NAME)
    if not token:
        logger.debug('No session cookie found when creating session client')
        raise NoSession()

    if not settings.endpoint or not settings.project_id:
        logger.error('Appwrite configuration is missing. Endpoint set: %s, ProjectId set: %s',
                     bool(settings.endpoint), bool(settings.project_id))
        raise ConfigurationIncomplete()

    return build_client(SessionCredentials(settings.endpoint, settings.project_id, token))


def build_admin_client(settings):
    """Client scoped to the whole project. Only for account and session creation."""
    if not settings.endpoint or not settings.project_id or not settings.api_key:
        logger.error('Appwrite admin configuration is missing. Endpoint set: %s, ProjectId set: %s, ApiKey set: %s',
                     bool(settings.endpoint), bool(settings.project_id), bool(settings.api_key))
        raise ConfigurationIncomplete('Appwrite admin configuration is incomplete.')

    return build_client(AdminCredentials(settings.endpoint, settings.project_id, settings.api_key))
