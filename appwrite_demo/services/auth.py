"""
Authentication Service

Sign-up, sign-in, sign-out and current-user lookup against Appwrite accounts.
Account and session creation use the admin client; everything acting on the
signed-in user uses the session client.
"""

import logging

from appwrite.exception import AppwriteException
from appwrite.id import ID
from appwrite.services.account import Account
from flask import has_request_context, request

from appwrite_demo.errors import NoSession, SignInFailed, SignUpFailed
from appwrite_demo.extensions import appwrite
from appwrite_demo.models import User
from appwrite_demo.services.clients import build_admin_client, build_session_client

logger = logging.getLogger(__name__)


def get_current_user():
    """Return the signed-in User, or None.

    Never raises: a missing cookie, a revoked session, an unreachable backend
    and bad configuration all mean "no user".
    """
    try:
        if not has_request_context():
            raise NoSession()
        client = build_session_client(request.cookies, appwrite.settings)
        account = Account(client).get()
        user = User.from_account(account)
        logger.debug('Successfully retrieved user: %s', user.id)
        return user
    except NoSession:
        logger.debug('No valid session found for user')
        return None
    except Exception as e:
        logger.warning('Failed to get logged in user: %s', e)
        return None


def sign_up(email, password, name):
    """Create an account and a session for it; return the session secret."""
    account = Account(build_admin_client(appwrite.settings))
    logger.info('Creating new user account for: %s', email)

    try:
        account.create(user_id=ID.unique(), email=email, password=password, name=name)
    except AppwriteException as e:
        logger.exception('Failed to sign up user with email: %s', email)
        raise SignUpFailed() from e

    try:
        session = account.create_email_password_session(email=email, password=password)
    except AppwriteException as e:
        # Not atomic: the account exists but has no usable session.
        logger.exception('Account created but session creation failed for: %s', email)
        raise SignUpFailed('Your account was created but we could not sign you in. '
                           'Please sign in.') from e

    logger.info('Successfully created user account and session for: %s', email)
    return session['secret']


def sign_in(email, password):
    """Create a session for an existing account; return the session secret."""
    account = Account(build_admin_client(appwrite.settings))
    logger.info('Attempting to sign in user: %s', email)

    try:
        session = account.create_email_password_session(email=email, password=password)
    except AppwriteException as e:
        logger.error('Failed to sign in user with email: %s (%s)', email, e)
        raise SignInFailed() from e

    logger.info('Successfully signed in user: %s', email)
    return session['secret']


def sign_out():
    """Revoke the current session at Appwrite. Failures are logged and ignored."""
    logger.info('Starting sign out process')
    try:
        client = build_session_client(request.cookies, appwrite.settings)
        Account(client).delete_session(session_id='current')
        logger.info('Successfully deleted Appwrite session')
    except Exception as e:
        logger.warning('Error deleting Appwrite session: %s', e)
