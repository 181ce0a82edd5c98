"""
Session Cookie

Issues and revokes the cookie carrying the Appwrite session secret. The
cookie is HTTP-only and same-site strict; it is marked secure only for
production deployments served over TLS.
"""

import logging

from flask import after_this_request, current_app, has_request_context, request

from appwrite_demo.errors import NoRequestContext

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = 'appwrite-auth-session'


def is_secure_context():
    return current_app.config.get('APP_ENV') == 'production' and request.is_secure


def set_session_cookie(secret):
    """Attach the session cookie to the outgoing response.

    Raises NoRequestContext when called outside a request.
    """
    if not has_request_context():
        logger.error('No request context available when setting session cookie')
        raise NoRequestContext()

    secure = is_secure_context()

    @after_this_request
    def _set_cookie(response):
        response.set_cookie(
            SESSION_COOKIE_NAME,
            secret,
            path='/',
            httponly=True,
            samesite='Strict',
            secure=secure,
        )
        return response

    logger.debug('Session cookie scheduled (secure=%s)', secure)


def clear_session_cookie():
    """Delete the session cookie. Never raises."""
    if not has_request_context():
        logger.error('No request context available when clearing session cookie')
        return

    @after_this_request
    def _delete_cookie(response):
        response.delete_cookie(SESSION_COOKIE_NAME, path='/')
        return response

    logger.debug('Session cookie cleared')
