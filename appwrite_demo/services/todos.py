"""
Todo Service

CRUD for todo documents in the configured Appwrite collection. All calls run
under the signed-in user's session; document permissions are enforced by
Appwrite, not here.
"""

import logging
from datetime import datetime, timezone

from appwrite.exception import AppwriteException
from appwrite.id import ID
from appwrite.query import Query
from appwrite.services.databases import Databases
from flask import has_request_context, request
from flask_login import current_user

from appwrite_demo.errors import BackendError, ConfigurationIncomplete, NoRequestContext, Unauthenticated
from appwrite_demo.extensions import appwrite
from appwrite_demo.models import TodoItem
from appwrite_demo.services.clients import build_session_client

logger = logging.getLogger(__name__)


def _session_databases():
    if not has_request_context():
        raise NoRequestContext('Todo operations require an active request.')
    return Databases(build_session_client(request.cookies, appwrite.settings))


def _collection():
    """Return ``(database_id, collection_id)`` or raise ConfigurationIncomplete."""
    settings = appwrite.settings
    if not settings.database_id or not settings.collection_id:
        logger.error('Database configuration is missing. DatabaseId set: %s, CollectionId set: %s',
                     bool(settings.database_id), bool(settings.collection_id))
        raise ConfigurationIncomplete('Database configuration is incomplete.')
    return settings.database_id, settings.collection_id


def _require_user(action):
    # current_user is resolved once per request by the Flask-Login request loader
    user = current_user._get_current_object()
    if not user.is_authenticated:
        logger.warning('Attempted to %s without authenticated user', action)
        raise Unauthenticated('User not authenticated')
    return user


def document_to_todo(document):
    """Map an Appwrite document to a TodoItem.

    Missing fields fall back to defaults instead of failing: title -> '',
    isCompleted -> False, $createdAt -> now (UTC).
    """
    title = document.get('title')
    is_completed = document.get('isCompleted')
    created_at = document.get('$createdAt')

    try:
        created = datetime.fromisoformat(created_at) if created_at is not None else datetime.now(timezone.utc)
    except (TypeError, ValueError) as e:
        logger.error('Failed to convert document to TodoItem: %s', document.get('$id'))
        raise BackendError() from e

    return TodoItem(
        id=document.get('$id'),
        title=str(title) if title is not None else '',
        is_completed=is_completed if isinstance(is_completed, bool) else False,
        created_at=created,
    )


def create_todo(title):
    """Create an incomplete todo for the signed-in user."""
    try:
        databases = _session_databases()
        user = _require_user('create todo')
        database_id, collection_id = _collection()

        document = databases.create_document(
            database_id=database_id,
            collection_id=collection_id,
            document_id=ID.unique(),
            data={'title': title, 'isCompleted': False},
        )
        logger.info('Successfully created todo: %s for user: %s', title, user.id)
        return document_to_todo(document)
    except AppwriteException as e:
        logger.error('Failed to create todo: %s (%s)', title, e)
        raise BackendError() from e
    except Exception:
        logger.exception('Failed to create todo: %s', title)
        raise


def list_todos():
    """Fetch the signed-in user's todos, most recent first."""
    try:
        databases = _session_databases()
        user = _require_user('get todos')
        database_id, collection_id = _collection()

        result = databases.list_documents(
            database_id=database_id,
            collection_id=collection_id,
            queries=[Query.order_desc('$createdAt')],
        )
        todos = [document_to_todo(doc) for doc in result.get('documents', [])]
        logger.debug('Successfully retrieved %d todos for user: %s', len(todos), user.id)
        return todos
    except AppwriteException as e:
        logger.error('Failed to get todos (%s)', e)
        raise BackendError() from e
    except Exception:
        logger.exception('Failed to get todos')
        raise


def update_todo(todo_id, title, is_completed):
    """Overwrite a todo's title and completion flag."""
    try:
        databases = _session_databases()
        database_id, collection_id = _collection()

        document = databases.update_document(
            database_id=database_id,
            collection_id=collection_id,
            document_id=todo_id,
            data={'title': title, 'isCompleted': bool(is_completed)},
        )
        logger.info('Successfully updated todo: %s', todo_id)
        return document_to_todo(document)
    except AppwriteException as e:
        logger.error('Failed to update todo: %s (%s)', todo_id, e)
        raise BackendError() from e
    except Exception:
        logger.exception('Failed to update todo: %s', todo_id)
        raise


def delete_todo(todo_id):
    """Delete a todo by id."""
    try:
        databases = _session_databases()
        database_id, collection_id = _collection()

        databases.delete_document(
            database_id=database_id,
            collection_id=collection_id,
            document_id=todo_id,
        )
        logger.info('Successfully deleted todo: %s', todo_id)
    except AppwriteException as e:
        logger.error('Failed to delete todo: %s (%s)', todo_id, e)
        raise BackendError() from e
    except Exception:
        logger.exception('Failed to delete todo: %s', todo_id)
        raise
