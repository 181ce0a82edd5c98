import itertools
from datetime import datetime, timedelta, timezone

import pytest
from appwrite.exception import AppwriteException

from appwrite_demo import create_app
from appwrite_demo.config import TestConfig
from appwrite_demo.services.cookies import SESSION_COOKIE_NAME


class FakeClient:
    """Records the credentials an Appwrite client was built with."""

    def __init__(self, backend):
        self.backend = backend
        self.endpoint = None
        self.project = None
        self.key = None
        self.session = None
        backend.clients.append(self)

    def set_endpoint(self, endpoint):
        self.endpoint = endpoint
        return self

    def set_project(self, project):
        self.project = project
        return self

    def set_key(self, key):
        self.key = key
        return self

    def set_session(self, session):
        self.session = session
        return self


class FakeBackend:
    """In-memory stand-in for the Appwrite account and database APIs."""

    base_time = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __init__(self):
        self.clients = []
        self.accounts = {}
        self.sessions = {}
        self.documents = {}
        self.list_queries = []
        self.account_gets = 0
        self.failures = {}
        self._ids = itertools.count(1)

    # helpers

    def fail(self, operation, error=None):
        self.failures[operation] = error or AppwriteException('Server error', 500, 'general_unknown')

    def _maybe_fail(self, operation):
        if operation in self.failures:
            raise self.failures[operation]

    def add_user(self, email='ada@example.com', password='correct-horse', name='Ada'):
        user_id = f'user-{next(self._ids)}'
        self.accounts[email] = {'$id': user_id, 'email': email, 'password': password, 'name': name}
        return user_id

    def open_session(self, email='ada@example.com'):
        secret = f'secret-{next(self._ids)}'
        self.sessions[secret] = self.accounts[email]['$id']
        return secret

    def add_document(self, data, created_at=None):
        doc_id = f'doc-{next(self._ids)}'
        created = created_at or (self.base_time + timedelta(minutes=len(self.documents)))
        document = {'$id': doc_id, '$createdAt': created.isoformat(), **data}
        self.documents[doc_id] = document
        return document

    # SDK stand-ins

    def make_client(self):
        return FakeClient(self)

    def account(self, client):
        return FakeAccount(self, client)

    def databases(self, client):
        return FakeDatabases(self, client)

    def require_key(self, client):
        if not client.key:
            raise AppwriteException('Missing API key', 401, 'general_unauthorized_scope')

    def require_session(self, client):
        if client.session not in self.sessions:
            raise AppwriteException('User (role: guests) missing scope (account)', 401,
                                    'general_unauthorized_scope')
        return self.sessions[client.session]


class FakeAccount:

    def __init__(self, backend, client):
        self.backend = backend
        self.client = client

    def create(self, user_id, email, password, name=None):
        self.backend._maybe_fail('account.create')
        self.backend.require_key(self.client)
        if email in self.backend.accounts:
            raise AppwriteException('A user with the same id, email, or phone already exists in this project.',
                                    409, 'user_already_exists')
        self.backend.accounts[email] = {'$id': user_id, 'email': email, 'password': password, 'name': name}
        return {'$id': user_id, 'email': email, 'name': name}

    def create_email_password_session(self, email, password):
        self.backend._maybe_fail('account.create_email_password_session')
        self.backend.require_key(self.client)
        account = self.backend.accounts.get(email)
        if account is None or account['password'] != password:
            raise AppwriteException('Invalid credentials. Please check the email and password.',
                                    401, 'user_invalid_credentials')
        secret = self.backend.open_session(email)
        return {'$id': f'session-{secret}', 'userId': account['$id'], 'secret': secret}

    def get(self):
        self.backend._maybe_fail('account.get')
        self.backend.account_gets += 1
        user_id = self.backend.require_session(self.client)
        account = next(a for a in self.backend.accounts.values() if a['$id'] == user_id)
        return {'$id': account['$id'], 'email': account['email'], 'name': account['name']}

    def delete_session(self, session_id):
        self.backend._maybe_fail('account.delete_session')
        self.backend.require_session(self.client)
        del self.backend.sessions[self.client.session]
        return {}


class FakeDatabases:

    def __init__(self, backend, client):
        self.backend = backend
        self.client = client

    def create_document(self, database_id, collection_id, document_id, data, permissions=None):
        self.backend._maybe_fail('databases.create_document')
        self.backend.require_session(self.client)
        document = self.backend.add_document(data)
        self.backend.documents.pop(document['$id'])
        document['$id'] = document_id
        self.backend.documents[document_id] = document
        return dict(document)

    def list_documents(self, database_id, collection_id, queries=None):
        self.backend._maybe_fail('databases.list_documents')
        self.backend.require_session(self.client)
        self.backend.list_queries.append(queries)
        documents = sorted(self.backend.documents.values(), key=lambda d: d['$createdAt'], reverse=True)
        return {'total': len(documents), 'documents': [dict(d) for d in documents]}

    def update_document(self, database_id, collection_id, document_id, data=None, permissions=None):
        self.backend._maybe_fail('databases.update_document')
        self.backend.require_session(self.client)
        if document_id not in self.backend.documents:
            raise AppwriteException('Document with the requested ID could not be found.', 404,
                                    'document_not_found')
        self.backend.documents[document_id].update(data or {})
        return dict(self.backend.documents[document_id])

    def delete_document(self, database_id, collection_id, document_id):
        self.backend._maybe_fail('databases.delete_document')
        self.backend.require_session(self.client)
        if document_id not in self.backend.documents:
            raise AppwriteException('Document with the requested ID could not be found.', 404,
                                    'document_not_found')
        del self.backend.documents[document_id]
        return {}


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def backend(monkeypatch):
    fake = FakeBackend()
    monkeypatch.setattr('appwrite_demo.services.clients.Client', fake.make_client)
    monkeypatch.setattr('appwrite_demo.services.auth.Account', fake.account)
    monkeypatch.setattr('appwrite_demo.services.todos.Databases', fake.databases)
    return fake


@pytest.fixture()
def session_secret(backend):
    backend.add_user()
    return backend.open_session()


@pytest.fixture()
def signed_in_request(app, session_secret):
    """A request context carrying a valid session cookie."""
    with app.test_request_context('/', headers={'Cookie': f'{SESSION_COOKIE_NAME}={session_secret}'}):
        yield session_secret


@pytest.fixture()
def signed_in_client(client, session_secret):
    client.set_cookie(SESSION_COOKIE_NAME, session_secret)
    return client
