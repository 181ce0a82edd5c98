"""
Services Package

Thin integration layer over the Appwrite SDK:

- configuration: settings snapshot and startup validation
- clients: session / admin client construction
- cookies: session cookie lifecycle
- auth: sign-up, sign-in, sign-out and current user
- todos: todo CRUD against the configured collection
"""
