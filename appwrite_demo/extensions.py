"""
Flask Extensions

There is no local database: accounts and todos live in Appwrite. Flask-Login
only resolves the current user from the Appwrite session on each request.
"""

from flask_login import LoginManager

from appwrite_demo.services.configuration import Appwrite

# Appwrite settings snapshot, validated at startup
appwrite = Appwrite()

# Login manager backed by the Appwrite session cookie
login_manager = LoginManager()
