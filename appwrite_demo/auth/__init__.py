"""
Auth Blueprint

Registration, login and logout backed by Appwrite accounts.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from appwrite_demo.auth import routes  # noqa: E402, F401
