"""
Todos Blueprint
"""

from flask import Blueprint

todos_bp = Blueprint('todos', __name__)

from appwrite_demo.todos import routes  # noqa: E402, F401
