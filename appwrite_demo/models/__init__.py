"""
Models Package

Local projections of Appwrite data. Nothing here is persisted locally.
"""

from appwrite_demo.models.todo import TodoItem
from appwrite_demo.models.user import User

__all__ = ['TodoItem', 'User']
