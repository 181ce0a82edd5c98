"""
Todo Model
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class TodoItem:
    """A todo document from the configured Appwrite collection"""
    id: str
    title: str = ''
    is_completed: bool = False
    created_at: Optional[datetime] = None

    def __repr__(self):
        return f'<TodoItem {self.id} {self.title!r}>'
