"""
User Model
"""

from flask_login import UserMixin


class User(UserMixin):
    """The Appwrite account behind the current session"""

    def __init__(self, id, name='', email=''):
        self.id = id
        self.name = name
        self.email = email

    @classmethod
    def from_account(cls, account):
        return cls(id=account['$id'], name=account.get('name') or '', email=account.get('email') or '')

    @property
    def display_name(self):
        return self.name or self.email

    def __repr__(self):
        return f'<User {self.email}>'
