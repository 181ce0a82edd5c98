"""
Appwrite Configuration

Loads the Appwrite settings once at startup into an immutable snapshot and
validates them. The snapshot lives on ``app.extensions['appwrite']``.
"""

import logging
from dataclasses import dataclass, field

from flask import current_app

from appwrite_demo.errors import ConfigurationIncomplete

logger = logging.getLogger(__name__)

# Config key -> snapshot attribute
REQUIRED_SETTINGS = {
    'APPWRITE_ENDPOINT': 'endpoint',
    'APPWRITE_PROJECT_ID': 'project_id',
    'APPWRITE_API_KEY': 'api_key',
    'APPWRITE_DATABASE_ID': 'database_id',
    'APPWRITE_TODOS_COLLECTION_ID': 'collection_id',
}

PLACEHOLDER_PATTERNS = (
    'YOUR_PROJECT_ID_HERE',
    'YOUR_API_KEY_HERE',
    'YOUR_DATABASE_ID_HERE',
    'YOUR_COLLECTION_ID_HERE',
    '<REGION>',
    'REPLACE_WITH_YOUR',
)


@dataclass(frozen=True)
class AppwriteSettings:
    """Read-only snapshot of the five Appwrite settings."""
    endpoint: str
    project_id: str
    api_key: str = field(repr=False)
    database_id: str
    collection_id: str

    @classmethod
    def from_config(cls, config):
        values = {}
        for key, attr in REQUIRED_SETTINGS.items():
            values[attr] = (config.get(key) or '').strip()
        return cls(**values)


def is_placeholder(value):
    """Return True if ``value`` still contains a template placeholder."""
    upper = value.upper()
    return any(pattern.upper() in upper for pattern in PLACEHOLDER_PATTERNS)


def find_problems(settings):
    """Return ``(missing, placeholders)`` lists of config key names."""
    missing = []
    placeholders = []
    for key, attr in REQUIRED_SETTINGS.items():
        value = getattr(settings, attr)
        if not value:
            missing.append(key)
        elif is_placeholder(value):
            placeholders.append(key)
    return missing, placeholders


def validate_settings(settings):
    """Log every missing or placeholder setting by name; return overall validity."""
    missing, placeholders = find_problems(settings)

    if missing:
        logger.error('Missing required Appwrite configuration settings: %s', ', '.join(missing))
    if placeholders:
        logger.error('Appwrite configuration contains placeholder values: %s', ', '.join(placeholders))

    is_valid = not missing and not placeholders
    if is_valid:
        logger.info('Appwrite configuration validation passed')
    else:
        logger.error('Appwrite configuration validation failed. Missing: %s, Placeholders: %s',
                     ', '.join(missing), ', '.join(placeholders))
    return is_valid


class Appwrite:
    """Flask extension holding the validated settings snapshot."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        settings = AppwriteSettings.from_config(app.config)

        if not validate_settings(settings):
            logger.critical('Application cannot start due to invalid Appwrite configuration. '
                            'Please check your environment or settings file.')
            if app.config.get('APP_ENV') == 'production':
                raise ConfigurationIncomplete('Invalid Appwrite configuration detected. '
                                              'Please check your configuration settings.')
            logger.warning('Running in %s mode with invalid configuration. '
                           'Some features may not work correctly.', app.config.get('APP_ENV'))

        app.extensions['appwrite'] = settings

    @property
    def settings(self):
        return current_app.extensions['appwrite']
