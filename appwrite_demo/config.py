"""
Configuration settings for the Appwrite Todo Demo
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for the flash-message session
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Deployment environment: 'development' or 'production'
    APP_ENV = os.environ.get('APP_ENV') or 'development'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Appwrite project configuration
    # Create an API key with users, sessions and documents scopes in the Appwrite console.
    APPWRITE_ENDPOINT = os.environ.get('APPWRITE_ENDPOINT') or 'https://<REGION>.cloud.appwrite.io/v1'
    APPWRITE_PROJECT_ID = os.environ.get('APPWRITE_PROJECT_ID') or 'YOUR_PROJECT_ID_HERE'
    APPWRITE_API_KEY = os.environ.get('APPWRITE_API_KEY') or 'YOUR_API_KEY_HERE'
    APPWRITE_DATABASE_ID = os.environ.get('APPWRITE_DATABASE_ID') or 'YOUR_DATABASE_ID_HERE'
    APPWRITE_TODOS_COLLECTION_ID = os.environ.get('APPWRITE_TODOS_COLLECTION_ID') or 'YOUR_COLLECTION_ID_HERE'


class ProductionConfig(Config):
    """Production configuration - invalid Appwrite settings abort startup"""
    APP_ENV = 'production'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    APP_ENV = 'testing'
    SECRET_KEY = 'test-secret-key'
    APPWRITE_ENDPOINT = 'https://appwrite.test/v1'
    APPWRITE_PROJECT_ID = 'test-project'
    APPWRITE_API_KEY = 'test-api-key'
    APPWRITE_DATABASE_ID = 'test-database'
    APPWRITE_TODOS_COLLECTION_ID = 'todos'
