"""
Application Errors

Every failure raised by the services derives from AppwriteDemoError. Messages
are safe to show to users; backend details travel on ``__cause__``.
"""


class AppwriteDemoError(Exception):
    """Base class for application errors."""

    default_message = 'Something went wrong. Please try again.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ConfigurationIncomplete(AppwriteDemoError):
    default_message = 'Appwrite configuration is incomplete.'


class Unauthenticated(AppwriteDemoError):
    default_message = 'Please sign in to continue.'


class NoSession(Unauthenticated):
    default_message = 'No session found.'


class NoRequestContext(AppwriteDemoError):
    default_message = 'No active request to attach the session cookie to.'


class SignUpFailed(AppwriteDemoError):
    default_message = 'Could not create your account. Please try again.'


class SignInFailed(AppwriteDemoError):
    default_message = 'Invalid email or password.'


class BackendError(AppwriteDemoError):
    default_message = 'The operation failed. Please try again.'
