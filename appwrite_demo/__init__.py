"""
Appwrite Todo Demo - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask, flash, redirect, render_template, url_for
from appwrite_demo.config import Config
from appwrite_demo.errors import Unauthenticated
from appwrite_demo.extensions import appwrite, login_manager


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance

    Raises:
        ConfigurationIncomplete: Appwrite settings are missing or placeholders
            and APP_ENV is 'production'.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    # Optional Python settings file, e.g. APPWRITE_DEMO_SETTINGS=/etc/appwrite-demo.cfg
    app.config.from_envvar('APPWRITE_DEMO_SETTINGS', silent=True)

    _configure_logging(app)

    # Initialize extensions
    appwrite.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'info'

    # Register blueprints
    from appwrite_demo.auth import auth_bp
    from appwrite_demo.todos import todos_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(todos_bp)

    # Resolve the user from the Appwrite session cookie on every request
    @login_manager.request_loader
    def load_user_from_request(request):
        from appwrite_demo.services.auth import get_current_user
        return get_current_user()

    _register_error_handlers(app)

    return app


def _configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger('appwrite_demo').setLevel(level)


def _register_error_handlers(app):
    """Map authentication failures to the login page and HTTP errors to templates."""

    @app.errorhandler(Unauthenticated)
    def handle_unauthenticated(error):
        from appwrite_demo.services.cookies import clear_session_cookie
        clear_session_cookie()
        flash(error.message, 'info')
        return redirect(url_for('auth.login'))

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        return render_template('errors/500.html'), 500
