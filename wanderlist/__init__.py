"""
Wanderlist - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask, request
from wanderlist.extensions import db, login_manager
from wanderlist.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'

    # Pick the user store once for the lifetime of the app
    from wanderlist.storage import create_user_store, get_user_store
    _ensure_instance_dir(app)
    create_user_store(app)

    # Register blueprints
    from wanderlist.auth import auth_bp
    from wanderlist.travel import travel_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(travel_bp)

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(username):
        return get_user_store().find_user_by_name(username)

    @app.before_request
    def log_request():
        logger.info('%s %s', request.method, request.full_path.rstrip('?'))

    @app.errorhandler(404)
    def not_found(error):
        return 'Not Found', 404

    @app.errorhandler(500)
    def internal_error(error):
        return 'Internal Server Error', 500

    return app


def _ensure_instance_dir(app):
    """Create the folder for the default SQLite file if it is used."""
    import os
    from wanderlist.storage import StorageBackend, get_storage_backend

    uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if uri.startswith('sqlite:///') and ':memory:' not in uri:
        path = os.path.dirname(uri[len('sqlite:///'):])
        if path and get_storage_backend(app.config) == StorageBackend.SQL:
            try:
                os.makedirs(path, exist_ok=True)
            except OSError as e:
                logger.warning('Could not create database folder %s: %s', path, e)
