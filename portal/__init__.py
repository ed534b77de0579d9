"""
Membership Portal - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, session

from portal.config import Config
from portal.errors import failure, register_error_handlers
from portal.extensions import db, login_manager

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
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    # The cookie holds an opaque token only; nothing for Flask-Login to protect
    login_manager.session_protection = None

    from portal.services import get_services, init_services
    init_services(app)

    # Resolve the caller from the server-side session table on every request
    @login_manager.request_loader
    def load_session(request):
        from portal.auth.routes import SESSION_TOKEN_KEY
        return get_services().sessions.current_session(session.get(SESSION_TOKEN_KEY))

    @login_manager.unauthorized_handler
    def unauthorized():
        return failure('Not authorized', 401)

    register_error_handlers(app)

    # Register blueprints
    import portal.resources.routes  # noqa: F401
    from portal.auth import auth_bp
    from portal.admin import admin_bp
    from portal.member import member_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(member_bp, url_prefix='/member')

    from portal.cli import register_commands
    register_commands(app)

    # Create database tables
    with app.app_context():
        _ensure_instance_dir(app)
        db.create_all()
        logger.info('Schema ready at %s', db.engine.url.render_as_string(hide_password=True))
        _ensure_default_data(app)

    return app


def _ensure_instance_dir(app):
    uri = app.config['SQLALCHEMY_DATABASE_URI']
    if uri.startswith('sqlite:///') and ':memory:' not in uri:
        os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)


def _ensure_default_data(app):
    """Seed the default administrator on first boot."""
    if not app.config.get('BOOTSTRAP_ADMIN', True):
        return

    from portal.services import ensure_default_admin, get_services
    ensure_default_admin(
        get_services(app).accounts,
        app.config['ADMIN_EMAIL'],
        app.config['ADMIN_NAME'],
        app.config['ADMIN_PASSWORD'],
    )
