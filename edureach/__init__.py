"""
EduReach - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from edureach.extensions import db, login_manager, mail
from edureach.config import Config

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

    logging.basicConfig(level=app.config['LOG_LEVEL'])
    logging.getLogger('edureach').setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    mail.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'info'

    # Register blueprints
    from edureach.main import main_bp
    from edureach.auth import auth_bp
    from edureach.account import account_bp
    from edureach.admin import admin_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(account_bp, url_prefix='/account')
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # Viewer classification for templates (navigation, admin links)
    @app.context_processor
    def inject_viewer():
        from flask_login import current_user
        from edureach.services import classify_viewer, is_admin_role
        viewer = classify_viewer(current_user)
        return dict(viewer=viewer, is_admin=is_admin_role(viewer.role))

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from edureach.models import User
        return db.session.get(User, int(user_id))

    # Template filter for service icons
    @app.template_filter('icon_class')
    def icon_class_filter(name):
        from edureach.services.icons import icon_class
        return icon_class(name)

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(config_class.basedir, 'instance'), exist_ok=True)
        db.create_all()
        _ensure_default_data(app)

    return app


def _ensure_default_data(app):
    """Ensure the default super admin exists."""
    from edureach.services.admin_accounts import ensure_super_admin
    from sqlalchemy.exc import SQLAlchemyError

    try:
        ensure_super_admin()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not create default super admin')
