"""
Configuration settings for the EduReach website
"""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'edureach.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Outgoing mail (Flask-Mail)
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'localhost')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 587))
    MAIL_USE_TLS = os.environ.get('MAIL_USE_TLS', 'True').lower() in ['true', 't', '1']
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER') or 'EduReach <no-reply@edureach.example>'

    # Operator inbox for consultation requests
    ADMIN_NOTIFICATION_EMAIL = os.environ.get('ADMIN_NOTIFICATION_EMAIL') or 'admin@edureach.example'

    # Seeded super admin. Must change credentials on first login.
    DEFAULT_SUPER_ADMIN_EMAIL = os.environ.get('DEFAULT_SUPER_ADMIN_EMAIL') or 'superadmin@edureach.example'
    DEFAULT_SUPER_ADMIN_PASSWORD = os.environ.get('DEFAULT_SUPER_ADMIN_PASSWORD') or 'admin12345'
    DEFAULT_SUPER_ADMIN_NAME = os.environ.get('DEFAULT_SUPER_ADMIN_NAME') or 'Super Admin'

    # Application settings
    MIN_PASSWORD_LENGTH = 8
    BLOG_POSTS_ON_HOME = int(os.environ.get('BLOG_POSTS_ON_HOME', 6))


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    MAIL_DEFAULT_SENDER = 'EduReach <no-reply@edureach.test>'
    ADMIN_NOTIFICATION_EMAIL = 'operator@edureach.test'
    DEFAULT_SUPER_ADMIN_EMAIL = 'root@edureach.test'
    DEFAULT_SUPER_ADMIN_PASSWORD = 'initial-pass'
