"""
Flask Extensions

User and admin sessions share Flask-Login; admin access is decided by the
presence of an AdminProfile row for the signed-in user.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_mail import Mail

# Database instance
db = SQLAlchemy()

# Login manager for user and admin authentication
login_manager = LoginManager()

# Outgoing notification mail
mail = Mail()
