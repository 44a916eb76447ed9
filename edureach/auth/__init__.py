"""
Auth Blueprint

Visitor sign-up, sign-in and sign-out.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from edureach.auth import routes  # noqa: E402, F401
