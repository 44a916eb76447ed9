"""
Account Blueprint

Signed-in user's profile and the testimonials they own.
"""

from flask import Blueprint

account_bp = Blueprint('account', __name__)

from edureach.account import routes  # noqa: E402, F401
