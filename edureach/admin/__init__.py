"""
Admin Blueprint

Back-office for site content, consultation messages and admin accounts.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from edureach.admin import routes, content, messages, accounts  # noqa: E402, F401
