"""
Main Blueprint

Public landing page, service and blog detail pages, contact intake.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from edureach.main import routes  # noqa: E402, F401
