"""
Viewer Role Service

Classifies whoever is making the request as anonymous, a plain user,
an admin or a super admin.
"""

import logging
from collections import namedtuple

from sqlalchemy.exc import SQLAlchemyError

from edureach.models import AdminProfile

logger = logging.getLogger(__name__)

ROLE_ANONYMOUS = 'anonymous'
ROLE_USER = 'user'
ROLE_ADMIN = 'admin'
ROLE_SUPER_ADMIN = 'super_admin'

Viewer = namedtuple('Viewer', ['role', 'user', 'profile', 'needs_password_change'])


def find_admin_profile(user_id):
    """Return the AdminProfile for a user id, or None."""
    return AdminProfile.query.filter_by(user_id=user_id).first()


def classify_viewer(user):
    """Classify the given user (usually ``current_user``).

    A failed profile lookup is logged and the viewer is treated as a
    plain user, so a database hiccup never grants admin access.
    """
    if user is None or not getattr(user, 'is_authenticated', False):
        return Viewer(ROLE_ANONYMOUS, None, None, False)

    try:
        profile = find_admin_profile(user.id)
    except SQLAlchemyError:
        logger.exception('Admin profile lookup failed for user %s', user.id)
        return Viewer(ROLE_USER, user, None, False)

    if profile is None:
        return Viewer(ROLE_USER, user, None, False)

    role = ROLE_SUPER_ADMIN if profile.is_super_admin else ROLE_ADMIN
    return Viewer(role, user, profile, bool(profile.force_password_change))


def is_admin_role(role):
    return role in (ROLE_ADMIN, ROLE_SUPER_ADMIN)
