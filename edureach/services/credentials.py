"""
Credential Update Service

One-time credential change required of freshly provisioned admins before
they may enter the back-office.
"""

import logging
from datetime import datetime

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from edureach.extensions import db
from edureach.models import User
from edureach.services.roles import find_admin_profile
from edureach.services.validation import is_valid_email

logger = logging.getLogger(__name__)


class CredentialError(Exception):
    """Credential update refused; str(error) is shown to the user verbatim."""


def update_credentials(user, current_password, new_password, confirm_password, new_email=None):
    """Validate and apply a password (and optional email) change.

    On success the user's admin profile, if any, has its
    ``force_password_change`` flag cleared and ``last_login`` stamped.
    Nothing is written when validation fails.
    """
    min_length = current_app.config.get('MIN_PASSWORD_LENGTH', 8)

    if new_password != confirm_password:
        raise CredentialError('New passwords do not match')
    if len(new_password or '') < min_length:
        raise CredentialError(f'Password must be at least {min_length} characters long')
    if not user.check_password(current_password or ''):
        raise CredentialError('Current password is incorrect')

    new_email = (new_email or '').strip().lower() or None
    if new_email is not None:
        if not is_valid_email(new_email):
            raise CredentialError('Please provide a valid email address')
        taken = User.query.filter(User.email == new_email, User.id != user.id).first()
        if taken:
            raise CredentialError('A user with this email address has already been registered')

    try:
        user.set_password(new_password)
        if new_email:
            user.email = new_email

        profile = find_admin_profile(user.id)
        if profile is not None:
            profile.force_password_change = False
            profile.last_login = datetime.utcnow()
            if new_email:
                profile.email = new_email

        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Credential update failed for user %s', user.id)
        raise CredentialError(f'Could not update credentials: {e}') from e

    logger.info('Credentials updated for user %s', user.id)
    return user
