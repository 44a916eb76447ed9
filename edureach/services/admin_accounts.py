"""
Admin Account Service

Provisioning and lifecycle of admin profiles. Super admin rows are
protected: they can be neither deactivated nor deleted here.
"""

import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from edureach.extensions import db
from edureach.models import User, AdminProfile, ADMIN_SECTIONS, DEFAULT_PERMISSIONS
from edureach.services.validation import is_valid_email

logger = logging.getLogger(__name__)


class AdminAccountError(Exception):
    """Admin account operation refused."""


def ensure_super_admin():
    """Seed the default super admin once. Returns the profile."""
    existing = AdminProfile.query.filter_by(is_super_admin=True).first()
    if existing:
        logger.debug('Super admin already exists. Skipping creation.')
        return existing

    cfg = current_app.config
    email = cfg['DEFAULT_SUPER_ADMIN_EMAIL'].lower()
    user = User.query.filter_by(email=email).first()
    if user is None:
        user = User(email=email, name=cfg['DEFAULT_SUPER_ADMIN_NAME'])
        user.set_password(cfg['DEFAULT_SUPER_ADMIN_PASSWORD'])
        db.session.add(user)
        db.session.flush()

    profile = AdminProfile(
        user_id=user.id,
        name=cfg['DEFAULT_SUPER_ADMIN_NAME'],
        email=email,
        is_super_admin=True,
        is_active=True,
        permissions=list(ADMIN_SECTIONS),
        force_password_change=True,
    )
    db.session.add(profile)
    db.session.commit()
    logger.warning('Default super admin created for %s; credential change required on first login', email)
    return profile


def create_admin_account(name, email, password, permissions=None):
    """Create a sign-in identity plus a regular admin profile.

    The temporary password must be replaced on first login.
    """
    name = (name or '').strip()
    email = (email or '').strip().lower()
    min_length = current_app.config.get('MIN_PASSWORD_LENGTH', 8)

    if not name:
        raise AdminAccountError('Name is required')
    if not is_valid_email(email):
        raise AdminAccountError('Please provide a valid email address')
    if len(password or '') < min_length:
        raise AdminAccountError(f'Password must be at least {min_length} characters long')
    if User.query.filter_by(email=email).first():
        raise AdminAccountError('User already registered')

    if permissions is None:
        permissions = list(DEFAULT_PERMISSIONS)
    unknown = [p for p in permissions if p not in ADMIN_SECTIONS]
    if unknown:
        raise AdminAccountError(f'Unknown permissions: {", ".join(unknown)}')

    try:
        user = User(email=email, name=name)
        user.set_password(password)
        db.session.add(user)
        db.session.flush()
        profile = AdminProfile(
            user_id=user.id,
            name=name,
            email=email,
            is_super_admin=False,
            is_active=True,
            permissions=list(permissions),
            force_password_change=True,
        )
        db.session.add(profile)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not create admin %s', email)
        raise AdminAccountError(f'Could not create admin: {e}') from e

    logger.info('Admin account created for %s', email)
    return profile


def set_admin_active(profile, active):
    if profile.is_super_admin:
        raise AdminAccountError('Cannot change the status of a super admin account')
    profile.is_active = bool(active)
    db.session.commit()
    return profile


def delete_admin_account(profile):
    """Remove the admin profile; the sign-in identity stays as a plain user."""
    if profile.is_super_admin:
        raise AdminAccountError('Cannot delete super admin account')
    db.session.delete(profile)
    db.session.commit()
    logger.info('Admin profile %s deleted', profile.id)
