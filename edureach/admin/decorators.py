"""
Admin Decorators

Access to the back-office is decided per request from the signed-in
user's AdminProfile row.
"""

from functools import wraps

from flask import redirect, url_for, flash, abort, g
from flask_login import current_user, logout_user

from edureach.services import classify_viewer, ROLE_ANONYMOUS, ROLE_USER, ROLE_SUPER_ADMIN


def _resolve_admin():
    """Return (viewer, response). response is set when access is refused."""
    viewer = classify_viewer(current_user)

    if viewer.role == ROLE_ANONYMOUS:
        return viewer, redirect(url_for('admin.admin_login'))

    if viewer.role == ROLE_USER:
        flash('Access Denied: admin privileges required.', 'danger')
        logout_user()
        return viewer, redirect(url_for('auth.login'))

    if not viewer.profile.is_active:
        flash('Account is deactivated. Contact super admin.', 'danger')
        logout_user()
        return viewer, redirect(url_for('admin.admin_login'))

    g.viewer = viewer
    g.admin_profile = viewer.profile
    return viewer, None


def admin_login_required(f):
    """Signed-in, active admin. Does not enforce the credential change gate."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        _, denied = _resolve_admin()
        if denied is not None:
            return denied
        return f(*args, **kwargs)
    return wrapper


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.

    Admins flagged with force_password_change are sent to the credential
    update screen until they have replaced their initial credentials.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        viewer, denied = _resolve_admin()
        if denied is not None:
            return denied
        if viewer.needs_password_change:
            flash('Please update your credentials for security.', 'warning')
            return redirect(url_for('admin.change_credentials'))
        return f(*args, **kwargs)
    return wrapper


def super_admin_required(f):
    """admin_required plus the super admin flag; other admins get 403."""
    @wraps(f)
    @admin_required
    def wrapper(*args, **kwargs):
        if g.viewer.role != ROLE_SUPER_ADMIN:
            abort(403)
        return f(*args, **kwargs)
    return wrapper
