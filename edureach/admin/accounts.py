"""
Admin Account Routes

Admin management, available to super admins only.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from sqlalchemy.exc import SQLAlchemyError

from edureach.admin import admin_bp
from edureach.admin.decorators import super_admin_required
from edureach.extensions import db
from edureach.models import AdminProfile, ADMIN_SECTIONS, DEFAULT_PERMISSIONS
from edureach.services import (
    create_admin_account, set_admin_active, delete_admin_account, AdminAccountError,
)

logger = logging.getLogger(__name__)


@admin_bp.route('/admins', methods=['GET', 'POST'])
@super_admin_required
def manage_admins():
    """List admin accounts and create new ones."""
    if request.method == 'POST':
        permissions = request.form.getlist('permissions') or list(DEFAULT_PERMISSIONS)
        try:
            create_admin_account(
                name=request.form.get('name'),
                email=request.form.get('email'),
                password=request.form.get('password'),
                permissions=permissions,
            )
            flash('Admin account created successfully.', 'success')
        except AdminAccountError as e:
            flash(str(e), 'danger')
        return redirect(url_for('admin.manage_admins'))

    admins = AdminProfile.query.order_by(AdminProfile.created_at.desc()).all()
    return render_template('admin/admins.html', admins=admins, sections=ADMIN_SECTIONS,
                           default_permissions=DEFAULT_PERMISSIONS)


@admin_bp.route('/admins/<int:profile_id>/toggle', methods=['POST'])
@super_admin_required
def toggle_admin(profile_id):
    profile = db.get_or_404(AdminProfile, profile_id)
    try:
        set_admin_active(profile, not profile.is_active)
        flash('Admin profile updated successfully.', 'success')
    except AdminAccountError as e:
        flash(str(e), 'danger')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error updating admin %s', profile_id)
        flash('Failed to update admin profile.', 'danger')
    return redirect(url_for('admin.manage_admins'))


@admin_bp.route('/admins/<int:profile_id>/delete', methods=['POST'])
@super_admin_required
def delete_admin(profile_id):
    profile = db.get_or_404(AdminProfile, profile_id)
    try:
        delete_admin_account(profile)
        flash('Admin account deleted successfully.', 'success')
    except AdminAccountError as e:
        flash(str(e), 'danger')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error deleting admin %s', profile_id)
        flash('Failed to delete admin account.', 'danger')
    return redirect(url_for('admin.manage_admins'))
