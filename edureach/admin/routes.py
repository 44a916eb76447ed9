"""
Admin Routes

Admin sign-in, dashboard, credential update gate and own profile.
"""

import logging
from datetime import datetime

from flask import render_template, request, redirect, url_for, flash, g
from flask_login import login_user, logout_user, current_user
from sqlalchemy.exc import SQLAlchemyError

from edureach.admin import admin_bp
from edureach.admin.decorators import admin_required, admin_login_required
from edureach.extensions import db
from edureach.models import (
    User, AdminProfile, Service, Testimonial, BlogPost, ProgramImage, UserMessage, STATUS_UNREAD,
)
from edureach.services import (
    classify_viewer, is_admin_role, update_credentials, CredentialError, ROLE_SUPER_ADMIN,
)
from edureach.services.validation import is_valid_email

logger = logging.getLogger(__name__)


def admin_menu(is_super_admin):
    """Back-office navigation; admin management is for super admins only."""
    items = [
        ('messages', 'Messages', 'admin.manage_messages'),
        ('programs', 'Program Images', 'admin.manage_programs'),
        ('services', 'Services', 'admin.manage_services'),
        ('testimonials', 'Testimonials', 'admin.manage_testimonials'),
        ('blog', 'Blog Posts', 'admin.manage_blog'),
    ]
    if is_super_admin:
        items.append(('admins', 'Admin Management', 'admin.manage_admins'))
    items.append(('profile', 'Profile', 'admin.admin_profile'))
    return items


@admin_bp.app_context_processor
def inject_admin_menu():
    profile = getattr(g, 'admin_profile', None)
    if profile is None:
        return {}
    return dict(admin_menu=admin_menu(profile.is_super_admin), admin_profile=profile)


@admin_bp.route('/login', methods=['GET', 'POST'])
def admin_login():
    """Admin login page; only users with an admin profile get through."""
    viewer = classify_viewer(current_user)
    if is_admin_role(viewer.role) and viewer.profile.is_active:
        if viewer.needs_password_change:
            return redirect(url_for('admin.change_credentials'))
        return redirect(url_for('admin.admin_dashboard'))

    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        if not email or not password:
            flash('Please enter both email and password.', 'danger')
            return render_template('admin/login.html')

        user = User.query.filter_by(email=email).first()
        if user is None or not user.check_password(password):
            flash('Invalid login credentials.', 'danger')
            return render_template('admin/login.html')

        profile = AdminProfile.query.filter_by(user_id=user.id).first()
        if profile is None:
            flash('Access denied. Admin privileges required.', 'danger')
            return render_template('admin/login.html')
        if not profile.is_active:
            flash('Account is deactivated. Contact super admin.', 'danger')
            return render_template('admin/login.html')

        login_user(user)
        try:
            profile.last_login = datetime.utcnow()
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Could not record last login for admin %s', profile.id)

        if profile.force_password_change:
            flash('Password Change Required: please update your credentials for security.', 'warning')
            return redirect(url_for('admin.change_credentials'))

        flash('Logged in successfully as admin.', 'success')
        return redirect(url_for('admin.admin_dashboard'))

    return render_template('admin/login.html')


@admin_bp.route('/logout')
def admin_logout():
    """Admin logout."""
    logout_user()
    flash('Signed out successfully.', 'info')
    return redirect(url_for('main.index'))


@admin_bp.route('/')
@admin_bp.route('/dashboard')
@admin_required
def admin_dashboard():
    """Admin dashboard with content statistics."""
    is_super = g.viewer.role == ROLE_SUPER_ADMIN
    stats = {
        'total_messages': UserMessage.query.count(),
        'unread_messages': UserMessage.query.filter_by(status=STATUS_UNREAD).count(),
        'total_services': Service.query.count(),
        'total_testimonials': Testimonial.query.count(),
        'total_programs': ProgramImage.query.count(),
        'total_posts': BlogPost.query.count(),
        'total_admins': AdminProfile.query.count() if is_super else 0,
    }
    return render_template('admin/dashboard.html', stats=stats, is_super_admin=is_super)


@admin_bp.route('/credentials', methods=['GET', 'POST'])
@admin_login_required
def change_credentials():
    """Credential update screen, mandatory while force_password_change is set."""
    if request.method == 'POST':
        try:
            update_credentials(
                current_user,
                current_password=request.form.get('current_password', ''),
                new_password=request.form.get('new_password', ''),
                confirm_password=request.form.get('confirm_password', ''),
                new_email=request.form.get('new_email', ''),
            )
        except CredentialError as e:
            flash(str(e), 'danger')
            return render_template('admin/change_credentials.html'), 400

        flash('Password and email updated successfully.', 'success')
        return redirect(url_for('admin.admin_dashboard'))

    return render_template('admin/change_credentials.html')


@admin_bp.route('/profile', methods=['GET', 'POST'])
@admin_required
def admin_profile():
    """Edit the signed-in admin's own profile."""
    profile = g.admin_profile

    if request.method == 'POST':
        name = request.form.get('name', '').strip()
        email = request.form.get('email', '').strip().lower()
        avatar_url = request.form.get('avatar_url', '').strip() or None

        if not name:
            flash('Name is required.', 'danger')
            return redirect(url_for('admin.admin_profile'))
        if not is_valid_email(email):
            flash('Please provide a valid email address.', 'danger')
            return redirect(url_for('admin.admin_profile'))
        if User.query.filter(User.email == email, User.id != current_user.id).first():
            flash('A user with this email address has already been registered.', 'danger')
            return redirect(url_for('admin.admin_profile'))

        try:
            # sign-in email and profile email stay in sync
            current_user.email = email
            profile.name = name
            profile.email = email
            profile.avatar_url = avatar_url
            db.session.commit()
            flash('Profile updated successfully.', 'success')
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Error updating admin profile %s', profile.id)
            flash('Failed to update profile.', 'danger')
        return redirect(url_for('admin.admin_profile'))

    return render_template('admin/profile.html', profile=profile)
