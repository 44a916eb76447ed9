"""
Auth Routes

User authentication routes using Flask-Login.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_user, logout_user, login_required, current_user
from sqlalchemy.exc import SQLAlchemyError

from edureach.auth import auth_bp
from edureach.extensions import db
from edureach.models import User
from edureach.services import classify_viewer, is_admin_role
from edureach.services.validation import is_valid_email

logger = logging.getLogger(__name__)


def _home_for(user):
    """Admins land in the back-office, everyone else on their profile."""
    if is_admin_role(classify_viewer(user).role):
        return url_for('admin.admin_dashboard')
    return url_for('account.profile')


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if current_user.is_authenticated:
        return redirect(_home_for(current_user))

    if request.method == 'POST':
        name = request.form.get('name', '').strip()
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')
        confirm_password = request.form.get('confirm_password', '')

        # Validation
        if not name:
            flash('Please provide your full name.', 'danger')
            return render_template('auth/register.html')

        if not is_valid_email(email):
            flash('Please provide a valid email address.', 'danger')
            return render_template('auth/register.html')

        if not password or len(password) < 6:
            flash('Password must be at least 6 characters long.', 'danger')
            return render_template('auth/register.html')

        if password != confirm_password:
            flash('Passwords do not match.', 'danger')
            return render_template('auth/register.html')

        if User.query.filter_by(email=email).first():
            flash('Email already registered. Please login or use another email.', 'danger')
            return render_template('auth/register.html')

        new_user = User(email=email, name=name)
        new_user.set_password(password)

        try:
            db.session.add(new_user)
            db.session.commit()
            flash('Registration successful! Please login.', 'success')
            return redirect(url_for('auth.login'))
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Registration error for %s', email)
            flash('An error occurred during registration. Please try again.', 'danger')

    return render_template('auth/register.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if current_user.is_authenticated:
        return redirect(_home_for(current_user))

    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')
        remember = bool(request.form.get('remember'))

        if not email or not password:
            flash('Please provide both email and password.', 'danger')
            return render_template('auth/login.html')

        user = User.query.filter_by(email=email).first()

        if user and user.check_password(password):
            login_user(user, remember=remember)
            flash(f'Welcome back, {user.name or user.email}!', 'success')

            next_page = request.args.get('next')
            if next_page and next_page.startswith('/') and not next_page.startswith('//'):
                return redirect(next_page)
            return redirect(_home_for(user))

        flash('Invalid email or password. Please try again.', 'danger')

    return render_template('auth/login.html')


@auth_bp.route('/logout')
@login_required
def logout():
    """User logout route"""
    logout_user()
    flash('Signed out successfully.', 'info')
    return redirect(url_for('main.index'))
