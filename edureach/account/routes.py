"""
Account Routes

Every testimonial query here is filtered by the signed-in user's id, so a
user can never see or change another user's rows.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, abort
from flask_login import login_required, current_user
from sqlalchemy.exc import SQLAlchemyError

from edureach.account import account_bp
from edureach.extensions import db
from edureach.models import UserTestimonial
from edureach.services.validation import testimonial_fields, ValidationError

logger = logging.getLogger(__name__)


def _own_testimonial_or_404(testimonial_id):
    testimonial = UserTestimonial.query.filter_by(id=testimonial_id, user_id=current_user.id).first()
    if testimonial is None:
        abort(404)
    return testimonial


@account_bp.route('/profile')
@login_required
def profile():
    """User profile with the user's own testimonials"""
    testimonials = UserTestimonial.query.filter_by(user_id=current_user.id) \
        .order_by(UserTestimonial.created_at.desc()).all()
    return render_template('account/profile.html', testimonials=testimonials)


@account_bp.route('/testimonials', methods=['POST'])
@login_required
def create_testimonial():
    try:
        fields = testimonial_fields(request.form)
    except ValidationError as e:
        flash(str(e), 'danger')
        return redirect(url_for('account.profile'))

    try:
        db.session.add(UserTestimonial(user_id=current_user.id, **fields))
        db.session.commit()
        flash('Testimonial created successfully.', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error saving testimonial for user %s', current_user.id)
        flash('Failed to save testimonial.', 'danger')
    return redirect(url_for('account.profile'))


@account_bp.route('/testimonials/<int:testimonial_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_testimonial(testimonial_id):
    testimonial = _own_testimonial_or_404(testimonial_id)

    if request.method == 'POST':
        try:
            fields = testimonial_fields(request.form)
        except ValidationError as e:
            flash(str(e), 'danger')
            return render_template('account/testimonial_form.html', testimonial=testimonial)

        try:
            for key, value in fields.items():
                setattr(testimonial, key, value)
            db.session.commit()
            flash('Testimonial updated successfully.', 'success')
            return redirect(url_for('account.profile'))
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Error updating testimonial %s', testimonial_id)
            flash('Failed to save testimonial.', 'danger')

    return render_template('account/testimonial_form.html', testimonial=testimonial)


@account_bp.route('/testimonials/<int:testimonial_id>/toggle', methods=['POST'])
@login_required
def toggle_testimonial(testimonial_id):
    testimonial = _own_testimonial_or_404(testimonial_id)
    try:
        testimonial.is_active = not testimonial.is_active
        db.session.commit()
        state = 'activated' if testimonial.is_active else 'deactivated'
        flash(f'Testimonial {state} successfully.', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error toggling testimonial %s', testimonial_id)
        flash('Failed to update testimonial status.', 'danger')
    return redirect(url_for('account.profile'))


@account_bp.route('/testimonials/<int:testimonial_id>/delete', methods=['POST'])
@login_required
def delete_testimonial(testimonial_id):
    testimonial = _own_testimonial_or_404(testimonial_id)
    try:
        db.session.delete(testimonial)
        db.session.commit()
        flash('Testimonial deleted successfully.', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error deleting testimonial %s', testimonial_id)
        flash('Failed to delete testimonial.', 'danger')
    return redirect(url_for('account.profile'))
