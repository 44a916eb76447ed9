"""
Admin Content Routes

Services, testimonials, blog posts and program images. Each screen lists
rows newest first, creates, edits, deletes and toggles the active flag of
a single row. A failed write rolls back and leaves the row as it was.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from sqlalchemy.exc import SQLAlchemyError

from edureach.admin import admin_bp
from edureach.admin.decorators import admin_required
from edureach.extensions import db
from edureach.models import Service, Testimonial, BlogPost, ProgramImage
from edureach.services.icons import ICON_CHOICES, normalize_icon
from edureach.services.validation import (
    ValidationError, clean, optional, require, testimonial_fields,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Shared row operations
# -----------------------------------------------------------------------------

def _create_row(model, fields, label):
    try:
        db.session.add(model(**fields))
        db.session.commit()
        flash(f'{label} created successfully.', 'success')
        return True
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error creating %s', label)
        flash(f'Failed to save {label.lower()}.', 'danger')
        return False


def _update_row(row, fields, label):
    try:
        for key, value in fields.items():
            setattr(row, key, value)
        db.session.commit()
        flash(f'{label} updated successfully.', 'success')
        return True
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error updating %s %s', label, row.id)
        flash(f'Failed to save {label.lower()}.', 'danger')
        return False


def _toggle_active(model, row_id, label, endpoint):
    """Flip is_active and nothing else."""
    row = db.get_or_404(model, row_id)
    try:
        row.is_active = not row.is_active
        db.session.commit()
        state = 'activated' if row.is_active else 'deactivated'
        flash(f'{label} {state}.', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error toggling %s %s', label, row_id)
        flash(f'Failed to update {label.lower()} status.', 'danger')
    return redirect(url_for(endpoint))


def _delete_row(model, row_id, label, endpoint):
    row = db.get_or_404(model, row_id)
    try:
        db.session.delete(row)
        db.session.commit()
        flash(f'{label} deleted successfully.', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error deleting %s %s', label, row_id)
        flash(f'Failed to delete {label.lower()}.', 'danger')
    return redirect(url_for(endpoint))


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------

def _service_fields(form):
    return {
        'title': require(form, 'title', 'Title is required.'),
        'description': require(form, 'description', 'Description is required.'),
        'icon': normalize_icon(clean(form, 'icon')),
    }


@admin_bp.route('/services', methods=['GET', 'POST'])
@admin_required
def manage_services():
    """List services and add new ones."""
    if request.method == 'POST':
        try:
            _create_row(Service, _service_fields(request.form), 'Service')
        except ValidationError as e:
            flash(str(e), 'danger')
        return redirect(url_for('admin.manage_services'))

    services = Service.query.order_by(Service.created_at.desc()).all()
    return render_template('admin/services.html', services=services, icons=ICON_CHOICES)


@admin_bp.route('/services/<int:service_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_service(service_id):
    service = db.get_or_404(Service, service_id)
    if request.method == 'POST':
        try:
            if _update_row(service, _service_fields(request.form), 'Service'):
                return redirect(url_for('admin.manage_services'))
        except ValidationError as e:
            flash(str(e), 'danger')
    return render_template('admin/service_form.html', service=service, icons=ICON_CHOICES)


@admin_bp.route('/services/<int:service_id>/toggle', methods=['POST'])
@admin_required
def toggle_service(service_id):
    return _toggle_active(Service, service_id, 'Service', 'admin.manage_services')


@admin_bp.route('/services/<int:service_id>/delete', methods=['POST'])
@admin_required
def delete_service(service_id):
    return _delete_row(Service, service_id, 'Service', 'admin.manage_services')


# -----------------------------------------------------------------------------
# Testimonials
# -----------------------------------------------------------------------------

@admin_bp.route('/testimonials', methods=['GET', 'POST'])
@admin_required
def manage_testimonials():
    if request.method == 'POST':
        try:
            _create_row(Testimonial, testimonial_fields(request.form), 'Testimonial')
        except ValidationError as e:
            flash(str(e), 'danger')
        return redirect(url_for('admin.manage_testimonials'))

    testimonials = Testimonial.query.order_by(Testimonial.created_at.desc()).all()
    return render_template('admin/testimonials.html', testimonials=testimonials)


@admin_bp.route('/testimonials/<int:testimonial_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_testimonial(testimonial_id):
    testimonial = db.get_or_404(Testimonial, testimonial_id)
    if request.method == 'POST':
        try:
            if _update_row(testimonial, testimonial_fields(request.form), 'Testimonial'):
                return redirect(url_for('admin.manage_testimonials'))
        except ValidationError as e:
            flash(str(e), 'danger')
    return render_template('admin/testimonial_form.html', testimonial=testimonial)


@admin_bp.route('/testimonials/<int:testimonial_id>/toggle', methods=['POST'])
@admin_required
def toggle_testimonial(testimonial_id):
    return _toggle_active(Testimonial, testimonial_id, 'Testimonial', 'admin.manage_testimonials')


@admin_bp.route('/testimonials/<int:testimonial_id>/delete', methods=['POST'])
@admin_required
def delete_testimonial(testimonial_id):
    return _delete_row(Testimonial, testimonial_id, 'Testimonial', 'admin.manage_testimonials')


# -----------------------------------------------------------------------------
# Blog posts
# -----------------------------------------------------------------------------

def _blog_fields(form):
    return {
        'title': require(form, 'title', 'Title is required.'),
        'description': optional(form, 'description'),
        'content': optional(form, 'content'),
        'category': clean(form, 'category') or 'general',
        'video_url': optional(form, 'video_url'),
        'thumbnail_url': optional(form, 'thumbnail_url'),
        'author_name': optional(form, 'author_name'),
        'author_avatar': optional(form, 'author_avatar'),
    }


@admin_bp.route('/blog', methods=['GET', 'POST'])
@admin_required
def manage_blog():
    if request.method == 'POST':
        try:
            _create_row(BlogPost, _blog_fields(request.form), 'Blog post')
        except ValidationError as e:
            flash(str(e), 'danger')
        return redirect(url_for('admin.manage_blog'))

    posts = BlogPost.query.order_by(BlogPost.created_at.desc()).all()
    return render_template('admin/blog.html', posts=posts)


@admin_bp.route('/blog/<int:post_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_blog_post(post_id):
    post = db.get_or_404(BlogPost, post_id)
    if request.method == 'POST':
        try:
            if _update_row(post, _blog_fields(request.form), 'Blog post'):
                return redirect(url_for('admin.manage_blog'))
        except ValidationError as e:
            flash(str(e), 'danger')
    return render_template('admin/blog_form.html', post=post)


@admin_bp.route('/blog/<int:post_id>/toggle', methods=['POST'])
@admin_required
def toggle_blog_post(post_id):
    return _toggle_active(BlogPost, post_id, 'Blog post', 'admin.manage_blog')


@admin_bp.route('/blog/<int:post_id>/delete', methods=['POST'])
@admin_required
def delete_blog_post(post_id):
    return _delete_row(BlogPost, post_id, 'Blog post', 'admin.manage_blog')


# -----------------------------------------------------------------------------
# Program images
# -----------------------------------------------------------------------------

def _program_fields(form):
    return {
        'title': require(form, 'title', 'Please enter a title'),
        'description': optional(form, 'description'),
        'image_url': require(form, 'image_url', 'Please upload an image'),
    }


@admin_bp.route('/programs', methods=['GET', 'POST'])
@admin_required
def manage_programs():
    if request.method == 'POST':
        try:
            _create_row(ProgramImage, _program_fields(request.form), 'Program')
        except ValidationError as e:
            flash(str(e), 'danger')
        return redirect(url_for('admin.manage_programs'))

    programs = ProgramImage.query.order_by(ProgramImage.created_at.desc()).all()
    return render_template('admin/programs.html', programs=programs)


@admin_bp.route('/programs/<int:program_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_program(program_id):
    program = db.get_or_404(ProgramImage, program_id)
    if request.method == 'POST':
        try:
            if _update_row(program, _program_fields(request.form), 'Program'):
                return redirect(url_for('admin.manage_programs'))
        except ValidationError as e:
            flash(str(e), 'danger')
    return render_template('admin/program_form.html', program=program)


@admin_bp.route('/programs/<int:program_id>/toggle', methods=['POST'])
@admin_required
def toggle_program(program_id):
    return _toggle_active(ProgramImage, program_id, 'Program', 'admin.manage_programs')


@admin_bp.route('/programs/<int:program_id>/delete', methods=['POST'])
@admin_required
def delete_program(program_id):
    return _delete_row(ProgramImage, program_id, 'Program', 'admin.manage_programs')
