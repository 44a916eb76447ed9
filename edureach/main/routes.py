"""
Main Routes

Public pages of the website.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, jsonify, abort, current_app
from sqlalchemy.exc import SQLAlchemyError

from edureach.main import main_bp
from edureach.extensions import db
from edureach.models import Service, Testimonial, UserTestimonial, BlogPost, ProgramImage
from edureach.services import send_consultation_email, ConsultationError, ConsultationValidationError

logger = logging.getLogger(__name__)

# Shown when the services table cannot be read
DEFAULT_SERVICES = [
    {
        'id': None,
        'icon': 'BookOpen',
        'title': 'IELTS/TOEFL Training',
        'description': 'Expert guidance to help you achieve the required language proficiency '
                       'scores for your dream university.',
    },
    {
        'id': None,
        'icon': 'FileText',
        'title': 'University Admissions',
        'description': 'Comprehensive support for university applications, from document '
                       'preparation to interview coaching.',
    },
    {
        'id': None,
        'icon': 'Plane',
        'title': 'Visa Application',
        'description': 'Complete visa processing assistance with high success rates and expert '
                       'documentation support.',
    },
]


def _load_services():
    try:
        return Service.active().order_by(Service.created_at.asc()).all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading services; using defaults')
        return DEFAULT_SERVICES


@main_bp.route('/')
def index():
    """Landing page: hero, programs, services, testimonials, blog, contact."""
    services = _load_services()
    programs = ProgramImage.active().order_by(ProgramImage.created_at.desc()).all()
    testimonials = Testimonial.active().order_by(Testimonial.created_at.desc()).all()
    user_testimonials = UserTestimonial.active().order_by(UserTestimonial.created_at.desc()).all()
    posts = BlogPost.active().order_by(BlogPost.created_at.desc()) \
        .limit(current_app.config['BLOG_POSTS_ON_HOME']).all()

    return render_template('main/index.html',
                           services=services,
                           programs=programs,
                           testimonials=testimonials + user_testimonials,
                           posts=posts)


@main_bp.route('/services/<int:service_id>')
def service_detail(service_id):
    """Detail page for an active service."""
    service = Service.active().filter_by(id=service_id).first()
    if service is None:
        abort(404)
    return render_template('main/service_detail.html', service=service)


@main_bp.route('/blog/<int:post_id>')
def blog_post(post_id):
    """Show an active blog post and count the view."""
    post = BlogPost.active().filter_by(id=post_id).first()
    if post is None:
        abort(404)
    try:
        BlogPost.query.filter_by(id=post.id).update({BlogPost.views: BlogPost.views + 1})
        db.session.commit()
        db.session.refresh(post)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not record view for blog post %s', post_id)
    return render_template('main/blog_post.html', post=post)


@main_bp.route('/blog/<int:post_id>/like', methods=['POST'])
def like_blog_post(post_id):
    post = BlogPost.active().filter_by(id=post_id).first()
    if post is None:
        abort(404)
    try:
        BlogPost.query.filter_by(id=post.id).update({BlogPost.likes: BlogPost.likes + 1})
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not record like for blog post %s', post_id)
        flash('Could not like this post. Please try again.', 'danger')
    return redirect(url_for('main.blog_post', post_id=post_id))


@main_bp.route('/contact', methods=['POST'])
def contact():
    """Contact form submission from the landing page."""
    form = request.form
    try:
        send_consultation_email(
            name=form.get('name'),
            email=form.get('email'),
            phone=form.get('phone'),
            message=form.get('message'),
        )
    except ConsultationValidationError as e:
        flash(str(e), 'danger')
        return redirect(url_for('main.index', _anchor='contact'))
    except ConsultationError:
        flash('Failed to send your request. Please try again.', 'danger')
        return redirect(url_for('main.index', _anchor='contact'))

    flash("Your consultation request has been sent successfully. "
          "We'll get back to you within 24 hours.", 'success')
    return redirect(url_for('main.index', _anchor='contact'))


@main_bp.route('/functions/send-consultation-email', methods=['POST'])
def send_consultation_email_api():
    """JSON intake: {name, email, phone?, message} -> {success, message, id}."""
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({'error': 'Invalid request body'}), 400
    try:
        record = send_consultation_email(
            name=payload.get('name'),
            email=payload.get('email'),
            phone=payload.get('phone'),
            message=payload.get('message'),
        )
    except ConsultationValidationError as e:
        return jsonify({'error': str(e)}), 400
    except ConsultationError as e:
        return jsonify({'error': str(e)}), 500

    return jsonify({
        'success': True,
        'message': 'Consultation request sent successfully',
        'id': record.id,
    })
