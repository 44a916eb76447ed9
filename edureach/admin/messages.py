"""
Admin Message Routes

Inbound consultation requests.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from sqlalchemy.exc import SQLAlchemyError

from edureach.admin import admin_bp
from edureach.admin.decorators import admin_required
from edureach.extensions import db
from edureach.models import UserMessage, MESSAGE_STATUSES

logger = logging.getLogger(__name__)


@admin_bp.route('/messages')
@admin_required
def manage_messages():
    messages = UserMessage.query.order_by(UserMessage.created_at.desc()).all()
    return render_template('admin/messages.html', messages=messages)


@admin_bp.route('/messages/<int:message_id>/status', methods=['POST'])
@admin_required
def update_message_status(message_id):
    """Mark a message read or unread."""
    message = db.get_or_404(UserMessage, message_id)
    status = request.form.get('status', '')
    if status not in MESSAGE_STATUSES:
        flash('Unknown message status.', 'danger')
        return redirect(url_for('admin.manage_messages'))

    try:
        message.status = status
        db.session.commit()
        flash(f'Message marked as {status}.', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error updating status of message %s', message_id)
        flash('Failed to update message status.', 'danger')
    return redirect(url_for('admin.manage_messages'))


@admin_bp.route('/messages/<int:message_id>/delete', methods=['POST'])
@admin_required
def delete_message(message_id):
    message = db.get_or_404(UserMessage, message_id)
    try:
        db.session.delete(message)
        db.session.commit()
        flash('Message deleted successfully.', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error deleting message %s', message_id)
        flash('Failed to delete message.', 'danger')
    return redirect(url_for('admin.manage_messages'))
