"""
Consultation Intake Service

Stores a contact-form submission as an unread UserMessage and sends two
notification emails: one to the operator, one acknowledgment to the
submitter.
"""

import logging
from datetime import datetime

from flask import current_app, render_template
from flask_mail import Message
from sqlalchemy.exc import SQLAlchemyError

from edureach.extensions import db, mail
from edureach.models import UserMessage, STATUS_UNREAD
from edureach.services.validation import is_valid_email

logger = logging.getLogger(__name__)


class ConsultationError(Exception):
    """Consultation request could not be processed."""


class ConsultationValidationError(ConsultationError):
    """Submitted fields are missing or malformed."""


def validate_request(name, email, message):
    if not name or not email or not message:
        raise ConsultationValidationError('Please fill in all required fields')
    if not is_valid_email(email):
        raise ConsultationValidationError('Please provide a valid email address')


def send_consultation_email(name, email, message, phone=None):
    """Persist the request and notify operator and submitter.

    Returns the created UserMessage. Raises ConsultationError when the
    row cannot be saved or the notifications cannot be sent; in the
    latter case the row has already been stored.
    """
    name = str(name or '').strip()
    email = str(email or '').strip()
    message = str(message or '').strip()
    phone = str(phone or '').strip() or None
    validate_request(name, email, message)

    logger.info('Received consultation request from %s', email)

    record = UserMessage(name=name, email=email, phone=phone, message=message, status=STATUS_UNREAD)
    try:
        db.session.add(record)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Database error while saving consultation request')
        raise ConsultationError('Failed to save message to database') from e

    received_at = datetime.utcnow()
    try:
        mail.send(Message(
            subject='New Consultation Request',
            recipients=[current_app.config['ADMIN_NOTIFICATION_EMAIL']],
            html=render_template('email/consultation_admin.html', msg=record, received_at=received_at),
        ))
        mail.send(Message(
            subject='Thank you for your consultation request!',
            recipients=[record.email],
            html=render_template('email/consultation_ack.html', msg=record),
        ))
    except Exception as e:
        logger.exception('Failed to send consultation emails for message %s', record.id)
        raise ConsultationError('Failed to send notification emails') from e

    logger.info('Consultation request %s stored and acknowledged', record.id)
    return record
