"""
Models Package

Exports all models for easy importing.
"""

from edureach.models.user import User
from edureach.models.admin_profile import AdminProfile, ADMIN_SECTIONS, DEFAULT_PERMISSIONS
from edureach.models.content import Service, Testimonial, UserTestimonial, BlogPost, ProgramImage
from edureach.models.message import UserMessage, STATUS_READ, STATUS_UNREAD, MESSAGE_STATUSES

__all__ = [
    'User',
    'AdminProfile',
    'ADMIN_SECTIONS',
    'DEFAULT_PERMISSIONS',
    'Service',
    'Testimonial',
    'UserTestimonial',
    'BlogPost',
    'ProgramImage',
    'UserMessage',
    'STATUS_READ',
    'STATUS_UNREAD',
    'MESSAGE_STATUSES',
]
