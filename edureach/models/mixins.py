"""
Shared column mixins
"""

from datetime import datetime

from edureach.extensions import db


class TimestampMixin:
    """created_at / updated_at columns maintained on insert and update."""
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class ActiveFlagMixin:
    """Per-row switch controlling whether a resource appears on the public site."""
    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)

    @classmethod
    def active(cls):
        return cls.query.filter_by(is_active=True)
