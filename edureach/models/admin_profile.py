"""
Admin Profile Model

A row here grants the linked user access to the back-office.
"""

from edureach.extensions import db
from edureach.models.mixins import TimestampMixin

# Back-office sections an admin can be granted
ADMIN_SECTIONS = ('messages', 'programs', 'services', 'testimonials', 'blog')
DEFAULT_PERMISSIONS = ['messages', 'services', 'testimonials']


class AdminProfile(TimestampMixin, db.Model):
    """Admin profile attached to exactly one user"""
    __tablename__ = 'admin_profiles'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), unique=True, nullable=False)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    avatar_url = db.Column(db.String(500))
    is_super_admin = db.Column(db.Boolean, default=False, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    permissions = db.Column(db.JSON, default=lambda: list(DEFAULT_PERMISSIONS), nullable=False)
    force_password_change = db.Column(db.Boolean, default=False, nullable=False)
    last_login = db.Column(db.DateTime)

    user = db.relationship('User', back_populates='admin_profile')

    @property
    def role_label(self):
        return 'Super Admin' if self.is_super_admin else 'Admin'

    def __repr__(self):
        return f'<AdminProfile {self.email} super={self.is_super_admin}>'
