"""
User Model

Sign-in identity for visitors and admins alike.
"""

from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from edureach.extensions import db
from edureach.models.mixins import TimestampMixin


class User(UserMixin, TimestampMixin, db.Model):
    """User model for authentication"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120))
    password_hash = db.Column(db.String(255), nullable=False)

    admin_profile = db.relationship('AdminProfile', back_populates='user', uselist=False,
                                    cascade='all, delete-orphan')
    testimonials = db.relationship('UserTestimonial', back_populates='user', lazy=True,
                                   cascade='all, delete-orphan')

    def set_password(self, password):
        self.password_hash = generate_password_hash(password, method='pbkdf2:sha256')

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.email}>'
