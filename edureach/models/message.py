"""
User Message Model
"""

from edureach.extensions import db
from edureach.models.mixins import TimestampMixin

STATUS_UNREAD = 'unread'
STATUS_READ = 'read'
MESSAGE_STATUSES = (STATUS_UNREAD, STATUS_READ)


class UserMessage(TimestampMixin, db.Model):
    """Consultation request submitted through the contact form"""
    __tablename__ = 'user_messages'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(40))
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(10), default=STATUS_UNREAD, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'message': self.message,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<UserMessage {self.email} {self.status}>'
