"""
Site Content Models

Services, testimonials, blog posts and program images shown on the
public site. Each row is standalone; visibility is controlled by is_active.
"""

from edureach.extensions import db
from edureach.models.mixins import TimestampMixin, ActiveFlagMixin


class Service(TimestampMixin, ActiveFlagMixin, db.Model):
    """A consulting service offered on the landing page"""
    __tablename__ = 'services'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(50), default='Settings', nullable=False)

    def __repr__(self):
        return f'<Service {self.title}>'


class Testimonial(TimestampMixin, ActiveFlagMixin, db.Model):
    """Admin-curated testimonial"""
    __tablename__ = 'testimonials'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(120))
    content = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, default=5, nullable=False)
    avatar_url = db.Column(db.String(500))

    def __repr__(self):
        return f'<Testimonial {self.name} {self.rating}/5>'


class UserTestimonial(TimestampMixin, ActiveFlagMixin, db.Model):
    """Testimonial written and owned by a signed-in user"""
    __tablename__ = 'user_testimonials'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(120))
    content = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, default=5, nullable=False)
    avatar_url = db.Column(db.String(500))

    user = db.relationship('User', back_populates='testimonials')

    def __repr__(self):
        return f'<UserTestimonial user:{self.user_id} {self.rating}/5>'


class BlogPost(TimestampMixin, ActiveFlagMixin, db.Model):
    """Blog article or video post"""
    __tablename__ = 'blog_posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    content = db.Column(db.Text)
    category = db.Column(db.String(50), default='general', nullable=False)
    video_url = db.Column(db.String(500))
    thumbnail_url = db.Column(db.String(500))
    author_name = db.Column(db.String(120))
    author_avatar = db.Column(db.String(500))
    views = db.Column(db.Integer, default=0, nullable=False)
    likes = db.Column(db.Integer, default=0, nullable=False)

    def __repr__(self):
        return f'<BlogPost {self.title}>'


class ProgramImage(TimestampMixin, ActiveFlagMixin, db.Model):
    """Study program showcased with an image"""
    __tablename__ = 'program_images'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    image_url = db.Column(db.String(500), nullable=False)

    def __repr__(self):
        return f'<ProgramImage {self.title}>'
