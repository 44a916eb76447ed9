import pytest

from edureach import create_app
from edureach.config import TestConfig
from edureach.extensions import db
from edureach.models import User, AdminProfile


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def make_user(email='student@example.com', password='studentpass', name='Student'):
    user = User(email=email, name=name)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def make_admin(email='editor@example.com', password='editorpass', name='Editor',
               super_admin=False, force_password_change=False, active=True):
    user = make_user(email=email, password=password, name=name)
    profile = AdminProfile(user_id=user.id, name=name, email=email, is_super_admin=super_admin,
                           is_active=active, force_password_change=force_password_change)
    db.session.add(profile)
    db.session.commit()
    return profile


def login(client, email, password, admin=True):
    url = '/admin/login' if admin else '/auth/login'
    return client.post(url, data={'email': email, 'password': password})


@pytest.fixture()
def user():
    return make_user()


@pytest.fixture()
def admin():
    return make_admin()


@pytest.fixture()
def super_admin():
    """The seeded super admin with its credential change already done."""
    profile = AdminProfile.query.filter_by(is_super_admin=True).one()
    profile.force_password_change = False
    db.session.commit()
    return profile


@pytest.fixture()
def admin_client(client, admin):
    login(client, 'editor@example.com', 'editorpass')
    return client


@pytest.fixture()
def super_client(client, super_admin):
    login(client, TestConfig.DEFAULT_SUPER_ADMIN_EMAIL, TestConfig.DEFAULT_SUPER_ADMIN_PASSWORD)
    return client
