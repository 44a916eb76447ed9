from flask_login import AnonymousUserMixin
from sqlalchemy.exc import OperationalError

from edureach.models import AdminProfile
from edureach.services import roles
from edureach.services.roles import classify_viewer

from conftest import make_admin, make_user


def test_anonymous_viewer(app):
    assert classify_viewer(None).role == roles.ROLE_ANONYMOUS
    assert classify_viewer(AnonymousUserMixin()).role == roles.ROLE_ANONYMOUS


def test_user_without_profile_is_plain_user(app):
    viewer = classify_viewer(make_user())
    assert viewer.role == roles.ROLE_USER
    assert viewer.profile is None
    assert viewer.needs_password_change is False


def test_admin_and_super_admin(app):
    admin = make_admin(force_password_change=True)
    viewer = classify_viewer(admin.user)
    assert viewer.role == roles.ROLE_ADMIN
    assert viewer.needs_password_change is True

    seeded = AdminProfile.query.filter_by(is_super_admin=True).one()
    assert classify_viewer(seeded.user).role == roles.ROLE_SUPER_ADMIN


def test_lookup_failure_treated_as_non_admin(app, monkeypatch):
    admin = make_admin()

    def broken_lookup(user_id):
        raise OperationalError('SELECT', {}, Exception('database is locked'))

    monkeypatch.setattr(roles, 'find_admin_profile', broken_lookup)
    viewer = classify_viewer(admin.user)
    assert viewer.role == roles.ROLE_USER
    assert viewer.profile is None


def test_super_admin_seeded_once(app):
    from edureach.services import ensure_super_admin
    ensure_super_admin()
    ensure_super_admin()
    seeded = AdminProfile.query.filter_by(is_super_admin=True).all()
    assert len(seeded) == 1
    assert seeded[0].force_password_change is True
