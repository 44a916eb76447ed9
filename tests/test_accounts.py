from edureach.extensions import db
from edureach.models import AdminProfile, User

from conftest import make_admin, login


def test_super_admin_creates_admin_with_forced_change(super_client):
    r = super_client.post('/admin/admins', data={
        'name': 'New Editor',
        'email': 'new.editor@example.com',
        'password': 'temporary1',
        'permissions': ['messages', 'blog'],
    })
    assert r.status_code == 302
    profile = AdminProfile.query.filter_by(email='new.editor@example.com').one()
    assert profile.is_super_admin is False
    assert profile.force_password_change is True
    assert profile.permissions == ['messages', 'blog']
    assert profile.user.check_password('temporary1')


def test_create_admin_rejects_existing_email(super_client, user):
    r = super_client.post('/admin/admins', data={
        'name': 'Dup', 'email': 'student@example.com', 'password': 'temporary1',
    }, follow_redirects=True)
    assert 'User already registered' in r.get_data(as_text=True)
    assert AdminProfile.query.count() == 1


def test_regular_admin_cannot_reach_admin_management(admin_client):
    target = make_admin(email='other@example.com', password='otherpass1', name='Other')
    body = admin_client.get('/admin/dashboard').get_data(as_text=True)
    assert 'Admin Management' not in body

    assert admin_client.get('/admin/admins').status_code == 403
    assert admin_client.post(f'/admin/admins/{target.id}/delete').status_code == 403
    assert admin_client.post(f'/admin/admins/{target.id}/toggle').status_code == 403
    assert db.session.get(AdminProfile, target.id) is not None


def test_super_admin_sees_management_and_deletes_admin(super_client):
    target = make_admin(email='other@example.com', password='otherpass1', name='Other')
    target_id, user_id = target.id, target.user_id

    body = super_client.get('/admin/dashboard').get_data(as_text=True)
    assert 'Admin Management' in body
    body = super_client.get('/admin/admins').get_data(as_text=True)
    assert 'Delete Admin' in body

    r = super_client.post(f'/admin/admins/{target_id}/delete')
    assert r.status_code == 302
    assert db.session.get(AdminProfile, target_id) is None
    # the identity remains, now as a plain user
    assert db.session.get(User, user_id) is not None


def test_super_admin_row_is_protected(super_client, super_admin):
    super_id = super_admin.id
    body = super_client.get('/admin/admins').get_data(as_text=True)
    assert 'Delete Admin' not in body

    r = super_client.post(f'/admin/admins/{super_id}/delete', follow_redirects=True)
    assert 'Cannot delete super admin account' in r.get_data(as_text=True)
    super_client.post(f'/admin/admins/{super_id}/toggle')
    profile = db.session.get(AdminProfile, super_id)
    db.session.refresh(profile)
    assert profile.is_active is True


def test_deactivated_admin_loses_access(super_client, client):
    target = make_admin(email='other@example.com', password='otherpass1', name='Other')
    super_client.post(f'/admin/admins/{target.id}/toggle')
    db.session.refresh(target)
    assert target.is_active is False

    super_client.get('/admin/logout')
    r = login(client, 'other@example.com', 'otherpass1')
    assert 'Account is deactivated' in r.get_data(as_text=True)


def test_admin_profile_update(admin_client, admin):
    r = admin_client.post('/admin/profile', data={
        'name': 'Renamed Editor', 'email': 'renamed@example.com', 'avatar_url': '',
    })
    assert r.status_code == 302
    db.session.refresh(admin)
    assert admin.name == 'Renamed Editor'
    assert admin.email == 'renamed@example.com'
    assert admin.avatar_url is None


def test_admin_profile_email_change_moves_sign_in_email(admin_client, admin):
    admin_client.post('/admin/profile', data={'name': 'Editor', 'email': 'new.editor@example.com'})
    user = db.session.get(User, admin.user_id)
    db.session.refresh(user)
    assert user.email == 'new.editor@example.com'

    admin_client.get('/admin/logout')
    r = login(admin_client, 'new.editor@example.com', 'editorpass')
    assert r.headers['Location'].endswith('/admin/dashboard')


def test_admin_profile_rejects_email_of_another_user(admin_client, admin):
    make_admin(email='other@example.com', password='otherpass1', name='Other')
    r = admin_client.post('/admin/profile', data={'name': 'Editor', 'email': 'other@example.com'},
                          follow_redirects=True)
    assert 'already been registered' in r.get_data(as_text=True)

    db.session.refresh(admin)
    assert admin.email == 'editor@example.com'
    assert AdminProfile.query.filter_by(email='other@example.com').count() == 1
