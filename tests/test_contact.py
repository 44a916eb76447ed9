import pytest

from edureach.extensions import mail
from edureach.models import UserMessage, STATUS_UNREAD
from edureach.services import consultation


def test_contact_form_creates_one_unread_message_and_two_emails(client, app):
    with mail.record_messages() as outbox:
        r = client.post('/contact', data={
            'name': 'Maria Rodriguez',
            'email': 'maria@example.com',
            'phone': '+44 20 7946 0000',
            'message': 'I would like to study at LSE.',
        }, follow_redirects=True)

    assert r.status_code == 200
    assert 'sent successfully' in r.get_data(as_text=True)

    messages = UserMessage.query.all()
    assert len(messages) == 1
    assert messages[0].status == STATUS_UNREAD
    assert messages[0].phone == '+44 20 7946 0000'

    assert len(outbox) == 2
    operator, ack = outbox
    assert operator.recipients == [app.config['ADMIN_NOTIFICATION_EMAIL']]
    assert operator.subject == 'New Consultation Request'
    assert 'Maria Rodriguez' in operator.html
    assert ack.recipients == ['maria@example.com']
    assert 'Thank you for contacting us, Maria Rodriguez!' in ack.html


def test_contact_form_requires_fields(client):
    with mail.record_messages() as outbox:
        r = client.post('/contact', data={'name': 'No Email', 'message': 'hello'},
                        follow_redirects=True)
    assert 'Please fill in all required fields' in r.get_data(as_text=True)
    assert UserMessage.query.count() == 0
    assert outbox == []


def test_json_endpoint_returns_created_id(client):
    r = client.post('/functions/send-consultation-email', json={
        'name': 'David Kim',
        'email': 'david@example.com',
        'message': 'Toronto CS program?',
    })
    assert r.status_code == 200
    data = r.get_json()
    assert data['success'] is True
    message = UserMessage.query.one()
    assert data['id'] == message.id
    assert message.phone is None


def test_json_endpoint_validation_error(client):
    r = client.post('/functions/send-consultation-email', json={'name': 'x', 'email': 'bad', 'message': 'y'})
    assert r.status_code == 400
    assert 'error' in r.get_json()
    assert UserMessage.query.count() == 0


def test_mail_failure_reports_error_but_keeps_row(client, monkeypatch):
    def failing_send(message):
        raise ConnectionRefusedError('smtp down')

    monkeypatch.setattr(consultation.mail, 'send', failing_send)
    r = client.post('/functions/send-consultation-email', json={
        'name': 'Ahmed', 'email': 'ahmed@example.com', 'message': 'Stanford?',
    })
    assert r.status_code == 500
    assert r.get_json() == {'error': 'Failed to send notification emails'}
    assert UserMessage.query.count() == 1


@pytest.fixture()
def inbox(app):
    from edureach.extensions import db
    rows = [
        UserMessage(name='A', email='a@example.com', message='first'),
        UserMessage(name='B', email='b@example.com', message='second'),
    ]
    db.session.add_all(rows)
    db.session.commit()
    return rows


def test_admin_marks_message_read_and_unread(admin_client, inbox):
    from edureach.extensions import db
    first, second = inbox
    admin_client.post(f'/admin/messages/{first.id}/status', data={'status': 'read'})
    db.session.refresh(first)
    db.session.refresh(second)
    assert first.status == 'read'
    assert second.status == 'unread'

    admin_client.post(f'/admin/messages/{first.id}/status', data={'status': 'unread'})
    db.session.refresh(first)
    assert first.status == 'unread'

    admin_client.post(f'/admin/messages/{first.id}/status', data={'status': 'archived'})
    db.session.refresh(first)
    assert first.status == 'unread'


def test_dashboard_counts_unread(admin_client, inbox):
    body = admin_client.get('/admin/dashboard').get_data(as_text=True)
    assert '2 unread' in body


@pytest.mark.parametrize('body', [['x'], 'just a string', 42])
def test_json_endpoint_rejects_non_object_body(client, body):
    r = client.post('/functions/send-consultation-email', json=body)
    assert r.status_code == 400
    assert r.get_json() == {'error': 'Invalid request body'}
    assert UserMessage.query.count() == 0
