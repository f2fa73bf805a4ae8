import pytest

from hms.models.message_models import Message

SEND_URL = '/api/v1/message/send'


@pytest.fixture
def message_payload():
    return {
        'firstName': 'Mark',
        'lastName': 'Lee',
        'email': 'mark.lee@mail.com',
        'phone': '0112233445',
        'message': 'Do you accept walk-in patients on Saturdays?',
    }


def test_anyone_can_send_message(client, message_payload):
    response = client.post(SEND_URL, json=message_payload)

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['message'] == 'Message Sent!'

    stored = Message.query.one()
    assert body['data'] == {
        '_id': stored.id,
        'firstName': 'Mark',
        'lastName': 'Lee',
        'email': 'mark.lee@mail.com',
        'phone': '0112233445',
        'message': 'Do you accept walk-in patients on Saturdays?',
    }


def test_repeated_messages_are_all_kept(client, message_payload):
    for _ in range(3):
        assert client.post(SEND_URL, json=message_payload).status_code == 200

    assert Message.query.count() == 3


@pytest.mark.parametrize('field', ['firstName', 'lastName', 'email', 'phone', 'message'])
def test_missing_field(client, message_payload, field):
    del message_payload[field]

    response = client.post(SEND_URL, json=message_payload)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Please Fill Full Form!'
    assert Message.query.count() == 0


def test_short_message_body(client, message_payload):
    message_payload['message'] = 'Hello'

    response = client.post(SEND_URL, json=message_payload)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Message Must Contain At Least 10 Characters!'


def test_form_encoded_message(client, message_payload):
    response = client.post(SEND_URL, data=message_payload)

    assert response.status_code == 200


def test_admin_reads_messages_in_order(client, login_as, admin, message_payload):
    client.post(SEND_URL, json=message_payload)
    message_payload['firstName'] = 'Second'
    client.post(SEND_URL, json=message_payload)
    login_as(admin)

    response = client.get('/api/v1/message/getall')

    assert response.status_code == 200
    messages = response.get_json()['messages']
    assert [m['firstName'] for m in messages] == ['Mark', 'Second']


def test_messages_hidden_without_admin_session(client, message_payload):
    client.post(SEND_URL, json=message_payload)

    response = client.get('/api/v1/message/getall')

    assert response.status_code == 400
    assert response.get_json()['success'] is False
