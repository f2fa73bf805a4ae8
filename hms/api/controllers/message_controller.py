from flask import jsonify
from hms.extensions import db
from hms.models.message_models import Message
from hms.utils.errors import ValidationError
from hms.utils.request_util import get_request_data
from hms.utils.validators import missing_fields

REQUIRED_FIELDS = ['firstName', 'lastName', 'email', 'phone', 'message']


def send_message():
    data = get_request_data()
    if missing_fields(data, REQUIRED_FIELDS):
        raise ValidationError()

    message = Message(
        first_name=data['firstName'],
        last_name=data['lastName'],
        email=data['email'],
        phone=data['phone'],
        message=data['message']
    )
    errors = message.validate()
    if errors:
        raise ValidationError.from_messages(errors)

    db.session.add(message)
    db.session.commit()
    return jsonify({'success': True, 'message': 'Message Sent!', 'data': message.to_dict()}), 200


def get_all_messages():
    messages = Message.query.order_by(Message.id).all()
    return jsonify({'success': True, 'messages': [m.to_dict() for m in messages]}), 200
