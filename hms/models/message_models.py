from datetime import datetime
from hms.extensions import db
from hms.utils import validators


class Message(db.Model):
    """Contact-form submission; anyone may send one, only admins read them."""
    __tablename__ = 'messages'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def validate(self):
        errors = [
            validators.check_name(self.first_name, 'First Name'),
            validators.check_name(self.last_name, 'Last Name'),
            validators.check_email(self.email),
            validators.check_phone(self.phone),
            validators.check_message_body(self.message),
        ]
        return [error for error in errors if error]

    def to_dict(self):
        return {
            '_id': self.id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'phone': self.phone,
            'message': self.message,
        }
