from flask import jsonify, current_app
from hms.extensions import db
from hms.models.user_models import User, Role, Gender
from hms.utils.errors import ValidationError, DuplicateKey
from hms.utils.request_util import get_request_data
from hms.utils.tokens import send_token, clear_token, ADMIN_COOKIE, PATIENT_COOKIE
from hms.utils.validators import missing_fields, parse_date, parse_enum

USER_FIELDS = ['firstName', 'lastName', 'email', 'phone', 'nic', 'dob', 'gender', 'password']
LOGIN_FIELDS = ['email', 'password', 'confirmPassword', 'role']

# Same message for every credential mismatch so callers cannot tell which part was wrong
INVALID_LOGIN_MESSAGE = 'Invalid Email, Password Or Role!'


def build_user(data, role, required=USER_FIELDS, duplicate_message='User Already Registered!', **extra):
    """
    Validates a registration payload and returns an unsaved User with its password hashed.

    Nothing is written here; the caller adds and commits once every other
    check (and any upload) has succeeded.
    """
    if missing_fields(data, required):
        raise ValidationError()

    user = User(
        first_name=data['firstName'],
        last_name=data['lastName'],
        email=data['email'],
        phone=data['phone'],
        nic=data['nic'],
        dob=parse_date(data['dob']),
        gender=parse_enum(Gender, data['gender']),
        role=role,
        **extra
    )
    errors = user.validate(password=data['password'])
    if errors:
        raise ValidationError.from_messages(errors)

    if User.query.filter_by(email=user.email).first():
        raise DuplicateKey(duplicate_message)

    user.set_password(data['password'])
    return user


def patient_register():
    """Registers a patient and logs them straight in."""
    data = get_request_data()
    user = build_user(data, Role.PATIENT)

    db.session.add(user)
    db.session.commit()
    current_app.logger.info(f"Patient registered: user_id={user.id}")
    return send_token(user, 'User Registered!', 200)


def login():
    data = get_request_data()
    if missing_fields(data, LOGIN_FIELDS):
        raise ValidationError()

    user = User.query.filter_by(email=data['email']).first()
    role = parse_enum(Role, data['role'])

    if (data['password'] != data['confirmPassword']
            or not user
            or not user.check_password(data['password'])
            or role is not user.role):
        current_app.logger.info("Rejected login attempt")
        raise ValidationError(INVALID_LOGIN_MESSAGE)

    current_app.logger.info(f"User logged in: user_id={user.id}, role={user.role.value}")
    return send_token(user, 'Login Successfully!', 201)


def add_new_admin():
    """Creates another admin. The caller keeps their own session; no token is issued."""
    data = get_request_data()
    admin = build_user(data, Role.ADMIN, duplicate_message='Admin With This Email Already Exists!')

    db.session.add(admin)
    db.session.commit()
    current_app.logger.info(f"Admin registered: user_id={admin.id}")
    return jsonify({
        'success': True,
        'message': 'New Admin Registered',
        'admin': admin.to_dict()
    }), 200


def _logout(cookie_name, message):
    response = jsonify({'success': True, 'message': message})
    return clear_token(response, cookie_name), 201


def logout_admin():
    return _logout(ADMIN_COOKIE, 'Admin Logged Out Successfully.')


def logout_patient():
    return _logout(PATIENT_COOKIE, 'Patient Logged Out Successfully.')
