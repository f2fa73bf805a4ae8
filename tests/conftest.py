"""
Shared fixtures for the API test suite.

Every test gets a fresh application bound to an in-memory SQLite database,
so records created in one test never leak into another.
"""
from datetime import date
import pytest

from hms import create_app
from hms.extensions import db
from hms.models.user_models import User, Role, Gender
from hms.utils.tokens import issue_token, cookie_name_for

DEFAULT_PASSWORD = 'password123'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Factory that persists a user and returns it."""
    counter = {'n': 0}

    def _make_user(role=Role.PATIENT, password=DEFAULT_PASSWORD, **overrides):
        counter['n'] += 1
        fields = dict(
            first_name='Jane',
            last_name='Doe',
            email=f"user{counter['n']}@mail.com",
            phone='0123456789',
            nic='1234567890123',
            dob=date(1990, 5, 17),
            gender=Gender.FEMALE,
            role=role,
        )
        if role is Role.DOCTOR:
            fields['doctor_department'] = 'Cardiology'
            fields['avatar_public_id'] = 'doctor_avatars/sample'
            fields['avatar_url'] = 'https://res.cloudinary.com/test-cloud/image/upload/sample.png'
        fields.update(overrides)
        user = User(**fields)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user

    return _make_user


@pytest.fixture
def login_as(client):
    """Puts a valid token for user into the cookie its role is served from."""
    def _login_as(user):
        token, _ = issue_token(user)
        client.set_cookie(cookie_name_for(user.role), token)
        return token
    return _login_as


@pytest.fixture
def admin(make_user):
    return make_user(role=Role.ADMIN, first_name='Alice', last_name='Admin', email='admin@mail.com')


@pytest.fixture
def patient(make_user):
    return make_user(role=Role.PATIENT, email='jane@mail.com')


@pytest.fixture
def doctor(make_user):
    return make_user(role=Role.DOCTOR, first_name='John', last_name='Smith', email='john.smith@mail.com')


@pytest.fixture
def appointment_payload():
    return {
        'firstName': 'Jane',
        'lastName': 'Doe',
        'email': 'jane@mail.com',
        'phone': '0123456789',
        'nic': '1234567890123',
        'dob': '1990-05-17',
        'gender': 'Female',
        'appointment_date': '2026-11-02',
        'department': 'Cardiology',
        'doctor_firstName': 'John',
        'doctor_lastName': 'Smith',
        'hasVisited': False,
        'address': '12 Harbour Road, Springfield',
    }


@pytest.fixture
def registration_payload():
    return {
        'firstName': 'Jane',
        'lastName': 'Doe',
        'email': 'jane@mail.com',
        'phone': '0123456789',
        'nic': '1234567890123',
        'dob': '1990-05-17',
        'gender': 'Female',
        'password': DEFAULT_PASSWORD,
    }
