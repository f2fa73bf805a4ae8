from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest
from flask import g

from hms.extensions import db
from hms.models.user_models import Role
from hms.utils.decorators import authenticate, authorize
from hms.utils.errors import Forbidden, NotAuthenticated, ExpiredToken, InvalidToken
from hms.utils.tokens import issue_token, ADMIN_COOKIE, PATIENT_COOKIE

ADMIN_ME = '/api/v1/user/admin/me'
PATIENT_ME = '/api/v1/user/patient/me'


def test_missing_cookie_is_not_authenticated(client):
    response = client.get(ADMIN_ME)

    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'message': 'Dashboard User Is Not Authenticated!'}


def test_missing_patient_cookie_message(client):
    response = client.get(PATIENT_ME)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'User Is Not Authenticated!'


def test_expired_token_rejected(app, client, admin):
    app.config['JWT_ACCESS_TOKEN_EXPIRES'] = timedelta(seconds=-30)
    token, _ = issue_token(admin)
    client.set_cookie(ADMIN_COOKIE, token)

    response = client.get(ADMIN_ME)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Json Web Token Is Expired, Try Again!'


def test_tampered_token_rejected(client, admin):
    forged = pyjwt.encode(
        {'sub': str(admin.id), 'exp': datetime.now(timezone.utc) + timedelta(hours=1)},
        'attacker-chosen-secret-of-some-length',
        algorithm='HS256'
    )
    client.set_cookie(ADMIN_COOKIE, forged)

    response = client.get(ADMIN_ME)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Json Web Token Is Invalid, Try Again!'


def test_wrong_role_is_forbidden_even_in_admin_cookie(client, patient):
    token, _ = issue_token(patient)
    client.set_cookie(ADMIN_COOKIE, token)

    response = client.get(ADMIN_ME)

    assert response.status_code == 403
    assert response.get_json()['message'] == 'Patient Not Authorized For This Resource!'


def test_doctor_cannot_use_patient_endpoints(client, login_as, doctor):
    login_as(doctor)

    response = client.get(PATIENT_ME)

    assert response.status_code == 403


def test_deleted_user_is_not_authenticated(client, login_as, make_user):
    user = make_user(role=Role.ADMIN)
    login_as(user)
    db.session.delete(user)
    db.session.commit()

    response = client.get(ADMIN_ME)

    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_valid_token_and_role_reaches_handler(client, login_as, admin):
    login_as(admin)

    response = client.get(ADMIN_ME)

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['user']['_id'] == admin.id
    assert 'password' not in body['user']
    assert 'password_hash' not in body['user']


def test_authenticate_attaches_user(app, admin):
    token, _ = issue_token(admin)
    with app.test_request_context(headers={'Cookie': f'{ADMIN_COOKIE}={token}'}):
        user = authenticate(ADMIN_COOKIE, Role.ADMIN)
        assert user.id == admin.id
        assert g.current_user is user


def test_authenticate_propagates_token_failure_kinds(app, admin):
    with app.test_request_context(headers={'Cookie': f'{PATIENT_COOKIE}=garbage'}):
        with pytest.raises(InvalidToken):
            authenticate(PATIENT_COOKIE, Role.PATIENT)

    app.config['JWT_ACCESS_TOKEN_EXPIRES'] = timedelta(seconds=-30)
    token, _ = issue_token(admin)
    with app.test_request_context(headers={'Cookie': f'{ADMIN_COOKIE}={token}'}):
        with pytest.raises(ExpiredToken):
            authenticate(ADMIN_COOKIE, Role.ADMIN)


def test_authorize_allows_listed_roles(app, doctor):
    @authorize(Role.DOCTOR, Role.ADMIN)
    def view():
        return 'ok'

    with app.test_request_context():
        g.current_user = doctor
        assert view() == 'ok'


def test_authorize_rejects_other_roles(app, patient):
    @authorize(Role.ADMIN)
    def view():
        return 'ok'

    with app.test_request_context():
        g.current_user = patient
        with pytest.raises(Forbidden) as excinfo:
            view()
    assert excinfo.value.message == 'Patient Not Allowed To Access This Resource!'


def test_authorize_without_authentication(app):
    @authorize(Role.ADMIN)
    def view():
        return 'ok'

    with app.test_request_context():
        with pytest.raises(NotAuthenticated):
            view()
