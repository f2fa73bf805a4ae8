# /hms/utils/tokens.py
"""Session tokens: signed JWTs carried in a role-scoped, HTTP-only cookie."""
from datetime import datetime, timezone
import jwt as pyjwt
from flask import current_app, jsonify
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from hms.models.user_models import Role
from hms.utils.errors import ExpiredToken, InvalidToken

ADMIN_COOKIE = 'adminToken'
PATIENT_COOKIE = 'patientToken'


def cookie_name_for(role):
    return ADMIN_COOKIE if role is Role.ADMIN else PATIENT_COOKIE


def issue_token(user):
    """Signs a token for user; returns (token, expires_at)."""
    lifetime = current_app.config['JWT_ACCESS_TOKEN_EXPIRES']
    expires_at = datetime.now(timezone.utc) + lifetime
    token = create_access_token(identity=str(user.id), expires_delta=lifetime)
    return token, expires_at


def verify_token(token):
    """Checks signature and expiry and returns the user id the token was issued for."""
    try:
        payload = decode_token(token)
    except pyjwt.ExpiredSignatureError:
        raise ExpiredToken()
    except (pyjwt.InvalidTokenError, JWTExtendedException):
        raise InvalidToken()

    try:
        return int(payload['sub'])
    except (KeyError, TypeError, ValueError):
        raise InvalidToken()


def send_token(user, message, status_code):
    """Builds the login response and sets the token cookie for the user's role."""
    token, expires_at = issue_token(user)
    response = jsonify({
        'success': True,
        'message': message,
        'user': user.to_dict(),
        'token': token
    })
    response.set_cookie(
        cookie_name_for(user.role),
        token,
        expires=expires_at,
        httponly=True,
        secure=current_app.config['AUTH_COOKIE_SECURE'],
        samesite=current_app.config['AUTH_COOKIE_SAMESITE']
    )
    return response, status_code


def clear_token(response, cookie_name):
    response.delete_cookie(
        cookie_name,
        httponly=True,
        secure=current_app.config['AUTH_COOKIE_SECURE'],
        samesite=current_app.config['AUTH_COOKIE_SAMESITE']
    )
    return response
