from functools import wraps
from flask import request, g
from hms.extensions import db
from hms.models.user_models import User, Role
from hms.utils.errors import NotAuthenticated, Forbidden
from hms.utils.tokens import verify_token, ADMIN_COOKIE, PATIENT_COOKIE

_MISSING_COOKIE_MESSAGES = {
    ADMIN_COOKIE: 'Dashboard User Is Not Authenticated!',
    PATIENT_COOKIE: 'User Is Not Authenticated!',
}


def authenticate(cookie_name, expected_role):
    """
    Resolves the session user from the named cookie.

    The cookie name only says where to look; the role check runs against the
    role stored on the user record.

    Raises:
        NotAuthenticated: no cookie, or the token's user no longer exists.
        InvalidToken / ExpiredToken: the token failed verification.
        Forbidden: the user's role is not expected_role.
    """
    token = request.cookies.get(cookie_name)
    if not token:
        raise NotAuthenticated(_MISSING_COOKIE_MESSAGES.get(cookie_name))

    user_id = verify_token(token)
    user = db.session.get(User, user_id)
    if not user:
        raise NotAuthenticated()

    if user.role is not expected_role:
        raise Forbidden(f"{user.role.value} Not Authorized For This Resource!")

    g.current_user = user
    return user


def require_auth(cookie_name, expected_role):
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            authenticate(cookie_name, expected_role)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


admin_required = require_auth(ADMIN_COOKIE, Role.ADMIN)
patient_required = require_auth(PATIENT_COOKIE, Role.PATIENT)


def authorize(*roles):
    """Restricts an already-authenticated view to the given roles."""
    allowed = set(roles)

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            user = g.get('current_user')
            if user is None:
                raise NotAuthenticated()
            if user.role not in allowed:
                raise Forbidden(f"{user.role.value} Not Allowed To Access This Resource!")
            return f(*args, **kwargs)
        return decorated_function
    return decorator
