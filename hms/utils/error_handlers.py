# /hms/utils/error_handlers.py
import re
from flask import jsonify, current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException
from hms.extensions import db
from hms.utils.errors import ApiError, DuplicateKey, InternalError

# sqlite: "UNIQUE constraint failed: users.email"
# postgres: "Key (email)=(jane@example.com) already exists."
_UNIQUE_PATTERNS = (
    re.compile(r'UNIQUE constraint failed: \w+\.(\w+)'),
    re.compile(r'Key \((\w+)\)=')
)


def _duplicate_field(error):
    text = str(error.orig)
    for pattern in _UNIQUE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return 'value'


def error_response(message, status_code):
    return jsonify({'success': False, 'message': message}), status_code


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def api_error(error):
        db.session.rollback()
        if error.status_code >= 500:
            current_app.logger.error(f"{type(error).__name__}: {error.message}")
        return error_response(error.message, error.status_code)

    @app.errorhandler(IntegrityError)
    def integrity_error(error):
        db.session.rollback()
        duplicate = DuplicateKey(f"Duplicate {_duplicate_field(error)} Entered")
        return error_response(duplicate.message, duplicate.status_code)

    @app.errorhandler(HTTPException)
    def http_error(error):
        return error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        current_app.logger.exception(f"Internal server error: {str(error)}")
        failure = InternalError()
        return error_response(failure.message, failure.status_code)
