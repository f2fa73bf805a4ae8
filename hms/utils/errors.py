# /hms/utils/errors.py
"""Typed failures raised by controllers and translated by the error handlers."""


class ApiError(Exception):
    status_code = 500
    default_message = 'Internal Server Error'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Please Fill Full Form!'

    @classmethod
    def from_messages(cls, messages):
        """Joins several field-level messages into one human-readable message."""
        return cls(' '.join(messages))


class NotAuthenticated(ApiError):
    status_code = 400
    default_message = 'User Is Not Authenticated!'


class InvalidToken(NotAuthenticated):
    default_message = 'Json Web Token Is Invalid, Try Again!'


class ExpiredToken(NotAuthenticated):
    default_message = 'Json Web Token Is Expired, Try Again!'


class Forbidden(ApiError):
    status_code = 403
    default_message = 'Not Authorized For This Resource!'


class NotFound(ApiError):
    status_code = 404
    default_message = 'Resource Not Found!'


class DoctorNotFound(ApiError):
    status_code = 400
    default_message = 'Doctor Not Found!'


class DoctorConflict(ApiError):
    status_code = 400
    default_message = 'Doctors Conflict! Please Contact Through Email Or Phone!'


class DuplicateKey(ApiError):
    status_code = 400
    default_message = 'Duplicate Value Entered'


class UpstreamFailure(ApiError):
    status_code = 500
    default_message = 'External Service Failure'


class InternalError(ApiError):
    status_code = 500
