# /hms/utils/validators.py
"""Field-level checks shared by the User, Appointment and Message models.

Each check returns an error message, or None when the value is acceptable,
so a model can collect every failure and report them together.
"""
from datetime import date, datetime
from email_validator import validate_email, EmailNotValidError

PHONE_LENGTH = 10
NIC_MIN_LENGTH = 2
NIC_MAX_LENGTH = 13
NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 8
MESSAGE_MIN_LENGTH = 10


def missing_fields(data, required):
    """Names of required fields that are absent or empty."""
    return [field for field in required if data.get(field) in (None, '')]


def check_name(value, label):
    if not value:
        return f"{label} Is Required!"
    value = str(value)
    if len(value) < NAME_MIN_LENGTH:
        return f"{label} Must Contain At Least {NAME_MIN_LENGTH} Characters!"
    return None


def check_email(value):
    if not value:
        return "Email Is Required!"
    value = str(value)
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return "Provide A Valid Email!"
    return None


def check_phone(value):
    if not value:
        return "Phone Is Required!"
    value = str(value)
    if len(value) != PHONE_LENGTH:
        return f"Phone Number Must Contain Exactly {PHONE_LENGTH} Digits!"
    return None


def check_nic(value):
    if not value:
        return "NIC Is Required!"
    value = str(value)
    if not NIC_MIN_LENGTH <= len(value) <= NIC_MAX_LENGTH:
        return f"NIC Must Contain Between {NIC_MIN_LENGTH} And {NIC_MAX_LENGTH} Characters!"
    return None


def check_password(value):
    if not value:
        return "Password Is Required!"
    value = str(value)
    if len(value) < PASSWORD_MIN_LENGTH:
        return f"Password Must Contain At Least {PASSWORD_MIN_LENGTH} Characters!"
    return None


def check_message_body(value):
    if not value:
        return "Message Is Required!"
    value = str(value)
    if len(value) < MESSAGE_MIN_LENGTH:
        return f"Message Must Contain At Least {MESSAGE_MIN_LENGTH} Characters!"
    return None


def parse_enum(enum_cls, value):
    """Returns the enum member for value, or None when it is not a member."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def parse_date(value):
    """Accepts a date, a datetime, or an ISO-8601 string; returns None otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
    except ValueError:
        return None
