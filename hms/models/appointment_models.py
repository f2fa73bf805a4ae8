import enum
from datetime import datetime
from hms.extensions import db
from hms.models.user_models import Gender, enum_values
from hms.utils import validators


class AppointmentStatus(enum.Enum):
    PENDING = 'Pending'
    ACCEPTED = 'Accepted'
    REJECTED = 'Rejected'


class Appointment(db.Model):
    """A patient's booking request against one resolved doctor."""
    __tablename__ = 'appointments'

    id = db.Column(db.Integer, primary_key=True)

    # Patient contact details as submitted with the request
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    nic = db.Column(db.String(20), nullable=False)
    dob = db.Column(db.Date, nullable=False)
    gender = db.Column(db.Enum(Gender, name='gender', values_callable=enum_values), nullable=False)
    address = db.Column(db.String(255), nullable=False)

    # Appointment details
    appointment_date = db.Column(db.String(50), nullable=False)
    department = db.Column(db.String(100), nullable=False)
    doctor_first_name = db.Column(db.String(100), nullable=False)
    doctor_last_name = db.Column(db.String(100), nullable=False)
    has_visited = db.Column(db.Boolean, default=False, nullable=False)
    status = db.Column(
        db.Enum(AppointmentStatus, name='appointment_status', values_callable=enum_values),
        default=AppointmentStatus.PENDING,
        nullable=False
    )

    doctor_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    patient_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    doctor = db.relationship('User', foreign_keys=[doctor_id])
    patient = db.relationship('User', foreign_keys=[patient_id])

    # Request keys that map onto plain string columns
    TEXT_FIELDS = {
        'firstName': 'first_name',
        'lastName': 'last_name',
        'email': 'email',
        'phone': 'phone',
        'nic': 'nic',
        'address': 'address',
        'appointment_date': 'appointment_date',
        'department': 'department',
        'doctor_firstName': 'doctor_first_name',
        'doctor_lastName': 'doctor_last_name',
    }

    def apply(self, data):
        """Copies recognised request fields onto the record. Ids are never taken from data."""
        for key, attr in self.TEXT_FIELDS.items():
            if key in data:
                setattr(self, attr, data[key])
        if 'dob' in data:
            self.dob = validators.parse_date(data['dob'])
        if 'gender' in data:
            self.gender = validators.parse_enum(Gender, data['gender'])
        if 'hasVisited' in data:
            self.has_visited = _as_bool(data['hasVisited'])
        if 'status' in data:
            self.status = validators.parse_enum(AppointmentStatus, data['status'])

    def validate(self):
        errors = [
            validators.check_name(self.first_name, 'First Name'),
            validators.check_name(self.last_name, 'Last Name'),
            validators.check_email(self.email),
            validators.check_phone(self.phone),
            validators.check_nic(self.nic),
        ]
        if self.dob is None:
            errors.append("Provide A Valid DOB!")
        if self.gender is None:
            errors.append("Gender Must Be Male Or Female!")
        if not self.appointment_date:
            errors.append("Appointment Date Is Required!")
        if not self.department:
            errors.append("Department Name Is Required!")
        if not self.doctor_first_name or not self.doctor_last_name:
            errors.append("Doctor Name Is Required!")
        if not self.address:
            errors.append("Address Is Required!")
        if self.status is None:
            errors.append("Status Must Be Pending, Accepted Or Rejected!")
        return [error for error in errors if error]

    def to_dict(self):
        return {
            '_id': self.id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'phone': self.phone,
            'nic': self.nic,
            'dob': self.dob.isoformat() if self.dob else None,
            'gender': self.gender.value if self.gender else None,
            'appointment_date': self.appointment_date,
            'department': self.department,
            'doctor': {
                'firstName': self.doctor_first_name,
                'lastName': self.doctor_last_name,
            },
            'hasVisited': self.has_visited,
            'address': self.address,
            'doctorId': self.doctor_id,
            'patientId': self.patient_id,
            'status': self.status.value if self.status else None,
        }


def _as_bool(value):
    if isinstance(value, str):
        return value.lower() in ['true', '1', 't', 'yes', 'on']
    return bool(value)
