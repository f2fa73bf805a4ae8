import enum
from datetime import datetime
from hms.extensions import db, bcrypt
from hms.utils import validators


def enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Role(enum.Enum):
    PATIENT = 'Patient'
    DOCTOR = 'Doctor'
    ADMIN = 'Admin'


class Gender(enum.Enum):
    MALE = 'Male'
    FEMALE = 'Female'


class User(db.Model):
    """Patients, doctors and admins share one table; role decides what a session may do."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    phone = db.Column(db.String(20), nullable=False)
    nic = db.Column(db.String(20), nullable=False)
    dob = db.Column(db.Date, nullable=False)
    gender = db.Column(db.Enum(Gender, name='gender', values_callable=enum_values), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(Role, name='user_role', values_callable=enum_values), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Doctor-only fields
    doctor_department = db.Column(db.String(100))
    avatar_public_id = db.Column(db.String(255))
    avatar_url = db.Column(db.String(1024))

    def set_password(self, password: str) -> None:
        """Hashes and sets the user's password."""
        error = validators.check_password(password)
        if error:
            raise ValueError(error)
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password: str) -> bool:
        if not self.password_hash or not password:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)

    def validate(self, password=None):
        """Returns every field-level error message for this record, in field order."""
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
        if password is not None or not self.password_hash:
            errors.append(validators.check_password(password))
        if self.role is None:
            errors.append("User Role Required!")
        elif self.role is Role.DOCTOR and not self.doctor_department:
            errors.append("Doctor Department Is Required!")
        return [error for error in errors if error]

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def to_dict(self):
        """Serializes the User for API responses; the password hash is never included."""
        data = {
            '_id': self.id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'phone': self.phone,
            'nic': self.nic,
            'dob': self.dob.isoformat() if self.dob else None,
            'gender': self.gender.value if self.gender else None,
            'role': self.role.value if self.role else None,
        }
        if self.role is Role.DOCTOR:
            data['doctorDepartment'] = self.doctor_department
            data['docAvatar'] = {
                'public_id': self.avatar_public_id,
                'url': self.avatar_url,
            }
        return data

    def __repr__(self):
        return f"<User {self.id} {self.role.value if self.role else None}>"
