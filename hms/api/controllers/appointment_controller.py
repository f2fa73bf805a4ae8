from flask import jsonify, g, current_app
from hms.extensions import db
from hms.models.user_models import User, Role
from hms.models.appointment_models import Appointment, AppointmentStatus
from hms.utils.errors import ValidationError, NotFound, DoctorNotFound, DoctorConflict
from hms.utils.request_util import get_request_data
from hms.utils.validators import missing_fields

REQUIRED_FIELDS = [
    'firstName', 'lastName', 'email', 'phone', 'nic', 'dob', 'gender',
    'appointment_date', 'department', 'doctor_firstName', 'doctor_lastName', 'address'
]


def resolve_doctor(first_name, last_name, department):
    """
    Finds the id of the one doctor with this exact name in this department.

    Duplicate doctor records are reported as a conflict rather than guessed at.
    """
    matches = User.query.filter_by(
        role=Role.DOCTOR,
        first_name=first_name,
        last_name=last_name,
        doctor_department=department
    ).limit(2).all()

    if not matches:
        raise DoctorNotFound()
    if len(matches) > 1:
        raise DoctorConflict()
    return matches[0].id


def _get_appointment_or_404(appointment_id):
    appointment = db.session.get(Appointment, appointment_id)
    if not appointment:
        raise NotFound('Appointment Not Found!')
    return appointment


def create_appointment():
    """Books an appointment for the logged-in patient."""
    data = get_request_data()
    if missing_fields(data, REQUIRED_FIELDS):
        raise ValidationError()

    appointment = Appointment(status=AppointmentStatus.PENDING, has_visited=False)
    appointment.apply({key: value for key, value in data.items() if key != 'status'})
    errors = appointment.validate()
    if errors:
        raise ValidationError.from_messages(errors)

    appointment.doctor_id = resolve_doctor(
        appointment.doctor_first_name,
        appointment.doctor_last_name,
        appointment.department
    )
    appointment.patient_id = g.current_user.id

    db.session.add(appointment)
    db.session.commit()
    current_app.logger.info(
        f"Appointment created: id={appointment.id}, patient_id={appointment.patient_id}, doctor_id={appointment.doctor_id}"
    )
    return jsonify({
        'success': True,
        'appointment': appointment.to_dict(),
        'message': 'Appointment Sent!'
    }), 200


def get_all_appointments():
    appointments = Appointment.query.order_by(Appointment.id).all()
    return jsonify({
        'success': True,
        'appointments': [appt.to_dict() for appt in appointments]
    }), 200


def update_appointment_status(appointment_id):
    """Applies an admin's changes (usually just the status) and re-validates the record."""
    appointment = _get_appointment_or_404(appointment_id)

    appointment.apply(get_request_data())
    errors = appointment.validate()
    if errors:
        db.session.rollback()
        raise ValidationError.from_messages(errors)

    db.session.commit()
    current_app.logger.info(f"Appointment updated: id={appointment.id}, status={appointment.status.value}")
    return jsonify({'success': True, 'message': 'Appointment Status Updated!'}), 200


def delete_appointment(appointment_id):
    appointment = _get_appointment_or_404(appointment_id)

    db.session.delete(appointment)
    db.session.commit()
    current_app.logger.info(f"Appointment deleted: id={appointment_id}")
    return jsonify({'success': True, 'message': 'Appointment Deleted!'}), 200
