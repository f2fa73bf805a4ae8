# /hms/api/routes.py

from . import api_bp
from hms.extensions import limiter
from hms.models.user_models import Role
from hms.utils.decorators import admin_required, patient_required, authorize
from .controllers import auth_controller, user_controller, doctor_controller, appointment_controller, message_controller


# --- User & Authentication Endpoints ---
@api_bp.route('/user/patient/register', methods=['POST'])
@limiter.limit("20 per hour")
def patient_register():
    return auth_controller.patient_register()

@api_bp.route('/user/login', methods=['POST'])
@limiter.limit("10 per minute")
def login():
    return auth_controller.login()

@api_bp.route('/user/admin/addnew', methods=['POST'])
@admin_required
@authorize(Role.ADMIN)
def add_new_admin():
    return auth_controller.add_new_admin()

@api_bp.route('/user/doctor/addnew', methods=['POST'])
@admin_required
@authorize(Role.ADMIN)
def add_new_doctor():
    return doctor_controller.add_new_doctor()

@api_bp.route('/user/doctors', methods=['GET'])
@admin_required
def get_all_doctors():
    return user_controller.get_all_doctors()

@api_bp.route('/user/patient/me', methods=['GET'])
@patient_required
def get_patient_details():
    return user_controller.get_user_details()

@api_bp.route('/user/admin/me', methods=['GET'])
@admin_required
def get_admin_details():
    return user_controller.get_user_details()

@api_bp.route('/user/patient/logout', methods=['GET'])
@patient_required
def logout_patient():
    return auth_controller.logout_patient()

@api_bp.route('/user/admin/logout', methods=['GET'])
@admin_required
def logout_admin():
    return auth_controller.logout_admin()


# --- Appointment Endpoints ---
@api_bp.route('/appointment/post', methods=['POST'])
@patient_required
def create_appointment():
    return appointment_controller.create_appointment()

@api_bp.route('/appointment/getall', methods=['GET'])
@admin_required
def get_all_appointments():
    return appointment_controller.get_all_appointments()

@api_bp.route('/appointment/update/<int:appointment_id>', methods=['PUT'])
@admin_required
def update_appointment_status(appointment_id):
    return appointment_controller.update_appointment_status(appointment_id)

@api_bp.route('/appointment/delete/<int:appointment_id>', methods=['DELETE'])
@admin_required
def delete_appointment(appointment_id):
    return appointment_controller.delete_appointment(appointment_id)


# --- Message Endpoints ---
@api_bp.route('/message/send', methods=['POST'])
def send_message():
    return message_controller.send_message()

@api_bp.route('/message/getall', methods=['GET'])
@admin_required
def get_all_messages():
    return message_controller.get_all_messages()
