from flask import request, jsonify, current_app
from hms.extensions import db
from hms.models.user_models import Role
from hms.utils.cloudinary_util import cloudinary_manager
from hms.utils.errors import ValidationError, UpstreamFailure
from hms.utils.request_util import get_request_data
from .auth_controller import build_user, USER_FIELDS

DOCTOR_FIELDS = USER_FIELDS + ['doctorDepartment']


def add_new_doctor():
    """
    Registers a doctor together with an avatar image.

    The record is fully validated before the upload, and only written after
    the upload succeeds.
    """
    avatar = request.files.get('docAvatar')
    if not avatar or avatar.filename == '':
        raise ValidationError('Doctor Avatar Required!')
    if not cloudinary_manager.is_allowed_avatar(avatar):
        raise ValidationError('File Format Not Supported!')

    data = get_request_data()
    doctor = build_user(
        data,
        Role.DOCTOR,
        required=DOCTOR_FIELDS,
        duplicate_message='Doctor With This Email Already Exists!',
        doctor_department=data.get('doctorDepartment')
    )

    upload = cloudinary_manager.upload_doctor_avatar(avatar, doctor.email)
    if not upload['success']:
        raise UpstreamFailure('Failed To Upload Doctor Avatar To Cloudinary')

    doctor.avatar_public_id = upload['public_id']
    doctor.avatar_url = upload['url']
    db.session.add(doctor)
    db.session.commit()

    current_app.logger.info(f"Doctor registered: user_id={doctor.id}, department={doctor.doctor_department}")
    return jsonify({
        'success': True,
        'message': 'New Doctor Registered',
        'doctor': doctor.to_dict()
    }), 200
