from flask import jsonify, g
from hms.models.user_models import User, Role


def get_user_details():
    """
    Get details for the currently authenticated user.
    """
    return jsonify({'success': True, 'user': g.current_user.to_dict()}), 200


def get_all_doctors():
    doctors = User.query.filter_by(role=Role.DOCTOR).order_by(User.id).all()
    return jsonify({'success': True, 'doctors': [doctor.to_dict() for doctor in doctors]}), 200
