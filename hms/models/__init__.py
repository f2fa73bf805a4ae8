from hms.models.user_models import User, Role, Gender
from hms.models.appointment_models import Appointment, AppointmentStatus
from hms.models.message_models import Message
