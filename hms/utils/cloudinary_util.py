# /hms/utils/cloudinary_util.py
import uuid
import cloudinary
import cloudinary.uploader
from flask import current_app
from werkzeug.utils import secure_filename

ALLOWED_AVATAR_MIMETYPES = {'image/png', 'image/jpeg', 'image/webp'}


class CloudinaryManager:
    """Utility class for handling Cloudinary operations."""

    def __init__(self, app=None):
        if app:
            self.init_app(app)

    def init_app(self, app):
        """Initialize Cloudinary with app config."""
        cloudinary.config(
            cloud_name=app.config.get('CLOUDINARY_CLOUD_NAME'),
            api_key=app.config.get('CLOUDINARY_API_KEY'),
            api_secret=app.config.get('CLOUDINARY_API_SECRET'),
            secure=True
        )

    @staticmethod
    def is_allowed_avatar(file):
        return bool(file) and file.mimetype in ALLOWED_AVATAR_MIMETYPES

    def upload_doctor_avatar(self, file, email):
        """
        Upload a doctor's avatar to Cloudinary.

        Args:
            file: The uploaded file (werkzeug FileStorage)
            email: Email of the doctor being created, used to tag the upload

        Returns:
            dict: Contains 'success' and either 'url' and 'public_id', or 'error'
        """
        if not file or file.filename == '':
            return {'success': False, 'error': 'No file provided'}

        try:
            unique_filename = secure_filename(f"doctor_{uuid.uuid4().hex}")
            upload_result = cloudinary.uploader.upload(
                file,
                public_id=unique_filename,
                folder="doctor_avatars",
                tags=[f"doctor_{secure_filename(email)}"]
            )
        except Exception as e:
            current_app.logger.error(f"Cloudinary upload error: {str(e)}")
            return {'success': False, 'error': 'Failed to upload image'}

        if not upload_result or upload_result.get('error'):
            current_app.logger.error(f"Cloudinary upload error: {upload_result and upload_result.get('error')}")
            return {'success': False, 'error': 'Failed to upload image'}

        return {
            'success': True,
            'url': upload_result.get('secure_url'),
            'public_id': upload_result.get('public_id')
        }


# Create a single instance
cloudinary_manager = CloudinaryManager()
