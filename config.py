# /config.py
import os
import secrets
from datetime import timedelta
import logging
from logging.handlers import RotatingFileHandler


def _env_flag(name, default='False'):
    return os.environ.get(name, default).lower() in ['true', '1', 't']


class Config:
    """Base configuration, read from the environment once at import time."""
    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or secrets.token_hex(32)

    # Token lifetime doubles as the auth cookie lifetime
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=int(os.environ.get('JWT_EXPIRES_DAYS', 7)))
    AUTH_COOKIE_SECURE = _env_flag('COOKIE_SECURE')
    AUTH_COOKIE_SAMESITE = os.environ.get('COOKIE_SAMESITE', 'Lax')

    # bcrypt only reads 72 bytes; Flask-Bcrypt pre-hashes with SHA-256 so longer passwords work
    BCRYPT_HANDLE_LONG_PASSWORDS = True

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Rate Limiting
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL') or 'memory://'

    # CORS
    ALLOWED_ORIGINS = os.environ.get('ALLOWED_ORIGINS', 'http://localhost:5173,http://localhost:5174').split(',')

    # Cloudinary Configuration
    CLOUDINARY_CLOUD_NAME = os.environ.get('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.environ.get('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.environ.get('CLOUDINARY_API_SECRET')

    PORT = int(os.environ.get('PORT', 4000))

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration"""
        if app.testing:
            return

        if not os.path.exists('logs'):
            os.mkdir('logs')

        if not app.debug:
            file_handler = RotatingFileHandler('logs/app.log', maxBytes=10240000, backupCount=10)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            file_handler.setLevel(logging.INFO)
            app.logger.addHandler(file_handler)
            app.logger.setLevel(logging.INFO)
            app.logger.info('Hospital API startup')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or os.environ.get('DATABASE_URL')

    @staticmethod
    def init_app(app):
        Config.init_app(app)

        if not app.logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s'
            ))
            app.logger.addHandler(console_handler)
        app.logger.setLevel(logging.DEBUG)


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_SECRET_KEY = 'testing-jwt-secret-key-with-enough-bytes'
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)
    BCRYPT_LOG_ROUNDS = 4
    RATELIMIT_ENABLED = False
    AUTH_COOKIE_SECURE = False
    CLOUDINARY_CLOUD_NAME = 'test-cloud'
    CLOUDINARY_API_KEY = 'test-key'
    CLOUDINARY_API_SECRET = 'test-secret'

    @staticmethod
    def init_app(app):
        Config.init_app(app)


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    AUTH_COOKIE_SECURE = True

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        if not os.environ.get('JWT_SECRET_KEY'):
            app.logger.error('JWT_SECRET_KEY not set in production!')
            raise ValueError('JWT_SECRET_KEY must be set in production')

        if not os.environ.get('CLOUDINARY_CLOUD_NAME'):
            app.logger.warning('Cloudinary credentials not set - doctor avatar uploads will fail')


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
