import os
import sys
from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from hms.extensions import db, bcrypt, migrate, jwt, limiter, cors
from hms.utils.cloudinary_util import cloudinary_manager
from hms.utils.error_handlers import register_error_handlers
from hms.commands import register_commands
from config import config


def check_database_connection(app):
    """Exits the process when the database cannot be reached at startup."""
    with app.app_context():
        try:
            db.session.execute(text('SELECT 1'))
        except SQLAlchemyError as e:
            app.logger.critical(f"Error connecting to the database: {e}")
            sys.exit(1)
        finally:
            db.session.remove()
    app.logger.info("Connected to the database successfully.")


def create_app(config_name=None):
    config_name = config_name or os.getenv('FLASK_CONFIG', 'default')
    config_class = config[config_name]

    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        raise RuntimeError('DATABASE_URL is not defined in the environment variables.')

    # Initialize extensions
    db.init_app(app)
    bcrypt.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    limiter.init_app(app)
    cors.init_app(
        app,
        origins=app.config['ALLOWED_ORIGINS'],
        supports_credentials=True,
        allow_headers=['Content-Type', 'Authorization', 'X-Requested-With'],
        methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    )

    # Initialize custom utilities
    cloudinary_manager.init_app(app)

    config_class.init_app(app)

    # Register blueprints
    from hms.api import api_bp
    app.register_blueprint(api_bp, url_prefix='/api/v1')

    # Register error handlers and commands
    register_error_handlers(app)
    register_commands(app)

    # Both `python run.py` and `flask run` go through here
    if not app.testing:
        check_database_connection(app)

    return app
