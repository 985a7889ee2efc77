from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from flask import Flask, request, jsonify, g, current_app
import os
import uuid
from flask_migrate import Migrate
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError # For database errors
from werkzeug.exceptions import HTTPException as WerkzeugHTTPException # Renamed to avoid conflict
from gameconfig_be.exceptions import AppException
from gameconfig_be.error_codes import ErrorCodes
import logging
from pythonjsonlogger.json import JsonFormatter
from marshmallow import ValidationError
from http import HTTPStatus

from .models import db # Relative import
from .config import Config # Relative import
from .routes.game_configs import game_configs_bp

# Custom Logging Filter for Request ID
class RequestIdFilter(logging.Filter):
    def filter(self, record):
        try:
            record.request_id = g.get('request_id', 'N/A')
        except RuntimeError:
            # Outside application context (CLI, startup)
            record.request_id = 'N/A'
        return True

def _error_response(error_code, status_message, details=None, action_button=None):
    return jsonify({
        'request_id': g.get('request_id', 'N/A'),
        'status': False,
        'error_code': error_code,
        'status_message': status_message,
        'details': details if details is not None else {},
        'action_button': action_button
    })

def configure_logging(app):
    if not app.debug and not app.testing:
        handler = logging.StreamHandler()
        formatter = JsonFormatter(
            '%(asctime)s %(levelname)s %(request_id)s %(module)s %(funcName)s %(lineno)d %(message)s'
        )
        handler.setFormatter(formatter)
        handler.addFilter(RequestIdFilter())
        # app.logger ("gameconfig_be.app") and the service/store module loggers
        # all propagate to the package logger
        app.logger.handlers.clear()
        package_logger = logging.getLogger('gameconfig_be')
        package_logger.handlers = [handler]
        package_logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
        package_logger.propagate = False
    else:
        # Basic logging for debug mode if not already configured
        if not app.logger.handlers:
            logging.basicConfig(level=logging.DEBUG)

def register_error_handlers(app):

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        # Malformed request envelope rejected by a marshmallow schema
        current_app.logger.warning(
            f"Request ID: {g.get('request_id', 'N/A')} - Validation error: {e.messages} - Error Code: {ErrorCodes.VALIDATION_ERROR}"
        )
        return _error_response(
            ErrorCodes.VALIDATION_ERROR, 'Input validation failed.', {'errors': e.messages}
        ), HTTPStatus.UNPROCESSABLE_ENTITY

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e):
        current_app.logger.error(
            f"Request ID: {g.get('request_id', 'N/A')} - Database error. Error Code: {ErrorCodes.INTERNAL_SERVER_ERROR}",
            exc_info=True
        )
        return _error_response(
            ErrorCodes.INTERNAL_SERVER_ERROR, 'A database error occurred. Please try again later.'
        ), HTTPStatus.INTERNAL_SERVER_ERROR

    @app.errorhandler(WerkzeugHTTPException)
    def handle_werkzeug_http_exception(e):
        error_code = ErrorCodes.GENERIC_ERROR
        if e.code == 404:
            error_code = ErrorCodes.NOT_FOUND
        elif e.code == 405:
            error_code = ErrorCodes.METHOD_NOT_ALLOWED
        elif e.code >= 500:
            error_code = ErrorCodes.INTERNAL_SERVER_ERROR

        current_app.logger.warning(
            f"Request ID: {g.get('request_id', 'N/A')} - Werkzeug HTTPException: {e.code} - {e.name}: {e.description} - Error Code: {error_code}"
        )
        response = e.get_response()
        response.data = _error_response(error_code, e.name, {'description': e.description}).data
        response.content_type = "application/json"
        return response

    @app.errorhandler(Exception)
    def handle_global_exception(e):
        if isinstance(e, AppException):
            current_app.logger.error(
                f"Request ID: {g.get('request_id', 'N/A')} - AppException: {e.error_code} - {e.status_message} - Details: {e.details}",
                exc_info=True if e.status_code >= 500 else False # Log stack trace for server errors
            )
            return _error_response(e.error_code, e.status_message, e.details, e.action_button), e.status_code

        if isinstance(e, WerkzeugHTTPException):
            return handle_werkzeug_http_exception(e)

        current_app.logger.critical(
            f"Request ID: {g.get('request_id', 'N/A')} - Unhandled Critical Exception. Error Code: {ErrorCodes.INTERNAL_SERVER_ERROR}",
            exc_info=True
        )
        return _error_response(
            ErrorCodes.INTERNAL_SERVER_ERROR,
            'An unexpected internal server error occurred. Please try again later.'
        ), HTTPStatus.INTERNAL_SERVER_ERROR

def create_app(config_class=Config):
    """Application factory."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # --- CORS Setup ---
    allowed_origins = list(getattr(config_class, 'CORS_ORIGINS_LIST', None) or [])
    if app.debug and not allowed_origins:
        allowed_origins = ["http://localhost:8080", "http://127.0.0.1:8080"]

    if allowed_origins:
        CORS(app,
             origins=allowed_origins,
             methods=['GET', 'POST', 'PUT', 'OPTIONS'],
             allow_headers=['Content-Type'],
             max_age=86400)
        app.logger.info(f"CORS configured for origins: {allowed_origins}")
    else:
        app.logger.warning("No CORS origins configured - API will reject cross-origin requests")

    # --- Request ID Middleware ---
    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get('X-Request-ID') or str(uuid.uuid4())

    @app.after_request
    def add_request_id_header(response):
        response.headers['X-Request-ID'] = g.get('request_id', 'N/A')
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response

    # --- Database Setup ---
    db.init_app(app)
    Migrate(app, db, directory=os.path.join(os.path.dirname(os.path.abspath(__file__)), 'migrations'))

    register_error_handlers(app)

    app.register_blueprint(game_configs_bp)

    return app
