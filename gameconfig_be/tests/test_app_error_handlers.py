import logging

import pytest
from flask import jsonify
from marshmallow import ValidationError
from pythonjsonlogger.json import JsonFormatter
from sqlalchemy.exc import OperationalError

from gameconfig_be.app import create_app, db
from gameconfig_be.config import TestingConfig
from gameconfig_be.exceptions import (
    AppException,
    ValidationException,
    NotFoundException,
    PersistenceException,
)
from gameconfig_be.error_codes import ErrorCodes


class TestAppErrorHandlers:

    @pytest.fixture(scope="class")
    def app(self):
        """Create and configure a new app instance for each test class."""
        app = create_app(TestingConfig)

        # Define mock routes directly on the app for testing
        @app.route('/test/app_exception')
        def route_app_exception():
            raise AppException(
                error_code="TEST_APP_EXC",
                status_message="This is an AppException",
                status_code=450,
                details={"info": "some app details"},
                action_button={"text": "Retry", "actionType": "RETRY"}
            )

        @app.route('/test/validation_exception')
        def route_validation_exception():
            raise ValidationException('reelOne.L1', 'invalid-weight')

        @app.route('/test/not_found_exception')
        def route_not_found_exception():
            raise NotFoundException('cfg-123')

        @app.route('/test/persistence_exception')
        def route_persistence_exception():
            raise PersistenceException(ConnectionError("store unreachable"))

        @app.route('/test/database_error')
        def route_database_error():
            raise OperationalError("SELECT 1", {}, Exception("db down"))

        @app.route('/test/unhandled_exception')
        def route_unhandled_exception():
            raise ValueError("A generic unhandled error")

        @app.route('/test/method_not_allowed', methods=['GET'])
        def route_method_not_allowed():
            return jsonify(status=True)

        @app.route('/test/marshmallow_validation_error', methods=['POST'])
        def route_marshmallow_error():
            raise ValidationError({"test_field": ["Marshmallow schema validation failed"]})

        app_context = app.app_context()
        app_context.push()
        db.create_all()

        yield app

        db.session.remove()
        db.drop_all()
        app_context.pop()

    @pytest.fixture()
    def client(self, app):
        return app.test_client()

    def test_app_exception_handler(self, client, caplog):
        response = client.get('/test/app_exception')
        assert response.status_code == 450
        json_data = response.get_json()
        assert json_data['status'] is False
        assert json_data['error_code'] == "TEST_APP_EXC"
        assert json_data['status_message'] == "This is an AppException"
        assert json_data['details'] == {"info": "some app details"}
        assert json_data['action_button'] == {"text": "Retry", "actionType": "RETRY"}
        assert json_data['request_id'] == response.headers['X-Request-ID']
        assert any(rec.levelname == 'ERROR' and 'TEST_APP_EXC' in rec.message for rec in caplog.records)

    def test_request_id_header_is_echoed(self, client):
        response = client.get('/test/not_found_exception', headers={'X-Request-ID': 'req-42'})
        assert response.headers['X-Request-ID'] == 'req-42'
        assert response.get_json()['request_id'] == 'req-42'

    def test_validation_exception_handler(self, client):
        response = client.get('/test/validation_exception')
        assert response.status_code == 422
        json_data = response.get_json()
        assert json_data['error_code'] == ErrorCodes.VALIDATION_ERROR
        assert json_data['details'] == {'field': 'reelOne.L1', 'reason': 'invalid-weight'}

    def test_not_found_exception_handler(self, client):
        response = client.get('/test/not_found_exception')
        assert response.status_code == 404
        json_data = response.get_json()
        assert json_data['error_code'] == ErrorCodes.GAME_CONFIG_NOT_FOUND
        assert json_data['details'] == {'id': 'cfg-123'}

    def test_persistence_exception_handler(self, client, caplog):
        response = client.get('/test/persistence_exception')
        assert response.status_code == 503
        json_data = response.get_json()
        assert json_data['error_code'] == ErrorCodes.PERSISTENCE_ERROR
        assert json_data['details'] == {'cause': 'ConnectionError'}
        assert any(rec.levelname == 'ERROR' and ErrorCodes.PERSISTENCE_ERROR in rec.message for rec in caplog.records)

    def test_raw_database_error_handler(self, client):
        response = client.get('/test/database_error')
        assert response.status_code == 500
        json_data = response.get_json()
        assert json_data['error_code'] == ErrorCodes.INTERNAL_SERVER_ERROR
        assert json_data['status_message'] == 'A database error occurred. Please try again later.'

    def test_werkzeug_not_found_handler(self, client, caplog):
        response = client.get('/this_route_does_not_exist')
        assert response.status_code == 404
        json_data = response.get_json()
        assert json_data['error_code'] == ErrorCodes.NOT_FOUND
        assert json_data['status_message'] == "Not Found"
        assert any(rec.levelname == 'WARNING' and ErrorCodes.NOT_FOUND in rec.message for rec in caplog.records)

    def test_method_not_allowed_handler(self, client):
        response = client.post('/test/method_not_allowed')
        assert response.status_code == 405
        json_data = response.get_json()
        assert json_data['error_code'] == ErrorCodes.METHOD_NOT_ALLOWED
        assert json_data['status_message'] == "Method Not Allowed"

    def test_marshmallow_validation_error_handler(self, client):
        response = client.post('/test/marshmallow_validation_error', json={})
        assert response.status_code == 422
        json_data = response.get_json()
        assert json_data['error_code'] == ErrorCodes.VALIDATION_ERROR
        assert json_data['status_message'] == "Input validation failed."
        assert json_data['details']['errors'] == {"test_field": ["Marshmallow schema validation failed"]}

    def test_unhandled_exception_handler(self, client, caplog):
        response = client.get('/test/unhandled_exception')
        assert response.status_code == 500
        json_data = response.get_json()
        assert json_data['error_code'] == ErrorCodes.INTERNAL_SERVER_ERROR
        assert json_data['status_message'] == 'An unexpected internal server error occurred. Please try again later.'
        assert any(rec.levelname == 'CRITICAL' and ErrorCodes.INTERNAL_SERVER_ERROR in rec.message for rec in caplog.records)


class ProductionLikeConfig(TestingConfig):
    TESTING = False
    DEBUG = False
    LOG_LEVEL = 'WARNING'


def test_non_debug_app_logs_json_to_package_logger():
    package_logger = logging.getLogger('gameconfig_be')
    saved = (package_logger.handlers[:], package_logger.level, package_logger.propagate)
    try:
        create_app(ProductionLikeConfig)
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)
        assert package_logger.level == logging.WARNING
        assert package_logger.propagate is False
    finally:
        package_logger.handlers, package_logger.level, package_logger.propagate = saved
