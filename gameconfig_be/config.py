"""
Configuration module with fail-fast validation.

Values are validated once at import; production environments must provide
all required environment variables.
"""
from gameconfig_be.config_validator import validate_production_config

class Config:
    """Application configuration backed by the validated environment."""

    _validated_config = validate_production_config()

    # Database Configuration
    SQLALCHEMY_DATABASE_URI = _validated_config['SQLALCHEMY_DATABASE_URI']
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # CORS Configuration
    CORS_ORIGINS_LIST = _validated_config['CORS_ORIGINS']

    # Logging
    LOG_LEVEL = _validated_config['LOG_LEVEL']

    # Flask Debug Mode
    DEBUG = _validated_config['DEBUG']


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = 'sqlite://' # In-memory; Flask-SQLAlchemy keeps a single shared connection
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
