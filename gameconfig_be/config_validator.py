"""
Configuration validation and startup checks.

Fail-fast validation of the environment: in production every required
variable must be present, in development missing values fall back to local
defaults with a warning.
"""

import os
import sys
import warnings
import logging
from typing import List, Optional

SUPPORTED_DATABASE_SCHEMES = ('postgresql://', 'postgresql+psycopg2://', 'sqlite://')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
DEV_DATABASE_URL = 'sqlite:///game_config_dev.db'


class ConfigValidationError(Exception):
    """Raised when critical configuration is missing or invalid."""
    pass


class ConfigValidator:
    """Validates application configuration and enforces production requirements."""

    def __init__(self, is_production: bool = None):
        """
        Initialize the configuration validator.

        Args:
            is_production: If None, production is assumed only when FLASK_ENV=production
        """
        if is_production is None:
            is_production = os.getenv('FLASK_ENV', '').lower() == 'production'

        self.is_production = is_production
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate_required_env_var(self, var_name: str, description: str = None) -> Optional[str]:
        """
        Validate that a required environment variable is set.

        Returns:
            The environment variable value if set, None otherwise
        """
        value = os.getenv(var_name)
        if not value:
            desc = description or var_name
            if self.is_production:
                self.errors.append(f"CRITICAL: {desc} ({var_name}) must be set in production environment")
            else:
                self.warnings.append(f"WARNING: {desc} ({var_name}) not set - using development fallback")
        return value

    def validate_database_config(self) -> str:
        """Validate database configuration."""
        database_url = self.validate_required_env_var('DATABASE_URL', 'Database URL')

        if database_url:
            if not database_url.startswith(SUPPORTED_DATABASE_SCHEMES):
                self.errors.append("CRITICAL: DATABASE_URL must use a supported database driver")
            return database_url

        return DEV_DATABASE_URL

    def validate_cors_config(self) -> List[str]:
        """Validate CORS configuration."""
        cors_origins = os.getenv('CORS_ORIGINS', '')

        if not cors_origins and self.is_production:
            self.errors.append(
                "CRITICAL: CORS_ORIGINS must be set in production to specify allowed frontend domains"
            )
            return []

        origins = [origin.strip() for origin in cors_origins.split(',') if origin.strip()]
        for origin in origins:
            if origin != '*' and not origin.startswith(('http://', 'https://')):
                self.warnings.append(f"CORS origin '{origin}' should include protocol (http:// or https://)")
        return origins

    def validate_log_level(self) -> str:
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        if log_level not in LOG_LEVELS:
            self.warnings.append(f"Unknown LOG_LEVEL '{log_level}', falling back to INFO")
            return 'INFO'
        return log_level

    def validate_all(self) -> dict:
        """
        Validate all configuration settings.

        Returns:
            Dictionary containing validated configuration values

        Raises:
            ConfigValidationError: If critical configuration is missing in production
        """
        config = {}

        try:
            config['SQLALCHEMY_DATABASE_URI'] = self.validate_database_config()
            config['CORS_ORIGINS'] = self.validate_cors_config()
            config['LOG_LEVEL'] = self.validate_log_level()
            config['DEBUG'] = os.getenv('FLASK_DEBUG', 'False').lower() in ('true', '1', 't')

            if self.is_production and config['DEBUG']:
                self.errors.append("CRITICAL: DEBUG mode must be disabled in production (set FLASK_DEBUG=False)")

            if self.errors:
                error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in self.errors)
                if self.warnings:
                    error_msg += "\n\nWarnings:\n" + "\n".join(f"  - {warning}" for warning in self.warnings)
                raise ConfigValidationError(error_msg)

            for warning in self.warnings:
                warnings.warn(warning, UserWarning)

            return config

        except Exception as e:
            if isinstance(e, ConfigValidationError):
                raise
            else:
                raise ConfigValidationError(f"Configuration validation error: {str(e)}") from e


def validate_production_config() -> dict:
    """
    Validate configuration with fail-fast behavior.

    Raises:
        SystemExit: If validation fails during startup
    """
    try:
        validator = ConfigValidator()
        return validator.validate_all()
    except ConfigValidationError as e:
        logging.getLogger(__name__).critical(f"Configuration validation failed, startup aborted:\n{e}")
        print(str(e), file=sys.stderr)
        sys.exit(1)
