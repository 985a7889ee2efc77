from gameconfig_be.error_codes import ErrorCodes

class AppException(Exception):
    def __init__(self, error_code, status_message, status_code, details=None, action_button=None):
        super().__init__(status_message)
        self.error_code = error_code
        self.status_message = status_message
        self.status_code = status_code
        self.details = details if details is not None else {}
        self.action_button = action_button if action_button is not None else {}

class ValidationException(AppException):
    """Client input defect. Always raised before any persistence call."""
    def __init__(self, field, reason, status_message=None, action_button=None):
        super().__init__(
            error_code=ErrorCodes.VALIDATION_ERROR,
            status_message=status_message or f"Invalid value for '{field}': {reason}",
            status_code=422,
            details={'field': field, 'reason': reason},
            action_button=action_button
        )
        self.field = field
        self.reason = reason

class NotFoundException(AppException):
    def __init__(self, config_id=None, status_message=None, error_code=ErrorCodes.GAME_CONFIG_NOT_FOUND, action_button=None):
        super().__init__(
            error_code=error_code,
            status_message=status_message or f"Game config '{config_id}' not found",
            status_code=404,
            details={'id': config_id} if config_id is not None else {},
            action_button=action_button
        )
        self.config_id = config_id

class PersistenceException(AppException):
    """The storage collaborator failed. Never retried internally."""
    def __init__(self, cause, status_message="Game config could not be stored", action_button=None):
        super().__init__(
            error_code=ErrorCodes.PERSISTENCE_ERROR,
            status_message=status_message,
            status_code=503,
            details={'cause': type(cause).__name__},
            action_button=action_button
        )
        self.cause = cause
