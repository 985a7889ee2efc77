class ErrorCodes:
    GENERIC_ERROR = "BE_GEN_000"
    VALIDATION_ERROR = "BE_GEN_001"
    NOT_FOUND = "BE_GEN_004"
    METHOD_NOT_ALLOWED = "BE_GEN_005"
    INTERNAL_SERVER_ERROR = "BE_GEN_500"

    # Game configuration
    GAME_CONFIG_NOT_FOUND = "BE_CFG_404"
    PERSISTENCE_ERROR = "BE_CFG_503"
