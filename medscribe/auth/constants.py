from medscribe.common.logging_setup import get_logger

logger = get_logger("medscribe.auth")

PASSWORD_MIN_LENGTH = 8

RESET_REQUESTED_MESSAGE = "If an account with this email exists, you will receive a password reset link shortly."
