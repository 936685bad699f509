from medscribe.config.settings import config_settings
from medscribe.common.logging_setup import get_logger

logger = get_logger("medscribe.otp")

OTP_KEY_PREFIX = "medscribe:otp"

OTP_LENGTH = 6

OTP_TTL_SECONDS = config_settings.OTP_TTL_SECONDS

OTP_TTL_MS = OTP_TTL_SECONDS * 1000

OTP_MAX_SENDS = config_settings.OTP_MAX_SENDS

OTP_CLEANUP_INTERVAL_SECONDS = config_settings.OTP_CLEANUP_INTERVAL_SECONDS
