from medscribe.common.logging_setup import get_logger

logger = get_logger("medscribe.notifications")

BRAND_NAME = "MedScribe"
