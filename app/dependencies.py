"""
Dependency injection functions for FastAPI routes.
"""

from app.errors import ApiKeyMissingError
from app.services.gemini_client import GeminiClient
from app.utils.app_logger import logger


def get_gemini_client() -> GeminiClient:
    """
    Dependency: Get a Gemini client for the current request.

    Returns:
        GeminiClient: Client built from settings

    Raises:
        ApiKeyMissingError: if GEMINI_API_KEY is not configured
    """
    try:
        return GeminiClient()
    except ApiKeyMissingError:
        logger.api_key_missing()
        raise
