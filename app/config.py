"""
Configuration for the Gemini Chat front-end.
Loads settings from environment variables (and a local .env file) with sensible defaults.
"""

import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables from .env file (local development only)
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with validation"""

    # Deployment Environment
    DEPLOYMENT_ENV: str = os.getenv("DEPLOYMENT_ENV", "local")  # local or cloud

    @property
    def IS_CLOUD(self) -> bool:
        return self.DEPLOYMENT_ENV == "cloud"

    # Gemini API Settings (private, server side only)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")

    @property
    def HAS_API_KEY(self) -> bool:
        return bool(self.GEMINI_API_KEY)

    # Model Settings
    MODEL_NAME: str = os.getenv("MODEL_NAME", "gemini-2.0-flash-001")
    TEMPERATURE: float = float(os.getenv("TEMPERATURE", "0.9"))
    MAX_OUTPUT_TOKENS: int = int(os.getenv("MAX_OUTPUT_TOKENS", "1500"))

    # Chat Settings
    MAX_HISTORY_ENTRIES: int = int(os.getenv("MAX_HISTORY_ENTRIES", "9"))
    MAX_RETRIES: int = int(os.getenv("MAX_RETRIES", "3"))

    # Public base URL the page posts to (empty = same origin)
    API_URL: str = os.getenv("API_URL", "")

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    LOG_DIRECTORY: str = os.getenv("LOG_DIRECTORY", "./logs")

    # ===== FastAPI Settings =====
    APP_NAME: str = "Gemini Chat"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    def validate_config(self) -> bool:
        """Validate configuration values (the API key is checked per request)"""
        if not self.MODEL_NAME:
            raise ValueError("MODEL_NAME must be set")
        if not 0.0 <= self.TEMPERATURE <= 2.0:
            raise ValueError("TEMPERATURE must be between 0.0 and 2.0")
        if self.MAX_OUTPUT_TOKENS <= 0:
            raise ValueError("MAX_OUTPUT_TOKENS must be positive")
        if self.MAX_HISTORY_ENTRIES < 0:
            raise ValueError("MAX_HISTORY_ENTRIES cannot be negative")
        if self.MAX_RETRIES < 1:
            raise ValueError("MAX_RETRIES must be at least 1")
        if self.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}"
            )

        return True

    def get_model_display_name(self) -> str:
        """Get human-readable model name"""
        model_map = {
            "gemini-2.0-flash-001": "Gemini 2.0 Flash",
            "gemini-2.5-flash": "Gemini 2.5 Flash",
            "gemini-1.5-pro": "Gemini 1.5 Pro",
            "gemini-1.5-flash": "Gemini 1.5 Flash",
        }
        return model_map.get(self.MODEL_NAME, self.MODEL_NAME)

    def get_deployment_info(self) -> dict:
        """Get deployment environment info for debugging (never includes the key)"""
        return {
            "environment": self.DEPLOYMENT_ENV,
            "is_cloud": self.IS_CLOUD,
            "model": self.MODEL_NAME,
            "api_key_configured": self.HAS_API_KEY,
            "api_url": self.API_URL,
            "max_history_entries": self.MAX_HISTORY_ENTRIES,
            "debug": self.DEBUG,
        }

    class Config:
        case_sensitive = True


# Global settings instance (validated at app startup)
settings = Settings()
