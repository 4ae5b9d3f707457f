"""
Application logging for Gemini Chat.
Tracks application events, model calls and errors.
"""

import logging
import os
from datetime import datetime
from typing import Optional

from app.config import settings


class AppLogger:
    """Application logger for tracking system events"""

    _instance = None
    _logger = None

    def __new__(cls):
        """Singleton pattern to ensure one logger instance"""
        if cls._instance is None:
            cls._instance = super(AppLogger, cls).__new__(cls)
            cls._instance._initialize_logger()
        return cls._instance

    def _initialize_logger(self):
        """Set up the application logger"""
        self._logger = logging.getLogger("gemini_chat")

        level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        self._logger.setLevel(level)

        # Prevent duplicate handlers if reinitialized
        if self._logger.handlers:
            return

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)

        if settings.LOG_TO_FILE:
            log_filename = os.path.join(
                settings.LOG_DIRECTORY, f"app_{datetime.now().strftime('%Y%m%d')}.log"
            )
            try:
                os.makedirs(settings.LOG_DIRECTORY, exist_ok=True)
                file_handler = logging.FileHandler(log_filename)
            except OSError as e:
                # Permissions or bad path: keep console logging only
                self._logger.warning(f"File logging disabled: {e}")
            else:
                file_handler.setLevel(level)
                file_handler.setFormatter(formatter)
                self._logger.addHandler(file_handler)

    def info(self, message: str, **kwargs):
        """Log info message with optional context"""
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context"""
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context"""
        self._log_with_context(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context"""
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def _log_with_context(self, level: int, message: str, **kwargs):
        """Log message with additional context fields"""
        if kwargs:
            context_str = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            full_message = f"{message} | {context_str}"
        else:
            full_message = message

        self._logger.log(level, full_message)  # type: ignore

    def app_started(self):
        """Log application startup"""
        self.info(
            "Application started",
            environment=settings.DEPLOYMENT_ENV,
            model=settings.MODEL_NAME,
            api_key_configured=settings.HAS_API_KEY,
        )

    def chat_requested(self, message: str, history_length: int = 0):
        """Log an incoming chat message"""
        self.info(
            "Chat requested",
            chars=len(message),
            history=history_length,
        )

    def chat_replied(self, reply: str, response_time_ms: Optional[float] = None):
        """Log a successful model reply"""
        self.info(
            "Chat replied",
            chars=len(reply),
            response_time_ms=response_time_ms,
        )

    def api_key_missing(self):
        self.error("GEMINI_API_KEY is not configured")

    def prompt_blocked(self, reason: str):
        self.warning("Prompt blocked by model", reason=reason)

    def rate_limited(self, wait_time: float, attempt: int, max_retries: int):
        """Log a 429 from the model provider before retrying"""
        self.warning(
            f"Rate limit hit (429), retrying in {wait_time:.1f}s",
            attempt=f"{attempt}/{max_retries}",
        )

    def model_error(self, error_message: str):
        """Log model/API errors"""
        self.error(f"Model error: {error_message}", model=settings.MODEL_NAME)

    def config_validation_failed(self, error: str):
        """Log configuration validation failure"""
        self.error(f"Configuration validation failed: {error}")


# Global logger instance
logger = AppLogger()
