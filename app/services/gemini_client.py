"""
Gemini client for chat replies using the google-genai SDK.
Authenticates with an API key (Gemini Developer API) and sends one
generate_content call per chat message, with the prior history as context.
"""

import random
import time
from typing import List, Optional

from google import genai
from google.api_core import exceptions
from google.genai import errors, types

from app.config import settings
from app.errors import (
    DEFAULT_MODEL_ERROR,
    ApiKeyMissingError,
    ModelResponseError,
    PromptBlockedError,
)
from app.models.chat import HistoryEntry
from app.utils.app_logger import logger


def _is_rate_limit(error: Exception) -> bool:
    """True for 429 errors from either google-api-core or google-genai"""
    if isinstance(error, exceptions.ResourceExhausted):
        return True
    return isinstance(error, errors.APIError) and error.code == 429


class GeminiClient:
    """Client for sending chat messages to a Gemini model"""

    def __init__(self, api_key: Optional[str] = None, client=None):
        """
        Initialize the Gemini client.

        Args:
            api_key: API key, defaults to settings.GEMINI_API_KEY
            client: Optional pre-built genai.Client (used by tests)

        Raises:
            ApiKeyMissingError: if no API key is configured
        """
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        if not self.api_key:
            raise ApiKeyMissingError()

        self.client = client or genai.Client(api_key=self.api_key)
        self.model_name = settings.MODEL_NAME

    def _call_with_backoff(self, func, *args, max_retries=None, **kwargs):
        """
        Call a function with exponential backoff on 429 errors.

        Waits 2^attempt seconds plus up to one second of jitter between attempts.
        Non-429 errors are raised immediately.
        """
        max_retries = max_retries or settings.MAX_RETRIES

        for attempt in range(max_retries):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if not _is_rate_limit(e) or attempt == max_retries - 1:
                    raise

                wait_time = 2**attempt + random.uniform(0, 1)
                logger.rate_limited(wait_time, attempt + 1, max_retries)
                time.sleep(wait_time)

    def _build_contents(self, message: str, history: List[HistoryEntry]) -> List[dict]:
        """Most recent history entries followed by the new user message"""
        limit = settings.MAX_HISTORY_ENTRIES
        recent = history[-limit:] if limit else []

        contents = [entry.to_content() for entry in recent]
        contents.append({"role": "user", "parts": [{"text": message}]})
        return contents

    def send_message(self, message: str, history: Optional[List[HistoryEntry]] = None) -> str:
        """
        Send a message and return the model's text reply.

        Args:
            message: New user message
            history: Prior messages, oldest first

        Returns:
            str: Reply text (markdown)

        Raises:
            PromptBlockedError: if the provider blocked the prompt
            ModelResponseError: for any other provider failure
        """
        contents = self._build_contents(message, history or [])
        config = types.GenerateContentConfig(
            temperature=settings.TEMPERATURE,
            max_output_tokens=settings.MAX_OUTPUT_TOKENS,
        )

        start_time = time.time()
        try:
            response = self._call_with_backoff(
                self.client.models.generate_content,
                model=self.model_name,
                contents=contents,
                config=config,
            )
        except Exception as e:
            logger.model_error(str(e))
            raise ModelResponseError(str(e) or DEFAULT_MODEL_ERROR) from e
        response_time_ms = round((time.time() - start_time) * 1000, 2)

        if response is None:
            logger.model_error("No response received from model")
            raise ModelResponseError(DEFAULT_MODEL_ERROR)

        prompt_feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(prompt_feedback, "block_reason", None)
        if block_reason:
            reason = getattr(block_reason, "value", block_reason)
            logger.prompt_blocked(reason)
            raise PromptBlockedError(reason)

        if not response.text:
            logger.model_error("Empty response from model")
            raise ModelResponseError(DEFAULT_MODEL_ERROR)

        logger.chat_replied(response.text, response_time_ms)
        return response.text
