"""
Chat errors and their HTTP status codes.
Any ChatError is returned to the page as {"error": true, "message": ...}.
"""

DEFAULT_MODEL_ERROR = "Failed to get a response from the AI."


class ChatError(Exception):
    """Base error for the chat endpoint"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiKeyMissingError(ChatError):
    status_code = 500

    def __init__(self):
        super().__init__(
            "API key not configured. Please set GEMINI_API_KEY in your .env file."
        )


class EmptyMessageError(ChatError):
    status_code = 400

    def __init__(self):
        super().__init__("No message provided in the request.")


class ModelResponseError(ChatError):
    """The model provider failed or returned nothing usable"""

    status_code = 500


class PromptBlockedError(ModelResponseError):
    """The provider refused the prompt (e.g. safety settings)"""

    def __init__(self, reason: str):
        super().__init__(
            f"Your message was blocked. Reason: {reason}. Please rephrase your message."
        )
        self.reason = reason
