"""
Chat API route.
Forwards the user's message (plus recent history) to Gemini and returns the reply,
both raw and rendered to HTML.
"""

from fastapi import APIRouter, Depends

from app.dependencies import get_gemini_client
from app.errors import EmptyMessageError
from app.models.chat import ChatErrorResponse, ChatReply, ChatRequest
from app.services.gemini_client import GeminiClient
from app.utils.app_logger import logger
from app.utils.markdown import markdown_to_html

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={400: {"model": ChatErrorResponse}, 500: {"model": ChatErrorResponse}},
)
def chat(
    chat_request: ChatRequest,
    client: GeminiClient = Depends(get_gemini_client),
):
    """
    Send a chat message and get the AI reply.

    Errors (missing API key, empty message, provider failures) are raised as
    ChatError and turned into {"error": true, "message": ...} by the app's handler.
    """
    message = chat_request.message
    if not message:
        raise EmptyMessageError()

    logger.chat_requested(message, history_length=len(chat_request.history))

    reply = client.send_message(message, chat_request.history)

    return ChatReply(reply=reply, html=markdown_to_html(reply))
