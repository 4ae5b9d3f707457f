"""
Chat request and response models.
History entries use the Gemini content shape: {role, parts: [{text}]}.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    """Chat role enumeration (Gemini naming)"""

    USER = "user"
    MODEL = "model"


class Part(BaseModel):
    """Single text part of a message"""

    text: str = Field(default="", description="Message text")


class HistoryEntry(BaseModel):
    """One prior message in the conversation"""

    role: ChatRole = Field(..., description="Who sent the message")
    parts: List[Part] = Field(default_factory=list)

    def to_content(self) -> dict:
        """Convert to the dict form accepted as Gemini contents"""
        return {
            "role": self.role.value,
            "parts": [{"text": part.text} for part in self.parts],
        }


class ChatRequest(BaseModel):
    """Body of POST /api/chat"""

    # Optional so a missing message maps to our 400 instead of a 422
    message: Optional[str] = Field(None, description="New user message")
    history: List[HistoryEntry] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "message": "And in Python?",
                "history": [
                    {"role": "user", "parts": [{"text": "How do I reverse a list?"}]},
                    {"role": "model", "parts": [{"text": "Use `reverse()`."}]},
                ],
            }
        }


class ChatReply(BaseModel):
    """Successful chat response"""

    reply: str = Field(..., description="Raw model reply (markdown)")
    html: str = Field(..., description="Reply rendered to HTML")


class ChatErrorResponse(BaseModel):
    """Error response body"""

    error: bool = True
    message: str
