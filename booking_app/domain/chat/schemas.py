"""Chat schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_required_text


class ChatMessageCreate(BaseModel):
    sessionId: str
    message: str
    isFromUser: bool

    @field_validator("sessionId", "message")
    @classmethod
    def check_text(cls, v):
        return validate_required_text(v)


class ChatMessageResponse(BaseModel):
    id: int
    sessionId: str
    message: str
    isFromUser: bool
    timestamp: Optional[datetime] = None

    @classmethod
    def from_model(cls, msg) -> "ChatMessageResponse":
        return cls(
            id=msg.id,
            sessionId=msg.session_id,
            message=msg.message,
            isFromUser=msg.is_from_user,
            timestamp=msg.timestamp,
        )
