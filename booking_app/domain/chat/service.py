"""Chat service"""

from sqlalchemy.orm import Session

from ...models import ChatMessage
from .repository import ChatRepository
from .schemas import ChatMessageCreate


class ChatService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ChatRepository()

    def get_messages(self, session_id: str) -> list[ChatMessage]:
        return self.repo.get_messages(self.db, session_id)

    def create_message(self, data: ChatMessageCreate) -> ChatMessage:
        return self.repo.create_message(
            self.db,
            session_id=data.sessionId,
            message=data.message,
            is_from_user=data.isFromUser,
        )
