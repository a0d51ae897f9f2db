"""Chat repository - Database operations for chat messages"""

from sqlalchemy.orm import Session

from ...models import ChatMessage


class ChatRepository:
    """Repository for chat message rows"""

    @staticmethod
    def get_messages(db: Session, session_id: str) -> list[ChatMessage]:
        """Messages of one session, oldest first"""
        return (
            db.query(ChatMessage)
            .filter(ChatMessage.session_id == session_id)
            .order_by(ChatMessage.timestamp, ChatMessage.id)
            .all()
        )

    @staticmethod
    def create_message(db: Session, **message_data) -> ChatMessage:
        message = ChatMessage(**message_data)
        db.add(message)
        db.commit()
        db.refresh(message)
        return message
