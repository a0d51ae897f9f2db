"""Chat router - live chat widget endpoints"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import ChatMessageCreate, ChatMessageResponse
from .service import ChatService

router = APIRouter(prefix="/api/chat", tags=["Chat"])


def get_chat_service(db: Session = Depends(get_db)) -> ChatService:
    """Dependency injection for ChatService"""
    return ChatService(db)


# The widget posts to /messages; both paths are accepted
@router.post("", response_model=ChatMessageResponse, status_code=201)
@router.post("/messages", response_model=ChatMessageResponse, status_code=201)
async def create_chat_message(
    data: ChatMessageCreate,
    service: ChatService = Depends(get_chat_service),
):
    return ChatMessageResponse.from_model(service.create_message(data))


@router.get("/{session_id}", response_model=list[ChatMessageResponse])
@router.get("/{session_id}/messages", response_model=list[ChatMessageResponse])
async def get_chat_messages(
    session_id: str,
    service: ChatService = Depends(get_chat_service),
):
    """Messages of a session in chronological order"""
    return [ChatMessageResponse.from_model(m) for m in service.get_messages(session_id)]
