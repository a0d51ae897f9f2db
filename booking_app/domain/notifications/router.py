"""SMS notification router - admin view of the SMS log"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...config import DEFAULT_PAGE_LIMIT
from ...database import get_db
from .schemas import SmsNotificationResponse, SmsStatusUpdate
from .service import NotificationService

router = APIRouter(prefix="/api/sms-notifications", tags=["SMS Notifications"])


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    """Dependency injection for NotificationService"""
    return NotificationService(db)


@router.get("", response_model=list[SmsNotificationResponse])
async def list_sms_notifications(
    appointmentId: Optional[int] = Query(None),
    status: Optional[str] = Query(None),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: NotificationService = Depends(get_notification_service),
):
    rows = service.list_notifications(appointmentId, status, limit, offset)
    return [SmsNotificationResponse.from_model(s) for s in rows]


@router.put("/{sms_id}", response_model=SmsNotificationResponse)
async def update_sms_notification(
    sms_id: int,
    data: SmsStatusUpdate,
    service: NotificationService = Depends(get_notification_service),
):
    """Record a delivery outcome for an SMS row"""
    sms = service.update_sms_status(sms_id, data.status, data.sentAt)
    return SmsNotificationResponse.from_model(sms)
