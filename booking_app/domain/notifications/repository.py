"""SMS notification repository - Database operations for the SMS log"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ...models import SmsNotification


class NotificationRepository:
    """Repository for SMS notification rows"""

    @staticmethod
    def get_notifications(
        db: Session,
        appointment_id: Optional[int] = None,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[SmsNotification]:
        query = db.query(SmsNotification)
        if appointment_id is not None:
            query = query.filter(SmsNotification.appointment_id == appointment_id)
        if status:
            query = query.filter(SmsNotification.status == status)
        return (
            query.order_by(SmsNotification.created_at.desc(), SmsNotification.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_notification_by_id(db: Session, sms_id: int) -> Optional[SmsNotification]:
        return db.query(SmsNotification).filter(SmsNotification.id == sms_id).first()

    @staticmethod
    def create_notification(db: Session, commit: bool = True, **sms_data) -> SmsNotification:
        sms = SmsNotification(**sms_data)
        db.add(sms)
        if commit:
            db.commit()
            db.refresh(sms)
        else:
            db.flush()
        return sms

    @staticmethod
    def update_status(
        db: Session, sms: SmsNotification, status: str, sent_at: Optional[datetime]
    ) -> SmsNotification:
        sms.status = status
        sms.sent_at = sent_at
        db.commit()
        db.refresh(sms)
        return sms
