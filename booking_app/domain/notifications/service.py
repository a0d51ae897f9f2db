"""SMS notification service - confirmation text and status bookkeeping"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import messages
from ...models import Customer, ServicePackage, SmsNotification
from ...shared.timeutils import local_now
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


def compose_confirmation(customer: Customer, pkg: ServicePackage, appointment_date: datetime) -> str:
    """Templated booking confirmation, date rendered as dd.mm.yyyy"""
    return messages.text("sms_confirmation").format(
        first_name=customer.first_name,
        package_name=pkg.name,
        date=appointment_date.strftime("%d.%m.%Y"),
    )


class NotificationService:
    """Service layer for the SMS log. Nothing is ever sent."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = NotificationRepository()

    def list_notifications(
        self,
        appointment_id: Optional[int] = None,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[SmsNotification]:
        return self.repo.get_notifications(self.db, appointment_id, status, limit, offset)

    def create_notification(
        self, appointment_id: int, phone_number: str, message: str, commit: bool = True
    ) -> SmsNotification:
        sms = self.repo.create_notification(
            self.db,
            commit=commit,
            appointment_id=appointment_id,
            phone_number=phone_number,
            message=message,
            status="pending",
        )
        logger.info(f"📨 SMS queued for appointment {appointment_id} (not dispatched)")
        return sms

    def notify_booking(
        self,
        appointment_id: int,
        customer: Optional[Customer],
        pkg: Optional[ServicePackage],
        appointment_date: datetime,
        commit: bool = True,
    ) -> Optional[SmsNotification]:
        """Write the confirmation SMS row when both customer and package exist"""
        if not customer or not pkg:
            logger.info(f"SMS skipped for appointment {appointment_id}: customer or package missing")
            return None
        return self.create_notification(
            appointment_id,
            customer.phone,
            compose_confirmation(customer, pkg, appointment_date),
            commit=commit,
        )

    def update_sms_status(
        self, sms_id: int, status: str, sent_at: Optional[datetime] = None
    ) -> SmsNotification:
        """Set delivery status. "sent" without an explicit time is stamped now."""
        sms = self.repo.get_notification_by_id(self.db, sms_id)
        if not sms:
            raise HTTPException(status_code=404, detail=messages.not_found("sms"))
        if status == "sent" and sent_at is None:
            sent_at = local_now()
        return self.repo.update_status(self.db, sms, status, sent_at)
