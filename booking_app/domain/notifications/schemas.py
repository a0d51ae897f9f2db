"""SMS notification schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...models import SMS_STATUSES
from ...shared.timeutils import to_local_naive
from ...shared.validators import validate_choice


class SmsStatusUpdate(BaseModel):
    status: str
    sentAt: Optional[datetime] = None

    @field_validator("status")
    @classmethod
    def check_status(cls, v):
        return validate_choice(v, SMS_STATUSES, "status")

    @field_validator("sentAt")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)


class SmsNotificationResponse(BaseModel):
    id: int
    appointmentId: Optional[int] = None
    phoneNumber: str
    message: str
    status: str
    sentAt: Optional[datetime] = None
    createdAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, sms) -> "SmsNotificationResponse":
        return cls(
            id=sms.id,
            appointmentId=sms.appointment_id,
            phoneNumber=sms.phone_number,
            message=sms.message,
            status=sms.status,
            sentAt=sms.sent_at,
            createdAt=sms.created_at,
        )
