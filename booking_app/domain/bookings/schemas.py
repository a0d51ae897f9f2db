"""Booking schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...models import PAYMENT_METHODS
from ...shared.timeutils import to_local_naive
from ...shared.validators import validate_choice
from ..appointments.schemas import AppointmentResponse
from ..customers.schemas import CustomerCreate, CustomerResponse
from ..payments.schemas import PaymentResponse


class BookingCreate(BaseModel):
    """Everything the booking wizard collects"""

    customer: CustomerCreate
    packageId: int
    appointmentDate: datetime
    notes: Optional[str] = None
    paymentMethod: str = "bank_transfer"

    @field_validator("appointmentDate")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)

    @field_validator("paymentMethod")
    @classmethod
    def check_method(cls, v):
        return validate_choice(v, PAYMENT_METHODS, "paymentMethod")


class BookingResponse(BaseModel):
    customer: CustomerResponse
    appointment: AppointmentResponse
    payment: PaymentResponse
    smsNotificationId: Optional[int] = None
