"""Payment domain schemas - Pydantic models for validation"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, field_validator

from ...models import PAYMENT_METHODS, PAYMENT_STATUSES
from ...shared.timeutils import to_local_naive
from ...shared.validators import validate_choice


def _check_amount(v):
    if v is not None and v < 0:
        raise ValueError("Amount cannot be negative")
    return v


class PaymentCreate(BaseModel):
    """Schema for recording a payment"""

    appointmentId: Optional[int] = None
    amount: Decimal
    paymentMethod: str
    paymentStatus: str = "pending"
    transactionId: Optional[str] = None
    paymentDate: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def check_amount(cls, v):
        return _check_amount(v)

    @field_validator("paymentMethod")
    @classmethod
    def check_method(cls, v):
        return validate_choice(v, PAYMENT_METHODS, "paymentMethod")

    @field_validator("paymentStatus")
    @classmethod
    def check_status(cls, v):
        return validate_choice(v, PAYMENT_STATUSES, "paymentStatus")

    @field_validator("paymentDate")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)


class PaymentUpdate(BaseModel):
    """Schema for partially updating a payment"""

    appointmentId: Optional[int] = None
    amount: Optional[Decimal] = None
    paymentMethod: Optional[str] = None
    paymentStatus: Optional[str] = None
    transactionId: Optional[str] = None
    paymentDate: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def check_amount(cls, v):
        return _check_amount(v)

    @field_validator("paymentMethod")
    @classmethod
    def check_method(cls, v):
        return validate_choice(v, PAYMENT_METHODS, "paymentMethod")

    @field_validator("paymentStatus")
    @classmethod
    def check_status(cls, v):
        return validate_choice(v, PAYMENT_STATUSES, "paymentStatus")

    @field_validator("paymentDate")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)


class PaymentResponse(BaseModel):
    id: int
    appointmentId: Optional[int] = None
    amount: Decimal
    paymentMethod: str
    paymentStatus: str
    transactionId: Optional[str] = None
    paymentDate: Optional[datetime] = None
    createdAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, payment) -> "PaymentResponse":
        return cls(
            id=payment.id,
            appointmentId=payment.appointment_id,
            amount=payment.amount,
            paymentMethod=payment.payment_method,
            paymentStatus=payment.payment_status,
            transactionId=payment.transaction_id,
            paymentDate=payment.payment_date,
            createdAt=payment.created_at,
        )
