"""Payment service - Business logic for payment records"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import messages
from ...models import Payment
from ..appointments.repository import AppointmentRepository
from .repository import PaymentRepository
from .schemas import PaymentCreate, PaymentUpdate

logger = logging.getLogger(__name__)

# Wire name -> column name
FIELD_MAP = {
    "appointmentId": "appointment_id",
    "amount": "amount",
    "paymentMethod": "payment_method",
    "paymentStatus": "payment_status",
    "transactionId": "transaction_id",
    "paymentDate": "payment_date",
}
REQUIRED_COLUMNS = ("amount", "payment_method", "payment_status")


class PaymentService:
    """Service layer for payments"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PaymentRepository()

    def list_payments(
        self,
        status: Optional[str] = None,
        method: Optional[str] = None,
        appointment_id: Optional[int] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Payment]:
        return self.repo.get_payments(self.db, status, method, appointment_id, limit, offset)

    def get_payment(self, payment_id: int) -> Payment:
        payment = self.repo.get_payment_by_id(self.db, payment_id)
        if not payment:
            raise HTTPException(status_code=404, detail=messages.not_found("payment"))
        return payment

    def _check_appointment(self, appointment_id: Optional[int], route_name: str) -> None:
        """A payment may only point at an existing appointment"""
        if appointment_id is None:
            return
        if not AppointmentRepository.get_appointment_by_id(self.db, appointment_id):
            logger.warning(f"⚠️ {route_name}: unknown appointment {appointment_id}")
            raise HTTPException(status_code=400, detail=messages.invalid_message(route_name))

    def create_payment(self, data: PaymentCreate) -> Payment:
        self._check_appointment(data.appointmentId, "create_payment")
        payment = self.repo.create_payment(
            self.db,
            appointment_id=data.appointmentId,
            amount=data.amount,
            payment_method=data.paymentMethod,
            payment_status=data.paymentStatus,
            transaction_id=data.transactionId,
            payment_date=data.paymentDate,
        )
        logger.info(
            f"💳 Payment recorded: id={payment.id} appointment={payment.appointment_id} "
            f"method={payment.payment_method} status={payment.payment_status}"
        )
        return payment

    def update_payment(self, payment_id: int, data: PaymentUpdate) -> Payment:
        payment = self.get_payment(payment_id)
        updates = {
            FIELD_MAP[field]: value
            for field, value in data.model_dump(exclude_unset=True).items()
        }
        if any(col in updates and updates[col] is None for col in REQUIRED_COLUMNS):
            raise HTTPException(status_code=400, detail=messages.invalid_message("update_payment"))
        self._check_appointment(updates.get("appointment_id"), "update_payment")
        return self.repo.update_payment(self.db, payment, **updates)
