"""
Booking service - customer, appointment, SMS row and payment in one transaction

The granular endpoints commit each row on its own, so a failure half way
leaves e.g. an appointment without a payment. This service flushes every
row inside one session transaction and commits once; any error rolls the
whole booking back.
"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import messages
from ..appointments.repository import AppointmentRepository
from ..customers.service import CustomerService
from ..notifications.service import NotificationService
from ..packages.repository import PackageRepository
from ..payments.repository import PaymentRepository
from .schemas import BookingCreate

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, db: Session):
        self.db = db
        self.customers = CustomerService(db)
        self.notifications = NotificationService(db)

    def create_booking(self, data: BookingCreate) -> dict:
        pkg = PackageRepository.get_package_by_id(self.db, data.packageId)
        if not pkg:
            raise HTTPException(status_code=404, detail=messages.not_found("package"))
        if not pkg.is_active:
            raise HTTPException(status_code=400, detail=messages.text("inactive_package"))

        try:
            customer, _ = self.customers.get_or_create_customer(data.customer, commit=False)
            appointment = AppointmentRepository.create_appointment(
                self.db,
                commit=False,
                customer_id=customer.id,
                package_id=pkg.id,
                appointment_date=data.appointmentDate,
                status="pending",
                notes=data.notes,
            )
            sms = self.notifications.notify_booking(
                appointment.id, customer, pkg, appointment.appointment_date, commit=False
            )
            payment = PaymentRepository.create_payment(
                self.db,
                commit=False,
                appointment_id=appointment.id,
                amount=pkg.price,
                payment_method=data.paymentMethod,
                payment_status="pending",
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("❌ Booking rolled back")
            raise

        for row in (customer, appointment, payment):
            self.db.refresh(row)
        logger.info(f"✅ Booking completed: appointment={appointment.id} payment={payment.id}")
        return {
            "customer": customer,
            "appointment": appointment,
            "payment": payment,
            "sms": sms,
        }
