"""Appointment service - Business logic for appointments and slots"""

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import messages
from ...models import Appointment, Customer, ServicePackage
from ...shared.timeutils import day_bounds, slot_label, working_slots
from ..customers.repository import CustomerRepository
from ..notifications.service import NotificationService
from ..packages.repository import PackageRepository
from .repository import AppointmentRepository
from .schemas import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)

# Wire name -> column name
FIELD_MAP = {
    "customerId": "customer_id",
    "packageId": "package_id",
    "appointmentDate": "appointment_date",
    "status": "status",
    "notes": "notes",
}
REQUIRED_COLUMNS = ("appointment_date", "status")


class AppointmentService:
    """Service layer for appointment business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AppointmentRepository()
        self.notifications = NotificationService(db)

    def list_appointments(
        self,
        status: Optional[str] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        customer_id: Optional[int] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Appointment]:
        return self.repo.get_appointments(
            self.db, status, date_from, date_to, customer_id, limit, offset
        )

    def _resolve_references(
        self, customer_id: Optional[int], package_id: Optional[int], route_name: str
    ) -> tuple[Optional[Customer], Optional[ServicePackage]]:
        """Load the referenced customer and package; unknown ids are a 400"""
        customer = pkg = None
        if customer_id is not None:
            customer = CustomerRepository.get_customer_by_id(self.db, customer_id)
            if not customer:
                logger.warning(f"⚠️ {route_name}: unknown customer {customer_id}")
                raise HTTPException(status_code=400, detail=messages.invalid_message(route_name))
        if package_id is not None:
            pkg = PackageRepository.get_package_by_id(self.db, package_id)
            if not pkg:
                logger.warning(f"⚠️ {route_name}: unknown package {package_id}")
                raise HTTPException(status_code=400, detail=messages.invalid_message(route_name))
        return customer, pkg

    def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = self.repo.get_appointment_by_id(self.db, appointment_id)
        if not appointment:
            raise HTTPException(status_code=404, detail=messages.not_found("appointment"))
        return appointment

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """
        Insert the appointment, then write the confirmation SMS row.

        The two writes commit separately: a failure while writing the SMS
        leaves the appointment in place. A customerId or packageId that
        does not exist is a 400.
        """
        customer, pkg = self._resolve_references(data.customerId, data.packageId, "create_appointment")
        appointment = self.repo.create_appointment(
            self.db,
            customer_id=data.customerId,
            package_id=data.packageId,
            appointment_date=data.appointmentDate,
            status=data.status,
            notes=data.notes,
        )
        logger.info(f"📅 Appointment created: id={appointment.id} at {appointment.appointment_date}")
        self.notifications.notify_booking(appointment.id, customer, pkg, appointment.appointment_date)
        return appointment

    def update_appointment(self, appointment_id: int, data: AppointmentUpdate) -> Appointment:
        appointment = self.get_appointment(appointment_id)
        updates = {
            FIELD_MAP[field]: value
            for field, value in data.model_dump(exclude_unset=True).items()
        }
        if any(col in updates and updates[col] is None for col in REQUIRED_COLUMNS):
            raise HTTPException(status_code=400, detail=messages.invalid_message("update_appointment"))
        self._resolve_references(
            updates.get("customer_id"), updates.get("package_id"), "update_appointment"
        )

        if "status" in updates and updates["status"] != appointment.status:
            logger.info(
                f"🔄 Appointment {appointment_id} status {appointment.status} -> {updates['status']}"
            )
        return self.repo.update_appointment(self.db, appointment, **updates)

    def get_available_slots(self, day: date, package_id: int) -> list[str]:
        """
        Free half-hour labels for a local calendar day.

        Only confirmed appointments block a slot. package_id is accepted
        but does not change the grid.
        """
        start, end = day_bounds(day)
        confirmed = self.repo.get_appointments_between(self.db, start, end, status="confirmed")
        booked = {slot_label(a.appointment_date) for a in confirmed}
        return [slot for slot in working_slots() if slot not in booked]
