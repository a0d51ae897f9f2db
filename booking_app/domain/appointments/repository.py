"""Appointment repository - Database operations for appointments"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Appointment
from ...shared.timeutils import local_now


class AppointmentRepository:
    """Repository for appointment database operations"""

    @staticmethod
    def get_appointments(
        db: Session,
        status: Optional[str] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        customer_id: Optional[int] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Appointment]:
        """Filtered appointment list, newest appointment date first"""
        query = db.query(Appointment).options(
            joinedload(Appointment.customer), joinedload(Appointment.package)
        )

        if status:
            query = query.filter(Appointment.status == status)
        if date_from:
            query = query.filter(Appointment.appointment_date >= date_from)
        if date_to:
            query = query.filter(Appointment.appointment_date <= date_to)
        if customer_id is not None:
            query = query.filter(Appointment.customer_id == customer_id)

        return (
            query.order_by(Appointment.appointment_date.desc(), Appointment.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_appointment_by_id(db: Session, appointment_id: int) -> Optional[Appointment]:
        return db.query(Appointment).filter(Appointment.id == appointment_id).first()

    @staticmethod
    def get_appointments_between(
        db: Session, start: datetime, end: datetime, status: Optional[str] = None
    ) -> list[Appointment]:
        """Appointments with start <= appointment_date <= end"""
        query = db.query(Appointment).filter(
            Appointment.appointment_date >= start,
            Appointment.appointment_date <= end,
        )
        if status:
            query = query.filter(Appointment.status == status)
        return query.order_by(Appointment.appointment_date).all()

    @staticmethod
    def create_appointment(db: Session, commit: bool = True, **appointment_data) -> Appointment:
        appointment = Appointment(**appointment_data)
        db.add(appointment)
        if commit:
            db.commit()
            db.refresh(appointment)
        else:
            db.flush()
        return appointment

    @staticmethod
    def update_appointment(db: Session, appointment: Appointment, **updates) -> Appointment:
        for key, value in updates.items():
            if hasattr(appointment, key):
                setattr(appointment, key, value)
        appointment.updated_at = local_now()
        db.commit()
        db.refresh(appointment)
        return appointment
