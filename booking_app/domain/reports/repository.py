"""Report repository - grouped aggregations over appointments and payments"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Appointment, Payment, ServicePackage


def _in_range(start: datetime, end: datetime):
    return (Appointment.appointment_date >= start, Appointment.appointment_date <= end)


class ReportRepository:
    """Aggregate queries for the admin dashboard"""

    @staticmethod
    def count_appointments(
        db: Session, start: datetime, end: datetime, status: Optional[str] = None
    ) -> int:
        query = db.query(func.count(Appointment.id)).filter(*_in_range(start, end))
        if status:
            query = query.filter(Appointment.status == status)
        return query.scalar() or 0

    @staticmethod
    def completed_revenue(db: Session, start: datetime, end: datetime) -> Decimal:
        """Sum of completed payments whose appointment falls in the range"""
        total = (
            db.query(func.sum(Payment.amount))
            .join(Appointment, Payment.appointment_id == Appointment.id)
            .filter(*_in_range(start, end), Payment.payment_status == "completed")
            .scalar()
        )
        return Decimal(total or 0)

    @staticmethod
    def revenue_by_package(db: Session, start: datetime, end: datetime) -> list[tuple]:
        """
        (package_name, appointment_count, revenue) per package over the
        completed-payment join. package_name is None for appointments
        without a package.
        """
        return (
            db.query(
                ServicePackage.name,
                func.count(func.distinct(Appointment.id)),
                func.sum(Payment.amount),
            )
            .select_from(Appointment)
            .join(Payment, Payment.appointment_id == Appointment.id)
            .outerjoin(ServicePackage, Appointment.package_id == ServicePackage.id)
            .filter(*_in_range(start, end), Payment.payment_status == "completed")
            .group_by(ServicePackage.id, ServicePackage.name)
            .order_by(ServicePackage.name)
            .all()
        )
