"""Appointment domain schemas - Pydantic models for validation"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, field_validator

from ...models import APPOINTMENT_STATUSES
from ...shared.timeutils import to_local_naive
from ...shared.validators import validate_choice


class AppointmentCreate(BaseModel):
    """Schema for creating an appointment"""

    customerId: Optional[int] = None
    packageId: Optional[int] = None
    appointmentDate: datetime
    status: str = "pending"
    notes: Optional[str] = None

    @field_validator("appointmentDate")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)

    @field_validator("status")
    @classmethod
    def check_status(cls, v):
        return validate_choice(v, APPOINTMENT_STATUSES, "status")


class AppointmentUpdate(BaseModel):
    """
    Schema for partially updating an appointment.

    Any status may follow any other; there is no transition table.
    """

    customerId: Optional[int] = None
    packageId: Optional[int] = None
    appointmentDate: Optional[datetime] = None
    status: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("appointmentDate")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)

    @field_validator("status")
    @classmethod
    def check_status(cls, v):
        return validate_choice(v, APPOINTMENT_STATUSES, "status")


class CustomerSummary(BaseModel):
    firstName: str
    lastName: str
    email: str
    phone: str


class PackageSummary(BaseModel):
    name: str
    price: Decimal


class AppointmentResponse(BaseModel):
    id: int
    customerId: Optional[int] = None
    packageId: Optional[int] = None
    appointmentDate: datetime
    status: str
    notes: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    customer: Optional[CustomerSummary] = None
    package: Optional[PackageSummary] = None

    @classmethod
    def from_model(cls, appt, include_related: bool = False) -> "AppointmentResponse":
        customer = package = None
        if include_related and appt.customer:
            customer = CustomerSummary(
                firstName=appt.customer.first_name,
                lastName=appt.customer.last_name,
                email=appt.customer.email,
                phone=appt.customer.phone,
            )
        if include_related and appt.package:
            package = PackageSummary(name=appt.package.name, price=appt.package.price)
        return cls(
            id=appt.id,
            customerId=appt.customer_id,
            packageId=appt.package_id,
            appointmentDate=appt.appointment_date,
            status=appt.status,
            notes=appt.notes,
            createdAt=appt.created_at,
            updatedAt=appt.updated_at,
            customer=customer,
            package=package,
        )
