"""Appointment router - FastAPI endpoints for appointments"""

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...config import DEFAULT_PAGE_LIMIT
from ...database import get_db
from ...shared.timeutils import to_local_naive
from .schemas import AppointmentCreate, AppointmentResponse, AppointmentUpdate
from .service import AppointmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(db)


@router.get("", response_model=list[AppointmentResponse])
async def list_appointments(
    status: Optional[str] = Query(None),
    dateFrom: Optional[datetime] = Query(None, description="Inclusive lower bound"),
    dateTo: Optional[datetime] = Query(
        None,
        description="Inclusive upper bound. A bare date means 00:00 of that day; "
        "pass T23:59:59 to include the whole day.",
    ),
    customerId: Optional[int] = Query(None),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Admin list with customer and package details"""
    appointments = service.list_appointments(
        status, to_local_naive(dateFrom), to_local_naive(dateTo), customerId, limit, offset
    )
    return [AppointmentResponse.from_model(a, include_related=True) for a in appointments]


# Must be registered before /{appointment_id}
@router.get("/available-slots", response_model=list[str])
async def get_available_slots(
    day: date = Query(..., alias="date", description="Calendar day, YYYY-MM-DD"),
    packageId: int = Query(...),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Half-hour labels between 09:00 and 17:30 not taken by a confirmed appointment"""
    return service.get_available_slots(day, packageId)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(get_appointment_service),
):
    return AppointmentResponse.from_model(service.get_appointment(appointment_id))


@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
):
    return AppointmentResponse.from_model(service.create_appointment(data))


@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: int,
    data: AppointmentUpdate,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Partial update; status may be set to any value"""
    return AppointmentResponse.from_model(service.update_appointment(appointment_id, data))
