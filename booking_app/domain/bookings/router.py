"""Booking router"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ..appointments.schemas import AppointmentResponse
from ..customers.schemas import CustomerResponse
from ..payments.schemas import PaymentResponse
from .schemas import BookingCreate, BookingResponse
from .service import BookingService

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


@router.post("", response_model=BookingResponse, status_code=201)
async def create_booking(
    data: BookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    """Book in one call: all rows are written or none are"""
    result = service.create_booking(data)
    return BookingResponse(
        customer=CustomerResponse.from_model(result["customer"]),
        appointment=AppointmentResponse.from_model(result["appointment"]),
        payment=PaymentResponse.from_model(result["payment"]),
        smsNotificationId=result["sms"].id if result["sms"] else None,
    )
