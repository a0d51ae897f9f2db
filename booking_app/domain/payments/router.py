"""Payment router - FastAPI endpoints for payments"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...config import DEFAULT_PAGE_LIMIT
from ...database import get_db
from .schemas import PaymentCreate, PaymentResponse, PaymentUpdate
from .service import PaymentService

router = APIRouter(prefix="/api/payments", tags=["Payments"])


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    """Dependency injection for PaymentService"""
    return PaymentService(db)


@router.get("", response_model=list[PaymentResponse])
async def list_payments(
    status: Optional[str] = Query(None),
    method: Optional[str] = Query(None),
    appointmentId: Optional[int] = Query(None),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: PaymentService = Depends(get_payment_service),
):
    payments = service.list_payments(status, method, appointmentId, limit, offset)
    return [PaymentResponse.from_model(p) for p in payments]


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: int,
    service: PaymentService = Depends(get_payment_service),
):
    return PaymentResponse.from_model(service.get_payment(payment_id))


@router.post("", response_model=PaymentResponse, status_code=201)
async def create_payment(
    data: PaymentCreate,
    service: PaymentService = Depends(get_payment_service),
):
    """Record a payment, pending unless told otherwise"""
    return PaymentResponse.from_model(service.create_payment(data))


@router.put("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: int,
    data: PaymentUpdate,
    service: PaymentService = Depends(get_payment_service),
):
    return PaymentResponse.from_model(service.update_payment(payment_id, data))
