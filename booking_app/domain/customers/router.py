"""Customer router - FastAPI endpoints for customers"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import CustomerCreate, CustomerResponse
from .service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/customers", tags=["Customers"])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Dependency injection for CustomerService"""
    return CustomerService(db)


@router.post("", response_model=CustomerResponse, status_code=201)
async def create_customer(
    data: CustomerCreate,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
):
    """Return the existing customer for this email (200) or create one (201)"""
    customer, created = service.get_or_create_customer(data)
    if not created:
        response.status_code = 200
    return CustomerResponse.from_model(customer)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
):
    return CustomerResponse.from_model(service.get_customer(customer_id))
