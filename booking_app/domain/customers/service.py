"""Customer service - Business logic for customers"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import messages
from ...models import Customer
from .repository import CustomerRepository
from .schemas import CustomerCreate

logger = logging.getLogger(__name__)


class CustomerService:
    """Service layer for customers"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CustomerRepository()

    def get_customer(self, customer_id: int) -> Customer:
        customer = self.repo.get_customer_by_id(self.db, customer_id)
        if not customer:
            raise HTTPException(status_code=404, detail=messages.not_found("customer"))
        return customer

    def get_or_create_customer(self, data: CustomerCreate, commit: bool = True) -> tuple[Customer, bool]:
        """
        Look the customer up by email and insert only when missing.

        Returns (customer, created). The lookup and insert are separate
        statements, so two concurrent requests with a new email can both
        insert.
        """
        existing = self.repo.get_customer_by_email(self.db, data.email)
        if existing:
            return existing, False

        customer = self.repo.create_customer(
            self.db,
            commit=commit,
            first_name=data.firstName,
            last_name=data.lastName,
            email=data.email,
            phone=data.phone,
        )
        logger.info(f"👤 Customer created: id={customer.id}")
        return customer, True
