"""Customer domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_phone, validate_required_text


class CustomerCreate(BaseModel):
    """Schema for the booking contact form"""

    firstName: str
    lastName: str
    email: str
    phone: str

    @field_validator("firstName", "lastName")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        v = validate_email(v)
        if not v:
            raise ValueError("Email is required")
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        v = validate_phone(v)
        if not v:
            raise ValueError("Phone is required")
        return v


class CustomerResponse(BaseModel):
    id: int
    firstName: str
    lastName: str
    email: str
    phone: str
    createdAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            firstName=customer.first_name,
            lastName=customer.last_name,
            email=customer.email,
            phone=customer.phone,
            createdAt=customer.created_at,
        )
