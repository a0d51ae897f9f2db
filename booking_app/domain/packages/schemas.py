"""Service package schemas - Pydantic models for validation"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_required_text


def _check_price(v):
    if v is not None and v < 0:
        raise ValueError("Price cannot be negative")
    return v


def _check_duration(v):
    if v is not None and v <= 0:
        raise ValueError("Duration must be a positive number of minutes")
    return v


class PackageCreate(BaseModel):
    """Schema for creating a service package"""

    name: str
    description: Optional[str] = None
    price: Decimal
    duration: int
    isActive: bool = True

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v)

    @field_validator("price")
    @classmethod
    def check_price(cls, v):
        return _check_price(v)

    @field_validator("duration")
    @classmethod
    def check_duration(cls, v):
        return _check_duration(v)


class PackageUpdate(BaseModel):
    """Schema for partially updating a service package"""

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    duration: Optional[int] = None
    isActive: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v)

    @field_validator("price")
    @classmethod
    def check_price(cls, v):
        return _check_price(v)

    @field_validator("duration")
    @classmethod
    def check_duration(cls, v):
        return _check_duration(v)


class PackageResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    duration: int
    isActive: bool
    createdAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, pkg) -> "PackageResponse":
        return cls(
            id=pkg.id,
            name=pkg.name,
            description=pkg.description,
            price=pkg.price,
            duration=pkg.duration,
            isActive=pkg.is_active,
            createdAt=pkg.created_at,
        )
