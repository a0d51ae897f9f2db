"""Service package service - Business logic for packages"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import messages
from ...models import ServicePackage
from .repository import PackageRepository
from .schemas import PackageCreate, PackageUpdate

logger = logging.getLogger(__name__)

# Wire name -> column name
FIELD_MAP = {
    "name": "name",
    "description": "description",
    "price": "price",
    "duration": "duration",
    "isActive": "is_active",
}
REQUIRED_COLUMNS = ("name", "price", "duration", "is_active")


class PackageService:
    """Service layer for service packages"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PackageRepository()

    def list_packages(self, active_only: bool = False) -> list[ServicePackage]:
        return self.repo.get_packages(self.db, active_only)

    def get_package(self, package_id: int) -> ServicePackage:
        pkg = self.repo.get_package_by_id(self.db, package_id)
        if not pkg:
            raise HTTPException(status_code=404, detail=messages.not_found("package"))
        return pkg

    def create_package(self, data: PackageCreate) -> ServicePackage:
        pkg = self.repo.create_package(
            self.db,
            name=data.name,
            description=data.description,
            price=data.price,
            duration=data.duration,
            is_active=data.isActive,
        )
        logger.info(f"📦 Package created: id={pkg.id} name={pkg.name}")
        return pkg

    def update_package(self, package_id: int, data: PackageUpdate) -> ServicePackage:
        pkg = self.get_package(package_id)
        updates = {
            FIELD_MAP[field]: value
            for field, value in data.model_dump(exclude_unset=True).items()
        }
        # name, price, duration and isActive are NOT NULL
        if any(col in updates and updates[col] is None for col in REQUIRED_COLUMNS):
            raise HTTPException(status_code=400, detail=messages.invalid_message("update_package"))
        return self.repo.update_package(self.db, pkg, **updates)
