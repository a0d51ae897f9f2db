"""Service package router - FastAPI endpoints for packages"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import PackageCreate, PackageResponse, PackageUpdate
from .service import PackageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/packages", tags=["Packages"])


def get_package_service(db: Session = Depends(get_db)) -> PackageService:
    """Dependency injection for PackageService"""
    return PackageService(db)


@router.get("", response_model=list[PackageResponse])
async def list_packages(
    active: bool = Query(False, description="Only return active packages"),
    service: PackageService = Depends(get_package_service),
):
    """List packages ordered by name"""
    return [PackageResponse.from_model(p) for p in service.list_packages(active)]


@router.get("/{package_id}", response_model=PackageResponse)
async def get_package(
    package_id: int,
    service: PackageService = Depends(get_package_service),
):
    return PackageResponse.from_model(service.get_package(package_id))


@router.post("", response_model=PackageResponse, status_code=201)
async def create_package(
    data: PackageCreate,
    service: PackageService = Depends(get_package_service),
):
    return PackageResponse.from_model(service.create_package(data))


@router.put("/{package_id}", response_model=PackageResponse)
async def update_package(
    package_id: int,
    data: PackageUpdate,
    service: PackageService = Depends(get_package_service),
):
    """Partially update a package"""
    return PackageResponse.from_model(service.update_package(package_id, data))
