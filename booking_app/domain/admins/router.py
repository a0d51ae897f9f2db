"""Admin router - FastAPI endpoints for admin registration and login"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import AdminCreate, AdminLogin, AdminResponse
from .service import AdminService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin"])


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    """Dependency injection for AdminService"""
    return AdminService(db)


@router.post("/register", response_model=AdminResponse, status_code=201)
async def register_admin(
    data: AdminCreate,
    service: AdminService = Depends(get_admin_service),
):
    """Create a dashboard admin"""
    admin = service.register_admin(data)
    return AdminResponse(id=admin.id, email=admin.email, name=admin.name)


@router.post("/login", response_model=AdminResponse)
async def login_admin(
    data: AdminLogin,
    service: AdminService = Depends(get_admin_service),
):
    """Check admin credentials. Same 401 for unknown email and wrong password."""
    admin = service.login(data.email, data.password)
    return AdminResponse(id=admin.id, email=admin.email, name=admin.name)
