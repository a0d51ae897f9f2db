"""Admin service - Registration and credential checks"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import messages
from ...models import Admin
from ...security_utils import dummy_verify, hash_password_bcrypt, verify_password_bcrypt
from .repository import AdminRepository
from .schemas import AdminCreate

logger = logging.getLogger(__name__)


class AdminService:
    """Service layer for admin accounts"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AdminRepository()

    def register_admin(self, data: AdminCreate) -> Admin:
        """Create an admin with a bcrypt-hashed password"""
        if self.repo.get_admin_by_email(self.db, data.email):
            logger.warning(f"⚠️ Admin registration rejected, email already in use: {data.email}")
            raise HTTPException(status_code=400, detail=messages.invalid_message("register_admin"))

        admin = self.repo.create_admin(
            self.db,
            email=data.email,
            password=hash_password_bcrypt(data.password),
            name=data.name,
            role=data.role,
        )
        logger.info(f"✅ Admin registered: id={admin.id}")
        return admin

    def verify_admin(self, email: str, password: str) -> Optional[Admin]:
        """
        Return the admin when the credentials match, otherwise None.

        An unknown email still pays for one hash verification so response
        timing does not reveal whether the account exists.
        """
        admin = self.repo.get_admin_by_email(self.db, email.strip().lower())
        if not admin:
            dummy_verify()
            return None
        if not verify_password_bcrypt(password, admin.password):
            return None
        return admin

    def login(self, email: str, password: str) -> Admin:
        admin = self.verify_admin(email, password)
        if not admin:
            logger.warning("🔒 Admin login failed")
            raise HTTPException(status_code=401, detail=messages.invalid_message("login_admin"))
        return admin
