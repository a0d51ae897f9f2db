"""Admin repository - Database operations for admins"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Admin


class AdminRepository:
    """Repository for admin database operations"""

    @staticmethod
    def get_admin_by_email(db: Session, email: str) -> Optional[Admin]:
        return db.query(Admin).filter(Admin.email == email).first()

    @staticmethod
    def create_admin(db: Session, **admin_data) -> Admin:
        admin = Admin(**admin_data)
        db.add(admin)
        db.commit()
        db.refresh(admin)
        return admin
