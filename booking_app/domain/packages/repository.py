"""Service package repository - Database operations for packages"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ServicePackage


class PackageRepository:
    """Repository for service package database operations"""

    @staticmethod
    def get_packages(db: Session, active_only: bool = False) -> list[ServicePackage]:
        query = db.query(ServicePackage)
        if active_only:
            query = query.filter(ServicePackage.is_active.is_(True))
        return query.order_by(ServicePackage.name).all()

    @staticmethod
    def get_package_by_id(db: Session, package_id: int) -> Optional[ServicePackage]:
        return db.query(ServicePackage).filter(ServicePackage.id == package_id).first()

    @staticmethod
    def create_package(db: Session, **package_data) -> ServicePackage:
        pkg = ServicePackage(**package_data)
        db.add(pkg)
        db.commit()
        db.refresh(pkg)
        return pkg

    @staticmethod
    def update_package(db: Session, pkg: ServicePackage, **updates) -> ServicePackage:
        for key, value in updates.items():
            if hasattr(pkg, key):
                setattr(pkg, key, value)
        db.commit()
        db.refresh(pkg)
        return pkg
