"""Payment repository - Database operations for payments"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Payment


class PaymentRepository:
    """Repository for payment database operations"""

    @staticmethod
    def get_payments(
        db: Session,
        status: Optional[str] = None,
        method: Optional[str] = None,
        appointment_id: Optional[int] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Payment]:
        """Filtered payment list, newest first"""
        query = db.query(Payment)
        if status:
            query = query.filter(Payment.payment_status == status)
        if method:
            query = query.filter(Payment.payment_method == method)
        if appointment_id is not None:
            query = query.filter(Payment.appointment_id == appointment_id)
        return (
            query.order_by(Payment.created_at.desc(), Payment.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_payment_by_id(db: Session, payment_id: int) -> Optional[Payment]:
        return db.query(Payment).filter(Payment.id == payment_id).first()

    @staticmethod
    def create_payment(db: Session, commit: bool = True, **payment_data) -> Payment:
        payment = Payment(**payment_data)
        db.add(payment)
        if commit:
            db.commit()
            db.refresh(payment)
        else:
            db.flush()
        return payment

    @staticmethod
    def update_payment(db: Session, payment: Payment, **updates) -> Payment:
        for key, value in updates.items():
            if hasattr(payment, key):
                setattr(payment, key, value)
        db.commit()
        db.refresh(payment)
        return payment
