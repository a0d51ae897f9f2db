from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from .database import Base
from .shared.timeutils import local_now

APPOINTMENT_STATUSES = ("pending", "confirmed", "completed", "cancelled")
PAYMENT_METHODS = ("bank_transfer", "eft", "paytr")
PAYMENT_STATUSES = ("pending", "completed", "failed", "refunded")
SMS_STATUSES = ("pending", "sent", "failed")


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(Text, nullable=False)  # bcrypt hash
    name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="admin")
    created_at = Column(DateTime, default=local_now)


class ServicePackage(Base):
    __tablename__ = "service_packages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=local_now)

    appointments = relationship("Appointment", back_populates="package")


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    # Not unique: customers are looked up by email before insert
    email = Column(String(255), index=True, nullable=False)
    phone = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=local_now)

    appointments = relationship("Appointment", back_populates="customer")


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)
    package_id = Column(Integer, ForeignKey("service_packages.id"), nullable=True)
    appointment_date = Column(DateTime, nullable=False, index=True)  # naive, business timezone
    status = Column(String(50), nullable=False, default="pending")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=local_now)
    updated_at = Column(DateTime, default=local_now, onupdate=local_now)

    customer = relationship("Customer", back_populates="appointments")
    package = relationship("ServicePackage", back_populates="appointments")
    payments = relationship("Payment", back_populates="appointment")
    sms_notifications = relationship("SmsNotification", back_populates="appointment")


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    appointment_id = Column(Integer, ForeignKey("appointments.id"), nullable=True, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    payment_method = Column(String(50), nullable=False)  # bank_transfer, eft, paytr
    payment_status = Column(String(50), nullable=False, default="pending")
    transaction_id = Column(String(255), nullable=True)
    payment_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=local_now)

    appointment = relationship("Appointment", back_populates="payments")


class SmsNotification(Base):
    """Outgoing SMS log. Rows are written, never dispatched."""

    __tablename__ = "sms_notifications"

    id = Column(Integer, primary_key=True, index=True)
    appointment_id = Column(Integer, ForeignKey("appointments.id"), nullable=True, index=True)
    phone_number = Column(String(20), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, default="pending")  # pending, sent, failed
    sent_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=local_now)

    appointment = relationship("Appointment", back_populates="sms_notifications")


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Text, index=True, nullable=False)
    message = Column(Text, nullable=False)
    is_from_user = Column(Boolean, nullable=False)
    timestamp = Column(DateTime, default=local_now)
