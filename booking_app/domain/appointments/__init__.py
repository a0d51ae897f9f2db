"""Appointment domain - appointments, status changes and slot availability"""

from .router import router

__all__ = ["router"]
