"""Notification domain - SMS log rows (never dispatched)"""

from .router import router

__all__ = ["router"]
