"""Booking domain - one-call booking that writes every row in a single transaction"""

from .router import router

__all__ = ["router"]
