"""Customer domain - contact details captured during booking"""

from .router import router

__all__ = ["router"]
