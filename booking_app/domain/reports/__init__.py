"""Reports domain - monthly dashboard aggregates"""

from .router import router

__all__ = ["router"]
