"""Admin domain - dashboard account registration and login"""

from .router import router

__all__ = ["router"]
