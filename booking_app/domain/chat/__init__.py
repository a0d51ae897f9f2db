"""Chat domain - session-keyed live chat log"""

from .router import router

__all__ = ["router"]
