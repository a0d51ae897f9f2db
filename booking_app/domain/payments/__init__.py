"""Payment domain - payment records (no gateway integration)"""

from .router import router

__all__ = ["router"]
