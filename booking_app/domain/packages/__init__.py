"""Package domain - purchasable consultation packages"""

from .router import router

__all__ = ["router"]
