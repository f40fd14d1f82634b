from .app_factory import create_app
from .health_router import router as health_router
from .info_router import router as info_router
from .welcome_router import router as welcome_router

__all__ = ["create_app", "health_router", "info_router", "welcome_router"]
