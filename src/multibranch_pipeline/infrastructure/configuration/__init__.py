from .main_settings import Settings

__all__ = ["Settings"]
