from .logging import configure_logging, get_logger
from .settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
