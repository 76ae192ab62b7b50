from .config import Settings, settings
from .logger import setup_logger
from .rwlock import ReadWriteLock

__all__ = ["ReadWriteLock", "Settings", "settings", "setup_logger"]
