# Core package
from .config import settings
from .database import open_database, check_connection, get_database_health
from .dependencies import get_db

__all__ = [
    "settings",
    "open_database",
    "check_connection",
    "get_database_health",
    "get_db",
]
