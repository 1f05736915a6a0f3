"""Configuration module for hostmap.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

log_startup_info() -> None
    Log the effective configuration at debug level

Usage:
------
```python
from hostmap.config import settings
db_url = settings.database.url

from hostmap.config import get_logger
logger = get_logger(__name__)
logger.info("Starting operation")
```
"""

from .logging import get_logger, log_startup_info, setup_loguru_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "get_logger",
    "log_startup_info",
    "settings",
    "setup_loguru_logger",
]
