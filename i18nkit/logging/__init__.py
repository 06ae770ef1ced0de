"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - make_errlog(): Route translator diagnostics into structlog
"""

from i18nkit.logging.setup import configure_logging, get_module_logger
from i18nkit.logging.errlog import make_errlog, DIAGNOSTIC_EVENT

__all__ = [
    "configure_logging",
    "get_module_logger",
    "make_errlog",
    "DIAGNOSTIC_EVENT",
]
