"""Structlog logger access and opt-in configuration.

Importing i18nkit never touches global logging. Library modules get lazy
structlog loggers that follow whatever configuration the host application
installs. Applications without their own setup may call configure_logging()
once at startup.

Usage:
    from i18nkit.logging import configure_logging, get_module_logger

    # Optional, in the application entry point
    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from i18nkit.configuration import get_settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Install structlog and stdlib logging configuration for an application.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, etc). Defaults to
            settings.LOG_LEVEL.
        is_production: JSON output when True, console output otherwise.
            Defaults to settings.is_production.

    Returns:
        Configured logger instance
    """
    settings = get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


def get_module_logger():
    """Get a lazy logger for the calling module.

    Binds ``component`` (last module name part) and ``module_path``. The
    logger is resolved on first use, so configuration installed after import
    still applies.

    Example:
        # In i18nkit/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "i18nkit.i18n.loader"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
