"""Adapter from structlog to the translator diagnostic sink.

The translator reports misses as ``log(fmt, *args)``. make_errlog() turns a
structlog logger into such a sink so diagnostics land in the structured log
stream.

Usage:
    translator.set_log(make_errlog())
"""

from typing import Any, Callable, Optional

from structlog.stdlib import BoundLogger

from i18nkit.logging.setup import get_module_logger

DIAGNOSTIC_EVENT = "translation_diagnostic"


def make_errlog(
    bound_logger: Optional[BoundLogger] = None,
    level: str = "warning",
) -> Callable[..., None]:
    """Create a diagnostic sink that writes to a structlog logger.

    Args:
        bound_logger: Logger to write to. Defaults to this module's logger.
        level: Log method name used for every diagnostic.

    Returns:
        Callable accepting a %-style format string and its arguments.
    """
    target = bound_logger if bound_logger is not None else get_module_logger()

    def errlog(fmt: str, *args: Any) -> None:
        try:
            message = fmt % args if args else fmt
        except (TypeError, ValueError):
            message = " ".join([fmt, *map(repr, args)])
        getattr(target, level)(DIAGNOSTIC_EVENT, message=message)

    return errlog
