"""
Logging for clientip.

The library logger ('clientip') carries only a NullHandler until the
application calls configure_logging() or set_error_handler(). Resolver
modules log at DEBUG; middleware reports failures through log_error().

Example:
    import logging
    from clientip import configure_logging
    configure_logging(logging.DEBUG)
"""

import logging
from typing import Optional, Callable, Any

_root_logger = logging.getLogger('clientip')
_root_logger.addHandler(logging.NullHandler())
_root_logger.propagate = False

# Handler installed by configure_logging; foreign handlers (test capture
# handlers, handlers added by the host application) are not tracked.
_handler: Optional[logging.Handler] = None
_error_handler: Optional[Callable[[str, Exception, dict], None]] = None


def get_logger(name: str) -> logging.Logger:
    """Logger for a clientip module (pass __name__)."""
    return logging.getLogger(name)


def set_error_handler(handler: Optional[Callable[[str, Exception, dict], None]]) -> None:
    """
    Route errors reported by clientip to a callback.

    Args:
        handler: Callable(logger_name, exception, context_dict), or None to
            go back to the library logger
    """
    global _error_handler
    _error_handler = handler


def configure_logging(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Send clientip log records to `handler` (default: StreamHandler).

    Args:
        level: Logging level
        handler: Custom handler or None for StreamHandler
        format_string: Custom format string or None for default
    """
    global _handler
    _root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler()
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    handler.setFormatter(logging.Formatter(format_string))

    _handler = handler
    _root_logger.addHandler(handler)
    _root_logger.setLevel(level)
    _root_logger.propagate = False


def disable_logging() -> None:
    """Reset to the silent default and drop any error handler."""
    global _handler, _error_handler
    _handler = None
    _error_handler = None
    _root_logger.handlers.clear()
    _root_logger.addHandler(logging.NullHandler())
    _root_logger.setLevel(logging.NOTSET)
    _root_logger.propagate = False


def log_error(logger_name: str, exception: Exception, **context: Any) -> None:
    """
    Report an error through the custom handler, or the library logger.

    Args:
        logger_name: Name of the reporting module
        exception: Exception that occurred
        **context: Additional context information
    """
    if _error_handler:
        try:
            _error_handler(logger_name, exception, context)
        except Exception:
            # A broken handler must not break request processing
            _root_logger.debug(
                f"[{logger_name}] Error handler failed. Original error: {exception.__class__.__name__}: {exception}"
            )
    else:
        _root_logger.debug(
            f"[{logger_name}] {exception.__class__.__name__}: {exception}",
            extra=context,
        )


def is_logging_enabled() -> bool:
    """True once configure_logging() or set_error_handler() has been used."""
    return _error_handler is not None or _handler is not None
