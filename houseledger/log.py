"""Structured logging setup.

Console output for users goes through rich in the command layer; this module
only covers diagnostic events. Events are routed through the standard logging
module under the "houseledger" logger, which carries a NullHandler, so library
callers see nothing until they configure logging themselves or the CLI calls
configure_logging.
"""

import logging
import sys

import structlog

logging.getLogger("houseledger").addHandler(logging.NullHandler())


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog on top of the standard logging module.

    Args:
        verbose: Emit debug events to stderr. Otherwise only warnings and
            errors are shown.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)
    _configure_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# Route events through stdlib logging unless the embedding application has set up structlog
if not structlog.is_configured():
    _configure_structlog()
