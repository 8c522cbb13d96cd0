"""Logging utilities for Revealcover."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Root handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class CoveringStats:
    """Statistics accumulated over covering requests."""

    request_count: int = 0
    polygon_count: int = 0
    empty_count: int = 0
    total_duration_ms: float = 0.0

    @property
    def avg_duration_ms(self) -> float:
        """Average request duration."""
        if self.request_count == 0:
            return 0.0
        return self.total_duration_ms / self.request_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by an earlier call are removed and closed first, so
    the function can be called once per command or test.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

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
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("revealcover")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class CoveringLogger:
    """Logger for covering requests and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CoveringStats()

    def log_request(self, kind: str, count: int, width: float, height: float) -> None:
        """Log start of a covering request."""
        self._logger.debug(
            "Covering requested", kind=kind, count=count, width=width, height=height
        )

    def log_complete(self, kind: str, polygons: int, duration_ms: float) -> None:
        """Log a finished covering request."""
        self._logger.info(
            "Covering generated",
            kind=kind,
            polygons=polygons,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.request_count += 1
        self._stats.polygon_count += polygons
        self._stats.total_duration_ms += duration_ms
        if polygons == 0:
            self._stats.empty_count += 1

    def log_rejected(self, error: Exception) -> None:
        """Log a request rejected for invalid input."""
        self._logger.warning(
            "Covering request rejected",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> CoveringStats:
        """Get accumulated statistics."""
        return self._stats
