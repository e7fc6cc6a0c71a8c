"""Logging utilities for axisthin."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging call
_handlers: list[logging.Handler] = []


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


@dataclass
class SessionStats:
    """Statistics from a thinning session."""

    shape_changes: int = 0
    thin_updates: int = 0
    erode_updates: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
    write_file: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (auto-generated if None and write_file)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output
        write_file: Write a log file even when no path is given

    Returns:
        Configured structlog logger

    Raises:
        ValueError: If a level name is unknown
    """
    console_level_no = _level(console_level)
    file_level_no = _level(file_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    if log_file is None and write_file:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"axisthin_{timestamp}.log")

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level_no)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level_no)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _handlers.append(console_handler)

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

    logger = structlog.get_logger("axisthin")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class SessionLogger:
    """Logger for tracking thinning session events and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("axisthin")
        self._stats = SessionStats()

    def log_shape_changed(self, loop_count: int, node_count: int, max_radius: float) -> None:
        """Log a rebuilt transform forest."""
        self._logger.info(
            "Shape changed",
            loops=loop_count,
            nodes=node_count,
            max_radius=round(max_radius, 4),
        )
        self._stats.shape_changes += 1

    def log_thinned(self, fraction: float, path_length: int) -> None:
        """Log a recomputed thinned path."""
        self._logger.debug("Path thinned", fraction=fraction, chars=path_length)
        self._stats.thin_updates += 1

    def log_eroded(self, fraction: float, radius: float) -> None:
        """Log a recomputed erosion radius."""
        self._logger.debug("Erosion radius updated", fraction=fraction, radius=radius)
        self._stats.erode_updates += 1

    def log_error(self, stage: str, error: Exception) -> None:
        """Log a failed recomputation."""
        self._logger.error(
            "Recomputation failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((stage, str(error)))

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._stats
