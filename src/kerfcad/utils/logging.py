"""Logging utilities for kerfcad."""

import logging
from collections import Counter
from dataclasses import dataclass, field

import structlog

from kerfcad.config import LoggingConfig

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
]


@dataclass
class DrawingStats:
    """Statistics for one drawing."""

    features: Counter[str] = field(default_factory=Counter)
    breaks: int = 0
    rotations: int = 0
    merges: int = 0
    exports: int = 0

    @property
    def feature_count(self) -> int:
        """Total number of generator calls."""
        return sum(self.features.values())


def configure_logging(
    config: LoggingConfig | None = None,
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        config: Log file and levels, usually ``settings.logging``
            (defaults to console-only at WARNING)
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    config = config or LoggingConfig()
    log_file = config.log_file

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, config.file_log_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, config.log_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("kerfcad")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=config.file_log_level,
    )

    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger that emits through the stdlib logger ``name``.

    Nothing is printed unless the application installs handlers, for
    example through configure_logging.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


class DrawingLogger:
    """Logger for tracking drawing operations and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = DrawingStats()

    def log_feature(self, kind: str, points: int, cursor: tuple[float, float]) -> None:
        """Log a generator call."""
        self._logger.debug(
            "Feature drawn",
            feature=kind,
            points=points,
            cursor_x=round(cursor[0], 4),
            cursor_y=round(cursor[1], 4),
        )
        self._stats.features[kind] += 1

    def log_break(self, index: int) -> None:
        """Log a pen-up break."""
        self._logger.debug("Pen up", index=index)
        self._stats.breaks += 1

    def log_rotation(self, angle: float, pivot_index: int, affected: int) -> None:
        """Log a retroactive rotation."""
        self._logger.debug(
            "Rotated tail",
            angle=round(angle, 6),
            pivot_index=pivot_index,
            points=affected,
        )
        self._stats.rotations += 1

    def log_merge(self, points: int, offset: tuple[float, float]) -> None:
        """Log merged drawing content."""
        self._logger.debug("Merged drawing", points=points, offset_x=offset[0], offset_y=offset[1])
        self._stats.merges += 1

    def log_export(self, path: str, subpaths: int) -> None:
        """Log a completed export."""
        self._logger.info("Drawing exported", path=path, subpaths=subpaths)
        self._stats.exports += 1

    def log_export_error(self, path: str, error: Exception) -> None:
        """Log a failed export."""
        self._logger.error(
            "Drawing export failed",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> DrawingStats:
        """Get current drawing statistics."""
        return self._stats
