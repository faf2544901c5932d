"""Logging utilities for Sketchshape."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_NAME = "sketchshape"


@dataclass
class BatchStats:
    """Statistics from a batch classification run."""

    processed_count: int = 0
    error_count: int = 0
    cancelled_count: int = 0
    was_cancelled: bool = False
    shape_counts: Counter[str] = field(default_factory=Counter)
    errors: list[tuple[str, str]] = field(default_factory=list)
    timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_time_ms(self) -> float | None:
        """Average per-image classification time."""
        if not self.timings_ms:
            return None
        return sum(self.timings_ms) / len(self.timings_ms)

    @property
    def min_time_ms(self) -> float | None:
        """Fastest per-image classification time."""
        return min(self.timings_ms) if self.timings_ms else None

    @property
    def max_time_ms(self) -> float | None:
        """Slowest per-image classification time."""
        return max(self.timings_ms) if self.timings_ms else None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in [h for h in root_logger.handlers if h.get_name() == _HANDLER_NAME]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("sketchshape")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class BatchLogger:
    """Logger for tracking batch classification progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BatchStats()

    def log_image_start(self, image: str) -> None:
        """Log start of image classification."""
        self._logger.debug("Classifying image", image=image)

    def log_image_complete(
        self,
        image: str,
        shape: str,
        confidence: float,
        duration_ms: float,
    ) -> None:
        """Log successful image classification."""
        self._logger.info(
            "Image classified",
            image=image,
            shape=shape,
            confidence=round(confidence, 3),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.shape_counts[shape] += 1
        self._stats.timings_ms.append(duration_ms)

    def log_image_error(
        self,
        image: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log image classification error."""
        self._logger.error(
            "Image classification failed",
            image=image,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((image, str(error)))

    @property
    def stats(self) -> BatchStats:
        """Get current batch statistics."""
        return self._stats
