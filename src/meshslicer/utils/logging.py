"""Logging utilities for Meshslicer."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class SliceStats:
    """Statistics from a slicing session."""

    cuts_applied: int = 0
    cuts_discarded: int = 0
    fragments_split: int = 0
    failure_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    slice_timings_ms: list[float] = field(default_factory=list)

    @property
    def avg_slice_time_ms(self) -> float | None:
        """Average time per add_slice call."""
        if not self.slice_timings_ms:
            return None
        return sum(self.slice_timings_ms) / len(self.slice_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"meshslicer_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("meshslicer")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class SliceLogger:
    """Logger for tracking slicing outcomes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SliceStats()

    def log_cut_start(self, cut: str, fragment_count: int) -> None:
        """Log start of a cut over the current fragments."""
        self._logger.debug("Applying cut", cut=cut, fragments=fragment_count)

    def log_fragment_split(self, handle: int, left_count: int, right_count: int, new_handle: int) -> None:
        """Log a successful fragment split."""
        self._logger.info(
            "Fragment split",
            fragment=handle,
            new_fragment=new_handle,
            left_vertices=left_count,
            right_vertices=right_count,
        )
        self._stats.fragments_split += 1

    def log_fragment_failure(self, handle: int, error: Exception) -> None:
        """Log a fragment that could not be split by the current cut."""
        self._logger.warning(
            "Fragment not split",
            fragment=handle,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failure_count += 1
        self._stats.errors.append((handle, str(error)))

    def log_cut_complete(self, split_count: int, duration_ms: float, kept: bool = True) -> None:
        """Log the end of a cut.

        Args:
            split_count: Fragments split by the cut
            duration_ms: Time spent on the cut
            kept: Whether the cut stays in the slice history
        """
        if kept:
            self._stats.cuts_applied += 1
        else:
            self._stats.cuts_discarded += 1
        self._stats.slice_timings_ms.append(duration_ms)
        self._logger.debug(
            "Cut complete",
            split=split_count,
            kept=kept,
            duration_ms=round(duration_ms, 3),
        )

    @property
    def stats(self) -> SliceStats:
        """Get current slicing statistics."""
        return self._stats
