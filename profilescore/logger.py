"""
Structured logging for profilescore.

Provides centralized logging with console and optional file output,
plus batch metrics for scoring runs.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json

from .env import Settings


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for scoring batches.
    """

    def __init__(
        self,
        name: str = "profilescore",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files; no file is written when None
            enable_file: Write logs to file (requires log_dir)
            enable_console: Output logs to stderr
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()  # Remove existing handlers

        self.metrics = {
            "profiles_attempted": 0,
            "profiles_scored": 0,
            "profiles_failed": 0,
            "errors_by_type": {},
            "grade_distribution": {},
        }

        # Console goes to stderr so JSON on stdout stays parseable
        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file and log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"profilescore_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)
            # File captures DEBUG even when the console is quieter
            self.logger.setLevel(logging.DEBUG)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if not self.logger.isEnabledFor(level):
            return
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str, ensure_ascii=False)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_profile_attempt(self):
        self.metrics["profiles_attempted"] += 1

    def record_profile_scored(self, grade: str):
        """Record a successfully scored profile and its grade."""
        self.metrics["profiles_scored"] += 1
        distribution = self.metrics["grade_distribution"]
        distribution[grade] = distribution.get(grade, 0) + 1

    def record_profile_failure(self, error_type: str):
        """Record a profile that could not be scored (unreadable input etc.)."""
        self.metrics["profiles_failed"] += 1
        if error_type not in self.metrics["errors_by_type"]:
            self.metrics["errors_by_type"][error_type] = 0
        self.metrics["errors_by_type"][error_type] += 1

    def get_metrics(self) -> dict:
        """Return current metrics with the success rate filled in."""
        metrics_copy = dict(self.metrics)
        metrics_copy["errors_by_type"] = dict(self.metrics["errors_by_type"])
        metrics_copy["grade_distribution"] = dict(self.metrics["grade_distribution"])
        attempts = metrics_copy["profiles_attempted"]
        metrics_copy["success_rate"] = (
            round(metrics_copy["profiles_scored"] / attempts, 3) if attempts > 0 else 0.0
        )
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        total_attempts = metrics["profiles_attempted"]
        total_scored = metrics["profiles_scored"]
        overall_rate = round(metrics["success_rate"] * 100, 1)

        self.info("=== Scoring Session Metrics ===")
        self.info(f"Profiles: {total_scored}/{total_attempts} ({overall_rate}% scored)")

        if metrics["grade_distribution"]:
            self.info("Grades:")
            for grade, count in sorted(metrics["grade_distribution"].items()):
                self.info(f"  {grade}: {count}")

        if metrics["errors_by_type"]:
            self.info("Error Types:")
            for error_type, count in metrics["errors_by_type"].items():
                self.info(f"  {error_type}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "profilescore",
    level: Optional[str] = None,
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Level and log directory default to PROFILESCORE_LOG_LEVEL and
    PROFILESCORE_LOG_DIR.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        settings = Settings.from_env()
        kwargs.setdefault("log_dir", settings.log_dir)
        _global_logger = StructuredLogger(name=name, level=level or settings.log_level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
