"""
Logging Configuration

Configurable logging levels, optional rotating log file output, progress
indicators for the slide protocol, and helpers for logging configuration
and step timings of a presentation run.
"""

import logging
import logging.handlers
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Dict, Any


SENSITIVE_MARKERS = ("key", "password", "secret", "token")


class ProgressIndicator:
    """
    Simple progress indicator for the slide-by-slide protocol run.

    Writes to stderr so that stdout stays reserved for command results.
    """

    def __init__(self, description: str, total_steps: Optional[int] = None, stream=None):
        self.description = description
        self.total_steps = total_steps
        self.current_step = 0
        self.start_time = time.time()
        self.stream = stream or sys.stderr

    def update(self, step: Optional[int] = None, message: Optional[str] = None):
        """Update progress indicator."""
        if step is not None:
            self.current_step = step
        else:
            self.current_step += 1

        elapsed = time.time() - self.start_time

        if self.total_steps:
            percentage = (self.current_step / self.total_steps) * 100
            status = f"{self._create_progress_bar(percentage)} {percentage:.1f}% ({self.current_step}/{self.total_steps})"
        else:
            status = f"Step {self.current_step}"

        display_message = message or self.description
        print(f"\r{display_message} {status} [{elapsed:.1f}s]", end="", file=self.stream, flush=True)

    def finish(self, message: Optional[str] = None):
        """Complete the progress indicator."""
        elapsed = time.time() - self.start_time
        final_message = message or f"{self.description} completed"
        print(f"\r{final_message} [OK] [{elapsed:.1f}s]", file=self.stream)

    def _create_progress_bar(self, percentage: float, width: int = 20) -> str:
        """Create a text-based progress bar."""
        filled = int(width * percentage / 100)
        bar = "#" * filled + "-" * (width - filled)
        return f"[{bar}]"


class LoggingConfig:
    """
    Centralized logging configuration for the presenter.

    Console output goes to stderr so that stdout stays reserved for
    command results (share links, JSON dumps).
    """

    def __init__(self):
        self._configured = False
        self._log_file_handler: Optional[logging.Handler] = None
        self._console_handler: Optional[logging.Handler] = None

    def configure_logging(
        self,
        level: str = "info",
        log_file: Optional[str] = None,
        include_timestamps: bool = True,
        max_log_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        force: bool = False
    ) -> None:
        """
        Configure logging for the application.

        Args:
            level: Logging level (debug, info, warning, error)
            log_file: Optional log file path
            include_timestamps: Whether to include timestamps in log messages
            max_log_file_size: Maximum log file size before rotation
            backup_count: Number of backup log files to keep
            force: Reconfigure even if logging was already configured
        """
        if self._configured and not force:
            return

        log_level = self._get_log_level(level)
        debug_mode = log_level == logging.DEBUG

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers.clear()

        self._console_handler = logging.StreamHandler(sys.stderr)
        self._console_handler.setLevel(log_level)
        self._console_handler.setFormatter(
            self._create_console_formatter(include_timestamps, debug_mode)
        )
        root_logger.addHandler(self._console_handler)

        if log_file:
            self._configure_file_logging(log_file, log_level, max_log_file_size, backup_count)

        self._configured = True

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={level}, file={log_file}")

    def _get_log_level(self, level_str: str) -> int:
        """Convert string log level to logging constant."""
        level_map = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR
        }
        return level_map.get(level_str.lower(), logging.INFO)

    def _create_console_formatter(
        self,
        include_timestamps: bool,
        debug_mode: bool
    ) -> logging.Formatter:
        """Create formatter for console output."""
        parts = []

        if include_timestamps:
            parts.append("%(asctime)s")

        if debug_mode:
            parts.append("%(name)s")

        parts.extend(["%(levelname)s", "%(message)s"])

        return logging.Formatter(
            " - ".join(parts),
            datefmt="%H:%M:%S" if not debug_mode else "%Y-%m-%d %H:%M:%S"
        )

    def _configure_file_logging(
        self,
        log_file: str,
        log_level: int,
        max_size: int,
        backup_count: int
    ) -> None:
        """Configure file logging with rotation."""
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)

            self._log_file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_size,
                backupCount=backup_count,
                encoding='utf-8'
            )
            self._log_file_handler.setLevel(log_level)
            self._log_file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logging.getLogger().addHandler(self._log_file_handler)

        except OSError as e:
            # Console logging still works without the file
            logging.getLogger(__name__).warning(f"Failed to setup log file {log_file}: {e}")

    def log_configuration_details(self, config: Dict[str, Any]) -> None:
        """Log configuration details at debug level, masking secrets."""
        logger = logging.getLogger(__name__)

        if not logger.isEnabledFor(logging.DEBUG):
            return

        logger.debug("=== Configuration Details ===")
        for key, value in config.items():
            logger.debug(f"  {key}: {mask_value(key, value)}")
        logger.debug("=== End Configuration ===")

    def log_operation_timing(self, operation: str, duration: float) -> None:
        """Log operation timing information."""
        logger = logging.getLogger(__name__)

        if duration < 1.0:
            logger.debug(f"{operation} completed in {duration*1000:.0f}ms")
        else:
            logger.info(f"{operation} completed in {duration:.1f}s")

    @contextmanager
    def timed_operation(self, operation: str):
        """
        Context manager that logs how long the wrapped block took.

        Usage:
            with logging_config.timed_operation("Scrape webpage"):
                scraper.scrape(url)
        """
        start = time.time()
        yield
        self.log_operation_timing(operation, time.time() - start)

    @contextmanager
    def progress_context(self, description: str, total_steps: Optional[int] = None):
        """
        Context manager for progress reporting.

        Usage:
            with logging_config.progress_context("Building slides", 5) as progress:
                for slide in slides:
                    progress.update(message=f"Slide {slide}")
        """
        progress = ProgressIndicator(description, total_steps)
        try:
            yield progress
        except Exception as e:
            progress.finish(f"{description} failed: {e}")
            raise
        else:
            progress.finish()


def mask_value(key: str, value: Any) -> Any:
    """Mask a configuration value whose key names a secret."""
    if any(marker in key.lower() for marker in SENSITIVE_MARKERS):
        return "***MASKED***" if value else None
    return value


# Global logging configuration instance
logging_config = LoggingConfig()


def configure_logging(level: str = "info", log_file: Optional[str] = None, force: bool = False) -> None:
    """
    Convenience function to configure logging.

    Args:
        level: Logging level (debug, info, warning, error)
        log_file: Optional log file path
        force: Reconfigure even if already configured
    """
    logging_config.configure_logging(level=level, log_file=log_file, force=force)


def timed_operation(operation: str):
    """Convenience wrapper around LoggingConfig.timed_operation."""
    return logging_config.timed_operation(operation)


def get_progress_context(description: str, total_steps: Optional[int] = None):
    """
    Convenience function to get progress context.

    Args:
        description: Description of the operation
        total_steps: Total number of steps (if known)

    Returns:
        Progress context manager
    """
    return logging_config.progress_context(description, total_steps)
