#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Run logs for metadata generation.

One ``MetadataLogger`` serves a command for its whole run. It keeps two
rotating files in the log directory:

    <component>.log   every record of the run (DEBUG and up)
    errors.log        failures only, with their context and traceback

Warnings and errors are also echoed to the console. Pipeline stages never
hold a logger directly: they take ``Optional[MetadataLogger]`` and go
through ``safe_logger``, which substitutes a shared ``NullLogger``.

Record lines carry a tag and, when given, the details as JSON:

    INFO - Loaded continuation page: {"path": "...", "posts": 12}
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ERROR_LOG_NAME = "errors.log"


def _render(tag: str, message: str, details: Optional[Dict[str, Any]] = None) -> str:
    if details:
        return f"{tag} - {message}: {json.dumps(details, default=str)}"
    return f"{tag} - {message}"


def _cli_message(error: Exception) -> str:
    return f"❌ {type(error).__name__}: {error}"


class MetadataLogger:
    """
    Per-run logger with a rotating run log and a rotating error log.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Command the run belongs to; names the run log
        run_log: ``<component>.run`` logger feeding ``<component>.log``
        failure_log: ``<component>.failures`` logger feeding ``errors.log``
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "blogmeta",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Args:
            log_dir: Directory for the log files (created when missing)
            component_name: Command name, e.g. 'generate'
            max_bytes: Size at which a log file rotates
            backup_count: Rotated files kept per log
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.run_log = self._logger("run", logging.DEBUG, f"{component_name}.log")
        self.failure_log = self._logger("failures", logging.ERROR, ERROR_LOG_NAME)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.run_log.addHandler(console)

    def _logger(self, channel: str, level: int, file_name: str) -> logging.Logger:
        # Only this logger's handlers are replaced; other loggers are untouched.
        logger = logging.getLogger(f"{self.component_name}.{channel}")
        logger.setLevel(level)
        logger.handlers = []

        handler = RotatingFileHandler(
            self.log_dir / file_name,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Flush and detach every handler; the files can be read afterwards."""
        for logger in (self.run_log, self.failure_log):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a pipeline milestone (run start, files written, run complete)."""
        self.run_log.info(_render("OPERATION", operation, details or {}))

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """Record a failure in errors.log, with its context and the active traceback."""
        self.failure_log.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            pairs = ", ".join(f"{key}={value}" for key, value in context.items())
            self.failure_log.error(f"Context: {pairs}")
        self.failure_log.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.run_log.debug(_render("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.run_log.info(_render("INFO", message, details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.run_log.warning(_render("WARNING", message, details))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log a command failure and build the line shown to the user.

        Args:
            error: The failure
            context: Where it happened; defaults to ``{"source": "cli"}``
            show_traceback: Append the traceback to the returned text

        Returns:
            ``❌ <ErrorType>: <message>``, optionally followed by the traceback

        Examples:
            >>> logger.log_cli_error(LoadTimeoutError(0.001))
            '❌ LoadTimeoutError: Could not load within the configured 0.001 seconds; ...'
        """
        self.log_error(error, context or {"source": "cli"})
        message = _cli_message(error)
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


class NullLogger:
    """Stand-in used by ``safe_logger`` when a stage was given no logger."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Nothing is logged; the user-facing line is still built."""
        return _cli_message(error)


_null_logger = NullLogger()


def safe_logger(logger: Optional[MetadataLogger]) -> MetadataLogger:
    """
    Return ``logger``, or the shared ``NullLogger`` when it is None.

    Use:
        safe_logger(self.logger).log_debug("Linked posts", {"count": 3})
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    The failure is logged through ``ctx.obj["logger"]`` and its one-line
    form is printed to stderr; ``-v`` adds the traceback.

    Args:
        ctx: Click context whose ``obj`` holds ``logger`` and ``verbose``
        error: The failure
        operation: Command that failed, e.g. 'generate'
        additional_context: Extra keys for the error log (options file, root)
        exit_code: Process exit status

    Note:
        Never returns.
    """
    context = {"operation": operation, **(additional_context or {})}
    logger: Optional[MetadataLogger] = ctx.obj.get("logger")
    message = safe_logger(logger).log_cli_error(
        error, context, show_traceback=ctx.obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)
