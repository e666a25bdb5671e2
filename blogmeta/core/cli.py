#!/usr/bin/env python3
"""
cli.py
------
Logger setup and run statistics shared by blogmeta commands.

Functions:
    setup_logger: MetadataLogger writing under ``<log_dir>/operations``

Classes:
    OperationStats: Loaded files, recovered errors and elapsed time
    GenerateStats: Adds the generation counters

Usage:
    from blogmeta.core.cli import setup_logger, GenerateStats

    logger = setup_logger(log_dir, "generate")
    stats = GenerateStats()
    stats.posts_created += 1
    click.echo(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from blogmeta.core.logging_manager import MetadataLogger

OPERATIONS_DIR = "operations"


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> MetadataLogger:
    """
    Build the logger for one command run.

    Args:
        log_dir: Base log directory (``--log-dir``, default ``paths.LOG_DIR``)
        component_name: Command name; the run log is ``<component_name>.log``

    Returns:
        A MetadataLogger writing to ``<log_dir>/operations``
    """
    return MetadataLogger(Path(log_dir) / OPERATIONS_DIR, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Counters every command reports.

    Attributes:
        files_processed: Payloads loaded
        errors: Problems the run recovered from (e.g. files that are not
            metadata entities); a failure that stops the run is raised instead
        start_time: When the run started
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _elapsed: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, int) and value < 0:
                raise ValueError(f"{f.name} must be non-negative, got {value}")

    def duration(self) -> float:
        """Seconds since ``start_time``, frozen at the first call."""
        if self._elapsed is None:
            self._elapsed = (datetime.now() - self.start_time).total_seconds()
        return self._elapsed

    def summary(self) -> str:
        return f"{self.files_processed} files loaded, {self.errors} errors, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class GenerateStats(OperationStats):
    """
    Counters of a metadata generation run.

    Attributes:
        files_skipped: Descriptors no loader supported
        posts_created: New posts folded into the index
        pages_created: Pages opened by the run
        files_written: Summary and page files written plus post sources copied
    """
    files_skipped: int = 0
    posts_created: int = 0
    pages_created: int = 0
    files_written: int = 0

    def summary(self) -> str:
        parts = [
            f"{self.files_processed} files loaded",
            f"{self.posts_created} posts",
            f"{self.pages_created} pages",
            f"{self.files_written} files written",
        ]
        if self.files_skipped:
            parts.append(f"{self.files_skipped} skipped")
        if self.errors:
            parts.append(f"{self.errors} errors")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            files_skipped=self.files_skipped,
            posts_created=self.posts_created,
            pages_created=self.pages_created,
            files_written=self.files_written,
        )
        return data
