#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem output helpers for the file generators.

Functions:
    write_text: Write text, creating parent directories
    copy_file: Copy a file, creating parent directories
    file_stem: File name without its last extension
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shutil
from pathlib import Path


def write_text(path: str | Path, text: str) -> Path:
    """Write text to path (UTF-8), creating missing parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def copy_file(source: str | Path, destination: str | Path) -> Path:
    """
    Copy a file, creating missing parent directories.

    Raises:
        FileNotFoundError: If the source does not exist
    """
    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)
    return destination


def file_stem(file_name: str) -> str:
    """
    Return the name before the last extension.

    Examples:
        >>> file_stem("0190b6a4-8f2e-7c1a-9d3b-5e6f7a8b9c0d.md")
        '0190b6a4-8f2e-7c1a-9d3b-5e6f7a8b9c0d'
        >>> file_stem("hello.generate.md")
        'hello.generate'
    """
    return Path(file_name).stem
