#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for the blogmeta project.

Provides frontmatter detection and splitting for post sources. Parsing the
YAML itself is left to the frontmatter deserializer.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional, Tuple


def _frontmatter_bounds(lines: List[str]) -> Optional[int]:
    """Return the index of the closing ``---`` line, or None."""
    if not lines or lines[0].strip() != "---":
        return None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            return i
    return None


def has_frontmatter(content: str) -> bool:
    """Check whether content opens with a closed ``---`` delimited block."""
    return _frontmatter_bounds(content.lstrip("\ufeff").splitlines()) is not None


def split_frontmatter(content: str) -> Tuple[str, List[str]]:
    """
    Split markdown content into YAML frontmatter and body.

    Expected format:
        ---
        yaml: content
        ---

        Body content here...

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body_lines)
        - frontmatter_text: YAML content as string (empty if no frontmatter)
        - body_lines: List of body content lines

    Examples:
        >>> fm, body = split_frontmatter("---\\ntitle: Hello\\n---\\n\\nBody text")
        >>> fm
        'title: Hello'
        >>> body
        ['Body text']
    """
    lines = content.lstrip("\ufeff").splitlines()
    frontmatter_end = _frontmatter_bounds(lines)

    if frontmatter_end is None:
        return "", lines

    frontmatter_lines = lines[1:frontmatter_end]
    body_lines = lines[frontmatter_end + 1 :]

    while body_lines and body_lines[0].strip() == "":
        body_lines.pop(0)

    return "\n".join(frontmatter_lines), body_lines
