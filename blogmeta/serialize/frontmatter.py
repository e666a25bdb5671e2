#!/usr/bin/env python3
"""
frontmatter.py
-------------------
Text deserializers: YAML front-matter and JSON objects.

Both operate on decoded file text and produce plain dictionaries for the
entity deserializers that follow in the chain.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from typing import Any

# --- Third party imports ---
import yaml

# --- Local imports ---
from blogmeta.core.exceptions import FrontMatterError
from blogmeta.serialize.base import Deserializer
from blogmeta.utils.md import has_frontmatter, split_frontmatter


class FrontMatterDeserializer(Deserializer):
    """
    Parse the ``---`` delimited YAML block at the top of a Markdown file.

    The body after the block is not returned; the generator only needs the
    metadata and copies the source file as-is.
    """

    def supports(self, value: Any) -> bool:
        return isinstance(value, str) and has_frontmatter(value)

    def deserialize(self, value: str) -> Any:
        """
        Parse the front-matter block.

        Raises:
            FrontMatterError: If the block is not valid YAML
        """
        frontmatter, _ = split_frontmatter(value)
        try:
            data = yaml.safe_load(frontmatter)
        except yaml.YAMLError as e:
            raise FrontMatterError(f"Invalid YAML front-matter: {e}") from e
        return {} if data is None else data


class ObjectDeserializer(Deserializer):
    """Parse text whose trimmed form is a ``{...}`` JSON object."""

    def supports(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        trimmed = value.strip()
        return trimmed.startswith("{") and trimmed.endswith("}")

    def deserialize(self, value: str) -> Any:
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise FrontMatterError(f"Invalid JSON object: {e}") from e
