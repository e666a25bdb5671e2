#!/usr/bin/env python3
"""
category.py
-------------------
Category index: the posts filed under one category name.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

# --- Local imports ---
from blogmeta.dataclasses.base import FileReference


@dataclass
class Category:
    """
    Posts filed under one category, most recent first.

    ``count`` is derived from ``post_file_paths`` so the two never drift.

    Attributes:
        name: Category name (unique key in the comprehensive index)
        post_file_paths: References to the posts, most recent first
    """

    name: str
    post_file_paths: List[FileReference] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.post_file_paths)

    def add_post_file_path(self, reference: FileReference) -> None:
        """Insert a post reference ahead of the existing ones."""
        self.post_file_paths.insert(0, reference)

    @classmethod
    def with_default(cls, name: str) -> Category:
        """Return an empty category."""
        return cls(name=name)

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> Category:
        """
        Rebuild a category from persisted JSON.

        The persisted ``count`` is ignored; it is recomputed from the list.
        """
        references = [
            FileReference.from_dict(item) for item in data.get("postFilePaths") or []
        ]
        return cls(
            name=str(data.get("name") or name),
            post_file_paths=[r for r in references if r is not None],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "name": self.name,
            "postFilePaths": [r.to_dict() for r in self.post_file_paths],
        }
