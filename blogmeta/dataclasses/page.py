#!/usr/bin/env python3
"""
page.py
-------------------
Fixed-capacity bucket of post records.

Pages hold at most ``PAGE_CAPACITY`` post records, most recent first, and
form a doubly linked chain: an older page's ``next_page`` points at the
newer one and the newer page's ``previous_page`` points back.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping, Optional

# --- Local imports ---
from blogmeta.core.paths import PAGE_FILE_SUFFIX
from blogmeta.dataclasses.base import (
    EntityKind,
    FileReference,
    join_path,
    reference_to_dict,
)
from blogmeta.dataclasses.post import Post
from blogmeta.utils.identifiers import new_identifier

PAGE_CAPACITY = 50


@dataclass
class Page:
    """
    One page of post records.

    Attributes:
        file_name: ``<uuid7>.page.json``
        folder_path: Folder the page is published in (root-relative)
        posts: Post records, most recent first
        previous_page: Older neighbour
        next_page: Newer neighbour
    """

    kind: ClassVar[EntityKind] = EntityKind.PAGE

    file_name: str = ""
    folder_path: str = ""
    posts: List[Post] = field(default_factory=list)
    previous_page: Optional[FileReference] = None
    next_page: Optional[FileReference] = None

    @property
    def full_path(self) -> str:
        return join_path(self.folder_path, self.file_name)

    @property
    def post_count(self) -> int:
        return len(self.posts)

    @property
    def is_full(self) -> bool:
        return self.post_count >= PAGE_CAPACITY

    @classmethod
    def with_default(cls, folder_path: str) -> Page:
        """Mint an empty page with a fresh time-ordered file name."""
        return cls(file_name=f"{new_identifier()}{PAGE_FILE_SUFFIX}", folder_path=folder_path)

    def add_post(self, post: Post) -> None:
        """Insert ``post`` ahead of the existing ones."""
        self.posts.insert(0, post)

    def link_next(self, newer: Page) -> None:
        """Link this page and ``newer`` in both directions."""
        self.next_page = FileReference.of(newer)
        newer.previous_page = FileReference.of(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Page:
        posts = [
            Post.from_dict(item) for item in data.get("posts") or [] if isinstance(item, Mapping)
        ]
        return cls(
            file_name=str(data.get("fileName") or ""),
            folder_path=str(data.get("folderPath") or ""),
            posts=posts,
            previous_page=FileReference.from_dict(data.get("previousPage")),
            next_page=FileReference.from_dict(data.get("nextPage")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileName": self.file_name,
            "folderPath": self.folder_path,
            "fullPath": self.full_path,
            "nextPage": reference_to_dict(self.next_page),
            "postCount": self.post_count,
            "posts": [p.to_dict() for p in self.posts],
            "previousPage": reference_to_dict(self.previous_page),
        }
