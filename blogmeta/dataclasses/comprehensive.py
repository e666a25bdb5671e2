#!/usr/bin/env python3
"""
comprehensive.py
-------------------
Global summary of the published blog.

There is exactly one comprehensive record per output tree. Its counters are
cumulative: every run adds the posts and pages it created and never
subtracts. Category and page lists are kept most recent first so the
front-end can render the head without sorting.

Persisted shape (``comprehensive.json``)::

    {
        "categories": {"<name>": {"count", "name", "postFilePaths"}},
        "categoryCount": int,
        "latestCategories": [str],
        "latestPage": FileReference | null,
        "latestPost": FileReference | null,
        "pageCount": int,
        "pages": [FileReference],
        "postCount": int
    }
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping, Optional

# --- Local imports ---
from blogmeta.dataclasses.base import EntityKind, FileReference, reference_to_dict
from blogmeta.dataclasses.category import Category


@dataclass
class Comprehensive:
    """
    Comprehensive summary of categories, counters and latest pointers.

    Attributes:
        categories: Category name -> Category
        latest_categories: Categories of the most recent post, in order
        latest_page: Reference to the most recent page
        latest_post: Reference to the most recent post
        page_count: Pages published so far
        pages: Page references, most recent first
        post_count: Posts published so far
    """

    kind: ClassVar[EntityKind] = EntityKind.COMPREHENSIVE

    categories: Dict[str, Category] = field(default_factory=dict)
    latest_categories: List[str] = field(default_factory=list)
    latest_page: Optional[FileReference] = None
    latest_post: Optional[FileReference] = None
    page_count: int = 0
    pages: List[FileReference] = field(default_factory=list)
    post_count: int = 0

    @property
    def category_count(self) -> int:
        return len(self.categories)

    @classmethod
    def with_default(cls) -> Comprehensive:
        """Return an empty summary for a blog that has never been generated."""
        return cls()

    # ---- Mutation ----
    def put_category(self, name: str, reference: FileReference) -> Category:
        """
        File a post under a category, creating the category when new.

        Args:
            name: Category name
            reference: Post reference, inserted ahead of older ones

        Returns:
            The updated category
        """
        category = self.categories.get(name)
        if category is None:
            category = Category.with_default(name)
            self.categories[name] = category
        category.add_post_file_path(reference)
        return category

    def add_page(self, reference: FileReference) -> None:
        """Insert a page reference at the head unless it already is the head."""
        if self.pages and self.pages[0] == reference:
            return
        self.pages.insert(0, reference)

    def update_latest_post(self, reference: FileReference, categories: List[str]) -> None:
        self.latest_post = reference
        self.latest_categories = list(categories)

    def update_latest_page(self, reference: FileReference) -> None:
        self.latest_page = reference

    # ---- Persistence ----
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Comprehensive:
        """Wrap a persisted or deserialized dictionary."""
        categories = {
            name: Category.from_dict(name, value or {})
            for name, value in (data.get("categories") or {}).items()
        }
        pages = [FileReference.from_dict(item) for item in data.get("pages") or []]
        return cls(
            categories=categories,
            latest_categories=[str(c) for c in data.get("latestCategories") or []],
            latest_page=FileReference.from_dict(data.get("latestPage")),
            latest_post=FileReference.from_dict(data.get("latestPost")),
            page_count=int(data.get("pageCount") or 0),
            pages=[p for p in pages if p is not None],
            post_count=int(data.get("postCount") or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": {
                name: category.to_dict() for name, category in self.categories.items()
            },
            "categoryCount": self.category_count,
            "latestCategories": list(self.latest_categories),
            "latestPage": reference_to_dict(self.latest_page),
            "latestPost": reference_to_dict(self.latest_post),
            "pageCount": self.page_count,
            "pages": [p.to_dict() for p in self.pages],
            "postCount": self.post_count,
        }
