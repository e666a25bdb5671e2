#!/usr/bin/env python3
"""
post.py
-------------------
Post metadata read from a Markdown source's YAML front-matter.

The same record is what a page lists for each of its posts: ``to_dict``
renders the post card (title, summary, thumbnail, categories, timestamp)
with its neighbours as file references.

Front-matter keys the record does not model are kept in ``extra`` and
written back with it.

Timestamps are stored in one canonical ISO form (``T`` separator), whether
YAML parsed them into datetimes or they were quoted strings, so string
order and time order agree.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple

# --- Local imports ---
from blogmeta.dataclasses.base import (
    EntityKind,
    FileReference,
    join_path,
    reference_to_dict,
)
from blogmeta.dataclasses.thumbnail import Thumbnail

RECORD_KEYS = (
    "categories",
    "fileName",
    "folderPath",
    "fullPath",
    "nextPost",
    "previousPost",
    "summation",
    "thumbnail",
    "title",
    "writeDateTime",
)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp written as a datetime, a date or an ISO string.

    Returns:
        The parsed datetime, or None when the value is not a timestamp

    Examples:
        >>> parse_timestamp("2024-01-15 11:00:00")
        datetime.datetime(2024, 1, 15, 11, 0)
        >>> parse_timestamp("yesterday") is None
        True
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def normalize_timestamp(value: Any) -> Any:
    """Render any parseable timestamp in canonical ISO form; leave the rest untouched."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.isoformat()


def timestamp_sort_key(value: Any) -> Tuple[int, datetime, str]:
    """
    Chronological sort key.

    Offset-aware timestamps compare in UTC. Values that are not timestamps
    sort before every real timestamp, by their text.
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return (0, datetime.min, str(value or ""))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return (1, parsed, "")


def _ordered_unique(values: List[Any]) -> List[str]:
    seen: Dict[str, None] = {}
    for value in values:
        seen.setdefault(str(value), None)
    return list(seen)


@dataclass
class Post:
    """
    Metadata of one published post.

    Attributes:
        file_name: Published name (``<uuid7><ext>``)
        original_file_name: Name of the authored source file (not persisted)
        folder_path: Folder the post is published in (root-relative)
        categories: Category names, in author order, without duplicates
        summation: Short summary
        thumbnail: Card image
        title: Post title
        write_date_time: Canonical ISO timestamp of authorship
        previous_post: Older neighbour
        next_post: Newer neighbour
        extra: Other front-matter keys, in source order
    """

    kind: ClassVar[EntityKind] = EntityKind.POST

    title: str = ""
    write_date_time: str = ""
    summation: str = ""
    categories: List[str] = field(default_factory=list)
    thumbnail: Thumbnail = field(default_factory=Thumbnail)
    file_name: str = ""
    original_file_name: str = ""
    folder_path: str = ""
    previous_post: Optional[FileReference] = None
    next_post: Optional[FileReference] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def full_path(self) -> str:
        return join_path(self.folder_path, self.file_name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Post:
        """Wrap front-matter or a page's post record."""
        return cls(
            title=str(data.get("title") or ""),
            write_date_time=str(normalize_timestamp(data.get("writeDateTime")) or ""),
            summation=str(data.get("summation") or ""),
            categories=_ordered_unique(list(data.get("categories") or [])),
            thumbnail=Thumbnail.from_dict(data.get("thumbnail")),
            file_name=str(data.get("fileName") or ""),
            folder_path=str(data.get("folderPath") or ""),
            previous_post=FileReference.from_dict(data.get("previousPost")),
            next_post=FileReference.from_dict(data.get("nextPost")),
            extra={
                key: value for key, value in data.items()
                if key not in RECORD_KEYS and key != "originalFileName"
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render the post card a page lists; neighbours are references only."""
        record = dict(self.extra)
        record.update({
            "categories": list(self.categories),
            "fileName": self.file_name,
            "folderPath": self.folder_path,
            "fullPath": self.full_path,
            "nextPost": reference_to_dict(self.next_post),
            "previousPost": reference_to_dict(self.previous_post),
            "summation": self.summation,
            "thumbnail": self.thumbnail.to_dict(),
            "title": self.title,
            "writeDateTime": self.write_date_time,
        })
        return record
