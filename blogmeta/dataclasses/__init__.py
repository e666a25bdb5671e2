#!/usr/bin/env python3
"""
Metadata entities persisted by the generator.

Every entity here is file-addressable. When one entity points at another it
stores a ``FileReference`` (file name, folder path, full path). The one
exception is a page, which lists its posts as full post records; their own
links are references, so records nest one level at most.
"""
from blogmeta.dataclasses.base import EntityKind, FileReference
from blogmeta.dataclasses.category import Category
from blogmeta.dataclasses.comprehensive import Comprehensive
from blogmeta.dataclasses.page import PAGE_CAPACITY, Page
from blogmeta.dataclasses.post import Post
from blogmeta.dataclasses.thumbnail import Thumbnail

__all__ = [
    "Category",
    "Comprehensive",
    "EntityKind",
    "FileReference",
    "PAGE_CAPACITY",
    "Page",
    "Post",
    "Thumbnail",
]
