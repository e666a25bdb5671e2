#!/usr/bin/env python3
"""
base.py
-------------------
File references and the entity discriminant.

A ``FileReference`` is the only shape one persisted record uses to point at
another: ``{fileName, folderPath, fullPath}``. ``EntityKind`` tags rich
entities once a deserializer has classified a plain payload, so downstream
stages dispatch on the tag instead of probing types.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class EntityKind(Enum):
    """Discriminant carried by every rich metadata entity."""

    COMPREHENSIVE = "comprehensive"
    PAGE = "page"
    POST = "post"


def join_path(folder_path: str, file_name: str) -> str:
    """Join folder and file name the way every entity derives ``fullPath``."""
    return os.path.join(folder_path, file_name)


@dataclass(frozen=True)
class FileReference:
    """
    Minimal pointer to a file-addressable entity.

    Attributes:
        file_name: Published file name
        folder_path: Folder the file lives in (root-relative)
    """

    file_name: str
    folder_path: str

    @property
    def full_path(self) -> str:
        return join_path(self.folder_path, self.file_name)

    @classmethod
    def of(cls, entity: Any) -> FileReference:
        """
        Reduce any file-addressable object to its reference.

        Args:
            entity: Object with ``file_name`` and ``folder_path`` attributes

        Returns:
            A new reference holding only the file location
        """
        return cls(file_name=entity.file_name, folder_path=entity.folder_path)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional[FileReference]:
        """Build a reference from persisted JSON; ``None`` stays ``None``."""
        if not data:
            return None
        return cls(
            file_name=str(data.get("fileName", "")),
            folder_path=str(data.get("folderPath", "")),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "fileName": self.file_name,
            "folderPath": self.folder_path,
            "fullPath": self.full_path,
        }


def reference_to_dict(reference: Optional[FileReference]) -> Optional[Dict[str, str]]:
    """Serialize an optional reference."""
    return reference.to_dict() if reference is not None else None
