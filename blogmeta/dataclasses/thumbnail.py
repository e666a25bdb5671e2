#!/usr/bin/env python3
"""
thumbnail.py
-------------------
Thumbnail value embedded in every post.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

# --- Local imports ---
from blogmeta.dataclasses.base import join_path


@dataclass(frozen=True)
class Thumbnail:
    """
    Image shown with a post card.

    Attributes:
        file_name: Image file name
        folder_path: Folder holding the image
        alternative_file_name: Fallback image file name
        explanatory_text: Alt text describing the image
    """

    file_name: str = ""
    folder_path: str = ""
    alternative_file_name: str = ""
    explanatory_text: str = ""

    @property
    def full_path(self) -> str:
        return join_path(self.folder_path, self.file_name)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Thumbnail:
        data = data or {}
        return cls(
            file_name=str(data.get("fileName") or ""),
            folder_path=str(data.get("folderPath") or ""),
            alternative_file_name=str(data.get("alternativeFileName") or ""),
            explanatory_text=str(data.get("explanatoryText") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "alternativeFileName": self.alternative_file_name,
            "explanatoryText": self.explanatory_text,
            "fileName": self.file_name,
            "folderPath": self.folder_path,
            "fullPath": self.full_path,
        }
