#!/usr/bin/env python3
"""
entities.py
-------------------
Classify plain dictionaries into metadata entities, and render entities
back to JSON.

Classification is structural: a dictionary is a comprehensive summary, a
page or a post when it carries that entity's characteristic keys with the
expected value types. Wrapping keeps every key the dictionary already had.

Persisted JSON is indented with four spaces; values JSON cannot represent
(such as dates left in extra front-matter keys) are written as strings.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from typing import Any, Dict, Mapping, Tuple, Type

# --- Local imports ---
from blogmeta.core.exceptions import SerializationError
from blogmeta.dataclasses import Comprehensive, Page, Post
from blogmeta.dataclasses.post import normalize_timestamp
from blogmeta.serialize.base import Deserializer, Serializer

JSON_INDENT = 4

Shape = Dict[str, Tuple[Type, ...]]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _matches(value: Any, shape: Shape) -> bool:
    if not isinstance(value, Mapping):
        return False
    for key, types in shape.items():
        if key not in value:
            return False
        field_value = value[key]
        if types == (int,):
            if not _is_number(field_value):
                return False
        elif not isinstance(field_value, types):
            return False
    return True


class ComprehensiveDeserializer(Deserializer):
    """Recognise the comprehensive summary."""

    shape: Shape = {
        "categories": (dict,),
        "categoryCount": (int,),
        "latestCategories": (list,),
        "pageCount": (int,),
        "pages": (list,),
        "postCount": (int,),
    }

    def supports(self, value: Any) -> bool:
        return _matches(value, self.shape)

    def deserialize(self, value: Mapping[str, Any]) -> Comprehensive:
        return Comprehensive.from_dict(value)


class PageDeserializer(Deserializer):
    """Recognise a page."""

    shape: Shape = {
        "fileName": (str,),
        "folderPath": (str,),
        "posts": (list,),
    }

    def supports(self, value: Any) -> bool:
        return _matches(value, self.shape)

    def deserialize(self, value: Mapping[str, Any]) -> Page:
        return Page.from_dict(value)


class PostDeserializer(Deserializer):
    """
    Recognise post front-matter.

    YAML turns unquoted timestamps into ``datetime`` objects; those are
    rendered back to ISO strings before matching.
    """

    shape: Shape = {
        "categories": (list,),
        "summation": (str,),
        "thumbnail": (dict,),
        "title": (str,),
        "writeDateTime": (str,),
    }

    def supports(self, value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        normalized = dict(value)
        if "writeDateTime" in normalized:
            normalized["writeDateTime"] = normalize_timestamp(normalized["writeDateTime"])
        return _matches(normalized, self.shape)

    def deserialize(self, value: Mapping[str, Any]) -> Post:
        return Post.from_dict(value)


class _EntitySerializer(Serializer):
    entity_type: Type = object

    def supports(self, value: Any) -> bool:
        return isinstance(value, self.entity_type)

    def serialize(self, value: Any) -> str:
        """
        Render an entity as indented JSON.

        Raises:
            SerializationError: If the value is not this serializer's entity
        """
        if not self.supports(value):
            raise SerializationError(
                f"{type(self).__name__} cannot serialize {type(value).__name__}"
            )
        return json.dumps(value.to_dict(), indent=JSON_INDENT, ensure_ascii=False, default=str)


class ComprehensiveSerializer(_EntitySerializer):
    entity_type = Comprehensive


class PageSerializer(_EntitySerializer):
    entity_type = Page
