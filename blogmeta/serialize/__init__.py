#!/usr/bin/env python3
"""
Turn loaded file content into metadata entities and back into JSON.
"""
from blogmeta.serialize.base import Deserializer, DeserializerChain, Serializer
from blogmeta.serialize.entities import (
    ComprehensiveDeserializer,
    ComprehensiveSerializer,
    PageDeserializer,
    PageSerializer,
    PostDeserializer,
)
from blogmeta.serialize.frontmatter import FrontMatterDeserializer, ObjectDeserializer


def default_deserializer_chain() -> DeserializerChain:
    """Front-matter, JSON object, then comprehensive, page and post matching."""
    return DeserializerChain([
        FrontMatterDeserializer(),
        ObjectDeserializer(),
        ComprehensiveDeserializer(),
        PageDeserializer(),
        PostDeserializer(),
    ])


__all__ = [
    "ComprehensiveDeserializer",
    "ComprehensiveSerializer",
    "Deserializer",
    "DeserializerChain",
    "FrontMatterDeserializer",
    "ObjectDeserializer",
    "PageDeserializer",
    "PageSerializer",
    "PostDeserializer",
    "Serializer",
    "default_deserializer_chain",
]
