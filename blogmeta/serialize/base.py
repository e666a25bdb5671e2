#!/usr/bin/env python3
"""
base.py
-------------------
Deserializer and serializer base classes.

A deserializer claims the values it understands through ``supports`` and
converts them in ``deserialize``. A ``DeserializerChain`` threads one value
through every deserializer left to right, each applied only when it claims
the value produced by the previous step.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from typing import Any, List, Sequence


class Deserializer(ABC):
    """Base class for one step of the deserializer chain."""

    @abstractmethod
    def supports(self, value: Any) -> bool:
        """Check whether this step understands ``value``."""
        pass

    @abstractmethod
    def deserialize(self, value: Any) -> Any:
        """Convert ``value``; only called when ``supports`` returned True."""
        pass


class Serializer(ABC):
    """Base class for rendering an entity to text."""

    @abstractmethod
    def supports(self, value: Any) -> bool:
        pass

    @abstractmethod
    def serialize(self, value: Any) -> str:
        pass


class DeserializerChain:
    """Ordered deserializers applied in sequence."""

    def __init__(self, deserializers: Sequence[Deserializer]) -> None:
        self.deserializers: List[Deserializer] = list(deserializers)

    def deserialize(self, value: Any) -> Any:
        for deserializer in self.deserializers:
            if deserializer.supports(value):
                value = deserializer.deserialize(value)
        return value
