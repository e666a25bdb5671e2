#!/usr/bin/env python3
"""
creators.py
-------------------
The creator chain: discover, load and classify files in stages.

A chain holds an ordered list of creators and a cursor it owns. Calling
``chain(obj, context)`` invokes the next creator with ``(obj, context,
chain)``; the creator does its work and calls ``chain()`` again with its
output to hand over. Past the last creator ``chain()`` does nothing.

The default stage order loads the summary and the new post sources first,
then, once the summary names them, the continuation page and post:

    pre-context -> content -> object -> post-context -> content -> object

Classes:
    Creator: Base class for one stage
    ContextCreator: Produce descriptors from context factories
    ContentCreator: Load descriptors into FileObjects
    ObjectCreator: Deserialize FileObjects and feed post-processors
    SyncCreatorChain / AsyncCreatorChain: Drive the stages
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import asyncio
import inspect
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

# --- Local imports ---
from blogmeta.core.exceptions import ContentLoadError
from blogmeta.core.logging_manager import MetadataLogger, safe_logger
from blogmeta.loaders.file_loader import FileLoader, FileObject
from blogmeta.loaders.probe import FileDescriptor
from blogmeta.pipeline.context import RunContext
from blogmeta.pipeline.context_factories import (
    ContextFactory,
    post_context_factories,
    pre_context_factories,
)
from blogmeta.pipeline.processors import PostProcessor, default_post_processors
from blogmeta.serialize import DeserializerChain, default_deserializer_chain

Payload = Tuple[FileDescriptor, FileObject]


# ═══════════════════════════════════════════════════════════════════════════
# CHAINS
# ═══════════════════════════════════════════════════════════════════════════

class CreatorChain:
    """
    Ordered creators and the cursor that walks them.

    Attributes:
        creators: Stages in execution order
    """

    def __init__(self, creators: Sequence[Creator]) -> None:
        self.creators: List[Creator] = list(creators)
        self._cursor = 0

    @property
    def position(self) -> int:
        """Number of creators invoked so far."""
        return self._cursor

    def _advance(self) -> Optional[Creator]:
        if self._cursor >= len(self.creators):
            return None
        creator = self.creators[self._cursor]
        self._cursor += 1
        return creator


class SyncCreatorChain(CreatorChain):
    """Invoke each creator's ``create``."""

    def chain(self, obj: Any, context: RunContext) -> None:
        creator = self._advance()
        if creator is None:
            return
        creator.create(obj, context, self)


class AsyncCreatorChain(CreatorChain):
    """Await each creator's ``acreate``."""

    async def chain(self, obj: Any, context: RunContext) -> None:
        creator = self._advance()
        if creator is None:
            return
        await creator.acreate(obj, context, self)


# ═══════════════════════════════════════════════════════════════════════════
# CREATORS
# ═══════════════════════════════════════════════════════════════════════════

class Creator(ABC):
    """Base class for one stage of the chain."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        self.logger = logger

    @abstractmethod
    def create(self, obj: Any, context: RunContext, chain: SyncCreatorChain) -> None:
        pass

    @abstractmethod
    async def acreate(self, obj: Any, context: RunContext, chain: AsyncCreatorChain) -> None:
        pass


class ContextCreator(Creator):
    """
    Fan out over context factories and forward every descriptor they yield.

    A creator without factories ends the run's chain here.
    """

    def __init__(
        self, factories: Sequence[ContextFactory], logger: Optional[MetadataLogger] = None
    ) -> None:
        super().__init__(logger)
        self.factories = list(factories)

    def _descriptors(self, context: RunContext) -> List[FileDescriptor]:
        descriptors: List[FileDescriptor] = []
        for factory in self.factories:
            descriptors.extend(d for d in factory.create(context) if d is not None)
        return descriptors

    def create(self, obj: Any, context: RunContext, chain: SyncCreatorChain) -> None:
        if not self.factories:
            return
        chain.chain(self._descriptors(context), context)

    async def acreate(self, obj: Any, context: RunContext, chain: AsyncCreatorChain) -> None:
        if not self.factories:
            return
        await chain.chain(self._descriptors(context), context)


class ContentCreator(Creator):
    """Load every supported descriptor, keeping each payload with its descriptor."""

    def __init__(self, loader: FileLoader, logger: Optional[MetadataLogger] = None) -> None:
        super().__init__(logger)
        self.loader = loader

    def _supported(
        self, descriptors: Sequence[FileDescriptor], context: RunContext
    ) -> List[FileDescriptor]:
        supported = []
        for descriptor in descriptors:
            if self.loader.supports(descriptor):
                supported.append(descriptor)
                continue
            context.stats.files_skipped += 1
            safe_logger(self.logger).log_warning(
                "Skipping file the loader does not support",
                {"path": getattr(descriptor, "full_path", repr(descriptor))},
            )
        return supported

    def _checked(self, descriptor: FileDescriptor, result: Any) -> FileObject:
        if not isinstance(result, FileObject):
            raise ContentLoadError(
                f"Loader returned {type(result).__name__} for {descriptor.full_path}"
            )
        return result

    def create(self, obj: Any, context: RunContext, chain: SyncCreatorChain) -> None:
        payloads: List[Payload] = []
        for descriptor in self._supported(obj or [], context):
            result = self.loader.load(descriptor)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise ContentLoadError(
                    f"Loader returned an awaitable for {descriptor.full_path} "
                    "in a synchronous run"
                )
            payloads.append((descriptor, self._checked(descriptor, result)))

        context.stats.files_processed += len(payloads)
        chain.chain(payloads, context)

    async def _aload(self, descriptor: FileDescriptor) -> Payload:
        result = self.loader.load(descriptor)
        if inspect.isawaitable(result):
            result = await result
        return descriptor, self._checked(descriptor, result)

    async def acreate(self, obj: Any, context: RunContext, chain: AsyncCreatorChain) -> None:
        supported = self._supported(obj or [], context)
        payloads = list(await asyncio.gather(*(self._aload(d) for d in supported)))
        context.stats.files_processed += len(payloads)
        await chain.chain(payloads, context)


class ObjectCreator(Creator):
    """Deserialize payloads into entities and hand them to the post-processors."""

    def __init__(
        self,
        deserializers: DeserializerChain,
        processors: Sequence[PostProcessor],
        logger: Optional[MetadataLogger] = None,
    ) -> None:
        super().__init__(logger)
        self.deserializers = deserializers
        self.processors = list(processors)

    def _process(self, payloads: Sequence[Payload], context: RunContext) -> None:
        for descriptor, file_object in payloads:
            entity = self.deserializers.deserialize(file_object.text())
            if getattr(entity, "kind", None) is None:
                context.stats.errors += 1
                safe_logger(self.logger).log_warning(
                    "File is not a metadata entity", {"path": descriptor.full_path}
                )
                continue
            for processor in self.processors:
                if processor.supports(entity):
                    processor.process(entity, context, descriptor)

    def create(self, obj: Any, context: RunContext, chain: SyncCreatorChain) -> None:
        self._process(obj or [], context)
        chain.chain(None, context)

    async def acreate(self, obj: Any, context: RunContext, chain: AsyncCreatorChain) -> None:
        self._process(obj or [], context)
        await chain.chain(None, context)


def build_creators(loader: FileLoader, logger: Optional[MetadataLogger] = None) -> List[Creator]:
    """Return the default six stages."""
    deserializers = default_deserializer_chain()
    processors = default_post_processors(logger=logger)
    return [
        ContextCreator(pre_context_factories(logger=logger), logger=logger),
        ContentCreator(loader, logger=logger),
        ObjectCreator(deserializers, processors, logger=logger),
        ContextCreator(post_context_factories(logger=logger), logger=logger),
        ContentCreator(loader, logger=logger),
        ObjectCreator(deserializers, processors, logger=logger),
    ]


def build_creator_chain(
    loader: FileLoader, use_async: bool = False, logger: Optional[MetadataLogger] = None
) -> CreatorChain:
    """Build a fresh chain for one run."""
    creators = build_creators(loader, logger=logger)
    if use_async:
        return AsyncCreatorChain(creators)
    return SyncCreatorChain(creators)
