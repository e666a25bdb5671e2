"""
Tests for the creator chain and its stages.
"""
import asyncio
from unittest.mock import MagicMock

import pytest

from blogmeta.core.exceptions import ContentLoadError
from blogmeta.loaders.file_loader import AsyncFileLoader, FileLoader, SyncFileLoader
from blogmeta.loaders.probe import FileProbe, PathContext
from blogmeta.pipeline.context import RunContext
from blogmeta.pipeline.creators import (
    AsyncCreatorChain,
    ContentCreator,
    ContextCreator,
    Creator,
    ObjectCreator,
    SyncCreatorChain,
    build_creator_chain,
)
from blogmeta.pipeline.processors import default_post_processors
from blogmeta.serialize import default_deserializer_chain


class RecordingCreator(Creator):
    """Creator that records what it received and passes a tag on."""

    def __init__(self, tag, calls):
        super().__init__()
        self.tag = tag
        self.calls = calls

    def create(self, obj, context, chain):
        self.calls.append((self.tag, obj))
        chain.chain(self.tag, context)

    async def acreate(self, obj, context, chain):
        self.calls.append((self.tag, obj))
        await chain.chain(self.tag, context)


class StaticFactory:
    """Context factory returning fixed descriptors."""

    def __init__(self, descriptors):
        self.descriptors = descriptors

    def create(self, context):
        return list(self.descriptors)


@pytest.fixture
def context(make_options):
    return RunContext(options=make_options())


@pytest.fixture
def descriptors(blog_dir, write_post):
    paths = [write_post("a.generate.md", title="A"), write_post("b.generate.md", title="B")]
    return [FileProbe().load(PathContext(str(p))) for p in paths]


class TestCreatorChain:
    """Cursor transitions."""

    def test_sync_walks_each_stage_once(self, context):
        calls = []
        chain = SyncCreatorChain([RecordingCreator(t, calls) for t in ("a", "b", "c")])
        chain.chain("start", context)
        assert calls == [("a", "start"), ("b", "a"), ("c", "b")]
        assert chain.position == 3

    def test_past_last_stage_is_noop(self, context):
        calls = []
        chain = SyncCreatorChain([RecordingCreator("a", calls)])
        chain.chain(None, context)
        chain.chain(None, context)
        assert calls == [("a", None)]

    def test_async_matches_sync(self, context):
        calls = []
        chain = AsyncCreatorChain([RecordingCreator(t, calls) for t in ("a", "b")])
        asyncio.run(chain.chain("start", context))
        assert calls == [("a", "start"), ("b", "a")]

    def test_build_selects_chain_type(self):
        assert isinstance(build_creator_chain(SyncFileLoader()), SyncCreatorChain)
        chain = build_creator_chain(AsyncFileLoader(100), use_async=True)
        assert isinstance(chain, AsyncCreatorChain)
        assert len(chain.creators) == 6


class TestContextCreator:
    def test_no_factories_short_circuits(self, context):
        """A context creator without factories does not advance the chain."""
        calls = []
        chain = SyncCreatorChain([ContextCreator([]), RecordingCreator("next", calls)])
        chain.chain(None, context)
        assert calls == []

    def test_flattens_factory_results(self, context, descriptors):
        calls = []
        chain = SyncCreatorChain([
            ContextCreator([StaticFactory(descriptors[:1]), StaticFactory([]), StaticFactory(descriptors[1:])]),
            RecordingCreator("next", calls),
        ])
        chain.chain(None, context)
        assert calls == [("next", descriptors)]


class TestContentCreator:
    def test_loads_supported_descriptors(self, context, descriptors):
        calls = []
        chain = SyncCreatorChain([ContentCreator(SyncFileLoader()), RecordingCreator("next", calls)])
        chain.chain(descriptors, context)

        payloads = calls[0][1]
        assert [d.name for d, _ in payloads] == ["a.generate.md", "b.generate.md"]
        assert "title: A" in payloads[0][1].text()
        assert context.stats.files_processed == 2

    def test_skips_unsupported(self, context, descriptors):
        loader = MagicMock(spec=FileLoader)
        loader.supports.return_value = False
        chain = SyncCreatorChain([ContentCreator(loader)])
        chain.chain(descriptors, context)
        loader.load.assert_not_called()
        assert context.stats.files_skipped == 2

    def test_non_file_object_rejected(self, context, descriptors):
        loader = MagicMock(spec=FileLoader)
        loader.supports.return_value = True
        loader.load.return_value = "not a file object"
        chain = SyncCreatorChain([ContentCreator(loader)])
        with pytest.raises(ContentLoadError):
            chain.chain(descriptors, context)

    def test_async_loader_in_sync_chain_rejected(self, context, descriptors):
        chain = SyncCreatorChain([ContentCreator(AsyncFileLoader(1000))])
        with pytest.raises(ContentLoadError, match="synchronous"):
            chain.chain(descriptors, context)

    def test_async_keeps_descriptor_pairs(self, context, descriptors):
        calls = []
        chain = AsyncCreatorChain([ContentCreator(AsyncFileLoader(5000)), RecordingCreator("next", calls)])
        asyncio.run(chain.chain(descriptors, context))
        payloads = calls[0][1]
        for descriptor, file_object in payloads:
            assert descriptor.name == file_object.name


class TestObjectCreator:
    def test_new_posts_reach_context(self, context, descriptors):
        calls = []
        chain = SyncCreatorChain([
            ContentCreator(SyncFileLoader()),
            ObjectCreator(default_deserializer_chain(), default_post_processors()),
            RecordingCreator("next", calls),
        ])
        chain.chain(descriptors, context)

        assert sorted(p.title for p in context.posts) == ["A", "B"]
        assert calls == [("next", None)]

    def test_non_entity_skipped(self, context, blog_dir):
        path = blog_dir / "posts" / "notes.generate.md"
        path.write_text("no front-matter here", encoding="utf-8")
        descriptor = FileProbe().load(PathContext(str(path)))
        chain = SyncCreatorChain([
            ContentCreator(SyncFileLoader()),
            ObjectCreator(default_deserializer_chain(), default_post_processors()),
        ])
        chain.chain([descriptor], context)
        assert context.posts == []
        assert context.stats.errors == 1
        assert context.stats.files_processed == 1
