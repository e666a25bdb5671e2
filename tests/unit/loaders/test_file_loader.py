"""
Tests for synchronous and asynchronous file loaders.
"""
import asyncio
import time

import pytest

from blogmeta.core.exceptions import LoadTimeoutError
from blogmeta.core.options import GenerateOptions
from blogmeta.loaders import file_loader
from blogmeta.loaders.file_loader import (
    AsyncFileLoader,
    FileObject,
    SyncFileLoader,
    create_file_loader,
)
from blogmeta.loaders.probe import FileDescriptor, FileProbe, Grant, PathContext


@pytest.fixture
def descriptor(tmp_dir):
    """Descriptor of a small readable file."""
    path = tmp_dir / "hello.generate.md"
    path.write_text("---\ntitle: Hello\n---\n", encoding="utf-8")
    return FileProbe().load(PathContext(str(path)))


def _descriptor(**overrides):
    values = dict(
        content_type="text/markdown",
        directory_path="posts",
        extension=".md",
        grant=Grant(readable=True, writable=True),
        name="a.md",
        size=10,
    )
    values.update(overrides)
    return FileDescriptor(**values)


class TestSupports:
    """Shared supports() rule."""

    def test_accepts_complete_descriptor(self):
        assert SyncFileLoader().supports(_descriptor())

    @pytest.mark.parametrize("overrides", [
        {"size": 0},
        {"size": -1},
        {"name": ""},
        {"directory_path": ""},
        {"grant": Grant(readable=True, writable=False)},
        {"grant": Grant(readable=False, writable=True)},
    ])
    def test_rejects_incomplete_descriptor(self, overrides):
        assert not SyncFileLoader().supports(_descriptor(**overrides))

    def test_rejects_non_descriptor(self):
        assert not SyncFileLoader().supports("posts/a.md")

    def test_async_needs_positive_timeout(self):
        assert AsyncFileLoader(100).supports(_descriptor())
        assert not AsyncFileLoader(0).supports(_descriptor())


class TestSyncFileLoader:
    def test_reads_content(self, descriptor):
        result = SyncFileLoader().load(descriptor)
        assert isinstance(result, FileObject)
        assert result.name == "hello.generate.md"
        assert result.text().startswith("---\ntitle: Hello")
        assert result.grant == descriptor.grant

    def test_missing_file_propagates(self, tmp_dir):
        """I/O errors propagate unmodified."""
        with pytest.raises(FileNotFoundError):
            SyncFileLoader().load(_descriptor(directory_path=str(tmp_dir), name="gone.md"))


class TestAsyncFileLoader:
    def test_reads_content(self, descriptor):
        result = asyncio.run(AsyncFileLoader(5000).load(descriptor))
        assert result.text().startswith("---")

    def test_timeout(self, descriptor, monkeypatch):
        """A read slower than the timeout fails with the timeout in seconds."""
        real_read = file_loader._read_file

        def slow_read(d):
            time.sleep(0.2)
            return real_read(d)

        monkeypatch.setattr(file_loader, "_read_file", slow_read)

        with pytest.raises(LoadTimeoutError) as exc_info:
            asyncio.run(AsyncFileLoader(1).load(descriptor))
        assert "0.001" in str(exc_info.value)
        assert exc_info.value.seconds == 0.001

    def test_read_error_propagates(self, tmp_dir):
        with pytest.raises(FileNotFoundError):
            asyncio.run(
                AsyncFileLoader(5000).load(_descriptor(directory_path=str(tmp_dir), name="gone.md"))
            )


class TestCreateFileLoader:
    def test_selects_strategy(self):
        assert isinstance(create_file_loader(GenerateOptions()), SyncFileLoader)
        loader = create_file_loader(GenerateOptions(use_async=True, timeout=250))
        assert isinstance(loader, AsyncFileLoader)
        assert loader.timeout == 250
