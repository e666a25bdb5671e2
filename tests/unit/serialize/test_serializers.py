"""
Tests for the JSON serializers.
"""
import json

import pytest

from blogmeta.core.exceptions import SerializationError
from blogmeta.dataclasses import Comprehensive, FileReference, Page, Post
from blogmeta.serialize import ComprehensiveSerializer, PageSerializer, default_deserializer_chain


class TestComprehensiveSerializer:
    def test_four_space_indent(self):
        text = ComprehensiveSerializer().serialize(Comprehensive.with_default())
        assert text.startswith('{\n    "categories": {}')
        assert json.loads(text)["postCount"] == 0

    def test_rejects_other_entities(self):
        with pytest.raises(SerializationError):
            ComprehensiveSerializer().serialize(Page())


class TestPageSerializer:
    def test_serializes_post_records(self):
        page = Page(file_name="p.page.json", folder_path="pages")
        page.add_post(Post(title="A", file_name="a.md", folder_path="posts",
                           previous_post=FileReference("z.md", "posts")))
        data = json.loads(PageSerializer().serialize(page))
        record = data["posts"][0]
        assert record["title"] == "A"
        assert record["fullPath"] == "posts/a.md"
        assert record["previousPost"] == {"fileName": "z.md", "folderPath": "posts", "fullPath": "posts/z.md"}
        assert record["nextPost"] is None
        assert data["postCount"] == 1

    def test_rejects_plain_dict(self):
        with pytest.raises(SerializationError, match="PageSerializer"):
            PageSerializer().serialize({"fileName": "p.page.json"})


class TestReadBack:
    """Written JSON is read back by the default deserializer chain."""

    def test_comprehensive(self):
        comprehensive = Comprehensive.with_default()
        comprehensive.put_category("python", FileReference("a.md", "assets/posts"))
        comprehensive.put_category("rust", FileReference("a.md", "assets/posts"))
        comprehensive.update_latest_post(FileReference("a.md", "assets/posts"), ["python", "rust"])
        comprehensive.add_page(FileReference("p.page.json", "assets/pages"))
        comprehensive.update_latest_page(FileReference("p.page.json", "assets/pages"))
        comprehensive.post_count = 1
        comprehensive.page_count = 1

        loaded = default_deserializer_chain().deserialize(ComprehensiveSerializer().serialize(comprehensive))

        assert isinstance(loaded, Comprehensive)
        assert loaded.to_dict()["categoryCount"] == 2
        assert loaded.post_count == 1
        assert loaded.page_count == 1
        assert loaded.pages == [FileReference("p.page.json", "assets/pages")]
        assert loaded.categories["python"].post_file_paths == [FileReference("a.md", "assets/posts")]
        assert loaded == comprehensive

    def test_page(self):
        older = Post(title="Older", write_date_time="2024-01-01T08:00:00", categories=["python"],
                     file_name="a.md", folder_path="assets/posts",
                     next_post=FileReference("b.md", "assets/posts"))
        newer = Post(title="Newer", write_date_time="2024-01-02T08:00:00",
                     file_name="b.md", folder_path="assets/posts",
                     previous_post=FileReference("a.md", "assets/posts"))
        page = Page(file_name="p.page.json", folder_path="assets/pages",
                    previous_page=FileReference("o.page.json", "assets/pages"))
        page.add_post(older)
        page.add_post(newer)

        loaded = default_deserializer_chain().deserialize(PageSerializer().serialize(page))

        assert isinstance(loaded, Page)
        assert loaded.post_count == 2
        assert [p.file_name for p in loaded.posts] == ["b.md", "a.md"]
        assert loaded.posts[0].previous_post == FileReference("a.md", "assets/posts")
        assert loaded.posts[1].next_post == FileReference("b.md", "assets/posts")
        assert loaded.previous_page == FileReference("o.page.json", "assets/pages")
        assert loaded == page
