"""
Tests for the file generators that persist the index.
"""
import json

import pytest

from blogmeta.dataclasses import Comprehensive, Page, Post
from blogmeta.pipeline.context import RunContext
from blogmeta.pipeline.file_generators import (
    ComprehensiveFileGenerator,
    PageFileGenerator,
    PostFileGenerator,
    default_file_generators,
)


@pytest.fixture
def context(make_options):
    return RunContext(options=make_options(), comprehensive=Comprehensive(post_count=2))


class TestComprehensiveFileGenerator:
    def test_writes_summary(self, context, blog_dir):
        assert ComprehensiveFileGenerator().generate(context) == 1
        path = blog_dir / "assets" / "comprehensive.json"
        text = path.read_text(encoding="utf-8")
        assert text.startswith('{\n    "categories"')
        assert json.loads(text)["postCount"] == 2

    def test_custom_name(self, make_options, blog_dir):
        options = make_options(comprehensive_generate_file_name="summary.json",
                               comprehensive_generate_path="out")
        context = RunContext(options=options, comprehensive=Comprehensive())
        ComprehensiveFileGenerator().generate(context)
        assert (blog_dir / "out" / "summary.json").is_file()


class TestPageFileGenerator:
    def test_no_new_posts_writes_nothing(self, context, blog_dir):
        context.page = Page(file_name="p.page.json", folder_path="assets/pages")
        assert PageFileGenerator().generate(context) == 0
        assert not (blog_dir / "assets" / "pages").exists()

    def test_writes_new_and_continuation_pages(self, context, blog_dir):
        context.posts = [Post(title="x")]
        context.pages = [Page(file_name="new.page.json", folder_path="assets/pages")]
        context.page = Page(file_name="old.page.json", folder_path="assets/pages")

        assert PageFileGenerator().generate(context) == 2
        pages_dir = blog_dir / "assets" / "pages"
        assert sorted(p.name for p in pages_dir.iterdir()) == ["new.page.json", "old.page.json"]
        data = json.loads((pages_dir / "new.page.json").read_text(encoding="utf-8"))
        assert data["fileName"] == "new.page.json"


class TestPostFileGenerator:
    def test_copies_sources(self, context, blog_dir, write_post):
        source = write_post("hello.generate.md", title="Hello")
        context.posts = [Post(title="Hello", file_name="abc.md",
                              original_file_name="hello.generate.md", folder_path="assets/posts")]

        assert PostFileGenerator().generate(context) == 1
        published = blog_dir / "assets" / "posts" / "abc.md"
        assert published.read_text(encoding="utf-8") == source.read_text(encoding="utf-8")

    def test_continuation_post_not_copied(self, context, blog_dir):
        context.post = Post(title="Earlier", file_name="earlier.md", original_file_name="earlier.md")
        assert PostFileGenerator().generate(context) == 0

    def test_missing_source_propagates(self, context):
        context.posts = [Post(file_name="abc.md", original_file_name="gone.generate.md")]
        with pytest.raises(FileNotFoundError):
            PostFileGenerator().generate(context)


class TestDefaultOrder:
    def test_comprehensive_page_post(self):
        assert [type(g) for g in default_file_generators()] == [
            ComprehensiveFileGenerator,
            PageFileGenerator,
            PostFileGenerator,
        ]
