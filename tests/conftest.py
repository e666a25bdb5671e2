"""
conftest.py
-----------
Shared pytest fixtures for blogmeta tests.

Provides fixtures for:
- Temporary blog directories
- Sample post sources
- Option factories
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from blogmeta.core.options import GenerateOptions


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def blog_dir(tmp_dir):
    """Blog root with an empty post source directory."""
    (tmp_dir / "posts").mkdir()
    return tmp_dir


# ----- Sample Markdown Content Fixtures -----

def render_post(
    title="Hello",
    write_date_time="2024-01-15T09:30:00",
    categories=("python",),
    summation="A short summary.",
    body="Body text.",
    quote_time=True,
):
    """Render a post source with complete front-matter; ``quote_time=False`` lets YAML parse the timestamp."""
    time_value = f'"{write_date_time}"' if quote_time else write_date_time
    category_lines = "\n".join(f"  - {c}" for c in categories)
    return f"""---
title: {title}
writeDateTime: {time_value}
summation: {summation}
categories:
{category_lines}
thumbnail:
  fileName: cover.png
  folderPath: assets/images
  alternativeFileName: cover-small.png
  explanatoryText: Cover image
---

{body}
"""


@pytest.fixture
def post_content():
    """Complete post source content."""
    return render_post()


@pytest.fixture
def write_post(blog_dir):
    """Factory writing ``posts/<name>`` under the blog root."""

    def _write(name, **kwargs):
        path = blog_dir / "posts" / name
        path.write_text(render_post(**kwargs), encoding="utf-8")
        return path

    return _write


# ----- Options Fixtures -----

@pytest.fixture
def make_options(blog_dir):
    """Factory for options rooted at ``blog_dir`` with the standard layout."""

    def _make(**overrides):
        values = {
            "root_directory": str(blog_dir),
            "post_load_path": "posts",
            "post_generate_path": "assets/posts",
            "page_generate_path": "assets/pages",
            "comprehensive_generate_path": "assets",
            "comprehensive_load_path": "assets",
        }
        values.update(overrides)
        return GenerateOptions.from_mapping(values)

    return _make
