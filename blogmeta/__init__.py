#!/usr/bin/env python3
"""
blogmeta
--------
Build-time metadata generator for a static Markdown blog.

Turns a folder of Markdown posts with YAML frontmatter into a linked
metadata graph: a comprehensive summary, paginated post indexes and
published post copies.
"""
__version__ = "1.0.0"
