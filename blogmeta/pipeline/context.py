#!/usr/bin/env python3
"""
context.py
-------------------
Mutable state of one generation run.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import List, Optional

# --- Local imports ---
from blogmeta.core.cli import GenerateStats
from blogmeta.core.options import GenerateOptions
from blogmeta.dataclasses import Comprehensive, Page, Post


@dataclass
class RunContext:
    """
    State shared by the stages of one run.

    Owned by the run; stages mutate it one after another, never concurrently.

    Attributes:
        options: Resolved options
        comprehensive: Summary loaded from disk (or synthesized later)
        page: Continuation page, the latest page of the previous run
        post: Continuation post, the latest post of the previous run
        pages: Pages opened by this run, most recent first
        posts: Posts discovered by this run
        stats: Run metrics
    """

    options: GenerateOptions
    comprehensive: Optional[Comprehensive] = None
    page: Optional[Page] = None
    post: Optional[Post] = None
    pages: List[Page] = field(default_factory=list)
    posts: List[Post] = field(default_factory=list)
    stats: GenerateStats = field(default_factory=GenerateStats)
