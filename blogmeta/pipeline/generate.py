#!/usr/bin/env python3
"""
generate.py
-------------------
Run the metadata generation pipeline end to end.

Steps:
    1. Creator chain: load the summary, new post sources, continuation page/post
    2. Content generators: link posts, fill pages, update the summary
    3. File generators: write the summary and pages, publish post copies

Usage:
    from blogmeta.pipeline.generate import generate_metadata

    stats = generate_metadata(options, logger=logger)
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import asyncio
from typing import Optional

# --- Local imports ---
from blogmeta.core.cli import GenerateStats
from blogmeta.core.logging_manager import MetadataLogger, safe_logger
from blogmeta.core.options import GenerateOptions
from blogmeta.loaders.file_loader import create_file_loader
from blogmeta.pipeline.context import RunContext
from blogmeta.pipeline.creators import AsyncCreatorChain, SyncCreatorChain, build_creators
from blogmeta.pipeline.file_generators import default_file_generators
from blogmeta.pipeline.generators import default_content_generators, order_new_posts


def _finish(context: RunContext, logger: Optional[MetadataLogger]) -> GenerateStats:
    stats = context.stats
    order_new_posts(context.posts)

    for generator in default_content_generators(logger=logger):
        generator.generate(context)
    stats.posts_created = len(context.posts)
    stats.pages_created = len(context.pages)

    for file_generator in default_file_generators(logger=logger):
        stats.files_written += file_generator.generate(context)

    safe_logger(logger).log_operation("generate_complete", stats.to_dict())
    return stats


def generate_metadata(
    options: GenerateOptions, logger: Optional[MetadataLogger] = None
) -> GenerateStats:
    """
    Generate blog metadata.

    Runs on the calling thread, or under ``asyncio.run`` when
    ``options.use_async`` is set.

    Args:
        options: Resolved options
        logger: Optional logger

    Returns:
        Statistics of the run

    Raises:
        LoadTimeoutError: An asynchronous load exceeded ``options.timeout``
        ContentLoadError: A loader produced something other than file content
        FrontMatterError: A source's front-matter could not be parsed
        OSError: Any filesystem failure, unmodified
    """
    if options.use_async:
        return asyncio.run(agenerate_metadata(options, logger=logger))

    safe_logger(logger).log_operation("generate_start", options.to_dict())
    context = RunContext(options=options)
    loader = create_file_loader(options, logger=logger)
    chain = SyncCreatorChain(build_creators(loader, logger=logger))
    chain.chain(None, context)
    return _finish(context, logger)


async def agenerate_metadata(
    options: GenerateOptions, logger: Optional[MetadataLogger] = None
) -> GenerateStats:
    """Generate blog metadata, loading files concurrently within each stage."""
    safe_logger(logger).log_operation("generate_start", options.to_dict())
    context = RunContext(options=options)
    loader = create_file_loader(options, logger=logger)
    chain = AsyncCreatorChain(build_creators(loader, logger=logger))
    await chain.chain(None, context)
    return _finish(context, logger)
