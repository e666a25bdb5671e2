#!/usr/bin/env python3
"""
Blogmeta CLI
------------------------

Command-line interface for the metadata generator.

Commands:
    - generate: Build comprehensive.json, pages and published post copies
    - show-options: Print the resolved options as YAML

Options are read, in order, from defaults, an options file (``--config``,
or ``blogmeta.yaml`` in the working directory), then command-line flags.

Usage:
    blogmeta generate --root-dir blog --polp posts --pogp assets/posts \\
        --pagp assets/pages --cgp assets --clp assets
    blogmeta generate --config blog/blogmeta.yaml --async --timeout 2000
    blogmeta show-options --config blog/blogmeta.yaml
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Callable, Dict, Optional

# --- Third party imports ---
import click
import yaml
from click.core import ParameterSource

# --- Local imports ---
from blogmeta.core.cli import setup_logger
from blogmeta.core.logging_manager import MetadataLogger, handle_cli_error
from blogmeta.core.options import GenerateOptions, load_options_file
from blogmeta.core.paths import LOG_DIR, OPTIONS_FILE_NAME
from blogmeta.pipeline.generate import generate_metadata

SUCCESS_MESSAGE = "✅ Metadata generation completed."
FAILURE_MESSAGE = "❌ Metadata generation failed."

_OPTION_FLAGS = (
    ("--comprehensive-generate-file-name", "--cgf", "File name of the written comprehensive summary"),
    ("--comprehensive-generate-path", "--cgp", "Directory the comprehensive summary is written to"),
    ("--comprehensive-load-file-name", "--clf", "File name of the comprehensive summary to continue from"),
    ("--comprehensive-load-path", "--clp", "Directory of the comprehensive summary to continue from"),
    ("--page-generate-path", "--pagp", "Directory for *.page.json files"),
    ("--post-generate-path", "--pogp", "Directory for published post copies"),
    ("--post-load-extension", "--pole", "Suffix that marks a post source file"),
    ("--post-load-path", "--polp", "Directory holding the post sources"),
    ("--root-directory", "--root-dir", "Base directory for every relative path"),
)


def generation_options(func: Callable) -> Callable:
    """Attach the options shared by commands that resolve GenerateOptions."""
    decorators = [
        click.option(
            "--config",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help=f"YAML options file (default: ./{OPTIONS_FILE_NAME} when present)",
        ),
    ]
    for long_name, short_name, help_text in _OPTION_FLAGS:
        dest = long_name.lstrip("-").replace("-", "_")
        decorators.append(click.option(long_name, short_name, dest, default=None, help=help_text))
    decorators.append(
        click.option("--timeout", type=int, default=None, help="Asynchronous load timeout (ms)")
    )
    decorators.append(
        click.option(
            "--async/--sync",
            "use_async",
            default=False,
            help="Load files concurrently with asyncio",
        )
    )
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def resolve_options(ctx: click.Context, config: Optional[str], **flags: Any) -> GenerateOptions:
    """
    Combine defaults, the options file and command-line flags.

    ``--async/--sync`` only overrides the file when given explicitly.
    """
    if ctx.get_parameter_source("use_async") == ParameterSource.DEFAULT:
        flags["use_async"] = None

    options = GenerateOptions()
    config_path = Path(config) if config else Path(OPTIONS_FILE_NAME)
    if config or config_path.is_file():
        options = load_options_file(config_path, base=options)
    return options.merge(flags)


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Blog metadata generator"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "generate")


@cli.command()
@generation_options
@click.pass_context
def generate(ctx: click.Context, config: Optional[str], **flags: Any) -> None:
    """
    Generate comprehensive, page and post metadata.

    Loads the previous run's summary, folds every new post source into it,
    writes the summary and pages, and publishes the posts under
    time-ordered names.
    """
    logger: MetadataLogger = ctx.obj["logger"]

    try:
        options = resolve_options(ctx, config, **flags)
        click.echo(f"📝 Generating metadata in {Path(options.root_directory).resolve()}...")
        stats = generate_metadata(options, logger=logger)
    except Exception as e:
        click.echo(FAILURE_MESSAGE)
        handle_cli_error(ctx, e, "generate", {"config": config})
        return

    click.echo(SUCCESS_MESSAGE)
    click.echo(f"  Posts created: {stats.posts_created}")
    click.echo(f"  Pages created: {stats.pages_created}")
    click.echo(f"  Files written: {stats.files_written}")
    if stats.files_skipped > 0:
        click.echo(f"  Files skipped: {stats.files_skipped}")
    if stats.errors > 0:
        click.echo(f"  Files not recognised: {stats.errors}")
    click.echo(f"  Duration: {stats.duration():.2f}s")


@cli.command("show-options")
@generation_options
@click.pass_context
def show_options(ctx: click.Context, config: Optional[str], **flags: Any) -> None:
    """Print the resolved options as YAML."""
    try:
        options = resolve_options(ctx, config, **flags)
    except Exception as e:
        handle_cli_error(ctx, e, "show_options", {"config": config})
        return

    data: Dict[str, Any] = options.to_dict()
    click.echo(yaml.safe_dump(data, sort_keys=True, default_flow_style=False).rstrip())


if __name__ == "__main__":
    cli(obj={})
