"""Main CLI implementation using Typer."""

import subprocess
from pathlib import Path
from typing import Optional, Callable, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from ruamel.yaml.error import YAMLError

from nydus_build.build import Builder
from nydus_build.cli.commands import (
    apply_config,
    compact_bootstrap,
    create_layer,
    read_prefetch_patterns,
)
from nydus_build.config import load_config
from nydus_build.models.config import BuilderSettings
from nydus_build.models.options import BuilderOption, CompactOption
from nydus_build.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="nydus-build",
    help="Build and compact Nydus RAFS images with nydus-image",
    add_completion=False,
)

# Errors go to stderr, stdout belongs to nydus-image
console = Console(stderr=True)

DEFAULT_BINARY = BuilderSettings().binary_path


def _run_builder_command(
    handler: Callable[..., Any],
    binary: Optional[str],
    log_level: str,
    **kwargs: Any,
):
    """Helper to run a CLI command with a builder and error handling."""
    setup_logging(log_level)
    try:
        builder = Builder(binary or DEFAULT_BINARY)
        handler(builder, **kwargs)
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Error:[/red] {e.cmd[0]} exited with status {e.returncode}")
        raise typer.Exit(e.returncode) from e
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _binary_option():
    return typer.Option(
        None, "--binary", "-b", envvar="NYDUS_IMAGE", help="Path to nydus-image"
    )


def _log_level_option():
    return typer.Option("INFO", "--log-level", help="Log level")


@app.command("create")
def create_command(
    rootfs: str = typer.Argument(..., help="Source rootfs directory"),
    bootstrap: str = typer.Option(..., "--bootstrap", help="Bootstrap output path"),
    blob: str = typer.Option(..., "--blob", help="Blob output path (file or fifo)"),
    whiteout_spec: str = typer.Option(..., "--whiteout-spec", help="Whiteout convention"),
    output_json: str = typer.Option(..., "--output-json", help="Output JSON path"),
    backend_type: str = typer.Option(..., "--backend-type", help="Storage backend type"),
    backend_config: str = typer.Option(..., "--backend-config", help="Storage backend configuration"),
    parent_bootstrap: Optional[str] = typer.Option(
        None, "--parent-bootstrap", help="Parent layer bootstrap"
    ),
    chunk_dict: Optional[str] = typer.Option(None, "--chunk-dict", help="Chunk dictionary"),
    aligned_chunk: bool = typer.Option(False, "--aligned-chunk", help="Align chunks to 4K"),
    prefetch_patterns: Optional[str] = typer.Option(
        None, "--prefetch-patterns", help="File with prefetch patterns, '-' for stdin"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress status output"),
    binary: Optional[str] = _binary_option(),
    log_level: str = _log_level_option(),
):
    """Build a layer bootstrap and blob from a rootfs."""
    try:
        patterns = read_prefetch_patterns(prefetch_patterns)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    option = BuilderOption(
        parent_bootstrap_path=parent_bootstrap,
        chunk_dict=chunk_dict,
        bootstrap_path=bootstrap,
        rootfs_path=rootfs,
        backend_type=backend_type,
        backend_config=backend_config,
        whiteout_spec=whiteout_spec,
        output_json_path=output_json,
        prefetch_patterns=patterns,
        blob_path=blob,
        aligned_chunk=aligned_chunk,
    )
    _run_builder_command(create_layer, binary, log_level, option=option, quiet=quiet)


@app.command("compact")
def compact_command(
    bootstrap: str = typer.Option(..., "--bootstrap", help="Bootstrap to compact"),
    config: str = typer.Option(..., "--config", help="Compaction config file"),
    backend_type: str = typer.Option(..., "--backend-type", help="Storage backend type"),
    backend_config_file: str = typer.Option(
        ..., "--backend-config-file", help="Storage backend config file"
    ),
    output_json: str = typer.Option(..., "--output-json", help="Output JSON path"),
    output_bootstrap: Optional[str] = typer.Option(
        None, "--output-bootstrap", help="Write the compacted bootstrap here instead of in place"
    ),
    chunk_dict: Optional[str] = typer.Option(None, "--chunk-dict", help="Chunk dictionary"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress status output"),
    binary: Optional[str] = _binary_option(),
    log_level: str = _log_level_option(),
):
    """Compact a bootstrap."""
    option = CompactOption(
        chunk_dict=chunk_dict,
        bootstrap_path=bootstrap,
        output_bootstrap_path=output_bootstrap,
        backend_type=backend_type,
        backend_config_path=backend_config_file,
        output_json_path=output_json,
        compact_config_path=config,
    )
    _run_builder_command(compact_bootstrap, binary, log_level, option=option, quiet=quiet)


@app.command("apply")
def apply_command(
    config_file: Path = typer.Argument(..., help="YAML file with create/compact sections"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress status output"),
    binary: Optional[str] = _binary_option(),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level, overrides the config file"
    ),
):
    """Run the create and compact steps described in a config file."""
    try:
        config = load_config(config_file)
    except (OSError, ValueError, ValidationError, YAMLError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    _run_builder_command(
        apply_config,
        binary or config.builder.binary_path,
        log_level or config.builder.log_level,
        config=config,
        quiet=quiet,
    )


def main():
    """Main entry point for CLI."""
    app()
