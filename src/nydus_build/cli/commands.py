"""Command implementations for CLI."""

import sys
from typing import Optional

from rich.console import Console

from nydus_build.build import Builder
from nydus_build.models.config import NydusBuildConfig
from nydus_build.models.options import BuilderOption, CompactOption


console = Console(stderr=True)


def read_prefetch_patterns(source: Optional[str]) -> Optional[str]:
    """Read prefetch patterns from a file, or from stdin when source is '-'."""
    if not source:
        return None
    if source == "-":
        return sys.stdin.read()
    with open(source) as f:
        return f.read()


def create_layer(builder: Builder, option: BuilderOption, quiet: bool = False):
    """Build a layer bootstrap and blob."""
    builder.run_create(option)
    if not quiet:
        console.print(f"[green]Built[/green] bootstrap {option.bootstrap_path}")


def compact_bootstrap(builder: Builder, option: CompactOption, quiet: bool = False):
    """Compact a bootstrap."""
    builder.compact(option)
    if not quiet:
        target = option.output_bootstrap_path or option.bootstrap_path
        console.print(f"[green]Compacted[/green] bootstrap into {target}")


def apply_config(builder: Builder, config: NydusBuildConfig, quiet: bool = False):
    """Run the create and compact steps present in a configuration."""
    if config.create is None and config.compact is None:
        console.print("[yellow]Nothing to do:[/yellow] config has no create or compact section")
        return

    if config.create is not None:
        create_layer(builder, config.create, quiet=quiet)
    if config.compact is not None:
        compact_bootstrap(builder, config.compact, quiet=quiet)
