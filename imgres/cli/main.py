"""Resource generation command for imgres CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from click.core import ParameterSource
from pydantic import ValidationError
from rich.table import Table

from imgres import __version__
from imgres.cli.utils import console, print_error, print_info, print_success
from imgres.config import (
    LoggingConfig,
    build_options,
    configure_logging,
    load_yaml_file,
    merge_options,
)
from imgres.errors import ConfigurationError, ImgresError
from imgres.generation.pipeline import GenerationResult, generate

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--dir",
    "dir_",
    type=click.Path(file_okay=False, path_type=Path),
    help="Root directory to scan for images",
)
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file to write",
)
@click.option(
    "--read",
    type=click.Path(path_type=Path),
    help="Prefix for resource paths, relative to the output file's directory",
)
@click.option(
    "--ts",
    is_flag=True,
    help="Emit TypeScript declarations typed as ImageURISource",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file providing any of the options above",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output")
@click.version_option(version=__version__, prog_name="imgres")
@click.pass_context
def cli(
    ctx: click.Context,
    dir_: Path | None,
    out: Path | None,
    read: Path | None,
    ts: bool,
    config_file: Path | None,
    verbose: bool,
) -> None:
    r"""Generate typed image resource classes from a directory of images.

    Sanitizes filenames under DIR, then writes one class per directory to
    OUT with a static member per image. Files with '@' in their name
    (density variants such as icon@2x.png) are not listed.

    \b
    Examples:
        $ imgres --dir assets/images --out src/images.ts --ts
        $ imgres --dir assets/images --out src/gen/images.js --read ../..
        $ imgres --config imgres.yaml
    """
    configure_logging(LoggingConfig(level="DEBUG" if verbose else "WARNING"))

    # only an explicit --ts overrides the config file
    ts_given = ctx.get_parameter_source("ts") == ParameterSource.COMMANDLINE

    try:
        file_values = load_yaml_file(config_file) if config_file else {}
        options = build_options(
            merge_options(
                file_values,
                {
                    "dir": dir_,
                    "out": out,
                    "read": read,
                    "ts": ts if ts_given else None,
                },
            )
        )
    except ConfigurationError as e:
        print_error(str(e))
        ctx.exit(1)

    print_info(f"Started searching resources in {options.dir}")

    try:
        result = generate(options)
    except (ImgresError, OSError, UnicodeError, ValidationError) as e:
        logger.debug("Generation failed", exc_info=True)
        print_error(f"Error happened while generating resources:\n{e}")
        ctx.exit(1)

    _print_summary(result)
    print_success("Done")


def _print_summary(result: GenerationResult) -> None:
    if result.renames:
        print_info(f"Renamed {len(result.renames)} file(s)")

    table = Table(title="Generated Classes")
    table.add_column("Class", style="cyan")
    table.add_column("Members", justify="right", style="green")
    table.add_column("Directory", style="dim")

    for collection in result.collections:
        table.add_row(
            collection.name, str(len(collection.entries)), str(collection.directory)
        )

    console.print(table)
