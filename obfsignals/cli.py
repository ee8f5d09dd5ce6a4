#!/usr/bin/env python3
"""
obfsignals CLI - Command Line Interface

Computes obfuscation signals for one or more token dumps and prints them
as rich tables, JSON or CSV.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from .__version__ import __author__, __license__, __url__, __version__
from .config import Config
from .config_schemas import ObfSignalsConfig
from .domain import FileSignals
from .loader import TokenDumpError, load_file_data
from .schemas import FileSignalsModel, model_to_dict
from .signals import compute_signals, no_signals, remove_nans
from .utils.logger import get_logger, setup_logger
from .utils.output import OutputFormatter

console = Console()
logger = get_logger(__name__)


@dataclass
class CLIArgs:
    files: tuple[str, ...]
    output_json: bool
    output_csv: bool
    output: str | None
    remove_nans: bool
    strict_base64: bool
    config: str | None
    verbose: bool
    quiet: bool
    version: bool


def configure_logging_levels(verbose: bool, quiet: bool) -> None:
    """Configure logging levels based on verbosity settings."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    setup_logger("obfsignals", level)
    logging.getLogger("obfsignals").setLevel(level)


def load_settings(config_path: str | None) -> ObfSignalsConfig:
    """Load the configuration file and return its validated view."""
    return Config(config_path).typed_config


def analyze_file(path: str, strict_base64: bool, drop_nans: bool) -> FileSignals:
    """Compute signals for one token dump, falling back to no_signals()."""
    try:
        file_data = load_file_data(path)
    except TokenDumpError as e:
        logger.warning(f"Using empty signals for {path}: {e}")
        signals = no_signals()
    else:
        signals = compute_signals(file_data, strict_base64=strict_base64)

    if drop_nans:
        remove_nans(signals)
    return signals


def collect_results(
    files: tuple[str, ...], strict_base64: bool, drop_nans: bool
) -> dict[str, dict[str, Any]]:
    results = {}
    for path in files:
        signals = analyze_file(path, strict_base64, drop_nans)
        results[path] = model_to_dict(FileSignalsModel.from_domain(signals))
    return results


def write_output(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Results written to {output}[/green]")
    else:
        click.echo(text)


def print_version() -> None:
    console.print(f"[bold]obfsignals[/bold] {__version__}")
    console.print(f"Author: {__author__}")
    console.print(f"License: {__license__}")
    console.print(f"URL: {__url__}")


def run_cli(args: CLIArgs) -> int:
    """Primary CLI workflow separated for clarity and testability."""
    if args.version:
        print_version()
        return 0

    if not args.files:
        console.print("[red]Error: at least one token dump file is required[/red]")
        return 1

    try:
        settings = load_settings(args.config)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        return 1

    configure_logging_levels(args.verbose or settings.general.verbose, args.quiet)

    results = collect_results(
        args.files,
        strict_base64=args.strict_base64 or settings.signals.strict_base64,
        drop_nans=args.remove_nans or settings.signals.remove_nans,
    )
    formatter = OutputFormatter(results, console=console)

    if args.output_json:
        write_output(formatter.to_json(indent=settings.output.json_indent), args.output)
    elif args.output_csv:
        write_output(formatter.to_csv(delimiter=settings.output.csv_delimiter), args.output)
    else:
        formatter.print_tables()
    return 0


def main(**kwargs: Any):
    """
    obfsignals - Heuristic obfuscation signals from source code tokens.
    """
    args = CLIArgs(**kwargs)
    try:
        exit_code = run_cli(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis interrupted by user[/yellow]")
        exit_code = 1
    sys.exit(exit_code)


@click.command()
@click.argument("files", nargs=-1, type=click.Path())
@click.option("-j", "--json", "output_json", is_flag=True, help="Output signals in JSON format")
@click.option("-c", "--csv", "output_csv", is_flag=True, help="Output signals in CSV format")
@click.option("-o", "--output", help="Write JSON or CSV output to this file")
@click.option("--remove-nans", is_flag=True, help="Replace NaN values with zero")
@click.option(
    "--strict-base64",
    is_flag=True,
    help="Only report base64 candidates that individually look encoded",
)
@click.option("--config", help="Custom config file path")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Only log errors")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Click-based CLI entry point."""
    if kwargs["output_json"] and kwargs["output_csv"]:
        raise click.UsageError("--json and --csv cannot be used together")
    main(**kwargs)
