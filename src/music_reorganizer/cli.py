"""Command line interface for music reorganizer."""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .core.action_log import open_action_log
from .core.duplicates import filter_duplicates
from .core.metadata import MutagenTagAccessor
from .core.pruner import prune_directories
from .core.reorganizer import reorganize
from .exceptions import ConfigurationError, MusicReorganizerError
from .models.config import DuplicateFilterConfig, PruneConfig, ReorganizeConfig, load_config
from .models.report import RunReport

console = Console()

EXISTING_DIR = click.Path(exists=True, file_okay=False, path_type=Path)
TARGET_DIR = click.Path(file_okay=False, path_type=Path)
LOG_FILE = click.Path(dir_okay=False, path_type=Path)


def _configure_console_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='JSON file with default option values per command'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Print diagnostic output to the console'
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool):
    """Reorganize audio files by sample rate, artist and album."""
    if config:
        try:
            ctx.default_map = load_config(config)
        except ConfigurationError as e:
            raise click.BadParameter(str(e), param_hint="'--config'")
    _configure_console_logging(verbose)


def _show_plan(title: str, options: Dict[str, object], dry_run: bool) -> None:
    console.print(f"\n[bold cyan]{title}[/bold cyan]")
    for label, value in options.items():
        console.print(f"{label}: {value}")
    if dry_run:
        console.print("[yellow]Dry run: no files will be changed[/yellow]")


def _show_report(title: str, report: RunReport, log_file: Path) -> None:
    results_table = Table(title=title)
    results_table.add_column("Result", style="cyan")
    results_table.add_column("Count", justify="right")

    for label, count in report.summary().items():
        if count:
            results_table.add_row(label, str(count))

    console.print(results_table)

    if report.errors:
        console.print("\n[red]Errors encountered:[/red]")
        for error in report.errors[:10]:  # Show first 10 errors
            console.print(f"  • {error}")
        if len(report.errors) > 10:
            console.print(f"  ... and {len(report.errors) - 10} more errors")

    console.print(f"\n[dim]Action log: {log_file}[/dim]")


def _fail(error: MusicReorganizerError) -> None:
    console.print(f"\n[red]Error: {error}[/red]")
    sys.exit(1)


@cli.command('reorganize')
@click.option('--input-dir', required=True, type=EXISTING_DIR, help='Directory to scan')
@click.option('--dest-dir', required=True, type=TARGET_DIR, help='Root of the reorganized tree')
@click.option('--input-file-ext', required=True, help='Extension of the files to reorganize, e.g. flac')
@click.option('--log-file', required=True, type=LOG_FILE, help='File the action log is appended to')
@click.option('--dry-run', is_flag=True, help='Log what would be done without changing anything')
def reorganize_cmd(input_dir: Path, dest_dir: Path, input_file_ext: str, log_file: Path, dry_run: bool):
    """Move files into DEST/<sample rate>/<artist>/<album>, retagging same-title albums."""
    config = ReorganizeConfig(
        input_dir=input_dir,
        dest_dir=dest_dir,
        input_file_ext=input_file_ext,
        log_file=log_file,
        dry_run=dry_run,
    )
    _show_plan("Reorganize", {"Input": input_dir, "Destination": dest_dir}, dry_run)

    try:
        config.validate()
        with open_action_log(log_file) as action_log, Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Scanning files...", total=None)

            def on_progress(current: int, total: int, bad_tags: int, bad_files: int) -> None:
                progress.update(
                    task,
                    completed=current,
                    total=total,
                    description=(
                        f"{current} of {total} processed "
                        f"[{bad_tags} bad tags, {bad_files} unreadable files]"
                    ),
                )

            report = reorganize(config, MutagenTagAccessor(), action_log, on_progress)
    except MusicReorganizerError as e:
        _fail(e)

    _show_report("Reorganize", report, log_file)


@cli.command('filter-duplicates')
@click.option('--dir-1', 'dir_1', required=True, type=EXISTING_DIR, help='Directory holding the files to filter')
@click.option('--file-ext-1', 'file_ext_1', required=True, help='Extension of the files to filter')
@click.option('--dir-2', 'dir_2', required=True, type=EXISTING_DIR, help='Directory to compare against')
@click.option('--file-ext-2', 'file_ext_2', required=True, help='Extension of the files to compare against')
@click.option('--duplicate-dir', required=True, type=TARGET_DIR, help='Where duplicates are moved')
@click.option('--log-file', required=True, type=LOG_FILE, help='File the action log is appended to')
@click.option('--dry-run', is_flag=True, help='Log what would be done without changing anything')
def filter_duplicates_cmd(
    dir_1: Path,
    file_ext_1: str,
    dir_2: Path,
    file_ext_2: str,
    duplicate_dir: Path,
    log_file: Path,
    dry_run: bool,
):
    """Move files from DIR-1 whose name also exists in DIR-2 with FILE-EXT-2."""
    config = DuplicateFilterConfig(
        dir_1=dir_1,
        file_ext_1=file_ext_1,
        dir_2=dir_2,
        file_ext_2=file_ext_2,
        duplicate_dir=duplicate_dir,
        log_file=log_file,
        dry_run=dry_run,
    )
    _show_plan(
        "Filter duplicates",
        {"Filter": f"{dir_1} (*.{file_ext_1})", "Against": f"{dir_2} (*.{file_ext_2})", "Duplicates": duplicate_dir},
        dry_run,
    )

    try:
        config.validate()
        with open_action_log(log_file) as action_log:
            report = filter_duplicates(config, action_log)
    except MusicReorganizerError as e:
        _fail(e)

    _show_report("Filter duplicates", report, log_file)


@cli.command('prune-dirs')
@click.option('--dir', 'directory', required=True, type=EXISTING_DIR, help='Directory to prune')
@click.option('--file-ext', required=True, help='Files whose name contains this are kept')
@click.option('--log-file', required=True, type=LOG_FILE, help='File the action log is appended to')
@click.option('--dry-run', is_flag=True, help='Log what would be done without changing anything')
def prune_dirs_cmd(directory: Path, file_ext: str, log_file: Path, dry_run: bool):
    """Delete files not matching FILE-EXT, then remove empty directories."""
    config = PruneConfig(dir=directory, file_ext=file_ext, log_file=log_file, dry_run=dry_run)
    _show_plan("Prune directories", {"Directory": directory, "Keep": f"*{file_ext}*"}, dry_run)

    try:
        config.validate()
        with open_action_log(log_file) as action_log:
            report = prune_directories(config, action_log)
    except MusicReorganizerError as e:
        _fail(e)

    _show_report("Prune directories", report, log_file)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
