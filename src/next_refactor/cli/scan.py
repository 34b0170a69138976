"""Main scan command: walk, count, rank, report."""

import time
from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.markup import escape

from ..config import OUTPUT_FORMATS, ScanConfig
from ..exceptions import NextRefactorError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..models import FilterSpec, RankedReport
from ..ranking import rank
from ..temporal import GitChangeCounter
from ..walker import TreeWalker
from . import app
from ._common import console, err_console, resolve_config, resolve_root

logger = get_logger(__name__)


@app.callback(invoke_without_command=True, no_args_is_help=False)
def scan(
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        help="git branch to count commits on (default: main)",
    ),
    filters: Optional[List[str]] = typer.Option(
        None,
        "--filter",
        help="Glob pattern to exclude, relative to the current directory (repeatable)",
    ),
    top_n: Optional[int] = typer.Option(
        None,
        "-n",
        help="Number of files to show (default: 10)",
        min=1,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        help="Output format: text | rich | json | quiet",
        click_type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every git query and show tracebacks",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Append log output to this file",
        hidden=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Rank the files under the current directory by how often git says they changed.

    Every file (minus --filter exclusions and .git) is looked up with
    [bold]git rev-list --count BRANCH -- FILE[/bold]; the most changed files
    are the next refactor candidates.

    [bold cyan]Examples:[/bold cyan]

      next-refactor

      next-refactor --branch develop -n 20

      next-refactor --filter "vendor" --filter "*.lock" --format json
    """
    if version:
        from .. import __version__

        console.print(f"[bold cyan]next-refactor[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        setup_logging(verbose=verbose, log_file=log_file)
        root = resolve_root()
        settings = resolve_config(
            config=config,
            branch=branch,
            filters=filters,
            top_n=top_n,
            output_format=output_format.lower() if output_format else None,
            verbose=verbose,
            log_file=log_file,
        )
        if settings.verbosity != "normal" or settings.log_file != log_file:
            setup_logging(
                verbose=settings.verbosity == "verbose",
                quiet=settings.verbosity == "quiet",
                log_file=settings.log_file,
            )

        report = run_scan(root, settings)
        get_formatter(settings.output_format).render(report)

    except typer.Exit:
        raise

    except NextRefactorError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during scan")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            err_console.print_exception()
        raise typer.Exit(1)


def run_scan(root: Path, settings: ScanConfig) -> RankedReport:
    """Walk ``root``, count commits per file and rank the result."""
    counter = GitChangeCounter(
        str(root),
        timeout_seconds=settings.git_timeout_seconds,
        git_executable=settings.git_executable,
    )
    if not counter.is_git_repository():
        logger.warning("%s does not look like a git repository", root)

    walker = TreeWalker(
        str(root),
        settings.branch,
        FilterSpec.from_patterns(settings.exclude_patterns),
        counter,
        on_enter=_progress_callback(settings),
    )

    start = time.perf_counter()
    result = walker.walk()
    elapsed = time.perf_counter() - start

    return rank(
        result,
        settings.top_n,
        elapsed_seconds=elapsed,
        branch=settings.branch,
        root=str(root),
    )


def _progress_callback(settings: ScanConfig):
    if settings.output_format == "text":
        return lambda path: print(f"Entering {path}")
    return lambda path: logger.debug("Entering %s", path)
