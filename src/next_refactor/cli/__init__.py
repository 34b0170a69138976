"""CLI entry point."""

import sys

import click
import typer

from ..exceptions import UsageError
from ._common import USAGE, err_console

app = typer.Typer(
    name="next-refactor",
    help="next-refactor - find the files git says change the most",
    add_completion=False,
    rich_markup_mode="rich",
)

# Newer typer releases raise exceptions from their own bundled copy of click;
# options built from a standalone click type still raise click's.
_typer_click = sys.modules[typer.BadParameter.__module__]
_PARSER_ERRORS = tuple({click.UsageError, _typer_click.UsageError})
_CLICK_ERRORS = tuple({click.ClickException, _typer_click.ClickException})
_ABORTS = tuple({click.Abort, typer.Abort})


# Import the command to register it
from .scan import scan as _scan_callback  # noqa: F401, E402


def invoke():
    """Run the app, turning command-line parse failures into UsageError."""
    try:
        return app(standalone_mode=False)
    except _PARSER_ERRORS as e:
        raise UsageError(e.format_message()) from e


def main() -> None:
    """Console script: usage errors print the usage line and exit 1."""
    try:
        code = invoke()
    except UsageError as e:
        err_console.print(USAGE, markup=False, highlight=False)
        err_console.print(f"Error: {e.reason}", markup=False, highlight=False)
        sys.exit(1)
    except _CLICK_ERRORS as e:
        e.show()
        sys.exit(1)
    except _ABORTS:
        sys.exit(130)
    sys.exit(code if isinstance(code, int) else 0)
