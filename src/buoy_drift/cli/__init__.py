"""CLI entry point; registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="buoy",
    help="Buoy - Design Drift Detection for Component Codebases",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"buoy-drift {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit",
    ),
):
    """Find hardcoded styles that drift from your design tokens."""


def main() -> None:
    app()


# Import subcommands to register them
from .scan import scan as _scan  # noqa: F401, E402
from .check import check as _check  # noqa: F401, E402
from .fix import fix as _fix  # noqa: F401, E402
from .baseline import baseline as _baseline  # noqa: F401, E402
from .tokens import tokens as _tokens  # noqa: F401, E402
