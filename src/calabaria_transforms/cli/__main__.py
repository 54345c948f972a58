"""Calabaria-Transforms CLI entry point.

Usage:
    cbt forward LEFT RIGHT X...    map unconstrained values into (LEFT, RIGHT)
    cbt inverse LEFT RIGHT Y...    map values in (LEFT, RIGHT) back to the real line
    cbt --version
"""

import logging
from typing import Optional

import typer

from .evaluate import forward_command, inverse_command

app = typer.Typer(
    name="cbt",
    help="Evaluate scalar interval transforms and their log-Jacobians",
    invoke_without_command=True,
    add_completion=False,
)

# Negative numbers and -inf are arguments, not options
_ARGS_SETTINGS = {"ignore_unknown_options": True}

app.command("forward", context_settings=_ARGS_SETTINGS)(forward_command)
app.command("inverse", context_settings=_ARGS_SETTINGS)(inverse_command)


def _show_version(value: bool) -> None:
    if not value:
        return
    from .. import __version__
    typer.echo(f"cbt (calabaria-transforms) {__version__}")
    raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log which transform is used"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_show_version, is_eager=True, help="Print the version and exit"
    ),
):
    """Evaluate scalar interval transforms and their log-Jacobians."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        typer.echo("\nError: expected 'forward' or 'inverse'.", err=True)
        raise typer.Exit(1)


def cli_main():
    """Console script entry point."""
    app(prog_name="cbt")


if __name__ == "__main__":
    cli_main()
