"""Evaluate interval transforms from the command line."""

import logging
import math
from typing import List

import typer

from ..scalar import INFINITY, ScalarTransform, interval_transform

logger = logging.getLogger(__name__)

_POSITIVE_INFINITY = {"inf", "+inf", "infinity", "+infinity", "∞", "+∞"}
_NEGATIVE_INFINITY = {"-inf", "-infinity", "-∞"}


def parse_boundary(raw: str):
    """Parse an interval boundary: a float, or a spelling of ±infinity.

    Raises:
        ValueError: If raw is neither a finite number nor an infinity
    """
    text = raw.strip().lower()
    if text in _POSITIVE_INFINITY:
        return INFINITY
    if text in _NEGATIVE_INFINITY:
        return -INFINITY

    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"boundary must be finite or ±inf, got {raw!r}")
    return value


def _build(left: str, right: str) -> ScalarTransform:
    try:
        transform = interval_transform(parse_boundary(left), parse_boundary(right))
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    logger.info(f"Using {transform!r} for ({left}, {right})")
    return transform


def _format_row(*values) -> str:
    return "\t".join(f"{float(v):.10g}" for v in values)


def forward_command(
    left: str = typer.Argument(..., help="Lower boundary (number or -inf)"),
    right: str = typer.Argument(..., help="Upper boundary (number or inf)"),
    values: List[float] = typer.Argument(..., help="Unconstrained values to transform"),
):
    """Map unconstrained values into (LEFT, RIGHT).

    Prints one row per value: x, transform(x), log-Jacobian.
    """
    transform = _build(left, right)

    typer.echo("x\ty\tlogjac")
    for x in values:
        y, logjac = transform.transform_and_logjac(x)
        typer.echo(_format_row(x, y, logjac))


def inverse_command(
    left: str = typer.Argument(..., help="Lower boundary (number or -inf)"),
    right: str = typer.Argument(..., help="Upper boundary (number or inf)"),
    values: List[float] = typer.Argument(..., help="Constrained values to map back"),
):
    """Map values in (LEFT, RIGHT) back to the real line.

    Prints one row per value: y, inverse(y), inverse log-Jacobian.
    """
    transform = _build(left, right)

    typer.echo("y\tx\tlogjac")
    for y in values:
        x, logjac = transform.inverse_and_logjac(y)
        typer.echo(_format_row(y, x, logjac))
