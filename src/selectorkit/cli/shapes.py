"""CLI commands: selectorkit rect / area -- rectangle JSON helpers."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import ParseError
from selectorkit.serialization import from_json, to_json
from selectorkit.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rect(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON."""
    click.echo(to_json(Rectangle(width, height)))


@click.command()
@click.argument("json_text")
def area(json_text: str) -> None:
    """Print the area of a rectangle given as JSON."""
    try:
        rectangle = from_json(Rectangle, json_text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    click.echo(rectangle.area())
