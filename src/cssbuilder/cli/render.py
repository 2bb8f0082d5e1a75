"""CLI commands: cssbuilder render / dump -- work with JSON selector trees."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import ParseError, SelectorError
from cssbuilder.objects import from_json, to_json
from cssbuilder.selector import selector_from_data, selector_to_data
from cssbuilder.selector.model import AnySelector


def _load(path: Path) -> AnySelector:
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        click.echo(f"Parse error: {path.name} is not valid UTF-8 ({exc.reason})", err=True)
        sys.exit(1)

    try:
        return selector_from_data(from_json(source))
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error: {exc}{location}", err=True)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
    sys.exit(1)


@click.command()
@click.argument("treefile", type=click.Path(exists=True))
def render(treefile: str) -> None:
    """Render a JSON selector tree to a selector string."""
    selector = _load(Path(treefile))
    click.echo(selector.stringify())


@click.command()
@click.argument("treefile", type=click.Path(exists=True))
@click.pass_obj
def dump(config: CssBuilderConfig | None, treefile: str) -> None:
    """Validate a JSON selector tree and print its canonical form."""
    selector = _load(Path(treefile))
    click.echo(to_json(selector_to_data(selector), config))
