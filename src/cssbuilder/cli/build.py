"""CLI command: cssbuilder build -- assemble one selector from options."""

from __future__ import annotations

import click

from cssbuilder.selector import Selector


@click.command()
@click.option("--element", "element", default=None, help="Element (type) name")
@click.option("--id", "id_", default=None, help="Id, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name; repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute expression; repeatable")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class; repeatable")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector and print it.

    Options are applied in selector order regardless of the order they are
    given on the command line.
    """
    if element is None and id_ is None and pseudo_element is None and not (
        classes or attrs or pseudo_classes
    ):
        raise click.UsageError("Give at least one selector fragment option.")

    selector = Selector()
    if element is not None:
        selector.set_element(element)
    if id_ is not None:
        selector.set_id(id_)
    for name in classes:
        selector.add_class(name)
    for expr in attrs:
        selector.add_attr(expr)
    for name in pseudo_classes:
        selector.add_pseudo_class(name)
    if pseudo_element is not None:
        selector.set_pseudo_element(pseudo_element)

    click.echo(selector.stringify())
