"""CLI commands: selector-builder build / combine."""

from __future__ import annotations

import sys

import click

from selector_builder.config import SelectorBuilderConfig
from selector_builder.errors import FragmentSpecError, SelectorError
from selector_builder.fragments import build_selector
from selector_builder.model import Selector


def _build_or_exit(fragments: tuple[str, ...]) -> Selector:
    try:
        return build_selector(fragments)
    except (SelectorError, FragmentSpecError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("fragments", nargs=-1, required=True)
def build(fragments: tuple[str, ...]) -> None:
    """Build a selector from kind=value FRAGMENTS, applied in order.

    Kinds: element, id, class, attr, pseudo-class, pseudo-element.

    \b
    Example:
        selector-builder build element=div id=main class=container
    """
    selector = _build_or_exit(fragments)
    click.echo(selector.stringify())


@click.command()
@click.option(
    "--left", "-l", "left", multiple=True, required=True,
    help="Fragment of the left operand (repeatable)",
)
@click.option(
    "--right", "-r", "right", multiple=True, required=True,
    help="Fragment of the right operand (repeatable)",
)
@click.option(
    "--combinator", "-c", default=None,
    help="Combinator token: ' ', '+', '~' or '>' (default: descendant)",
)
@click.pass_obj
def combine(
    config: SelectorBuilderConfig,
    left: tuple[str, ...],
    right: tuple[str, ...],
    combinator: str | None,
) -> None:
    """Build two selectors and join them with a combinator."""
    if combinator is None:
        combinator = config.default_combinator
    left_selector = _build_or_exit(left)
    right_selector = _build_or_exit(right)
    click.echo(Selector.combine(left_selector, combinator, right_selector).stringify())
