"""CLI command: selectorkit build -- assemble a selector from tokens."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import SelectorBuilder
from selectorkit.errors import SelectorError
from selectorkit.facade import combine
from selectorkit.fragments import Combinator, FragmentKind

_KINDS = {kind.value: kind for kind in FragmentKind}

_COMBINATORS = {
    " ": Combinator.DESCENDANT,
    ">": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
    "descendant": Combinator.DESCENDANT,
    "child": Combinator.CHILD,
    "adjacent": Combinator.ADJACENT_SIBLING,
    "sibling": Combinator.GENERAL_SIBLING,
}


def _split_tokens(
    tokens: tuple[str, ...],
) -> tuple[list[list[tuple[FragmentKind, str]]], list[Combinator]]:
    """Split tokens into compound fragment runs and the combinators between them."""
    compounds: list[list[tuple[FragmentKind, str]]] = [[]]
    combinators: list[Combinator] = []
    for token in tokens:
        if token in _COMBINATORS:
            if not compounds[-1]:
                raise click.UsageError(f"Combinator {token!r} must follow a fragment")
            combinators.append(_COMBINATORS[token])
            compounds.append([])
            continue
        name, sep, value = token.partition(":")
        if not sep or name not in _KINDS:
            raise click.UsageError(
                f"Invalid token {token!r}; expected KIND:VALUE with KIND one of "
                + ", ".join(_KINDS)
            )
        compounds[-1].append((_KINDS[name], value))
    if not compounds[-1]:
        raise click.UsageError("Selector must end with a fragment")
    return compounds, combinators


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND:VALUE tokens and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Combinators are >, +, ~ or a single space, or the names child, adjacent,
    sibling and descendant.

    Example: selectorkit build element:a 'attr:href$=".png"' pseudo-class:focus
    """
    compounds, combinators = _split_tokens(tokens)

    try:
        builders = []
        for fragments in compounds:
            builder = SelectorBuilder()
            for kind, value in fragments:
                builder.append(kind, value)
            builders.append(builder)

        result = builders[0]
        for combinator, right in zip(combinators, builders[1:]):
            result = combine(result, combinator, right)
        click.echo(result.stringify())
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
