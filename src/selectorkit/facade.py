"""Stateless factory functions that start a new SelectorBuilder.

Each function allocates a fresh builder holding one fragment (or one
combination), so no state is shared between calls::

    from selectorkit import facade as css

    css.combine(
        css.element("div").id("main"),
        "+",
        css.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

from selectorkit.builder import SelectorBuilder
from selectorkit.config import BuilderConfig

__all__ = [
    "BuilderFacade",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
]


def element(value: str, *, config: BuilderConfig | None = None) -> SelectorBuilder:
    return SelectorBuilder(config).element(value)


def id(value: str, *, config: BuilderConfig | None = None) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder(config).id(value)


def class_(value: str, *, config: BuilderConfig | None = None) -> SelectorBuilder:
    return SelectorBuilder(config).class_(value)


def attr(value: str, *, config: BuilderConfig | None = None) -> SelectorBuilder:
    return SelectorBuilder(config).attr(value)


def pseudo_class(value: str, *, config: BuilderConfig | None = None) -> SelectorBuilder:
    return SelectorBuilder(config).pseudo_class(value)


def pseudo_element(value: str, *, config: BuilderConfig | None = None) -> SelectorBuilder:
    return SelectorBuilder(config).pseudo_element(value)


def combine(
    left: SelectorBuilder,
    combinator: str,
    right: SelectorBuilder,
    *,
    config: BuilderConfig | None = None,
) -> SelectorBuilder:
    """Start a builder from ``left``, ``combinator`` and ``right``."""
    return SelectorBuilder(config).combine(left, combinator, right)


class BuilderFacade:
    """Namespace object exposing the factory functions as attributes."""

    __slots__ = ()

    element = staticmethod(element)
    id = staticmethod(id)
    class_ = staticmethod(class_)
    attr = staticmethod(attr)
    pseudo_class = staticmethod(pseudo_class)
    pseudo_element = staticmethod(pseudo_element)
    combine = staticmethod(combine)


css_selector_builder = BuilderFacade()
