"""Fragment kinds and combinators that make up a CSS selector.

A compound selector is written in a fixed grammar order::

    element#id.class[attr]:pseudo-class::pseudo-element

Element, id and pseudo-element may appear at most once; class, attribute
and pseudo-class may repeat.
"""

from __future__ import annotations

from enum import Enum, StrEnum


class FragmentKind(Enum):
    """One typed piece of a compound selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the grammar order (0 = element)."""
        return _GRAMMAR_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        return self in SINGLETON_KINDS

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's delimiters."""
        prefix, suffix = _DELIMITERS[self]
        return f"{prefix}{value}{suffix}"


class Combinator(StrEnum):
    """Structural relationship between two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


_GRAMMAR_ORDER = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTR,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

SINGLETON_KINDS = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

_DELIMITERS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTR: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}
