"""SelectorBuilder: fluent, validating builder for CSS selectors."""

from __future__ import annotations

import logging
from enum import Enum

from selectorkit.config import BuilderConfig
from selectorkit.errors import BuilderStateError, CardinalityError, OrderError
from selectorkit.fragments import SINGLETON_KINDS, FragmentKind

__all__ = ["BuilderState", "SelectorBuilder"]


class BuilderState(Enum):
    OPEN = "open"
    FAILED = "failed"


class SelectorBuilder:
    """Accumulates selector fragments and renders them as text.

    Every fragment method appends to the builder and returns the same
    instance, so calls can be chained::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Fragments are validated after each append: element, id and
    pseudo-element may occur once, and all kinds must follow the grammar
    order element, id, class, attribute, pseudo-class, pseudo-element.
    A builder is owned by a single call chain and is not thread-safe.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()
        self.state = BuilderState.OPEN
        self.text = ""
        self.counts: dict[FragmentKind, int] = {}
        self.order: list[FragmentKind] = []
        self._log = logging.getLogger(self.config.logger_name)

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ATTR, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Append a fragment of *kind* and validate the result.

        Raises CardinalityError or OrderError when the fragment breaks the
        selector grammar.  The rendered fragment stays in ``text`` either way.
        """
        self._ensure_open()
        self.text += kind.render(value)
        if kind in SINGLETON_KINDS:
            self.counts[kind] = self.counts.get(kind, 0) + 1
        self.order.append(kind)
        self._log.debug("Appended %s fragment %r", kind.value, value)
        self._validate(kind)
        return self

    # --- combination ----------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Append ``left``, ``combinator`` and ``right`` separated by single spaces.

        The combinator is not checked; any string is rendered as given.
        """
        self._ensure_open()
        self.text += f"{left.stringify()} {combinator} {right.stringify()}"
        self._log.debug("Combined selectors with %r", str(combinator))
        return self

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text and clear validation bookkeeping."""
        self._ensure_open()
        self._reset()
        return self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.text!r})"

    # --- validation -----------------------------------------------------------

    def _validate(self, appended: FragmentKind) -> None:
        if any(count > 1 for count in self.counts.values()):
            self._fail(CardinalityError(kind=appended))

        first_seen: dict[FragmentKind, int] = {}
        for position, kind in enumerate(self.order):
            first_seen.setdefault(kind, position)
        present = sorted(first_seen, key=lambda k: k.rank)
        for earlier, later in zip(present, present[1:]):
            if first_seen[earlier] > first_seen[later]:
                self._fail(OrderError(kind=appended))

    def _fail(self, error: CardinalityError | OrderError) -> None:
        self._reset()
        if self.config.strict:
            self.state = BuilderState.FAILED
        self._log.warning("Rejected %s fragment: %s", error.kind.value, error)
        raise error

    def _reset(self) -> None:
        self.counts = {}
        self.order = []

    def _ensure_open(self) -> None:
        if self.state is BuilderState.FAILED:
            raise BuilderStateError(
                f"Builder already failed validation and cannot be reused: {self.text!r}"
            )
