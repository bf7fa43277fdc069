"""Error hierarchy for selector building and JSON helpers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from selectorkit.fragments import FragmentKind


class SelectorError(Exception):
    """Base error for all selector builder errors."""

    def __init__(
        self,
        message: str,
        *,
        kind: FragmentKind | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.cause = cause


class CardinalityError(SelectorError):
    """Element, id or pseudo-element occurs more than once in a compound selector."""

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more then one time inside the selector",
            **kwargs,
        )


class OrderError(SelectorError):
    """A fragment was appended out of grammar order."""

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            **kwargs,
        )


class BuilderStateError(SelectorError):
    """The builder already failed validation and cannot be used again."""


class ParseError(Exception):
    """Raised when JSON text cannot be turned into the requested value."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ):
        self.line = line
        self.column = column
        self.cause = cause
        super().__init__(message)
