"""selectorkit: build CSS selectors forward from typed fragments."""
from __future__ import annotations

from selectorkit.builder import BuilderState, SelectorBuilder
from selectorkit.config import BuilderConfig
from selectorkit.errors import (
    BuilderStateError,
    CardinalityError,
    OrderError,
    ParseError,
    SelectorError,
)
from selectorkit.facade import BuilderFacade, css_selector_builder
from selectorkit.fragments import Combinator, FragmentKind
from selectorkit.serialization import from_json, to_json
from selectorkit.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "BuilderFacade",
    "BuilderState",
    "BuilderStateError",
    "CardinalityError",
    "Combinator",
    "FragmentKind",
    "OrderError",
    "ParseError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "css_selector_builder",
    "from_json",
    "to_json",
]
