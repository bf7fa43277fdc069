from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    """Configuration for a selector builder."""

    strict: bool = True  # refuse further use after a validation error
    logger_name: str = "selectorkit"
