"""JSON helpers: compact serialisation and typed deserialisation."""

from __future__ import annotations

import dataclasses
import json
import math
import typing
from typing import Any, Callable, TypeVar

from selectorkit.errors import ParseError

__all__ = ["from_json", "to_json"]

T = TypeVar("T")


def _to_plain(value: Any) -> Any:
    """Flatten dataclasses and replace non-finite floats with None."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


def to_json(value: Any) -> str:
    """Return the compact JSON text of *value*.

    Keys keep insertion order and no whitespace is emitted, so
    ``[1, 2, 3]`` becomes ``'[1,2,3]'``.  Dataclass instances are written
    as their field mapping.  NaN and infinities are written as ``null``.
    """
    return json.dumps(_to_plain(value), separators=(",", ":"), allow_nan=False)


def from_json(target: Callable[..., T], text: str | bytes) -> T:
    """Parse *text* and rebuild it as an instance of *target*.

    The JSON must be an object.  Its keys are passed to *target* as keyword
    arguments; for dataclass targets, keys that are not init fields are
    rejected and fields annotated with a dataclass type are rebuilt from
    their nested objects.  Raises ParseError for malformed JSON or a shape
    that does not fit *target*.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid JSON encoding: {exc.reason}", cause=exc) from exc
    return _build(target, data)


def _build(target: Callable[..., T], data: Any) -> T:
    name = getattr(target, "__name__", repr(target))
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object for {name}, got {type(data).__name__}")

    if dataclasses.is_dataclass(target):
        init_fields = [f for f in dataclasses.fields(target) if f.init]
        unknown = sorted(set(data) - {f.name for f in init_fields})
        if unknown:
            raise ParseError(f"Unknown field(s) for {name}: {', '.join(unknown)}")

        hints = typing.get_type_hints(target)
        data = dict(data)
        for f in init_fields:
            field_type = hints.get(f.name)
            if (
                f.name in data
                and isinstance(field_type, type)
                and dataclasses.is_dataclass(field_type)
            ):
                data[f.name] = _build(field_type, data[f.name])

    try:
        return target(**data)
    except TypeError as exc:
        raise ParseError(f"Cannot build {name}: {exc}", cause=exc) from exc
