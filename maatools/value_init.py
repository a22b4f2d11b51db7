"""Initializing configuration values: asking inputs and resolving optionals."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from maatools.maa_input import input_to_primate
from maatools.primate import Primate
from maatools.userinput import UserInput
from maatools.value import Optional


class ValueInitError(ValueError):
    """Raised when a value's structure makes initialization impossible."""


class _Mark(Enum):
    VISITING = auto()
    VISITED = auto()


def _as_primate(value: Any) -> Primate | None:
    try:
        return Primate.of(value)
    except (TypeError, ValueError):
        return None


def _sorted_keys(obj: dict[str, Any]) -> list[str]:
    """Order keys so that every optional comes after the keys it depends on."""
    order: list[str] = []
    marks: dict[str, _Mark] = {}

    def visit(key: str) -> None:
        mark = marks.get(key)
        if mark is _Mark.VISITED:
            return
        if mark is _Mark.VISITING:
            raise ValueInitError("circular dependencies")
        if key not in obj:
            return
        value = obj[key]
        if isinstance(value, Optional):
            marks[key] = _Mark.VISITING
            for cond_key in sorted(value.conditions):
                visit(cond_key)
        marks[key] = _Mark.VISITED
        order.append(key)

    for key in sorted(obj):
        visit(key)
    return order


def _satisfied(conditions: dict[str, Primate], initialized: dict[str, Any]) -> bool:
    for cond_key in sorted(conditions):
        if cond_key not in initialized:
            return False
        if _as_primate(initialized[cond_key]) != conditions[cond_key]:
            return False
    return True


def _initialize_object(obj: dict[str, Any]) -> dict[str, Any]:
    initialized: dict[str, Any] = {}
    for key in _sorted_keys(obj):
        value = obj[key]
        if isinstance(value, Optional):
            if _satisfied(value.conditions, initialized):
                initialized[key] = initialize(value.value)
        else:
            initialized[key] = initialize(value)
    return {key: initialized[key] for key in sorted(initialized)}


def initialize(value: Any) -> Any:
    """Return ``value`` with every input asked and every optional resolved.

    Inputs become plain primitives. In an object, optionals are kept only
    when all their conditions hold on the already initialized keys, and are
    dropped otherwise. Raises ValueInitError on circular dependencies or on
    an optional outside an object; errors from asking inputs pass through.
    """
    if isinstance(value, UserInput):
        return input_to_primate(value).serialize()
    if isinstance(value, list):
        return [initialize(item) for item in value]
    if isinstance(value, dict):
        return _initialize_object(value)
    if isinstance(value, Optional):
        raise ValueInitError("optional input must be in an object")
    return value