"""Configuration values: objects, arrays, primitives, user inputs and optionals.

An object is a ``dict`` with string keys, an array is a ``list``, primitives
are plain ``bool``, ``int``, ``float`` and ``str``, a value still to be asked
is a ``UserInput``, and a conditional value is an ``Optional``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from maatools.primate import Primate


@dataclass
class Optional:
    """A value kept only when every condition holds.

    Conditions map keys of the same object to the primitive value they are
    expected to have once that object is initialized.
    """

    conditions: dict[str, Primate] = field(default_factory=dict)
    value: Any = None

    def __post_init__(self) -> None:
        self.conditions = {
            str(key): Primate.of(expected) for key, expected in self.conditions.items()
        }


def _as_primate(value: Any) -> Primate | None:
    try:
        return Primate.of(value)
    except (TypeError, ValueError):
        return None


def get_or(obj: Any, key: str, default: Any) -> Any:
    """Get ``obj[key]`` if it is a primitive of the same kind as ``default``.

    Returns ``default`` when ``obj`` is not an object, the key is missing,
    or the value has another kind.
    """
    if not isinstance(obj, dict) or key not in obj:
        return default
    found = _as_primate(obj[key])
    if found is not None and found.kind is Primate.of(default).kind:
        return found.value
    return default


def insert(obj: Any, key: str, value: Any) -> None:
    """Set ``obj[key]``; raises TypeError if ``obj`` is not an object."""
    if not isinstance(obj, dict):
        raise TypeError("value is not an object")
    obj[key] = value


def maybe_insert(obj: Any, key: str, value: Any) -> None:
    """Insert ``value`` unless it is None."""
    if value is not None:
        insert(obj, key, value)


def merge_into(base: Any, other: Any) -> Any:
    """Merge ``other`` into ``base`` and return the result.

    Objects are merged key by key, recursively and in place; anything else,
    arrays included, is replaced by a copy of ``other``.
    """
    if isinstance(base, dict) and isinstance(other, dict):
        for key, value in other.items():
            if key in base:
                base[key] = merge_into(base[key], value)
            else:
                base[key] = copy.deepcopy(value)
        return base
    return copy.deepcopy(other)


def merge(base: Any, other: Any) -> Any:
    """Return ``base`` merged with ``other``, leaving both untouched."""
    return merge_into(copy.deepcopy(base), other)