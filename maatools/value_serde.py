"""Converting configuration values from and to plain decoded data."""

from __future__ import annotations

from typing import Any

from maatools.maa_input import parse_input
from maatools.primate import Primate
from maatools.userinput import UserInput
from maatools.value import Optional

_NO_MATCH = "data did not match any variant of untagged enum MAAValue"


class SerializeError(ValueError):
    """Raised when a value cannot be turned into plain data."""


def _deserialize_optional(data: dict[str, Any]) -> Optional:
    keys = [key for key in ("conditions", "deps") if key in data]
    if len(keys) != 1:
        raise ValueError("expected exactly one of `conditions` or `deps`")
    raw_conditions = data[keys[0]]
    if not isinstance(raw_conditions, dict):
        raise ValueError("conditions must be a map")
    conditions = {}
    for key, expected in raw_conditions.items():
        if not isinstance(key, str):
            raise ValueError("condition keys must be strings")
        conditions[key] = Primate.deserialize(expected)
    rest = {key: value for key, value in data.items() if key != keys[0]}
    return Optional(conditions, deserialize(rest))


def _deserialize_object(data: dict[str, Any]) -> dict[str, Any]:
    if not all(isinstance(key, str) for key in data):
        raise ValueError("object keys must be strings")
    return {key: deserialize(value) for key, value in data.items()}


def deserialize(data: Any) -> Any:
    """Read a value from decoded data such as parsed JSON or TOML.

    Lists become arrays; a map is read as a user input if it fits one, then
    as an optional value if it has ``conditions`` (or ``deps``), and otherwise
    as an object; anything else must be a primitive.
    """
    if isinstance(data, (list, tuple)):
        return [deserialize(item) for item in data]
    if isinstance(data, dict):
        try:
            return parse_input(data)
        except ValueError:
            pass
        if "conditions" in data or "deps" in data:
            try:
                return _deserialize_optional(data)
            except ValueError:
                pass
        try:
            return _deserialize_object(data)
        except ValueError:
            raise ValueError(_NO_MATCH) from None
    try:
        return Primate.deserialize(data).serialize()
    except ValueError:
        raise ValueError(_NO_MATCH) from None


def serialize(value: Any) -> Any:
    """Turn an initialized value into plain data, with object keys sorted.

    Raises SerializeError if a user input or optional value is left.
    """
    if isinstance(value, (UserInput, Optional)):
        raise SerializeError(
            "cannot serialize input value, you should initialize it first"
        )
    if isinstance(value, Primate):
        return value.serialize()
    if isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    if isinstance(value, dict):
        if not all(isinstance(key, str) for key in value):
            raise SerializeError("object keys must be strings")
        return {key: serialize(value[key]) for key in sorted(value)}
    raise SerializeError(f"cannot serialize value of type {type(value).__name__}")