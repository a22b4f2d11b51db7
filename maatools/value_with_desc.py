"""Alternatives of a selection, each with an optional description."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _display(value: Any) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


def parse_custom(value_type: type, text: str) -> Any:
    """Parse user text into a value of ``value_type`` (int, float or str).

    Raises ValueError when the text is not a valid value.
    """
    if value_type is int:
        if not _INT_RE.fullmatch(text):
            raise ValueError(f"invalid digit found in string {text!r}")
        number = int(text)
        if not _I32_MIN <= number <= _I32_MAX:
            raise ValueError(f"number too large to fit in target type: {text!r}")
        return number
    if value_type is float:
        if not _FLOAT_RE.fullmatch(text):
            raise ValueError(f"invalid float literal {text!r}")
        return float(text)
    if value_type is str:
        return text
    raise TypeError(f"unsupported value type {value_type.__name__}")


def _coerce(value_type: type, data: Any) -> Any:
    if value_type is int:
        if isinstance(data, int) and not isinstance(data, bool):
            if _I32_MIN <= data <= _I32_MAX:
                return data
            raise ValueError(f"integer {data} does not fit in 32 bits")
    elif value_type is float:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return float(data)
    elif value_type is str:
        if isinstance(data, str):
            return data
    else:
        raise TypeError(f"unsupported value type {value_type.__name__}")
    raise ValueError(f"invalid type: expected {value_type.__name__}, got {data!r}")


@dataclass(frozen=True)
class ValueWithDesc:
    """A selectable value, optionally described; shown as ``value (desc)``."""

    value: Any
    desc: str | None = None

    @classmethod
    def from_data(cls, data: Any, value_type: type) -> ValueWithDesc:
        """Read either a bare value or a ``{"value": ..., "desc": ...}`` mapping."""
        if isinstance(data, ValueWithDesc):
            return cls(_coerce(value_type, data.value), data.desc)
        if isinstance(data, dict):
            if set(data) != {"value", "desc"}:
                raise ValueError(
                    "data did not match any variant of untagged enum ValueWithDesc"
                )
            desc = data["desc"]
            if not isinstance(desc, str):
                raise ValueError(f"invalid type: expected a string desc, got {desc!r}")
            return cls(_coerce(value_type, data["value"]), desc)
        try:
            return cls(_coerce(value_type, data))
        except ValueError:
            raise ValueError(
                "data did not match any variant of untagged enum ValueWithDesc"
            ) from None

    def __str__(self) -> str:
        if self.desc is None:
            return _display(self.value)
        return f"{_display(self.value)} ({self.desc})"