"""A typed value asked of the user: an integer, a float or a string."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TextIO

from maatools.userinput import InvalidInput, NoDefault, UserInput
from maatools.value_with_desc import parse_custom

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_TYPE_NAMES = {int: "i32", float: "f32", str: "string"}


def _display(value: Any) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


def _infer_type(value: Any) -> type:
    if isinstance(value, bool):
        raise TypeError("use BoolInput for boolean values")
    for value_type in (int, float, str):
        if isinstance(value, value_type):
            return value_type
    raise TypeError(f"unsupported value type {type(value).__name__}")


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
    raise ValueError(f"invalid type: expected {_TYPE_NAMES[value_type]}, got {data!r}")


@dataclass
class Input(UserInput):
    """Asks the user for a value of ``value_type`` (int, float or str).

    When ``value_type`` is omitted it is taken from the default value.
    """

    default_value: Any = None
    description: str | None = None
    value_type: type | None = None

    def __post_init__(self) -> None:
        if self.value_type is None:
            if self.default_value is None:
                raise TypeError("value_type is required when there is no default")
            self.value_type = _infer_type(self.default_value)
        if self.value_type not in _TYPE_NAMES:
            raise TypeError(f"unsupported value type {self.value_type!r}")
        if self.default_value is not None:
            self.default_value = _coerce(self.value_type, self.default_value)

    @classmethod
    def from_dict(cls, data: dict[str, Any], value_type: type) -> Input:
        """Read from a mapping with optional ``default`` and ``description`` keys."""
        if value_type not in _TYPE_NAMES:
            raise TypeError(f"unsupported value type {value_type!r}")
        if not isinstance(data, dict):
            raise ValueError(f"invalid type: expected a map, got {data!r}")
        unknown = set(data) - {"default", "description"}
        if unknown:
            name = sorted(unknown)[0]
            raise ValueError(
                f"unknown field `{name}`, expected `default` or `description`"
            )
        default = data.get("default")
        description = data.get("description")
        if default is not None:
            default = _coerce(value_type, default)
        if description is not None and not isinstance(description, str):
            raise ValueError(f"invalid type: expected a string, got {description!r}")
        return cls(default, description, value_type)

    def _type_name(self) -> str:
        return _TYPE_NAMES[self.value_type]

    def _subject(self) -> str:
        if self.description is not None:
            return f" {self.description}"
        return f" a {self._type_name()}"

    def default(self) -> Any:
        if self.default_value is None:
            raise NoDefault("default value not set")
        return self.default_value

    def prompt(self, writer: TextIO) -> None:
        writer.write("Please input")
        writer.write(self._subject())
        if self.default_value is not None:
            writer.write(f" [default: {_display(self.default_value)}]")

    def prompt_no_default(self, writer: TextIO) -> None:
        writer.write("Default value not set, please input")
        writer.write(self._subject())

    def parse(self, text: str, writer: TextIO) -> Any:
        try:
            return parse_custom(self.value_type, text)
        except ValueError:
            writer.write(f'Invalid input "{text}", please try again')
            raise InvalidInput(text) from None