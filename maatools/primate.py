"""Primitive configuration values: booleans, integers, floats and strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

PrimateValue = Union[bool, int, float, str]


class PrimateKind(Enum):
    """The kind of a primitive value."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True)
class Primate:
    """A tagged primitive value; values of different kinds never compare equal."""

    kind: PrimateKind
    value: PrimateValue

    @classmethod
    def of(cls, value: PrimateValue | Primate) -> Primate:
        """Wrap a Python bool, int, float or str."""
        if isinstance(value, Primate):
            return value
        if isinstance(value, bool):
            return cls(PrimateKind.BOOL, value)
        if isinstance(value, int):
            if not _I32_MIN <= value <= _I32_MAX:
                raise ValueError(f"integer {value} does not fit in 32 bits")
            return cls(PrimateKind.INT, value)
        if isinstance(value, float):
            return cls(PrimateKind.FLOAT, value)
        if isinstance(value, str):
            return cls(PrimateKind.STRING, value)
        raise TypeError(f"cannot make a primitive value from {type(value).__name__}")

    @classmethod
    def deserialize(cls, data: object) -> Primate:
        """Read a primitive from decoded data, trying bool, int, float, then string."""
        if isinstance(data, bool):
            return cls(PrimateKind.BOOL, data)
        if isinstance(data, int):
            if _I32_MIN <= data <= _I32_MAX:
                return cls(PrimateKind.INT, data)
            return cls(PrimateKind.FLOAT, float(data))
        if isinstance(data, float):
            return cls(PrimateKind.FLOAT, data)
        if isinstance(data, str):
            return cls(PrimateKind.STRING, data)
        raise ValueError("data did not match any variant of untagged enum MAAPrimate")

    def serialize(self) -> PrimateValue:
        """Return the plain Python value."""
        return self.value

    def as_bool(self) -> bool | None:
        return self.value if self.kind is PrimateKind.BOOL else None

    def as_int(self) -> int | None:
        return self.value if self.kind is PrimateKind.INT else None

    def as_float(self) -> float | None:
        return self.value if self.kind is PrimateKind.FLOAT else None

    def as_str(self) -> str | None:
        return self.value if self.kind is PrimateKind.STRING else None