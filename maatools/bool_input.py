"""A yes/no question asked of the user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TextIO

from maatools.userinput import InvalidInput, NoDefault, UserInput

_YES = frozenset({"y", "Y", "yes", "Yes", "YES"})
_NO = frozenset({"n", "N", "no", "No", "NO"})


@dataclass
class BoolInput(UserInput):
    """Asks the user whether to do something."""

    default_value: bool | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoolInput:
        """Read from a mapping with optional ``default`` and ``description`` keys."""
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
        if default is not None and not isinstance(default, bool):
            raise ValueError(f"invalid type: expected a boolean, got {default!r}")
        if description is not None and not isinstance(description, str):
            raise ValueError(f"invalid type: expected a string, got {description!r}")
        return cls(default, description)

    def default(self) -> bool:
        if self.default_value is None:
            raise NoDefault("default value not set")
        return self.default_value

    def prompt(self, writer: TextIO) -> None:
        writer.write("Whether to")
        if self.description is not None:
            writer.write(f" {self.description}")
        else:
            writer.write(" do something")
        if self.default_value is None:
            writer.write(" [y/n]")
        elif self.default_value:
            writer.write(" [Y/n]")
        else:
            writer.write(" [y/N]")

    def prompt_no_default(self, writer: TextIO) -> None:
        writer.write("Default value not set, please input y/n")

    def parse(self, text: str, writer: TextIO) -> bool:
        if text in _YES:
            return True
        if text in _NO:
            return False
        writer.write("Invalid input, please input y/n")
        raise InvalidInput(text)