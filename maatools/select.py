"""Selecting one of several alternatives, optionally allowing a custom value."""

from __future__ import annotations

import re
from typing import Any, Iterable, TextIO

from maatools.userinput import InvalidInput, NoDefault, UserInput
from maatools.value_with_desc import ValueWithDesc, parse_custom

_INDEX_RE = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1


def _infer_type(item: Any) -> type:
    if isinstance(item, ValueWithDesc):
        item = item.value
    elif isinstance(item, dict) and "value" in item:
        item = item["value"]
    if isinstance(item, bool):
        raise TypeError("boolean alternatives are not supported")
    for value_type in (int, float, str):
        if isinstance(item, value_type):
            return value_type
    raise TypeError(f"unsupported alternative {item!r}")


class Select(UserInput):
    """Asks the user to pick one of ``alternatives`` by its 1-based index.

    ``default_index`` is 1-based as well. With ``allow_custom`` a text that is
    not an index is parsed as a value of ``value_type``.
    """

    def __init__(
        self,
        alternatives: Iterable[Any],
        default_index: int | None = None,
        description: str | None = None,
        allow_custom: bool = False,
        value_type: type | None = None,
    ) -> None:
        items = list(alternatives)
        if not items:
            raise ValueError("alternatives is empty")
        if value_type is None:
            value_type = _infer_type(items[0])
        self.value_type = value_type
        self.alternatives = [ValueWithDesc.from_data(item, value_type) for item in items]
        if default_index is not None and not 1 <= default_index <= len(self.alternatives):
            raise ValueError(f"default_index out of range (1 - {len(self.alternatives)})")
        self.default_index = default_index
        self.description = description
        self.allow_custom = bool(allow_custom)

    @classmethod
    def from_dict(cls, data: dict[str, Any], value_type: type) -> Select:
        """Read from a mapping with ``alternatives`` and optional settings."""
        if not isinstance(data, dict):
            raise ValueError(f"invalid type: expected a map, got {data!r}")
        known = {"alternatives", "default_index", "description", "allow_custom"}
        unknown = set(data) - known
        if unknown:
            name = sorted(unknown)[0]
            raise ValueError(f"unknown field `{name}`")
        alternatives = data.get("alternatives", [])
        if not isinstance(alternatives, list):
            raise ValueError(f"invalid type: expected a sequence, got {alternatives!r}")
        default_index = data.get("default_index")
        if default_index is not None and (
            isinstance(default_index, bool)
            or not isinstance(default_index, int)
            or default_index < 0
        ):
            raise ValueError(f"invalid type: expected an index, got {default_index!r}")
        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError(f"invalid type: expected a string, got {description!r}")
        allow_custom = data.get("allow_custom", False)
        if not isinstance(allow_custom, bool):
            raise ValueError(f"invalid type: expected a boolean, got {allow_custom!r}")
        return cls(alternatives, default_index, description, allow_custom, value_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Select):
            return NotImplemented
        return (
            self.alternatives == other.alternatives
            and self.default_index == other.default_index
            and self.description == other.description
            and self.allow_custom == other.allow_custom
            and self.value_type is other.value_type
        )

    def __repr__(self) -> str:
        return (
            f"Select({self.alternatives!r}, {self.default_index!r}, "
            f"{self.description!r}, {self.allow_custom!r}, {self.value_type.__name__})"
        )

    def default(self) -> Any:
        if self.default_index is None:
            raise NoDefault("default value not set")
        return self.alternatives[self.default_index - 1].value

    def batch_default(self) -> Any:
        """The default alternative, or the first one when no default is set."""
        return self.alternatives[(self.default_index or 1) - 1].value

    def _subject(self) -> str:
        text = f" {self.description}" if self.description is not None else (
            " one of the alternatives"
        )
        if self.allow_custom:
            text += " or input a custom value"
        return text

    def prompt(self, writer: TextIO) -> None:
        for number, alternative in enumerate(self.alternatives, start=1):
            writer.write(f"{number}. {alternative}")
            if number == self.default_index:
                writer.write(" [default]\n")
            else:
                writer.write("\n")
        writer.write("Please select")
        writer.write(self._subject())
        if self.default_index is not None:
            writer.write(" (empty for default)")

    def prompt_no_default(self, writer: TextIO) -> None:
        writer.write("Default not set, please select")
        writer.write(self._subject())

    def parse(self, text: str, writer: TextIO) -> Any:
        count = len(self.alternatives)
        index = int(text) if _INDEX_RE.fullmatch(text) else None
        if index is not None and index <= _USIZE_MAX:
            if not 1 <= index <= count:
                writer.write(
                    f"Index {index} out of range, please try again (1 - {count})"
                )
                raise InvalidInput(text)
            return self.alternatives[index - 1].value
        if self.allow_custom:
            try:
                return parse_custom(self.value_type, text)
            except ValueError:
                writer.write(
                    f'Invalid input "{text}", please input an index number '
                    f"(1 - {count}) or a custom value"
                )
                raise InvalidInput(text) from None
        writer.write(
            f'Invalid index "{text}", please input an index number (1 - {count})'
        )
        raise InvalidInput(text)