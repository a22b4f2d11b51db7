"""Values that are asked from the user, with defaults and a batch mode."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, TextIO

_batch_mode = False


class NoDefault(Exception):
    """Raised by ``default()`` when no default value is set."""


class InvalidInput(ValueError):
    """Raised by ``parse()`` when the text is not a valid value.

    The explanation has already been written to the prompt writer.
    """


class BatchModeError(RuntimeError):
    """Raised when a value is needed in batch mode but there is no default."""


def enable_batch_mode() -> None:
    """Never ask the user; use default values instead."""
    set_batch_mode(True)


def set_batch_mode(enabled: bool) -> None:
    """Turn batch mode on or off."""
    global _batch_mode
    _batch_mode = bool(enabled)


def is_batch_mode() -> bool:
    """Whether values are taken from defaults instead of being asked."""
    return _batch_mode


class UserInput(ABC):
    """A parameter whose value comes from the user or from its default."""

    def value(self) -> Any:
        """Get the value, from the default in batch mode or by asking otherwise."""
        if is_batch_mode():
            try:
                return self.batch_default()
            except NoDefault:
                raise BatchModeError("can not get default value in batch mode") from None
        return self.ask(sys.stdout, sys.stdin)

    @abstractmethod
    def default(self) -> Any:
        """Return the default value, or raise NoDefault."""

    def batch_default(self) -> Any:
        """Return the value used in batch mode; falls back to ``default()``."""
        return self.default()

    def ask(self, writer: TextIO, reader: TextIO) -> Any:
        """Prompt on ``writer`` and read lines from ``reader`` until a value is given."""
        self.prompt(writer)
        writer.write(": ")
        writer.flush()
        while True:
            line = reader.readline()
            trimmed = line.strip()
            if not trimmed:
                try:
                    return self.default()
                except NoDefault:
                    if not line:
                        raise EOFError("input ended before a value was given") from None
                    self.prompt_no_default(writer)
                    writer.write(": ")
                    writer.flush()
            else:
                try:
                    return self.parse(trimmed, writer)
                except InvalidInput:
                    writer.write(": ")
                    writer.flush()

    @abstractmethod
    def prompt(self, writer: TextIO) -> None:
        """Write the question for this parameter, without flushing."""

    @abstractmethod
    def prompt_no_default(self, writer: TextIO) -> None:
        """Write the question asked after an empty answer when there is no default."""

    @abstractmethod
    def parse(self, text: str, writer: TextIO) -> Any:
        """Parse trimmed text; on failure write why and raise InvalidInput."""