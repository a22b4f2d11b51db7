"""Reading any kind of user input from decoded configuration data."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

from maatools.bool_input import BoolInput
from maatools.primate import Primate
from maatools.select import Select
from maatools.text_input import Input
from maatools.userinput import UserInput

_READERS: tuple[Callable[[Any], UserInput], ...] = (
    partial(Input.from_dict, value_type=str),
    BoolInput.from_dict,
    partial(Input.from_dict, value_type=int),
    partial(Input.from_dict, value_type=float),
    partial(Select.from_dict, value_type=int),
    partial(Select.from_dict, value_type=float),
    partial(Select.from_dict, value_type=str),
)


def parse_input(data: Any) -> UserInput:
    """Read the first kind of input that fits the data.

    Kinds are tried in this order: string, bool, int and float inputs,
    then int, float and string selections.
    """
    for reader in _READERS:
        try:
            return reader(data)
        except (ValueError, TypeError):
            continue
    raise ValueError("data did not match any variant of untagged enum MAAInput")


def input_to_primate(user_input: UserInput) -> Primate:
    """Get the input's value and wrap it as a primitive."""
    return Primate.of(user_input.value())