import io

import pytest

from maatools.bool_input import BoolInput
from maatools.userinput import InvalidInput, NoDefault


def test_from_dict():
    assert BoolInput.from_dict({"default": True, "description": "do something"}) == (
        BoolInput(True, "do something")
    )
    assert BoolInput.from_dict({"default": False}) == BoolInput(False, None)
    assert BoolInput.from_dict({"description": "do something"}) == (
        BoolInput(None, "do something")
    )
    assert BoolInput.from_dict({}) == BoolInput(None, None)


def test_from_dict_rejects_unknown_fields():
    with pytest.raises(ValueError, match="unknown field `other`"):
        BoolInput.from_dict({"default": True, "other": 1})


def test_from_dict_rejects_wrong_types():
    with pytest.raises(ValueError):
        BoolInput.from_dict({"default": "yes"})
    with pytest.raises(ValueError):
        BoolInput.from_dict({"description": 3})


def test_construct():
    full = BoolInput(True, "do something")
    assert full.default_value is True
    assert full.description == "do something"

    bare = BoolInput(None, None)
    assert bare.default_value is None
    assert bare.description is None


def test_default():
    assert BoolInput(True, None).default() is True
    assert BoolInput(False, None).default() is False
    with pytest.raises(NoDefault):
        BoolInput(None, None).default()


def test_prompt():
    buffer = io.StringIO()
    BoolInput(True, None).prompt(buffer)
    assert buffer.getvalue() == "Whether to do something [Y/n]"

    buffer = io.StringIO()
    BoolInput(True, "do other thing").prompt(buffer)
    assert buffer.getvalue() == "Whether to do other thing [Y/n]"

    buffer = io.StringIO()
    BoolInput(None, "do other thing").prompt(buffer)
    assert buffer.getvalue() == "Whether to do other thing [y/n]"

    buffer = io.StringIO()
    BoolInput(False, None).prompt(buffer)
    assert buffer.getvalue() == "Whether to do something [y/N]"


def test_prompt_no_default():
    buffer = io.StringIO()
    BoolInput(None, None).prompt_no_default(buffer)
    assert buffer.getvalue() == "Default value not set, please input y/n"


@pytest.mark.parametrize("text", ["y", "Y", "yes", "Yes", "YES"])
def test_parse_yes(text):
    assert BoolInput(None, None).parse(text, io.StringIO()) is True


@pytest.mark.parametrize("text", ["n", "N", "no", "No", "NO"])
def test_parse_no(text):
    assert BoolInput(None, None).parse(text, io.StringIO()) is False


def test_parse_invalid():
    bool_input = BoolInput(None, None)
    output = io.StringIO()
    with pytest.raises(InvalidInput):
        bool_input.parse("invalid", output)
    assert bool_input == BoolInput(None, None)
    assert output.getvalue() == "Invalid input, please input y/n"