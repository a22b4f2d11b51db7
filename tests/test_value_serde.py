import pytest

from maatools.bool_input import BoolInput
from maatools.primate import Primate
from maatools.select import Select
from maatools.text_input import Input
from maatools.value import Optional
from maatools.value_serde import SerializeError, deserialize, serialize


def source_data():
    return {
        "array": [1, 2],
        "bool": True,
        "float": 1.0,
        "int": 1,
        "object": {"key": "value"},
        "string": "string",
        "input_bool": {"default": True},
        "input_int": {"default": 1},
        "input_float": {"default": 1.0},
        "input_string": {"default": "string"},
        "select_int": {"alternatives": [1, 2], "default_index": 2},
        "select_float": {"alternatives": [1.0, 2.0], "default_index": 2},
        "select_string": {"alternatives": ["string1", "string2"], "default_index": 2},
        "optional": {"conditions": {"input_bool": True}, "default": 1},
        "optional_no_satisfied": {"conditions": {"input_bool": False}, "default": 1},
        "optional_object": {
            "conditions": {"input_bool": True},
            "key1": "value1",
            "key2": "value2",
        },
    }


def test_deserialize_primitives_and_containers():
    value = deserialize(source_data())
    assert value["array"] == [1, 2]
    assert value["bool"] is True
    assert value["float"] == 1.0 and isinstance(value["float"], float)
    assert value["int"] == 1 and isinstance(value["int"], int)
    assert value["object"] == {"key": "value"}
    assert value["string"] == "string"


def test_deserialize_inputs():
    value = deserialize(source_data())
    assert value["input_bool"] == BoolInput(True, None)
    assert value["input_int"] == Input(1, None, int)
    assert value["input_float"] == Input(1.0, None, float)
    assert value["input_string"] == Input("string", None, str)
    assert value["select_int"] == Select([1, 2], 2, None, False, int)
    assert value["select_float"] == Select([1.0, 2.0], 2, None, False, float)
    assert value["select_string"] == Select(["string1", "string2"], 2, None, False, str)


def test_deserialize_optionals():
    value = deserialize(source_data())
    assert value["optional"] == Optional({"input_bool": True}, Input(1, None, int))
    assert value["optional_no_satisfied"] == Optional(
        {"input_bool": False}, Input(1, None, int)
    )
    assert value["optional_object"] == Optional(
        {"input_bool": True}, {"key1": "value1", "key2": "value2"}
    )


def test_deserialize_deps_alias():
    value = deserialize({"deps": {"a": 1}, "default": True})
    assert value == Optional({"a": Primate.of(1)}, BoolInput(True, None))


def test_deserialize_large_int_becomes_float():
    value = deserialize(2**40)
    assert value == float(2**40)
    assert isinstance(value, float)


def test_deserialize_rejects_unknown_data():
    with pytest.raises(ValueError, match="untagged enum MAAValue"):
        deserialize(None)
    with pytest.raises(ValueError, match="untagged enum MAAValue"):
        deserialize({"key": None})


def test_serialize_sorts_keys():
    value = {
        "string": "string",
        "array": [1, 2],
        "object": {"key2": "value2", "key1": "value1"},
        "bool": True,
        "float": 1.0,
    }
    out = serialize(value)
    assert list(out) == ["array", "bool", "float", "object", "string"]
    assert list(out["object"]) == ["key1", "key2"]
    assert out["array"] == [1, 2]


def test_serialize_primate():
    assert serialize([Primate.of(2.0), Primate.of("x")]) == [2.0, "x"]


def test_serialize_input_fails():
    with pytest.raises(
        SerializeError, match="cannot serialize input value, you should initialize it first"
    ):
        serialize({"input_bool": BoolInput(None, None)})


def test_serialize_optional_fails():
    with pytest.raises(SerializeError):
        serialize({"o": Optional({"a": True}, 1)})


def test_round_trip_plain_data():
    data = {"a": [1, 2.5, "x", True], "b": {"c": {"d": "e"}}, "f": -3}
    assert serialize(deserialize(data)) == data