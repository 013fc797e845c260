import pytest

from flagbind.exceptions import (
    MalformedValueError,
    MissingRequiredError,
    UnrecognizedOptionError,
)
from flagbind.parser import ParamParser


def test_fixed_arity():
    parser = ParamParser()
    quantity = parser.add_param("int", "--quantity", "Quantities.", arity=3)
    parser.parse_args(["--quantity", "88", "28", "53"])
    assert quantity.value == [88, 28, 53]
    assert quantity.satisfied


def test_fixed_arity_too_few_at_end():
    parser = ParamParser()
    parser.add_param("int", "--quantity", "Quantities.", arity=3)
    with pytest.raises(MissingRequiredError) as excinfo:
        parser.parse_args(["--quantity", "88", "28"])
    assert excinfo.value.names == ["--quantity"]


def test_fixed_arity_too_few_optional_is_unsatisfied():
    parser = ParamParser()
    quantity = parser.add_param(
        "int", "--quantity", "Quantities.", arity=3, required=False
    )
    result = parser.parse_args(["--quantity", "88"])
    assert result.ok
    assert quantity.value == [88]
    assert quantity.satisfied is False


def test_too_few_numeric_values_before_next_option():
    parser = ParamParser()
    parser.add_param("int", "--quantity", "Quantities.", arity=3)
    parser.add_param("bool", "--verbose", "Verbose.")
    with pytest.raises(MalformedValueError) as excinfo:
        parser.parse_args(["--quantity", "1", "2", "--verbose"])
    assert excinfo.value.value == "--verbose"


def test_too_few_string_values_swallow_next_option():
    parser = ParamParser()
    names = parser.add_param("string", "--names", "Names.", arity=2)
    verbose = parser.add_param("bool", "--verbose", "Verbose.")
    parser.parse_args(["--names", "a", "--verbose"])
    assert names.value == ["a", "--verbose"]
    assert verbose.value is False


def test_too_many_values():
    parser = ParamParser()
    parser.add_param("int", "--pair", "Pair.", arity=2)
    with pytest.raises(UnrecognizedOptionError) as excinfo:
        parser.parse_args(["--pair", "1", "2", "3"])
    assert str(excinfo.value) == "Unrecognized option '3' in invocation."


def test_unbounded_arity():
    parser = ParamParser()
    files = parser.add_param("string", "--files", "Files to read.", arity=-1)
    parser.parse_args(["--files", "a.txt", "b.txt", '"c d.txt"'])
    assert files.value == ["a.txt", "b.txt", "c d.txt"]
    assert files.satisfied


def test_unbounded_arity_swallows_later_options():
    parser = ParamParser()
    files = parser.add_param("string", "--files", "Files to read.", arity=-1)
    verbose = parser.add_param("bool", "--verbose", "Verbose.")
    level = parser.add_param("int", "--level", "Level.", default="1")
    parser.parse_args(["--files", "a", "--verbose", "--level", "3"])
    assert files.value == ["a", "--verbose", "--level", "3"]
    assert verbose.value is False
    assert level.value == 1


def test_unbounded_numeric_rejects_later_option():
    parser = ParamParser()
    parser.add_param("int", "--numbers", "Numbers.", arity=-1)
    parser.add_param("bool", "--verbose", "Verbose.")
    with pytest.raises(MalformedValueError) as excinfo:
        parser.parse_args(["--numbers", "1", "2", "--verbose"])
    assert "Options which expect infinite arguments should be last." in str(
        excinfo.value
    )


def test_unbounded_without_values_is_unsatisfied():
    parser = ParamParser()
    parser.add_param("int", "--numbers", "Numbers.", arity=-1)
    with pytest.raises(MissingRequiredError):
        parser.parse_args(["--numbers"])


def test_multi_value_default_seed_then_values():
    parser = ParamParser()
    seeds = []
    parser.add_param("float", "--seeds", "Seeds.", destination=seeds, arity=2, default="9")
    parser.parse_args(["--seeds", "1", "2"])
    assert seeds == [9.0, 1.0, 2.0]
