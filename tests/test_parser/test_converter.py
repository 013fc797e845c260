import pytest

from flagbind.exceptions import ErrorKind, MalformedValueError
from flagbind.parser import ParamType, Slot
from flagbind.parser.converter import coerce_bool, convert_value, store_value


@pytest.mark.parametrize(
    "value, param_type, expected",
    [
        ("42", ParamType.INT, 42),
        ("-9", ParamType.INT, -9),
        ("4294967295", ParamType.UINT, 4294967295),
        ("9000000000", ParamType.LONG, 9000000000),
        ("3.14", ParamType.FLOAT, 3.14),
        ("-2.5e3", ParamType.DOUBLE, -2500.0),
        ("xyz", ParamType.CHAR, "x"),
        ("hello", ParamType.STRING, "hello"),
        ("TRUE", ParamType.BOOL, True),
        ("false", ParamType.BOOL, False),
    ],
)
def test_convert_value(value, param_type, expected):
    assert convert_value(value, param_type) == expected


@pytest.mark.parametrize(
    "value, param_type",
    [
        ("abc", ParamType.INT),
        ("3.5", ParamType.INT),
        ("2147483648", ParamType.INT),
        ("-1", ParamType.UINT),
        ("9223372036854775808", ParamType.LONG),
        ("pi", ParamType.DOUBLE),
        ("1e39", ParamType.FLOAT),
        ("yes", ParamType.BOOL),
        ("1_000", ParamType.INT),
        ("\u0663", ParamType.INT),
        (" 12", ParamType.LONG),
        ("1_0", ParamType.DOUBLE),
        ("\u0663.5", ParamType.FLOAT),
    ],
)
def test_convert_value_rejects(value, param_type):
    with pytest.raises(ValueError):
        convert_value(value, param_type)


def test_coerce_bool():
    assert coerce_bool("True") is True
    assert coerce_bool("fAlSe") is False
    assert coerce_bool(True) is True
    with pytest.raises(ValueError):
        coerce_bool("1")


def test_store_value_assigns_slot():
    slot = Slot(1)
    store_value(ParamType.INT, slot, "7")
    assert slot.value == 7
    store_value(ParamType.INT, slot, "8")
    assert slot.value == 8


def test_store_value_appends_list():
    values = []
    store_value(ParamType.DOUBLE, values, "1.5")
    store_value(ParamType.DOUBLE, values, "2")
    assert values == [1.5, 2.0]


def test_store_value_empty_is_noop():
    slot = Slot("unchanged")
    store_value(ParamType.STRING, slot, "")
    assert slot.value == "unchanged"

    values = [1]
    store_value(ParamType.INT, values, "")
    assert values == [1]


def test_store_value_malformed():
    slot = Slot()
    with pytest.raises(MalformedValueError) as excinfo:
        store_value(ParamType.INT, slot, "ten")
    assert excinfo.value.kind is ErrorKind.MALFORMED_VALUE
    assert str(excinfo.value) == "Error in argument (expected type INT): ten"
    assert slot.value is None


def test_store_value_malformed_multi_hint():
    with pytest.raises(MalformedValueError) as excinfo:
        store_value(ParamType.FLOAT, [], "--next")
    message = str(excinfo.value)
    assert "expected type FLOAT" in message
    assert "Options which expect infinite arguments should be last." in message
