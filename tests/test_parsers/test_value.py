import math

import pytest

from flagset.exceptions import ConversionError, FlagDefinitionError
from flagset.parser import Value, ValueKind


@pytest.mark.parametrize(
    "raw,kind,expected",
    [
        ("hello", ValueKind.STRING, "hello"),
        ("", ValueKind.STRING, ""),
        ("--not-a-flag", ValueKind.STRING, "--not-a-flag"),
        ("42", ValueKind.INT, 42),
        ("-42", ValueKind.INT, -42),
        ("+7", ValueKind.INT, 7),
        ("  12", ValueKind.INT, 12),
        ("0x1F", ValueKind.INT, 31),
        ("017", ValueKind.INT, 15),
        ("0", ValueKind.INT, 0),
        ("9000000000", ValueKind.LONG, 9000000000),
        ("-0X10", ValueKind.LONG_LONG, -16),
        ("10.5", ValueKind.DOUBLE, 10.5),
        ("1e3", ValueKind.DOUBLE, 1000.0),
        (".25", ValueKind.DOUBLE, 0.25),
        ("-3.", ValueKind.DOUBLE, -3.0),
        ("0x1.8p1", ValueKind.DOUBLE, 3.0),
        ("7", ValueKind.DOUBLE, 7.0),
        ("", ValueKind.INT, 0),
        ("", ValueKind.LONG_LONG, 0),
        ("", ValueKind.DOUBLE, 0.0),
    ],
)
def test_from_string(raw, kind, expected):
    value = Value.from_string(raw, kind)
    assert value.kind is kind
    assert value.data == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("true", True),
        ("false", False),
        ("1", True),
        ("0", False),
        ("-3", True),
        ("0x0", False),
        ("", False),
    ],
)
def test_from_string_bool(raw, expected):
    assert Value.from_string(raw, ValueKind.BOOL).data is expected


@pytest.mark.parametrize(
    "raw,kind",
    [
        ("12abc", ValueKind.INT),
        ("12 ", ValueKind.INT),
        ("08", ValueKind.INT),
        ("0x", ValueKind.INT),
        ("1_000", ValueKind.INT),
        ("1.5", ValueKind.INT),
        ("2147483648", ValueKind.INT),
        ("-2147483649", ValueKind.INT),
        ("9223372036854775808", ValueKind.LONG),
        ("10.5x", ValueKind.DOUBLE),
        ("1_0.5", ValueKind.DOUBLE),
        ("True", ValueKind.BOOL),
        ("yes", ValueKind.BOOL),
        ("FALSE", ValueKind.BOOL),
        (" ", ValueKind.INT),
        ("  ", ValueKind.DOUBLE),
        (" ", ValueKind.BOOL),
    ],
)
def test_from_string_rejects_unconsumed_text(raw, kind):
    with pytest.raises(ConversionError):
        Value.from_string(raw, kind)


def test_from_string_int_limits():
    assert Value.from_string("2147483647", ValueKind.INT).data == 2147483647
    assert Value.from_string("-2147483648", ValueKind.INT).data == -2147483648
    assert Value.from_string("2147483648", ValueKind.LONG).data == 2147483648


def test_from_string_double_specials():
    assert math.isinf(Value.from_string("inf", ValueKind.DOUBLE).data)
    assert Value.from_string("-Infinity", ValueKind.DOUBLE).data == -math.inf
    assert math.isnan(Value.from_string("nan", ValueKind.DOUBLE).data)


def test_from_string_accepts_kind_aliases():
    assert Value.from_string("3", int) == Value(ValueKind.INT, 3)
    assert Value.from_string("3", "double") == Value(ValueKind.DOUBLE, 3.0)


def test_value_is_immutable():
    value = Value.from_string("3", ValueKind.INT)
    with pytest.raises(AttributeError):
        value.data = 4  # type: ignore[misc]


@pytest.mark.parametrize(
    "value,expected",
    [
        (Value(ValueKind.STRING, "default"), "default"),
        (Value(ValueKind.BOOL, True), "true"),
        (Value(ValueKind.BOOL, False), "false"),
        (Value(ValueKind.INT, -10), "-10"),
        (Value(ValueKind.LONG_LONG, 8), "8"),
        (Value(ValueKind.DOUBLE, 7.6), "7.600000"),
        (Value(ValueKind.DOUBLE, 0.1), "0.100000"),
    ],
)
def test_to_display_string(value, expected):
    assert value.to_display_string() == expected
    assert str(value) == expected


def test_to_display_string_truncates():
    value = Value(ValueKind.STRING, "x" * 100)
    assert value.to_display_string() == "x" * 63

    value = Value(ValueKind.DOUBLE, 1e60)
    assert len(value.to_display_string()) == 63


@pytest.mark.parametrize(
    "obj,kind,expected",
    [
        ("default", ValueKind.STRING, "default"),
        (True, ValueKind.BOOL, True),
        (0, ValueKind.BOOL, False),
        (10, ValueKind.INT, 10),
        ("0x10", ValueKind.INT, 16),
        (8, ValueKind.LONG_LONG, 8),
        (7, ValueKind.DOUBLE, 7.0),
        (7.6, ValueKind.DOUBLE, 7.6),
        ("false", ValueKind.BOOL, False),
    ],
)
def test_from_python(obj, kind, expected):
    value = Value.from_python(obj, kind)
    assert value.kind is kind
    assert value.data == expected


@pytest.mark.parametrize(
    "obj,kind",
    [
        (10, ValueKind.STRING),
        (1.5, ValueKind.INT),
        (True, ValueKind.INT),
        (True, ValueKind.DOUBLE),
        (2**31, ValueKind.INT),
        ("abc", ValueKind.DOUBLE),
        ([1], ValueKind.INT),
    ],
)
def test_from_python_invalid(obj, kind):
    with pytest.raises(FlagDefinitionError):
        Value.from_python(obj, kind)


def test_from_python_value_passthrough():
    value = Value(ValueKind.INT, 3)
    assert Value.from_python(value, ValueKind.INT) is value
    with pytest.raises(FlagDefinitionError):
        Value.from_python(value, ValueKind.LONG)
