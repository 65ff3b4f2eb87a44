import pytest

from flagset.parser import ValueKind


def test_value_kind():
    kind = ValueKind.LONG_LONG
    assert kind == ValueKind.LONG_LONG
    assert kind != ValueKind.LONG
    assert kind != "ll"
    assert kind.value == "ll"
    assert str(kind) == "ll"
    assert len(ValueKind.choices()) == 6


@pytest.mark.parametrize(
    "alias,expected",
    [
        ("str", ValueKind.STRING),
        ("String", ValueKind.STRING),
        ("boolean", ValueKind.BOOL),
        (" INT ", ValueKind.INT),
        ("long", ValueKind.LONG),
        ("long_long", ValueKind.LONG_LONG),
        ("longlong", ValueKind.LONG_LONG),
        ("float", ValueKind.DOUBLE),
        (str, ValueKind.STRING),
        (bool, ValueKind.BOOL),
        (int, ValueKind.INT),
        (float, ValueKind.DOUBLE),
    ],
)
def test_value_kind_aliases(alias, expected):
    assert ValueKind(alias) is expected


def test_value_kind_invalid():
    with pytest.raises(ValueError, match="Must be one of: str, bool, int, long, ll, double"):
        ValueKind("complex")
    with pytest.raises(ValueError):
        ValueKind(list)


def test_value_kind_bounds():
    assert ValueKind.INT.bounds == (-2147483648, 2147483647)
    assert ValueKind.LONG.bounds == (-(2**63), 2**63 - 1)
    assert ValueKind.LONG_LONG.bounds == ValueKind.LONG.bounds
    assert ValueKind.DOUBLE.bounds is None
    assert ValueKind.STRING.bounds is None
