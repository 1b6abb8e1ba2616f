import pytest

from whim.exceptions import MalformedArgumentError
from whim.parser import FlagKind, Value
from whim.parser.utils import INT_MAX, INT_MIN, UINT_MAX, coerce_bool, coerce_int, coerce_uint


@pytest.mark.parametrize("value, expected", [("true", True), ("false", False)])
def test_coerce_bool(value, expected):
    assert coerce_bool(value) is expected


@pytest.mark.parametrize("value", ["True", "FALSE", "1", "0", "yes", "", " true"])
def test_coerce_bool_rejects_other_literals(value):
    with pytest.raises(ValueError):
        coerce_bool(value)


@pytest.mark.parametrize(
    "value, expected",
    [("0", 0), ("123", 123), ("+7", 7), ("007", 7), (str(UINT_MAX), UINT_MAX)],
)
def test_coerce_uint(value, expected):
    assert coerce_uint(value) == expected


@pytest.mark.parametrize(
    "value", ["-1", "-0", "", "+", "1_000", " 1", "1.5", "0x10", str(UINT_MAX + 1), "١٢"]
)
def test_coerce_uint_rejects(value):
    with pytest.raises(ValueError):
        coerce_uint(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("-2", -2),
        ("+2", 2),
        ("0", 0),
        (str(INT_MIN), INT_MIN),
        (str(INT_MAX), INT_MAX),
    ],
)
def test_coerce_int(value, expected):
    assert coerce_int(value) == expected


@pytest.mark.parametrize(
    "value", ["abc", "", "-", "--1", "2 ", str(INT_MAX + 1), str(INT_MIN - 1)]
)
def test_coerce_int_rejects(value):
    with pytest.raises(ValueError):
        coerce_int(value)


@pytest.mark.parametrize(
    "kind, token, expected",
    [
        (FlagKind.BOOL, "true", Value(FlagKind.BOOL, True)),
        (FlagKind.UINT, "42", Value(FlagKind.UINT, 42)),
        (FlagKind.INT, "-42", Value(FlagKind.INT, -42)),
        (FlagKind.STRING, "-42", Value(FlagKind.STRING, "-42")),
        (FlagKind.STRING, "", Value(FlagKind.STRING, "")),
    ],
)
def test_flag_kind_coerce(kind, token, expected):
    assert kind.coerce(token) == expected


@pytest.mark.parametrize(
    "kind, token",
    [(FlagKind.BOOL, "on"), (FlagKind.UINT, "-3"), (FlagKind.INT, "3.0")],
)
def test_flag_kind_coerce_failure(kind, token):
    with pytest.raises(MalformedArgumentError) as excinfo:
        kind.coerce(token)
    assert excinfo.value.token == token
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_values_of_different_kinds_are_not_equal():
    assert Value(FlagKind.BOOL, True) != Value(FlagKind.UINT, 1)
    assert Value(FlagKind.UINT, 5) != Value(FlagKind.INT, 5)


def test_value_str():
    assert str(Value(FlagKind.BOOL, False)) == "false"
    assert str(Value(FlagKind.INT, -1)) == "-1"
