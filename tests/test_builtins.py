import math

import pytest

from pmmleval.builtins import BuiltInFunction, BuiltInFunctionType
from pmmleval.utils import InvalidValueError, ParsingError
from pmmleval.value import Value


def _apply(name, *numbers):
    return BuiltInFunction(name)([Value(number) for number in numbers])


def test_from_string_is_case_insensitive():
    assert BuiltInFunctionType.from_string("MAX") is BuiltInFunctionType.MAX
    assert BuiltInFunctionType.from_string("greaterOrEqual") is BuiltInFunctionType.GREATER_THAN_EQUAL
    assert BuiltInFunctionType.from_string("isNotIn") is BuiltInFunctionType.IS_NOT_IN


@pytest.mark.parametrize("name", ["foo", "identity", "replace"])
def test_unsupported_names_raise(name):
    with pytest.raises(ParsingError):
        BuiltInFunction(name)


def test_plus_is_commutative_and_minus_inverts_it():
    total = _apply("+", 2.5, 4.0)
    assert total == _apply("+", 4.0, 2.5)
    assert BuiltInFunction("-")([total, Value(4.0)]) == Value(2.5)


def test_div_inverts_mul():
    product = _apply("*", 6.0, 3.0)
    assert BuiltInFunction("/")([product, Value(3.0)]) == Value(6.0)


def test_div_by_zero_is_infinite():
    assert _apply("/", 1.0, 0.0).value == math.inf


def test_wrong_arity_raises():
    with pytest.raises(InvalidValueError):
        _apply("+", 1.0)
    with pytest.raises(InvalidValueError):
        _apply("isMissing", 1.0, 2.0)


def test_max_and_min_accept_many_inputs():
    assert _apply("max", 4.0, 9.0, 2.0) == Value(9.0)
    assert _apply("min", 4.0, 9.0, 2.0) == Value(2.0)


def test_sum_and_avg_single_input():
    assert _apply("sum", 4.0).value == pytest.approx(4.0)
    assert _apply("avg", 5.0, 5.0, 5.0).value == pytest.approx(5.0)


def test_is_missing():
    assert BuiltInFunction("isMissing")([Value()]).value == 1.0
    assert BuiltInFunction("isMissing")([Value(3.0)]).value == 0.0
    assert BuiltInFunction("isNotMissing")([Value()]).value == 0.0


@pytest.mark.parametrize(
    "name, left, right, expected",
    [
        ("equal", 2.0, 2.0, 1.0),
        ("notEqual", 2.0, 2.0, 0.0),
        ("lessThan", 1.0, 2.0, 1.0),
        ("lessOrEqual", 2.0, 2.0, 1.0),
        ("greaterThan", 1.0, 2.0, 0.0),
        ("greaterOrEqual", 3.0, 2.0, 1.0),
    ],
)
def test_comparisons(name, left, right, expected):
    result = _apply(name, left, right)
    assert result.value == expected
    assert not result.missing


def test_exp():
    assert _apply("exp", 0.0).value == 1.0
    assert _apply("exp", 1000.0).value == math.inf


def test_is_in_takes_a_single_input():
    assert _apply("isIn", 3.0).value == 0.0
    assert _apply("isNotIn", 3.0).value == 1.0
    with pytest.raises(InvalidValueError):
        _apply("isIn", 3.0, 3.0)