import xml.etree.ElementTree as ET

import pytest

from pmmleval.predicate import Predicate, PredicateOp, build_interval
from pmmleval.utils import InvalidValueError, MissingValueError, ParsingError
from pmmleval.value import Value


def sample(*numbers):
    return [Value(float(n)) for n in numbers]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("greaterOrEqual", PredicateOp.GREATER_OR_EQUAL),
        ("LESSTHAN", PredicateOp.LESS_THAN),
        ("isNotIn", PredicateOp.IS_NOT_IN),
        ("AND", PredicateOp.AND),
        ("surrogate", PredicateOp.SURROGATE),
    ],
)
def test_op_from_string(text, expected):
    assert PredicateOp.from_string(text) is expected


def test_op_unknown_raises():
    with pytest.raises(ParsingError):
        PredicateOp.from_string("between")


def test_default_predicate_is_empty_and_true():
    predicate = Predicate()
    assert predicate.is_empty
    assert predicate.evaluate([])


def test_false_predicate():
    assert not Predicate(op="false").evaluate(sample(1))


def test_simple_comparisons():
    s = sample(0, 5)
    assert Predicate.simple(1, "equal", Value(5.0)).evaluate(s)
    assert not Predicate.simple(1, "notEqual", Value(5.0)).evaluate(s)
    assert Predicate.simple(1, "greaterThan", Value(4.0)).evaluate(s)
    assert Predicate.simple(1, "greaterOrEqual", Value(5.0)).evaluate(s)
    assert not Predicate.simple(1, "lessThan", Value(5.0)).evaluate(s)
    assert Predicate.simple(1, "lessOrEqual", Value(5.0)).evaluate(s)


def test_set_predicates_are_complementary():
    allowed = [Value(1.0), Value(3.0)]
    is_in = Predicate.set_predicate(0, "isIn", allowed)
    is_not_in = Predicate.set_predicate(0, "isNotIn", allowed)
    for n in range(5):
        s = sample(n)
        assert is_in.evaluate(s) != is_not_in.evaluate(s)
    assert is_in.evaluate(sample(3))
    assert is_in.is_set_predicate


def test_compound_operators():
    yes = Predicate.simple(0, "equal", Value(1.0))
    no = Predicate.simple(0, "equal", Value(2.0))
    s = sample(1)
    assert not Predicate.compound([yes, no], "and").evaluate(s)
    assert Predicate.compound([yes, no], "or").evaluate(s)
    assert Predicate.compound([yes, no], "xor").evaluate(s)
    assert not Predicate.compound([yes, yes], "xor").evaluate(s)
    assert Predicate.compound([no, yes], "surrogate").evaluate(s)
    assert Predicate.compound([yes], "and").is_compound_predicate


def test_missing_feature_raises():
    with pytest.raises(MissingValueError):
        Predicate.simple(7, "equal", Value(1.0)).evaluate(sample(1))


def test_xor_without_predicates_raises():
    with pytest.raises(InvalidValueError):
        Predicate.compound([], "xor").evaluate(sample(1))


def test_evaluate_value_on_compound():
    between = Predicate.compound(
        [
            Predicate.simple(0, "greaterThan", Value(1.0)),
            Predicate.simple(0, "lessThan", Value(3.0)),
        ],
        "and",
    )
    assert between.evaluate_value(Value(2.0))
    assert not between.evaluate_value(Value(3.0))


@pytest.mark.parametrize("number", [-1, 0, 1, 2, 3, 4, 10])
def test_compile_agrees_with_evaluate(number):
    predicate = Predicate.compound(
        [
            Predicate.simple(0, "greaterOrEqual", Value(1.0)),
            Predicate.compound(
                [
                    Predicate.set_predicate(0, "isIn", [Value(2.0), Value(10.0)]),
                    Predicate.simple(0, "lessThan", Value(2.0)),
                ],
                "or",
            ),
            Predicate.simple(0, "notEqual", Value(4.0)),
        ],
        "and",
    )
    s = sample(number)
    assert predicate.compile()(s) == predicate.evaluate(s)


def test_compiled_surrogate_skips_failing_parts():
    missing = Predicate.simple(9, "equal", Value(1.0))
    present = Predicate.simple(0, "equal", Value(1.0))
    compiled = Predicate.compound([missing, present], "surrogate").compile()
    assert compiled(sample(1))
    assert not compiled(sample(2))


def test_compiled_surrogate_all_failing_is_false():
    missing = Predicate.simple(9, "equal", Value(1.0))
    assert not Predicate.compound([missing], "surrogate").compile()(sample(1))


def test_compiled_missing_feature_raises():
    with pytest.raises(MissingValueError):
        Predicate.simple(3, "lessThan", Value(1.0)).compile()(sample(0))


@pytest.mark.parametrize(
    "closure, left_in, right_in",
    [
        ("closedClosed", True, True),
        ("openOpen", False, False),
        ("closedOpen", True, False),
        ("openClosed", False, True),
    ],
)
def test_interval_boundaries(closure, left_in, right_in):
    element = ET.fromstring(
        f'<Interval closure="{closure}" leftMargin="0" rightMargin="10"/>'
    )
    interval = build_interval(element, 0)
    assert interval.evaluate_value(Value(0.0)) is left_in
    assert interval.evaluate_value(Value(10.0)) is right_in
    assert interval.evaluate_value(Value(5.0))
    assert not interval.evaluate_value(Value(11.0))
    assert interval.evaluate(sample(5))


def test_interval_bad_closure_raises():
    element = ET.fromstring('<Interval closure="halfOpen" leftMargin="0"/>')
    with pytest.raises(ParsingError):
        build_interval(element, 0)