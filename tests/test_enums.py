import pytest

from pmmleval.enums import (
    Closure,
    InvalidValueTreatmentMethod,
    MissingValueTreatmentMethod,
    OpType,
    OutputExpressionType,
    PredicateType,
)
from pmmleval.utils import ParsingError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("closedClosed", Closure.CLOSED_CLOSED),
        ("openOpen", Closure.OPEN_OPEN),
        ("CLOSEDOPEN", Closure.CLOSED_OPEN),
        ("openclosed", Closure.OPEN_CLOSED),
    ],
)
def test_closure_from_string(text, expected):
    assert Closure.from_string(text) is expected


def test_closure_to_string():
    assert Closure.CLOSED_OPEN.to_string() == "CLOSED_OPEN"
    assert Closure.OPEN_CLOSED.to_string() == "OPEN_CLOSED"


def test_closure_unknown_raises():
    with pytest.raises(ParsingError, match="halfOpen not supported"):
        Closure.from_string("halfOpen")


def test_optype_parsing():
    assert OpType.from_string("Categorical") is OpType.CATEGORICAL
    assert OpType.from_string("ordinal") is OpType.ORDINAL
    assert OpType.from_string("CONTINUOUS") is OpType.CONTINUOUS
    assert OpType.from_string("") is OpType.UNDEFINED


@pytest.mark.parametrize("member", list(OpType))
def test_optype_round_trip(member):
    assert OpType.from_string(member.to_string()) is member


def test_invalid_treatment_parsing_and_default():
    assert InvalidValueTreatmentMethod.from_string("asIs") is InvalidValueTreatmentMethod.AS_IS
    assert InvalidValueTreatmentMethod.from_string("ASMISSING") is InvalidValueTreatmentMethod.AS_MISSING
    assert InvalidValueTreatmentMethod.from_string("bogus") is InvalidValueTreatmentMethod.RETURN_INVALID


@pytest.mark.parametrize("member", list(InvalidValueTreatmentMethod))
def test_invalid_treatment_round_trip(member):
    assert InvalidValueTreatmentMethod.from_string(member.to_string()) is member


def test_invalid_treatment_to_string():
    assert InvalidValueTreatmentMethod.RETURN_INVALID.to_string() == "returnInvalid"


def test_missing_treatment_parsing_and_default():
    assert MissingValueTreatmentMethod.from_string("asMedian") is MissingValueTreatmentMethod.AS_MEDIAN
    assert MissingValueTreatmentMethod.from_string("unknown") is MissingValueTreatmentMethod.AS_IS


@pytest.mark.parametrize("member", list(MissingValueTreatmentMethod))
def test_missing_treatment_round_trip(member):
    assert MissingValueTreatmentMethod.from_string(member.to_string()) is member


def test_missing_treatment_to_string():
    assert MissingValueTreatmentMethod.AS_VALUE.to_string() == "asValue"


def test_predicate_type_parsing():
    assert PredicateType.from_string("SimplePredicate") is PredicateType.SIMPLE
    assert PredicateType.from_string("simplesetpredicate") is PredicateType.SIMPLESET
    assert PredicateType.from_string("TRUE") is PredicateType.TRUE


@pytest.mark.parametrize("member", list(PredicateType))
def test_predicate_type_round_trip(member):
    assert PredicateType.from_string(member.to_string()) is member


def test_predicate_type_unknown_raises():
    with pytest.raises(ParsingError, match="unsupported predicate type: Maybe"):
        PredicateType.from_string("Maybe")


def test_output_type_parsing():
    assert OutputExpressionType.from_string("predictedValue") is OutputExpressionType.PREDICTED_VALUE
    assert OutputExpressionType.from_string("PROBABILITY") is OutputExpressionType.PROBABILITY
    assert OutputExpressionType.from_string("entityId") is OutputExpressionType.PASS_VALUE


@pytest.mark.parametrize(
    "member", [m for m in OutputExpressionType if m is not OutputExpressionType.PASS_VALUE]
)
def test_output_type_round_trip(member):
    assert OutputExpressionType.from_string(member.to_string()) is member


def test_output_type_pass_value_has_no_name():
    with pytest.raises(ParsingError, match="unrecognized expression type"):
        OutputExpressionType.PASS_VALUE.to_string()


def test_output_type_to_string():
    assert OutputExpressionType.TRANSFORMED_VALUE.to_string() == "transformedValue"