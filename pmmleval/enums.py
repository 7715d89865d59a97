"""Enumerations for the named attribute values of a model document."""

from __future__ import annotations

from enum import Enum

from pmmleval.utils import ParsingError


class Closure(Enum):
    """Kind of boundaries of an interval of continuous values."""

    CLOSED_CLOSED = "CLOSED_CLOSED"
    OPEN_OPEN = "OPEN_OPEN"
    CLOSED_OPEN = "CLOSED_OPEN"
    OPEN_CLOSED = "OPEN_CLOSED"

    @classmethod
    def from_string(cls, text: str) -> Closure:
        """Parse a closure name; raises ParsingError if unknown."""
        try:
            return _CLOSURES[text.lower()]
        except KeyError:
            raise ParsingError(f"{text} not supported") from None

    def to_string(self) -> str:
        return self.value


_CLOSURES = {
    "closedclosed": Closure.CLOSED_CLOSED,
    "openopen": Closure.OPEN_OPEN,
    "closedopen": Closure.CLOSED_OPEN,
    "openclosed": Closure.OPEN_CLOSED,
}


class OpType(Enum):
    """Operational type of a field."""

    CATEGORICAL = "CATEGORICAL"
    ORDINAL = "ORDINAL"
    CONTINUOUS = "CONTINUOUS"
    UNDEFINED = "UNDEFINED"

    @classmethod
    def from_string(cls, text: str) -> OpType:
        """Parse an optype; unknown names give UNDEFINED."""
        return _OPTYPES.get(text.lower(), cls.UNDEFINED)

    def to_string(self) -> str:
        return self.value


_OPTYPES = {
    "categorical": OpType.CATEGORICAL,
    "ordinal": OpType.ORDINAL,
    "continuous": OpType.CONTINUOUS,
}


class InvalidValueTreatmentMethod(Enum):
    """What to do with a value that breaks the field's constraints."""

    RETURN_INVALID = "returnInvalid"
    AS_IS = "asIs"
    AS_MISSING = "asMissing"

    @classmethod
    def from_string(cls, text: str) -> InvalidValueTreatmentMethod:
        """Parse a treatment name; unknown names give RETURN_INVALID."""
        return _INVALID_TREATMENTS.get(text.lower(), cls.RETURN_INVALID)

    def to_string(self) -> str:
        return self.value


_INVALID_TREATMENTS = {
    "asis": InvalidValueTreatmentMethod.AS_IS,
    "returninvalid": InvalidValueTreatmentMethod.RETURN_INVALID,
    "asmissing": InvalidValueTreatmentMethod.AS_MISSING,
}


class MissingValueTreatmentMethod(Enum):
    """Where a replacement for a missing value came from."""

    AS_IS = "asIs"
    AS_MEAN = "asMean"
    AS_MODE = "asMode"
    AS_MEDIAN = "asMedian"
    AS_VALUE = "asValue"

    @classmethod
    def from_string(cls, text: str) -> MissingValueTreatmentMethod:
        """Parse a treatment name; unknown names give AS_IS."""
        return _MISSING_TREATMENTS.get(text.lower(), cls.AS_IS)

    def to_string(self) -> str:
        return self.value


_MISSING_TREATMENTS = {
    "asis": MissingValueTreatmentMethod.AS_IS,
    "asmean": MissingValueTreatmentMethod.AS_MEAN,
    "asmode": MissingValueTreatmentMethod.AS_MODE,
    "asmedian": MissingValueTreatmentMethod.AS_MEDIAN,
    "asvalue": MissingValueTreatmentMethod.AS_VALUE,
}


class PredicateType(Enum):
    """Element kind of a predicate."""

    TRUE = "True"
    FALSE = "False"
    SIMPLE = "SimplePredicate"
    SIMPLESET = "SimpleSetPredicate"
    COMPOUND = "CompoundPredicate"

    @classmethod
    def from_string(cls, text: str) -> PredicateType:
        """Parse a predicate element name; raises ParsingError if unknown."""
        try:
            return _PREDICATE_TYPES[text.lower()]
        except KeyError:
            raise ParsingError(f"unsupported predicate type: {text}") from None

    def to_string(self) -> str:
        return self.value


_PREDICATE_TYPES = {
    "true": PredicateType.TRUE,
    "false": PredicateType.FALSE,
    "simplepredicate": PredicateType.SIMPLE,
    "simplesetpredicate": PredicateType.SIMPLESET,
    "compoundpredicate": PredicateType.COMPOUND,
}


class OutputExpressionType(Enum):
    """Result feature of an output field."""

    PREDICTED_VALUE = "predictedValue"
    PREDICTED_DISPLAY_VALUE = "predictedDisplayValue"
    TRANSFORMED_VALUE = "transformedValue"
    PROBABILITY = "probability"
    PASS_VALUE = "passValue"

    @classmethod
    def from_string(cls, text: str) -> OutputExpressionType:
        """Parse a result feature; unknown names give PASS_VALUE."""
        return _OUTPUT_TYPES.get(text.lower(), cls.PASS_VALUE)

    def to_string(self) -> str:
        """Return the document name; PASS_VALUE has none and raises ParsingError."""
        if self is OutputExpressionType.PASS_VALUE:
            raise ParsingError("unrecognized expression type")
        return self.value


_OUTPUT_TYPES = {
    "predictedvalue": OutputExpressionType.PREDICTED_VALUE,
    "predicteddisplayvalue": OutputExpressionType.PREDICTED_DISPLAY_VALUE,
    "transformedvalue": OutputExpressionType.TRANSFORMED_VALUE,
    "probability": OutputExpressionType.PROBABILITY,
}