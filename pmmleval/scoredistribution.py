"""Score distributions attached to tree nodes and the scores built from them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from xml.etree.ElementTree import Element

from pmmleval.score import InternalScore
from pmmleval.utils import DOUBLE_MIN, to_double
from pmmleval.value import DataType, Value


def _double_attribute(element: Element, name: str) -> float:
    text = element.get(name)
    return DOUBLE_MIN if text is None else to_double(text)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


@dataclass
class ScoreDistribution:
    """Record count, confidence and probability of one target value at a node."""

    value: Value = field(default_factory=Value)
    value_string: str = ""
    record_count: float = DOUBLE_MIN
    has_confidence: bool = False
    confidence: float = DOUBLE_MIN
    confidence_string: str = ""
    has_probability: bool = False
    probability: float = DOUBLE_MIN
    probability_string: str = ""

    @classmethod
    def from_element(
        cls,
        element: Element,
        datatype: DataType | str,
        total_record_count: float | None = None,
    ) -> ScoreDistribution:
        """Read a ScoreDistribution element.

        With ``total_record_count`` the confidence and probability are both the
        share of records, or 1 when the total is not positive.
        """
        value = Value(element.get("value", ""), datatype)
        record_count = _double_attribute(element, "recordCount")
        has_confidence = element.get("confidence") is not None
        has_probability = element.get("probability") is not None

        if total_record_count is None:
            return cls(
                value=value,
                value_string=element.get("value", ""),
                record_count=record_count,
                has_confidence=has_confidence,
                confidence=_double_attribute(element, "confidence"),
                confidence_string=element.get("confidence", ""),
                has_probability=has_probability,
                probability=_double_attribute(element, "probability"),
                probability_string=element.get("probability", ""),
            )

        confidence = record_count / total_record_count if total_record_count > 0 else 1.0
        confidence_string = f"{confidence:g}"
        return cls(
            value=value,
            record_count=record_count,
            has_confidence=has_confidence,
            confidence=confidence,
            confidence_string=confidence_string,
            has_probability=has_probability,
            probability=confidence,
            probability_string=confidence_string,
        )

    @classmethod
    def from_elements(
        cls, elements: Iterable[Element], datatype: DataType | str
    ) -> list[ScoreDistribution]:
        return [cls.from_element(element, datatype) for element in elements]


def get_probabilities(distributions: Sequence[ScoreDistribution]) -> dict[str, float]:
    """Share of the total record count held by each target value."""
    total = sum(d.record_count for d in distributions)
    return {d.value_string: _ratio(d.record_count, total) for d in distributions}


def get_totals(distributions: Iterable[ScoreDistribution]) -> dict[str, float]:
    """Record count of each target value."""
    return {d.value_string: d.record_count for d in distributions}


@dataclass
class TreeScore(InternalScore):
    """Score of a tree node, with probabilities from its record counts."""

    is_score: bool = False
    target_type: DataType | None = None

    @classmethod
    def from_elements(
        cls,
        simple_score: str,
        target_type: DataType | str,
        elements: Iterable[Element],
    ) -> TreeScore:
        kind = target_type if isinstance(target_type, DataType) else DataType.from_string(target_type)
        probabilities = get_probabilities(ScoreDistribution.from_elements(elements, kind))
        base = InternalScore.from_string(simple_score, probabilities)
        return cls(
            empty=False,
            score=base.score,
            double_score=base.double_score,
            probabilities=base.probabilities,
            is_score=True,
            target_type=kind,
        )