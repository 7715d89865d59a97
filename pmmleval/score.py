"""Raw prediction produced by scoring a model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from pmmleval.utils import DOUBLE_MIN, ParsingError, to_double


@dataclass
class InternalScore:
    """Prediction as text and as a number, with class probabilities and outputs."""

    empty: bool = True
    score: str = ""
    double_score: float = DOUBLE_MIN
    probabilities: dict[str, float] = field(default_factory=dict)
    num_outputs: dict[str, float] = field(default_factory=dict)
    str_outputs: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_double(
        cls, score: float, probabilities: Mapping[str, float] | None = None
    ) -> InternalScore:
        """Score from a number; its text form has six decimals."""
        return cls(
            empty=False,
            score=f"{score:.6f}",
            double_score=float(score),
            probabilities=dict(probabilities or {}),
        )

    @classmethod
    def from_string(
        cls, score: str, probabilities: Mapping[str, float] | None = None
    ) -> InternalScore:
        """Score from text; the numeric form is unset when the text is not a number."""
        try:
            number = to_double(score)
        except ParsingError:
            number = DOUBLE_MIN
        return cls(
            empty=False,
            score=score,
            double_score=number,
            probabilities=dict(probabilities or {}),
        )