"""Link and normalization functions applied to raw regression scores."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from enum import Enum

from pmmleval.utils import DOUBLE_MIN, MathError, ParsingError

SingleNormalization = Callable[[float], float]
MultiNormalization = Callable[[Sequence[float]], list[float]]


class NormalizationMethod(Enum):
    """Normalization applied to the output of a regression model."""

    NONE = "none"
    SIMPLEMAX = "simplemax"
    SOFTMAX = "softmax"
    LOGIT = "logit"
    PROBIT = "probit"
    CLOGLOG = "cloglog"
    EXP = "exp"
    LOGLOG = "loglog"
    CAUCHIT = "cauchit"

    @classmethod
    def from_string(cls, text: str) -> NormalizationMethod:
        """Parse a method name, ignoring case.

        An empty name gives NONE; an unknown one raises ParsingError.
        """
        if not text:
            return cls.NONE
        try:
            return cls(text.lower())
        except ValueError:
            raise ParsingError(f"{text} not supported") from None


def _safe_exp(a: float) -> float:
    try:
        return math.exp(a)
    except OverflowError:
        return math.inf


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def closest0or1(value: float) -> float:
    """Clamp ``value`` to the range [0, 1]."""
    if value < 0:
        return 0.0
    if value > 1:
        return 1.0
    return value


def probit(a: float) -> float:
    """Integral of the standard normal density from the smallest positive double to ``a``."""
    scale = math.sqrt(2.0)
    return 0.5 * (math.erf(a / scale) - math.erf(DOUBLE_MIN / scale))


def logit(a: float) -> float:
    """Logistic function."""
    return 1.0 / (1.0 + _safe_exp(-a))


def cloglog(a: float) -> float:
    """Complementary log-log link."""
    return 1.0 - _safe_exp(-_safe_exp(a))


def loglog(a: float) -> float:
    """Log-log link."""
    return _safe_exp(-_safe_exp(a))


def cauchit(a: float) -> float:
    """Cauchy link."""
    return 0.5 + math.atan(a) / math.pi


def _identity(a: float) -> float:
    return a


def categorical_softmax(values: Sequence[float]) -> list[float]:
    """Exponentials of the scores divided by their sum."""
    exps = [_safe_exp(value) for value in values]
    total = sum(exps)
    return [_ratio(item, total) for item in exps]


def categorical_simplemax(values: Sequence[float]) -> list[float]:
    """Scores divided by their sum."""
    total = sum(values)
    return [_ratio(value, total) for value in values]


def categorical_none(values: Sequence[float]) -> list[float]:
    """All scores but the last, then one minus their sum.

    With exactly two classes both results are clamped to [0, 1].
    """
    if not values:
        raise MathError("none normalization needs at least 1 input")
    result = list(values[:-1])
    result.append(1.0 - sum(result))
    if len(values) == 2:
        result = [closest0or1(item) for item in result]
    return result


def _categorical_binary(
    values: Sequence[float], function: SingleNormalization, name: str
) -> list[float]:
    if len(values) != 2:
        raise MathError(f"{name} must have exactly 2 inputs")
    first = function(values[0])
    return [first, 1.0 - first]


def categorical_logit(values: Sequence[float]) -> list[float]:
    return _categorical_binary(values, logit, "logit")


def categorical_probit(values: Sequence[float]) -> list[float]:
    return _categorical_binary(values, probit, "probit")


def categorical_cloglog(values: Sequence[float]) -> list[float]:
    return _categorical_binary(values, cloglog, "cloglog")


def categorical_loglog(values: Sequence[float]) -> list[float]:
    return _categorical_binary(values, loglog, "loglog")


def categorical_cauchit(values: Sequence[float]) -> list[float]:
    return _categorical_binary(values, cauchit, "Cauchit")


def _ordinal(values: Sequence[float], function: SingleNormalization) -> list[float]:
    """Apply ``function`` to each score, subtracting the previous result.

    A final entry holds one minus ``function`` of the second-to-last score.
    """
    if len(values) < 2:
        raise MathError("ordinal normalization needs at least 2 inputs")
    result = [function(values[0])]
    for value in values[1:]:
        result.append(function(value) - result[-1])
    result.append(1.0 - function(values[-2]))
    return result


def ordinal_logit(values: Sequence[float]) -> list[float]:
    return _ordinal(values, logit)


def ordinal_probit(values: Sequence[float]) -> list[float]:
    return _ordinal(values, probit)


def ordinal_exp(values: Sequence[float]) -> list[float]:
    return _ordinal(values, _safe_exp)


def ordinal_cloglog(values: Sequence[float]) -> list[float]:
    return _ordinal(values, cloglog)


def ordinal_loglog(values: Sequence[float]) -> list[float]:
    return _ordinal(values, loglog)


def ordinal_cauchit(values: Sequence[float]) -> list[float]:
    return _ordinal(values, cauchit)


def ordinal_none(values: Sequence[float]) -> list[float]:
    return _ordinal(values, _identity)


def _as_method(method: NormalizationMethod | str) -> NormalizationMethod:
    if isinstance(method, NormalizationMethod):
        return method
    return NormalizationMethod.from_string(method)


_SINGLE: dict[NormalizationMethod, SingleNormalization] = {
    NormalizationMethod.NONE: _identity,
    NormalizationMethod.SOFTMAX: logit,
    NormalizationMethod.LOGIT: logit,
    NormalizationMethod.PROBIT: probit,
    NormalizationMethod.CLOGLOG: cloglog,
    NormalizationMethod.EXP: _safe_exp,
    NormalizationMethod.LOGLOG: loglog,
    NormalizationMethod.CAUCHIT: cauchit,
}

_MULTI: dict[NormalizationMethod, MultiNormalization] = {
    NormalizationMethod.NONE: categorical_none,
    NormalizationMethod.SIMPLEMAX: categorical_simplemax,
    NormalizationMethod.SOFTMAX: categorical_softmax,
    NormalizationMethod.LOGIT: categorical_logit,
    NormalizationMethod.PROBIT: categorical_probit,
    NormalizationMethod.CLOGLOG: categorical_cloglog,
    NormalizationMethod.LOGLOG: categorical_loglog,
    NormalizationMethod.CAUCHIT: categorical_cauchit,
}


def build_single_normalization(method: NormalizationMethod | str) -> SingleNormalization:
    """Normalization for a model predicting a continuous value."""
    try:
        return _SINGLE[_as_method(method)]
    except KeyError:
        raise ParsingError("Incorrect normalization method") from None


def build_multi_normalization(method: NormalizationMethod | str) -> MultiNormalization:
    """Normalization for a model predicting a categorical value."""
    try:
        return _MULTI[_as_method(method)]
    except KeyError:
        raise ParsingError("Incorrect normalization method") from None