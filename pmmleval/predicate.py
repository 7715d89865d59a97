"""Predicates over sample values, and the interval constraints built from them."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from xml.etree.ElementTree import Element

from pmmleval.enums import Closure
from pmmleval.utils import InvalidValueError, MissingValueError, ParsingError, PmmlError
from pmmleval.value import DataType, Value

Sample = Sequence[Value] | Mapping[int, Value]
CompiledPredicate = Callable[[Sample], bool]


class PredicateOp(Enum):
    """Operator of a predicate, keyed by its document name."""

    TRUE = "true"
    FALSE = "false"
    EQUAL = "equal"
    NOT_EQUAL = "notEqual"
    LESS_THAN = "lessThan"
    LESS_OR_EQUAL = "lessOrEqual"
    GREATER_THAN = "greaterThan"
    GREATER_OR_EQUAL = "greaterOrEqual"
    IS_IN = "isIn"
    IS_NOT_IN = "isNotIn"
    AND = "and"
    OR = "or"
    XOR = "xor"
    SURROGATE = "surrogate"

    @classmethod
    def from_string(cls, text: str) -> PredicateOp:
        """Parse an operator name, ignoring case; raises ParsingError if unknown."""
        try:
            return _OPS[text.lower()]
        except KeyError:
            raise ParsingError(f"unsupported predicate operator: {text}") from None


_OPS = {member.value.lower(): member for member in PredicateOp}

_COMPARISONS: dict[PredicateOp, Callable[[Value, Value], bool]] = {
    PredicateOp.EQUAL: operator.eq,
    PredicateOp.NOT_EQUAL: operator.ne,
    PredicateOp.LESS_THAN: operator.lt,
    PredicateOp.LESS_OR_EQUAL: operator.le,
    PredicateOp.GREATER_THAN: operator.gt,
    PredicateOp.GREATER_OR_EQUAL: operator.ge,
}

_COMPOUND_OPS = frozenset(
    {PredicateOp.AND, PredicateOp.OR, PredicateOp.XOR, PredicateOp.SURROGATE}
)


def _as_op(op: PredicateOp | str) -> PredicateOp:
    return op if isinstance(op, PredicateOp) else PredicateOp.from_string(op)


def _lookup(sample: Sample, feature: int | None) -> Value:
    try:
        return sample[feature]  # type: ignore[index]
    except (IndexError, KeyError, TypeError):
        raise MissingValueError("missing feature in sample") from None


def _xor(results: Iterable[bool]) -> bool:
    iterator = iter(results)
    try:
        first = next(iterator)
    except StopIteration:
        raise InvalidValueError("xor needs at least one predicate") from None
    return any(result != first for result in iterator)


@dataclass
class Predicate:
    """A constraint on a single value, a set of values, or other predicates.

    A default predicate is empty and always true.
    """

    op: PredicateOp = PredicateOp.TRUE
    feature: int | None = None
    value: Value = field(default_factory=Value)
    values: frozenset[Value] = frozenset()
    predicates: tuple[Predicate, ...] = ()
    is_empty: bool = True

    def __post_init__(self) -> None:
        self.op = _as_op(self.op)

    @property
    def is_set_predicate(self) -> bool:
        return self.op in (PredicateOp.IS_IN, PredicateOp.IS_NOT_IN)

    @property
    def is_compound_predicate(self) -> bool:
        return self.op in _COMPOUND_OPS

    @classmethod
    def simple(cls, feature: int, op: PredicateOp | str, value: Value) -> Predicate:
        """Compare the value at ``feature`` with ``value``."""
        return cls(op=_as_op(op), feature=feature, value=value, is_empty=False)

    @classmethod
    def set_predicate(
        cls, feature: int, op: PredicateOp | str, values: Iterable[Value]
    ) -> Predicate:
        """Test whether the value at ``feature`` belongs to ``values``."""
        return cls(op=_as_op(op), feature=feature, values=frozenset(values), is_empty=False)

    @classmethod
    def compound(cls, predicates: Iterable[Predicate], op: PredicateOp | str) -> Predicate:
        """Combine ``predicates`` with a boolean operator."""
        return cls(op=_as_op(op), predicates=tuple(predicates), is_empty=False)

    def __call__(self, sample: Sample) -> bool:
        return self.evaluate(sample)

    def evaluate(self, sample: Sample) -> bool:
        """Evaluate against a sample indexed by feature position.

        Raises MissingValueError when a referenced feature is absent.
        """
        op = self.op
        if op is PredicateOp.TRUE:
            return True
        if op is PredicateOp.FALSE:
            return False
        if op is PredicateOp.AND:
            return all(p.evaluate(sample) for p in self.predicates)
        if op in (PredicateOp.OR, PredicateOp.SURROGATE):
            return any(p.evaluate(sample) for p in self.predicates)
        if op is PredicateOp.XOR:
            return _xor(p.evaluate(sample) for p in self.predicates)
        return self.evaluate_value(_lookup(sample, self.feature))

    def evaluate_value(self, value: Value) -> bool:
        """Evaluate against a single value; compound operators apply it to every part."""
        op = self.op
        if op is PredicateOp.TRUE:
            return True
        if op is PredicateOp.FALSE:
            return False
        compare = _COMPARISONS.get(op)
        if compare is not None:
            return compare(value, self.value)
        if op is PredicateOp.IS_IN:
            return value.is_in(self.values)
        if op is PredicateOp.IS_NOT_IN:
            return value.is_not_in(self.values)
        if op is PredicateOp.AND:
            return all(p.evaluate_value(value) for p in self.predicates)
        if op in (PredicateOp.OR, PredicateOp.SURROGATE):
            return any(p.evaluate_value(value) for p in self.predicates)
        return _xor(p.evaluate_value(value) for p in self.predicates)

    def compile(self) -> CompiledPredicate:
        """Return a function of a sample equivalent to this predicate.

        In the compiled form a surrogate takes the result of the first part
        that can be evaluated without error.
        """
        op = self.op
        if op is PredicateOp.TRUE:
            return lambda sample: True
        if op is PredicateOp.FALSE:
            return lambda sample: False

        feature = self.feature
        compare = _COMPARISONS.get(op)
        if compare is not None:
            target = self.value
            return lambda sample: compare(_lookup(sample, feature), target)
        if op is PredicateOp.IS_IN:
            values = self.values
            return lambda sample: _lookup(sample, feature).is_in(values)
        if op is PredicateOp.IS_NOT_IN:
            values = self.values
            return lambda sample: _lookup(sample, feature).is_not_in(values)

        parts = [p.compile() for p in self.predicates]
        if op is PredicateOp.AND:
            return lambda sample: all(part(sample) for part in parts)
        if op is PredicateOp.OR:
            return lambda sample: any(part(sample) for part in parts)
        if op is PredicateOp.XOR:
            return lambda sample: _xor(part(sample) for part in parts)

        def surrogate(sample: Sample) -> bool:
            for part in parts:
                try:
                    return part(sample)
                except PmmlError:
                    continue
            return False

        return surrogate


def build_interval(
    element: Element, index: int, datatype: DataType | str = DataType.DOUBLE
) -> Predicate:
    """Build the constraint described by an Interval element for feature ``index``.

    An absent margin defaults to the largest double.
    """
    closure = Closure.from_string(element.get("closure", ""))
    default = Value(sys.float_info.max, datatype)
    left_text = element.get("leftMargin")
    right_text = element.get("rightMargin")
    left = Value(left_text, datatype) if left_text is not None else default
    right = Value(right_text, datatype) if right_text is not None else default

    left_op = (
        PredicateOp.GREATER_OR_EQUAL
        if closure in (Closure.CLOSED_CLOSED, Closure.CLOSED_OPEN)
        else PredicateOp.GREATER_THAN
    )
    right_op = (
        PredicateOp.LESS_OR_EQUAL
        if closure in (Closure.CLOSED_CLOSED, Closure.OPEN_CLOSED)
        else PredicateOp.LESS_THAN
    )
    return Predicate.compound(
        [Predicate.simple(index, left_op, left), Predicate.simple(index, right_op, right)],
        PredicateOp.AND,
    )