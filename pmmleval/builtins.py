"""Built-in functions that can be applied to values."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from pmmleval.utils import InvalidValueError, ParsingError
from pmmleval.value import DataType, Value


class BuiltInFunctionType(Enum):
    """Kind of built-in function, keyed by its document name."""

    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    MAX = "max"
    MIN = "min"
    SUM = "sum"
    AVG = "avg"
    EXP = "exp"
    IS_MISSING = "ismissing"
    IS_NOT_MISSING = "isnotmissing"
    EQUAL = "equal"
    NOT_EQUAL = "notequal"
    LESS_THAN = "lessthan"
    LESS_THAN_EQUAL = "lessorequal"
    GREATER_THAN = "greaterthan"
    GREATER_THAN_EQUAL = "greaterorequal"
    IS_IN = "isin"
    IS_NOT_IN = "isnotin"
    IDENTITY = "identity"

    @classmethod
    def from_string(cls, text: str) -> BuiltInFunctionType:
        """Parse a function name; raises ParsingError if unsupported."""
        try:
            return _BY_NAME[text.lower()]
        except KeyError:
            raise ParsingError(f"{text} not supported") from None


_BY_NAME = {
    member.value: member
    for member in BuiltInFunctionType
    if member is not BuiltInFunctionType.IDENTITY
}


def _boolean(flag: bool) -> Value:
    return Value(flag, DataType.BOOLEAN)


def _exp(inputs: Sequence[Value]) -> Value:
    try:
        result = math.exp(inputs[0].value)
    except OverflowError:
        result = math.inf
    return Value(result, DataType.DOUBLE)


def _is_in(inputs: Sequence[Value]) -> Value:
    return _boolean(inputs[0] in inputs[1:])


_Implementation = Callable[[Sequence[Value]], Value]

_IMPLEMENTATIONS: dict[BuiltInFunctionType, _Implementation] = {
    BuiltInFunctionType.PLUS: lambda xs: xs[0] + xs[1],
    BuiltInFunctionType.MINUS: lambda xs: xs[0] - xs[1],
    BuiltInFunctionType.MUL: lambda xs: xs[0] * xs[1],
    BuiltInFunctionType.DIV: lambda xs: xs[0] / xs[1],
    BuiltInFunctionType.MAX: Value.max_of,
    BuiltInFunctionType.MIN: Value.min_of,
    BuiltInFunctionType.SUM: Value.sum_of,
    BuiltInFunctionType.AVG: lambda xs: Value.sum_of(xs) / Value(len(xs)),
    BuiltInFunctionType.EXP: _exp,
    BuiltInFunctionType.IS_MISSING: lambda xs: _boolean(xs[0].missing),
    BuiltInFunctionType.IS_NOT_MISSING: lambda xs: _boolean(not xs[0].missing),
    BuiltInFunctionType.EQUAL: lambda xs: _boolean(xs[0] == xs[1]),
    BuiltInFunctionType.NOT_EQUAL: lambda xs: _boolean(xs[0] != xs[1]),
    BuiltInFunctionType.LESS_THAN: lambda xs: _boolean(xs[0] < xs[1]),
    BuiltInFunctionType.LESS_THAN_EQUAL: lambda xs: _boolean(xs[0] <= xs[1]),
    BuiltInFunctionType.GREATER_THAN: lambda xs: _boolean(xs[0] > xs[1]),
    BuiltInFunctionType.GREATER_THAN_EQUAL: lambda xs: _boolean(xs[0] >= xs[1]),
    BuiltInFunctionType.IS_IN: _is_in,
    BuiltInFunctionType.IS_NOT_IN: lambda xs: _boolean(not _is_in(xs).value),
}

_ARITY: dict[BuiltInFunctionType, int] = {
    BuiltInFunctionType.PLUS: 2,
    BuiltInFunctionType.MINUS: 2,
    BuiltInFunctionType.MUL: 2,
    BuiltInFunctionType.DIV: 2,
    BuiltInFunctionType.IS_MISSING: 1,
    BuiltInFunctionType.IS_NOT_MISSING: 1,
    BuiltInFunctionType.IS_IN: 1,
    BuiltInFunctionType.IS_NOT_IN: 1,
}


class BuiltInFunction:
    """A built-in function whose inputs are matched by position.

    ``n_args`` is the required number of inputs, or -1 when any number is accepted.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.function_type = BuiltInFunctionType.from_string(name)
        self.n_args = _ARITY.get(self.function_type, -1)
        try:
            self._function = _IMPLEMENTATIONS[self.function_type]
        except KeyError:
            raise ParsingError("unsupported function") from None

    def __repr__(self) -> str:
        return f"BuiltInFunction({self.name!r})"

    def __call__(self, inputs: Iterable[Value]) -> Value:
        arguments = list(inputs)
        if self.n_args != -1 and self.n_args != len(arguments):
            raise InvalidValueError("Wrong number of inputs")
        return self._function(arguments)