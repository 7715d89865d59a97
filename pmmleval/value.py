"""Scalar values used during scoring, with every input reduced to a float."""

from __future__ import annotations

import functools
import math
import operator
import re
from collections.abc import Iterable
from enum import Enum

from pmmleval.utils import (
    DOUBLE_MIN,
    InvalidValueError,
    ParsingError,
    remove_all,
    to_double as _parse_double,
    to_lower,
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_HEX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
)


class DataType(Enum):
    """Data type of a field."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"

    @classmethod
    def from_string(cls, text: str) -> DataType:
        """Parse a data type name; raises ParsingError if unknown."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ParsingError(f"{text} not supported") from None


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _as_datatype(datatype: DataType | str) -> DataType:
    return datatype if isinstance(datatype, DataType) else DataType.from_string(datatype)


class Value:
    """A possibly missing value, stored as a float whatever its data type.

    Strings are mapped to stable numeric codes, booleans to 0 or 1.
    """

    __slots__ = ("value", "missing")

    _string_codes: dict[str, float] = {}

    def __init__(
        self,
        value: str | float | int | bool | None = None,
        datatype: DataType | str | None = None,
    ) -> None:
        if value is None:
            self.value = DOUBLE_MIN
            self.missing = True
            return
        if isinstance(value, str):
            number = (
                Value.infer_value(value)
                if datatype is None
                else Value.to_double(value, datatype)
            )
        else:
            number = float(value)
        self.value = number
        self.missing = False

    def __repr__(self) -> str:
        return "Value(missing)" if self.missing else f"Value({self.value!r})"

    def __add__(self, other: Value) -> Value:
        return Value(self.value + other.value)

    def __sub__(self, other: Value) -> Value:
        return Value(self.value - other.value)

    def __mul__(self, other: Value) -> Value:
        return Value(self.value * other.value)

    def __truediv__(self, other: Value) -> Value:
        return Value(_divide(self.value, other.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.value == other.value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.value != other.value

    def __lt__(self, other: Value) -> bool:
        return self.value < other.value

    def __le__(self, other: Value) -> bool:
        return self.value <= other.value

    def __gt__(self, other: Value) -> bool:
        return self.value > other.value

    def __ge__(self, other: Value) -> bool:
        return self.value >= other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def diff(self, other: Value) -> Value:
        """Absolute difference between two values."""
        return Value(abs(self.value - other.value))

    def is_in(self, values: Iterable[Value]) -> bool:
        return self in values

    def is_not_in(self, values: Iterable[Value]) -> bool:
        return self not in values

    @staticmethod
    def infer_value(text: str) -> float:
        """Convert text whose type is unknown.

        Text that is entirely a number within the 32-bit integer range is read
        as a number; anything else is treated as a string.
        """
        stripped = text.lstrip(_WHITESPACE)
        if _HEX.fullmatch(stripped):
            try:
                number = float.fromhex(stripped)
            except OverflowError:
                raise ParsingError(f"{text} cannot be converted to double (overflow)") from None
        elif _DECIMAL.fullmatch(stripped):
            number = _parse_double(stripped)
        else:
            return Value.to_double(text, DataType.STRING)

        if not _INT_MIN < number < _INT_MAX:
            return Value.to_double(text, DataType.STRING)
        return number

    @staticmethod
    def to_double(text: str, datatype: DataType | str) -> float:
        """Convert text of a known data type to its float representation."""
        kind = _as_datatype(datatype)
        if kind is DataType.BOOLEAN:
            return 1.0 if to_lower(text) == "true" or text == "1" else 0.0
        if kind is DataType.STRING:
            codes = Value._string_codes
            if text not in codes:
                codes[text] = float(len(codes))
            return codes[text]
        return _parse_double(text)

    @staticmethod
    def create_values(values: Iterable[str], datatype: DataType | str) -> set[Value]:
        """Build a set of values from texts, dropping any double quotes."""
        return {Value(remove_all(text, '"'), datatype) for text in values}

    @staticmethod
    def sum_of(values: Iterable[Value]) -> Value:
        """Sum of values, accumulated from a missing value; empty input stays missing."""
        return functools.reduce(operator.add, values, Value())

    @staticmethod
    def min_of(values: Iterable[Value]) -> Value:
        items = list(values)
        if not items:
            raise InvalidValueError("min of empty input")
        return min(items)

    @staticmethod
    def max_of(values: Iterable[Value]) -> Value:
        items = list(values)
        if not items:
            raise InvalidValueError("max of empty input")
        return max(items)