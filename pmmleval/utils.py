"""Shared helpers: errors, string handling, number formatting and model file loading."""

from __future__ import annotations

import math
import re
import sys
import zipfile
import zlib
from collections.abc import Iterable
from pathlib import Path

DOUBLE_MIN = sys.float_info.min
"""Smallest positive normalised double, used as the "unset" marker for numbers."""

_WHITESPACE = " \t\n\v\f\r"

_HEX_PREFIX = re.compile(
    r"[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?", re.IGNORECASE
)
_DECIMAL_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan)", re.IGNORECASE
)


class PmmlError(Exception):
    """Base class of every error raised while loading or scoring a model."""


class ParsingError(PmmlError):
    """A document, attribute or value could not be parsed."""


class InvalidValueError(PmmlError):
    """A value does not satisfy the constraints placed on it."""


class MissingValueError(PmmlError):
    """A value needed for scoring is missing."""


class MathError(PmmlError):
    """A mathematical function was applied to unsuitable input."""


def to_lower(value: str) -> str:
    """Return ``value`` in lower case."""
    return value.lower()


def _leading_number(text: str) -> float:
    """Parse the longest numeric prefix of ``text`` the way ``strtod`` does."""
    hex_match = _HEX_PREFIX.match(text)
    if hex_match:
        try:
            return float.fromhex(hex_match.group())
        except OverflowError:
            raise ParsingError(f"{text} cannot be converted to double (overflow)") from None

    match = _DECIMAL_PREFIX.match(text)
    if match is None:
        raise ParsingError(f"{text} cannot be converted to double (invalid argument)")

    token = match.group()
    result = float(token)
    mantissa = re.split(r"[eE]", token, maxsplit=1)[0]
    is_literal = mantissa.lstrip("+-").lower().startswith(("inf", "nan"))
    if not is_literal:
        overflow = math.isinf(result)
        underflow = result == 0.0 and any(ch in "123456789" for ch in mantissa)
        if overflow or underflow:
            raise ParsingError(f"{text} cannot be converted to double (overflow)")
    return result


def to_double(value: str) -> float:
    """Convert the leading number of ``value`` to a float.

    Leading whitespace is skipped and trailing text is ignored.
    Raises ParsingError when no number starts the string or it is out of range.
    """
    return _leading_number(value.lstrip(_WHITESPACE)) if value.strip(_WHITESPACE) else _raise_invalid(value)


def _raise_invalid(value: str) -> float:
    raise ParsingError(f"{value} cannot be converted to double (invalid argument)")


def split(value: str, separator: str) -> list[str]:
    """Split ``value`` on ``separator``, dropping empty tokens except the last one."""
    if not separator:
        raise ValueError("empty separator")
    *head, last = value.split(separator)
    return [token for token in head if token] + [last]


def remove_all(value: str, to_remove: str) -> str:
    """Return ``value`` with every occurrence of ``to_remove`` deleted."""
    return value.replace(to_remove, "")


def parse_boolstring(value: str) -> bool:
    """Return True only for the exact string ``"true"``."""
    return value == "true"


def trim(value: str) -> str:
    """Strip leading and trailing whitespace."""
    return value.strip(_WHITESPACE)


def _stream_str(item: object) -> str:
    if isinstance(item, bool):
        return "1" if item else "0"
    if isinstance(item, float):
        return f"{item:g}"
    if isinstance(item, tuple) and len(item) == 2:
        first, second = item
        return f'{{"{_stream_str(first)}":"{_stream_str(second)}"}}'
    return str(item)


def mkstring(values: Iterable[object], separator: str = ",") -> str:
    """Render ``values`` as ``[a,b,...]``; two-element tuples render as ``{"k":"v"}``."""
    return "[" + separator.join(_stream_str(item) for item in values) + "]"


def _group_thousands(text: str) -> str:
    reversed_text = text[::-1]
    chunks = [reversed_text[start:start + 3] for start in range(0, len(reversed_text), 3)]
    return ",".join(chunks)[::-1]


def format_int(value: int) -> str:
    """Format an integer with a comma every three characters from the right."""
    return _group_thousands(str(int(value)))


def format_num(value: float | int) -> str:
    """Format a number with thousands separators and at most three decimals.

    Values whose full-precision form uses an exponent are returned unchanged.
    """
    text = str(value) if isinstance(value, int) else f"{value:.17g}"
    if "e" in text:
        return text
    parts = split(text, ".")
    result = _group_thousands(parts[0])
    if len(parts) > 1:
        result += "." + parts[1][:3]
    return result


def _read_zip(path: Path) -> bytes:
    try:
        archive = zipfile.ZipFile(path)
    except (zipfile.BadZipFile, OSError):
        raise ParsingError("unzip - err: reading archive") from None

    with archive:
        entries = archive.infolist()
        if not entries:
            raise ParsingError("unzip - err: no file in archive")
        first = entries[0]
        if first.is_dir():
            raise ParsingError("unzip - err: directory in archive")
        try:
            return archive.read(first)
        except (zipfile.BadZipFile, zlib.error, NotImplementedError, OSError):
            raise ParsingError("unzip - err: decompressing") from None


def read_file(filepath: str | Path, zipped: bool = False) -> bytes:
    """Return the bytes of a model document, unpacking the first archive entry if zipped."""
    path = Path(filepath)
    if not path.is_file():
        raise ParsingError(f"Input file {filepath} does not exist")
    if zipped:
        return _read_zip(path)
    return path.read_bytes()