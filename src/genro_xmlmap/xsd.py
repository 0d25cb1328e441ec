# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Converters for XSD built-in primitive types.

Typed text goes through genro_tytx: decoding appends the type suffix to
the stripped text and checks the resulting Python type, encoding takes the
text part of the suffixed representation.

    xsd:string              String              str
    xsd:anyURI              Uri                 str
    xsd:decimal             Decimal             decimal.Decimal   (N)
    xsd:double / float      Float               float             (R)
    xsd:integer             Integer             int               (L)
    xsd:nonNegativeInteger  NonNegativeInteger  int >= 0          (L)
    xsd:gYear               GYear               int               (L)
    xsd:dateTime            DateTime            datetime          (DHZ)
"""

from __future__ import annotations

import datetime
import decimal
import math
from typing import Any

from genro_tytx import from_tytx, to_tytx

from .convert import BoundedConverter, CharConverter
from .errors import decode_failure


def decode(text: str, code: str, expected: type | tuple[type, ...], type_name: str) -> Any:
    """Decode `text` with the tytx type `code`.

    Raises:
        MapError: PRIMITIVE_DECODE if tytx fails, yields another type, or
            yields NaN or infinity.
    """
    stripped = text.strip()
    if not stripped:
        raise decode_failure(text, type_name)
    try:
        value = from_tytx(f'{stripped}::{code}')
    except Exception as exc:
        raise decode_failure(text, type_name) from exc
    if isinstance(value, bool) or not isinstance(value, expected):
        raise decode_failure(text, type_name)
    if isinstance(value, decimal.Decimal) and not value.is_finite():
        raise decode_failure(text, type_name)
    if isinstance(value, float) and not math.isfinite(value):
        raise decode_failure(text, type_name)
    return value


def encode(value: Any) -> str:
    """Text part of the tytx representation of `value`."""
    encoded = to_tytx(value, _force_suffix=True)
    if isinstance(encoded, str) and '::' in encoded:
        text, _code = encoded.rsplit('::', 1)
        return text
    return str(value)


class String(CharConverter):
    """Text kept verbatim, surrounding whitespace included."""

    @classmethod
    def from_chars(cls, text: str) -> str:
        return text

    @classmethod
    def to_chars(cls, value: str) -> str:
        return value


class Uri(String):
    @classmethod
    def from_chars(cls, text: str) -> str:
        return text.strip()


class Decimal(CharConverter):
    @classmethod
    def from_chars(cls, text: str) -> decimal.Decimal:
        return decode(text, 'N', decimal.Decimal, 'xsd:decimal')

    @classmethod
    def to_chars(cls, value: Any) -> str:
        if not isinstance(value, decimal.Decimal):
            value = decimal.Decimal(str(value))
        return encode(value)


class Float(CharConverter):
    @classmethod
    def from_chars(cls, text: str) -> float:
        return float(decode(text, 'R', (float, int), 'xsd:double'))

    @classmethod
    def to_chars(cls, value: Any) -> str:
        return encode(float(value))


class Integer(CharConverter):
    @classmethod
    def from_chars(cls, text: str) -> int:
        return decode(text, 'L', int, 'xsd:integer')

    @classmethod
    def to_chars(cls, value: int) -> str:
        return encode(int(value))


class NonNegativeInteger(BoundedConverter):
    base = Integer
    min_inclusive = 0


class GYear(Integer):
    """Calendar year, kept as int."""


class DateTime(CharConverter):
    @classmethod
    def from_chars(cls, text: str) -> datetime.datetime:
        return decode(text, 'DHZ', datetime.datetime, 'xsd:dateTime')

    @classmethod
    def to_chars(cls, value: datetime.datetime) -> str:
        return encode(value)
