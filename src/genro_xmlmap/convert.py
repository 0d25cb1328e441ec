# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Converters - how a schema type maps onto a Python value, both ways.

A converter is a class used through its classmethods, never instantiated.
Generated builders call `parse_via` for child elements and
`from_attribute` for attribute values; generated serializers call
`serialize_via` and `to_attribute`.

Classes:
    Converter - the contract
    CharConverter - character-only elements and attribute values
    BoundedConverter - CharConverter restricted to a numeric range
    ElementConverter - structured elements, pairing a builder and a serializer
"""

from __future__ import annotations

import decimal
import math
from typing import Any, ClassVar

from .engine import CharBuilder, ElementBuilder
from .errors import invalid_value, too_large, too_small
from .ser import ElementSerializer, Sink, write_text_element
from .tokens import ElementStart, QName, TokenSource


class Converter:
    """Parse/serialize contract for one schema type."""

    @classmethod
    def parse_via(cls, tokens: TokenSource, elem_start: ElementStart) -> Any:
        raise NotImplementedError(f'{cls.__name__} cannot parse elements')

    @classmethod
    def serialize_via(cls, value: Any, sink: Sink, name: str | QName) -> None:
        raise NotImplementedError(f'{cls.__name__} cannot serialize elements')

    @classmethod
    def from_attribute(cls, text: str) -> Any:
        raise NotImplementedError(f'{cls.__name__} cannot be used for attributes')

    @classmethod
    def to_attribute(cls, value: Any) -> str:
        raise NotImplementedError(f'{cls.__name__} cannot be used for attributes')


class CharConverter(Converter):
    """Converter for text content. Subclasses implement from_chars/to_chars."""

    @classmethod
    def from_chars(cls, text: str) -> Any:
        raise NotImplementedError

    @classmethod
    def to_chars(cls, value: Any) -> str:
        raise NotImplementedError

    @classmethod
    def parse_via(cls, tokens: TokenSource, elem_start: ElementStart) -> Any:
        return CharBuilder(tokens, cls.from_chars).parse(elem_start)

    @classmethod
    def serialize_via(cls, value: Any, sink: Sink, name: str | QName) -> None:
        write_text_element(sink, name, cls.to_chars(value))

    @classmethod
    def from_attribute(cls, text: str) -> Any:
        return cls.from_chars(text)

    @classmethod
    def to_attribute(cls, value: Any) -> str:
        return cls.to_chars(value)


class BoundedConverter(CharConverter):
    """CharConverter delegating to `base` and enforcing a range.

    The range is checked both when decoding and when encoding.
    """

    base: ClassVar[type[CharConverter]]
    min_inclusive: ClassVar[Any] = None
    max_inclusive: ClassVar[Any] = None
    max_exclusive: ClassVar[Any] = None

    @classmethod
    def check(cls, value: Any) -> Any:
        if isinstance(value, decimal.Decimal) and not value.is_finite():
            raise invalid_value(f'value {value} is not a finite number')
        if isinstance(value, float) and not math.isfinite(value):
            raise invalid_value(f'value {value} is not a finite number')
        if cls.min_inclusive is not None and value < cls.min_inclusive:
            raise too_small(cls.min_inclusive, value)
        if cls.max_inclusive is not None and value > cls.max_inclusive:
            raise too_large(cls.max_inclusive, value)
        if cls.max_exclusive is not None and value >= cls.max_exclusive:
            raise too_large(cls.max_exclusive, value)
        return value

    @classmethod
    def from_chars(cls, text: str) -> Any:
        return cls.check(cls.base.from_chars(text))

    @classmethod
    def to_chars(cls, value: Any) -> str:
        return cls.base.to_chars(cls.check(value))


class ElementConverter(Converter):
    """Structured element converter: `builder` parses, `serializer` writes."""

    builder: ClassVar[type[ElementBuilder]]
    serializer: ClassVar[type[ElementSerializer]]

    @classmethod
    def parse_via(cls, tokens: TokenSource, elem_start: ElementStart) -> Any:
        return cls.builder(tokens).parse(elem_start)

    @classmethod
    def serialize_via(cls, value: Any, sink: Sink, name: str | QName) -> None:
        cls.serializer().serialize(value, name, sink)
