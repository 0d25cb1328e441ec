# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for XSD primitive converters and BoundedConverter."""

import datetime
import decimal

import pytest

from genro_xmlmap import xsd
from genro_xmlmap.convert import BoundedConverter, Converter
from genro_xmlmap.errors import ErrorKind, MapError, PositionedError
from genro_xmlmap.ser import EventSink
from genro_xmlmap.tokens import Characters, ElementEnd, ElementStart, QName, TokenSource


def parse_text(converter, xml):
    tokens = TokenSource(xml)
    tokens.next()
    return converter.parse_via(tokens, tokens.next())


# =============================================================================
# Decoding
# =============================================================================


class TestDecode:
    """Text to value."""

    def test_string_verbatim(self):
        """Strings keep surrounding whitespace."""
        assert xsd.String.from_chars('  a  ') == '  a  '

    def test_uri_stripped(self):
        assert xsd.Uri.from_chars(' https://example.com \n') == 'https://example.com'

    def test_integer(self):
        assert xsd.Integer.from_chars(' 42\n') == 42

    def test_decimal(self):
        assert xsd.Decimal.from_chars('4.46') == decimal.Decimal('4.46')

    def test_float(self):
        assert xsd.Float.from_chars('47.644548') == pytest.approx(47.644548)

    def test_gyear(self):
        assert xsd.GYear.from_chars('2024') == 2024

    def test_datetime(self):
        value = xsd.DateTime.from_chars('2025-01-15T10:30:00.000Z')

        assert isinstance(value, datetime.datetime)
        assert (value.year, value.month, value.day) == (2025, 1, 15)
        assert (value.hour, value.minute) == (10, 30)

    @pytest.mark.parametrize(
        'converter,text',
        [
            (xsd.Integer, 'abc'),
            (xsd.Integer, ''),
            (xsd.Decimal, 'four'),
            (xsd.Float, 'north'),
            (xsd.Decimal, 'NaN'),
            (xsd.Float, 'NaN'),
            (xsd.Float, 'INF'),
            (xsd.DateTime, 'yesterday'),
        ],
    )
    def test_decode_failure(self, converter, text):
        """Undecodable text raises PRIMITIVE_DECODE."""
        with pytest.raises(MapError) as exc_info:
            converter.from_chars(text)

        assert exc_info.value.kind is ErrorKind.PRIMITIVE_DECODE
        assert repr(text) in str(exc_info.value)

    def test_non_negative(self):
        assert xsd.NonNegativeInteger.from_chars('0') == 0
        with pytest.raises(MapError) as exc_info:
            xsd.NonNegativeInteger.from_chars('-1')
        assert exc_info.value.kind is ErrorKind.INVALID_VALUE

    def test_element_content(self):
        """parse_via reads an element's character content, indentation included."""
        assert parse_text(xsd.Integer, '<n>\n  7\n</n>') == 7
        assert parse_text(xsd.String, '<s> a </s>') == ' a '
        assert parse_text(xsd.String, '<s/>') == ''

    def test_element_decode_failure_is_positioned(self):
        with pytest.raises(PositionedError) as exc_info:
            parse_text(xsd.Integer, '<n>\nx\n</n>')

        assert exc_info.value.kind is ErrorKind.PRIMITIVE_DECODE
        assert exc_info.value.position.line == 3


# =============================================================================
# Encoding
# =============================================================================


class TestEncode:
    """Value to text."""

    def test_integer(self):
        assert xsd.Integer.to_chars(42) == '42'

    def test_decimal(self):
        assert xsd.Decimal.to_chars(decimal.Decimal('4.46')) == '4.46'

    def test_float_round_trip(self):
        assert xsd.Float.from_chars(xsd.Float.to_chars(1.5)) == 1.5

    def test_datetime_round_trip(self):
        value = xsd.DateTime.from_chars('2025-01-15T10:30:00.000Z')
        assert xsd.DateTime.from_chars(xsd.DateTime.to_chars(value)) == value

    def test_serialize_via(self):
        sink = EventSink()

        xsd.Integer.serialize_via(5, sink, 'sat')

        assert sink.events == [
            ElementStart(QName('sat')),
            Characters('5'),
            ElementEnd(QName('sat')),
        ]

    def test_empty_string_element(self):
        sink = EventSink()
        xsd.String.serialize_via('', sink, 'name')
        assert sink.events == [ElementStart(QName('name')), ElementEnd(QName('name'))]


# =============================================================================
# Bounded converters
# =============================================================================


class Percent(BoundedConverter):
    base = xsd.Decimal
    min_inclusive = 0
    max_inclusive = 100


class Angle(BoundedConverter):
    base = xsd.Float
    min_inclusive = -90
    max_exclusive = 90


class TestBounded:
    """Range checks on decode and encode."""

    @pytest.mark.parametrize('text', ['0', '100', '55.5'])
    def test_inclusive_bounds(self, text):
        assert Percent.from_chars(text) == decimal.Decimal(text)

    @pytest.mark.parametrize('text', ['-0.1', '100.01'])
    def test_out_of_range(self, text):
        with pytest.raises(MapError) as exc_info:
            Percent.from_chars(text)
        assert exc_info.value.kind is ErrorKind.INVALID_VALUE

    def test_exclusive_upper(self):
        assert Angle.from_chars('89.9999') == pytest.approx(89.9999)
        with pytest.raises(MapError, match='exceeds'):
            Angle.from_chars('90')

    def test_below_lower(self):
        with pytest.raises(MapError, match='below'):
            Angle.from_chars('-90.5')

    def test_checked_on_encode(self):
        with pytest.raises(MapError):
            Angle.to_attribute(95.0)

    @pytest.mark.parametrize(
        'value', [decimal.Decimal('NaN'), decimal.Decimal('sNaN'), decimal.Decimal('-Infinity')]
    )
    def test_non_finite_rejected_on_encode(self, value):
        """Non-finite values fail the range check with a MapError."""
        with pytest.raises(MapError) as exc_info:
            Percent.to_chars(value)
        assert exc_info.value.kind is ErrorKind.INVALID_VALUE

    def test_nan_float_rejected_on_encode(self):
        with pytest.raises(MapError):
            Angle.to_attribute(float('nan'))

    def test_attribute_round_trip(self):
        assert Angle.from_attribute(Angle.to_attribute(-12.25)) == -12.25


class TestConverterContract:
    """Unsupported directions raise NotImplementedError."""

    def test_base_converter(self):
        with pytest.raises(NotImplementedError):
            Converter.from_attribute('x')
        with pytest.raises(NotImplementedError):
            Converter.to_attribute('x')
        with pytest.raises(NotImplementedError):
            Converter.serialize_via('x', EventSink(), 'x')
