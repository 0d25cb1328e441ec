# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for TokenSource."""

import io

import pytest

from genro_xmlmap.errors import ErrorKind, PositionedError
from genro_xmlmap.tokens import (
    Attribute,
    Characters,
    DocumentEnd,
    DocumentStart,
    ElementEnd,
    ElementStart,
    QName,
    TokenSource,
    Whitespace,
    as_qname,
)


def kinds(source):
    return [type(event).__name__ for event in source]


# =============================================================================
# Event stream
# =============================================================================


class TestEvents:
    """Event sequence produced for simple documents."""

    def test_simple_element(self):
        """Start, text and end of one element, wrapped in document events."""
        events = list(TokenSource('<a x="1">hi</a>'))

        assert events == [
            DocumentStart(),
            ElementStart(QName('a'), (Attribute(QName('x'), '1'),)),
            Characters('hi'),
            ElementEnd(QName('a')),
            DocumentEnd(),
        ]

    def test_whitespace_is_separate(self):
        """Whitespace-only text is reported as Whitespace."""
        assert kinds(TokenSource('<a> <b/>\n</a>')) == [
            'DocumentStart',
            'ElementStart',
            'Whitespace',
            'ElementStart',
            'ElementEnd',
            'Whitespace',
            'ElementEnd',
            'DocumentEnd',
        ]

    def test_text_is_coalesced(self):
        """Text split by entities and chunk boundaries comes as one event."""
        source = TokenSource(io.BytesIO(b'<a>fish &amp; chips</a>'), chunk_size=3)

        texts = [event.text for event in source if isinstance(event, Characters)]

        assert texts == ['fish & chips']

    def test_small_chunks_same_events(self):
        """Chunked feeding yields the same events as a single feed."""
        xml = b'<root><item n="1">one</item><item n="2">two</item></root>'

        assert list(TokenSource(io.BytesIO(xml), chunk_size=5)) == list(TokenSource(xml))

    def test_text_stream(self):
        events = list(TokenSource(io.StringIO('<a>x</a>')))
        assert Characters('x') in events

    def test_declaration(self):
        """The XML declaration fills DocumentStart."""
        source = TokenSource(b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?><a/>')

        assert source.next() == DocumentStart('1.0', 'UTF-8', True)

    def test_no_declaration(self):
        """Without a declaration a default DocumentStart is produced."""
        assert TokenSource(b'<a/>').next() == DocumentStart()

    def test_document_end_repeats(self):
        """After the end, next() keeps returning DocumentEnd."""
        source = TokenSource('<a/>')
        list(source)

        assert source.next() == DocumentEnd()
        assert source.next() == DocumentEnd()


# =============================================================================
# Namespaces
# =============================================================================


class TestNamespaces:
    """Namespace resolution on element and attribute names."""

    def test_prefixed(self):
        """Prefixed names carry URI and prefix; bindings are reported."""
        source = TokenSource('<g:a xmlns:g="urn:x" g:k="v" plain="p"/>')
        source.next()
        start = source.next()

        assert start.name == QName('a', 'urn:x', 'g')
        assert str(start.name) == 'g:a'
        assert start.namespaces == {'g': 'urn:x'}
        assert start.attributes == (
            Attribute(QName('k', 'urn:x', 'g'), 'v'),
            Attribute(QName('plain'), 'p'),
        )

    def test_default_namespace(self):
        source = TokenSource('<a xmlns="urn:y"><b/></a>')
        source.next()
        outer = source.next()
        inner = source.next()

        assert outer.name == QName('a', 'urn:y')
        assert outer.namespaces == {None: 'urn:y'}
        assert inner.name == QName('b', 'urn:y')
        assert inner.namespaces == {}

    def test_as_qname(self):
        name = QName('a', 'urn:x')
        assert as_qname(name) is name
        assert as_qname('a') == QName('a')


# =============================================================================
# Positions and errors
# =============================================================================


class TestPositions:
    """Positions attached to events."""

    def test_line_of_element(self):
        """position() refers to the last returned event."""
        source = TokenSource('<a>\n  <b>\n    <c/>\n  </b>\n</a>')
        lines = {}
        for event in source:
            if isinstance(event, ElementStart):
                lines[event.name.local_name] = source.position().line

        assert lines == {'a': 1, 'b': 2, 'c': 3}

    def test_column(self):
        source = TokenSource('<a>\n  <b/></a>')
        source.next()
        source.next()
        source.next()  # whitespace
        source.next()

        assert source.position().column == 2


class TestMalformed:
    """Malformed markup raises positioned TOKENIZATION errors."""

    def test_mismatched_tag(self):
        with pytest.raises(PositionedError) as exc_info:
            list(TokenSource('<a>\n<b>\n</a>'))

        assert exc_info.value.kind is ErrorKind.TOKENIZATION
        assert exc_info.value.position.line == 3
        assert 'mismatched tag' in str(exc_info.value)

    def test_unclosed(self):
        with pytest.raises(PositionedError) as exc_info:
            list(TokenSource('<a>'))

        assert exc_info.value.kind is ErrorKind.TOKENIZATION

    def test_whitespace_event_type(self):
        """Whitespace is its own class, distinct from Characters."""
        events = list(TokenSource('<a>  </a>'))
        assert Whitespace('  ') in events
