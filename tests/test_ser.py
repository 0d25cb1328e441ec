# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for sinks and the serializer contract."""

import io
from dataclasses import dataclass, field

import pytest

from genro_xmlmap import xsd
from genro_xmlmap.convert import ElementConverter
from genro_xmlmap.element import XmlElement
from genro_xmlmap.engine import ElementBuilder
from genro_xmlmap.errors import MapError
from genro_xmlmap.ser import (
    ElementSerializer,
    EventSink,
    XmlSink,
    collect_attributes,
    serialize_document,
    write_optional,
    write_text_element,
)
from genro_xmlmap.tokens import (
    Attribute,
    Characters,
    DocumentEnd,
    DocumentStart,
    ElementEnd,
    ElementStart,
    QName,
)


@dataclass
class Note:
    lang: str | None
    body: str | None
    unknown_elements: list = field(default_factory=list)


class NoteSerializer(ElementSerializer):
    def attributes(self, record):
        return collect_attributes(('lang', xsd.String, record.lang))

    def children(self, record, sink):
        write_optional(sink, xsd.String, record.body, 'body')


class NoteConverter(ElementConverter):
    builder = ElementBuilder
    serializer = NoteSerializer


# =============================================================================
# Serializer contract
# =============================================================================


class TestElementSerializer:
    """Events produced by serializers."""

    def test_attributes_then_children(self):
        sink = EventSink()

        NoteConverter.serialize_via(Note('it', 'ciao'), sink, 'note')

        assert sink.events == [
            ElementStart(QName('note'), (Attribute(QName('lang'), 'it'),)),
            ElementStart(QName('body')),
            Characters('ciao'),
            ElementEnd(QName('body')),
            ElementEnd(QName('note')),
        ]

    def test_none_skipped(self):
        """Absent optional attributes and children produce no events."""
        sink = EventSink()

        NoteConverter.serialize_via(Note(None, None), sink, 'note')

        assert sink.events == [ElementStart(QName('note')), ElementEnd(QName('note'))]

    def test_unknown_elements_written_last(self):
        note = Note(None, 'b', [XmlElement(QName('extra'), nodes=['x'])])
        sink = EventSink()

        NoteConverter.serialize_via(note, sink, 'note')

        names = [str(e.name) for e in sink.events if isinstance(e, ElementStart)]
        assert names == ['note', 'body', 'extra']

    def test_unknown_elements_must_be_xml_elements(self):
        with pytest.raises(MapError, match='is a str'):
            NoteConverter.serialize_via(Note(None, None, ['<raw/>']), EventSink(), 'note')

    def test_collect_attributes(self):
        attrs = collect_attributes(('a', xsd.Integer, 1), ('b', xsd.Integer, None))
        assert attrs == [Attribute(QName('a'), '1')]

    def test_write_text_element(self):
        sink = EventSink()
        write_text_element(sink, QName('t', 'urn:x', 'p'), 'v')
        assert sink.events[1] == Characters('v')
        assert sink.events[0].name.prefix == 'p'


# =============================================================================
# XmlSink
# =============================================================================


class TestXmlSink:
    """Rendering events as XML text."""

    def test_compact(self):
        sink = XmlSink(pretty=False)

        serialize_document(Note('en', 'a < b'), 'note', NoteConverter, sink)

        assert sink.getvalue() == (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<note lang="en"><body>a &lt; b</body></note>'
        )

    def test_pretty(self):
        sink = XmlSink()

        serialize_document(Note('en', 'hi'), 'note', NoteConverter, sink)

        lines = sink.getvalue().splitlines()
        assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
        assert lines[1] == '<note lang="en">'
        assert lines[2] == '  <body>hi</body>'
        assert lines[3] == '</note>'

    def test_pretty_keeps_mixed_content(self):
        """Elements holding text are written exactly as received."""
        sink = XmlSink()
        mixed = XmlElement(QName('foo'), nodes=['bar', XmlElement(QName('b')), 'baz'])

        serialize_document(Note(None, None, [mixed]), 'note', NoteConverter, sink)

        assert sink.getvalue().splitlines()[1:] == ['<note>', '  <foo>bar<b/>baz</foo>', '</note>']

    def test_pretty_nested_and_empty(self):
        sink = XmlSink(pretty=True, indent='\t')
        outer = XmlElement(QName('a'), nodes=[XmlElement(QName('b'), nodes=[XmlElement(QName('c'))])])

        serialize_document(Note(None, None, [outer]), 'note', NoteConverter, sink)

        assert sink.getvalue().split('\n', 1)[1] == '<note>\n\t<a>\n\t\t<b>\n\t\t\t<c/>\n\t\t</b>\n\t</a>\n</note>\n'

    def test_standalone_declaration(self):
        sink = XmlSink(pretty=False)

        serialize_document(Note(None, None), 'note', NoteConverter, sink, DocumentStart(standalone=True))

        assert sink.getvalue().startswith('<?xml version="1.0" encoding="UTF-8" standalone="yes"?>')

    def test_namespaces_written_as_xmlns(self):
        sink = XmlSink(pretty=False)
        name = QName('r', 'urn:d')

        sink.write(ElementStart(name, (), {None: 'urn:d', 'p': 'urn:p'}))
        sink.write(ElementEnd(name))

        assert sink.getvalue() == '<r xmlns="urn:d" xmlns:p="urn:p"/>'

    def test_stream_receives_document(self):
        stream = io.StringIO()
        sink = XmlSink(stream, pretty=False)

        sink.write(DocumentStart())
        sink.write(ElementStart(QName('a')))
        sink.write(ElementEnd(QName('a')))
        assert stream.getvalue() == ''
        sink.write(DocumentEnd())

        assert stream.getvalue() == '<?xml version="1.0" encoding="UTF-8"?>\n<a/>'
