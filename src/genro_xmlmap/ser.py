# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Serializer engine - write-side mirror of the Element Builder contract.

A serializer turns a record into sink events: the start tag with the
attributes derived from the record, the children in declared sequence
order, any generically captured unknown elements, then the end tag.

Sinks accept the same event classes the TokenSource produces:
    XmlSink - renders XML text, optionally pretty printed
    EventSink - records the events (useful in tests and for piping)
"""

from __future__ import annotations

import io
from typing import IO, TYPE_CHECKING, Any, Protocol
from xml.sax.saxutils import XMLGenerator

from genro_toolbox import safe_is_instance

from .errors import invalid_value
from .tokens import (
    Attribute,
    Characters,
    DocumentEnd,
    DocumentStart,
    ElementEnd,
    ElementStart,
    Event,
    QName,
    as_qname,
)

if TYPE_CHECKING:
    from .convert import Converter


class Sink(Protocol):
    def write(self, event: Event) -> None: ...


# =============================================================================
# SINKS
# =============================================================================


class EventSink:
    """Collects events in a list."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def write(self, event: Event) -> None:
        self.events.append(event)


class XmlSink:
    """Renders events as XML text.

    Events are kept until DocumentEnd, when the document is rendered and
    also written to `stream` if one was given. Pretty printing puts each
    child element on its own line, except inside elements holding
    character data: those are written exactly as received, so text and
    mixed content survive a round trip.

    Args:
        stream: Optional text stream receiving the document on DocumentEnd.
        encoding: Encoding named in the XML declaration.
        pretty: If True, indent the output.
        indent: Indentation unit used when pretty is True.
    """

    def __init__(
        self,
        stream: IO[str] | None = None,
        encoding: str = 'UTF-8',
        pretty: bool = True,
        indent: str = '  ',
    ):
        self.stream = stream
        self.encoding = encoding
        self.pretty = pretty
        self.indent = indent
        self._events: list[Event] = []
        self._declaration: DocumentStart | None = None
        self._result: str | None = None

    def write(self, event: Event) -> None:
        if isinstance(event, DocumentStart):
            self._declaration = event
        elif isinstance(event, DocumentEnd):
            self._result = self._render()
            if self.stream is not None:
                self.stream.write(self._result)
        elif isinstance(event, (ElementStart, ElementEnd, Characters)):
            self._events.append(event)

    def getvalue(self) -> str:
        """Rendered document (available after DocumentEnd), else the body so far."""
        if self._result is not None:
            return self._result
        return self._body()

    def _render(self) -> str:
        content = self._body()
        if self.pretty and content:
            content += '\n'
        if self._declaration is not None:
            standalone = ''
            if self._declaration.standalone is not None:
                standalone = f' standalone="{"yes" if self._declaration.standalone else "no"}"'
            header = f'<?xml version="{self._declaration.version}" encoding="{self.encoding}"{standalone}?>'
            content = f'{header}\n{content}'
        return content

    def _body(self) -> str:
        buffer = io.StringIO()
        generator = XMLGenerator(buffer, self.encoding, short_empty_elements=True)
        verbatim = self._text_holders() if self.pretty else set()
        # one [verbatim, has_child_line] frame per open element
        stack: list[list[bool]] = []
        for index, event in enumerate(self._events):
            if isinstance(event, ElementStart):
                inside_verbatim = bool(stack) and stack[-1][0]
                if self.pretty and not inside_verbatim and (stack or index):
                    generator.ignorableWhitespace('\n' + self.indent * len(stack))
                    if stack:
                        stack[-1][1] = True
                attrs = {str(attr.name): attr.value for attr in event.attributes}
                for prefix, uri in event.namespaces.items():
                    attrs['xmlns' if prefix is None else f'xmlns:{prefix}'] = uri
                generator.startElement(str(event.name), attrs)
                stack.append([inside_verbatim or index in verbatim, False])
            elif isinstance(event, ElementEnd):
                if stack:
                    is_verbatim, has_child_line = stack.pop()
                    if has_child_line and not is_verbatim:
                        generator.ignorableWhitespace('\n' + self.indent * len(stack))
                generator.endElement(str(event.name))
            else:
                generator.characters(event.text)
        return buffer.getvalue()

    def _text_holders(self) -> set[int]:
        """Indexes of the ElementStart events whose element directly holds text."""
        holders: set[int] = set()
        open_starts: list[int] = []
        for index, event in enumerate(self._events):
            if isinstance(event, ElementStart):
                open_starts.append(index)
            elif isinstance(event, ElementEnd):
                if open_starts:
                    open_starts.pop()
            elif open_starts:
                holders.add(open_starts[-1])
        return holders


# =============================================================================
# SERIALIZER CONTRACT
# =============================================================================


class ElementSerializer:
    """Base class for record serializers.

    Subclasses override attributes(), namespaces() and children(). Records
    carrying `unknown_elements` get them written after the children.
    """

    def serialize(self, record: Any, name: str | QName, sink: Sink) -> None:
        qname = as_qname(name)
        sink.write(ElementStart(qname, tuple(self.attributes(record)), self.namespaces(record)))
        self.children(record, sink)
        unknown = getattr(record, 'unknown_elements', None)
        if unknown:
            from .element import XmlElementSerializer

            serializer = XmlElementSerializer()
            for element in unknown:
                if not safe_is_instance(element, 'genro_xmlmap.element.XmlElement'):
                    raise invalid_value(
                        f'unknown element of <{qname}> is a {type(element).__name__}'
                    )
                serializer.serialize(element, element.name, sink)
        sink.write(ElementEnd(qname))

    def attributes(self, record: Any) -> list[Attribute]:
        return []

    def namespaces(self, record: Any) -> dict[str | None, str]:
        return {}

    def children(self, record: Any, sink: Sink) -> None:
        pass


def collect_attributes(*items: tuple[str, type[Converter], Any]) -> list[Attribute]:
    """Build attributes from (name, converter, value) triples, skipping None values."""
    return [
        Attribute(QName(name), converter.to_attribute(value))
        for name, converter, value in items
        if value is not None
    ]


def write_text_element(sink: Sink, name: str | QName, text: str) -> None:
    qname = as_qname(name)
    sink.write(ElementStart(qname))
    if text:
        sink.write(Characters(text))
    sink.write(ElementEnd(qname))


def write_optional(sink: Sink, converter: type[Converter], value: Any, name: str | QName) -> None:
    if value is not None:
        converter.serialize_via(value, sink, name)


def serialize_document(
    value: Any,
    name: str | QName,
    converter: type[Converter],
    sink: Sink,
    declaration: DocumentStart | None = None,
) -> None:
    """Write a complete document whose root is `value` serialized as `name`."""
    sink.write(declaration or DocumentStart())
    converter.serialize_via(value, sink, name)
    sink.write(DocumentEnd())

