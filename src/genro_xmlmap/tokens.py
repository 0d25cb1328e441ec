# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Token Source - structural XML events with positions.

TokenSource is a pull adapter over the expat push parser: input is fed in
chunks on demand and the resulting events are queued together with the
position at which expat reported them.

Events:
    DocumentStart(version, encoding, standalone)
    DocumentEnd()
    ElementStart(name, attributes, namespaces)
    ElementEnd(name)
    Characters(text)
    Whitespace(text)

Example:
    >>> source = TokenSource('<a x="1">hi</a>')
    >>> [type(e).__name__ for e in source]
    ['DocumentStart', 'ElementStart', 'Characters', 'ElementEnd', 'DocumentEnd']
"""

from __future__ import annotations

import io
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import IO, Any, Union
from xml.parsers import expat

from .errors import ErrorKind, MapError, Position, PositionedError

# expat reports "uri local prefix" when namespace_separator is a space
_SEPARATOR = ' '


@dataclass(frozen=True)
class QName:
    """Qualified name. namespace is the URI, prefix is the one used in the source."""

    local_name: str
    namespace: str | None = None
    prefix: str | None = None

    @classmethod
    def from_expat(cls, name: str) -> QName:
        parts = name.split(_SEPARATOR)
        if len(parts) == 1:
            return cls(parts[0])
        if len(parts) == 2:
            return cls(parts[1], parts[0])
        return cls(parts[1], parts[0], parts[2])

    def __str__(self) -> str:
        if self.prefix:
            return f'{self.prefix}:{self.local_name}'
        return self.local_name


@dataclass(frozen=True)
class Attribute:
    name: QName
    value: str


# =============================================================================
# EVENTS
# =============================================================================


@dataclass(frozen=True)
class DocumentStart:
    version: str = '1.0'
    encoding: str | None = None
    standalone: bool | None = None


@dataclass(frozen=True)
class DocumentEnd:
    pass


@dataclass(frozen=True)
class ElementStart:
    """Parsed open tag. namespaces maps prefix (None for default) to URI."""

    name: QName
    attributes: tuple[Attribute, ...] = ()
    namespaces: dict[str | None, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class ElementEnd:
    name: QName


@dataclass(frozen=True)
class Characters:
    text: str


@dataclass(frozen=True)
class Whitespace:
    text: str


Event = Union[DocumentStart, DocumentEnd, ElementStart, ElementEnd, Characters, Whitespace]


def as_qname(name: str | QName) -> QName:
    if isinstance(name, QName):
        return name
    return QName(name)


# =============================================================================
# TOKEN SOURCE
# =============================================================================


class TokenSource:
    """Pull-style event reader.

    Args:
        source: XML text, bytes, or a readable stream (text or binary).
        chunk_size: Bytes (or characters) read from a stream per feed.
    """

    def __init__(self, source: str | bytes | IO[Any], chunk_size: int = 65536):
        if isinstance(source, str):
            source = io.StringIO(source)
        elif isinstance(source, bytes):
            source = io.BytesIO(source)
        self.stream = source
        self.chunk_size = chunk_size
        self._queue: deque[tuple[Event, Position]] = deque()
        self._text: list[str] = []
        self._text_position: Position | None = None
        self._pending_namespaces: dict[str | None, str] = {}
        self._started = False
        self._finished = False
        self._position = Position()
        self._parser = self._create_parser()

    def _create_parser(self) -> Any:
        parser = expat.ParserCreate(namespace_separator=_SEPARATOR)
        parser.namespace_prefixes = True
        parser.ordered_attributes = True
        parser.buffer_text = True
        parser.XmlDeclHandler = self._on_xml_decl
        parser.StartNamespaceDeclHandler = self._on_namespace
        parser.StartElementHandler = self._on_start
        parser.EndElementHandler = self._on_end
        parser.CharacterDataHandler = self._on_characters
        return parser

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def next(self) -> Event:
        """Return the next event. After DocumentEnd, keeps returning DocumentEnd.

        Raises:
            PositionedError: TOKENIZATION on malformed markup.
        """
        while not self._queue:
            if self._finished:
                return DocumentEnd()
            self._feed()
        event, self._position = self._queue.popleft()
        return event

    def position(self) -> Position:
        """Position of the last event returned by next()."""
        return self._position

    def __iter__(self) -> Iterator[Event]:
        while True:
            event = self.next()
            yield event
            if isinstance(event, DocumentEnd):
                return

    # -------------------------------------------------------------------------
    # Feeding
    # -------------------------------------------------------------------------

    def _feed(self) -> None:
        # str chunks are parsed as UTF-8 whatever the declaration says
        chunk = self.stream.read(self.chunk_size)
        final = not chunk
        try:
            self._parser.Parse(chunk, final)
        except expat.ExpatError as exc:
            self._finished = True
            position = Position(exc.lineno, exc.offset, self._parser.CurrentByteIndex)
            error = MapError(ErrorKind.TOKENIZATION, expat.errors.messages[exc.code])
            raise PositionedError(error, position) from exc
        if final:
            self._flush_text()
            self._ensure_started()
            self._push(DocumentEnd(), self._current())
            self._finished = True

    def _current(self) -> Position:
        parser = self._parser
        return Position(
            parser.CurrentLineNumber, parser.CurrentColumnNumber, parser.CurrentByteIndex
        )

    def _push(self, event: Event, position: Position) -> None:
        self._queue.append((event, position))

    def _ensure_started(self) -> None:
        if not self._started:
            self._started = True
            self._push(DocumentStart(), Position())

    def _flush_text(self) -> None:
        if not self._text:
            return
        text = ''.join(self._text)
        position = self._text_position or self._current()
        self._text = []
        self._text_position = None
        if text.strip():
            self._push(Characters(text), position)
        else:
            self._push(Whitespace(text), position)

    # -------------------------------------------------------------------------
    # expat handlers
    # -------------------------------------------------------------------------

    def _on_xml_decl(self, version: str | None, encoding: str | None, standalone: int) -> None:
        if self._started:
            return
        self._started = True
        self._push(
            DocumentStart(
                version=version or '1.0',
                encoding=encoding,
                standalone=None if standalone == -1 else bool(standalone),
            ),
            self._current(),
        )

    def _on_namespace(self, prefix: str | None, uri: str | None) -> None:
        self._pending_namespaces[prefix] = uri or ''

    def _on_start(self, name: str, attributes: list[str]) -> None:
        self._flush_text()
        self._ensure_started()
        attrs = tuple(
            Attribute(QName.from_expat(attributes[i]), attributes[i + 1])
            for i in range(0, len(attributes), 2)
        )
        namespaces, self._pending_namespaces = self._pending_namespaces, {}
        self._push(ElementStart(QName.from_expat(name), attrs, namespaces), self._current())

    def _on_end(self, name: str) -> None:
        self._flush_text()
        self._push(ElementEnd(QName.from_expat(name)), self._current())

    def _on_characters(self, data: str) -> None:
        if not self._text:
            self._text_position = self._current()
        self._text.append(data)
