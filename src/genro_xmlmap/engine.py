# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Generic element engine and the Element Builder contract.

parse_element() drives any ElementBuilder through one element's subtree:
start tag, children, character data, end tag, then build(). Every error
leaving the engine is a PositionedError.

Classes:
    ElementBuilder - base class for type-specific builders
    CharBuilder - builder for character-only elements
    DocInfo, Document - result of parse_document()

Functions:
    parse_element - consume one element with a builder
    parse_document - consume a whole document, dispatching the root element
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .errors import (
    MapError,
    PositionedError,
    duplicate_root,
    missing_field,
    missing_root,
    unexpected_end,
    unexpected_event,
)
from .tokens import (
    Attribute,
    Characters,
    DocumentEnd,
    DocumentStart,
    ElementEnd,
    ElementStart,
    TokenSource,
    Whitespace,
)

if TYPE_CHECKING:
    from .convert import Converter

logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE
# =============================================================================


def parse_element(builder: ElementBuilder, elem_start: ElementStart) -> Any:
    """Consume the subtree opened by elem_start and return builder.build().

    The token source must have just returned elem_start. On return the
    matching end tag has been consumed.

    Raises:
        PositionedError: Any failure, positioned at the event being handled
            when it occurred. The context lists the elements enclosing the
            failing one: an element never appears in the context of its own
            failure, and nested failures get this element appended.
    """
    tokens = builder.tokens
    start_position = tokens.position()
    try:
        builder.on_start(elem_start)
    except MapError as exc:
        raise PositionedError(exc, start_position) from exc

    while True:
        try:
            event = tokens.next()
            if isinstance(event, ElementStart):
                builder.on_child(event)
            elif isinstance(event, ElementEnd):
                if event.name != elem_start.name:
                    raise unexpected_end(elem_start.name, event.name)
                break
            elif isinstance(event, Characters):
                builder.on_text(event.text)
            elif isinstance(event, Whitespace):
                builder.on_whitespace(event.text)
            else:
                raise unexpected_event(event)
        except PositionedError as exc:
            exc.add_context(elem_start.name, start_position)
            raise
        except MapError as exc:
            raise PositionedError(exc, tokens.position()) from exc

    try:
        return builder.build()
    except MapError as exc:
        raise PositionedError(exc, tokens.position()) from exc


# =============================================================================
# BUILDER CONTRACT
# =============================================================================


class ElementBuilder:
    """Base class for schema-specific element builders.

    Subclasses override the on_* hooks they need and build(). A builder
    instance parses exactly one element and is discarded afterwards.

    Attributes:
        namespaces: Namespace URIs this builder accepts. None accepts any.
            Attributes in other namespaces are skipped with a warning and
            child elements in other namespaces go to the generic fallback.
        tokens: The TokenSource being consumed.
        unknown_elements: Children captured by the generic fallback.
    """

    namespaces: tuple[str, ...] | None = None

    def __init__(self, tokens: TokenSource):
        self.tokens = tokens
        self.unknown_elements: list[Any] = []

    def parse(self, elem_start: ElementStart) -> Any:
        return parse_element(self, elem_start)

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def on_start(self, elem_start: ElementStart) -> None:
        """Validate and capture attributes. Accepts everything by default."""

    def on_child(self, elem_start: ElementStart) -> None:
        self.parse_unknown(elem_start)

    def on_text(self, text: str) -> None:
        pass

    def on_whitespace(self, text: str) -> None:
        pass

    def build(self) -> Any:
        raise NotImplementedError(f'{type(self).__name__} must implement build()')

    # -------------------------------------------------------------------------
    # Helpers for subclasses
    # -------------------------------------------------------------------------

    def parse_unknown(self, elem_start: ElementStart) -> None:
        """Capture an unrecognized child generically."""
        from .element import XmlElementBuilder

        logger.debug('Capturing unknown element <%s> in %s', elem_start.name, type(self).__name__)
        self.unknown_elements.append(XmlElementBuilder(self.tokens).parse(elem_start))

    def accepts(self, namespace: str | None) -> bool:
        return namespace is None or self.namespaces is None or namespace in self.namespaces

    def own_attributes(self, elem_start: ElementStart) -> Iterator[Attribute]:
        """Yield the attributes in accepted namespaces, warning about the rest."""
        for attr in elem_start.attributes:
            if self.accepts(attr.name.namespace):
                yield attr
            else:
                logger.warning(
                    'Namespace ignored on attribute %s of <%s>: %s',
                    attr.name,
                    elem_start.name,
                    attr.name.namespace,
                )

    def child_tag(self, elem_start: ElementStart) -> str | None:
        """Local name of a child in an accepted namespace, else None."""
        name = elem_start.name
        if self.accepts(name.namespace):
            return name.local_name
        return None

    def require(self, name: str, value: Any) -> Any:
        if value is None:
            raise missing_field(name)
        return value


class CharBuilder(ElementBuilder):
    """Accumulates character data and decodes it with from_chars.

    Whitespace is kept: indentation around text is the decoder's concern.
    """

    def __init__(self, tokens: TokenSource, from_chars: Callable[[str], Any]):
        super().__init__(tokens)
        self.from_chars = from_chars
        self.chunks: list[str] = []

    def on_text(self, text: str) -> None:
        self.chunks.append(text)

    def on_whitespace(self, text: str) -> None:
        self.chunks.append(text)

    def build(self) -> Any:
        return self.from_chars(''.join(self.chunks))


# =============================================================================
# DOCUMENT
# =============================================================================


@dataclass
class DocInfo:
    """XML declaration data."""

    version: str = '1.0'
    encoding: str | None = None
    standalone: bool | None = None


@dataclass
class Document:
    """Parsed document: declaration info plus the root record."""

    info: DocInfo = field(default_factory=DocInfo)
    data: Any = None


def parse_document(tokens: TokenSource, roots: Mapping[str, type[Converter]]) -> Document:
    """Parse a whole document whose root is one of `roots`.

    Args:
        tokens: Source positioned before the first event.
        roots: Root local name -> converter used to parse it.

    Raises:
        PositionedError: DUPLICATE_ROOT if a second recognized root appears,
            MISSING_ROOT if none does, or any failure from the root parse.
    """
    from .element import XmlElementBuilder

    info = DocInfo()
    data = None
    while True:
        event = tokens.next()
        if isinstance(event, DocumentStart):
            info = DocInfo(event.version, event.encoding, event.standalone)
        elif isinstance(event, ElementStart):
            converter = roots.get(event.name.local_name)
            if converter is None:
                logger.warning('Ignoring unknown root element <%s>', event.name)
                XmlElementBuilder(tokens).parse(event)
            elif data is not None:
                raise PositionedError(duplicate_root(event.name), tokens.position())
            else:
                data = converter.parse_via(tokens, event)
        elif isinstance(event, DocumentEnd):
            break
        elif not isinstance(event, Whitespace):
            raise PositionedError(unexpected_event(event), tokens.position())

    if data is None:
        raise PositionedError(missing_root(roots), tokens.position())
    return Document(info=info, data=data)
