# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""GPX 1.1 reader and writer built on genro_xmlmap.

Example:
    >>> from genro_xmlmap import gpx
    >>> doc = gpx.parse_string('<gpx version="1.1" creator="me"><trk/></gpx>')
    >>> len(doc.data.tracks)
    1
    >>> print(gpx.to_string(doc.data, pretty=False))
    <?xml version="1.0" encoding="UTF-8"?>
    <gpx version="1.1" creator="me" xmlns="http://www.topografix.com/GPX/1/1"><trk/></gpx>
"""

from __future__ import annotations

import os
from typing import IO, Any

from genro_xmlmap.engine import Document, parse_document
from genro_xmlmap.ser import XmlSink, serialize_document
from genro_xmlmap.tokens import DocumentStart, TokenSource

from ._auto import (
    Bounds,
    Copyright,
    Gpx,
    GpxConverter,
    Link,
    Metadata,
    Person,
    Route,
    Track,
    TrackSegment,
)
from .model import Fix, Point, Version, Waypoint

ROOTS = {'gpx': GpxConverter}

__all__ = [
    'Bounds',
    'Copyright',
    'Fix',
    'Gpx',
    'Link',
    'Metadata',
    'Person',
    'Point',
    'Route',
    'Track',
    'TrackSegment',
    'Version',
    'Waypoint',
    'parse',
    'parse_file',
    'parse_string',
    'save',
    'to_string',
]


def parse(stream: IO[Any]) -> Document:
    """Parse a GPX document from a readable stream.

    Returns:
        Document whose `data` is a Gpx record.

    Raises:
        PositionedError: On malformed XML or invalid GPX content.
    """
    return parse_document(TokenSource(stream), ROOTS)


def parse_string(text: str | bytes) -> Document:
    return parse_document(TokenSource(text), ROOTS)


def parse_file(path: str | os.PathLike[str]) -> Document:
    with open(path, 'rb') as f:
        return parse(f)


def to_string(gpx: Gpx | Document, pretty: bool = True) -> str:
    """Serialize a Gpx record (or a Document holding one) to XML text."""
    sink = XmlSink(pretty=pretty)
    _write(gpx, sink)
    return sink.getvalue()


def save(
    gpx: Gpx | Document,
    destination: str | os.PathLike[str] | IO[str],
    pretty: bool = True,
) -> None:
    """Write a Gpx record to a path or a text stream.

    The document is rendered before the destination is touched, so a
    serialization fault leaves an existing file unchanged.
    """
    text = to_string(gpx, pretty=pretty)
    if hasattr(destination, 'write'):
        destination.write(text)
        return
    with open(destination, 'w', encoding='utf-8') as f:
        f.write(text)


def _write(gpx: Gpx | Document, sink: XmlSink) -> None:
    if isinstance(gpx, Document):
        gpx = gpx.data
    serialize_document(gpx, 'gpx', GpxConverter, sink, DocumentStart(encoding=sink.encoding))
