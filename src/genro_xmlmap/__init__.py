# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""genro-xmlmap: schema-driven streaming XML mapping.

Runtime:
    TokenSource - pull events with positions out of an XML stream
    ElementBuilder, parse_element, parse_document - the element engine
    ElementSerializer, XmlSink, EventSink - the write side
    Converter and subclasses - per-type parse/serialize strategies

Offline:
    SchemaType, SimpleType, complex_type - the Schema Model
    Generator - emits builders and serializers from the Schema Model
    load_xsd - reads a Schema Model from an XSD file

The `gpx` subpackage is a complete GPX 1.1 mapping built with all of the above.
"""

from .convert import BoundedConverter, CharConverter, Converter, ElementConverter
from .element import XmlElement, XmlElementConverter
from .engine import CharBuilder, DocInfo, Document, ElementBuilder, parse_document, parse_element
from .errors import ErrorKind, GenerationError, MapError, Position, PositionedError
from .generator import Conversion, Generator, SimpleTypeInfo, StructInfo
from .schema import AttributeDecl, Cardinality, ElementDecl, SchemaType, SimpleType, complex_type
from .ser import ElementSerializer, EventSink, XmlSink, serialize_document
from .tokens import QName, TokenSource
from .xsd_loader import load_xsd

__version__ = '0.1.0'

__all__ = [
    'AttributeDecl',
    'BoundedConverter',
    'Cardinality',
    'CharBuilder',
    'CharConverter',
    'Conversion',
    'Converter',
    'DocInfo',
    'Document',
    'ElementBuilder',
    'ElementConverter',
    'ElementDecl',
    'ElementSerializer',
    'ErrorKind',
    'EventSink',
    'GenerationError',
    'Generator',
    'MapError',
    'Position',
    'PositionedError',
    'QName',
    'SchemaType',
    'SimpleType',
    'SimpleTypeInfo',
    'StructInfo',
    'TokenSource',
    'XmlElement',
    'XmlSink',
    'XmlElementConverter',
    'complex_type',
    'load_xsd',
    'parse_document',
    'parse_element',
    'serialize_document',
]
