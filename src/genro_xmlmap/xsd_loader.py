# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Load a Schema Model from an XSD document.

Only the subset the generator needs is read:
- named xs:complexType with xs:sequence or xs:choice of xs:element
  (minOccurs/maxOccurs, nested groups flattened) and xs:attribute
  (use="required")
- named xs:simpleType with an xs:restriction carrying minInclusive,
  maxInclusive or maxExclusive facets

References to XSD built-in types become 'xsd:<local>' (for example
'xsd:decimal'), any other type reference keeps its local name.

Usage:
    >>> types = load_xsd('gpx.xsd')
    >>> types['wptType'].attribute('lat')
    AttributeDecl(name='lat', type_name='latitudeType', required=True)
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from xml.etree import ElementTree as ET

from .schema import AttributeDecl, Cardinality, ElementDecl, SchemaType, SimpleType

logger = logging.getLogger(__name__)

XSD_NS = 'http://www.w3.org/2001/XMLSchema'
NS = {'xs': XSD_NS}

ANY_TYPE = 'xsd:anyType'


def load_xsd(source: str | Path) -> dict[str, SchemaType | SimpleType]:
    """Read named complex and simple types from an XSD file or text.

    Args:
        source: Path to an .xsd file, or the schema text itself.

    Raises:
        ValueError: If the document is not an XSD schema.
    """
    return XsdLoader(source).load()


class XsdLoader:
    """One-shot reader of an XSD document."""

    def __init__(self, source: str | Path):
        self.prefixes: dict[str, str] = {}
        self.root = self._parse(source)
        if self.root.tag != self._q('schema'):
            raise ValueError(f'Not an XSD schema: root element is {self.root.tag!r}')

    def _parse(self, source: str | Path) -> ET.Element:
        if isinstance(source, str) and source.lstrip().startswith('<'):
            stream = io.BytesIO(source.encode('utf-8'))
        else:
            stream = open(source, 'rb')
        root = None
        with stream:
            for event, item in ET.iterparse(stream, events=('start-ns', 'start')):
                if event == 'start-ns':
                    prefix, uri = item
                    self.prefixes.setdefault(prefix, uri)
                elif root is None:
                    root = item
        if root is None:
            raise ValueError('Empty XSD document')
        return root

    def load(self) -> dict[str, SchemaType | SimpleType]:
        types: dict[str, SchemaType | SimpleType] = {}
        for child in self.root:
            name = child.get('name')
            if not name:
                continue
            if child.tag == self._q('complexType'):
                types[name] = self._complex_type(child)
            elif child.tag == self._q('simpleType'):
                simple = self._simple_type(child)
                if simple is not None:
                    types[name] = simple
                else:
                    logger.debug('Skipping simpleType %s: no supported restriction', name)
        logger.debug('Loaded %d types from XSD', len(types))
        return types

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _q(self, tag: str) -> str:
        return f'{{{XSD_NS}}}{tag}'

    def _type_ref(self, qname: str | None) -> str:
        """Map a type reference to a Schema Model type name."""
        if not qname:
            return ANY_TYPE
        prefix, _, local = qname.rpartition(':')
        if self.prefixes.get(prefix) == XSD_NS:
            return f'xsd:{local}'
        return local

    def _occurs_many(self, node: ET.Element) -> bool:
        max_str = node.get('maxOccurs')
        return max_str is not None and max_str != '1'

    # -------------------------------------------------------------------------
    # Type parsing
    # -------------------------------------------------------------------------

    def _complex_type(self, node: ET.Element) -> SchemaType:
        elements: list[ElementDecl] = []
        for group in node:
            if group.tag in (self._q('sequence'), self._q('choice')):
                self._collect_elements(group, False, elements)
        attributes = [
            AttributeDecl(
                attr.get('name', ''),
                self._type_ref(attr.get('type')),
                attr.get('use') == 'required',
            )
            for attr in node.findall('xs:attribute', NS)
            if attr.get('name')
        ]
        return SchemaType(sequence=tuple(elements), attributes=tuple(attributes))

    def _collect_elements(
        self, group: ET.Element, repeated: bool, out: list[ElementDecl]
    ) -> None:
        """Flatten a sequence, nested groups included, into element declarations."""
        repeated = repeated or self._occurs_many(group)
        for item in group:
            if item.tag == self._q('element'):
                name = item.get('name')
                if not name:
                    continue
                many = repeated or self._occurs_many(item)
                out.append(
                    ElementDecl(
                        name,
                        self._type_ref(item.get('type')),
                        Cardinality.MANY if many else Cardinality.ONE,
                    )
                )
            elif item.tag in (self._q('sequence'), self._q('choice')):
                self._collect_elements(item, repeated, out)

    def _simple_type(self, node: ET.Element) -> SimpleType | None:
        restriction = node.find('xs:restriction', NS)
        if restriction is None:
            return None
        facets: dict[str, float] = {}
        for facet in restriction:
            tag = facet.tag.rsplit('}', 1)[-1]
            value = facet.get('value')
            if value is None:
                continue
            if tag == 'minInclusive':
                facets['min_inclusive'] = float(value)
            elif tag == 'maxInclusive':
                facets['max_inclusive'] = float(value)
            elif tag == 'maxExclusive':
                facets['max_exclusive'] = float(value)
        return SimpleType(self._type_ref(restriction.get('base')), **facets)
