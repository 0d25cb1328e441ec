# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for load_xsd."""

import pytest

from genro_xmlmap.generator import Generator, SimpleTypeInfo, StructInfo
from genro_xmlmap.gpx.schema import CONVERSIONS
from genro_xmlmap.schema import AttributeDecl, Cardinality, ElementDecl, SchemaType, SimpleType
from genro_xmlmap.xsd_loader import load_xsd

# =============================================================================
# Fixtures
# =============================================================================


POINTS_XSD = """\
<?xml version="1.0" encoding="UTF-8"?>
<xsd:schema xmlns:xsd="http://www.w3.org/2001/XMLSchema"
            xmlns="urn:points" targetNamespace="urn:points">
  <xsd:element name="points" type="pointsType"/>
  <xsd:complexType name="pointsType">
    <xsd:sequence>
      <xsd:element name="name" type="xsd:string" minOccurs="0"/>
      <xsd:element name="pt" type="ptType" minOccurs="0" maxOccurs="unbounded"/>
      <xsd:element name="extra" minOccurs="0"/>
    </xsd:sequence>
  </xsd:complexType>
  <xsd:complexType name="ptType">
    <xsd:sequence>
      <xsd:element name="ele" type="xsd:decimal" minOccurs="0"/>
      <xsd:sequence maxOccurs="unbounded">
        <xsd:element name="tag" type="xsd:string"/>
      </xsd:sequence>
    </xsd:sequence>
    <xsd:attribute name="lat" type="latitudeType" use="required"/>
    <xsd:attribute name="note" type="xsd:string"/>
  </xsd:complexType>
  <xsd:simpleType name="latitudeType">
    <xsd:restriction base="xsd:decimal">
      <xsd:minInclusive value="-90.0"/>
      <xsd:maxInclusive value="90.0"/>
    </xsd:restriction>
  </xsd:simpleType>
  <xsd:simpleType name="degreesType">
    <xsd:restriction base="xsd:decimal">
      <xsd:minInclusive value="0.0"/>
      <xsd:maxExclusive value="360.0"/>
    </xsd:restriction>
  </xsd:simpleType>
  <xsd:simpleType name="fixType">
    <xsd:restriction base="xsd:string">
      <xsd:enumeration value="2d"/>
    </xsd:restriction>
  </xsd:simpleType>
</xsd:schema>
"""


@pytest.fixture
def points_xsd_file(tmp_path):
    xsd_path = tmp_path / 'points.xsd'
    xsd_path.write_text(POINTS_XSD, encoding='utf-8')
    return xsd_path


# =============================================================================
# Tests
# =============================================================================


class TestLoadXsd:
    """Reading named types."""

    def test_from_file_and_text(self, points_xsd_file):
        """A path (str or Path) and inline text give the same result."""
        from_text = load_xsd(POINTS_XSD)

        assert load_xsd(points_xsd_file) == from_text
        assert load_xsd(str(points_xsd_file)) == from_text

    def test_complex_type(self):
        types = load_xsd(POINTS_XSD)

        assert types['pointsType'] == SchemaType(
            sequence=(
                ElementDecl('name', 'xsd:string', Cardinality.ONE),
                ElementDecl('pt', 'ptType', Cardinality.MANY),
                ElementDecl('extra', 'xsd:anyType', Cardinality.ONE),
            )
        )

    def test_nested_repeated_sequence(self):
        """Elements of a repeated inner sequence are MANY."""
        pt = load_xsd(POINTS_XSD)['ptType']

        assert pt.element('ele').cardinality is Cardinality.ONE
        assert pt.element('tag').cardinality is Cardinality.MANY

    def test_top_level_choice(self):
        """A choice directly under complexType is flattened like a sequence."""
        xsd_text = (
            '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
            '<xs:complexType name="shapeType"><xs:choice maxOccurs="unbounded">'
            '<xs:element name="circle" type="xs:string"/>'
            '<xs:element name="square" type="xs:string"/>'
            '</xs:choice></xs:complexType></xs:schema>'
        )

        shape = load_xsd(xsd_text)['shapeType']

        assert shape.sequence == (
            ElementDecl('circle', 'xsd:string', Cardinality.MANY),
            ElementDecl('square', 'xsd:string', Cardinality.MANY),
        )

    def test_attributes(self):
        pt = load_xsd(POINTS_XSD)['ptType']

        assert pt.attributes == (
            AttributeDecl('lat', 'latitudeType', True),
            AttributeDecl('note', 'xsd:string', False),
        )

    def test_simple_types(self):
        types = load_xsd(POINTS_XSD)

        assert types['latitudeType'] == SimpleType('xsd:decimal', -90.0, 90.0)
        assert types['degreesType'] == SimpleType('xsd:decimal', 0.0, max_exclusive=360.0)
        assert types['fixType'] == SimpleType('xsd:string')

    def test_global_elements_not_types(self):
        assert 'points' not in load_xsd(POINTS_XSD)

    def test_not_a_schema(self):
        with pytest.raises(ValueError, match='Not an XSD schema'):
            load_xsd('<root/>')

    def test_feeds_generator(self):
        """Loaded types can drive the Generator directly."""
        types = load_xsd(POINTS_XSD)
        source = Generator(types, CONVERSIONS).generate(
            [StructInfo('Point', 'ptType')], [SimpleTypeInfo('Latitude', 'latitudeType')]
        )

        assert 'class PointBuilder' in source
        assert 'self.tags: list[str] = []' in source
        assert 'min_inclusive = -90' in source
