# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""GPX 1.1 Schema Model and generator configuration.

TYPES is a hand transcription of the relevant part of
http://www.topografix.com/GPX/1/1/gpx.xsd. STRUCTS, SIMPLE_TYPES and
CONVERSIONS tell the generator what to emit into `_auto.py` and which
hand-written converters to reference.
"""

from __future__ import annotations

from genro_xmlmap.generator import Conversion, SimpleTypeInfo, StructInfo
from genro_xmlmap.schema import SchemaType, SimpleType, complex_type

GPX_NAMESPACE = 'http://www.topografix.com/GPX/1/1'
GPX_10_NAMESPACE = 'http://www.topografix.com/GPX/1/0'

TYPES: dict[str, SchemaType | SimpleType] = {
    'gpxType': complex_type(
        'metadata=metadataType, wpt[]=wptType, rte[]=rteType, trk[]=trkType,'
        ' extensions=extensionsType',
        attributes='version=_gpx:version, creator=xsd:string',
    ),
    'metadataType': complex_type(
        'name=xsd:string, desc=xsd:string, author=personType, copyright=copyrightType,'
        ' link[]=linkType, time=xsd:dateTime, keywords=xsd:string, bounds=boundsType,'
        ' extensions=extensionsType',
    ),
    'trkType': complex_type(
        'name=xsd:string, cmt=xsd:string, desc=xsd:string, src=xsd:string,'
        ' link[]=linkType, number=xsd:nonNegativeInteger, type=xsd:string,'
        ' extensions=extensionsType, trkseg[]=trksegType',
    ),
    'rteType': complex_type(
        'name=xsd:string, cmt=xsd:string, desc=xsd:string, src=xsd:string,'
        ' link[]=linkType, number=xsd:nonNegativeInteger, type=xsd:string,'
        ' extensions=extensionsType, rtept[]=wptType',
    ),
    'trksegType': complex_type('trkpt[]=wptType, extensions=extensionsType'),
    'boundsType': complex_type(
        attributes='minlat=latitudeType, minlon=longitudeType,'
        ' maxlat=latitudeType, maxlon=longitudeType',
    ),
    'wptType': complex_type(
        'ele=xsd:decimal, time=xsd:dateTime, magvar=degreesType, geoidheight=xsd:decimal,'
        ' name=xsd:string, cmt=xsd:string, desc=xsd:string, src=xsd:string,'
        ' link[]=linkType, sym=xsd:string, type=xsd:string, fix=fixType,'
        ' sat=xsd:nonNegativeInteger, hdop=xsd:decimal, vdop=xsd:decimal,'
        ' pdop=xsd:decimal, ageofdgpsdata=xsd:decimal, dgpsid=dgpsStationType,'
        ' extensions=extensionsType',
        attributes='lat=latitudeType, lon=longitudeType',
    ),
    'linkType': complex_type('text=xsd:string, type=xsd:string', attributes='href=xsd:anyURI'),
    'copyrightType': complex_type(
        'year=xsd:gYear, license=xsd:anyURI', attributes='author=xsd:string'
    ),
    'personType': complex_type('name=xsd:string, email=emailType, link=linkType'),
    'emailType': complex_type(attributes='id=xsd:string, domain=xsd:string'),
    'degreesType': SimpleType('xsd:decimal', min_inclusive=0.0, max_exclusive=360.0),
    'dgpsStationType': SimpleType('xsd:integer', min_inclusive=0.0, max_inclusive=1024.0),
}

_TEXT_TAGS = {'cmt': 'comment', 'desc': 'description', 'src': 'source', 'link': 'links'}

STRUCTS = [
    StructInfo('Link', 'linkType'),
    StructInfo('Person', 'personType'),
    StructInfo('Copyright', 'copyrightType'),
    StructInfo('Bounds', 'boundsType'),
    StructInfo('Metadata', 'metadataType', tags={'desc': 'description'}),
    StructInfo('Email', 'emailType', record=False, build=False, serializer=False),
    StructInfo('Waypoint', 'wptType', record=False, build=False, serializer=False),
    StructInfo('TrackSegment', 'trksegType', tags={'trkpt': 'waypoints'}),
    StructInfo('Track', 'trkType', tags={**_TEXT_TAGS, 'trkseg': 'segments'}),
    StructInfo('Route', 'rteType', tags={**_TEXT_TAGS, 'rtept': 'waypoints'}),
    StructInfo(
        'Gpx',
        'gpxType',
        tags={'wpt': 'waypoints', 'rte': 'routes', 'trk': 'tracks'},
        namespace=GPX_NAMESPACE,
    ),
]

SIMPLE_TYPES = [
    SimpleTypeInfo('Degrees', 'degreesType'),
    SimpleTypeInfo('DgpsStation', 'dgpsStationType'),
]

CONVERSIONS = {
    'latitudeType': Conversion('float', 'conv.Latitude'),
    'longitudeType': Conversion('float', 'conv.Longitude'),
    '_gpx:version': Conversion('Version', 'conv.Version'),
    'fixType': Conversion('Fix', 'conv.Fix'),
    'wptType': Conversion('Waypoint', 'conv.Wpt'),
    'emailType': Conversion('str', 'conv.Email'),
    'extensionsType': Conversion('XmlElement', 'conv.Extensions'),
    'xsd:decimal': Conversion('Decimal', 'xsd.Decimal'),
    'xsd:dateTime': Conversion('datetime', 'xsd.DateTime'),
    'xsd:string': Conversion('str', 'xsd.String'),
    'xsd:nonNegativeInteger': Conversion('int', 'xsd.NonNegativeInteger'),
    'xsd:anyURI': Conversion('str', 'xsd.Uri'),
    'xsd:integer': Conversion('int', 'xsd.Integer'),
    'xsd:gYear': Conversion('int', 'xsd.GYear'),
}

HEADER = '''# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""GPX 1.1 records, builders and serializers.

Generated by `python -m genro_xmlmap.gpx.generate` from
genro_xmlmap.gpx.schema. Do not edit by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from genro_xmlmap import xsd
from genro_xmlmap.convert import BoundedConverter, ElementConverter
from genro_xmlmap.element import XmlElement
from genro_xmlmap.errors import unexpected_attribute
from genro_xmlmap.ser import ElementSerializer, Sink, collect_attributes
from genro_xmlmap.tokens import Attribute, ElementStart, TokenSource

from . import conv
from .model import Fix, Version, Waypoint
'''

BUILDER_BASE = 'conv.GpxElementBuilder'
