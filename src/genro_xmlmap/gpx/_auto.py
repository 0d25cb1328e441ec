# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
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


class Degrees(BoundedConverter):
    """`degreesType`: restricted xsd:decimal."""

    base = xsd.Decimal
    min_inclusive = 0
    max_exclusive = 360


class DgpsStation(BoundedConverter):
    """`dgpsStationType`: restricted xsd:integer."""

    base = xsd.Integer
    min_inclusive = 0
    max_inclusive = 1024


@dataclass(kw_only=True)
class Link:
    """`linkType` contents."""

    href: str
    text: str | None = None
    type_: str | None = None
    unknown_elements: list[XmlElement] = field(default_factory=list)


class LinkBuilder(conv.GpxElementBuilder):
    """Parses `linkType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.href: str | None = None
        self.text: str | None = None
        self.type_: str | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            name = attr.name.local_name
            if name == "href":
                self.href = xsd.Uri.from_attribute(attr.value)
            else:
                raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "text":
            self.text = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "type":
            self.type_ = xsd.String.parse_via(self.tokens, elem_start)
        else:
            self.parse_unknown(elem_start)

    def build(self) -> Link:
        return Link(
            href=self.require("href", self.href),
            text=self.text,
            type_=self.type_,
            unknown_elements=self.unknown_elements,
        )


class LinkSerializer(ElementSerializer):
    """Writes Link as `linkType`."""

    def attributes(self, record: Link) -> list[Attribute]:
        return collect_attributes(
            ("href", xsd.Uri, record.href),
        )

    def children(self, record: Link, sink: Sink) -> None:
        if record.text is not None:
            xsd.String.serialize_via(record.text, sink, "text")
        if record.type_ is not None:
            xsd.String.serialize_via(record.type_, sink, "type")


class LinkConverter(ElementConverter):
    builder = LinkBuilder
    serializer = LinkSerializer


@dataclass(kw_only=True)
class Person:
    """`personType` contents."""

    name: str | None = None
    email: str | None = None
    link: Link | None = None
    unknown_elements: list[XmlElement] = field(default_factory=list)


class PersonBuilder(conv.GpxElementBuilder):
    """Parses `personType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.name: str | None = None
        self.email: str | None = None
        self.link: Link | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "name":
            self.name = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "email":
            self.email = conv.Email.parse_via(self.tokens, elem_start)
        elif tag == "link":
            self.link = LinkConverter.parse_via(self.tokens, elem_start)
        else:
            self.parse_unknown(elem_start)

    def build(self) -> Person:
        return Person(
            name=self.name,
            email=self.email,
            link=self.link,
            unknown_elements=self.unknown_elements,
        )


class PersonSerializer(ElementSerializer):
    """Writes Person as `personType`."""

    def children(self, record: Person, sink: Sink) -> None:
        if record.name is not None:
            xsd.String.serialize_via(record.name, sink, "name")
        if record.email is not None:
            conv.Email.serialize_via(record.email, sink, "email")
        if record.link is not None:
            LinkConverter.serialize_via(record.link, sink, "link")


class PersonConverter(ElementConverter):
    builder = PersonBuilder
    serializer = PersonSerializer


@dataclass(kw_only=True)
class Copyright:
    """`copyrightType` contents."""

    author: str
    year: int | None = None
    license: str | None = None
    unknown_elements: list[XmlElement] = field(default_factory=list)


class CopyrightBuilder(conv.GpxElementBuilder):
    """Parses `copyrightType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.author: str | None = None
        self.year: int | None = None
        self.license: str | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            name = attr.name.local_name
            if name == "author":
                self.author = xsd.String.from_attribute(attr.value)
            else:
                raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "year":
            self.year = xsd.GYear.parse_via(self.tokens, elem_start)
        elif tag == "license":
            self.license = xsd.Uri.parse_via(self.tokens, elem_start)
        else:
            self.parse_unknown(elem_start)

    def build(self) -> Copyright:
        return Copyright(
            author=self.require("author", self.author),
            year=self.year,
            license=self.license,
            unknown_elements=self.unknown_elements,
        )


class CopyrightSerializer(ElementSerializer):
    """Writes Copyright as `copyrightType`."""

    def attributes(self, record: Copyright) -> list[Attribute]:
        return collect_attributes(
            ("author", xsd.String, record.author),
        )

    def children(self, record: Copyright, sink: Sink) -> None:
        if record.year is not None:
            xsd.GYear.serialize_via(record.year, sink, "year")
        if record.license is not None:
            xsd.Uri.serialize_via(record.license, sink, "license")


class CopyrightConverter(ElementConverter):
    builder = CopyrightBuilder
    serializer = CopyrightSerializer


@dataclass(kw_only=True)
class Bounds:
    """`boundsType` contents."""

    minlat: float
    minlon: float
    maxlat: float
    maxlon: float
    unknown_elements: list[XmlElement] = field(default_factory=list)


class BoundsBuilder(conv.GpxElementBuilder):
    """Parses `boundsType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.minlat: float | None = None
        self.minlon: float | None = None
        self.maxlat: float | None = None
        self.maxlon: float | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            name = attr.name.local_name
            if name == "minlat":
                self.minlat = conv.Latitude.from_attribute(attr.value)
            elif name == "minlon":
                self.minlon = conv.Longitude.from_attribute(attr.value)
            elif name == "maxlat":
                self.maxlat = conv.Latitude.from_attribute(attr.value)
            elif name == "maxlon":
                self.maxlon = conv.Longitude.from_attribute(attr.value)
            else:
                raise unexpected_attribute(attr.name)

    def build(self) -> Bounds:
        return Bounds(
            minlat=self.require("minlat", self.minlat),
            minlon=self.require("minlon", self.minlon),
            maxlat=self.require("maxlat", self.maxlat),
            maxlon=self.require("maxlon", self.maxlon),
            unknown_elements=self.unknown_elements,
        )


class BoundsSerializer(ElementSerializer):
    """Writes Bounds as `boundsType`."""

    def attributes(self, record: Bounds) -> list[Attribute]:
        return collect_attributes(
            ("minlat", conv.Latitude, record.minlat),
            ("minlon", conv.Longitude, record.minlon),
            ("maxlat", conv.Latitude, record.maxlat),
            ("maxlon", conv.Longitude, record.maxlon),
        )


class BoundsConverter(ElementConverter):
    builder = BoundsBuilder
    serializer = BoundsSerializer


@dataclass(kw_only=True)
class Metadata:
    """`metadataType` contents."""

    name: str | None = None
    description: str | None = None
    author: Person | None = None
    copyright: Copyright | None = None
    links: list[Link] = field(default_factory=list)
    time: datetime | None = None
    keywords: str | None = None
    bounds: Bounds | None = None
    extensions: XmlElement | None = None
    unknown_elements: list[XmlElement] = field(default_factory=list)


class MetadataBuilder(conv.GpxElementBuilder):
    """Parses `metadataType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.name: str | None = None
        self.description: str | None = None
        self.author: Person | None = None
        self.copyright: Copyright | None = None
        self.links: list[Link] = []
        self.time: datetime | None = None
        self.keywords: str | None = None
        self.bounds: Bounds | None = None
        self.extensions: XmlElement | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "name":
            self.name = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "desc":
            self.description = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "author":
            self.author = PersonConverter.parse_via(self.tokens, elem_start)
        elif tag == "copyright":
            self.copyright = CopyrightConverter.parse_via(self.tokens, elem_start)
        elif tag == "link":
            self.links.append(LinkConverter.parse_via(self.tokens, elem_start))
        elif tag == "time":
            self.time = xsd.DateTime.parse_via(self.tokens, elem_start)
        elif tag == "keywords":
            self.keywords = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "bounds":
            self.bounds = BoundsConverter.parse_via(self.tokens, elem_start)
        elif tag == "extensions":
            self.extensions = conv.Extensions.parse_via(self.tokens, elem_start)
        else:
            self.parse_unknown(elem_start)

    def build(self) -> Metadata:
        return Metadata(
            name=self.name,
            description=self.description,
            author=self.author,
            copyright=self.copyright,
            links=self.links,
            time=self.time,
            keywords=self.keywords,
            bounds=self.bounds,
            extensions=self.extensions,
            unknown_elements=self.unknown_elements,
        )


class MetadataSerializer(ElementSerializer):
    """Writes Metadata as `metadataType`."""

    def children(self, record: Metadata, sink: Sink) -> None:
        if record.name is not None:
            xsd.String.serialize_via(record.name, sink, "name")
        if record.description is not None:
            xsd.String.serialize_via(record.description, sink, "desc")
        if record.author is not None:
            PersonConverter.serialize_via(record.author, sink, "author")
        if record.copyright is not None:
            CopyrightConverter.serialize_via(record.copyright, sink, "copyright")
        for item in record.links:
            LinkConverter.serialize_via(item, sink, "link")
        if record.time is not None:
            xsd.DateTime.serialize_via(record.time, sink, "time")
        if record.keywords is not None:
            xsd.String.serialize_via(record.keywords, sink, "keywords")
        if record.bounds is not None:
            BoundsConverter.serialize_via(record.bounds, sink, "bounds")
        if record.extensions is not None:
            conv.Extensions.serialize_via(record.extensions, sink, "extensions")


class MetadataConverter(ElementConverter):
    builder = MetadataBuilder
    serializer = MetadataSerializer


class EmailBuilderBase(conv.GpxElementBuilder):
    """Parses `emailType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.id_: str | None = None
        self.domain: str | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            name = attr.name.local_name
            if name == "id":
                self.id_ = xsd.String.from_attribute(attr.value)
            elif name == "domain":
                self.domain = xsd.String.from_attribute(attr.value)
            else:
                raise unexpected_attribute(attr.name)


class WaypointBuilderBase(conv.GpxElementBuilder):
    """Parses `wptType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.lat: float | None = None
        self.lon: float | None = None
        self.ele: Decimal | None = None
        self.time: datetime | None = None
        self.magvar: Decimal | None = None
        self.geoidheight: Decimal | None = None
        self.name: str | None = None
        self.cmt: str | None = None
        self.desc: str | None = None
        self.src: str | None = None
        self.links: list[Link] = []
        self.sym: str | None = None
        self.type_: str | None = None
        self.fix: Fix | None = None
        self.sat: int | None = None
        self.hdop: Decimal | None = None
        self.vdop: Decimal | None = None
        self.pdop: Decimal | None = None
        self.ageofdgpsdata: Decimal | None = None
        self.dgpsid: int | None = None
        self.extensions: XmlElement | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            name = attr.name.local_name
            if name == "lat":
                self.lat = conv.Latitude.from_attribute(attr.value)
            elif name == "lon":
                self.lon = conv.Longitude.from_attribute(attr.value)
            else:
                raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "ele":
            self.ele = xsd.Decimal.parse_via(self.tokens, elem_start)
        elif tag == "time":
            self.time = xsd.DateTime.parse_via(self.tokens, elem_start)
        elif tag == "magvar":
            self.magvar = Degrees.parse_via(self.tokens, elem_start)
        elif tag == "geoidheight":
            self.geoidheight = xsd.Decimal.parse_via(self.tokens, elem_start)
        elif tag == "name":
            self.name = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "cmt":
            self.cmt = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "desc":
            self.desc = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "src":
            self.src = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "link":
            self.links.append(LinkConverter.parse_via(self.tokens, elem_start))
        elif tag == "sym":
            self.sym = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "type":
            self.type_ = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "fix":
            self.fix = conv.Fix.parse_via(self.tokens, elem_start)
        elif tag == "sat":
            self.sat = xsd.NonNegativeInteger.parse_via(self.tokens, elem_start)
        elif tag == "hdop":
            self.hdop = xsd.Decimal.parse_via(self.tokens, elem_start)
        elif tag == "vdop":
            self.vdop = xsd.Decimal.parse_via(self.tokens, elem_start)
        elif tag == "pdop":
            self.pdop = xsd.Decimal.parse_via(self.tokens, elem_start)
        elif tag == "ageofdgpsdata":
            self.ageofdgpsdata = xsd.Decimal.parse_via(self.tokens, elem_start)
        elif tag == "dgpsid":
            self.dgpsid = DgpsStation.parse_via(self.tokens, elem_start)
        elif tag == "extensions":
            self.extensions = conv.Extensions.parse_via(self.tokens, elem_start)
        else:
            self.parse_unknown(elem_start)


@dataclass(kw_only=True)
class TrackSegment:
    """`trksegType` contents."""

    waypoints: list[Waypoint] = field(default_factory=list)
    extensions: XmlElement | None = None
    unknown_elements: list[XmlElement] = field(default_factory=list)


class TrackSegmentBuilder(conv.GpxElementBuilder):
    """Parses `trksegType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.waypoints: list[Waypoint] = []
        self.extensions: XmlElement | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "trkpt":
            self.waypoints.append(conv.Wpt.parse_via(self.tokens, elem_start))
        elif tag == "extensions":
            self.extensions = conv.Extensions.parse_via(self.tokens, elem_start)
        else:
            self.parse_unknown(elem_start)

    def build(self) -> TrackSegment:
        return TrackSegment(
            waypoints=self.waypoints,
            extensions=self.extensions,
            unknown_elements=self.unknown_elements,
        )


class TrackSegmentSerializer(ElementSerializer):
    """Writes TrackSegment as `trksegType`."""

    def children(self, record: TrackSegment, sink: Sink) -> None:
        for item in record.waypoints:
            conv.Wpt.serialize_via(item, sink, "trkpt")
        if record.extensions is not None:
            conv.Extensions.serialize_via(record.extensions, sink, "extensions")


class TrackSegmentConverter(ElementConverter):
    builder = TrackSegmentBuilder
    serializer = TrackSegmentSerializer


@dataclass(kw_only=True)
class Track:
    """`trkType` contents."""

    name: str | None = None
    comment: str | None = None
    description: str | None = None
    source: str | None = None
    links: list[Link] = field(default_factory=list)
    number: int | None = None
    type_: str | None = None
    extensions: XmlElement | None = None
    segments: list[TrackSegment] = field(default_factory=list)
    unknown_elements: list[XmlElement] = field(default_factory=list)


class TrackBuilder(conv.GpxElementBuilder):
    """Parses `trkType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.name: str | None = None
        self.comment: str | None = None
        self.description: str | None = None
        self.source: str | None = None
        self.links: list[Link] = []
        self.number: int | None = None
        self.type_: str | None = None
        self.extensions: XmlElement | None = None
        self.segments: list[TrackSegment] = []

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "name":
            self.name = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "cmt":
            self.comment = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "desc":
            self.description = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "src":
            self.source = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "link":
            self.links.append(LinkConverter.parse_via(self.tokens, elem_start))
        elif tag == "number":
            self.number = xsd.NonNegativeInteger.parse_via(self.tokens, elem_start)
        elif tag == "type":
            self.type_ = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "extensions":
            self.extensions = conv.Extensions.parse_via(self.tokens, elem_start)
        elif tag == "trkseg":
            self.segments.append(TrackSegmentConverter.parse_via(self.tokens, elem_start))
        else:
            self.parse_unknown(elem_start)

    def build(self) -> Track:
        return Track(
            name=self.name,
            comment=self.comment,
            description=self.description,
            source=self.source,
            links=self.links,
            number=self.number,
            type_=self.type_,
            extensions=self.extensions,
            segments=self.segments,
            unknown_elements=self.unknown_elements,
        )


class TrackSerializer(ElementSerializer):
    """Writes Track as `trkType`."""

    def children(self, record: Track, sink: Sink) -> None:
        if record.name is not None:
            xsd.String.serialize_via(record.name, sink, "name")
        if record.comment is not None:
            xsd.String.serialize_via(record.comment, sink, "cmt")
        if record.description is not None:
            xsd.String.serialize_via(record.description, sink, "desc")
        if record.source is not None:
            xsd.String.serialize_via(record.source, sink, "src")
        for item in record.links:
            LinkConverter.serialize_via(item, sink, "link")
        if record.number is not None:
            xsd.NonNegativeInteger.serialize_via(record.number, sink, "number")
        if record.type_ is not None:
            xsd.String.serialize_via(record.type_, sink, "type")
        if record.extensions is not None:
            conv.Extensions.serialize_via(record.extensions, sink, "extensions")
        for item in record.segments:
            TrackSegmentConverter.serialize_via(item, sink, "trkseg")


class TrackConverter(ElementConverter):
    builder = TrackBuilder
    serializer = TrackSerializer


@dataclass(kw_only=True)
class Route:
    """`rteType` contents."""

    name: str | None = None
    comment: str | None = None
    description: str | None = None
    source: str | None = None
    links: list[Link] = field(default_factory=list)
    number: int | None = None
    type_: str | None = None
    extensions: XmlElement | None = None
    waypoints: list[Waypoint] = field(default_factory=list)
    unknown_elements: list[XmlElement] = field(default_factory=list)


class RouteBuilder(conv.GpxElementBuilder):
    """Parses `rteType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.name: str | None = None
        self.comment: str | None = None
        self.description: str | None = None
        self.source: str | None = None
        self.links: list[Link] = []
        self.number: int | None = None
        self.type_: str | None = None
        self.extensions: XmlElement | None = None
        self.waypoints: list[Waypoint] = []

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "name":
            self.name = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "cmt":
            self.comment = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "desc":
            self.description = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "src":
            self.source = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "link":
            self.links.append(LinkConverter.parse_via(self.tokens, elem_start))
        elif tag == "number":
            self.number = xsd.NonNegativeInteger.parse_via(self.tokens, elem_start)
        elif tag == "type":
            self.type_ = xsd.String.parse_via(self.tokens, elem_start)
        elif tag == "extensions":
            self.extensions = conv.Extensions.parse_via(self.tokens, elem_start)
        elif tag == "rtept":
            self.waypoints.append(conv.Wpt.parse_via(self.tokens, elem_start))
        else:
            self.parse_unknown(elem_start)

    def build(self) -> Route:
        return Route(
            name=self.name,
            comment=self.comment,
            description=self.description,
            source=self.source,
            links=self.links,
            number=self.number,
            type_=self.type_,
            extensions=self.extensions,
            waypoints=self.waypoints,
            unknown_elements=self.unknown_elements,
        )


class RouteSerializer(ElementSerializer):
    """Writes Route as `rteType`."""

    def children(self, record: Route, sink: Sink) -> None:
        if record.name is not None:
            xsd.String.serialize_via(record.name, sink, "name")
        if record.comment is not None:
            xsd.String.serialize_via(record.comment, sink, "cmt")
        if record.description is not None:
            xsd.String.serialize_via(record.description, sink, "desc")
        if record.source is not None:
            xsd.String.serialize_via(record.source, sink, "src")
        for item in record.links:
            LinkConverter.serialize_via(item, sink, "link")
        if record.number is not None:
            xsd.NonNegativeInteger.serialize_via(record.number, sink, "number")
        if record.type_ is not None:
            xsd.String.serialize_via(record.type_, sink, "type")
        if record.extensions is not None:
            conv.Extensions.serialize_via(record.extensions, sink, "extensions")
        for item in record.waypoints:
            conv.Wpt.serialize_via(item, sink, "rtept")


class RouteConverter(ElementConverter):
    builder = RouteBuilder
    serializer = RouteSerializer


@dataclass(kw_only=True)
class Gpx:
    """`gpxType` contents."""

    version: Version
    creator: str
    metadata: Metadata | None = None
    waypoints: list[Waypoint] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)
    tracks: list[Track] = field(default_factory=list)
    extensions: XmlElement | None = None
    unknown_elements: list[XmlElement] = field(default_factory=list)


class GpxBuilder(conv.GpxElementBuilder):
    """Parses `gpxType` elements."""

    def __init__(self, tokens: TokenSource):
        super().__init__(tokens)
        self.version: Version | None = None
        self.creator: str | None = None
        self.metadata: Metadata | None = None
        self.waypoints: list[Waypoint] = []
        self.routes: list[Route] = []
        self.tracks: list[Track] = []
        self.extensions: XmlElement | None = None

    def on_start(self, elem_start: ElementStart) -> None:
        for attr in self.own_attributes(elem_start):
            name = attr.name.local_name
            if name == "version":
                self.version = conv.Version.from_attribute(attr.value)
            elif name == "creator":
                self.creator = xsd.String.from_attribute(attr.value)
            else:
                raise unexpected_attribute(attr.name)

    def on_child(self, elem_start: ElementStart) -> None:
        tag = self.child_tag(elem_start)
        if tag == "metadata":
            self.metadata = MetadataConverter.parse_via(self.tokens, elem_start)
        elif tag == "wpt":
            self.waypoints.append(conv.Wpt.parse_via(self.tokens, elem_start))
        elif tag == "rte":
            self.routes.append(RouteConverter.parse_via(self.tokens, elem_start))
        elif tag == "trk":
            self.tracks.append(TrackConverter.parse_via(self.tokens, elem_start))
        elif tag == "extensions":
            self.extensions = conv.Extensions.parse_via(self.tokens, elem_start)
        else:
            self.parse_unknown(elem_start)

    def build(self) -> Gpx:
        return Gpx(
            version=self.require("version", self.version),
            creator=self.require("creator", self.creator),
            metadata=self.metadata,
            waypoints=self.waypoints,
            routes=self.routes,
            tracks=self.tracks,
            extensions=self.extensions,
            unknown_elements=self.unknown_elements,
        )


class GpxSerializer(ElementSerializer):
    """Writes Gpx as `gpxType`."""

    def attributes(self, record: Gpx) -> list[Attribute]:
        return collect_attributes(
            ("version", conv.Version, record.version),
            ("creator", xsd.String, record.creator),
        )

    def namespaces(self, record: Gpx) -> dict[str | None, str]:
        return {None: "http://www.topografix.com/GPX/1/1"}

    def children(self, record: Gpx, sink: Sink) -> None:
        if record.metadata is not None:
            MetadataConverter.serialize_via(record.metadata, sink, "metadata")
        for item in record.waypoints:
            conv.Wpt.serialize_via(item, sink, "wpt")
        for item in record.routes:
            RouteConverter.serialize_via(item, sink, "rte")
        for item in record.tracks:
            TrackConverter.serialize_via(item, sink, "trk")
        if record.extensions is not None:
            conv.Extensions.serialize_via(record.extensions, sink, "extensions")


class GpxConverter(ElementConverter):
    builder = GpxBuilder
    serializer = GpxSerializer
