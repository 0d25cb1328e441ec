# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Hand-written completions of the generated GPX builders.

Waypoints need a custom build because their location is composed of two
attributes and a child element. Emails are mapped to a single string.
"""

from __future__ import annotations

from typing import Any

from genro_xmlmap import xsd
from genro_xmlmap.errors import invalid_value
from genro_xmlmap.ser import ElementSerializer, Sink, collect_attributes, write_optional
from genro_xmlmap.tokens import Attribute

from . import conv
from ._auto import DgpsStation, Degrees, EmailBuilderBase, LinkConverter, WaypointBuilderBase
from .model import Point, Waypoint


class WaypointBuilder(WaypointBuilderBase):
    def build(self) -> Waypoint:
        return Waypoint(
            location=Point(
                latitude=self.require('lat', self.lat),
                longitude=self.require('lon', self.lon),
                elevation=self.ele,
            ),
            time=self.time,
            mag_variation=self.magvar,
            geoid_height=self.geoidheight,
            name=self.name,
            comment=self.cmt,
            description=self.desc,
            source=self.src,
            links=self.links,
            symbol=self.sym,
            type_=self.type_,
            fix=self.fix,
            satellites=self.sat,
            hdop=self.hdop,
            vdop=self.vdop,
            pdop=self.pdop,
            dgps_age=self.ageofdgpsdata,
            dgps_id=self.dgpsid,
            extensions=self.extensions,
            unknown_elements=self.unknown_elements,
        )


class WaypointSerializer(ElementSerializer):
    """Writes a Waypoint, children in `wptType` order."""

    def attributes(self, record: Waypoint) -> list[Attribute]:
        return collect_attributes(
            ('lat', conv.Latitude, record.location.latitude),
            ('lon', conv.Longitude, record.location.longitude),
        )

    def children(self, record: Waypoint, sink: Sink) -> None:
        write_optional(sink, xsd.Decimal, record.location.elevation, 'ele')
        write_optional(sink, xsd.DateTime, record.time, 'time')
        write_optional(sink, Degrees, record.mag_variation, 'magvar')
        write_optional(sink, xsd.Decimal, record.geoid_height, 'geoidheight')
        write_optional(sink, xsd.String, record.name, 'name')
        write_optional(sink, xsd.String, record.comment, 'cmt')
        write_optional(sink, xsd.String, record.description, 'desc')
        write_optional(sink, xsd.String, record.source, 'src')
        for link in record.links:
            LinkConverter.serialize_via(link, sink, 'link')
        write_optional(sink, xsd.String, record.symbol, 'sym')
        write_optional(sink, xsd.String, record.type_, 'type')
        write_optional(sink, conv.Fix, record.fix, 'fix')
        write_optional(sink, xsd.NonNegativeInteger, record.satellites, 'sat')
        write_optional(sink, xsd.Decimal, record.hdop, 'hdop')
        write_optional(sink, xsd.Decimal, record.vdop, 'vdop')
        write_optional(sink, xsd.Decimal, record.pdop, 'pdop')
        write_optional(sink, xsd.Decimal, record.dgps_age, 'ageofdgpsdata')
        write_optional(sink, DgpsStation, record.dgps_id, 'dgpsid')
        write_optional(sink, conv.Extensions, record.extensions, 'extensions')


class EmailBuilder(EmailBuilderBase):
    def build(self) -> str:
        id_ = self.require('id', self.id_)
        domain = self.require('domain', self.domain)
        if '@' in id_:
            raise invalid_value(f"email id {id_!r} contains '@'")
        if '@' in domain:
            raise invalid_value(f"email domain {domain!r} contains '@'")
        return f'{id_}@{domain}'


class EmailSerializer(ElementSerializer):
    def attributes(self, record: Any) -> list[Attribute]:
        parts = str(record).split('@')
        if len(parts) != 2:
            raise invalid_value(f"email {record!r} must contain exactly one '@'")
        return collect_attributes(
            ('id', xsd.String, parts[0]),
            ('domain', xsd.String, parts[1]),
        )
