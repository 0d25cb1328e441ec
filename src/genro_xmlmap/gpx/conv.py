# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Hand-written GPX converters referenced by the generated code.

Wpt and Email delegate to builders and serializers that extend generated
classes, so they import them lazily.
"""

from __future__ import annotations

from typing import Any

from genro_xmlmap import xsd
from genro_xmlmap.convert import BoundedConverter, CharConverter, Converter
from genro_xmlmap.element import XmlElement, XmlElementConverter
from genro_xmlmap.engine import ElementBuilder
from genro_xmlmap.errors import invalid_value
from genro_xmlmap.ser import Sink
from genro_xmlmap.tokens import Attribute, ElementStart, QName, TokenSource

from . import model
from .schema import GPX_10_NAMESPACE, GPX_NAMESPACE


def _from_gpx_10(name: QName) -> QName:
    if name.namespace == GPX_10_NAMESPACE:
        return QName(name.local_name, GPX_NAMESPACE, name.prefix)
    return name


def to_gpx_namespace(element: XmlElement, default_declared: bool = False) -> XmlElement:
    """Rebind captured content to the namespaces it has once written back.

    The gpx root is always written with the GPX 1.1 default namespace, so
    unprefixed names outside any captured default declaration read back
    under GPX 1.1, and GPX 1.0 bindings are written as GPX 1.1.
    """
    declared = default_declared or None in element.namespaces
    name = element.name
    if not name.prefix and not declared:
        name = QName(name.local_name, GPX_NAMESPACE)
    return XmlElement(
        _from_gpx_10(name),
        [Attribute(_from_gpx_10(attr.name), attr.value) for attr in element.attributes],
        {
            prefix: GPX_NAMESPACE if uri == GPX_10_NAMESPACE else uri
            for prefix, uri in element.namespaces.items()
        },
        [node if isinstance(node, str) else to_gpx_namespace(node, declared) for node in element.nodes],
    )


class GpxElementBuilder(ElementBuilder):
    """Base of all GPX builders: accepts the GPX 1.1 and 1.0 namespaces."""

    namespaces = (GPX_NAMESPACE, GPX_10_NAMESPACE)

    def parse_unknown(self, elem_start: ElementStart) -> None:
        super().parse_unknown(elem_start)
        self.unknown_elements[-1] = to_gpx_namespace(self.unknown_elements[-1])


class Latitude(BoundedConverter):
    base = xsd.Float
    min_inclusive = -90
    max_exclusive = 90


class Longitude(BoundedConverter):
    base = xsd.Float
    min_inclusive = -180
    max_exclusive = 180


class Version(CharConverter):
    @classmethod
    def from_chars(cls, text: str) -> model.Version:
        try:
            return model.Version(text.strip())
        except ValueError as exc:
            raise invalid_value(f'unsupported GPX version {text!r}') from exc

    @classmethod
    def to_chars(cls, value: model.Version) -> str:
        return value.value


class Fix(CharConverter):
    @classmethod
    def from_chars(cls, text: str) -> model.Fix:
        try:
            return model.Fix(text.strip())
        except ValueError as exc:
            raise invalid_value(f'unknown fix value {text!r}') from exc

    @classmethod
    def to_chars(cls, value: model.Fix) -> str:
        return value.value


class Extensions(XmlElementConverter):
    """`<extensions>` content is kept uninterpreted."""

    @classmethod
    def parse_via(cls, tokens: TokenSource, elem_start: ElementStart) -> XmlElement:
        return to_gpx_namespace(super().parse_via(tokens, elem_start))


class Wpt(Converter):
    @classmethod
    def parse_via(cls, tokens: TokenSource, elem_start: ElementStart) -> model.Waypoint:
        from .custom import WaypointBuilder

        return WaypointBuilder(tokens).parse(elem_start)

    @classmethod
    def serialize_via(cls, value: model.Waypoint, sink: Sink, name: str | QName) -> None:
        from .custom import WaypointSerializer

        WaypointSerializer().serialize(value, name, sink)


class Email(Converter):
    """`emailType` as a plain "id@domain" string."""

    @classmethod
    def parse_via(cls, tokens: TokenSource, elem_start: ElementStart) -> str:
        from .custom import EmailBuilder

        return EmailBuilder(tokens).parse(elem_start)

    @classmethod
    def serialize_via(cls, value: Any, sink: Sink, name: str | QName) -> None:
        from .custom import EmailSerializer

        EmailSerializer().serialize(value, name, sink)
