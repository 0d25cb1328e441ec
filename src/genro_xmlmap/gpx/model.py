# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Hand-written GPX records.

The other records (Gpx, Metadata, Track, ...) are generated into `_auto`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from genro_xmlmap.element import XmlElement

    from ._auto import Link


class Version(Enum):
    """`<gpx version=...>` attribute values."""

    V1_0 = '1.0'
    V1_1 = '1.1'


class Fix(Enum):
    """`<fix>` values."""

    NONE = 'none'
    FIX_2D = '2d'
    FIX_3D = '3d'
    DGPS = 'dgps'
    PPS = 'pps'


@dataclass
class Point:
    """WGS84 coordinates. Elevation in meters."""

    latitude: float
    longitude: float
    elevation: Decimal | None = None


@dataclass(kw_only=True)
class Waypoint:
    """`wptType` contents: `<wpt>`, `<rtept>` and `<trkpt>` elements.

    The location gathers the lat/lon attributes and the `<ele>` child.
    """

    location: Point
    time: datetime | None = None
    mag_variation: Decimal | None = None
    geoid_height: Decimal | None = None
    name: str | None = None
    comment: str | None = None
    description: str | None = None
    source: str | None = None
    links: list[Link] = field(default_factory=list)
    symbol: str | None = None
    type_: str | None = None
    fix: Fix | None = None
    satellites: int | None = None
    hdop: Decimal | None = None
    vdop: Decimal | None = None
    pdop: Decimal | None = None
    dgps_age: Decimal | None = None
    dgps_id: int | None = None
    extensions: XmlElement | None = None
    unknown_elements: list[XmlElement] = field(default_factory=list)
