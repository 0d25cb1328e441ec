# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import pytest

TRACK_GPX = """\
<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <metadata>
    <name>Morning ride</name>
    <author>
      <name>Jane</name>
      <email id="jane" domain="example.com"/>
    </author>
    <copyright author="Jane">
      <year>2024</year>
    </copyright>
    <link href="https://example.com/ride"><text>Ride page</text></link>
    <time>2025-01-15T10:30:00.000Z</time>
    <bounds minlat="44.1" minlon="11.2" maxlat="44.5" maxlon="11.6"/>
  </metadata>
  <wpt lat="44.3" lon="11.4">
    <ele>120.5</ele>
    <name>Start</name>
    <sym>Flag</sym>
    <fix>3d</fix>
    <sat>7</sat>
  </wpt>
  <trk>
    <name>Loop</name>
    <number>1</number>
    <trkseg>
      <trkpt lat="44.1" lon="11.2"><ele>100</ele></trkpt>
      <trkpt lat="44.2" lon="11.3"><ele>110</ele></trkpt>
      <trkpt lat="44.3" lon="11.4"><ele>120</ele></trkpt>
    </trkseg>
  </trk>
</gpx>
"""


@pytest.fixture
def track_gpx():
    """A GPX 1.1 document touching most record types."""
    return TRACK_GPX


@pytest.fixture
def track_gpx_file(tmp_path):
    path = tmp_path / 'track.gpx'
    path.write_text(TRACK_GPX, encoding='utf-8')
    return path
