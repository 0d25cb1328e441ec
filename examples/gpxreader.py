# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""GPX Reader - print a summary of a GPX file.

Usage:
    python examples/gpxreader.py track.gpx
    python examples/gpxreader.py track.gpx --dump
"""

from __future__ import annotations

import argparse
import pprint
import sys

from genro_xmlmap import gpx
from genro_xmlmap.errors import PositionedError


def summary(data: gpx.Gpx) -> str:
    lines = [f'GPX {data.version.value} by {data.creator}']
    if data.metadata is not None and data.metadata.name:
        lines.append(f'  name: {data.metadata.name}')
    lines.append(f'  waypoints: {len(data.waypoints)}')
    for route in data.routes:
        lines.append(f"  route {route.name or '-'}: {len(route.waypoints)} points")
    for track in data.tracks:
        points = sum(len(segment.waypoints) for segment in track.segments)
        lines.append(f"  track {track.name or '-'}: {len(track.segments)} segments, {points} points")
    if data.unknown_elements:
        names = ', '.join(str(e.name) for e in data.unknown_elements)
        lines.append(f'  unknown elements: {names}')
    return '\n'.join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Read a GPX file')
    parser.add_argument('filename')
    parser.add_argument('--dump', action='store_true', help='Print the whole record tree')
    args = parser.parse_args(argv)

    try:
        doc = gpx.parse_file(args.filename)
    except OSError as e:
        print(f'Cannot open {args.filename}: {e}', file=sys.stderr)
        return 1
    except PositionedError as e:
        print(f'Failed to load {args.filename}\n{e}', file=sys.stderr)
        return 1

    if args.dump:
        pprint.pprint(doc.data)
    else:
        print(summary(doc.data))
    return 0


if __name__ == '__main__':
    sys.exit(main())
