# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Resave - read a GPX file and write it somewhere else.

Usage:
    python examples/resave.py source.gpx destination.gpx
"""

from __future__ import annotations

import argparse
import sys

from genro_xmlmap import gpx
from genro_xmlmap.errors import MapError, PositionedError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Read a GPX file and save it again')
    parser.add_argument('source')
    parser.add_argument('destination')
    parser.add_argument('--compact', action='store_true', help='Do not indent the output')
    args = parser.parse_args(argv)

    try:
        doc = gpx.parse_file(args.source)
    except (OSError, PositionedError) as e:
        print(f'Failed to load\n{e}', file=sys.stderr)
        return 1

    try:
        gpx.save(doc.data, args.destination, pretty=not args.compact)
    except (OSError, MapError) as e:
        print(f'Failed to save\n{e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
