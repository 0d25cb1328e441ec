# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Regenerate the GPX builders and serializers.

Usage:
    # Rewrite the committed module
    python -m genro_xmlmap.gpx.generate

    # Write elsewhere and run a formatter on the result
    python -m genro_xmlmap.gpx.generate /tmp/gpx_auto.py --formatter "ruff format"

Exit status is 1 when generation, writing or formatting fails.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import subprocess
import sys
from pathlib import Path

from genro_xmlmap.errors import GenerationError
from genro_xmlmap.generator import Generator

from .schema import BUILDER_BASE, CONVERSIONS, HEADER, SIMPLE_TYPES, STRUCTS, TYPES

logger = logging.getLogger(__name__)

DEFAULT_DESTINATION = Path(__file__).with_name('_auto.py')


def generate_source() -> str:
    """Source of the GPX module, as committed in `_auto.py`."""
    generator = Generator(TYPES, CONVERSIONS, header=HEADER, builder_base=BUILDER_BASE)
    return generator.generate(STRUCTS, SIMPLE_TYPES)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Generate GPX builders and serializers')
    parser.add_argument(
        'destination',
        nargs='?',
        type=Path,
        default=DEFAULT_DESTINATION,
        help=f'Output file (default: {DEFAULT_DESTINATION})',
    )
    parser.add_argument('--formatter', help="Command run on the written file, e.g. 'ruff format'")
    parser.add_argument('-v', '--verbose', action='store_true', help='Log generation steps')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        source = generate_source()
    except GenerationError as e:
        logger.error('Generation failed: %s', e)
        return 1

    try:
        args.destination.write_text(source, encoding='utf-8')
    except OSError as e:
        logger.error('Cannot write %s: %s', args.destination, e)
        return 1
    logger.info('Wrote %s', args.destination)

    if args.formatter:
        command = [*shlex.split(args.formatter), str(args.destination)]
        try:
            subprocess.run(command, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.error('Formatter %r failed: %s', args.formatter, e)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
