# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for the GPX generator command line."""

import logging
import sys

from genro_xmlmap.gpx import generate


class TestGenerateCli:
    """python -m genro_xmlmap.gpx.generate"""

    def test_writes_destination(self, tmp_path):
        out = tmp_path / 'gpx_auto.py'

        assert generate.main([str(out)]) == 0
        assert out.read_text(encoding='utf-8') == generate.generate_source()

    def test_output_is_valid_python(self, tmp_path):
        out = tmp_path / 'gpx_auto.py'
        generate.main([str(out)])

        compile(out.read_text(encoding='utf-8'), str(out), 'exec')

    def test_formatter_runs_on_file(self, tmp_path):
        """The formatter command receives the written path as last argument."""
        out = tmp_path / 'gpx_auto.py'
        marker = tmp_path / 'formatted'
        script = 'import pathlib, sys; pathlib.Path(sys.argv[1]).write_text(sys.argv[2])'
        formatter = f'"{sys.executable}" -c "{script}" {marker}'

        assert generate.main([str(out), '--formatter', formatter]) == 0
        assert marker.read_text() == str(out)

    def test_formatter_failure(self, tmp_path, caplog):
        out = tmp_path / 'gpx_auto.py'
        formatter = f'"{sys.executable}" -c "import sys; sys.exit(3)"'

        with caplog.at_level(logging.ERROR):
            assert generate.main([str(out), '--formatter', formatter]) == 1
        assert 'Formatter' in caplog.text

    def test_missing_formatter(self, tmp_path):
        out = tmp_path / 'gpx_auto.py'
        assert generate.main([str(out), '--formatter', 'no-such-formatter-xyz']) == 1

    def test_unwritable_destination(self, tmp_path):
        assert generate.main([str(tmp_path / 'missing' / 'gpx_auto.py')]) == 1

    def test_generation_error(self, tmp_path, monkeypatch):
        """Configuration faults exit with status 1 and write nothing."""
        out = tmp_path / 'gpx_auto.py'
        monkeypatch.setattr(generate, 'TYPES', {})

        assert generate.main([str(out)]) == 1
        assert not out.exists()
