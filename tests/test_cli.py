"""Tests for celestial-tools CLI argument handling and output."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from celestial_tools.cli import main as cli_main


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.delenv('CELESTIAL_TOOLS_LOG', raising=False)
    monkeypatch.setattr(sys, 'argv', ['celestial-tools', *args])
    return cli_main.main()


def test_cli_diurnal_arc(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Half arc on the equator is printed in degrees and hours."""
    rc = _run(monkeypatch, 'diurnal-arc', '--dec', '0', '--latitude', '0', '--altitude', '0')
    assert rc == 0
    assert capsys.readouterr().out.strip() == '90.000000 deg  6.000000 h'


def test_cli_diurnal_arc_circumpolar(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Terminal arcs print their status."""
    rc = _run(monkeypatch, 'diurnal-arc', '--dec', '89 15', '--latitude', '51.5')
    assert rc == 0
    assert capsys.readouterr().out.strip() == 'always above altitude'


def test_cli_phenomena_mean(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Mercury's mean inferior conjunction near 1993.75."""
    rc = _run(
        monkeypatch,
        'phenomena',
        '--body',
        'mercury',
        '--kind',
        'inferior-conjunction',
        '--year',
        '1993.75',
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith('2449294.473458')
    assert '1993-11-' in out


def test_cli_phenomena_unsupported_body(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Unsupported bodies exit 1 with the error on stderr."""
    rc = _run(monkeypatch, 'phenomena', '--body', 'sun', '--kind', 'opposition', '--year', '2020')
    assert rc == 1
    assert 'Error: No planetary phenomena for Sun' in capsys.readouterr().err


def test_cli_rejects_unknown_body(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unknown body names are argument errors."""
    with pytest.raises(SystemExit) as excinfo:
        _run(monkeypatch, 'phenomena', '--body', 'vulcan', '--kind', 'opposition', '--year', '2020')
    assert excinfo.value.code == 2


def test_cli_parallactic_star(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Parallactic angle for a star given by RA/Dec and a Julian Day."""
    rc = _run(
        monkeypatch,
        'parallactic',
        '--date',
        '2457918.5833333333',
        '--ra',
        '16 54 00.14',
        '--dec',
        '-39 50 44.9',
        '--longitude',
        '70 44 7.662',
        '--lon-dir',
        'west',
        '--latitude',
        '-29 15 14.235',
    )
    assert rc == 0
    name, value = capsys.readouterr().out.split()
    assert name == 'parallactic_angle'
    assert float(value) == pytest.approx(-77.6, abs=0.1)


def test_cli_parallactic_needs_target(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without --body or --ra/--dec the command fails cleanly."""
    rc = _run(
        monkeypatch,
        'parallactic',
        '--date',
        '2457918.5',
        '--longitude',
        '0',
        '--latitude',
        '51',
    )
    assert rc == 1
    assert '--body' in capsys.readouterr().err


def test_cli_catalog(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    """Catalog entries print with decimal coordinates."""
    path = tmp_path / 'stars.txt'
    path.write_text('Sirius\n6 45 08.9\n-16 42 58\n', encoding='utf-8')
    rc = _run(monkeypatch, 'catalog', str(path))
    assert rc == 0
    name, ra, dec = capsys.readouterr().out.strip().split('\t')
    assert name == 'Sirius'
    assert float(ra) == pytest.approx(6.752472, abs=1e-6)
    assert float(dec) == pytest.approx(-16.716111, abs=1e-6)


def test_cli_catalog_missing_file(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    """A missing catalog file is reported on stderr."""
    rc = _run(monkeypatch, 'catalog', str(tmp_path / 'absent.txt'))
    assert rc == 1
    assert 'Error' in capsys.readouterr().err
