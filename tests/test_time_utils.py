"""Tests for julian time utility initialization and conversions."""

from __future__ import annotations

import pytest

from celestial_tools import time_utils


def test_ensure_leapsecs_sets_spice_ut_model(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leap-second init uses the SPICE-compatible UT model."""

    calls: list[tuple[str, tuple[object, ...]]] = []

    def _set_ut_model(model: str, future: object = None) -> None:
        del future
        calls.append(('set_ut_model', (model,)))

    def _load_lsk(path: str | None = None) -> None:
        calls.append(('load_lsk', (path,)))

    monkeypatch.setattr('julian.set_ut_model', _set_ut_model)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('celestial_tools.time_utils.get_leapsecs_path', lambda: 'dummy.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert calls[0] == ('set_ut_model', ('SPICE',))
    assert calls[1] == ('load_lsk', ('dummy.tls',))


def test_ensure_leapsecs_falls_back_to_bundled_lsk(monkeypatch: pytest.MonkeyPatch) -> None:
    """An unreadable configured LSK falls back to rms-julian's bundled kernel."""

    paths: list[str | None] = []

    def _load_lsk(path: str | None = None) -> None:
        paths.append(path)
        if path is not None:
            raise OSError('missing')

    monkeypatch.setattr('julian.set_ut_model', lambda model, future=None: None)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('celestial_tools.time_utils.get_leapsecs_path', lambda: 'missing.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert paths == ['missing.tls', None]
    assert time_utils._leapsecs_loaded is True


def test_utc_to_et_chains_tai_and_tdb(monkeypatch: pytest.MonkeyPatch) -> None:
    """UTC (day, sec) goes through TAI to TDB."""
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', True)
    monkeypatch.setattr('julian.tai_from_day_sec', lambda day, sec: day * 86400.0 + sec + 37.0)
    monkeypatch.setattr('julian.tdb_from_tai', lambda tai: tai + 32.184)

    assert time_utils.utc_to_et(1, 10.0) == pytest.approx(86400.0 + 10.0 + 37.0 + 32.184)


def test_day_from_ymd_epoch() -> None:
    """Day 0 is 2000-01-01."""
    assert time_utils.day_from_ymd(2000, 1, 1) == 0
    assert time_utils.ymd_from_day(-1) == (1999, 12, 31)


def test_parse_datetime_accepts_iso_z_suffix() -> None:
    """ISO-8601 trailing Z parses as UTC like the same timestamp without Z."""

    with_z = time_utils.parse_datetime('2022-08-18T00:01:47Z')
    without_z = time_utils.parse_datetime('2022-08-18T00:01:47')

    assert with_z is not None
    assert without_z is not None
    assert with_z == without_z


def test_parse_datetime_date_only() -> None:
    """A bare date means midnight UT."""

    assert time_utils.parse_datetime('2017-06-14') == time_utils.parse_datetime(
        '2017-06-14 00:00:00'
    )
