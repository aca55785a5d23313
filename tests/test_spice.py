"""Tests for SPICE kernel loading and the SPICE ephemeris source (cspyce stubbed)."""

from __future__ import annotations

import math
from collections.abc import Iterator
from pathlib import Path

import pytest

from celestial_tools.bodies import BodyId, SolarSystemBody
from celestial_tools.constants import EARTH_ID
from celestial_tools.julian_day import JulianDay
from celestial_tools.spice.common import get_state
from celestial_tools.spice.geometry import SpiceEphemeris, ephemeris_id
from celestial_tools.spice.load import load_spice_kernels


@pytest.fixture(autouse=True)
def _fresh_state() -> Iterator[None]:
    get_state().reset()
    yield
    get_state().reset()


def _spice_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    spice_dir = tmp_path / 'spice'
    spice_dir.mkdir()
    monkeypatch.setattr('celestial_tools.spice.load.get_spice_path', lambda: str(spice_dir))
    monkeypatch.setattr(
        'celestial_tools.spice.load.get_leapsecs_path', lambda: str(spice_dir / 'naif0012.tls')
    )
    monkeypatch.setattr('celestial_tools.spice.load.get_spice_ephemeris', lambda: 'de440.bsp')
    return spice_dir


def test_load_spice_kernels_furnishes_lsk_and_spk(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Leap seconds and ephemeris kernels are furnished once."""
    spice_dir = _spice_dir(tmp_path, monkeypatch)
    (spice_dir / 'naif0012.tls').touch()
    (spice_dir / 'de440.bsp').touch()
    loaded: list[str] = []
    monkeypatch.setattr('cspyce.furnsh', loaded.append)

    assert load_spice_kernels() == (True, None)
    assert load_spice_kernels() == (True, None)

    assert loaded == [str(spice_dir / 'naif0012.tls'), str(spice_dir / 'de440.bsp')]
    assert get_state().ephemeris_loaded is True


def test_load_spice_kernels_reports_missing_ephemeris(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """A missing SPK is reported with its name, not raised."""
    _spice_dir(tmp_path, monkeypatch)
    monkeypatch.setattr('cspyce.furnsh', lambda path: None)

    ok, reason = load_spice_kernels()

    assert ok is False
    assert reason is not None and 'de440.bsp' in reason


def test_load_spice_kernels_missing_directory(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A nonexistent SPICE_PATH fails early."""
    monkeypatch.setattr(
        'celestial_tools.spice.load.get_spice_path', lambda: str(tmp_path / 'nowhere')
    )
    ok, reason = load_spice_kernels()
    assert ok is False
    assert reason is not None and 'does not exist' in reason


def test_load_spice_kernels_rejected_spk(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A kernel cspyce refuses leaves the ephemeris unloaded."""
    spice_dir = _spice_dir(tmp_path, monkeypatch)
    (spice_dir / 'de440.bsp').touch()

    def _furnsh(path: str) -> None:
        raise OSError(f'bad kernel {path}')

    monkeypatch.setattr('cspyce.furnsh', _furnsh)

    ok, reason = load_spice_kernels()

    assert ok is False
    assert reason is not None and 'could not load' in reason
    assert get_state().ephemeris_loaded is False


def test_ephemeris_id_uses_barycenters_for_outer_planets() -> None:
    """Planetary SPKs index Mars..Pluto by barycenter."""
    assert ephemeris_id(BodyId.MARS.naif_id) == 4
    assert ephemeris_id(BodyId.PLUTO.naif_id) == 9
    assert ephemeris_id(BodyId.VENUS.naif_id) == 299
    assert ephemeris_id(BodyId.MOON.naif_id) == 301


def test_spice_ephemeris_returns_apparent_radec(monkeypatch: pytest.MonkeyPatch) -> None:
    """Geocentric RA/Dec come from spkapp with LT+S relative to Earth's SSB state."""
    calls: list[tuple[object, ...]] = []

    def _spkssb(body_id: int, et: float, frame: str) -> list[float]:
        calls.append(('spkssb', body_id, et, frame))
        return [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def _spkapp(
        body_id: int, et: float, frame: str, obs_pv: list[float], abcorr: str
    ) -> tuple[list[float], float]:
        calls.append(('spkapp', body_id, et, frame, abcorr))
        return ([0.0, 1.0, 0.0, 0.0, 0.0, 0.0], 100.0)

    monkeypatch.setattr('celestial_tools.spice.geometry.load_spice_kernels', lambda: (True, None))
    monkeypatch.setattr('celestial_tools.spice.geometry.utc_to_et', lambda day, sec: 1234.5)
    monkeypatch.setattr('cspyce.spkssb', _spkssb)
    monkeypatch.setattr('cspyce.spkapp', _spkapp)
    monkeypatch.setattr('cspyce.recrad', lambda vec: (1.0, math.pi / 2.0, 0.25))

    mars = SolarSystemBody(BodyId.MARS, JulianDay.from_day_sec(0, 0.0), SpiceEphemeris())
    coords = mars.equatorial_coordinates

    assert coords.right_ascension.value == pytest.approx(6.0)
    assert coords.declination.value == pytest.approx(math.degrees(0.25))
    assert calls == [
        ('spkssb', EARTH_ID, 1234.5, 'J2000'),
        ('spkapp', 4, 1234.5, 'J2000', 'LT+S'),
    ]


def test_spice_ephemeris_without_kernels_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    """Missing kernels surface as RuntimeError naming the reason."""
    monkeypatch.setattr(
        'celestial_tools.spice.geometry.load_spice_kernels',
        lambda: (False, 'SPICE_PATH directory does not exist: /nowhere'),
    )
    with pytest.raises(RuntimeError, match='/nowhere'):
        SpiceEphemeris().equatorial_coordinates(BodyId.VENUS, JulianDay(2451545.0))
