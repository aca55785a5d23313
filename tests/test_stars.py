"""Tests for star catalog parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from celestial_tools.bodies import AstronomicalObject
from celestial_tools.julian_day import J2000, JulianDay
from celestial_tools.stars import read_stars

CATALOG = """\
! Bright stars, J2000
Sirius
6 45 08.9
-16 42 58

! entry with a bad RA is skipped
Nowhere
xx
yy
Vega
! comment between fields
18:36:56.3
+38:47:01
"""


def test_read_stars(tmp_path: Path) -> None:
    """Name/RA/Dec blocks become AstronomicalObjects; comments and bad entries are skipped."""
    path = tmp_path / 'stars.txt'
    path.write_text(CATALOG, encoding='utf-8')

    stars = read_stars(path)

    assert [s.name for s in stars] == ['Sirius', 'Vega']
    assert all(isinstance(s, AstronomicalObject) for s in stars)
    sirius = stars[0].equatorial_coordinates
    assert sirius.right_ascension.value == pytest.approx(6 + 45 / 60 + 8.9 / 3600)
    assert sirius.declination.value == pytest.approx(-(16 + 42 / 60 + 58 / 3600))
    assert stars[1].equatorial_coordinates.declination.value == pytest.approx(
        38 + 47 / 60 + 1 / 3600
    )
    assert stars[0].julian_day == J2000


def test_read_stars_limit_and_epoch(tmp_path: Path) -> None:
    """max_stars caps the list; objects carry the requested day count."""
    path = tmp_path / 'stars.txt'
    path.write_text(CATALOG, encoding='utf-8')
    jd = JulianDay.from_calendar(2024, 1, 1)

    stars = read_stars(path, max_stars=1, julian_day=jd)

    assert len(stars) == 1
    assert stars[0].julian_day == jd


def test_read_stars_truncated_entry(tmp_path: Path) -> None:
    """A name without coordinates at end of file is dropped."""
    path = tmp_path / 'stars.txt'
    path.write_text('Sirius\n6 45 08.9\n-16 42 58\nOrphan\n', encoding='utf-8')

    assert [s.name for s in read_stars(path)] == ['Sirius']
