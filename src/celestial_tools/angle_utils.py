"""Sexagesimal text parsing into Degree and Hour values."""

from __future__ import annotations

import re

from celestial_tools.angles import Degree, Hour, Sign

_SPLIT = re.compile(r'[\s:hdms°\'"]+')


def parse_sexagesimal(string: str) -> tuple[Sign, float, float, float] | None:
    """Split text such as "-39 50 44.9" or "16:54:00.14" into signed components.

    Accepts three numbers (whole, minutes, seconds), two (whole, minutes), or
    one (whole). Separators may be blanks, colons, or unit letters. A leading
    minus applies to the whole angle; minutes and seconds must be unsigned.

    Parameters:
        string: Text to parse.

    Returns:
        (sign, whole, minutes, seconds) with unsigned components, or None on
        parse failure.
    """
    s = string.strip()
    if len(s) == 0:
        return None
    sign = Sign.PLUS
    if s[0] in '+-':
        if s[0] == '-':
            sign = Sign.MINUS
        s = s[1:].strip()
    parts = [p for p in _SPLIT.split(s) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values):
        return None
    values += [0.0] * (3 - len(values))
    return (sign, values[0], values[1], values[2])


def parse_degree(string: str) -> Degree | None:
    """Parse degrees, arcminutes, arcseconds text into a Degree (None on failure)."""
    parsed = parse_sexagesimal(string)
    if parsed is None:
        return None
    return Degree.from_sexagesimal(*parsed)


def parse_hour(string: str) -> Hour | None:
    """Parse hours, minutes, seconds text into an Hour (None on failure)."""
    parsed = parse_sexagesimal(string)
    if parsed is None:
        return None
    return Hour.from_sexagesimal(*parsed)
