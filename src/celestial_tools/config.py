"""Configuration: SPICE kernel paths and leap seconds file from environment."""

import os
from pathlib import Path

# Env var overrides with sensible defaults.
DEFAULT_SPICE_PATH = '/var/www/SPICE/'
DEFAULT_SPICE_EPHEMERIS = 'de440.bsp'
LOG_LEVEL_ENV = 'CELESTIAL_TOOLS_LOG'


def get_spice_path() -> str:
    """Return SPICE kernel root directory (SPICE_PATH env var or default).

    Returns:
        Path string.
    """
    return os.environ.get('SPICE_PATH', DEFAULT_SPICE_PATH)


def get_spice_ephemeris() -> str:
    """Return the planetary SPK file name under the SPICE path.

    Returns:
        File name (SPICE_EPHEMERIS env var or ``de440.bsp``).
    """
    name = os.environ.get('SPICE_EPHEMERIS', '').strip()
    return name or DEFAULT_SPICE_EPHEMERIS


def get_leapsecs_path() -> str:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Prefers JULIAN_LEAPSECS, then a .tls kernel under SPICE_PATH, then
    leapsecs.txt (which rms-julian may reject, triggering its bundled LSK).

    Returns:
        Path string to LSK or leapsecs file.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    base = Path(get_spice_path())
    for name in ('naif0012.tls', 'naif0011.tls', 'naif0010.tls', 'leapseconds.tls'):
        p = base / name
        if p.exists():
            return str(p)
    return str(base / 'leapsecs.txt')


def get_log_level_name() -> str | None:
    """Return the log level requested through CELESTIAL_TOOLS_LOG, if valid.

    Returns:
        Upper-case level name or None when unset or unknown.
    """
    level = os.environ.get(LOG_LEVEL_ENV, '').strip().upper()
    if level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        return level
    return None
