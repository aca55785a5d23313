"""SPICE kernel loading for the planetary ephemeris source."""

from __future__ import annotations

import logging
from pathlib import Path

import cspyce

from celestial_tools.config import get_leapsecs_path, get_spice_ephemeris, get_spice_path
from celestial_tools.spice.common import get_state

logger = logging.getLogger(__name__)


def _furnsh(path: Path) -> bool:
    """Furnish one kernel; log and return False if cspyce rejects it."""
    try:
        cspyce.furnsh(str(path))
    except Exception as e:
        logger.warning('Failed to load %s: %s', path, e)
        return False
    get_state().kernels.append(str(path))
    logger.info('Loaded SPICE kernel %s', path)
    return True


def load_spice_kernels() -> tuple[bool, str | None]:
    """Load the leap seconds and planetary ephemeris kernels once per process.

    Kernels come from SPICE_PATH; the SPK name is SPICE_EPHEMERIS.

    Returns:
        (True, None) if the ephemeris is loaded, (False, reason) on failure.
    """
    state = get_state()
    if state.ephemeris_loaded:
        return (True, None)
    base = Path(get_spice_path())
    if not base.exists():
        return (False, f'SPICE_PATH directory does not exist: {base}')
    if not base.is_dir():
        return (False, f'SPICE_PATH is not a directory: {base}')
    if not state.pool_loaded:
        lsk = Path(get_leapsecs_path())
        for candidate in (lsk, base / 'leapseconds.ker'):
            if candidate.suffix in ('.tls', '.ker') and candidate.exists():
                if _furnsh(candidate):
                    break
        else:
            logger.warning('No leap seconds kernel found under %s', base)
        state.pool_loaded = True
    spk = base / get_spice_ephemeris()
    if not spk.exists():
        return (
            False,
            f'Ephemeris kernel {spk.name} not found under {base}. '
            'Set SPICE_PATH and SPICE_EPHEMERIS to an existing planetary SPK.',
        )
    if not _furnsh(spk):
        return (False, f'cspyce could not load {spk}')
    state.ephemeris_loaded = True
    return (True, None)
