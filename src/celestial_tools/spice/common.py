"""Shared state for the SPICE layer (kernel pool bookkeeping)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SpiceState:
    """Kernels furnished into the process-wide cspyce pool.

    Modified by load_spice_kernels; cleared by reset().
    """

    pool_loaded: bool = False
    ephemeris_loaded: bool = False
    kernels: list[str] = field(default_factory=list)

    def reset(self) -> None:
        """Forget what was loaded (the cspyce pool itself is left alone)."""
        self.pool_loaded = False
        self.ephemeris_loaded = False
        self.kernels = []


# Module-level singleton; cspyce keeps one kernel pool per process.
_state = SpiceState()


def get_state() -> SpiceState:
    """Return the global SpiceState instance."""
    return _state
