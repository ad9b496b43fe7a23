"""Shared state for the SPICE layer (kernels are loaded once per process)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SpiceState:
    """Which kernels have been furnished into the CSPICE kernel pool.

    Modified by load_kernels; CSPICE's pool is process-wide, so this is too.
    """

    kernels_loaded: bool = False
    loaded: list[str] = field(default_factory=list)

    def reset(self) -> None:
        """Forget loaded kernels (after cspyce.kclear)."""
        self.kernels_loaded = False
        self.loaded = []


# Module-level singleton mirroring the process-wide kernel pool
_state = SpiceState()


def get_state() -> SpiceState:
    """Return the global SpiceState instance."""
    return _state
