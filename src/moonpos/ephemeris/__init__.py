"""Ephemeris adapters/providers (optional).

This package wraps the JPL DE422 ephemeris, used only to check the analytical
series against a numerically integrated reference. Install with:
  pip install "moonpos[ephemeris]"
"""

from ..core.errors import EphemerisUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import de422  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('Ephemeris support requires: pip install "moonpos[ephemeris]"') from e
