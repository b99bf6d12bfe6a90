"""Diagnostics package.

- validate_reference: analytical series against DE422 (requires the
  ephemeris and diagnostics extras)
"""

__all__ = ["validate_reference"]
