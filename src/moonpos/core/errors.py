class MoonposError(Exception):
    """Base error."""

class EphemerisUnavailableError(MoonposError, RuntimeError):
    """Raised when the optional reference ephemeris (DE422) is not installed."""
