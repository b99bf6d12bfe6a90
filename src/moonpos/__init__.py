"""moonpos public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    moon_position,
    moon_position_at,
    moon_ephemeris,
)
from .core.errors import MoonposError, EphemerisUnavailableError
from .core.time import calendar_to_jd, jd_to_calendar
from .core.types import FundamentalAngles, MoonPosition, SeriesSums, SeriesTerm
from .reference.astro_args import reduce_deg

__version__ = "0.1.0"

__all__ = [
    "moon_position",
    "moon_position_at",
    "moon_ephemeris",
    "MoonposError",
    "EphemerisUnavailableError",
    "calendar_to_jd",
    "jd_to_calendar",
    "FundamentalAngles",
    "MoonPosition",
    "SeriesSums",
    "SeriesTerm",
    "reduce_deg",
]
