from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterator, Optional

from .core.time import datetime_to_jd
from .core.types import MoonPosition
from .reference import lunar

ReportHook = Callable[[float, float, float], None]


def moon_position(jde: float, *, report: Optional[ReportHook] = None) -> MoonPosition:
    """
    Geocentric Moon at JDE (TT).

    `report`, if given, receives (x, y, z) in km once the computation is done.
    """
    pos = lunar.moon_position(jde)
    if report is not None:
        report(*pos.xyz)
    return pos

def moon_position_at(dt: datetime, *, report: Optional[ReportHook] = None) -> MoonPosition:
    """
    Moon at a timezone-aware datetime, read as TT (no Delta T is applied).
    """
    return moon_position(datetime_to_jd(dt), report=report)

def moon_ephemeris(start_jde: float, stop_jde: float, step_days: float) -> Iterator[MoonPosition]:
    """Positions for start_jde, start_jde + step, ... up to (excluding) stop_jde."""
    if not step_days > 0:
        raise ValueError("step_days must be positive")
    if start_jde + step_days == start_jde:
        raise ValueError(f"step_days {step_days!r} is below the resolution of start_jde {start_jde!r}")
    i = 0
    jde = start_jde
    while jde < stop_jde:
        yield lunar.moon_position(jde)
        i += 1
        jde = start_jde + i * step_days
