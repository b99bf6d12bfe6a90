"""Human-readable and CSV output for computed positions.

Nothing in moonpos.reference prints; callers hand finished results here.
"""

from __future__ import annotations

import csv
from typing import IO, Iterable, List, Optional, TextIO

from .core.time import jd_to_calendar
from .core.types import MoonPosition

_RULE = "=" * 45

CSV_FIELDS = ("jde", "longitude_deg", "latitude_deg", "distance_km", "x_km", "y_km", "z_km")


def format_epoch(jde: float) -> List[str]:
    year, month, day = jd_to_calendar(jde)
    return [
        f"Year: {year}",
        f"Month: {month}",
        f"Day: {day:f}",
    ]


def format_cartesian(x: float, y: float, z: float, *, title: str = "Moon Position") -> List[str]:
    return [
        _RULE,
        f"{title:^45}".rstrip(),
        f"               X = {x:f}",
        f"               Y = {y:f}",
        f"               Z = {z:f}",
        _RULE,
    ]


def format_position(pos: MoonPosition) -> str:
    lines = [f"JDE = {pos.jde:.6f}"]
    lines += format_epoch(pos.jde)
    lines += [
        "",
        "Geocentric ecliptic (mean equinox of date):",
        f"  Longitude (lambda) = {pos.longitude_deg:.6f} deg",
        f"  Latitude  (beta)   = {pos.latitude_deg:.6f} deg",
        f"  Distance  (Delta)  = {pos.distance_km:.6f} km",
        "",
    ]
    lines += format_cartesian(*pos.xyz)
    return "\n".join(lines)


def print_cartesian(x: float, y: float, z: float, *, file: Optional[TextIO] = None) -> None:
    """Reporting hook for moonpos.moon_position(report=...)."""
    print("\n" + "\n".join(format_cartesian(x, y, z)) + "\n", file=file)


def write_csv(positions: Iterable[MoonPosition], fh: IO[str]) -> int:
    """Write one CSV row per position; returns the number of rows written."""
    writer = csv.writer(fh)
    writer.writerow(CSV_FIELDS)
    n = 0
    for pos in positions:
        writer.writerow([
            f"{pos.jde:.6f}",
            f"{pos.longitude_deg:.8f}",
            f"{pos.latitude_deg:.8f}",
            f"{pos.distance_km:.6f}",
            f"{pos.x_km:.6f}",
            f"{pos.y_km:.6f}",
            f"{pos.z_km:.6f}",
        ])
        n += 1
    return n
