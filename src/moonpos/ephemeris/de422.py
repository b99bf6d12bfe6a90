#ephemeris/de422.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from . import require_ephemeris
from ..reference import astro_args as aa


# Coverage of the de422 package (JD, TT)
DE422_MIN_JD = 625648.5
DE422_MAX_JD = 2816816.5


def _spherical(v) -> Tuple[float, float, float]:
    x, y, z = float(v[0]), float(v[1]), float(v[2])
    lon = math.degrees(math.atan2(y, x)) % 360.0
    lat = math.degrees(math.atan2(z, math.hypot(x, y)))
    return lon, lat, math.sqrt(x * x + y * y + z * z)


@dataclass
class DE422Moon:
    """
    Geocentric Moon from DE422, referred to the mean ecliptic and equinox of date.

    Requires optional deps:
      pip install "moonpos[ephemeris]"
    """
    eph: object

    @classmethod
    def load(cls) -> "DE422Moon":
        require_ephemeris()
        import de422  # type: ignore
        from jplephem import Ephemeris  # type: ignore

        return cls(eph=Ephemeris(de422))

    def covers(self, jd_tt: float) -> bool:
        return DE422_MIN_JD < jd_tt < DE422_MAX_JD

    def geocentric_km(self, jd_tt: float) -> Tuple[float, float, float]:
        """Earth -> Moon vector in km, equatorial J2000 frame."""
        r = self.eph.compute("moon", jd_tt)[:3]
        return float(r[0]), float(r[1]), float(r[2])

    def ecliptic_of_date(self, jd_tt: float) -> Tuple[float, float, float]:
        """
        (longitude deg, latitude deg, distance km) at TT Julian day 'jd_tt'.
        """
        rot = aa.matrix_eq_j2000_to_ecl_date(aa.dynamical_time(jd_tt))
        return _spherical(aa.apply_matrix(rot, self.geocentric_km(jd_tt)))
