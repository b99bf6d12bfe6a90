from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class FundamentalAngles:
    """
    Mean lunar arguments at one instant, degrees wrapped to [0,360).

    T is dynamical time in Julian centuries from J2000.0 and E the
    eccentricity factor of the Earth's orbit (not wrapped).
    """
    T: float
    L_prime: float   # Moon mean longitude, light-time constant included
    D: float         # mean elongation
    M: float         # Sun mean anomaly
    M_prime: float   # Moon mean anomaly
    F: float         # argument of latitude
    A1: float        # action of Venus
    A2: float        # action of Jupiter
    A3: float        # flattening of the Earth
    E: float

@dataclass(frozen=True)
class SeriesTerm:
    """One periodic term: multipliers of D, M, M', F and its amplitudes."""
    d: int
    m: int
    mp: int
    f: int
    sin_coef: float
    cos_coef: float = 0.0

    @property
    def e_power(self) -> int:
        return abs(self.m)

@dataclass(frozen=True)
class SeriesSums:
    """Accumulated series: sum_l, sum_b in 1e-6 deg, sum_r in 1e-3 km."""
    sum_l: float = 0.0
    sum_r: float = 0.0
    sum_b: float = 0.0

@dataclass(frozen=True)
class MoonPosition:
    jde: float
    angles: FundamentalAngles
    sums: SeriesSums
    longitude_deg: float
    latitude_deg: float
    distance_km: float
    x_km: float
    y_km: float
    z_km: float

    @property
    def xyz(self) -> Tuple[float, float, float]:
        return (self.x_km, self.y_km, self.z_km)
