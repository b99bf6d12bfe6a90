# reference/lunar.py

from __future__ import annotations

import math
from typing import Sequence, Tuple

from ..core.types import FundamentalAngles, MoonPosition, SeriesSums, SeriesTerm
from . import astro_args as aa
from . import periodic_terms as pt


def _argument_rad(term: SeriesTerm, fa: FundamentalAngles) -> float:
    return math.radians(term.d * fa.D + term.m * fa.M + term.mp * fa.M_prime + term.f * fa.F)


def series_sums(
    fa: FundamentalAngles,
    lon_terms: Sequence[SeriesTerm] = pt.LON_DIST_TERMS,
    lat_terms: Sequence[SeriesTerm] = pt.LAT_TERMS,
) -> SeriesSums:
    """
    Sums the periodic series for longitude, distance and latitude.

    Each term is scaled by E**|m|. Rows are accumulated strictly in table
    order so results are reproducible to the last bit.
    """
    e_scale = (1.0, fa.E, fa.E * fa.E)

    def e_factor(term: SeriesTerm) -> float:
        p = term.e_power
        # Chapter 47 tables stop at |m| = 2
        return e_scale[p] if p < len(e_scale) else fa.E ** p

    sum_l = 0.0
    sum_r = 0.0
    for term in lon_terms:
        arg = _argument_rad(term, fa)
        e = e_factor(term)
        sum_l += term.sin_coef * e * math.sin(arg)
        sum_r += term.cos_coef * e * math.cos(arg)

    sum_b = 0.0
    for term in lat_terms:
        arg = _argument_rad(term, fa)
        sum_b += term.sin_coef * e_factor(term) * math.sin(arg)

    return SeriesSums(sum_l=sum_l, sum_r=sum_r, sum_b=sum_b)


def apply_additive_terms(fa: FundamentalAngles, sums: SeriesSums) -> SeriesSums:
    """
    Adds the Venus, Jupiter and flattening terms to sum_l and sum_b.
    sum_r has no additive part.
    """
    Lp = math.radians(fa.L_prime)
    Mp = math.radians(fa.M_prime)
    F = math.radians(fa.F)
    A1 = math.radians(fa.A1)
    A2 = math.radians(fa.A2)
    A3 = math.radians(fa.A3)

    cl = pt.LON_ADDITIVE
    sum_l = (
        sums.sum_l
        + cl[0] * math.sin(A1)
        + cl[1] * math.sin(Lp - F)
        + cl[2] * math.sin(A2)
    )

    cb = pt.LAT_ADDITIVE
    sum_b = (
        sums.sum_b
        + cb[0] * math.sin(Lp)
        + cb[1] * math.sin(A3)
        + cb[2] * math.sin(A1 - F)
        + cb[3] * math.sin(A1 + F)
        + cb[4] * math.sin(Lp - Mp)
        - cb[5] * math.sin(Lp + Mp)
    )

    return SeriesSums(sum_l=sum_l, sum_r=sums.sum_r, sum_b=sum_b)


def spherical_position(fa: FundamentalAngles, sums: SeriesSums) -> Tuple[float, float, float]:
    """
    (longitude deg in [0,360), latitude deg, distance km) from corrected sums.
    """
    lon = aa.reduce_deg(fa.L_prime + sums.sum_l / pt.ANGLE_SCALE)
    lat = sums.sum_b / pt.ANGLE_SCALE
    dist = pt.MEAN_DISTANCE_KM + sums.sum_r / pt.DISTANCE_SCALE
    return lon, lat, dist


def to_cartesian(lon_deg: float, lat_deg: float, dist_km: float) -> Tuple[float, float, float]:
    """Geocentric ecliptic (lon, lat, r) -> (x, y, z) in the units of r."""
    lon = math.radians(lon_deg)
    lat = math.radians(lat_deg)
    return (
        dist_km * math.cos(lat) * math.cos(lon),
        dist_km * math.cos(lat) * math.sin(lon),
        dist_km * math.sin(lat),
    )


def moon_position(jde: float) -> MoonPosition:
    """
    Geocentric Moon (mean equinox of date, no nutation) at JDE.
    """
    fa = aa.fundamental_angles(jde)
    sums = apply_additive_terms(fa, series_sums(fa))
    lon, lat, dist = spherical_position(fa, sums)
    x, y, z = to_cartesian(lon, lat, dist)

    return MoonPosition(
        jde=jde,
        angles=fa,
        sums=sums,
        longitude_deg=lon,
        latitude_deg=lat,
        distance_km=dist,
        x_km=x,
        y_km=y,
        z_km=z,
    )
