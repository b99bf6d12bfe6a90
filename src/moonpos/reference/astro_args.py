from __future__ import annotations

from math import fmod
from typing import Sequence

import math

from ..core.types import FundamentalAngles
from . import periodic_terms as pt


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def reduce_deg(x_deg: float) -> float:
    """Reduce degrees to [0,360). NaN and infinities give NaN."""
    if math.isinf(x_deg):
        return math.nan
    # fmod keeps the rounding of large inputs (721.3 -> 1.2999999999999545)
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
        if y == 360.0:  # tiny negative remainders round up
            y = 0.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0

def arcsec_to_rad(arcsec: float) -> float:
    return math.radians(arcsec_to_deg(arcsec))

def polynomial(coefs: Sequence[float], T: float) -> float:
    """Evaluate sum(coefs[k] * T**k), lowest power first."""
    result = 0.0
    power = 1.0
    for c in coefs:
        result += c * power
        power *= T
    return result

# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

def dynamical_time(jde: float) -> float:
    """Julian centuries of dynamical time from J2000.0."""
    return (jde - pt.J2000_JDE) / pt.DAYS_PER_CENTURY

# ------------------------------------------------------------
# Fundamental arguments (Meeus ch. 47; degrees)
# ------------------------------------------------------------

def eccentricity_factor(T: float) -> float:
    """
    Eccentricity factor E for the Earth's orbit.
    Terms with M in their argument are scaled by E**|m|.
    """
    return polynomial(pt.ECCENTRICITY, T)


def fundamental_angles_T(T: float) -> FundamentalAngles:
    """
    Mean elements at T, each reduced to [0,360):

      L' = 218.3164477 + 481267.88123421 T - 0.0015786 T^2 + T^3/538841 - T^4/65194000
      D  = 297.8501921 + 445267.1114034  T - 0.0018819 T^2 + T^3/545868 - T^4/113065000
      M  = 357.5291092 + 35999.0502909  T - 0.0001536 T^2 + T^3/24490000
      M' = 134.9633964 + 477198.8675055 T + 0.0087414 T^2 + T^3/69699  - T^4/14712000
      F  = 93.2720950  + 483202.0175233 T - 0.0036539 T^2 - T^3/3526000 + T^4/863310000

    plus the planetary arguments A1 (Venus), A2 (Jupiter), A3 (flattening),
    all linear in T.
    """
    return FundamentalAngles(
        T=T,
        L_prime=reduce_deg(polynomial(pt.MEAN_LONGITUDE, T)),
        D=reduce_deg(polynomial(pt.MEAN_ELONGATION, T)),
        M=reduce_deg(polynomial(pt.SUN_MEAN_ANOMALY, T)),
        M_prime=reduce_deg(polynomial(pt.MOON_MEAN_ANOMALY, T)),
        F=reduce_deg(polynomial(pt.ARGUMENT_OF_LATITUDE, T)),
        A1=reduce_deg(polynomial(pt.ACTION_OF_VENUS, T)),
        A2=reduce_deg(polynomial(pt.ACTION_OF_JUPITER, T)),
        A3=reduce_deg(polynomial(pt.FLATTENING_ACTION, T)),
        E=eccentricity_factor(T),
    )


def fundamental_angles(jde: float) -> FundamentalAngles:
    return fundamental_angles_T(dynamical_time(jde))


# ------------------------------------------------------------
# Mean obliquity and precession (for comparison with DE422)
# ------------------------------------------------------------

def mean_obliquity_deg(T: float) -> float:
    """
    Mean obliquity of the ecliptic (degrees), IAU 2000:

        eps = 84381.406" - 46.836769"T - 0.0001831"T^2 + 0.00200340"T^3
              - 0.000000576"T^4 - 0.0000000434"T^5
    """
    eps_arcsec = polynomial(
        (84381.406, -46.836769, -0.0001831, 0.00200340, -0.000000576, -0.0000000434), T
    )
    return arcsec_to_deg(eps_arcsec)


Matrix = tuple[tuple[float, float, float], ...]


def _matmul(A: Matrix, B: Matrix) -> Matrix:
    return tuple(
        tuple(sum(A[i][k] * B[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )

def _rot_x(a: float) -> Matrix:
    c, s = math.cos(a), math.sin(a)
    return ((1.0, 0.0, 0.0), (0.0, c, s), (0.0, -s, c))

def _rot_y(a: float) -> Matrix:
    c, s = math.cos(a), math.sin(a)
    return ((c, 0.0, -s), (0.0, 1.0, 0.0), (s, 0.0, c))

def _rot_z(a: float) -> Matrix:
    c, s = math.cos(a), math.sin(a)
    return ((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0))


def matrix_eq_j2000_to_ecl_date(T: float) -> Matrix:
    """
    Rotation from the equatorial J2000 frame to the mean ecliptic of date
    (IAU 1976 precession angles, IAU 2000 mean obliquity).
    """
    zeta = arcsec_to_rad(2306.2181 * T + 0.30188 * (T**2) + 0.017998 * (T**3))
    z = arcsec_to_rad(2306.2181 * T + 1.09468 * (T**2) + 0.018203 * (T**3))
    theta = arcsec_to_rad(2004.3109 * T - 0.42665 * (T**2) - 0.041833 * (T**3))

    eps_date = math.radians(mean_obliquity_deg(T))

    eq_precession = _matmul(_rot_z(-z), _matmul(_rot_y(theta), _rot_z(-zeta)))
    return _matmul(_rot_x(eps_date), eq_precession)

def apply_matrix(M: Matrix, v: Sequence[float]) -> tuple[float, float, float]:
    """Applies a 3x3 matrix to a 3D vector."""
    return (
        M[0][0]*v[0] + M[0][1]*v[1] + M[0][2]*v[2],
        M[1][0]*v[0] + M[1][1]*v[1] + M[1][2]*v[2],
        M[2][0]*v[0] + M[2][1]*v[1] + M[2][2]*v[2]
    )
