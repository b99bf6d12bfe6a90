# tests/test_lunar.py

import dataclasses
import math

import pytest

from moonpos.core.types import FundamentalAngles, SeriesSums, SeriesTerm
from moonpos.reference import astro_args as aa
from moonpos.reference import lunar
from moonpos.reference import periodic_terms as pt


def _angles(**kw):
    base = dict(T=0.0, L_prime=0.0, D=0.0, M=0.0, M_prime=0.0, F=0.0, A1=0.0, A2=0.0, A3=0.0, E=1.0)
    base.update(kw)
    return FundamentalAngles(**base)


def test_table_shapes():
    assert len(pt.LON_DIST_TERMS) == 60
    assert len(pt.LAT_TERMS) == 60
    assert isinstance(pt.LON_DIST_TERMS, tuple)
    assert isinstance(pt.LAT_TERMS, tuple)
    assert all(t.cos_coef == 0.0 for t in pt.LAT_TERMS)
    # Leading terms of tables 47.A and 47.B
    assert pt.LON_DIST_TERMS[0] == SeriesTerm(0, 0, 1, 0, 6288774, -20905355)
    assert pt.LAT_TERMS[0] == SeriesTerm(0, 0, 0, 1, 5128122)

def test_table_rows_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        pt.LON_DIST_TERMS[0].sin_coef = 0.0

@pytest.mark.parametrize("m, power", [(0, 0), (1, 1), (-1, 1), (2, 2), (-2, 2)])
def test_eccentricity_power(m, power):
    assert SeriesTerm(2, m, 0, 0, 1.0).e_power == power

def test_all_rows_depend_on_sun_anomaly_at_most_twice():
    for t in pt.LON_DIST_TERMS + pt.LAT_TERMS:
        assert t.e_power in (0, 1, 2)

def test_series_sums_start_from_zero():
    s = SeriesSums()
    assert (s.sum_l, s.sum_r, s.sum_b) == (0.0, 0.0, 0.0)

def test_series_sums_zero_angles():
    s = lunar.series_sums(_angles())
    assert s.sum_l == 0.0
    assert s.sum_b == 0.0
    assert s.sum_r == pytest.approx(-28257908.0)

def test_series_sums_eccentricity_scaling():
    table = (SeriesTerm(0, 2, 0, 0, 1.0, 1.0), SeriesTerm(0, -1, 0, 0, 1.0, 1.0))
    s = lunar.series_sums(_angles(M=45.0, E=2.0), lon_terms=table, lat_terms=table[:1])
    # E**2 * sin(90) + E * sin(-45)
    assert s.sum_l == pytest.approx(4.0 - 2.0 * math.sqrt(0.5))
    assert s.sum_r == pytest.approx(0.0 + 2.0 * math.sqrt(0.5), abs=1e-12)
    assert s.sum_b == pytest.approx(4.0)

def test_series_sums_high_eccentricity_power():
    table = (SeriesTerm(0, 3, 0, 0, 1.0, 1.0), SeriesTerm(0, -4, 0, 0, 0.0, 1.0))
    s = lunar.series_sums(_angles(M=30.0, E=2.0), lon_terms=table, lat_terms=table[:1])
    # sin(90) * E**3, cos(90) * E**3 + cos(-120) * E**4
    assert s.sum_l == pytest.approx(8.0)
    assert s.sum_r == pytest.approx(-8.0)
    assert s.sum_b == pytest.approx(8.0)

def test_additive_latitude_terms_at_quarter_longitude():
    # L' = 90, everything else 0: +2235 sin L' + 127 sin(L' - M') - 115 sin(L' + M')
    assert pt.LAT_ADDITIVE[0] == 2235.0
    total = lunar.apply_additive_terms(_angles(L_prime=90.0), SeriesSums())
    assert total.sum_b == pytest.approx(2235.0 + 127.0 - 115.0)
    # sin(L' - F) only
    assert total.sum_l == pytest.approx(1962.0)

def test_additive_terms(meeus_jde):
    fa = aa.fundamental_angles(meeus_jde)
    raw = lunar.series_sums(fa)
    total = lunar.apply_additive_terms(fa, raw)

    assert raw.sum_l == pytest.approx(-1129564.516, abs=0.1)
    assert raw.sum_b == pytest.approx(-3225543.824, abs=0.1)
    assert total.sum_l - raw.sum_l == pytest.approx(2037.482, abs=1e-3)
    assert total.sum_b - raw.sum_b == pytest.approx(1079.918, abs=1e-3)
    assert total.sum_r == raw.sum_r

def test_meeus_example_47a_sums(meeus_jde, reference_position):
    pos = lunar.moon_position(meeus_jde)
    assert pos.sums.sum_l == pytest.approx(reference_position["sum_l"], abs=0.1)
    assert pos.sums.sum_b == pytest.approx(reference_position["sum_b"], abs=0.1)
    assert pos.sums.sum_r == pytest.approx(reference_position["sum_r"], abs=0.1)

def test_meeus_example_47a_position(meeus_jde, reference_position):
    pos = lunar.moon_position(meeus_jde)
    assert pos.jde == meeus_jde
    assert pos.longitude_deg == pytest.approx(reference_position["longitude_deg"], abs=1e-6)
    assert pos.latitude_deg == pytest.approx(reference_position["latitude_deg"], abs=1e-6)
    assert pos.distance_km == pytest.approx(reference_position["distance_km"], abs=1e-6)

    # sum_b sits 4e-3 (1e-6 deg) off the reference value, which moves x and z
    # by up to 2.5e-5 km
    for got, want in zip(pos.xyz, reference_position["xyz"]):
        assert got == pytest.approx(want, abs=1e-4)

def test_spherical_position_scaling():
    fa = _angles(L_prime=350.0)
    lon, lat, dist = lunar.spherical_position(fa, SeriesSums(sum_l=20e6, sum_r=-1000.0, sum_b=-2.5e6))
    assert lon == pytest.approx(10.0)
    assert lat == pytest.approx(-2.5)
    assert dist == pytest.approx(385000.56 - 1.0)

@pytest.mark.parametrize(
    "lon, lat, expected",
    [
        (0.0, 0.0, (1.0, 0.0, 0.0)),
        (90.0, 0.0, (0.0, 1.0, 0.0)),
        (180.0, 0.0, (-1.0, 0.0, 0.0)),
        (0.0, 90.0, (0.0, 0.0, 1.0)),
        (0.0, -90.0, (0.0, 0.0, -1.0)),
    ],
)
def test_to_cartesian_axes(lon, lat, expected):
    x, y, z = lunar.to_cartesian(lon, lat, 1.0)
    assert (x, y, z) == pytest.approx(expected, abs=1e-15)

def test_cartesian_norm_matches_distance(test_epochs):
    for jde, _label in test_epochs:
        pos = lunar.moon_position(jde)
        assert math.sqrt(sum(c * c for c in pos.xyz)) == pytest.approx(pos.distance_km, rel=1e-12)

def test_positions_are_physical(test_epochs):
    for jde, label in test_epochs:
        pos = lunar.moon_position(jde)
        assert 0.0 <= pos.longitude_deg < 360.0, label
        assert abs(pos.latitude_deg) < 5.4, label
        assert 356000.0 < pos.distance_km < 407000.0, label

def test_pipeline_is_deterministic(meeus_jde):
    a = lunar.moon_position(meeus_jde)
    b = lunar.moon_position(meeus_jde)
    assert a == b

def test_no_state_between_epochs(meeus_jde):
    first = lunar.moon_position(meeus_jde)
    lunar.moon_position(2451545.0)
    assert lunar.moon_position(meeus_jde) == first

def test_summation_order_only_changes_rounding(meeus_jde):
    fa = aa.fundamental_angles(meeus_jde)
    fwd = lunar.series_sums(fa)
    rev = lunar.series_sums(fa, pt.LON_DIST_TERMS[::-1], pt.LAT_TERMS[::-1])
    assert rev.sum_l == pytest.approx(fwd.sum_l, abs=1e-6)
    assert rev.sum_r == pytest.approx(fwd.sum_r, abs=1e-6)
    assert rev.sum_b == pytest.approx(fwd.sum_b, abs=1e-6)

def test_moon_moves_about_13_degrees_per_day(meeus_jde):
    a = lunar.moon_position(meeus_jde)
    b = lunar.moon_position(meeus_jde + 1.0)
    step = aa.wrap180(b.longitude_deg - a.longitude_deg)
    assert 11.5 < step < 15.5

def test_nan_propagates_without_raising():
    pos = lunar.moon_position(math.nan)
    assert math.isnan(pos.longitude_deg)
    assert math.isnan(pos.latitude_deg)
    assert math.isnan(pos.distance_km)
    assert all(math.isnan(c) for c in pos.xyz)

def test_infinity_propagates_without_raising():
    pos = lunar.moon_position(math.inf)
    assert not math.isfinite(pos.distance_km)
    assert all(not math.isfinite(c) for c in pos.xyz)
