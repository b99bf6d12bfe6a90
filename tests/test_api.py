# tests/test_api.py

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

import moonpos
from moonpos.reference import lunar


def test_public_surface():
    for name in moonpos.__all__:
        assert hasattr(moonpos, name)

def test_moon_position_matches_pipeline(meeus_jde):
    assert moonpos.moon_position(meeus_jde) == lunar.moon_position(meeus_jde)

def test_report_hook_receives_cartesian_triple(meeus_jde):
    hook = Mock()
    pos = moonpos.moon_position(meeus_jde, report=hook)
    hook.assert_called_once_with(pos.x_km, pos.y_km, pos.z_km)

def test_report_hook_does_not_change_result(meeus_jde):
    assert moonpos.moon_position(meeus_jde, report=lambda x, y, z: None) == moonpos.moon_position(meeus_jde)

def test_moon_position_at_datetime(meeus_jde):
    dt = datetime(1992, 4, 12, tzinfo=timezone.utc)
    pos = moonpos.moon_position_at(dt)
    assert pos.jde == pytest.approx(meeus_jde, abs=1e-9)
    assert pos.longitude_deg == pytest.approx(133.162655, abs=1e-6)

def test_moon_position_at_requires_aware_datetime():
    with pytest.raises(ValueError):
        moonpos.moon_position_at(datetime(1992, 4, 12))

def test_moon_ephemeris_grid(meeus_jde):
    rows = list(moonpos.moon_ephemeris(meeus_jde, meeus_jde + 1.0, 0.25))
    assert [r.jde for r in rows] == [meeus_jde + 0.25 * i for i in range(4)]
    assert rows[0] == moonpos.moon_position(meeus_jde)

def test_moon_ephemeris_empty_range(meeus_jde):
    assert list(moonpos.moon_ephemeris(meeus_jde, meeus_jde, 1.0)) == []

@pytest.mark.parametrize("step", [0.0, -1.0, float("nan")])
def test_moon_ephemeris_rejects_bad_step(meeus_jde, step):
    with pytest.raises(ValueError):
        list(moonpos.moon_ephemeris(meeus_jde, meeus_jde + 1.0, step))

def test_moon_ephemeris_rejects_step_below_resolution(meeus_jde):
    with pytest.raises(ValueError, match="resolution"):
        next(moonpos.moon_ephemeris(meeus_jde, meeus_jde + 1.0, 1e-300))

def test_errors_hierarchy():
    assert issubclass(moonpos.EphemerisUnavailableError, moonpos.MoonposError)
    assert issubclass(moonpos.EphemerisUnavailableError, RuntimeError)
