"""
pytest configuration and shared fixtures for moonpos tests.
"""

import pytest


@pytest.fixture
def meeus_jde():
    """Meeus Example 47.a: 1992 April 12, 0h TD."""
    return 2448724.5


@pytest.fixture
def reference_position():
    """Published reference output for meeus_jde."""
    return {
        "sum_l": -1127527.033355,
        "sum_b": -3224463.902493,
        "sum_r": -16590875.183568,
        "longitude_deg": 133.162655,
        "latitude_deg": -3.224464,
        "distance_km": 368409.684816,
        "xyz": (-251619.697297, 268297.992270, -20722.237874),
    }


@pytest.fixture
def test_epochs():
    """Collection of epochs spanning different eras (JDE)."""
    return [
        (2451545.0, "J2000"),
        (2415020.5, "1900"),
        (2460676.5, "2025"),
        (2488069.5, "2100"),
        (2299160.5, "Gregorian reform"),
    ]
