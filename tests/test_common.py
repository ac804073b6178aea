import math

import pytest

from glframe.common import PI, PI_OVER_360, deg_to_rad, rad_to_deg


def test_half_turn_is_pi():
    assert deg_to_rad(180.0) == pytest.approx(math.pi)


def test_zero_maps_to_zero():
    assert deg_to_rad(0.0) == 0.0
    assert rad_to_deg(0.0) == 0.0


@pytest.mark.parametrize("angle", [-720.0, -45.0, 1.5, 90.0, 359.0])
def test_round_trip(angle):
    assert rad_to_deg(deg_to_rad(angle)) == pytest.approx(angle)


def test_half_degree_is_pi_over_360():
    assert deg_to_rad(0.5) == pytest.approx(PI_OVER_360)


def test_rad_to_deg_of_pi():
    assert rad_to_deg(PI) == pytest.approx(180.0)