import pytest

from iats.calc import course_to, distance_between, distance_move_to, tilt_to


def test_distance_to_self_is_zero():
    assert distance_between(45.0, 7.0, 45.0, 7.0) == pytest.approx(0.0, abs=1e-6)


def test_distance_is_symmetric():
    a = distance_between(40.0, -3.0, 41.5, -2.0)
    b = distance_between(41.5, -2.0, 40.0, -3.0)
    assert a == pytest.approx(b)


def test_distance_is_additive_along_equator():
    one = distance_between(0.0, 0.0, 0.0, 1.0)
    two = distance_between(0.0, 0.0, 0.0, 2.0)
    assert two == pytest.approx(2 * one)


def test_distance_same_along_meridian_and_equator_on_sphere():
    assert distance_between(0.0, 0.0, 1.0, 0.0) == pytest.approx(
        distance_between(0.0, 0.0, 0.0, 1.0)
    )


@pytest.mark.parametrize(
    "lat2,lon2,expected",
    [(1.0, 0.0, 0.0), (0.0, 1.0, 90.0), (-1.0, 0.0, 180.0), (0.0, -1.0, 270.0)],
)
def test_course_cardinal_directions(lat2, lon2, expected):
    assert course_to(0.0, 0.0, lat2, lon2) == pytest.approx(expected, abs=1e-6)


def test_course_is_in_range():
    for lat2, lon2 in [(10, 20), (-10, 20), (-10, -20), (10, -20)]:
        course = course_to(0.0, 0.0, lat2, lon2)
        assert 0.0 <= course < 360.0


def test_tilt_same_altitude_is_zero():
    assert tilt_to(100, 5000, 5000) == 0


def test_tilt_target_below_is_zero():
    assert tilt_to(100, 5000, 1000) == 0


def test_tilt_high_and_close():
    # 100 m above at 1 m distance is about 89.4 degrees.
    assert tilt_to(1, 0, 10000) == 89


def test_tilt_zero_distance_same_as_one():
    assert tilt_to(0, 0, 10000) == tilt_to(1, 0, 10000)


def test_tilt_grows_with_altitude():
    tilts = [tilt_to(1000, 0, alt) for alt in (0, 10000, 50000, 100000, 1000000)]
    assert tilts == sorted(tilts)
    assert all(0 <= t <= 90 for t in tilts)


def test_move_zero_distance_north_stays():
    lat, lon = distance_move_to(45.0, 7.0, 0.0, 0.0)
    assert lat == pytest.approx(45.0, abs=1e-4)
    assert lon == pytest.approx(7.0)


def test_move_sixty_miles_north_is_about_one_degree():
    lat, lon = distance_move_to(45.0, 7.0, 0.0, 60.0)
    assert abs(lat - 46.0) < 0.02
    assert lon == pytest.approx(7.0)


def test_move_south_decreases_latitude():
    lat, _ = distance_move_to(45.0, 7.0, 180.0, 10.0)
    assert lat < 45.0


def test_move_east_and_west():
    lat_e, lon_e = distance_move_to(45.0, 7.0, 90.0, 10.0)
    lat_w, lon_w = distance_move_to(45.0, 7.0, 270.0, 10.0)
    assert lat_e == 45.0 and lat_w == 45.0
    assert lon_e > 7.0 > lon_w
    assert lon_e - 7.0 == pytest.approx(7.0 - lon_w)