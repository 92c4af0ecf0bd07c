"""Geodesy helpers for pointing an antenna tracker at a moving target."""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6372795
A_EARTH = 6378137
E_EARTH = 0.08181919104281579
METERS_PER_NAUTICAL_MILE = 1852

MAX_LIMITED_LAT = 79.9
MIN_LIMITED_LAT = -79.9

_E2 = E_EARTH**2
_E4 = E_EARTH**4
_E6 = E_EARTH**6
_E8 = E_EARTH**8

# Meridian arc series coefficients.
_A1 = 1 + 3.0 / 4 * _E2 + 45.0 / 64 * _E4 + 175.0 / 256 * _E6 + 11025.0 / 16384 * _E8
_A2 = -3.0 / 8 * _E2 - 15.0 / 32 * _E4 - 525.0 / 1024 * _E6 - 2205.0 / 4096 * _E8
_A3 = 15.0 / 256 * _E4 + 105.0 / 1024 * _E6 + 2205.0 / 16384 * _E8
_A4 = -35.0 / 3072 * _E6 - 105.0 / 4096 * _E8
_A5 = 315.0 / 131072 * _E8
# Inverse (footpoint latitude) series coefficients.
_B1 = 3.0 / 8 * _E2 + 3.0 / 16 * _E4 + 213.0 / 2048 * _E6 + 255.0 / 4096 * _E8
_B2 = 21.0 / 256 * _E4 + 21.0 / 256 * _E6 + 533.0 / 8192 * _E8
_B3 = 151.0 / 6144 * _E6 + 151.0 / 4096 * _E8
_B4 = 1097.0 / 131082 * _E8


def distance_between(lat1: float, long1: float, lat2: float, long2: float) -> float:
    """Great-circle distance in meters between two positions in decimal degrees.

    Uses a sphere of radius 6372795 m, so the error may reach about 0.5%.
    """
    delta = math.radians(long1 - long2)
    sdlong = math.sin(delta)
    cdlong = math.cos(delta)
    lat1 = math.radians(lat1)
    lat2 = math.radians(lat2)
    slat1, clat1 = math.sin(lat1), math.cos(lat1)
    slat2, clat2 = math.sin(lat2), math.cos(lat2)
    delta = clat1 * slat2 - slat1 * clat2 * cdlong
    delta = math.sqrt(delta * delta + (clat2 * sdlong) ** 2)
    denom = slat1 * slat2 + clat1 * clat2 * cdlong
    return math.atan2(delta, denom) * EARTH_RADIUS_M


def course_to(lat1: float, long1: float, lat2: float, long2: float) -> float:
    """Course in degrees (North=0, East=90, West=270) from position 1 to position 2."""
    dlon = math.radians(long2 - long1)
    lat1 = math.radians(lat1)
    lat2 = math.radians(lat2)
    a1 = math.sin(dlon) * math.cos(lat2)
    a2 = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    angle = math.atan2(a1, a2)
    if angle < 0.0:
        angle += 2 * math.pi
    return math.degrees(angle)


def tilt_to(distance: int, alt1: int, alt2: int) -> int:
    """Tilt in whole degrees (0-90) to look from altitude ``alt1`` to ``alt2``.

    ``distance`` is in meters and the altitudes in centimeters. A target below
    the tracker gives 0; a zero distance is treated as 1 m.
    """
    alt2 = max(alt2, alt1)
    if distance == 0:
        distance = 1
    alpha = int(math.degrees(math.atan((alt2 / 100.0 - alt1 / 100.0) / distance)))
    return min(max(alpha, 0), 90)


def distance_move_to(
    begin_lat: float, begin_lon: float, orient: float, distance: float
) -> tuple[float, float]:
    """Position reached travelling ``distance`` nautical miles on rhumb line ``orient``.

    Returns ``(latitude, longitude)`` in decimal degrees.
    """
    distance *= METERS_PER_NAUTICAL_MILE

    if abs(orient - 90) <= 0.0001 or abs(orient - 270) <= 0.0001:
        sin_lat = math.sin(math.radians(begin_lat))
        lon_dist = (math.sqrt(1 - _E2 * sin_lat**2) * distance) / (
            A_EARTH * math.cos(math.radians(begin_lat))
        )
        if abs(orient - 90) <= 0.0001:
            lon = math.radians(begin_lon) + lon_dist
        else:
            lon = math.radians(begin_lon) - lon_dist
        return begin_lat, math.degrees(lon)

    x1 = A_EARTH * (1 - _E2) * (
        _A1 * math.radians(begin_lat)
        + _A2 * math.sin(math.radians(2 * begin_lat))
        + _A3 * math.sin(math.radians(4 * begin_lat))
        + _A4 * math.sin(math.radians(6 * begin_lat))
        + _A5 * math.sin(math.radians(8 * begin_lat))
    )
    x2 = x1 + distance * math.cos(math.radians(orient))
    b0 = x2 / ((1 - _E2) * A_EARTH * _A1)

    lat = math.degrees(
        b0
        + _B1 * math.sin(2 * b0)
        + _B2 * math.sin(4 * b0)
        + _B3 * math.sin(6 * b0)
        + _B4 * math.sin(8 * b0)
    )

    def isometric(sin_phi: float) -> float:
        return math.log((1 + sin_phi) / (1 - sin_phi)) / 2 - E_EARTH * math.log(
            (1 + sin_phi * E_EARTH) / (1 - sin_phi * E_EARTH)
        ) / 2

    q1 = isometric(math.sin(math.radians(begin_lat)))
    q2 = isometric(math.sin(math.radians(lat)))
    lon = math.radians(begin_lon) + (q2 - q1) * math.tan(math.radians(orient))
    return lat, math.degrees(lon)