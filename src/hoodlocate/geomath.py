"""Degree-based trigonometry and great-circle distance."""

import math

EARTH_RADIUS_KM = 6371


def sin_d(value: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(math.radians(value))


def cos_d(value: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(math.radians(value))


def haversine_distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """
    Great-circle distance in km between two (lat, lon) points.

    Uses the haversine formula on a sphere of radius EARTH_RADIUS_KM and
    rounds to 3 decimals. sqrt(a) is clamped to 1 so that rounding error
    on (near-)antipodal points never leaves asin's domain.
    """
    sin_alpha_2 = sin_d((lat1 - lat2) / 2) ** 2
    sin_beta_2 = sin_d((lon1 - lon2) / 2) ** 2
    a = sin_alpha_2 + cos_d(lat1) * cos_d(lat2) * sin_beta_2
    c = math.asin(min(1, math.sqrt(a)))
    return round(2 * EARTH_RADIUS_KM * c, 3)
