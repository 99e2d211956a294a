from __future__ import annotations

from math import cos, radians, sin

GLOBE_RADIUS = 5.0
MARKER_ALTITUDE = 0.1


def to_sphere_xyz(
    lat: float, lng: float, radius: float = GLOBE_RADIUS + MARKER_ALTITUDE
) -> tuple[float, float, float]:
    phi = radians(90 - lat)
    theta = radians(lng + 180)
    x = -radius * sin(phi) * cos(theta)
    y = radius * cos(phi)
    z = radius * sin(phi) * sin(theta)
    return x, y, z
