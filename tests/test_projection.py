from __future__ import annotations

from math import isclose, sqrt

from radioglobe.core.projection import to_sphere_xyz


def test_to_sphere_xyz_north_pole() -> None:
    x, y, z = to_sphere_xyz(90.0, 0.0, radius=5.0)

    assert isclose(y, 5.0)
    assert isclose(x, 0.0, abs_tol=1e-9)
    assert isclose(z, 0.0, abs_tol=1e-9)


def test_to_sphere_xyz_prime_meridian_on_equator() -> None:
    x, y, z = to_sphere_xyz(0.0, 0.0, radius=2.0)

    assert isclose(x, 2.0)
    assert isclose(y, 0.0, abs_tol=1e-9)
    assert isclose(z, 0.0, abs_tol=1e-9)


def test_to_sphere_xyz_stays_on_sphere() -> None:
    x, y, z = to_sphere_xyz(-33.87, 151.21)

    assert isclose(sqrt(x * x + y * y + z * z), 5.1)
