"""Shared test fixtures."""

import pytest

from curvedit.core import BoundaryCondition, Curve


@pytest.fixture
def bezier_points():
    return [(0.0, 0.0), (1.0, 2.0), (3.0, 2.0), (4.0, 0.0)]


@pytest.fixture
def cubic_bezier(bezier_points):
    return Curve(kind="bezier", points=bezier_points)


@pytest.fixture
def clamped_bspline():
    pts = [(0.0, 0.0), (1.0, 1.0), (2.0, -1.0), (3.0, 1.0), (4.0, 0.0), (5.0, 2.0)]
    return Curve(kind="bspline", boundary=BoundaryCondition.CLAMPED, points=pts, degree=3)


@pytest.fixture
def square_points():
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
