"""Segment projection and nearest segment search."""

import pytest

from curvedit.core import nearest_point_index, nearest_segment, project_point_to_segment


class TestProjectPointToSegment:
    def test_interior_projection(self):
        q, t, d2 = project_point_to_segment((5.0, 3.0), (0.0, 0.0), (10.0, 0.0))
        assert q == pytest.approx((5.0, 0.0))
        assert t == pytest.approx(0.5)
        assert d2 == pytest.approx(9.0)

    @pytest.mark.parametrize("p, expected_t, expected_q", [
        ((-4.0, 1.0), 0.0, (0.0, 0.0)),
        ((20.0, 0.0), 1.0, (10.0, 0.0)),
    ])
    def test_projection_is_clamped(self, p, expected_t, expected_q):
        q, t, _ = project_point_to_segment(p, (0.0, 0.0), (10.0, 0.0))
        assert t == expected_t
        assert q == pytest.approx(expected_q)

    def test_zero_length_segment_projects_on_start(self):
        q, t, d2 = project_point_to_segment((3.0, 4.0), (1.0, 1.0), (1.0, 1.0))
        assert q == (1.0, 1.0)
        assert t == 0.0
        assert d2 == pytest.approx(13.0)


class TestNearestSegment:
    @pytest.mark.parametrize("points", [[], [(1.0, 1.0)]])
    def test_none_below_two_points(self, points):
        assert nearest_segment((0.0, 0.0), points) is None

    def test_past_the_last_point(self):
        hit = nearest_segment((20.0, 0.0), [(0.0, 0.0), (10.0, 0.0)])
        assert hit.index == 0
        assert hit.t == 1.0
        assert hit.projected == pytest.approx((10.0, 0.0))

    def test_picks_closest_segment(self):
        pts = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]
        hit = nearest_segment((11.0, 7.0), pts)
        assert hit.index == 1
        assert hit.t == pytest.approx(0.7)

    def test_ties_keep_lowest_index(self):
        # (5, 5) is 5 away from both segments
        pts = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]
        hit = nearest_segment((5.0, 5.0), pts)
        assert hit.index == 0
        assert hit.projected == pytest.approx((5.0, 0.0))


class TestNearestPointIndex:
    def test_within_radius(self):
        pts = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
        assert nearest_point_index(pts, (1.1, 0.05), 0.2) == 1

    def test_outside_radius(self):
        assert nearest_point_index([(0.0, 0.0)], (1.0, 1.0), 0.5) is None

    def test_closest_wins(self):
        pts = [(0.0, 0.0), (0.3, 0.0)]
        assert nearest_point_index(pts, (0.2, 0.0), 1.0) == 1
