"""JSON curve documents."""

import json

import pytest

from curvedit.core import BoundaryCondition, Curve, MalformedFile
from curvedit.formats.json_format import curve_from_json, curve_to_json, dump_curves, parse_curves


class TestCurveFromJson:
    def test_bspline(self):
        curve = curve_from_json({
            "type": "bspline2d",
            "degree": 2,
            "boundary": "periodic",
            "points": [{"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 1, "y": 1}],
        })
        assert curve.kind == "bspline"
        assert curve.degree == 2
        assert curve.boundary is BoundaryCondition.PERIODIC
        assert curve.points == ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
        assert curve.knots is None

    def test_bezier_needs_no_degree(self):
        curve = curve_from_json({"type": "bezier2d", "points": [{"x": 1.5, "y": 2}]})
        assert curve.kind == "bezier"
        assert curve.boundary is BoundaryCondition.CLAMPED

    def test_knots(self):
        curve = curve_from_json({
            "type": "bspline2d", "degree": 1,
            "points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}],
            "knots": [0, 0, 3, 3],
        })
        assert curve.knots == (0.0, 0.0, 3.0, 3.0)
        assert curve.domain() == (0.0, 3.0)

    @pytest.mark.parametrize("data", [
        [],
        {"type": "nurbs2d", "points": []},
        {"type": "bezier2d"},
        {"type": "bezier2d", "points": [[0, 0]]},
        {"type": "bezier2d", "points": [{"x": "0", "y": 0}]},
        {"type": "bezier2d", "points": [{"x": True, "y": 0}]},
        {"type": "bezier2d", "points": [{"x": 0}]},
        {"type": "bspline2d", "points": []},
        {"type": "bspline2d", "degree": 0, "points": []},
        {"type": "bspline2d", "degree": 2.5, "points": []},
        {"type": "bspline2d", "degree": 2, "boundary": "open", "points": []},
        {"type": "bspline2d", "degree": 2, "points": [], "knots": "0 1 2"},
    ])
    def test_malformed(self, data):
        with pytest.raises(MalformedFile):
            curve_from_json(data, "bad.json")


class TestCurveToJson:
    def test_bspline(self):
        curve = Curve(kind="bspline", boundary="floating", points=[(1.0, 2.0)], degree=4)
        assert curve_to_json(curve) == {
            "type": "bspline2d",
            "degree": 4,
            "boundary": "floating",
            "points": [{"x": 1.0, "y": 2.0}],
        }

    def test_bezier_has_no_degree(self, cubic_bezier):
        data = curve_to_json(cubic_bezier)
        assert data["type"] == "bezier2d"
        assert "degree" not in data


class TestDocuments:
    def test_single_curve_is_an_object(self, cubic_bezier):
        doc = json.loads(dump_curves([cubic_bezier]))
        assert doc["type"] == "bezier2d"

    def test_many_curves(self, cubic_bezier, clamped_bspline):
        text = dump_curves([cubic_bezier, clamped_bspline])
        assert "curves" in json.loads(text)
        back = parse_curves(text)
        assert [c.kind for c in back] == ["bezier", "bspline"]
        assert back[1].points == clamped_bspline.points

    def test_invalid_json_reports_line(self):
        with pytest.raises(MalformedFile) as err:
            parse_curves('{\n  "type": "bezier2d",\n  points\n}', "broken.json")
        assert err.value.line == 3

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", "1e400"])
    def test_non_finite_coordinates(self, value):
        text = '{"type": "bezier2d", "points": [{"x": ' + value + ', "y": 0}, {"x": 1, "y": 0}]}'
        with pytest.raises(MalformedFile):
            parse_curves(text)

    def test_non_finite_knots(self):
        text = ('{"type": "bspline2d", "degree": 1, "points": [{"x": 0, "y": 0}, {"x": 1, "y": 0}],'
                ' "knots": [0, 0, NaN, 1]}')
        with pytest.raises(MalformedFile):
            parse_curves(text)

    def test_curves_must_be_a_list(self):
        with pytest.raises(MalformedFile):
            parse_curves('{"curves": {}}')
