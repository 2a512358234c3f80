"""File format dispatch on extension."""

import pytest

from curvedit.core import BoundaryCondition, Curve, MalformedFile
from curvedit.formats import load_curves, save_curves


def assert_same_points(a, b):
    assert len(a) == len(b)
    for p, q in zip(a, b):
        assert p == pytest.approx(q, abs=1e-6)


class TestLoad:
    def test_dat_gives_bezier_curves(self, tmp_path):
        path = tmp_path / "two.dat"
        path.write_text("2\nP,2\n0,0\n1,1\nP,3\n0,0\n1,2\n2,0\n", encoding="utf-8")
        curves = load_curves(path)
        assert [c.kind for c in curves] == ["bezier", "bezier"]
        assert len(curves[1]) == 3

    def test_crv_gives_polyline(self, tmp_path):
        path = tmp_path / "line.crv"
        path.write_text("1\nP,3\n0,0\n1,0\n1,1\n", encoding="utf-8")
        (curve,) = load_curves(path)
        assert curve.kind == "bspline"
        assert curve.degree == 1
        assert curve.boundary is BoundaryCondition.CLAMPED
        assert_same_points(curve.break_points(), curve.points)

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "curve.svg"
        path.write_text("<svg/>", encoding="utf-8")
        with pytest.raises(MalformedFile):
            load_curves(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(MalformedFile):
            load_curves(tmp_path / "missing.json")


class TestSave:
    @pytest.mark.parametrize("boundary", ["clamped", "periodic", "floating"])
    def test_json_round_trip(self, tmp_path, boundary, square_points):
        curves = [
            Curve(kind="bspline", boundary=boundary, points=square_points, degree=2),
            Curve(kind="bezier", points=[(0.125, -3.5), (1e-3, 7.0)]),
        ]
        path = tmp_path / "out.json"
        save_curves(path, curves)
        back = load_curves(path)
        assert [c.definition()[:2] for c in back] == [c.definition()[:2] for c in curves]
        assert back[0].degree == 2
        for a, b in zip(back, curves):
            assert_same_points(a.points, b.points)

    def test_dat_round_trip(self, tmp_path, cubic_bezier):
        path = tmp_path / "out.dat"
        save_curves(path, [cubic_bezier, Curve(kind="bezier", points=[(2.0, 2.0)])])
        back = load_curves(path)
        assert len(back) == 2
        assert_same_points(back[0].points, cubic_bezier.points)

    def test_dat_keeps_control_points_of_splines(self, tmp_path, clamped_bspline):
        path = tmp_path / "out.dat"
        save_curves(path, [clamped_bspline])
        (back,) = load_curves(path)
        assert back.kind == "bezier"
        assert back.points == clamped_bspline.points

    def test_crv_needs_one_curve(self, tmp_path, cubic_bezier):
        with pytest.raises(ValueError):
            save_curves(tmp_path / "out.crv", [cubic_bezier, cubic_bezier])

    def test_unsupported_extension(self, tmp_path, cubic_bezier):
        with pytest.raises(ValueError):
            save_curves(tmp_path / "out.txt", [cubic_bezier])


@pytest.mark.parametrize("name", ["bad.dat", "bad.crv", "bad.json"])
def test_undecodable_file(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(MalformedFile):
        load_curves(path)
