"""EditSession commands and curve list management."""

import pytest

from curvedit.core import (
    AddPoint, Curve, CurveLayer, DisplayAttributes, EditSession, MovePoint, RemovePoint,
)


@pytest.fixture
def session():
    s = EditSession()
    s.add_curve(Curve(kind="bezier"), name="first")
    return s


class TestApply:
    def test_add_points(self, session):
        assert session.apply(AddPoint((0.0, 0.0))) == 0
        assert session.apply(AddPoint((10.0, 0.0))) == 1
        assert session.apply(AddPoint((20.0, 0.0))) == 2
        assert session.active_curve.points == ((0.0, 0.0), (10.0, 0.0), (20.0, 0.0))

    def test_add_inserts_inside_polygon(self, session):
        for p in [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]:
            session.apply(AddPoint(p))
        assert session.apply(AddPoint((5.0, 5.0))) == 1

    def test_move_and_remove(self, session):
        for p in [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]:
            session.apply(AddPoint(p))
        assert session.apply(MovePoint(1, (1.0, 3.0))) == 1
        assert session.apply(RemovePoint(0)) == 0
        assert session.active_curve.points == ((1.0, 3.0), (2.0, 0.0))

    @pytest.mark.parametrize("command", [
        RemovePoint(5),
        MovePoint(-1, (0.0, 0.0)),
        MovePoint(2, (0.0, 0.0)),
    ])
    def test_bad_index_is_ignored(self, session, command):
        session.apply(AddPoint((0.0, 0.0)))
        session.apply(AddPoint((1.0, 0.0)))
        version = session.active_curve.version
        assert session.apply(command) is None
        assert session.active_curve.points == ((0.0, 0.0), (1.0, 0.0))
        assert session.active_curve.version == version

    def test_no_active_curve(self):
        assert EditSession().apply(AddPoint((0.0, 0.0))) is None

    def test_unknown_command(self, session):
        with pytest.raises(TypeError):
            session.apply("add")

    def test_only_active_curve_changes(self, session):
        session.add_curve(name="second", activate=True)
        session.apply(AddPoint((1.0, 1.0)))
        assert len(session["first"].curve) == 0
        assert len(session["second"].curve) == 1


class TestCurveList:
    def test_first_curve_becomes_active(self):
        s = EditSession()
        assert s.active_idx == -1
        assert s.active_curve is None
        s.add_curve(activate=False)
        assert s.active_idx == 0

    def test_add_curve_keeps_given_curve(self):
        s = EditSession()
        curve = Curve(kind="bezier")
        s.add_curve(curve)
        assert s.active_curve is curve

    def test_set_active(self, session):
        session.add_curve(name="second", activate=False)
        session.set_active(1)
        assert session.active_layer.name == "second"
        with pytest.raises(IndexError):
            session.set_active(2)

    def test_lookup(self, session):
        assert session[0] is session["first"]
        with pytest.raises(KeyError):
            session["missing"]
        with pytest.raises(IndexError):
            session[3]

    def test_remove_before_active_shifts_index(self, session):
        session.add_curve(name="second")
        session.add_curve(name="third")
        assert session.active_idx == 2
        assert session.remove_layer(0)
        assert session.active_idx == 1
        assert session.active_layer.name == "third"

    def test_remove_after_active_keeps_index(self, session):
        session.add_curve(name="second", activate=False)
        assert session.remove_layer(1)
        assert session.active_idx == 0

    def test_remove_last_curve(self, session):
        assert session.remove_layer(0)
        assert session.active_idx == -1
        assert not session.remove_layer(0)


def test_session_round_trip(session):
    session.apply(AddPoint((1.0, 2.0)))
    session.layers[0].display.draw_break_points = False
    session.add_layer(CurveLayer(Curve(kind="bspline", degree=2), name="spline",
                                 display=DisplayAttributes(curve_color=(1.0, 0.0, 0.0))))
    back = EditSession.from_dict(session.to_dict())
    assert len(back) == 2
    assert back.active_idx == session.active_idx
    assert back["first"].points == ((1.0, 2.0),)
    assert back["first"].display.draw_break_points is False
    assert back["spline"].curve.degree == 2
    assert back["spline"].display.curve_color == (1.0, 0.0, 0.0)
