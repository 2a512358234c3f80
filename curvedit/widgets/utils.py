from PySide6 import QtCore, QtGui

from curvedit.core import Color, Point


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())

def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])

def color_to_qcolor(c: Color, attenuation: float = 1.0) -> QtGui.QColor:
    return QtGui.QColor.fromRgbF(c[0] * attenuation, c[1] * attenuation, c[2] * attenuation)

def qcolor_to_color(c: QtGui.QColor) -> Color:
    return c.redF(), c.greenF(), c.blueF()
