import logging
from pathlib import Path

from PySide6 import QtCore, QtGui, QtWidgets

from curvedit.core import (
    AddPoint, Curve, CurveLayer, DisplayAttributes, EditCommand, EditSession,
    EditorConfig, MalformedFile, MovePoint, Point, RemovePoint, nearest_point_index,
)
from curvedit.formats import load_curves, save_curves
from curvedit.widgets.camera import Camera2d
from curvedit.widgets.utils import color_to_qcolor, point_to_qpoint, qpoint_to_point

logger = logging.getLogger(__name__)


class CanvasWidget(QtWidgets.QWidget):
    """
    View/controller for an EditSession.
    Draws every curve layer and turns mouse input on the active curve into
    edit commands:
      - left click on empty space: add a point (and keep dragging it)
      - left click on a point: drag it
      - shift + left click or right click on a point: remove it
      - middle drag: pan, wheel: zoom
    """

    curvesChanged = QtCore.Signal()            # emitted when curves are added/removed
    activeCurveChanged = QtCore.Signal(int)    # emitted when the active index changes
    curveUpdated = QtCore.Signal(int)          # emitted when a curve's points/settings change, arg = index

    def __init__(self, session: EditSession | None = None, config: EditorConfig | None = None, parent=None):
        super().__init__(parent)

        # model
        self._session = session if session is not None else EditSession()
        self._config = config or EditorConfig()
        self._camera = Camera2d(pixels_per_unit=self._config.pixels_per_unit)
        self._n_samples = self._config.n_samples
        self._fade_unselected = self._config.fade_unselected

        # interaction state
        self._drag_index: int | None = None
        self._pan_from: QtCore.QPointF | None = None

        self.setMouseTracking(True)
        self.setAcceptDrops(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

    # --- public API -------------------------
    @property
    def session(self) -> EditSession:
        return self._session

    @property
    def camera(self) -> Camera2d:
        return self._camera

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def n_samples(self) -> int:
        return self._n_samples

    def set_n_samples(self, n: int) -> None:
        if n >= 2 and n != self._n_samples:
            self._n_samples = n
            self.update()

    @property
    def fade_unselected(self) -> bool:
        return self._fade_unselected

    def set_fade_unselected(self, on: bool) -> None:
        self._fade_unselected = bool(on)
        self.update()

    def get_active_idx(self) -> int:
        return self._session.active_idx

    def __getitem__(self, key) -> CurveLayer:
        return self._session[key]

    def __len__(self):
        return len(self._session)

    def new_layer(self, curve: Curve | None = None, name: str | None = None) -> CurveLayer:
        cfg = self._config
        if curve is None:
            curve = Curve(kind=cfg.default_kind, boundary=cfg.default_boundary, degree=cfg.default_degree)
        display = DisplayAttributes(
            curve_color=cfg.curve_color,
            control_color=cfg.control_color,
            break_point_color=cfg.break_point_color,
        )
        return CurveLayer(curve=curve, name=name or f"Curve {len(self._session) + 1}", display=display)

    def add_curve(self, curve: Curve | None = None, name: str | None = None, activate: bool = True) -> int:
        idx = self._session.add_layer(self.new_layer(curve, name), activate=activate)
        self.curvesChanged.emit()
        if activate:
            self.activeCurveChanged.emit(idx)
        self.update()
        return idx

    def remove_curve(self, index: int) -> bool:
        if not self._session.remove_layer(index):
            return False
        self._drag_index = None
        self.curvesChanged.emit()
        self.activeCurveChanged.emit(self._session.active_idx)
        self.update()
        return True

    def set_active_curve(self, index: int) -> None:
        if 0 <= index < len(self._session) and index != self._session.active_idx:
            self._session.set_active(index)
            self._drag_index = None
            self.activeCurveChanged.emit(index)
            self.update()

    def notify_curve_changed(self, index: int | None = None) -> None:
        """Call after changing a curve's settings from outside the canvas."""
        idx = self._session.active_idx if index is None else index
        if idx >= 0:
            self.curveUpdated.emit(idx)
        self.update()

    def clear_active(self) -> None:
        curve = self._session.active_curve
        if curve is not None:
            curve.clear()
            self._drag_index = None
            self.notify_curve_changed()

    def load_file(self, path: str | Path) -> int:
        """Append every curve of the file; return how many were added."""
        curves = load_curves(path)
        stem = Path(path).stem
        for i, c in enumerate(curves):
            name = stem if len(curves) == 1 else f"{stem} {i + 1}"
            self.add_curve(c, name=name, activate=(i == 0))
        return len(curves)

    def save_file(self, path: str | Path) -> None:
        save_curves(path, self._session.curves())

    # --- edits --------------------------------------------------------------
    def apply(self, command: EditCommand) -> int | None:
        idx = self._session.apply(command)
        if idx is not None:
            self.notify_curve_changed()
        return idx

    def _world_pos(self, e) -> Point:
        return self._camera.to_world(qpoint_to_point(e.position()), self.width(), self.height())

    def _index_at(self, world: Point) -> int | None:
        curve = self._session.active_curve
        if curve is None:
            return None
        radius = self._camera.world_length(self._config.hit_radius_px)
        return nearest_point_index(curve.points, world, radius)

    # ---- mouse events -------------------------------------------------------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.MiddleButton:
            self._pan_from = QtCore.QPointF(e.position())
            return
        if self._session.active_curve is None:
            return

        pos = self._world_pos(e)
        idx = self._index_at(pos)

        is_remove = (
                e.button() == QtCore.Qt.MouseButton.RightButton
                or (
                    e.button() == QtCore.Qt.MouseButton.LeftButton
                    and e.modifiers() & QtCore.Qt.KeyboardModifier.ShiftModifier
                )
        )
        if is_remove:
            self._drag_index = None
            if idx is not None:
                self.apply(RemovePoint(idx))
            return

        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            if idx is not None:
                self._drag_index = idx
            else:
                self._drag_index = self.apply(AddPoint(pos))

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        if self._pan_from is not None:
            cur = QtCore.QPointF(e.position())
            delta = cur - self._pan_from
            self._camera.pan(delta.x(), delta.y())
            self._pan_from = cur
            self.update()
            return
        pos = self._world_pos(e)
        if self._drag_index is None:
            idx = self._index_at(pos)
            self.setCursor(QtCore.Qt.CursorShape.SizeAllCursor if idx is not None else QtCore.Qt.CursorShape.CrossCursor)
            return
        self.apply(MovePoint(self._drag_index, pos))

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self._drag_index = None
        elif e.button() == QtCore.Qt.MouseButton.MiddleButton:
            self._pan_from = None

    def wheelEvent(self, e: QtGui.QWheelEvent):
        steps = e.angleDelta().y() / 120.0
        if steps:
            self._camera.zoom_by(steps / 10.0)
            self.update()

    # ---- file drops ---------------------------------------------------------
    def dragEnterEvent(self, e: QtGui.QDragEnterEvent):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e: QtGui.QDropEvent):
        for url in e.mimeData().urls():
            path = url.toLocalFile()
            if not path:
                continue
            try:
                self.load_file(path)
            except MalformedFile as err:
                logger.error("Failed to load dropped file: %s", err)
        e.acceptProposedAction()

    # ---- painting -----------------------------------------------------------
    def sizeHint(self):
        return QtCore.QSize(900, 600)

    def _to_qpoint(self, p: Point) -> QtCore.QPointF:
        return point_to_qpoint(self._camera.to_screen(p, self.width(), self.height()))

    def _polyline(self, pts) -> QtGui.QPolygonF:
        return QtGui.QPolygonF([self._to_qpoint(p) for p in pts])

    def paintEvent(self, _):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        p.fillRect(self.rect(), QtGui.QColor.fromRgbF(0.1, 0.1, 0.1))

        active = self._session.active_idx
        for i, layer in enumerate(self._session.layers):
            fade = self._config.attenuation if (self._fade_unselected and i != active) else 1.0
            self._paint_layer(p, layer, fade)
        p.end()

    def _paint_layer(self, p: QtGui.QPainter, layer: CurveLayer, fade: float):
        curve, disp = layer.curve, layer.display
        if not curve.points:
            return

        if disp.draw_curve:
            sample = curve.sample(self._n_samples)
            if len(sample) >= 2:
                p.setPen(QtGui.QPen(color_to_qcolor(disp.curve_color, fade), 2.0))
                p.drawPolyline(self._polyline(sample.points))

        control = color_to_qcolor(disp.control_color, fade)
        if disp.draw_control_polygon and len(curve.points) >= 2:
            p.setPen(QtGui.QPen(control, 1.0, QtCore.Qt.PenStyle.DashLine))
            p.drawPolyline(self._polyline(curve.points))

        r = 3.0
        if disp.draw_control_points:
            p.setPen(QtGui.QPen(control, 1.0))
            p.setBrush(control)
            for pt in curve.points:
                p.drawEllipse(self._to_qpoint(pt), r, r)

        if disp.draw_break_points:
            brk = color_to_qcolor(disp.break_point_color, fade)
            p.setPen(QtGui.QPen(brk, 1.0))
            p.setBrush(brk)
            for pt in curve.break_points():
                p.drawEllipse(self._to_qpoint(pt), r, r)
        p.setBrush(QtCore.Qt.BrushStyle.NoBrush)
