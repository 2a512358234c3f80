from PySide6 import QtWidgets, QtCore

from curvedit.core import BoundaryCondition, CurveLayer, curve_kind_labels, evaluator_registry
from curvedit.widgets import CanvasWidget
from curvedit.widgets.utils import color_to_qcolor, qcolor_to_color


class CurveItem(QtWidgets.QFrame):
    """
    One curve 'row': selection, visibility flags, curve kind, boundary
    condition, degree and colors of a single layer of the canvas.
    """
    requestActivate = QtCore.Signal(int)
    requestRemove = QtCore.Signal(int)

    _FLAGS = (
        ("draw_curve", "Draw Curve"),
        ("draw_control_polygon", "Draw Control Polygon"),
        ("draw_control_points", "Draw Control Points"),
        ("draw_break_points", "Draw Break Points"),
    )
    _COLORS = (
        ("curve_color", "Curve"),
        ("control_color", "Control"),
        ("break_point_color", "Break Points"),
    )

    def __init__(self, canvas: CanvasWidget, index: int, parent=None):
        super().__init__(parent)
        self._canvas = canvas
        self._index = index
        self.setFrameShape(QtWidgets.QFrame.Shape.StyledPanel)

        self.select_button = QtWidgets.QRadioButton(self.layer.name, self)
        self._remove = QtWidgets.QToolButton(self)
        self._remove.setText("✕")
        self._remove.setToolTip("Remove Curve")
        self._count = QtWidgets.QLabel(self)

        self._checks: dict[str, QtWidgets.QCheckBox] = {}
        for attr, label in self._FLAGS:
            box = QtWidgets.QCheckBox(label, self)
            box.toggled.connect(lambda on, a=attr: self._set_flag(a, on))
            self._checks[attr] = box

        self._kind = QtWidgets.QComboBox(self)
        for key in evaluator_registry:
            self._kind.addItem(curve_kind_labels.get(key, key), key)
        self._boundary = QtWidgets.QComboBox(self)
        for bc in BoundaryCondition:
            self._boundary.addItem(bc.value.capitalize(), bc.value)
        self._degree = QtWidgets.QSpinBox(self)
        self._degree.setMinimum(1)

        color_row = QtWidgets.QHBoxLayout()
        color_row.setContentsMargins(0, 0, 0, 0)
        self._color_buttons: dict[str, QtWidgets.QPushButton] = {}
        for attr, label in self._COLORS:
            btn = QtWidgets.QPushButton(label, self)
            btn.clicked.connect(lambda _=False, a=attr: self._pick_color(a))
            self._color_buttons[attr] = btn
            color_row.addWidget(btn)

        head = QtWidgets.QHBoxLayout()
        head.setContentsMargins(0, 0, 0, 0)
        head.addWidget(self.select_button, alignment=QtCore.Qt.AlignmentFlag.AlignLeft)
        head.addWidget(self._remove, alignment=QtCore.Qt.AlignmentFlag.AlignRight)

        form = QtWidgets.QFormLayout()
        form.setContentsMargins(0, 0, 0, 0)
        form.addRow("Kind", self._kind)
        form.addRow("Boundary", self._boundary)
        form.addRow("Degree", self._degree)

        lay = QtWidgets.QVBoxLayout(self)
        lay.setContentsMargins(6, 6, 6, 6)
        lay.addLayout(head)
        lay.addWidget(self._count)
        for box in self._checks.values():
            lay.addWidget(box)
        lay.addLayout(form)
        lay.addLayout(color_row)

        self.select_button.toggled.connect(self._on_select_toggled)
        self._remove.clicked.connect(lambda: self.requestRemove.emit(self._index))
        self._kind.currentIndexChanged.connect(self._on_kind_changed)
        self._boundary.currentIndexChanged.connect(self._on_boundary_changed)
        self._degree.valueChanged.connect(self._on_degree_changed)

        self.refresh()

    @property
    def index(self) -> int:
        return self._index

    @property
    def layer(self) -> CurveLayer:
        return self._canvas[self._index]

    def refresh(self):
        layer = self.layer
        curve = layer.curve
        widgets = [self.select_button, self._kind, self._boundary, self._degree, *self._checks.values()]
        for w in widgets:
            w.blockSignals(True)

        self.select_button.setText(layer.name)
        self.select_button.setChecked(self._index == self._canvas.get_active_idx())
        self._count.setText(f"Number of Control Points: {len(curve.points)}")
        for attr, box in self._checks.items():
            box.setChecked(getattr(layer.display, attr))

        self._kind.setCurrentIndex(max(0, self._kind.findData(curve.kind)))
        self._boundary.setCurrentIndex(max(0, self._boundary.findData(curve.boundary.value)))
        is_bspline = curve.kind == "bspline"
        self._boundary.setEnabled(is_bspline)
        self._degree.setEnabled(is_bspline)
        self._degree.setMaximum(max(curve.max_degree(), curve.degree, 1))
        self._degree.setValue(max(curve.degree, 1))
        for attr, btn in self._color_buttons.items():
            c = color_to_qcolor(getattr(layer.display, attr))
            btn.setStyleSheet(f"border: 2px solid {c.name()};")

        for w in widgets:
            w.blockSignals(False)

    # ---- slots --------------------------------------------------------------
    @QtCore.Slot(bool)
    def _on_select_toggled(self, on: bool):
        if on:
            self.requestActivate.emit(self._index)

    def _set_flag(self, attr: str, on: bool):
        setattr(self.layer.display, attr, on)
        self._canvas.update()

    @QtCore.Slot(int)
    def _on_kind_changed(self, _row: int):
        self.layer.curve.set_kind(self._kind.currentData())
        self._canvas.notify_curve_changed(self._index)

    @QtCore.Slot(int)
    def _on_boundary_changed(self, _row: int):
        self.layer.curve.set_boundary(self._boundary.currentData())
        self._canvas.notify_curve_changed(self._index)

    @QtCore.Slot(int)
    def _on_degree_changed(self, value: int):
        curve = self.layer.curve
        if curve.kind == "bspline" and value != curve.degree:
            curve.set_degree(value)
            self._canvas.notify_curve_changed(self._index)

    def _pick_color(self, attr: str):
        current = color_to_qcolor(getattr(self.layer.display, attr))
        c = QtWidgets.QColorDialog.getColor(current, self, "Pick Color")
        if c.isValid():
            setattr(self.layer.display, attr, qcolor_to_color(c))
            self.refresh()
            self._canvas.update()
