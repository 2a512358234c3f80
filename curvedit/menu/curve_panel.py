from PySide6 import QtWidgets, QtCore

from curvedit.menu.curve_item import CurveItem
from curvedit.widgets import CanvasWidget


class CurvePanel(QtWidgets.QWidget):
    """
    Lists the canvas curves, one CurveItem per curve, plus an "Add Curve" button.
    Rows are rebuilt when curves are added or removed and refreshed when a
    curve changes.
    """

    def __init__(self, canvas: CanvasWidget, parent=None):
        super().__init__(parent)
        self._canvas = canvas
        self._items: list[CurveItem] = []
        self._group = QtWidgets.QButtonGroup(self)
        self._group.setExclusive(True)

        self._rows = QtWidgets.QWidget(self)
        self._rows_lay = QtWidgets.QVBoxLayout(self._rows)
        self._rows_lay.setContentsMargins(0, 0, 0, 0)
        self._rows_lay.addStretch(1)

        scroll = QtWidgets.QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._rows)

        self._btn_add = QtWidgets.QPushButton("Add Curve", self)

        lay = QtWidgets.QVBoxLayout(self)
        lay.setContentsMargins(6, 6, 6, 6)
        lay.addWidget(scroll)
        lay.addWidget(self._btn_add)
        self.setMinimumWidth(300)

        self._btn_add.clicked.connect(self._on_add)
        self._canvas.curvesChanged.connect(self._rebuild)
        self._canvas.activeCurveChanged.connect(self._on_active_changed)
        self._canvas.curveUpdated.connect(self._refresh_row)

        self._rebuild()

    @QtCore.Slot()
    def _rebuild(self):
        for item in self._items:
            self._group.removeButton(item.select_button)
            self._rows_lay.removeWidget(item)
            item.setParent(None)
            item.deleteLater()
        self._items = []

        for i in range(len(self._canvas)):
            item = CurveItem(self._canvas, i, self._rows)
            item.requestActivate.connect(self._canvas.set_active_curve)
            item.requestRemove.connect(self._canvas.remove_curve)
            self._group.addButton(item.select_button)
            self._rows_lay.insertWidget(self._rows_lay.count() - 1, item)
            self._items.append(item)

    @QtCore.Slot(int)
    def _refresh_row(self, idx: int):
        if 0 <= idx < len(self._items):
            self._items[idx].refresh()

    @QtCore.Slot(int)
    def _on_active_changed(self, idx: int):
        if 0 <= idx < len(self._items):
            self._items[idx].refresh()

    @QtCore.Slot()
    def _on_add(self):
        self._canvas.add_curve()
