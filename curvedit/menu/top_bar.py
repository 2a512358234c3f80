import logging
from pathlib import Path

from PySide6 import QtCore, QtWidgets

from curvedit.formats import SUPPORTED_EXTENSIONS
from curvedit.widgets import CanvasWidget

logger = logging.getLogger(__name__)


class Bar(QtWidgets.QToolBar):
    """Output file name + save, clear active curve, fade toggle and sample count."""

    def __init__(self, canvas: CanvasWidget):
        super().__init__()

        self.canvas = canvas
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))

        self.file_name = QtWidgets.QLineEdit()
        self.file_name.setPlaceholderText("Output File")
        self.save_button = QtWidgets.QPushButton("Save Curves")
        self.clear_button = QtWidgets.QPushButton("Clear Curve")
        self.fade_box = QtWidgets.QCheckBox("Fade Unselected Curves")
        self.fade_box.setChecked(self.canvas.fade_unselected)
        self.samples = QtWidgets.QSpinBox()
        self.samples.setRange(2, 10000)
        self.samples.setValue(self.canvas.n_samples)
        self.samples.setPrefix("Samples: ")

        self.addWidget(self.file_name)
        self.addWidget(self.save_button)
        self.addSeparator()
        self.addWidget(self.clear_button)
        self.addWidget(self.fade_box)
        self.addWidget(self.samples)

        self.save_button.clicked.connect(self._save)
        self.clear_button.clicked.connect(self.canvas.clear_active)
        self.fade_box.toggled.connect(self.canvas.set_fade_unselected)
        self.samples.valueChanged.connect(self.canvas.set_n_samples)

    @QtCore.Slot()
    def _save(self):
        name = self.file_name.text().strip()
        if not name:
            QtWidgets.QMessageBox.information(self, "Save Curves", "A file name is required")
            return
        path = Path(name)
        if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            path = path.with_suffix(".dat")
        try:
            self.canvas.save_file(path)
        except (OSError, ValueError) as e:
            logger.error("Failed to save curves to %s: %s", path, e)
            QtWidgets.QMessageBox.warning(self, "Save Curves", f"Could not save curves:\n{e}")
            return
        self.file_name.clear()
        QtWidgets.QMessageBox.information(self, "Save Curves", f"Curves saved to {path}")
