import argparse
import logging
import sys
from pathlib import Path

from curvedit.core import Curve, EditorConfig, MalformedFile, load_config
from curvedit.formats import load_curves

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="curvedit",
        description="Interactive Bezier and B-spline curve editor.",
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE",
        help="Curve files to open (.dat, .crv or .json)",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None,
        help="Path to a YAML editor config file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug messages",
    )
    return parser.parse_args(argv)


def load_startup_curves(paths: list[str]) -> list[tuple[str, list[Curve]]]:
    """Load every file given on the command line; any failure is fatal."""
    return [(Path(p).stem, load_curves(p)) for p in paths]


def run(loaded: list[tuple[str, list[Curve]]], config: EditorConfig) -> int:
    from PySide6 import QtCore, QtWidgets

    from curvedit.menu import Bar, CurvePanel
    from curvedit.widgets import CanvasWidget

    class MainWidget(QtWidgets.QWidget):
        def __init__(self):
            super().__init__()

            self.main_layout = QtWidgets.QHBoxLayout()
            self.layout = QtWidgets.QVBoxLayout(self)

            self.canvas = CanvasWidget(config=config, parent=self)
            self.curve_panel = CurvePanel(self.canvas, self)
            self.top_bar = Bar(self.canvas)

            self.main_layout.addWidget(self.curve_panel)
            self.main_layout.addWidget(self.canvas, stretch=1)
            self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
            self.layout.addLayout(self.main_layout)

            for stem, curves in loaded:
                for i, c in enumerate(curves):
                    name = stem if len(curves) == 1 else f"{stem} {i + 1}"
                    self.canvas.add_curve(c, name=name, activate=False)
            if len(self.canvas) == 0:
                self.canvas.add_curve()
            self.canvas.set_active_curve(0)

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    widget = MainWidget()
    widget.setWindowTitle("curvedit")
    widget.resize(1280, 720)
    widget.show()
    return app.exec()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error("Invalid config: %s", e)
        return 1

    try:
        loaded = load_startup_curves(args.files)
    except MalformedFile as e:
        logger.error("Failed to load curves: %s", e)
        return 1

    return run(loaded, config)


if __name__ == "__main__":
    sys.exit(main())
