import argparse
import json
import logging
import sys

from PySide6 import QtCore, QtWidgets

from splinedit.config import EditorConfig
from splinedit.logging_config import setup_logging
from splinedit.widgets import CanvasWidget

logger = logging.getLogger(__name__)

HELP_TEXT = "Right click: add point   |   Left drag: move point   |   {key}: remove last point"


class MyWidget(QtWidgets.QWidget):
    def __init__(self, config: EditorConfig):
        super().__init__()
        self.setWindowTitle("splinedit")

        self.layout = QtWidgets.QVBoxLayout(self)
        self.top_bar = QtWidgets.QHBoxLayout()

        self.help = QtWidgets.QLabel(HELP_TEXT.format(key=config.remove_key))
        self.count = QtWidgets.QLabel("Points: 0")
        self.canvas = CanvasWidget(config=config, parent=self)

        self.top_bar.addWidget(self.help, alignment=QtCore.Qt.AlignmentFlag.AlignLeft)
        self.top_bar.addWidget(self.count, alignment=QtCore.Qt.AlignmentFlag.AlignRight)
        self.layout.addLayout(self.top_bar)
        self.layout.addWidget(self.canvas, stretch=1)

        self.canvas.pointsChanged.connect(self.refresh)
        self.canvas.start()

    def refresh(self, count: int):
        self.count.setText(f"Points: {count}")


def load_config(path: str | None) -> EditorConfig:
    if not path:
        return EditorConfig()
    with open(path, "r", encoding="utf-8") as f:
        return EditorConfig.from_dict(json.load(f))


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive 2D curve editor")
    parser.add_argument("--config", help="JSON file overriding the editor settings")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", help="also write the log to this file")
    # Qt keeps its own options
    args, _ = parser.parse_known_args(argv)
    return args


def main() -> None:
    args = parse_args(sys.argv[1:])
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        logger.error("Could not load config %s: %s", args.config, exc)
        sys.exit(2)

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("splinedit")

    widget = MyWidget(config)
    widget.resize(800, 600)
    widget.show()
    logger.info("Editor started")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
