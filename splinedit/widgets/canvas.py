import logging

from PySide6 import QtCore, QtGui, QtWidgets

from splinedit.config import EditorConfig
from splinedit.core import ControlPointStore, FrameOrchestrator, FrameReport
from splinedit.widgets.camera import ViewportCamera
from splinedit.widgets.input import QtInputSource
from splinedit.widgets.renderer import PainterRenderer
from splinedit.widgets.utils import qpoint_to_point

logger = logging.getLogger(__name__)


class CanvasWidget(QtWidgets.QWidget):
    """
    View/controller for the curve editor.
    Owns the control point store and runs one engine tick per timer frame:
      - left drag: move the point under the cursor
      - right click: append a point
      - remove key (C): drop the last point
    """

    pointsChanged = QtCore.Signal(int)     # emitted when the number of points changes, arg = count

    def __init__(self, config: EditorConfig | None = None, parent=None):
        super().__init__(parent)
        self._config = config or EditorConfig()

        # model
        self._store = ControlPointStore.from_config(self._config)

        # collaborators
        self._camera = ViewportCamera(self.width(), self.height())
        self._input = QtInputSource(remove_key=self._config.remove_key)
        self._renderer = PainterRenderer(self._camera, line_width=self._config.line_width)
        self._orchestrator = FrameOrchestrator(
            self._store, self._input, self._camera, self._renderer, self._config
        )
        self._last_count = 0

        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setAutoFillBackground(True)
        pal = self.palette()
        pal.setColor(QtGui.QPalette.ColorRole.Window, QtGui.QColor(30, 30, 30))
        self.setPalette(pal)

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(self._config.frame_interval_ms)
        self._timer.timeout.connect(self.tick)

    # --- public API -------------------------
    @property
    def store(self) -> ControlPointStore:
        return self._store

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def renderer(self) -> PainterRenderer:
        return self._renderer

    def start(self):
        self._timer.start()

    @QtCore.Slot()
    def tick(self) -> FrameReport:
        report = self._orchestrator.tick()
        count = len(self._store)
        if count != self._last_count:
            self._last_count = count
            self.pointsChanged.emit(count)
        self.update()
        return report

    # ---- Size hints ---------------------------------------------------------
    def sizeHint(self):
        return QtCore.QSize(800, 600)

    def minimumSizeHint(self):
        return QtCore.QSize(200, 200)

    # ---- Qt events ----------------------------------------------------------
    def resizeEvent(self, e: QtGui.QResizeEvent):
        self._camera.resize(e.size().width(), e.size().height())
        super().resizeEvent(e)

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        self._input.on_mouse_move(qpoint_to_point(e.position()))

    def mousePressEvent(self, e: QtGui.QMouseEvent):
        self.setFocus()
        self._input.on_mouse_press(e.button(), qpoint_to_point(e.position()))

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        self._input.on_mouse_release(e.button(), qpoint_to_point(e.position()))

    def keyPressEvent(self, e: QtGui.QKeyEvent):
        self._input.on_key_press(e.key(), e.isAutoRepeat())
        super().keyPressEvent(e)

    def leaveEvent(self, e):
        self._input.on_leave()
        super().leaveEvent(e)

    def paintEvent(self, _):
        painter = QtGui.QPainter(self)
        self._renderer.paint(painter)
        painter.end()
