from dataclasses import dataclass
from typing import Sequence

from PySide6 import QtCore, QtGui

from splinedit.core import Renderer, Point, Color
from splinedit.widgets.camera import ViewportCamera
from splinedit.widgets.utils import point_to_qpoint


@dataclass(frozen=True)
class LineStripCall:
    points: tuple[Point, ...]
    color: Color


@dataclass(frozen=True)
class CircleCall:
    center: Point
    radius: float
    color: Color


class PainterRenderer(Renderer):
    """
    Records the draw calls of one frame; the widget replays them on a
    QPainter in paintEvent. World coordinates are mapped through the camera.
    """

    def __init__(self, camera: ViewportCamera, line_width: float = 5.0, curve_width: float = 2.0):
        self.camera = camera
        self.line_width = line_width
        self.curve_width = curve_width
        self._pending: list[LineStripCall | CircleCall] = []
        self.calls: tuple[LineStripCall | CircleCall, ...] = ()

    def begin_frame(self):
        self._pending = []

    def end_frame(self):
        self.calls = tuple(self._pending)

    def linestrip(self, points: Sequence[Point], color: Color, /):
        self._pending.append(LineStripCall(tuple(points), color))

    def circle(self, center: Point, radius: float, color: Color, /):
        self._pending.append(CircleCall(center, radius, color))

    # ---- painting -----------------------------------------------------------
    def _to_screen(self, p: Point) -> QtCore.QPointF:
        return point_to_qpoint(self.camera.world_to_screen(p))

    def paint(self, painter: QtGui.QPainter):
        if not self.camera.active:
            return
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        for call in self.calls:
            if isinstance(call, LineStripCall):
                if len(call.points) < 2:
                    continue
                painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
                painter.setPen(QtGui.QPen(call.color.to_qcolor(), self.curve_width))
                painter.drawPolyline(QtGui.QPolygonF([self._to_screen(p) for p in call.points]))
            else:
                # filled disc, outlined with the gizmo line width
                painter.setBrush(call.color.to_qcolor())
                painter.setPen(QtGui.QPen(call.color.to_qcolor(), self.line_width))
                painter.drawEllipse(self._to_screen(call.center), call.radius, call.radius)
