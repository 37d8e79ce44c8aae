from .camera import ViewportCamera
from .input import QtInputSource
from .renderer import PainterRenderer
from .canvas import CanvasWidget

__all__ = [
    "CanvasWidget",
    "PainterRenderer",
    "QtInputSource",
    "ViewportCamera",
]
