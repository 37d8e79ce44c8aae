from typing import Optional

from splinedit.core import Camera, Point


class ViewportCamera(Camera):
    """
    2D camera looking at the world origin: world (0, 0) sits at the viewport
    center and the y axis points up. Screen coordinates are widget pixels with
    the origin at the top-left corner.
    """

    def __init__(self, width: float = 0.0, height: float = 0.0):
        self.width = float(width)
        self.height = float(height)

    def resize(self, width: float, height: float):
        self.width = float(width)
        self.height = float(height)

    @property
    def active(self) -> bool:
        return self.width > 0 and self.height > 0

    def screen_to_world(self, screen_point: Point, /) -> Optional[Point]:
        if not self.active:
            return None
        sx, sy = screen_point
        return float(sx) - self.width / 2.0, self.height / 2.0 - float(sy)

    def world_to_screen(self, world_point: Point, /) -> Optional[Point]:
        if not self.active:
            return None
        wx, wy = world_point
        return float(wx) + self.width / 2.0, self.height / 2.0 - float(wy)
