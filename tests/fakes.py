from __future__ import annotations

from splinedit.core import Camera, InputSource, PointerState, Renderer


class IdentityCamera(Camera):
    def __init__(self, active: bool = True) -> None:
        self.active = active
        self.calls = 0

    def screen_to_world(self, screen_point, /):
        self.calls += 1
        if not self.active:
            return None
        return float(screen_point[0]), float(screen_point[1])


class ScriptedInput(InputSource):
    def __init__(self, *states: PointerState) -> None:
        self.states = list(states)

    def push(self, state: PointerState) -> None:
        self.states.append(state)

    def poll(self) -> PointerState:
        if not self.states:
            return PointerState()
        return self.states.pop(0)


class RecordingRenderer(Renderer):
    def __init__(self) -> None:
        self.lines: list[tuple[tuple, object]] = []
        self.circles: list[tuple[tuple, float, object]] = []
        self.frames = 0

    def begin_frame(self) -> None:
        self.lines = []
        self.circles = []

    def end_frame(self) -> None:
        self.frames += 1

    def linestrip(self, points, color, /) -> None:
        self.lines.append((tuple(points), color))

    def circle(self, center, radius, color, /) -> None:
        self.circles.append((center, radius, color))
