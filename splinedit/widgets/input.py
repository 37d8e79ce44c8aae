from PySide6 import QtCore

from splinedit.core import InputSource, PointerState, Point


class QtInputSource(InputSource):
    """
    Collects Qt mouse/key events between frames and hands them to the engine
    as one PointerState per frame.

    Button/key "just pressed" edges stay latched until the next poll, so a
    click shorter than one frame is never lost.
    """

    def __init__(self, remove_key: str = "C"):
        # Qt key codes of letters are their upper-case code points
        self.remove_key = ord(remove_key.upper())
        self._position: Point | None = None
        self._left_held = False
        self._right_pressed = False
        self._remove_pressed = False

    # ---- event feed ----------------------------------------------------------
    def on_mouse_move(self, pos: Point):
        # only the latest sample matters
        self._position = (float(pos[0]), float(pos[1]))

    def on_mouse_press(self, button: QtCore.Qt.MouseButton, pos: Point):
        self.on_mouse_move(pos)
        if button == QtCore.Qt.MouseButton.LeftButton:
            self._left_held = True
        elif button == QtCore.Qt.MouseButton.RightButton:
            self._right_pressed = True

    def on_mouse_release(self, button: QtCore.Qt.MouseButton, pos: Point):
        self.on_mouse_move(pos)
        if button == QtCore.Qt.MouseButton.LeftButton:
            self._left_held = False

    def on_key_press(self, key: int, auto_repeat: bool = False):
        if int(key) == self.remove_key and not auto_repeat:
            self._remove_pressed = True

    def on_leave(self):
        self._left_held = False

    # ---- InputSource ---------------------------------------------------------
    def poll(self) -> PointerState:
        state = PointerState(
            position=self._position,
            left_held=self._left_held,
            right_just_pressed=self._right_pressed,
            remove_just_pressed=self._remove_pressed,
        )
        self._right_pressed = False
        self._remove_pressed = False
        return state
