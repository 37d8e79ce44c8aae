import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .control_points import ControlPointStore
from .math import Point

if TYPE_CHECKING:
    from .frame import Camera

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerState:
    """
    Input snapshot for one frame.
      - position: latest pointer position in screen coordinates, None until
        the first move event
      - left_held: left button currently down
      - right_just_pressed: right button went down since the last frame
      - remove_just_pressed: the remove key went down since the last frame
    """
    position: Optional[Point] = None
    left_held: bool = False
    right_just_pressed: bool = False
    remove_just_pressed: bool = False


class InteractionState(Enum):
    IDLE = "Idle"
    DRAGGING = "Dragging"


@dataclass(frozen=True)
class InteractionResult:
    created: bool = False
    removed: bool = False
    selected: Optional[int] = None
    dragged: bool = False


class InteractionStateMachine:
    """
    Maps one PointerState per frame to store mutations.

    Nothing is cached between frames: the only cross-frame marker is the
    store's selected point, which is the drag in progress.
    """

    def __init__(self, store: ControlPointStore, camera: "Camera"):
        self.store = store
        self.camera = camera

    @property
    def state(self) -> InteractionState:
        if self.store.find_selected() is None:
            return InteractionState.IDLE
        return InteractionState.DRAGGING

    def step(self, pointer: PointerState) -> InteractionResult:
        removed = self._handle_remove(pointer)
        selected, dragged = self._handle_drag(pointer)
        created = self._handle_create(pointer)
        return InteractionResult(created=created, removed=removed, selected=selected, dragged=dragged)

    # ---- rules ---------------------------------------------------------------
    def _project(self, pointer: PointerState) -> Optional[Point]:
        if pointer.position is None:
            return None
        world = self.camera.screen_to_world(pointer.position)
        if world is None:
            logger.debug("Pointer (%.1f, %.1f) could not be projected", *pointer.position)
        return world

    def _handle_remove(self, pointer: PointerState) -> bool:
        if not pointer.remove_just_pressed:
            return False
        return self.store.remove_last() is not None

    def _handle_drag(self, pointer: PointerState) -> tuple[Optional[int], bool]:
        if pointer.position is None or not pointer.left_held:
            self.store.clear_selection()
            return None, False

        world = self._project(pointer)
        if world is None:
            return self.store.find_selected(), False

        # an active drag wins over re-selection
        idx = self.store.find_selected()
        if idx is not None:
            self.store.move_selected_to(world)
            return idx, True

        idx = self.store.find_within_radius(world)
        if idx is not None:
            self.store.select(idx)
        return idx, False

    def _handle_create(self, pointer: PointerState) -> bool:
        if not pointer.right_just_pressed:
            return False
        world = self._project(pointer)
        if world is None:
            return False
        self.store.append(world)
        return True
