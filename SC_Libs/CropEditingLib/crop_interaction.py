"""
Interaction state machine for the crop editor.

Translates backend-neutral pointer and key input into mutations of a
CropRegionModel. The gesture state is an explicit tagged variant:

    Idle --press inside body--> Dragging --release--> Idle
    Idle --press on handle----> Resizing --release--> Idle

A release always returns to Idle and keeps whatever the gesture produced.

Classes:
    EditorKey: Keys the editor reacts to
    KeyModifiers: Shift/Ctrl state of a key press
    KeyOutcome: What a key press asks the caller to do
    PointerButton: Mouse buttons
    HitZone: Where a point lies relative to the region
    Idle, Dragging, Resizing: Gesture states
    CropInteraction: The state machine
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from SC_Libs.CropEditingLib.crop_config import CropToolConfig
from SC_Libs.CropEditingLib.crop_models import ImagePoint
from SC_Libs.CropEditingLib.crop_region_model import CropRegionModel
from SC_Libs.CropEditingLib.view_transform import ViewTransform

logger = logging.getLogger(__name__)


class EditorKey(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    GROW = "grow"
    SHRINK = "shrink"
    SAVE = "save"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyModifiers:
    shift: bool = False
    ctrl: bool = False


NO_MODIFIERS = KeyModifiers()


class KeyOutcome(Enum):
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    SAVE_REQUESTED = "save"
    QUIT_REQUESTED = "quit"


class PointerButton(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    MIDDLE = "middle"


class HitZone(Enum):
    OUTSIDE = "outside"
    BODY = "body"
    RESIZE_HANDLE = "resize_handle"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    """Moving the region; anchor is the pointer offset from the top-left."""
    anchor_x: float
    anchor_y: float


@dataclass(frozen=True)
class Resizing:
    """Resizing from the bottom-right; anchor is that corner minus the pointer."""
    anchor_x: float
    anchor_y: float


InteractionState = Union[Idle, Dragging, Resizing]

IDLE = Idle()

ARROW_DIRECTIONS: Dict[EditorKey, Tuple[int, int]] = {
    EditorKey.LEFT: (-1, 0),
    EditorKey.RIGHT: (1, 0),
    EditorKey.UP: (0, -1),
    EditorKey.DOWN: (0, 1),
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class CropInteraction:
    """
    Drives a CropRegionModel from pointer and keyboard input.

    Pointer handlers take display-space points together with the
    ViewTransform of the moment, since the window may have been resized
    between events.
    """

    def __init__(self, model: CropRegionModel, config: Optional[CropToolConfig] = None):
        self.model = model
        self.config = config or model.config
        self._state: InteractionState = IDLE

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def is_idle(self) -> bool:
        return isinstance(self._state, Idle)

    def hit_test(self, image_point: ImagePoint) -> HitZone:
        region = self.model.region
        if not region.contains(image_point):
            return HitZone.OUTSIDE

        px, py = image_point
        threshold = self.config.handle_threshold
        if abs(px - region.right) < threshold and abs(py - region.bottom) < threshold:
            return HitZone.RESIZE_HANDLE
        return HitZone.BODY

    def pointer_down(
        self,
        display_point: ImagePoint,
        transform: ViewTransform,
        button: PointerButton = PointerButton.PRIMARY,
    ) -> bool:
        """
        Start a drag or resize gesture.

        Args:
            display_point: Pointer position in display pixels
            transform: Current view transform
            button: Button that went down; only the primary one is used

        Returns:
            True if a gesture started
        """
        if button is not PointerButton.PRIMARY:
            return False

        point = transform.to_image(display_point)
        zone = self.hit_test(point)
        region = self.model.region
        px, py = point

        if zone is HitZone.RESIZE_HANDLE:
            self._state = Resizing(anchor_x=region.right - px, anchor_y=region.bottom - py)
        elif zone is HitZone.BODY:
            self._state = Dragging(anchor_x=px - region.x, anchor_y=py - region.y)
        else:
            return False

        logger.debug(f"Gesture started: {self._state}")
        return True

    def pointer_move(self, display_point: ImagePoint, transform: ViewTransform) -> bool:
        """
        Continue the active gesture.

        Returns:
            True if the crop region changed
        """
        state = self._state
        if isinstance(state, Idle):
            return False

        px, py = transform.to_image(display_point)

        if isinstance(state, Dragging):
            return self.model.move_to(
                _round_half_up(px - state.anchor_x),
                _round_half_up(py - state.anchor_y),
            )

        region = self.model.region
        right = _round_half_up(px + state.anchor_x)
        bottom = _round_half_up(py + state.anchor_y)
        return self.model.resize_from_corner(right - region.x, bottom - region.y)

    def pointer_up(self, button: PointerButton = PointerButton.PRIMARY) -> bool:
        """
        End the active gesture.

        Returns:
            True if a gesture was active
        """
        if button is not PointerButton.PRIMARY or self.is_idle:
            return False
        logger.debug(f"Gesture ended: {self._state}")
        self._state = IDLE
        return True

    def handle_key(self, key: EditorKey, modifiers: KeyModifiers = NO_MODIFIERS) -> KeyOutcome:
        """
        Apply a key press.

        Args:
            key: Key that went down
            modifiers: Shift/Ctrl state

        Returns:
            KeyOutcome telling the caller whether to repaint, export or quit
        """
        if key is EditorKey.SAVE:
            return KeyOutcome.SAVE_REQUESTED
        if key is EditorKey.QUIT:
            return KeyOutcome.QUIT_REQUESTED

        if key is EditorKey.GROW:
            changed = self.model.resize_centered(self.config.resize_step)
        elif key is EditorKey.SHRINK:
            changed = self.model.resize_centered(-self.config.resize_step)
        else:
            changed = self._handle_arrow(key, modifiers)

        return KeyOutcome.CHANGED if changed else KeyOutcome.UNCHANGED

    def _handle_arrow(self, key: EditorKey, modifiers: KeyModifiers) -> bool:
        dx, dy = ARROW_DIRECTIONS[key]

        if self.config.modifier_keys_enabled:
            if modifiers.ctrl:
                return self.model.page_jump(dx, dy)
            if modifiers.shift:
                return self.model.nudge_size(dx, dy)

        return self.model.move_by(dx, dy)
