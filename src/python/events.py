"""
Input events and the pure reducer that applies them to a ViewState.

The Qt host translates its mouse, wheel and resize events into the
dataclasses below and feeds them to `handle`, which returns the next state
together with what the surface has to do about it (repaint, cursor change).
"""

import logging
from dataclasses import dataclass, replace
from typing import NamedTuple

import view_state as vs
from custom_types import Anchor, Point, Size
from enums import CursorShape, PointerButton
from view_state import ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerPressed:
    position: Point
    button: PointerButton = PointerButton.PRIMARY


@dataclass(frozen=True)
class PointerDragged:
    position: Point


@dataclass(frozen=True)
class PointerReleased:
    position: Point


@dataclass(frozen=True)
class PointerEntered:
    pass


@dataclass(frozen=True)
class PointerExited:
    pass


@dataclass(frozen=True)
class WheelRotated:
    """Wheel rotation; negative values move away from the user (zoom in)."""
    rotation: float
    position: Point


@dataclass(frozen=True)
class SurfaceResized:
    size: Size


Event = (
    PointerPressed | PointerDragged | PointerReleased | PointerEntered
    | PointerExited | WheelRotated | SurfaceResized
)

POINTER_EVENTS = (
    PointerPressed, PointerDragged, PointerReleased, PointerEntered,
    PointerExited, WheelRotated,
)


class Transition(NamedTuple):
    """Result of handling one event.

    Attributes:
        state: The next view state
        repaint: Whether the surface should be redrawn
        cursor: Cursor to show, or None to leave it unchanged
    """
    state: ViewState
    repaint: bool = False
    cursor: CursorShape | None = None


def handle(
    state: ViewState,
    event: Event,
    image: Size | None,
    surface: Size,
    zoom_step: float = vs.ZOOM_STEP,
) -> Transition:
    """Apply `event` to `state`.

    Args:
        state: Current view state
        event: One of the event dataclasses of this module
        image: Dimensions of the displayed image, None when there is none
        surface: Current surface dimensions (ignored for SurfaceResized,
                 which carries its own)
        zoom_step: Scale multiplier applied per wheel notch

    Returns:
        Transition: next state, repaint flag and cursor change

    Pointer and wheel events are ignored while the state is not interactive.
    """
    if isinstance(event, POINTER_EVENTS) and not state.interactive:
        return Transition(state)

    match event:
        case SurfaceResized(size=size):
            if image is None:
                return Transition(state)
            new_state = vs.refresh(state, image, size)
            return Transition(new_state, True, new_state.cursor)

        case PointerPressed(position=position, button=button):
            if image is None or button is not PointerButton.PRIMARY:
                return Transition(state)
            return Transition(replace(state, drag_origin=position))

        case PointerDragged(position=position):
            if image is None or state.drag_origin is None:
                return Transition(state)
            dx = position.x - state.drag_origin.x
            dy = position.y - state.drag_origin.y
            new_state = vs.pan(state, image, surface, dx, dy)
            return Transition(replace(new_state, drag_origin=position), True)

        case PointerReleased():
            return Transition(replace(state, drag_origin=None))

        case PointerEntered():
            return Transition(state, cursor=None if state.fitted else CursorShape.MOVE)

        case PointerExited():
            return Transition(state, cursor=None if state.fitted else CursorShape.DEFAULT)

        case WheelRotated(rotation=rotation, position=position):
            if image is None:
                return Transition(state)
            anchor = Anchor.at(position.x, position.y)
            if rotation < 0:
                new_state = vs.zoom_in(state, image, surface, anchor, zoom_step)
            else:
                new_state = vs.zoom_out(state, image, surface, anchor, zoom_step)
            logger.debug("Wheel %.2f at (%d, %d): scale %.4f -> %.4f",
                         rotation, position.x, position.y, state.scale, new_state.scale)
            return Transition(new_state, True, new_state.cursor)

    raise TypeError(f"Unsupported event: {event!r}")
