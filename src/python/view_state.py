"""
ViewState: immutable zoom and image placement for the picture frame.

Every transform in this module is a pure function taking the current state,
the image and surface dimensions, and returning a new state. Nothing here
touches Qt, so the arithmetic can be unit tested without a display.
"""

import math
from dataclasses import dataclass, field, replace

from custom_types import Anchor, Point, Size
from enums import CursorShape

DEFAULT_MAX_SCALE = 20.0
ZOOM_STEP = 1.25


@dataclass(frozen=True)
class ViewState:
    """Scale, scale bounds and image location relative to the surface."""
    scale: float = 0.0
    scale_min: float = 0.0
    scale_max: float = DEFAULT_MAX_SCALE
    offset: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)
    fitted: bool = True
    smoothing: bool = False
    interactive: bool = True
    # Last pointer position of an active drag, None outside a drag
    drag_origin: Point | None = None

    @property
    def is_original(self) -> bool:
        """True when one image pixel maps to one surface pixel."""
        return self.scale == 1.0

    @property
    def should_smooth(self) -> bool:
        """Interpolate when drawing only while shrinking the image."""
        return self.smoothing and self.scale < 1.0

    @property
    def cursor(self) -> CursorShape:
        return CursorShape.DEFAULT if self.fitted else CursorShape.MOVE


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scaled_size(scale: float, image: Size) -> Size:
    """Size of the image drawn at `scale`."""
    return Size(round_half_up(scale * image.width), round_half_up(scale * image.height))


def compute_min_scale(image: Size, surface: Size) -> float:
    """Largest scale that shows the whole image, never above 1.

    The image dimensions must be non-zero; a zero-sized surface yields 0.
    """
    fit_w = surface.width / image.width
    fit_h = surface.height / image.height
    return max(0.0, min(1.0, fit_w, fit_h))


def clamp_scale(requested: float, scale_min: float, scale_max: float) -> float:
    """Clamp `requested` into [scale_min, scale_max]; the upper bound wins on conflict."""
    if requested >= scale_max:
        return scale_max
    return requested if requested > scale_min else scale_min


def anchored_axis(offset: int, anchor: int, factor: float, bias: float) -> int:
    """Move `offset` so the content under `anchor` stays under it.

    `bias` is +0.5 when zooming in and -0.5 when zooming out; adding it
    before truncating rounds half away from zero in the direction of the
    motion, which makes a zoom in followed by a zoom out land back on the
    starting offset.
    """
    return offset - int((offset - anchor) * factor + bias)


def center_or_clamp_axis(offset: int, surface: int, scaled: int) -> int:
    """Center the image on an axis where it fits, otherwise keep the surface covered."""
    slack = surface - scaled
    if slack > 0:
        return slack >> 1
    if slack == 0 or offset > 0:
        return 0
    if slack > offset:
        return slack
    return offset


def clamp_overflow_axis(value: int, current: int, surface: int, scaled: int) -> int:
    """Clamp `value` into [surface - scaled, 0] when the image overflows the axis.

    An axis where the image fits keeps `current`.
    """
    lower = surface - scaled
    if lower >= 0:
        return current
    return min(max(value, lower), 0)


def apply_zoom(
    state: ViewState,
    image: Size | None,
    surface: Size,
    requested: float,
    anchor: Anchor | None = None,
) -> ViewState:
    """Zoom to `requested` keeping the content under `anchor` stationary.

    The scale is clamped into the state's bounds, `fitted` is recomputed and
    the offset is centered or clamped on each axis. Calling this with the
    current scale only re-runs the clamp, which is how a resize is handled.
    Without an image the state is returned unchanged.
    """
    if image is None:
        return state

    point = (anchor or Anchor.center()).resolve(surface)

    scale = clamp_scale(requested, state.scale_min, state.scale_max)
    size = scaled_size(scale, image)
    fitted = scale == state.scale_min

    bias = 0.5 if scale > state.scale else -0.5
    factor = 1.0 - scale / state.scale if state.scale else 0.0

    x = anchored_axis(state.offset.x, point.x, factor, bias)
    x = center_or_clamp_axis(x, surface.width, size.width)

    y = anchored_axis(state.offset.y, point.y, factor, bias)
    y = center_or_clamp_axis(y, surface.height, size.height)

    return replace(state, scale=scale, size=size, fitted=fitted, offset=Point(x, y))


def zoom_in(
    state: ViewState,
    image: Size | None,
    surface: Size,
    anchor: Anchor | None = None,
    step: float = ZOOM_STEP,
) -> ViewState:
    return apply_zoom(state, image, surface, state.scale * step, anchor)


def zoom_out(
    state: ViewState,
    image: Size | None,
    surface: Size,
    anchor: Anchor | None = None,
    step: float = ZOOM_STEP,
) -> ViewState:
    return apply_zoom(state, image, surface, state.scale / step, anchor)


def refresh(
    state: ViewState,
    image: Size | None,
    surface: Size,
    anchor: Anchor | None = None,
) -> ViewState:
    """Recompute the minimum scale and re-apply the current mode.

    A fitted view follows the new minimum; otherwise the current scale is
    kept and only the offset is re-clamped around `anchor`.
    """
    if image is None:
        return state

    scale_min = compute_min_scale(image, surface)
    state = replace(state, scale_min=scale_min)
    requested = scale_min if state.fitted else state.scale
    return apply_zoom(state, image, surface, requested, anchor)


def pan(state: ViewState, image: Size | None, surface: Size, dx: int, dy: int) -> ViewState:
    """Translate the image by (dx, dy) along the axes where it overflows.

    A fitted image cannot be moved.
    """
    if image is None or state.fitted:
        return state

    x = clamp_overflow_axis(state.offset.x + dx, state.offset.x, surface.width, state.size.width)
    y = clamp_overflow_axis(state.offset.y + dy, state.offset.y, surface.height, state.size.height)
    return replace(state, offset=Point(x, y))


def set_location(state: ViewState, image: Size | None, surface: Size, x: int, y: int) -> ViewState:
    """Place the image top-left at (x, y) along the axes where it overflows.

    Unlike `pan` this ignores the fitted flag. An axis where the image fits
    keeps its current (centered) offset.
    """
    if image is None:
        return state

    new_x = clamp_overflow_axis(x, state.offset.x, surface.width, state.size.width)
    new_y = clamp_overflow_axis(y, state.offset.y, surface.height, state.size.height)
    return replace(state, offset=Point(new_x, new_y))


def set_max_scale(state: ViewState, value: float) -> ViewState:
    """Set the upper zoom bound, never below 1."""
    return replace(state, scale_max=max(float(value), 1.0))


def prepare_image(state: ViewState, fit_on_load: bool) -> ViewState:
    """Prepare the state for a new image before `refresh`.

    Fitting is sticky: loading without fitting never clears an existing
    fitted mode. A fitted load restarts from scale 0 so the first zoom
    application does not move the offset.
    """
    fitted = state.fitted or fit_on_load
    return replace(
        state,
        fitted=fitted,
        scale=0.0 if fitted else state.scale,
        drag_origin=None,
    )


def cleared(state: ViewState) -> ViewState:
    """State once the image has been removed."""
    return replace(
        state,
        scale=0.0,
        scale_min=0.0,
        offset=Point(),
        size=Size(),
        drag_origin=None,
    )
