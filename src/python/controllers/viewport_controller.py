"""Viewport controller for the PictureFrame application."""

from dataclasses import replace
from typing import Any
from PyQt6.QtCore import QObject, pyqtSignal
import logging

import view_state as vs
from config_manager import config
from custom_types import Anchor, Point, Size, Surface
from enums import CursorShape
from events import Event, Transition, handle
from image_utils import image_dimensions
from view_state import ViewState

logger = logging.getLogger(__name__)


class ViewportController(QObject):
    """Owns the zoom/placement state of one image shown on one surface.

    The controller keeps a non-owning reference to the image and reads the
    surface dimensions on every transform. All transform math lives in
    `view_state`; this class stores the resulting state and tells the
    surface what to do through signals.

    Signals:
        repaint_requested: The surface should redraw
        zoom_changed(float): The scale changed
        cursor_changed(str): The pointer affordance changed (CursorShape value)
        image_changed: The image reference was replaced
    """

    repaint_requested = pyqtSignal()
    zoom_changed = pyqtSignal(float)
    cursor_changed = pyqtSignal(str)
    image_changed = pyqtSignal()

    def __init__(
        self,
        surface: Surface,
        image: Any = None,
        max_zoom: float | None = None,
        zoom_step: float | None = None,
        smoothing: bool | None = None,
        interactive: bool | None = None,
    ) -> None:
        """Initialize ViewportController.

        Args:
            surface: Object reporting the display size through width()/height()
            image: Optional initial image (see image_utils.image_dimensions)
            max_zoom: Upper zoom bound, defaults to viewport.maxZoom from config
            zoom_step: Multiplier of zoom_in/zoom_out, defaults to viewport.zoomStep
            smoothing: Interpolation hint, defaults to viewport.smoothing
            interactive: Whether pointer events are honored, defaults to viewport.interactive
        """
        super().__init__()
        viewport_cfg = config.get_viewport_config()

        if max_zoom is None:
            max_zoom = viewport_cfg.get("maxZoom", vs.DEFAULT_MAX_SCALE)
        if smoothing is None:
            smoothing = viewport_cfg.get("smoothing", False)
        if interactive is None:
            interactive = viewport_cfg.get("interactive", True)

        self.surface = surface
        self.zoom_step: float = zoom_step or viewport_cfg.get("zoomStep", vs.ZOOM_STEP)
        self._state = vs.set_max_scale(
            ViewState(smoothing=bool(smoothing), interactive=bool(interactive)), max_zoom
        )
        self._cursor = CursorShape.DEFAULT

        self._image: Any = image
        self._image_size: Size | None = image_dimensions(image)
        if self._image_size is not None:
            self.refresh()

    # ------------------------------------------------------------------
    # State bookkeeping
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    def surface_size(self) -> Size:
        """Current surface dimensions, negative values read as zero."""
        return Size(max(0, self.surface.width()), max(0, self.surface.height()))

    def _commit(self, new_state: ViewState, repaint: bool = True, cursor: CursorShape | None = None) -> None:
        old_scale = self._state.scale
        self._state = new_state

        if new_state.scale != old_scale:
            self.zoom_changed.emit(new_state.scale)
        if cursor is not None and cursor != self._cursor:
            self._cursor = cursor
            self.cursor_changed.emit(str(cursor))
        if repaint:
            self.repaint_requested.emit()

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def set_zoom(self, requested: float, anchor: Anchor | None = None) -> None:
        """Zoom to `requested`, clamped to the zoom bounds, around `anchor`.

        Without an anchor the surface center is used. No-op without an image.
        """
        if self._image_size is None:
            return
        new_state = vs.apply_zoom(self._state, self._image_size, self.surface_size(),
                                  requested, anchor)
        logger.debug("Zoom requested %.4f -> %.4f (fitted=%s)",
                     requested, new_state.scale, new_state.fitted)
        self._commit(new_state, cursor=new_state.cursor)

    def refresh(self, anchor: Anchor | None = None) -> None:
        """Recompute the minimum zoom and re-apply fit or the current zoom."""
        if self._image_size is None:
            return
        new_state = vs.refresh(self._state, self._image_size, self.surface_size(), anchor)
        logger.debug("Refreshed for surface %s: min scale %.4f, scale %.4f",
                     self.surface_size(), new_state.scale_min, new_state.scale)
        self._commit(new_state, cursor=new_state.cursor)

    def pan(self, dx: int, dy: int) -> None:
        """Move the image by (dx, dy); ignored while fitted."""
        new_state = vs.pan(self._state, self._image_size, self.surface_size(), int(dx), int(dy))
        self._commit(new_state)

    def set_location(self, x: int, y: int) -> None:
        """Place the image top-left corner at (x, y), clamped to valid values."""
        new_state = vs.set_location(self._state, self._image_size, self.surface_size(),
                                    int(x), int(y))
        self._commit(new_state)

    def fit(self) -> None:
        """Show the whole image, centered."""
        self.set_zoom(self._state.scale_min)

    def original(self) -> None:
        """Show the image at one image pixel per surface pixel."""
        self.set_zoom(1.0)

    def zoom_in(self, anchor: Anchor | None = None) -> None:
        self.set_zoom(self._state.scale * self.zoom_step, anchor)

    def zoom_out(self, anchor: Anchor | None = None) -> None:
        self.set_zoom(self._state.scale / self.zoom_step, anchor)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_image(self, image: Any, fit_on_load: bool = True) -> None:
        """Replace the displayed image.

        Args:
            image: The new image, or None to clear the frame
            fit_on_load: Fit the new image to the surface. Fitting is sticky:
                         passing False keeps an already fitted view fitted.

        Raises:
            TypeError, ValueError: From image_utils.image_dimensions when the
                                   image has no usable dimensions. The
                                   current image is kept in that case.
        """
        image_size = image_dimensions(image)
        self._image = image
        self._image_size = image_size

        if image_size is None:
            logger.debug("Image cleared")
            self._commit(vs.cleared(self._state), cursor=CursorShape.DEFAULT)
        else:
            logger.debug("Image set (%dx%d), fit_on_load=%s",
                         image_size.width, image_size.height, fit_on_load)
            self._state = vs.prepare_image(self._state, fit_on_load)
            self.refresh()

        self.image_changed.emit()

    def set_max_zoom(self, value: float) -> None:
        """Set the maximum zoom; values below 1 become 1."""
        new_state = vs.set_max_scale(self._state, value)
        if self._image_size is not None and new_state.scale > new_state.scale_max:
            self._state = new_state
            self.set_zoom(new_state.scale)
            return
        self._commit(new_state, repaint=False)

    def set_interactive(self, status: bool) -> None:
        self._commit(replace(self._state, interactive=bool(status), drag_origin=None),
                     repaint=False)

    def set_smoothing(self, status: bool) -> None:
        self._commit(replace(self._state, smoothing=bool(status)))

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle(self, event: Event) -> Transition:
        """Apply an input event from the surface and return the transition."""
        transition = handle(self._state, event, self._image_size, self.surface_size(),
                            self.zoom_step)
        self._commit(transition.state, transition.repaint, transition.cursor)
        return transition

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def image(self) -> Any:
        return self._image

    @property
    def image_size(self) -> Size:
        """Size of the image at the current zoom."""
        return self._state.size

    @property
    def image_location(self) -> Point:
        """Top-left corner of the image on the surface."""
        return self._state.offset

    @property
    def scale(self) -> float:
        return self._state.scale

    @property
    def min_scale(self) -> float:
        return self._state.scale_min

    @property
    def max_scale(self) -> float:
        return self._state.scale_max

    @property
    def cursor_shape(self) -> CursorShape:
        return self._cursor

    def is_fitted(self) -> bool:
        return self._state.fitted

    def is_original(self) -> bool:
        return self._state.is_original

    def is_interactive(self) -> bool:
        return self._state.interactive

    def is_smoothing(self) -> bool:
        return self._state.smoothing

    def should_smooth(self) -> bool:
        """Whether the surface should interpolate when drawing right now."""
        return self._state.should_smooth
