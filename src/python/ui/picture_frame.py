"""
Picture frame widget.

Shows one image that can be zoomed with the mouse wheel and moved by
dragging with the left button. A fitted image stays fully visible and
centered while the widget is resized. The widget is only the host: it
turns Qt events into viewport events and paints what the
ViewportController computed.
"""

from typing import Any, Optional
import logging

import numpy as np
from PyQt6.QtCore import QRect, QSize, Qt
from PyQt6.QtGui import (
    QColor, QEnterEvent, QImage, QKeyEvent, QMouseEvent, QPainter, QPaintEvent,
    QPixmap, QResizeEvent, QWheelEvent,
)
from PyQt6.QtWidgets import QWidget

from config_manager import config
from controllers.viewport_controller import ViewportController
from custom_types import Point, Size
from enums import CursorShape, PointerButton
from events import (
    PointerDragged, PointerEntered, PointerExited, PointerPressed,
    PointerReleased, SurfaceResized, WheelRotated,
)
from image_utils import array_to_qimage, image_dimensions
from ui.shortcuts import KeyboardShortcutHandler

logger = logging.getLogger(__name__)

# One wheel notch in QWheelEvent.angleDelta() units
WHEEL_NOTCH = 120

BUTTON_MAP = {
    Qt.MouseButton.LeftButton: PointerButton.PRIMARY,
    Qt.MouseButton.RightButton: PointerButton.SECONDARY,
    Qt.MouseButton.MiddleButton: PointerButton.MIDDLE,
}

CURSOR_MAP = {
    CursorShape.DEFAULT: Qt.CursorShape.ArrowCursor,
    CursorShape.MOVE: Qt.CursorShape.SizeAllCursor,
}


def _point(event: Any) -> Point:
    pos = event.position().toPoint()
    return Point(pos.x(), pos.y())


class PictureFrame(QWidget):
    """Zoomable, pannable image view.

    Attributes:
        controller: ViewportController holding the zoom and location state
        shortcuts: KeyboardShortcutHandler for +, -, 0, F and arrow keys
    """

    def __init__(
        self,
        image: Any = None,
        parent: Optional[QWidget] = None,
        max_zoom: float | None = None,
        smoothing: bool | None = None,
        interactive: bool | None = None,
        fit_on_load: bool | None = None,
    ) -> None:
        """
        Initialize the picture frame.

        Args:
            image: Optional QImage, QPixmap or NumPy array to show
            parent: Parent widget, defaults to None
            max_zoom: Maximum zoom, defaults to viewport.maxZoom
            smoothing: Interpolate shrunk images, defaults to viewport.smoothing
            interactive: Honor mouse and wheel events, defaults to viewport.interactive
            fit_on_load: Fit the initial image, defaults to viewport.fitOnLoad
        """
        super().__init__(parent)
        self._qimage: QImage | None = None
        self.background = QColor(config.get_color("background", "#202020"))

        self.controller = ViewportController(
            self, max_zoom=max_zoom, smoothing=smoothing, interactive=interactive
        )
        self.controller.repaint_requested.connect(self.update)
        self.controller.cursor_changed.connect(self._apply_cursor)
        self.shortcuts = KeyboardShortcutHandler(self.controller)

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        if image is not None:
            self.set_image(image, fit_on_load)

    def set_image(self, image: Any, fit_on_load: bool | None = None) -> None:
        """Show `image` (None clears the frame).

        Args:
            image: QImage, QPixmap, NumPy array or None
            fit_on_load: Fit the image to the frame, defaults to viewport.fitOnLoad

        Raises:
            TypeError, ValueError: If the image has no usable dimensions.
                                   The current image stays on screen.
        """
        if fit_on_load is None:
            fit_on_load = config.get_viewport_setting("fitOnLoad", True)

        # Reject before converting so arrays fail like any other image
        image_dimensions(image)

        if image is None:
            qimage = None
        elif isinstance(image, np.ndarray):
            qimage = array_to_qimage(image)
        elif isinstance(image, QPixmap):
            qimage = image.toImage()
        else:
            qimage = image

        self.controller.set_image(image, fit_on_load)
        self._qimage = qimage

    def image(self) -> Any:
        return self.controller.image

    def sizeHint(self) -> QSize:
        return QSize(config.get_ui_setting("windowWidth", 640),
                     config.get_ui_setting("windowHeight", 480))

    def _apply_cursor(self, shape: str) -> None:
        self.setCursor(CURSOR_MAP[CursorShape(shape)])

    # Qt event handlers -------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.controller.handle(SurfaceResized(Size(max(0, size.width()), max(0, size.height()))))
        super().resizeEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        button = BUTTON_MAP.get(event.button())
        if button is None:
            super().mousePressEvent(event)
            return
        self.controller.handle(PointerPressed(_point(event), button))

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        # Drag with the left button alone, no modifier keys
        if (event.buttons() == Qt.MouseButton.LeftButton
                and event.modifiers() == Qt.KeyboardModifier.NoModifier):
            self.controller.handle(PointerDragged(_point(event)))
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.handle(PointerReleased(_point(event)))
        super().mouseReleaseEvent(event)

    def enterEvent(self, event: QEnterEvent) -> None:
        self.controller.handle(PointerEntered())
        super().enterEvent(event)

    def leaveEvent(self, event: Any) -> None:
        self.controller.handle(PointerExited())
        super().leaveEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        delta = event.angleDelta().y()
        if delta == 0:
            event.ignore()
            return
        # Qt reports rotation away from the user as positive
        self.controller.handle(WheelRotated(-delta / WHEEL_NOTCH, _point(event)))
        event.accept()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if not self.shortcuts.handle_key_press(event):
            super().keyPressEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), self.background)
            if self._qimage is None:
                return

            if self.controller.should_smooth():
                painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
                painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, True)

            location = self.controller.image_location
            size = self.controller.image_size
            painter.drawImage(QRect(location.x, location.y, size.width, size.height), self._qimage)
        finally:
            painter.end()
