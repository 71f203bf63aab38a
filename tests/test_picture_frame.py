"""
Tests for the PictureFrame widget: Qt event wiring and painting.
"""
import numpy as np
import pytest
from PyQt6.QtCore import QEvent, QPoint, QPointF, Qt
from PyQt6.QtGui import QColor, QImage, QMouseEvent, QPixmap, QWheelEvent

from custom_types import Point, Size
from ui.picture_frame import PictureFrame


def solid_image(width, height, color="red"):
    image = QImage(width, height, QImage.Format.Format_RGB32)
    image.fill(QColor(color))
    return image


def mouse_event(kind, x, y, button, buttons, modifiers=Qt.KeyboardModifier.NoModifier):
    pos = QPointF(x, y)
    return QMouseEvent(kind, pos, pos, button, buttons, modifiers)


def wheel_event(x, y, delta):
    pos = QPointF(x, y)
    return QWheelEvent(pos, pos, QPoint(0, 0), QPoint(0, delta),
                       Qt.MouseButton.NoButton, Qt.KeyboardModifier.NoModifier,
                       Qt.ScrollPhase.NoScrollPhase, False)


@pytest.fixture
def frame(qtbot):
    widget = PictureFrame(smoothing=False, interactive=True)
    qtbot.addWidget(widget)
    widget.resize(400, 300)
    widget.set_image(solid_image(800, 600))
    return widget


def test_image_is_fitted(frame):
    controller = frame.controller
    assert controller.scale == pytest.approx(0.5)
    assert controller.image_size == Size(400, 300)
    assert controller.image_location == Point(0, 0)


def test_resize_refits(frame, qtbot):
    frame.show()
    qtbot.waitExposed(frame)
    frame.resize(800, 600)
    qtbot.waitUntil(lambda: frame.controller.scale == 1.0)
    assert frame.controller.image_location == Point(0, 0)


def test_wheel_zooms_at_pointer(frame):
    frame.wheelEvent(wheel_event(200, 150, 120))
    assert frame.controller.scale == pytest.approx(0.625)
    assert frame.controller.image_location == Point(-50, -38)
    assert frame.cursor().shape() == Qt.CursorShape.SizeAllCursor

    frame.wheelEvent(wheel_event(200, 150, -120))
    assert frame.controller.is_fitted()
    assert frame.cursor().shape() == Qt.CursorShape.ArrowCursor


def test_horizontal_wheel_is_ignored(frame):
    frame.wheelEvent(wheel_event(200, 150, 0))
    assert frame.controller.scale == pytest.approx(0.5)


def test_left_drag_pans(frame):
    frame.controller.original()
    frame.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, 100, 100,
                                      Qt.MouseButton.LeftButton, Qt.MouseButton.LeftButton))
    frame.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, 80, 120,
                                     Qt.MouseButton.NoButton, Qt.MouseButton.LeftButton))
    assert frame.controller.image_location == Point(-220, -130)

    frame.mouseReleaseEvent(mouse_event(QEvent.Type.MouseButtonRelease, 80, 120,
                                        Qt.MouseButton.LeftButton, Qt.MouseButton.NoButton))
    assert frame.controller.state.drag_origin is None


def test_drag_with_modifier_does_not_pan(frame):
    frame.controller.original()
    frame.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, 100, 100,
                                      Qt.MouseButton.LeftButton, Qt.MouseButton.LeftButton))
    frame.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, 80, 120,
                                     Qt.MouseButton.NoButton, Qt.MouseButton.LeftButton,
                                     Qt.KeyboardModifier.ShiftModifier))
    assert frame.controller.image_location == Point(-200, -150)


def test_static_frame_ignores_wheel(qtbot):
    widget = PictureFrame(interactive=False)
    qtbot.addWidget(widget)
    widget.resize(400, 300)
    widget.set_image(solid_image(800, 600))
    widget.wheelEvent(wheel_event(200, 150, 120))
    assert widget.controller.scale == pytest.approx(0.5)


def test_keyboard_shortcuts(frame, qtbot):
    qtbot.keyClick(frame, Qt.Key.Key_Plus)
    assert frame.controller.scale == pytest.approx(0.625)
    qtbot.keyClick(frame, Qt.Key.Key_0)
    assert frame.controller.is_original()
    qtbot.keyClick(frame, Qt.Key.Key_F)
    assert frame.controller.is_fitted()


def test_paints_image_over_background(qtbot):
    widget = PictureFrame()
    qtbot.addWidget(widget)
    widget.resize(400, 300)
    widget.set_image(solid_image(100, 50, "blue"))
    assert widget.controller.image_location == Point(150, 125)

    rendered = widget.grab().toImage()
    assert rendered.pixelColor(200, 150) == QColor("blue")
    assert rendered.pixelColor(5, 5) == widget.background


def test_numpy_and_pixmap_images(frame, rgb_array):
    frame.set_image(rgb_array)
    assert frame.image() is rgb_array
    assert frame.controller.image_location == Point(180, 135)

    pixmap = QPixmap.fromImage(solid_image(800, 600))
    frame.set_image(pixmap)
    assert frame.controller.scale == pytest.approx(0.5)


def test_clearing_image(frame):
    frame.set_image(None)
    assert frame.image() is None
    rendered = frame.grab().toImage()
    assert rendered.pixelColor(200, 150) == frame.background


def test_size_hint_from_config(qtbot):
    widget = PictureFrame()
    qtbot.addWidget(widget)
    assert widget.sizeHint().width() == 960
    assert widget.sizeHint().height() == 720


@pytest.mark.parametrize("bad", [np.zeros(5, np.uint8), np.zeros((2, 2, 2, 2), np.uint8)])
def test_invalid_array_is_rejected(frame, bad):
    with pytest.raises(TypeError):
        frame.set_image(bad)
    assert isinstance(frame.image(), QImage)
    assert frame.controller.scale == pytest.approx(0.5)
