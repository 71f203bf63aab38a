"""
Image helpers for PictureFrame.

The viewport core only needs an image's pixel dimensions. These helpers
read them from the image types the host deals with (QImage, QPixmap, NumPy
arrays, or anything exposing width/height) and convert NumPy buffers into
QImage for painting.
"""

import logging
import pathlib
from typing import Any

import numpy as np
import numpy.typing as npt
from PyQt6.QtGui import QImage

from custom_types import Size

logger = logging.getLogger(__name__)

# Channel count -> QImage format for 8-bit buffers
_ARRAY_FORMATS = {
    1: QImage.Format.Format_Grayscale8,
    3: QImage.Format.Format_RGB888,
    4: QImage.Format.Format_RGBA8888,
}


def image_dimensions(image: Any) -> Size | None:
    """Return the pixel dimensions of `image`, or None when there is no image.

    Args:
        image: QImage, QPixmap, NumPy array shaped (height, width[, channels]),
               or any object with `width`/`height` attributes or methods

    Returns:
        Size | None: The image dimensions

    Raises:
        TypeError: If no dimensions can be read from `image`
        ValueError: If the image is null or has a zero dimension
    """
    if image is None:
        return None

    if isinstance(image, np.ndarray):
        if image.ndim not in (2, 3):
            raise TypeError(f"Expected a 2-D or 3-D array, got shape {image.shape}")
        height, width = image.shape[:2]
    else:
        width = getattr(image, "width", None)
        height = getattr(image, "height", None)
        if width is None or height is None:
            raise TypeError(f"Cannot read dimensions from {type(image).__name__}")
        width = width() if callable(width) else width
        height = height() if callable(height) else height

    if width <= 0 or height <= 0:
        raise ValueError(f"Image has no pixels ({width}x{height})")

    return Size(int(width), int(height))


def array_to_qimage(array: npt.NDArray[Any]) -> QImage:
    """Convert an 8-bit grayscale, RGB or RGBA array into a QImage.

    Floating point arrays are expected in [0, 1] and are rescaled to 8 bits.
    The returned QImage owns a copy of the pixels.

    Raises:
        TypeError: If `array` is not 2-D or 3-D
        ValueError: If the channel count is not 1, 3 or 4
    """
    if array.ndim not in (2, 3):
        raise TypeError(f"Expected a 2-D or 3-D image array, got shape {array.shape}")

    if np.issubdtype(array.dtype, np.floating):
        array = np.clip(array * 255.0, 0, 255).astype(np.uint8)
    elif array.dtype != np.uint8:
        array = np.clip(array, 0, 255).astype(np.uint8)

    channels = 1 if array.ndim == 2 else array.shape[2]
    if channels not in _ARRAY_FORMATS:
        raise ValueError(f"Unsupported channel count: {channels}")

    height, width = array.shape[:2]
    buffer = np.ascontiguousarray(array).tobytes()
    qimage = QImage(buffer, width, height, width * channels, _ARRAY_FORMATS[channels])
    return qimage.copy()


def load_image(path: str | pathlib.Path) -> QImage:
    """Decode an image file with Qt.

    Raises:
        FileNotFoundError: If `path` does not exist
        ValueError: If Qt cannot decode the file
    """
    path = pathlib.Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Image not found: {path}")

    qimage = QImage(str(path))
    if qimage.isNull():
        raise ValueError(f"Unsupported or corrupt image: {path}")

    logger.info("Loaded image %s (%dx%d)", path.name, qimage.width(), qimage.height())
    return qimage
