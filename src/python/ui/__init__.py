"""UI components package for PictureFrame."""

from ui.picture_frame import PictureFrame
from ui.shortcuts import KeyboardShortcutHandler

__all__ = [
    "PictureFrame",
    "KeyboardShortcutHandler",
]
