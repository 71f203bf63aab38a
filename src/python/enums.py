"""
Enumerations for PictureFrame using Python 3.11+ StrEnum.

This module defines string-based enumerations for the constants shared by
the viewport core and the Qt host, providing type safety and IDE
autocomplete support.
"""

from enum import StrEnum


class AnchorKind(StrEnum):
    """How a zoom anchor is resolved against the surface.

    Attributes:
        CENTER: Use the geometric center of the surface
        POINT: Use an explicit surface coordinate
    """
    CENTER = "center"
    POINT = "point"


class CursorShape(StrEnum):
    """Pointer affordance reported to the surface.

    Attributes:
        DEFAULT: The image is fitted and cannot be panned
        MOVE: The image overflows the surface and can be dragged
    """
    DEFAULT = "default"
    MOVE = "move"


class PointerButton(StrEnum):
    """Pointer buttons understood by the event reducer.

    Attributes:
        PRIMARY: Left button, starts a drag
        SECONDARY: Right button
        MIDDLE: Middle button / wheel click
    """
    PRIMARY = "primary"
    SECONDARY = "secondary"
    MIDDLE = "middle"
