"""
Type definitions for PictureFrame.

This module defines the small value types, protocols and TypedDict
structures used throughout the PictureFrame codebase.
"""

from dataclasses import dataclass
from typing import Protocol, TypedDict

from enums import AnchorKind


@dataclass(frozen=True)
class Point:
    """Integer position in surface coordinates."""
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size:
    """Integer width/height pair."""
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Anchor:
    """Surface point whose image content stays put across a zoom.

    Use ``Anchor.center()`` for the surface center and ``Anchor.at(x, y)``
    for an explicit position.
    """
    kind: AnchorKind = AnchorKind.CENTER
    point: Point | None = None

    @classmethod
    def center(cls) -> 'Anchor':
        return cls(AnchorKind.CENTER)

    @classmethod
    def at(cls, x: int, y: int) -> 'Anchor':
        return cls(AnchorKind.POINT, Point(int(x), int(y)))

    def resolve(self, surface: Size) -> Point:
        """Return the concrete surface position for this anchor."""
        if self.kind is AnchorKind.POINT and self.point is not None:
            return self.point
        return Point(surface.width >> 1, surface.height >> 1)


class Surface(Protocol):
    """Display area the image is drawn onto (a QWidget satisfies this)."""

    def width(self) -> int: ...

    def height(self) -> int: ...


# Configuration TypedDict definitions
class ViewportConfig(TypedDict, total=False):
    """Viewport configuration section."""
    maxZoom: float
    zoomStep: float
    fitOnLoad: bool
    smoothing: bool
    interactive: bool
    panStep: int


class LoggingConfig(TypedDict, total=False):
    """Logging configuration section."""
    level: str
    file: str
    maxBytes: int
    backupCount: int
    console: bool
    consoleLevel: str
    raiseOnError: bool
