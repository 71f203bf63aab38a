"""
Command pattern for viewport controller actions.
"""
from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

from custom_types import Anchor

if TYPE_CHECKING:
    from controllers.viewport_controller import ViewportController

class Command(ABC):
    """Base class for viewport commands."""
    def __init__(self, controller: 'ViewportController') -> None:
        self.controller = controller

    @abstractmethod
    def execute(self) -> Any:
        """Execute the command against the controller."""
        pass

class ZoomInCommand(Command):
    """Zoom in one step around an anchor (surface center by default)."""
    def __init__(self, controller: 'ViewportController', anchor: Anchor | None = None) -> None:
        super().__init__(controller)
        self.anchor = anchor

    def execute(self) -> None:
        self.controller.zoom_in(self.anchor)

class ZoomOutCommand(Command):
    """Zoom out one step around an anchor (surface center by default)."""
    def __init__(self, controller: 'ViewportController', anchor: Anchor | None = None) -> None:
        super().__init__(controller)
        self.anchor = anchor

    def execute(self) -> None:
        self.controller.zoom_out(self.anchor)

class SetZoomCommand(Command):
    """Zoom to an explicit scale."""
    def __init__(self, controller: 'ViewportController', scale: float, anchor: Anchor | None = None) -> None:
        super().__init__(controller)
        self.scale = scale
        self.anchor = anchor

    def execute(self) -> None:
        self.controller.set_zoom(self.scale, self.anchor)

class FitCommand(Command):
    """Fit the whole image into the surface."""
    def execute(self) -> None:
        self.controller.fit()

class OriginalCommand(Command):
    """Show the image at its original size."""
    def execute(self) -> None:
        self.controller.original()

class PanCommand(Command):
    """Move the image by a pixel delta."""
    def __init__(self, controller: 'ViewportController', dx: int = 0, dy: int = 0) -> None:
        super().__init__(controller)
        self.dx = dx
        self.dy = dy

    def execute(self) -> None:
        self.controller.pan(self.dx, self.dy)

class SetLocationCommand(Command):
    """Place the image top-left corner at an absolute position."""
    def __init__(self, controller: 'ViewportController', x: int, y: int) -> None:
        super().__init__(controller)
        self.x = x
        self.y = y

    def execute(self) -> None:
        self.controller.set_location(self.x, self.y)


# Map command names to command classes
COMMAND_MAP: dict[str, type[Command]] = {
    'zoom_in': ZoomInCommand,
    'zoom_out': ZoomOutCommand,
    'set_zoom': SetZoomCommand,
    'fit': FitCommand,
    'original': OriginalCommand,
    'pan': PanCommand,
    'set_location': SetLocationCommand,
}


def execute_command(controller: 'ViewportController', name: str, **kwargs: Any) -> Any:
    """Execute a command by name.

    Args:
        controller: The viewport controller to act on
        name: Command name (key of COMMAND_MAP)
        **kwargs: Arguments to pass to the command constructor

    Returns:
        Result of command execution

    Raises:
        KeyError: If command name is unknown
    """
    cmd_cls = COMMAND_MAP.get(name)
    if not cmd_cls:
        raise KeyError(f"Unknown command: {name}")
    cmd = cmd_cls(controller, **kwargs)
    return cmd.execute()
