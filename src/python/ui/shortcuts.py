"""Keyboard shortcut handling for the picture frame."""

from typing import Any
from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QKeyEvent
import logging

from commands import execute_command
from config_manager import config

logger = logging.getLogger(__name__)


class KeyboardShortcutHandler(QObject):
    """Maps key presses to viewport commands.

    - Plus / Equal: zoom in around the surface center
    - Minus / Underscore: zoom out around the surface center
    - 0: original size
    - F: fit to surface
    - Arrow keys: pan by the configured step
    """

    ZOOM_KEY_MAP: dict[Qt.Key, str] = {
        Qt.Key.Key_Plus: 'zoom_in',
        Qt.Key.Key_Equal: 'zoom_in',
        Qt.Key.Key_Minus: 'zoom_out',
        Qt.Key.Key_Underscore: 'zoom_out',
        Qt.Key.Key_0: 'original',
        Qt.Key.Key_F: 'fit',
    }

    # Arrow key -> direction the image moves
    PAN_KEY_MAP: dict[Qt.Key, tuple[int, int]] = {
        Qt.Key.Key_Left: (1, 0),
        Qt.Key.Key_Right: (-1, 0),
        Qt.Key.Key_Up: (0, 1),
        Qt.Key.Key_Down: (0, -1),
    }

    def __init__(self, controller: Any, pan_step: int | None = None) -> None:
        """Initialize the keyboard shortcut handler.

        Args:
            controller: ViewportController the commands act on
            pan_step: Pixels moved per arrow key press, defaults to viewport.panStep
        """
        super().__init__()
        self.controller = controller
        self.pan_step = pan_step if pan_step is not None else config.get_viewport_setting("panStep", 40)

    def handle_key_press(self, event: QKeyEvent) -> bool:
        """Handle key press events for the frame.

        Args:
            event: The key press event

        Returns:
            True if the event was handled, False otherwise
        """
        return self.handle_key(event.key())

    def handle_key(self, key: Qt.Key | int) -> bool:
        """Run the command bound to `key`, if any."""
        if not self.controller.is_interactive():
            return False

        name = self.ZOOM_KEY_MAP.get(key)
        if name is not None:
            logger.debug("Shortcut %s -> %s", key, name)
            execute_command(self.controller, name)
            return True

        direction = self.PAN_KEY_MAP.get(key)
        if direction is not None:
            dx, dy = direction
            execute_command(self.controller, 'pan', dx=dx * self.pan_step, dy=dy * self.pan_step)
            return True

        # Key not handled by shortcuts
        return False
