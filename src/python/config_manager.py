import copy
import json
import pathlib
import sys
import logging
from typing import Any

from custom_types import LoggingConfig, ViewportConfig

logger = logging.getLogger(__name__)

# Used when no config.json ships next to the sources (e.g. a wheel install)
DEFAULT_CONFIG: dict[str, Any] = {
    "viewport": {
        "maxZoom": 20.0,
        "zoomStep": 1.25,
        "fitOnLoad": True,
        "smoothing": False,
        "interactive": True,
        "panStep": 40,
    },
    "ui": {
        "colors": {"background": "#202020"},
        "windowWidth": 960,
        "windowHeight": 720,
    },
    "strings": {
        "app": {
            "name": "PictureFrame",
            "windowTitle": "PictureFrame - {filename}",
        },
    },
    "logging": {
        "level": "INFO",
        "file": "logs/pictureframe.log",
        "maxBytes": 10485760,
        "backupCount": 3,
        "console": True,
        "consoleLevel": "WARNING",
        "raiseOnError": False,
    },
}


class ConfigManager:
    """Manages application configuration: viewport defaults, colors and strings"""

    viewport: dict[str, Any]
    ui: dict[str, Any]
    strings: dict[str, Any]
    exit_on_error: bool
    _cfg: dict[str, Any]
    cfg_path: str | pathlib.Path

    def __init__(
        self,
        cfg_path: str | pathlib.Path | None = None,
        exit_on_error: bool = True
    ) -> None:
        """Initialize the ConfigManager with an optional custom path.

        Args:
            cfg_path: Path to the config.json file (defaults to standard location if None).
                      When the standard location has no file, DEFAULT_CONFIG is used.
            exit_on_error: Whether to exit the program on configuration errors
        """
        self.viewport = {}
        self.ui = {}
        self.strings = {}
        self.exit_on_error = exit_on_error
        self._cfg = {}

        self.cfg_path = cfg_path if cfg_path is not None else self._default_config_path()

        if cfg_path is None and not pathlib.Path(self.cfg_path).is_file():
            logger.debug("No config file at %s, using built-in defaults", self.cfg_path)
            self._apply(copy.deepcopy(DEFAULT_CONFIG))
        else:
            self.load_config()

    def _default_config_path(self) -> pathlib.Path:
        """Get the default path to the config.json file."""
        base = pathlib.Path(__file__).parent.parent.parent
        return base / "config" / "config.json"

    def _fail(self, message: str, exc_type: type[Exception] = RuntimeError) -> None:
        logger.error(message)
        if self.exit_on_error:
            sys.exit(1)
        raise exc_type(message)

    def load_config(self) -> None:
        """Load master configuration from the configured path."""
        try:
            with open(self.cfg_path, 'r') as f:
                cfg = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self._fail(f"Critical error loading configuration '{self.cfg_path}': {e}")

        self._apply(cfg)
        logger.debug("Configuration loaded from %s", self.cfg_path)

    def _apply(self, cfg: dict[str, Any]) -> None:
        """Validate and assign the configuration sections."""
        self._cfg = cfg
        try:
            self.viewport = self._cfg["viewport"]
            self.ui = self._cfg["ui"]
            self.strings = self._cfg["strings"]
        except KeyError as e:
            self._fail(f"Configuration missing key: {e}", KeyError)

    def get_color(self, key: str, default: str | None = None) -> str:
        """Get a color hex string from the ui colors by key"""
        return self.ui.get("colors", {}).get(key, default or "#000000")

    def get_string(self, category: str, key: str, default: str | None = None) -> str:
        """Get a string resource by category and key"""
        if category in self.strings and key in self.strings[category]:
            return self.strings[category][key]
        return default or key

    def get_nested_string(self, path: str, default: str | None = None) -> str | list[Any]:
        """Get a string resource by dot-notation path (e.g., 'app.windowTitle')"""
        parts = path.split('.')
        current: Any = self.strings

        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default or path

        return current if isinstance(current, (str, list)) else default or path

    def get_ui_setting(self, key: str, default: Any = None) -> Any:
        """Get a UI setting value by key"""
        return self.ui.get(key, default)

    def set_setting(self, section: str, key: str, value: Any) -> None:
        """Set a setting in memory (does not persist to file).

        Args:
            section: Configuration section (e.g., 'viewport', 'ui')
            key: Setting key within the section
            value: Value to set
        """
        if section not in self._cfg:
            self._cfg[section] = {}
        self._cfg[section][key] = value
        if section == "viewport":
            self.viewport = self._cfg[section]

    def get_logging_setting(self, key: str, default: Any = None) -> Any:
        """Get a logging configuration setting"""
        return self.get_logging_config().get(key, default)

    def get_logging_config(self) -> LoggingConfig:
        """Get the logging section, empty when the file has none."""
        section = self._cfg.get("logging", {})
        return section if isinstance(section, dict) else {}

    # ============================================================================
    # Viewport Configuration Accessors
    # ============================================================================

    def get_viewport_setting(self, key: str, default: Any = None) -> Any:
        """Get a viewport setting by key"""
        return self.viewport.get(key, default)

    def get_viewport_config(self) -> ViewportConfig:
        """Get the viewport configuration.

        Returns:
            dict: Viewport configuration with keys:
                - maxZoom: Upper zoom bound (floored at 1.0 by the controller)
                - zoomStep: Multiplier applied by zoom in/out
                - fitOnLoad: Whether new images are fitted to the surface
                - smoothing: Whether shrunk images are drawn with interpolation
                - interactive: Whether mouse and wheel events are honored
                - panStep: Keyboard pan distance in pixels
        """
        return self.viewport


# Create a singleton instance
config = ConfigManager()
