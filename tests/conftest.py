"""
conftest.py - Shared pytest fixtures for PictureFrame tests

This module provides standardized test fixtures for use across all tests.
It includes fixtures for:
- Path setup and Python path configuration
- Configuration management
- Fake surfaces and images for the viewport core
- Viewport controllers wired to a fake surface
"""
import os
import sys
import json
import pathlib
import pytest
import numpy as np

# Render Qt widgets without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the src/python directory to the Python path
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent / "src" / "python"))

# Imports from PictureFrame modules (now that path is configured)
from config_manager import ConfigManager
from custom_types import Size


# Path and Environment Fixtures
# ----------------------------

@pytest.fixture
def pf_paths():
    """Provide standard paths to key project directories."""
    root_dir = pathlib.Path(__file__).parent.parent
    return {
        'root': root_dir,
        'src': root_dir / 'src',
        'python': root_dir / 'src' / 'python',
        'config': root_dir / 'config',
        'tests': root_dir / 'tests'
    }


# Configuration Fixtures
# ---------------------

@pytest.fixture
def test_config_data():
    """Create minimal test configuration data."""
    return {
        "viewport": {
            "maxZoom": 8.0,
            "zoomStep": 1.25,
            "fitOnLoad": True,
            "smoothing": True,
            "interactive": True,
            "panStep": 25
        },
        "ui": {
            "colors": {
                "background": "#101010"
            },
            "windowWidth": 400,
            "windowHeight": 300
        },
        "strings": {
            "app": {
                "name": "PictureFrame Test",
                "windowTitle": "Test - {filename}"
            }
        },
        "logging": {
            "level": "DEBUG",
            "console": False
        }
    }


@pytest.fixture
def test_config_file(tmp_path, test_config_data):
    """Write the test configuration to a temporary file."""
    config_file = tmp_path / "test_config.json"
    with open(config_file, 'w') as f:
        json.dump(test_config_data, f)
    return config_file


@pytest.fixture
def test_config_manager(test_config_file):
    """Create a ConfigManager instance with test configuration."""
    return ConfigManager(cfg_path=test_config_file, exit_on_error=False)


# Viewport Fixtures
# -----------------

class FakeSurface:
    """Surface stand-in reporting a mutable size."""

    def __init__(self, width: int = 400, height: int = 300):
        self.w = width
        self.h = height

    def width(self) -> int:
        return self.w

    def height(self) -> int:
        return self.h

    def resize(self, width: int, height: int) -> None:
        self.w = width
        self.h = height


class FakeImage:
    """Image stand-in exposing QImage-style width()/height()."""

    def __init__(self, width: int = 800, height: int = 600):
        self._w = width
        self._h = height

    def width(self) -> int:
        return self._w

    def height(self) -> int:
        return self._h


@pytest.fixture
def surface():
    """A 400x300 surface."""
    return FakeSurface(400, 300)


@pytest.fixture
def image():
    """An 800x600 image."""
    return FakeImage(800, 600)


@pytest.fixture
def image_size():
    return Size(800, 600)


@pytest.fixture
def surface_size():
    return Size(400, 300)


@pytest.fixture
def make_controller(qapp, surface):
    """Factory for ViewportControllers bound to the `surface` fixture."""
    from controllers.viewport_controller import ViewportController

    def _make(image=None, **kwargs):
        kwargs.setdefault("max_zoom", 20.0)
        kwargs.setdefault("zoom_step", 1.25)
        kwargs.setdefault("smoothing", False)
        kwargs.setdefault("interactive", True)
        return ViewportController(surface, image, **kwargs)

    return _make


@pytest.fixture
def fitted_controller(make_controller, image):
    """Controller showing the 800x600 image fitted into the 400x300 surface."""
    controller = make_controller()
    controller.set_image(image, fit_on_load=True)
    return controller


@pytest.fixture
def rgb_array():
    """A small RGB gradient image as a NumPy array (height 30, width 40)."""
    x = np.linspace(0, 255, 40, dtype=np.uint8)
    row = np.stack([x, x[::-1], np.full_like(x, 128)], axis=-1)
    return np.repeat(row[np.newaxis, :, :], 30, axis=0)
