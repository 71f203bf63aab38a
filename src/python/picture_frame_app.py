"""
PictureFrame application entry point.

Opens an image in a window backed by the PictureFrame widget:
wheel to zoom around the pointer, drag with the left button to pan,
+ / - / 0 / F and the arrow keys from the keyboard.
"""

import argparse
import logging
import pathlib
import sys

from PyQt6.QtWidgets import QApplication, QMainWindow

from config_manager import config
from error_handler import ErrorHandler
from image_utils import load_image
from logging_config import setup_logging
from ui.picture_frame import PictureFrame

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='PictureFrame - zoomable image viewer')
    parser.add_argument('image', help='Image file to open')
    parser.add_argument('--max-zoom', type=float, default=None,
                        help='Maximum zoom level (default: viewport.maxZoom, never below 1)')
    parser.add_argument('--original', action='store_true',
                        help='Open the image at its original size instead of fitted')
    parser.add_argument('--smooth', action='store_true',
                        help='Interpolate the image when it is shown below its original size')
    parser.add_argument('--static', action='store_true',
                        help='Ignore mouse and wheel input')
    parser.add_argument('--config', '-c', default=None,
                        help='Path to an alternative config.json')
    parser.add_argument('--debug', '-d', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the viewer. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    if args.config:
        config.cfg_path = pathlib.Path(args.config)
        config.load_config()

    # Command line options override the loaded config for this run
    if args.max_zoom is not None:
        config.set_setting("viewport", "maxZoom", args.max_zoom)
    if args.smooth:
        config.set_setting("viewport", "smoothing", True)
    if args.static:
        config.set_setting("viewport", "interactive", False)

    setup_logging(level="DEBUG" if args.debug else None)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(config.get_string("app", "name", "PictureFrame"))

    try:
        image = load_image(args.image)
    except (FileNotFoundError, ValueError) as e:
        ErrorHandler.show_error(str(e), title="Cannot open image")
        return 1

    frame = PictureFrame()
    frame.set_image(image)
    if args.original:
        frame.controller.original()

    window = QMainWindow()
    title = config.get_nested_string("app.windowTitle", "PictureFrame - {filename}")
    window.setWindowTitle(title.format(filename=pathlib.Path(args.image).name))
    window.setCentralWidget(frame)
    window.resize(frame.sizeHint())
    window.show()
    frame.setFocus()

    logger.info("Viewer opened for %s", args.image)
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
