"""Controllers package for PictureFrame.

Main Components:
    ViewportController: Zoom, fit and pan state of an image on a surface

Usage:
    from controllers import ViewportController

    controller = ViewportController(widget)
    controller.set_image(image, fit_on_load=True)
    controller.zoom_in(Anchor.at(120, 80))
"""

from controllers.viewport_controller import ViewportController

__all__ = ['ViewportController']
