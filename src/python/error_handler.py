"""
PictureFrame Error Handler Module

This module provides a centralized error reporting pattern for the host
application. Errors are reported through the application logger.
"""

import logging

logger = logging.getLogger("pictureframe.error_handler")


class ErrorHandler:
    """Centralized error handling for PictureFrame."""

    @staticmethod
    def show_error(message: str, title: str = "Error") -> None:
        """Log an error message."""
        logger.error(f"[{title}] {message}")
