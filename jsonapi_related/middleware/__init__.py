"""Error handling for JSON:API decode failures."""

from .error_handler import decode_error_handler, install_error_handlers

__all__ = ["decode_error_handler", "install_error_handlers"]
