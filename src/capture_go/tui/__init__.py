"""Text User Interface for Capture Go."""

from .app import CaptureGoApp, MenuScreen
from .play_view import PlayView

__all__ = ["CaptureGoApp", "MenuScreen", "PlayView"]
