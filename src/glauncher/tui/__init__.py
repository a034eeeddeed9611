"""GLauncher terminal interface."""
from .app import GLauncherApp
from .render import Frame, render
from .router import Action, InputRouter, Outcome

__all__ = [
    "GLauncherApp",
    "Frame",
    "render",
    "Action",
    "InputRouter",
    "Outcome",
]
