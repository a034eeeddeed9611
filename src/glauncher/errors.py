"""Exceptions raised by the launcher."""

from typing import Optional


class GLauncherError(Exception):
    """Base class for launcher errors."""


class EmptyListError(GLauncherError):
    """Raised when a selection is requested but no programs are loaded."""

    def __init__(self, message: str = "No programs are loaded"):
        super().__init__(message)


class LaunchError(GLauncherError):
    """Raised when the shell for a program could not be started."""

    def __init__(self, command: str, cause: Optional[BaseException] = None):
        self.command = command
        self.cause = cause
        reason = f": {cause}" if cause else ""
        super().__init__(f"Could not launch {command!r}{reason}")
