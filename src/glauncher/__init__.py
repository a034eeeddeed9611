"""GLauncher - terminal launcher for user-defined programs.

Program entries are TOML files in the user's config directory. Each one
has a title, a description and a shell command. The launcher shows them
as a list, runs the selected command as a detached process, then exits.

Usage:
    from glauncher import load_programs, Launcher

    result = load_programs(config_dir)
    Launcher().launch(result.programs[0].command)
"""

from .errors import GLauncherError, EmptyListError, LaunchError
from .models import Program
from .loader import load_programs, save_program, ensure_config_dir
from .state import AppState
from .launcher import Launcher, LaunchResult

__version__ = "1.0.0"

__all__ = [
    # Errors
    "GLauncherError",
    "EmptyListError",
    "LaunchError",
    # Model
    "Program",
    "AppState",
    # Config files
    "load_programs",
    "save_program",
    "ensure_config_dir",
    # Launching
    "Launcher",
    "LaunchResult",
]
