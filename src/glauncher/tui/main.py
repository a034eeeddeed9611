#!/usr/bin/env python3
"""
GLauncher command line entry point

Usage:
    glauncher [--config-dir DIR] [--log-level LEVEL]
    glauncher --list
    glauncher --add TITLE DESCRIPTION COMMAND
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from textual.logging import TextualHandler

from .. import __version__
from ..config import LauncherConfig
from ..launcher import Launcher
from ..loader import ensure_config_dir, load_programs, save_program
from ..models import Program
from ..state import AppState
from .app import GLauncherApp

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level_name: str) -> None:
    """Log to stderr, or to the Textual log while the interface is up."""
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glauncher",
        description="Pick a configured program and launch it in the background.",
    )
    parser.add_argument("--config-dir", type=Path, help="Directory holding program TOML files")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--list", action="store_true", help="Print the configured programs and exit")
    mode.add_argument(
        "--add",
        nargs=3,
        metavar=("TITLE", "DESCRIPTION", "COMMAND"),
        help="Write a new program file and exit",
    )
    return parser


def add_program(config: LauncherConfig, title: str, description: str, command: str) -> int:
    """Handle --add."""
    if not ensure_config_dir(config.config_dir):
        return 1
    try:
        program = Program.from_dict(
            {"title": title, "description": description, "command": command}
        )
        path = save_program(program, config.config_dir)
    except FileExistsError as e:
        logger.error(f"Program file already exists: {e.filename}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Could not add program: {e}")
        return 1
    print(path)
    return 0


def list_programs(programs: List[Program]) -> int:
    """Handle --list."""
    for program in programs:
        print(f"{program.title}\t{program.command}")
    return 0


def run_interface(config: LauncherConfig, programs: List[Program]) -> int:
    """Run the full-screen picker until quit or launch."""
    state = AppState(programs)
    app = GLauncherApp(
        state,
        launcher=Launcher(shell=config.shell, output_log=config.output_log),
        config_dir=config.config_dir,
        settle_delay=config.settle_delay,
    )

    try:
        with state.terminal_session():
            launched = app.run()
    except KeyboardInterrupt:
        return 130
    except Exception:
        logger.exception("Launcher interface failed")
        return 1

    # Textual reports errors raised inside the app through return_code
    if app.return_code:
        logger.error(f"Launcher interface failed with exit code {app.return_code}")
        return 1

    # Terminal is back in normal mode from here on
    if launched is not None:
        logger.info(f"Detached program pid {launched.pid}: {launched.command}")
        print(f"Launched {launched.command!r} as pid {launched.pid}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the glauncher command."""
    args = build_parser().parse_args(argv)

    config = LauncherConfig.from_env()
    if args.config_dir:
        config.config_dir = args.config_dir.expanduser()
    if args.log_level:
        config.log_level = args.log_level.upper()
    setup_logging(config.log_level)

    if args.add:
        return add_program(config, *args.add)

    ensure_config_dir(config.config_dir)
    result = load_programs(config.config_dir)
    if result.errors:
        logger.warning(f"Skipped {len(result.errors)} invalid config file(s)")

    if args.list:
        return list_programs(result.programs)
    return run_interface(config, result.programs)


if __name__ == "__main__":
    sys.exit(main())
