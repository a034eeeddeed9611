"""Detached launching of program commands.

The command runs through `sh -c` in a new session, so it has no
controlling terminal and survives the launcher exiting. It is never
waited on. Popen only returns once the shell has been exec'd (CPython
reports exec failure back through a close-on-exec pipe), which is the
readiness signal for the launch.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import LaunchError

logger = logging.getLogger(__name__)


@dataclass
class LaunchResult:
    """A successfully started program."""
    pid: int
    command: str
    log_path: Optional[Path] = None


class Launcher:
    """Start shell commands as detached background processes."""

    def __init__(self, shell: str = "sh", output_log: Optional[Path] = None):
        self.shell = shell
        self.output_log = output_log

    def _open_output(self):
        """Append-mode handle for child output, or DEVNULL."""
        if self.output_log is None:
            return subprocess.DEVNULL
        try:
            self.output_log.parent.mkdir(parents=True, exist_ok=True)
            return open(self.output_log, "ab")
        except OSError as e:
            logger.warning(f"Could not open output log {self.output_log}: {e}")
            return subprocess.DEVNULL

    def launch(self, command: str) -> LaunchResult:
        """Start command detached from this process and its terminal.

        Raises:
            LaunchError: if the shell could not be started
        """
        logger.info(f"Launching: {command}")
        output = self._open_output()
        log_path = None if output is subprocess.DEVNULL else self.output_log
        try:
            process = subprocess.Popen(
                [self.shell, "-c", command],
                stdin=subprocess.DEVNULL,
                stdout=output,
                stderr=subprocess.STDOUT if log_path else subprocess.DEVNULL,
                close_fds=True,
                start_new_session=True,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to launch {command!r}: {e}")
            raise LaunchError(command, e) from e
        finally:
            # The child holds its own copy of the descriptor
            if log_path:
                output.close()

        logger.info(f"Launched pid {process.pid}: {command}")
        return LaunchResult(pid=process.pid, command=command, log_path=log_path)
