"""Shared fixtures for glauncher tests."""

from pathlib import Path
from typing import List

import pytest

from glauncher.errors import LaunchError
from glauncher.launcher import LaunchResult
from glauncher.models import Program


def write_entry(directory: Path, name: str, title: str, description: str, command: str) -> Path:
    """Write a program file by hand, the way a user would."""
    path = directory / name
    path.write_text(
        f'title = "{title}"\n'
        f'description = "{description}"\n'
        f'command = "{command}"\n',
        encoding="utf-8",
    )
    return path


class FakeLauncher:
    """Records commands instead of spawning them."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.commands: List[str] = []

    def launch(self, command: str) -> LaunchResult:
        self.commands.append(command)
        if self.fail:
            raise LaunchError(command, OSError("No such file or directory"))
        return LaunchResult(pid=4242, command=command)


@pytest.fixture
def programs() -> List[Program]:
    return [
        Program(title="Editor", description="Text editor", command="vim"),
        Program(title="Browser", description="Web browser", command="firefox"),
        Program(title="Monitor", description="Process monitor", command="htop"),
    ]


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    path = tmp_path / "glauncher"
    path.mkdir()
    return path


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()
