"""Data models for program entries."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

REQUIRED_FIELDS = ("title", "description", "command")


@dataclass(frozen=True)
class Program:
    """A launchable entry loaded from one config file."""
    title: str
    description: str
    command: str            # POSIX shell command line, run through `sh -c`
    source: Optional[Path] = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[Path] = None) -> "Program":
        """Build a Program from a decoded config document.

        Raises:
            ValueError: if a required field is missing, not a string,
                or the title is blank.
        """
        for name in REQUIRED_FIELDS:
            if name not in data:
                raise ValueError(f"missing field '{name}'")
            if not isinstance(data[name], str):
                raise ValueError(f"field '{name}' must be a string")
        if not data["title"].strip():
            raise ValueError("field 'title' must not be empty")
        return cls(
            title=data["title"],
            description=data["description"],
            command=data["command"],
            source=source,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "command": self.command,
        }
