"""In-memory state of the launcher interface."""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List

from .errors import EmptyListError
from .models import Program


@dataclass
class AppState:
    """Loaded programs, the current selection and the terminal mode flag.

    selected_index is always a valid index into entries while entries is
    non-empty. With no entries it stays at 0 and is_empty is True.
    """
    entries: List[Program] = field(default_factory=list)
    selected_index: int = 0
    terminal_mode_active: bool = False

    def __post_init__(self):
        self.entries = list(self.entries)
        self.selected_index = self._clamp(self.selected_index)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def _clamp(self, index: int) -> int:
        if not self.entries:
            return 0
        return max(0, min(index, len(self.entries) - 1))

    def move_up(self) -> None:
        """Select the previous entry. No-op at the top."""
        self.selected_index = self._clamp(self.selected_index - 1)

    def move_down(self) -> None:
        """Select the next entry. No-op at the bottom."""
        self.selected_index = self._clamp(self.selected_index + 1)

    def current(self) -> Program:
        """Return the selected program.

        Raises:
            EmptyListError: if no programs are loaded
        """
        if not self.entries:
            raise EmptyListError()
        return self.entries[self.selected_index]

    @contextmanager
    def terminal_session(self) -> Iterator["AppState"]:
        """Mark the full-screen terminal mode as engaged for the block.

        The flag is cleared on every exit path, including exceptions.
        """
        if self.terminal_mode_active:
            raise RuntimeError("Terminal session is already active")
        self.terminal_mode_active = True
        try:
            yield self
        finally:
            self.terminal_mode_active = False
