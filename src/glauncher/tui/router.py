"""Keyboard routing for the launcher screen.

Maps key names (as Textual reports them) to actions and applies those
actions to the AppState.
"""

from enum import Enum
from typing import Dict, Optional

from ..state import AppState

# Seconds the UI waits for input before refreshing the frame anyway.
POLL_INTERVAL = 0.05


class Action(str, Enum):
    """Things a key can ask for."""
    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    LAUNCH = "launch"


class Outcome(str, Enum):
    """What the main loop should do after a key."""
    NOOP = "noop"
    CONTINUE = "continue"
    QUIT = "quit"
    LAUNCH = "launch"


# One action per key; every navigation key goes through the clamped move.
KEYMAP: Dict[str, Action] = {
    "q": Action.QUIT,
    "up": Action.UP,
    "k": Action.UP,
    "down": Action.DOWN,
    "j": Action.DOWN,
    "enter": Action.LAUNCH,
}


class InputRouter:
    """Apply key presses to an AppState.

    handle_key takes raw key names. GLauncherApp binds KEYMAP through
    Textual bindings instead and calls apply with the bound action.
    """

    def __init__(self, state: AppState):
        self.state = state
        self.pending_command: Optional[str] = None

    def handle_key(self, key: str) -> Outcome:
        action = KEYMAP.get(key)
        if action is None:
            return Outcome.NOOP
        return self.apply(action)

    def apply(self, action: Action) -> Outcome:
        """Run action against the state.

        LAUNCH records the selected command in pending_command and leaves
        the launching itself to the caller. With no programs loaded it is
        a no-op.
        """
        if action is Action.QUIT:
            return Outcome.QUIT
        if action is Action.UP:
            self.state.move_up()
            return Outcome.CONTINUE
        if action is Action.DOWN:
            self.state.move_down()
            return Outcome.CONTINUE
        if action is Action.LAUNCH:
            if self.state.is_empty:
                return Outcome.NOOP
            self.pending_command = self.state.current().command
            return Outcome.LAUNCH
        return Outcome.NOOP
