"""
GLauncher Textual Application

Full-screen program picker. Lists the loaded programs, shows the selected
one's details and command, and launches it on Enter.
"""
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Static

from ..errors import LaunchError
from ..launcher import Launcher, LaunchResult
from ..state import AppState
from .render import APP_TITLE, Frame, format_list, render
from .router import KEYMAP, POLL_INTERVAL, Action, InputRouter, Outcome


def _keys(action: Action) -> str:
    """Comma separated binding keys for an action."""
    return ",".join(key for key, mapped in KEYMAP.items() if mapped is action)


class GLauncherApp(App):
    """Pick a program and launch it detached."""

    TITLE = APP_TITLE

    BINDINGS = [
        Binding(_keys(Action.QUIT), "route('quit')", "Quit", show=True),
        Binding(_keys(Action.UP), "route('up')", "Up", show=False),
        Binding(_keys(Action.DOWN), "route('down')", "Down", show=False),
        Binding(_keys(Action.LAUNCH), "route('launch')", "Launch", show=True),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }

    #title-bar {
        height: 1;
        width: 100%;
        background: $accent;
        color: $text;
        text-style: bold;
        padding: 0 1;
    }

    #body {
        height: 1fr;
    }

    #program-list {
        width: 1fr;
        height: 100%;
        border: round $accent;
        padding: 0 1;
    }

    #detail {
        width: 1fr;
        height: 100%;
    }

    #detail-title {
        height: 3;
        border: round $accent;
        padding: 0 1;
    }

    #detail-description {
        height: 1fr;
        border: round $accent;
        padding: 0 1;
    }

    #command {
        height: 3;
        border: round $accent;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        state: AppState,
        launcher: Optional[Launcher] = None,
        config_dir: Optional[Path] = None,
        settle_delay: float = 0.0,
    ):
        super().__init__()
        self.state = state
        self.router = InputRouter(state)
        self.launcher = launcher or Launcher()
        self.config_dir = config_dir
        self.settle_delay = settle_delay
        self.launched: Optional[LaunchResult] = None
        self.frame: Optional[Frame] = None

    def compose(self) -> ComposeResult:
        yield Static(APP_TITLE, id="title-bar", markup=False)
        yield Horizontal(
            Static("", id="program-list"),
            Vertical(
                Static("", id="detail-title", markup=False),
                Static("", id="detail-description", markup=False),
                id="detail",
            ),
            id="body",
        )
        yield Static("", id="command", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        """Draw the first frame and keep it fresh."""
        self.query_one("#command", Static).border_title = "Command"
        self.refresh_frame()
        self.set_interval(POLL_INTERVAL, self.refresh_frame)

    def refresh_frame(self) -> None:
        """Push the current state into the panes if it changed."""
        frame = render(self.state, self.config_dir)
        if frame == self.frame:
            return
        self.frame = frame
        self.query_one("#title-bar", Static).update(frame.title)
        self.query_one("#program-list", Static).update(format_list(frame))
        self.query_one("#detail-title", Static).update(frame.detail_title)
        self.query_one("#detail-description", Static).update(frame.description)
        self.query_one("#command", Static).update(frame.command)

    def action_route(self, name: str) -> None:
        """Apply a key action and act on the outcome."""
        if self.launched is not None:
            # Already launched, waiting out the settle delay
            return

        outcome = self.router.apply(Action(name))
        if outcome is Outcome.QUIT:
            self.exit()
        elif outcome is Outcome.LAUNCH:
            self._launch(self.router.pending_command)
        elif outcome is Outcome.CONTINUE:
            self.refresh_frame()

    def _launch(self, command: str) -> None:
        """Start the selected command, then exit after the settle delay."""
        try:
            result = self.launcher.launch(command)
        except LaunchError as e:
            self.notify(str(e), title="Launch failed", severity="error")
            return

        self.launched = result
        if self.settle_delay > 0:
            self.set_timer(self.settle_delay, self._exit_launched)
        else:
            self._exit_launched()

    def _exit_launched(self) -> None:
        self.exit(self.launched)
