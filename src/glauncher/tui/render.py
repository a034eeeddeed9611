"""
Frame rendering

Turns an AppState into the text shown in each pane. Pure: nothing here
touches the state or the terminal.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.text import Text

from ..state import AppState

APP_TITLE = "GLauncher"
HIGHLIGHT_SYMBOL = ">> "
EMPTY_TITLE = "No programs"


@dataclass(frozen=True)
class Frame:
    """Everything one redraw needs."""
    title: str
    items: List[str] = field(default_factory=list)
    selected: Optional[int] = None
    detail_title: str = ""
    description: str = ""
    command: str = ""

    @property
    def empty(self) -> bool:
        return self.selected is None


def empty_message(config_dir: Optional[Path]) -> str:
    where = f" to {config_dir}" if config_dir else ""
    return (
        f"Add a TOML file{where} with title, description and command "
        "fields, or run: glauncher --add TITLE DESCRIPTION COMMAND"
    )


def render(state: AppState, config_dir: Optional[Path] = None) -> Frame:
    """Build the frame for the current state."""
    items = [program.title for program in state.entries]
    if state.is_empty:
        return Frame(
            title=APP_TITLE,
            items=items,
            selected=None,
            detail_title=EMPTY_TITLE,
            description=empty_message(config_dir),
            command="",
        )

    program = state.current()
    return Frame(
        title=APP_TITLE,
        items=items,
        selected=state.selected_index,
        detail_title=program.title,
        description=program.description,
        command=program.command,
    )


def format_list(frame: Frame) -> Text:
    """List pane contents with the selected row marked."""
    text = Text(no_wrap=True, overflow="ellipsis")
    if frame.empty:
        text.append("(empty)", style="dim")
        return text

    pad = " " * len(HIGHLIGHT_SYMBOL)
    for index, title in enumerate(frame.items):
        if index:
            text.append("\n")
        if index == frame.selected:
            text.append(HIGHLIGHT_SYMBOL + title, style="bold reverse")
        else:
            text.append(pad + title)
    return text
