"""Full-screen rendering of the session state.

Every frame is a complete repaint: the buffer starts by clearing the screen
and homing the cursor. Styling is done with rich and captured as plain ANSI
text so the caller can write it straight to the terminal. Lines end in CRLF
because the terminal is in raw mode.
"""

import io

from rich.console import Console
from rich.text import Text

from home_pruner.branch import Branch
from home_pruner.state import MessageKind, SessionState

CLEAR_SCREEN = "\x1b[2J"
MOVE_CURSOR_HOME = "\x1b[H"

HEADER_HEIGHT = 5

BANNER = "=================\n|| home-pruner ||\n=================\n"
CURRENT_SUFFIX = "(current)"
PENDING_DELETION = "[!!] Press [Enter] to delete, [f] to force delete"
KEY_GUIDE = "[↑/i] up  [↓/k] down  [Enter] select/delete  [f] force delete  [t] toggle banner  [q] quit"

FOCUS_STYLE = "reverse"
CURRENT_STYLE = "green"
MESSAGE_STYLES = {
    MessageKind.SUCCESS: "green",
    MessageKind.ERROR: "red",
}


def visible_rows(terminal_rows: int) -> int:
    """Rows left for the branch list under the fixed-height header."""
    return max(1, terminal_rows - HEADER_HEIGHT)


def viewport_start(cursor_index: int, rows: int) -> int:
    """First visible branch index that keeps the cursor on screen."""
    if cursor_index >= rows:
        return cursor_index - rows + 1
    return 0


def branch_line(branch: Branch, focused: bool, current_branch_name: str) -> Text:
    is_current = branch.name == current_branch_name
    parts = [branch.name]
    if is_current:
        parts.append(CURRENT_SUFFIX)
    if branch.is_selected and branch.is_selectable:
        parts.append(PENDING_DELETION)
    label = " ".join(parts)

    if focused:
        return Text(label, style=FOCUS_STYLE)
    if is_current:
        return Text(label, style=CURRENT_STYLE)
    return Text(label)


def _to_ansi(text: Text) -> str:
    console = Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="standard",
        no_color=False,
        highlight=False,
        markup=False,
        emoji=False,
    )
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True)
    return capture.get()


def render(state: SessionState, current_repo_root: str, current_branch_name: str, terminal_rows: int) -> str:
    """Render ``state`` into a single terminal buffer."""
    rows = visible_rows(terminal_rows)
    start = viewport_start(state.cursor_index, rows)

    body = Text()
    if state.show_banner:
        body.append(BANNER)
    body.append("*Current git repository : ")
    body.append(current_repo_root, style="green")
    body.append("\n*Local branches count   : ")
    body.append(str(len(state.branches)), style="green")
    body.append("\n")

    lines = [
        branch_line(branch, start + offset == state.cursor_index, current_branch_name)
        for offset, branch in enumerate(state.branches[start : start + rows])
    ]
    body.append_text(Text("\n").join(lines))

    if state.message is not None:
        body.append("\n\n")
        body.append(state.message.text, style=MESSAGE_STYLES[state.message.kind])

    body.append("\n\n")
    body.append(KEY_GUIDE, style="dim")

    # Raw mode clears ONLCR; LF alone does not return to column 0.
    return CLEAR_SCREEN + MOVE_CURSOR_HOME + _to_ansi(body).replace("\n", "\r\n")
