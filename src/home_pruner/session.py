"""Interactive session controller.

Each input chunk is handled to completion (dispatch, reduce, render) before
the next one is read. Branch deletion blocks the loop while git runs.
"""

from typing import Optional

from home_pruner.git import GitRepo
from home_pruner.keys import dispatch, is_quit, resets_selection
from home_pruner.logging_config import get_logger
from home_pruner.preferences import PreferenceStore
from home_pruner.reducer import reduce
from home_pruner.render import render
from home_pruner.state import SessionState
from home_pruner.terminal import TerminalController

logger = get_logger(__name__)


class Session:
    """Owns the session state and drives it from terminal input."""

    def __init__(self, repo: GitRepo, preferences: PreferenceStore, state: Optional[SessionState] = None) -> None:
        self.repo = repo
        self.preferences = preferences
        if state is None:
            state = SessionState(
                branches=tuple(repo.list_branches()),
                cursor_index=0,
                show_banner=preferences.load().show_banner,
            )
        self.state = state

    def handle_input(self, raw: str) -> bool:
        """Apply one chunk of input. Returns False when the session should end."""
        if is_quit(raw):
            return False

        action = dispatch(raw)
        if resets_selection(action):
            self.state = self.state.clear_selection()
        if action is None:
            return True

        logger.debug("Action %s", action.name)
        self.state = reduce(
            self.state,
            action,
            deleter=self.repo.delete_branch,
            list_branches=self.repo.list_branches,
            preferences=self.preferences,
        )
        return True

    def render(self, terminal_rows: int) -> str:
        return render(self.state, self.repo.root(), self.repo.current_branch_name(), terminal_rows)

    def run(self, terminal: TerminalController) -> None:
        """Run until quit or end of input, restoring the terminal on every exit path."""
        with terminal.session():
            terminal.write(self.render(terminal.rows()))
            while True:
                raw = terminal.read_input()
                if not raw or not self.handle_input(raw):
                    break
                terminal.write(self.render(terminal.rows()))
