"""Session state."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from home_pruner.branch import Branch


class MessageKind(Enum):
    """Kind of transient status message."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Message:
    """Transient status line shown under the branch list."""

    kind: MessageKind
    text: str


def clamp_cursor(index: int, count: int) -> int:
    """Clamp a cursor index into the valid range for a list of ``count`` items."""
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


@dataclass(frozen=True)
class SessionState:
    """Everything the screen is drawn from."""

    branches: Tuple[Branch, ...] = ()
    cursor_index: int = 0
    message: Optional[Message] = None
    show_banner: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "branches", tuple(self.branches))

    @property
    def focused(self) -> Optional[Branch]:
        """Branch under the cursor, if any."""
        if 0 <= self.cursor_index < len(self.branches):
            return self.branches[self.cursor_index]
        return None

    def clear_selection(self) -> "SessionState":
        """Return a copy with every branch disarmed."""
        if not any(branch.is_selected for branch in self.branches):
            return self
        return replace(self, branches=tuple(branch.with_selected(False) for branch in self.branches))

    def with_branch(self, index: int, branch: Branch) -> "SessionState":
        """Return a copy with the branch at ``index`` replaced."""
        branches = list(self.branches)
        branches[index] = branch
        return replace(self, branches=tuple(branches))
