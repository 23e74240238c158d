"""State transitions for the interactive session.

``transition`` is pure: it either returns the next state directly or a
``DeleteRequest`` describing the one git call it needs. ``reduce`` performs
that call and feeds the outcome back through the request.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Sequence, Union

from home_pruner.branch import Branch
from home_pruner.git import DeleteResult, GitError
from home_pruner.logging_config import get_logger
from home_pruner.preferences import Preferences, PreferenceStore
from home_pruner.state import Message, MessageKind, SessionState, clamp_cursor

logger = get_logger(__name__)

UNKNOWN_DETAIL = "Unknown error."


class Action(Enum):
    """Actions the session understands."""

    MOVE_UP = "up"
    MOVE_DOWN = "down"
    TOGGLE_OR_DELETE = "toggle"
    FORCE_DELETE = "force_delete"
    TOGGLE_BANNER = "toggle_banner"


def deleted_message(name: str) -> str:
    """Status text for a successful deletion."""
    return f"Deleted branch: {name}"


def failed_message(detail: str, force: bool) -> str:
    """Status text for a refused deletion, with git's reason or a fallback."""
    prefix = "Failed to force delete branch." if force else "Failed to delete branch."
    return f"{prefix} {detail or UNKNOWN_DETAIL}"


@dataclass(frozen=True)
class DeleteRequest:
    """A pending deletion of the focused branch.

    Built from the state at decision time; ``succeeded`` and ``failed``
    produce the state that follows each outcome.
    """

    state: SessionState
    branch_name: str
    force: bool

    def succeeded(self, fresh_branches: Sequence[Branch]) -> SessionState:
        return replace(
            self.state,
            branches=tuple(fresh_branches),
            cursor_index=clamp_cursor(self.state.cursor_index, len(fresh_branches)),
            message=Message(MessageKind.SUCCESS, deleted_message(self.branch_name)),
        )

    def failed(self, detail: str) -> SessionState:
        state = self.state
        if not self.force:
            # A refused normal delete disarms the branch; a refused force delete leaves it armed.
            target = state.branches[state.cursor_index]
            state = state.with_branch(state.cursor_index, target.with_selected(False))
        return replace(state, message=Message(MessageKind.ERROR, failed_message(detail, self.force)))


Transition = Union[SessionState, DeleteRequest]


def transition(state: SessionState, action: Action) -> Transition:
    """Decide the next state for ``action`` without touching git or disk."""
    if action is Action.MOVE_UP:
        return replace(state, cursor_index=clamp_cursor(state.cursor_index - 1, len(state.branches)), message=None)

    if action is Action.MOVE_DOWN:
        return replace(state, cursor_index=clamp_cursor(state.cursor_index + 1, len(state.branches)), message=None)

    if action is Action.TOGGLE_OR_DELETE:
        target = state.focused
        if target is None or not target.is_selectable:
            return state
        if not target.is_selected:
            return replace(state.with_branch(state.cursor_index, target.with_selected(True)), message=None)
        return DeleteRequest(state=state, branch_name=target.name, force=False)

    if action is Action.FORCE_DELETE:
        target = state.focused
        if target is None or not target.is_selected:
            return state
        return DeleteRequest(state=state, branch_name=target.name, force=True)

    if action is Action.TOGGLE_BANNER:
        return replace(state, show_banner=not state.show_banner)

    return state


def perform_delete(request: DeleteRequest, deleter: Callable[[str, bool], DeleteResult]) -> DeleteResult:
    """Run the delete collaborator, turning a raised ``GitError`` into a failed result."""
    logger.debug("Deleting branch %s (force=%s)", request.branch_name, request.force)
    try:
        return deleter(request.branch_name, request.force)
    except GitError as err:
        return DeleteResult(ok=False, detail=str(err))


def reduce(
    state: SessionState,
    action: Action,
    deleter: Callable[[str, bool], DeleteResult],
    list_branches: Callable[[], Sequence[Branch]],
    preferences: Optional[PreferenceStore] = None,
) -> SessionState:
    """Apply ``action`` to ``state``, carrying out any git or preference effect.

    Args:
        state: Current session state
        action: Action produced by the key dispatcher
        deleter: Called with a branch name and a force flag
        list_branches: Returns a fresh branch list after a successful delete
        preferences: Store the banner preference is saved to

    Returns:
        The next session state. A refused delete is reported through
        ``state.message`` rather than raised.
    """
    result = transition(state, action)

    if action is Action.TOGGLE_BANNER and preferences is not None:
        preferences.save(Preferences(show_banner=result.show_banner))

    if not isinstance(result, DeleteRequest):
        return result

    outcome = perform_delete(result, deleter)
    if not outcome.ok:
        logger.debug("Delete of %s failed: %s", result.branch_name, outcome.detail)
        return result.failed(outcome.detail)

    return result.succeeded(list_branches())
