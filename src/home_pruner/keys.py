"""Raw terminal input to session actions."""

from typing import Optional

from home_pruner.reducer import Action

CTRL_C = "\x03"
ARROW_UP = "\x1b[A"
ARROW_DOWN = "\x1b[B"
ENTER = "\r"

_CONTROL_KEYS = {
    ARROW_UP: Action.MOVE_UP,
    ARROW_DOWN: Action.MOVE_DOWN,
    ENTER: Action.TOGGLE_OR_DELETE,
}

_LETTER_KEYS = {
    "i": Action.MOVE_UP,
    "k": Action.MOVE_DOWN,
    "f": Action.FORCE_DELETE,
    "t": Action.TOGGLE_BANNER,
}


def is_quit(raw: str) -> bool:
    """Ctrl-C or ``q`` ends the session."""
    return raw in (CTRL_C, "q")


def dispatch(raw: str) -> Optional[Action]:
    """Map one chunk of raw input to an action, or None if unrecognised.

    Control sequences must match exactly; letters are matched after
    stripping surrounding whitespace.
    """
    if raw in _CONTROL_KEYS:
        return _CONTROL_KEYS[raw]
    return _LETTER_KEYS.get(raw.strip())


def resets_selection(action: Optional[Action]) -> bool:
    """Navigating away, or pressing an unknown key, disarms every branch."""
    return action in (Action.MOVE_UP, Action.MOVE_DOWN, None)
