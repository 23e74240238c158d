"""Branch value type and list building."""

import functools
import re
from dataclasses import dataclass, replace
from typing import Iterable

from pyuca import Collator

_DIGITS = re.compile(r"\d+")
NUMBER_WIDTH = 32


@dataclass(frozen=True)
class Branch:
    """A local branch as shown in the session."""

    name: str
    is_current: bool = False
    is_selectable: bool = True
    is_selected: bool = False

    def with_selected(self, selected: bool) -> "Branch":
        """Return a copy with the selection flag set.

        The current branch can never be selected.
        """
        if selected and not self.is_selectable:
            return self
        return replace(self, is_selected=selected)


def make_branch(name: str, current_name: str) -> Branch:
    """Create an unselected branch classified against the current branch name."""
    is_current = name == current_name
    return Branch(name=name, is_current=is_current, is_selectable=not is_current, is_selected=False)


@functools.lru_cache(maxsize=None)
def _collator() -> Collator:
    return Collator()


def natural_key(name: str) -> tuple:
    """Sort key that collates text by the Unicode collation order and digit runs as numbers.

    Digit runs are zero-padded to a common width so feature-2 < feature-10
    under the collator. The raw name breaks any remaining tie.
    """
    padded = _DIGITS.sub(lambda match: str(int(match.group())).zfill(NUMBER_WIDTH), name)
    return (_collator().sort_key(padded), name)


def build_branches(current_name: str, raw_names: Iterable[str]) -> list[Branch]:
    """Build the ordered branch list shown in the session.

    Names are sorted naturally and passed through without de-duplication.
    """
    return [make_branch(name, current_name) for name in sorted(raw_names, key=natural_key)]
