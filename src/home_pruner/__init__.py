"""Interactive local branch pruner.

Features:
- Full-screen list of local branches with the current branch highlighted
- Cursor navigation with arrow keys or i/k
- Two-step deletion: arm a branch, then confirm
- Force option for unmerged branches
- Optional banner, remembered between sessions
"""

__version__ = "1.0.0"
