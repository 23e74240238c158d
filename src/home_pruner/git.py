"""Git repository operations."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from home_pruner.branch import Branch, build_branches
from home_pruner.logging_config import get_logger

logger = get_logger(__name__)

GENERIC_DELETE_FAILURE = "git branch exited with an error."


class ErrorCode(Enum):
    """Error categories reported at the top level."""

    NOT_GIT_REPO = "NOT_GIT_REPO"
    GIT_COMMAND_FAILED = "GIT_COMMAND_FAILED"
    UNKNOWN = "UNKNOWN"


class GitError(Exception):
    """Git operation error."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.GIT_COMMAND_FAILED, cause: Optional[BaseException] = None) -> None:
        """Initialize error.

        Args:
            message: Message shown to the user
            code: Error category
            cause: Underlying exception, shown with --debug
        """
        super().__init__(message)
        self.code = code
        self.cause = cause


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a single branch deletion."""

    ok: bool
    detail: str = ""


class GitRepo:
    """Git repository operations."""

    def __init__(self, path: Path) -> None:
        """Initialize repository."""
        try:
            self.repo: Repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as err:
            raise GitError("You are not in the git repo.", ErrorCode.NOT_GIT_REPO, err) from err
        if self.repo.bare:
            raise GitError("You are not in the git repo.", ErrorCode.NOT_GIT_REPO)

    def root(self) -> str:
        """Get the working tree root."""
        return str(self.repo.working_tree_dir)

    def current_branch_name(self) -> str:
        """Get current branch name, empty in a detached HEAD state."""
        try:
            return self.repo.git.branch("--show-current").strip()
        except GitCommandError as err:
            raise GitError("Cannot get current branch name.", ErrorCode.GIT_COMMAND_FAILED, err) from err

    def local_branch_names(self) -> list[str]:
        """Get the short names of all local branches."""
        try:
            output = self.repo.git.for_each_ref("--format=%(refname)", "refs/heads/")
        except GitCommandError as err:
            raise GitError("Cannot get local branches.", ErrorCode.GIT_COMMAND_FAILED, err) from err
        prefix = "refs/heads/"
        return [line[len(prefix) :] for line in output.splitlines() if line.startswith(prefix)]

    def list_branches(self) -> list[Branch]:
        """Get the sorted, classified local branch list."""
        branches = build_branches(self.current_branch_name(), self.local_branch_names())
        logger.debug("Loaded %d local branches", len(branches))
        return branches

    def delete_branch(self, branch_name: str, force: bool = False) -> DeleteResult:
        """Delete a local branch with ``git branch -d`` (or ``-D`` when forced).

        Git refusing the deletion is a normal outcome, reported through the
        result's detail rather than raised.
        """
        status, _, stderr = self.repo.git.branch(
            "-D" if force else "-d",
            branch_name,
            with_extended_output=True,
            with_exceptions=False,
        )
        if status == 0:
            return DeleteResult(ok=True)
        return DeleteResult(ok=False, detail=stderr.strip() or GENERIC_DELETE_FAILURE)
