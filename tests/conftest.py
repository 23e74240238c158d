"""Test configuration and fixtures."""

from pathlib import Path
from typing import Callable, Generator, Optional

import pytest
from git import Actor, Repo

from home_pruner.branch import Branch, build_branches
from home_pruner.git import DeleteResult
from home_pruner.preferences import Preferences


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep preference files out of the real home directory."""
    config_path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("HOME_PRUNER_CONFIG", str(config_path))
    return config_path


@pytest.fixture
def test_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a local repository with a mix of merged and unmerged branches.

    Branches: main (current), feature/merged, feature/unmerged, feature/2, feature/10.
    """
    local_path = tmp_path / "local"
    local_path.mkdir()
    repo = Repo.init(local_path)

    author = Actor("Test User", "test@example.com")
    repo.config_writer().set_value("user", "name", author.name).release()
    repo.config_writer().set_value("user", "email", author.email).release()

    readme = local_path / "README.md"
    readme.write_text("# Test Repository")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit", author=author, committer=author)
    repo.git.branch("-M", "main")

    def create_branch(name: str, commit: bool) -> None:
        """Create a branch off main, optionally with a commit main does not have."""
        repo.git.checkout("main")
        repo.git.checkout("-b", name)
        if commit:
            test_file = local_path / f"{name.replace('/', '_')}.txt"
            test_file.write_text(f"{name} content")
            repo.index.add([test_file.name])
            repo.index.commit(f"Add {name}", author=author, committer=author)

    create_branch("feature/merged", commit=False)
    create_branch("feature/unmerged", commit=True)
    create_branch("feature/2", commit=False)
    create_branch("feature/10", commit=False)
    repo.git.checkout("main")

    yield local_path
    repo.close()


class FakeRepo:
    """In-memory stand-in for GitRepo used by session tests."""

    def __init__(self, names: list[str], current: str = "main", refuse: Optional[dict[str, str]] = None) -> None:
        self.names = list(names)
        self.current = current
        self.refuse = refuse or {}
        self.deleted: list[tuple[str, bool]] = []

    def root(self) -> str:
        return "/work/project"

    def current_branch_name(self) -> str:
        return self.current

    def list_branches(self) -> list[Branch]:
        return build_branches(self.current, self.names)

    def delete_branch(self, branch_name: str, force: bool = False) -> DeleteResult:
        self.deleted.append((branch_name, force))
        if branch_name in self.refuse and not force:
            return DeleteResult(ok=False, detail=self.refuse[branch_name])
        self.names.remove(branch_name)
        return DeleteResult(ok=True)


class FakePreferences:
    """Preference store that records saves."""

    def __init__(self, show_banner: bool = True) -> None:
        self.stored = Preferences(show_banner=show_banner)
        self.saved: list[Preferences] = []

    def load(self) -> Preferences:
        return self.stored

    def save(self, preferences: Preferences) -> None:
        self.saved.append(preferences)
        self.stored = preferences


@pytest.fixture
def fake_repo_factory() -> Callable[..., FakeRepo]:
    return FakeRepo


@pytest.fixture
def fake_preferences() -> FakePreferences:
    return FakePreferences()
