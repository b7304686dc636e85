"""Pytest fixtures for gwt tests"""
import logging
import tempfile
from pathlib import Path
import pytest
import git

from gwt.config import Config


class FakeSelector:
    """Deterministic stand-in for the interactive selector."""

    def __init__(self, choose=None):
        """
        Args:
            choose: Callable picking a record from the candidates, None cancels
        """
        self.choose = choose
        self.calls = []

    def select(self, records):
        self.calls.append(list(records))
        if self.choose is None or not records:
            return None
        return self.choose(records)

    @classmethod
    def picking(cls, branch_name):
        """Selector that picks the worktree checked out to branch_name."""
        return cls(lambda records: next(r for r in records if r.branch_or_head == branch_name))


@pytest.fixture
def fake_selector():
    """The FakeSelector class, for building selectors in tests."""
    return FakeSelector


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Keep the user's home and global git configuration out of every test."""
    home = tmp_path_factory.mktemp("home").resolve()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.delenv("GWT_CD_FILE", raising=False)
    monkeypatch.delenv("GWT_SELECTOR", raising=False)
    return home


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the handlers setup_logging installs on the root logger."""
    root_logger = logging.getLogger()
    handlers_before = list(root_logger.handlers)
    level_before = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers_before:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level_before)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def outside_repo(temp_dir, monkeypatch):
    """A directory git will not resolve to any repository."""
    plain_dir = temp_dir / "plain"
    plain_dir.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(temp_dir))
    return plain_dir


@pytest.fixture
def config(isolated_home):
    """Default configuration with the ignore file inside the test home."""
    return Config(default_ignore_file=isolated_home / ".gitignore_global")


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    # Initialize repository
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    # Create initial commit
    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def repo_root(git_repo):
    """Resolved root directory of git_repo."""
    return Path(git_repo.working_dir).resolve()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a Git repository with an extra branch that has its own commit."""
    repo = git_repo
    repo_path = Path(repo.working_dir)

    repo.git.checkout('-b', 'feature/existing')
    feature_file = repo_path / "feature.txt"
    feature_file.write_text("Feature content\n")
    repo.index.add(["feature.txt"])
    repo.index.commit("Add feature")

    # Go back to main
    repo.git.checkout('main')

    yield repo
