"""Tests for RepositoryService"""
import pytest

from gwt.exceptions import NotARepositoryError
from gwt.services.repository_service import RepositoryService


class TestRepositoryRoot:
    """Test resolving the repository root."""

    def test_root_from_repository_root(self, repo_root):
        assert RepositoryService(repo_root).get_root() == repo_root

    def test_root_from_subdirectory(self, repo_root):
        """Any directory inside the work tree resolves to its top level."""
        nested = repo_root / "src" / "pkg"
        nested.mkdir(parents=True)
        assert RepositoryService(nested).get_root() == repo_root

    def test_root_is_absolute(self, repo_root):
        assert RepositoryService(str(repo_root)).get_root().is_absolute()

    def test_defaults_to_current_directory(self, repo_root, monkeypatch):
        monkeypatch.chdir(repo_root)
        assert RepositoryService().get_root() == repo_root

    def test_linked_worktree_is_its_own_root(self, git_repo, repo_root):
        """Inside a linked worktree the root is that worktree's directory."""
        linked = repo_root / ".worktrees" / "linked"
        git_repo.git.worktree("add", "-b", "linked", str(linked))
        assert RepositoryService(linked).get_root() == linked.resolve()


class TestNotARepository:
    """Test locations outside any work tree."""

    def test_plain_directory(self, outside_repo):
        service = RepositoryService(outside_repo)
        assert service.is_inside_work_tree() is False
        with pytest.raises(NotARepositoryError):
            service.get_root()

    def test_missing_directory(self, temp_dir):
        with pytest.raises(NotARepositoryError):
            RepositoryService(temp_dir / "does-not-exist").get_root()

    def test_inside_git_directory(self, repo_root):
        """The .git directory itself is not part of the work tree."""
        service = RepositoryService(repo_root / ".git")
        assert service.is_inside_work_tree() is False
        with pytest.raises(NotARepositoryError):
            service.get_root()

    def test_error_names_the_location(self, outside_repo):
        with pytest.raises(NotARepositoryError, match="Not inside a Git repository"):
            RepositoryService(outside_repo).get_root()
