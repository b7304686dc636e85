"""Worktree data models."""

from dataclasses import dataclass
from pathlib import Path

from gwt.constants import LABEL_BARE, LABEL_DETACHED


@dataclass(frozen=True)
class WorktreeRecord:
    """One entry of `git worktree list`."""

    path: str
    branch_or_head: str  # Short branch name, or a label for detached/bare entries
    commit_sha: str = ""
    is_main: bool = False  # Is this the main working tree?
    is_bare: bool = False
    is_detached: bool = False

    @property
    def short_sha(self) -> str:
        return self.commit_sha[:7]

    def __str__(self) -> str:
        """Same shape as the plain `git worktree list` line."""
        if self.is_bare:
            return f"{self.path}  ({LABEL_BARE})"
        if self.is_detached:
            return f"{self.path}  {self.short_sha} ({LABEL_DETACHED})"
        return f"{self.path}  {self.short_sha} [{self.branch_or_head}]"


@dataclass(frozen=True)
class AddedWorktree:
    """Outcome of creating a worktree."""

    path: Path
    branch_name: str
    created_branch: bool  # False when an existing branch was checked out
