"""Data models for gwt."""

from .worktree import WorktreeRecord, AddedWorktree
from .result import CommandResult, IgnoreUpdate

__all__ = ["WorktreeRecord", "AddedWorktree", "CommandResult", "IgnoreUpdate"]
