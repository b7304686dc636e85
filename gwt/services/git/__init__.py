"""Git-related services for gwt."""

from .worktrees import WorktreeService

__all__ = ["WorktreeService"]
