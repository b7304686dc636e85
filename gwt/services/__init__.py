"""Services used by the worktree manager."""
