"""Worktree lifecycle orchestration for gwt."""

from pathlib import Path
from typing import Optional, Union

from gwt.config import Config
from gwt.constants import NO_SELECTION_MESSAGE
from gwt.logging_config import get_logger
from gwt.models.result import CommandResult
from gwt.models.worktree import WorktreeRecord
from gwt.services.git import WorktreeService
from gwt.services.selector_service import FzfSelector, Selector

logger = get_logger(__name__)


class WorktreeManager:
    """Switches between, creates and removes the worktrees of one repository.

    Every operation returns a CommandResult and raises GwtError subclasses on
    failure; nothing here prints or exits.
    """

    def __init__(self, repo_path: Union[str, Path], config: Optional[Config] = None,
                 selector: Optional[Selector] = None):
        """Initialize the manager.

        Args:
            repo_path: Root of the git work tree
            config: gwt configuration
            selector: Interactive selector, defaults to fzf
        """
        self.repo_path = Path(repo_path)
        self.config = config or Config()
        self.worktree_service = WorktreeService(self.repo_path, self.config.container_dir)
        self.selector = selector or FzfSelector(self.config)

    def select_worktree(self) -> Optional[WorktreeRecord]:
        """Let the user pick one of the current worktrees; None means cancelled."""
        records = self.worktree_service.list_worktrees()
        selection = self.selector.select(records)
        if selection is None:
            logger.debug("Worktree selection cancelled")
        else:
            logger.debug(f"Selected worktree {selection}")
        return selection

    def switch(self) -> CommandResult:
        """Select a worktree and ask the invoking shell to change into it."""
        selection = self.select_worktree()
        if selection is None:
            return CommandResult([NO_SELECTION_MESSAGE])

        return CommandResult(
            [f"Selected worktree: {selection.path}"],
            chdir=selection.path,
        )

    def add(self, dir_name: str, branch_name: str) -> CommandResult:
        """Create <container>/<dir_name> for branch_name, creating the branch from HEAD if needed."""
        added = self.worktree_service.add_worktree(dir_name, branch_name)

        result = CommandResult()
        if added.created_branch:
            result.add(f"Created new branch '{added.branch_name}' from the current HEAD.")
        else:
            result.add(f"Using existing branch '{added.branch_name}'.")
        return result.add(f"Worktree created at: {added.path}")

    def remove(self) -> CommandResult:
        """Select a worktree and remove it. Cancelling removes nothing."""
        selection = self.select_worktree()
        if selection is None:
            return CommandResult([NO_SELECTION_MESSAGE])

        self.worktree_service.remove_worktree(selection.path)
        return CommandResult([f"Worktree '{selection.path}' removed successfully."])
