"""Repository context resolution for gwt."""

import os
from pathlib import Path
from typing import Optional, Union

import git

from gwt.exceptions import NotARepositoryError
from gwt.logging_config import get_logger

logger = get_logger(__name__)


class RepositoryService:
    """Finds the work tree that contains a directory."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """Initialize the service.

        Args:
            path: Directory to resolve from, defaults to the current directory
        """
        self.path = str(path) if path is not None else os.getcwd()

    def _get_git(self) -> git.Git:
        """Get a git command wrapper that runs inside self.path."""
        if not os.path.isdir(self.path):
            raise NotARepositoryError(self.path)
        return git.Git(self.path)

    def is_inside_work_tree(self) -> bool:
        """Check whether self.path is inside a (non-bare) work tree."""
        try:
            output = self._get_git().rev_parse("--is-inside-work-tree")
        except NotARepositoryError:
            return False
        except git.exc.GitCommandError as e:
            logger.debug(f"rev-parse failed in {self.path}: {e.stderr.strip() if e.stderr else e}")
            return False
        return output.strip() == "true"

    def get_root(self) -> Path:
        """Return the absolute top-level directory of the current work tree.

        Inside a linked worktree this is the linked worktree's own root.

        Raises:
            NotARepositoryError: Outside a repository, in a bare repository or
                inside a .git directory
        """
        if not self.is_inside_work_tree():
            raise NotARepositoryError(self.path)

        try:
            toplevel = self._get_git().rev_parse("--show-toplevel").strip()
        except git.exc.GitCommandError as e:
            raise NotARepositoryError(self.path) from e

        root = Path(toplevel).resolve()
        logger.debug(f"Repository root: {root}")
        return root
