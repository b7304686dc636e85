"""Worktree operations service for gwt."""

import os
from pathlib import Path
from typing import Any, Dict, List, Union

import git

from gwt.constants import DEFAULT_CONTAINER_DIR, LABEL_BARE, LABEL_DETACHED
from gwt.exceptions import (
    GitOperationError,
    InvalidArgumentsError,
    WorktreeAddFailedError,
    WorktreeRemovalFailedError,
)
from gwt.logging_config import get_logger
from gwt.models.worktree import AddedWorktree, WorktreeRecord

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def _command_error_message(error: git.exc.GitCommandError) -> str:
    """Extract a readable message from a GitCommandError."""
    stderr = (error.stderr or "").strip()
    # GitPython keeps the "stderr: '...'" framing in the string
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip()
        if len(stderr) >= 2 and stderr[0] == stderr[-1] == "'":
            stderr = stderr[1:-1].strip()
    if stderr:
        return stderr
    return f"exit code {error.status}"


def parse_worktree_porcelain(output: str) -> List[WorktreeRecord]:
    """Parse `git worktree list --porcelain` output.

    Format (one attribute per line, blank line between worktrees):
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name   (or "detached" / "bare")
    """
    records: List[WorktreeRecord] = []
    current: Dict[str, Any] = {}

    def flush():
        path = current.get("path")
        if not path:
            return
        if current.get("bare"):
            label = LABEL_BARE
        elif current.get("branch"):
            label = current["branch"]
        else:
            label = LABEL_DETACHED
        records.append(
            WorktreeRecord(
                path=path,
                branch_or_head=label,
                commit_sha=current.get("HEAD", ""),
                # First worktree in the list is always the main one
                is_main=not records,
                is_bare=bool(current.get("bare")),
                is_detached=label == LABEL_DETACHED,
            )
        )

    for line in output.split("\n"):
        line = line.rstrip("\r")

        if not line.strip():
            flush()
            current = {}
            continue

        # Values may contain spaces, only the first one separates key from value
        key, _, value = line.partition(" ")
        if key == "worktree":
            current["path"] = value
        elif key == "HEAD":
            current["HEAD"] = value
        elif key == "branch":
            if value.startswith(BRANCH_REF_PREFIX):
                current["branch"] = value[len(BRANCH_REF_PREFIX):]
            else:
                current["branch"] = value
        elif key == "bare":
            current["bare"] = True

    # Handle last entry if no trailing blank line
    flush()
    return records


class WorktreeService:
    """Service for managing the worktrees of one repository."""

    def __init__(self, repo_path: Union[str, Path], container_dir: str = DEFAULT_CONTAINER_DIR):
        """Initialize the worktree service.

        Args:
            repo_path: Root of the git work tree
            container_dir: Directory under repo_path holding managed worktrees
        """
        self.repo_path = Path(repo_path)
        self.container_dir = container_dir

    def _get_repo(self) -> git.Repo:
        """Get a fresh git.Repo instance for the repository."""
        return git.Repo(self.repo_path)

    @property
    def container_path(self) -> Path:
        """Directory where all managed worktrees live."""
        return self.repo_path / self.container_dir

    def worktree_path(self, dir_name: str) -> Path:
        """Compute the path of a managed worktree.

        Raises:
            InvalidArgumentsError: If dir_name is empty or would leave the container
        """
        if not dir_name or not dir_name.strip():
            raise InvalidArgumentsError("The worktree directory name cannot be empty.")
        if os.path.isabs(dir_name):
            raise InvalidArgumentsError(f"The worktree directory name must be relative, got '{dir_name}'.")

        container = Path(os.path.normpath(self.container_path))
        target = Path(os.path.normpath(container / dir_name))
        if target == container or container not in target.parents:
            raise InvalidArgumentsError(
                f"The worktree directory '{dir_name}' must stay inside {container}."
            )
        return target

    def list_worktrees(self) -> List[WorktreeRecord]:
        """Get all worktrees registered in the repository, in git's order.

        Raises:
            GitOperationError: If git cannot list the worktrees
        """
        repo = self._get_repo()
        try:
            output = repo.git.worktree("list", "--porcelain")
        except git.exc.GitCommandError as e:
            raise GitOperationError("worktree list", _command_error_message(e)) from e
        finally:
            repo.close()

        records = parse_worktree_porcelain(output)
        logger.debug(f"Found {len(records)} worktrees")
        for record in records:
            logger.debug(f"  {record}")
        return records

    def branch_exists(self, branch_name: str) -> bool:
        """Check whether a local branch with this name exists."""
        repo = self._get_repo()
        try:
            repo.git.rev_parse("--verify", "--quiet", f"{BRANCH_REF_PREFIX}{branch_name}")
            return True
        except git.exc.GitCommandError:
            return False
        finally:
            repo.close()

    def add_worktree(self, dir_name: str, branch_name: str) -> AddedWorktree:
        """Create a worktree at <container>/<dir_name> for branch_name.

        An existing branch is checked out. A missing branch is created from
        the current HEAD by the same git call that creates the worktree.

        Raises:
            InvalidArgumentsError: If dir_name would leave the container
            WorktreeAddFailedError: If the target exists or git refuses
        """
        target = self.worktree_path(dir_name)
        if target.exists():
            raise WorktreeAddFailedError(str(target), "the path already exists")

        created_branch = not self.branch_exists(branch_name)
        if created_branch:
            logger.info(f"Creating new branch '{branch_name}' and worktree...")
            args = ["add", "-b", branch_name, str(target)]
        else:
            logger.info(f"Creating worktree for existing branch '{branch_name}'...")
            args = ["add", str(target), branch_name]

        repo = self._get_repo()
        try:
            repo.git.worktree(*args)
        except git.exc.GitCommandError as e:
            error_msg = _command_error_message(e)
            logger.debug(f"git worktree add failed for {target}: {error_msg}")
            raise WorktreeAddFailedError(str(target), error_msg) from e
        finally:
            repo.close()

        logger.info(f"Created worktree at {target}")
        return AddedWorktree(path=target, branch_name=branch_name, created_branch=created_branch)

    def remove_worktree(self, path: Union[str, Path], force: bool = False) -> None:
        """Remove the worktree at path.

        Git refuses to drop a worktree with modified or untracked files unless
        force is set. The refusal is raised, never retried.

        Args:
            path: Path to the worktree directory
            force: Force removal even if working tree is dirty or locked

        Raises:
            WorktreeRemovalFailedError: If git refuses to remove the worktree
        """
        args = ["remove", str(path)]
        if force:
            args.append("--force")

        repo = self._get_repo()
        try:
            repo.git.worktree(*args)
        except git.exc.GitCommandError as e:
            error_msg = _command_error_message(e)
            logger.debug(f"Failed to remove worktree at {path}: {error_msg}")
            raise WorktreeRemovalFailedError(str(path), error_msg) from e
        finally:
            repo.close()

        logger.info(f"Removed worktree at {path}")
