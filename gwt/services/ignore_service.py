"""Global ignore file configuration for gwt."""

from pathlib import Path
from typing import Optional, Tuple

import git

from gwt.config import Config
from gwt.constants import EXCLUDES_FILE_KEY
from gwt.exceptions import GitOperationError
from gwt.logging_config import get_logger
from gwt.models.result import IgnoreUpdate

logger = get_logger(__name__)


def has_ignore_line(content: str, pattern: str) -> bool:
    """Check for a line that is exactly pattern (not a prefix, suffix or substring)."""
    return any(line == pattern for line in content.splitlines())


class IgnoreRuleService:
    """Keeps the worktree container in git's global excludes file."""

    def __init__(self, config: Config, git_cmd: Optional[git.Git] = None):
        """Initialize the service.

        Args:
            config: gwt configuration, provides the pattern and the default file
            git_cmd: Git command wrapper used for `git config --global`
        """
        self.config = config
        self.git = git_cmd or git.Git()

    def get_configured_ignore_file(self) -> Optional[Path]:
        """Read core.excludesfile from the global git configuration.

        Returns:
            The configured path with ~ expanded, or None if the key is unset
        """
        try:
            value = self.git.config("--global", "--get", EXCLUDES_FILE_KEY).strip()
        except git.exc.GitCommandError as e:
            # git config exits with 1 when the key is not set
            if e.status == 1:
                return None
            raise GitOperationError("config --get", str(e.stderr or e).strip()) from e

        if not value:
            return None
        return Path(value).expanduser()

    def register_ignore_file(self, path: Path) -> None:
        """Point core.excludesfile at path in the global git configuration."""
        try:
            self.git.config("--global", EXCLUDES_FILE_KEY, str(path))
        except git.exc.GitCommandError as e:
            raise GitOperationError("config", str(e.stderr or e).strip()) from e
        logger.info(f"Set {EXCLUDES_FILE_KEY} to {path}")

    def resolve_ignore_file(self) -> Tuple[Path, bool]:
        """Find the global ignore file, registering the default one when none is set.

        Returns:
            Tuple of (path, registered). registered is True when git had no
            global ignore file and the default was configured.
        """
        configured = self.get_configured_ignore_file()
        if configured is not None:
            logger.debug(f"Global ignore file from git config: {configured}")
            return configured, False

        default = self.config.default_ignore_file
        logger.info(f"Global gitignore not found, using {default}")
        self.register_ignore_file(default)
        return default, True

    def ensure_ignored(self) -> IgnoreUpdate:
        """Append the container pattern to the global ignore file unless it is already there.

        Existing lines are never rewritten, so running this repeatedly leaves
        exactly one pattern line.
        """
        pattern = self.config.ignore_pattern
        ignore_file, registered = self.resolve_ignore_file()
        update = IgnoreUpdate(ignore_file=ignore_file, pattern=pattern, registered=registered)

        if not ignore_file.exists():
            ignore_file.parent.mkdir(parents=True, exist_ok=True)
            ignore_file.touch()
            update.created_file = True
            logger.info(f"Created global gitignore at {ignore_file}")

        content = ignore_file.read_text(encoding="utf-8", errors="replace")
        if has_ignore_line(content, pattern):
            logger.debug(f"'{pattern}' already present in {ignore_file}")
            return update

        with ignore_file.open("a", encoding="utf-8") as f:
            if content and not content.endswith("\n"):
                f.write("\n")
            f.write(f"{pattern}\n")

        update.added_pattern = True
        logger.info(f"Added '{pattern}' to {ignore_file}")
        return update
