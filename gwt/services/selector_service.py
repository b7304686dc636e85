"""Interactive worktree selection."""

import subprocess
from typing import List, Optional, Protocol, Sequence

from gwt.config import Config
from gwt.constants import SELECTOR_CANCEL_CODES
from gwt.exceptions import SelectorError
from gwt.logging_config import get_logger
from gwt.models.worktree import WorktreeRecord

logger = get_logger(__name__)


class Selector(Protocol):
    """Picks one worktree out of a list, or returns None when the user cancels."""

    def select(self, records: Sequence[WorktreeRecord]) -> Optional[WorktreeRecord]:
        ...


def render_candidates(records: Sequence[WorktreeRecord]) -> List[str]:
    """Render one selector line per record, prefixed with its index.

    The index field is hidden from the user and lets the chosen line be mapped
    back to its record without parsing the path.
    """
    return [f"{index}\t{record}" for index, record in enumerate(records)]


class FzfSelector:
    """Selector backed by fzf (or any fzf-compatible finder)."""

    def __init__(self, config: Config):
        self.config = config

    def build_command(self) -> List[str]:
        return [
            self.config.selector_binary,
            "--prompt", self.config.selector_prompt,
            "--height", self.config.selector_height,
            "--border",
            "--delimiter", "\t",
            "--with-nth", "2..",
            "--no-multi",
        ]

    def select(self, records: Sequence[WorktreeRecord]) -> Optional[WorktreeRecord]:
        """Run the selector over records.

        Returns:
            The chosen record, or None if there was nothing to choose from or
            the prompt was dismissed

        Raises:
            SelectorError: If the selector cannot be started or exits with an error
        """
        if not records:
            logger.debug("No worktrees to select from")
            return None

        command = self.build_command()
        logger.debug(f"Running selector: {command}")
        try:
            # fzf draws on the terminal directly, only stdin/stdout are piped
            process = subprocess.run(
                command,
                input="\n".join(render_candidates(records)) + "\n",
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise SelectorError(f"could not run {self.config.selector_binary}: {e}") from e

        if process.returncode in SELECTOR_CANCEL_CODES:
            logger.debug(f"Selector dismissed (exit {process.returncode})")
            return None
        if process.returncode != 0:
            raise SelectorError(f"{self.config.selector_binary} exited with status {process.returncode}")

        chosen = process.stdout.strip("\n")
        if not chosen:
            return None

        index, _, _ = chosen.partition("\t")
        try:
            return records[int(index)]
        except (ValueError, IndexError) as e:
            raise SelectorError(f"unexpected selection {chosen!r}") from e
