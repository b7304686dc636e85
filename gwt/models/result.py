"""Result models handed back to the command dispatcher."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class CommandResult:
    """What a command produced: messages for the user and an optional directory change."""

    messages: List[str] = field(default_factory=list)
    chdir: Optional[str] = None  # Path the invoking shell should change into

    def add(self, message: str) -> "CommandResult":
        self.messages.append(message)
        return self


@dataclass
class IgnoreUpdate:
    """Outcome of ensuring the worktree container is globally ignored."""

    ignore_file: Path
    pattern: str
    registered: bool = False  # core.excludesfile was unset and now points at ignore_file
    created_file: bool = False
    added_pattern: bool = False
