"""Configuration handling for gwt"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from gwt.constants import (
    DEFAULT_CONTAINER_DIR,
    DEFAULT_GLOBAL_IGNORE_NAME,
    DEFAULT_SELECTOR_BINARY,
    SELECTOR_HEIGHT,
    SELECTOR_PROMPT,
)


def _default_ignore_file() -> Path:
    return Path.home() / DEFAULT_GLOBAL_IGNORE_NAME


@dataclass
class Config:
    """Configuration for gwt with validation."""

    # Worktree layout
    container_dir: str = DEFAULT_CONTAINER_DIR

    # Interactive selector
    selector_binary: str = DEFAULT_SELECTOR_BINARY
    selector_prompt: str = SELECTOR_PROMPT
    selector_height: str = SELECTOR_HEIGHT

    # Global ignore file created and registered when git has none
    default_ignore_file: Path = field(default_factory=_default_ignore_file)

    # Where to hand the selected path to the shell wrapper (None = stdout)
    cd_file: Optional[Path] = None

    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_container_dir()
        self._validate_selector_binary()
        self._validate_selector_height()
        self._normalize_paths()

    def _validate_container_dir(self):
        """Validate container_dir is a single directory name below the repository root."""
        name = (self.container_dir or "").strip()
        if not name:
            raise ValueError("container_dir cannot be empty")
        if name in (".", ".."):
            raise ValueError(f"container_dir must name a subdirectory, got '{name}'")
        if os.path.isabs(name) or "/" in name or (os.sep != "/" and os.sep in name):
            raise ValueError(f"container_dir must be a single directory name, got '{name}'")
        self.container_dir = name

    def _validate_selector_binary(self):
        """Validate selector_binary is not empty."""
        if not self.selector_binary or not self.selector_binary.strip():
            raise ValueError("selector_binary cannot be empty")
        self.selector_binary = self.selector_binary.strip()

    def _validate_selector_height(self):
        """Validate selector_height is a line count or a percentage."""
        value = self.selector_height.rstrip("%")
        if not value.isdigit() or int(value) <= 0:
            raise ValueError(f"selector_height must be a positive number or percentage, got '{self.selector_height}'")

    def _normalize_paths(self):
        self.default_ignore_file = Path(self.default_ignore_file).expanduser()
        if self.cd_file is not None:
            self.cd_file = Path(self.cd_file).expanduser()

    @property
    def ignore_pattern(self) -> str:
        """Line added to the global ignore file."""
        return self.container_dir

    def to_dict(self) -> dict:
        """Convert config to dictionary for debug output."""
        return {
            "container_dir": self.container_dir,
            "selector_binary": self.selector_binary,
            "selector_prompt": self.selector_prompt,
            "selector_height": self.selector_height,
            "default_ignore_file": str(self.default_ignore_file),
            "cd_file": str(self.cd_file) if self.cd_file else None,
            "verbose": self.verbose,
            "debug": self.debug,
        }
