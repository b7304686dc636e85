"""Checks that the external tools gwt drives are installed."""

import shutil

from gwt.config import Config
from gwt.constants import GIT_BINARY
from gwt.exceptions import MissingDependencyError
from gwt.logging_config import get_logger

logger = get_logger(__name__)


def required_tools(config: Config) -> tuple[str, ...]:
    """Executables that must be on PATH, in the order they are checked."""
    return (GIT_BINARY, config.selector_binary)


def check_dependencies(config: Config) -> None:
    """Raise MissingDependencyError for the first required tool not found on PATH."""
    for tool in required_tools(config):
        location = shutil.which(tool)
        if location is None:
            raise MissingDependencyError(tool)
        logger.debug(f"Found {tool} at {location}")
