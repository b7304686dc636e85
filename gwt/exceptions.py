"""Custom exceptions for gwt"""

from typing import Optional


class GwtError(Exception):
    """Base exception for all gwt errors."""
    pass


class MissingDependencyError(GwtError):
    """Exception raised when a required executable is not on PATH."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"{tool} is not installed. Please install {tool} to continue.")


class NotARepositoryError(GwtError):
    """Exception raised when the current location is not inside a git work tree."""

    def __init__(self, path: Optional[str] = None):
        self.path = path

        error_msg = "Not inside a Git repository"
        if path:
            error_msg += f": {path}"

        super().__init__(error_msg)


class InvalidArgumentsError(GwtError):
    """Exception raised when a command gets the wrong arguments."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownCommandError(GwtError):
    """Exception raised for an unrecognized command or option."""

    def __init__(self, command: str, message: Optional[str] = None):
        self.command = command
        super().__init__(message or f"Unknown command: '{command}'")


class GitOperationError(GwtError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class WorktreeAddFailedError(GwtError):
    """Exception raised when a worktree cannot be created."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason

        error_msg = f"Failed to create worktree at '{path}'"
        if reason:
            error_msg += f": {reason}"

        super().__init__(error_msg)


class WorktreeRemovalFailedError(GwtError):
    """Exception raised when git refuses to remove a worktree."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason

        error_msg = f"Failed to remove worktree '{path}'. Check for unsaved changes."
        if reason:
            error_msg += f"\n{reason}"

        super().__init__(error_msg)


class SelectorError(GwtError):
    """Exception raised when the interactive selector cannot produce a result."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Interactive selector failed: {message}")
