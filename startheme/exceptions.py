"""Exception classes for startheme.

This module defines the error taxonomy used by the theme manager and the
CLI, along with the helper that turns an exception into a message for the
user.
"""

from pathlib import Path
from typing import Optional, Dict, Any, Union

PathLike = Union[str, Path]


class StarthemeError(Exception):
    """Base exception class for all startheme errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(StarthemeError):
    """Exception raised when the path layout cannot be determined."""
    pass


class ValidationError(StarthemeError):
    """Exception raised for invalid option values."""
    pass


class DirectoryAccessError(StarthemeError):
    """Exception raised when the themes directory cannot be read."""

    def __init__(self, message: str, path: Optional[PathLike] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.path = str(path) if path is not None else None


class ThemeError(StarthemeError):
    """Base exception for problems with a requested theme."""

    def __init__(
        self,
        message: str,
        theme_name: Optional[str] = None,
        path: Optional[PathLike] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            theme_name: Name of the requested theme
            path: Theme file the name resolved to
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.theme_name = theme_name
        self.path = str(path) if path is not None else None


class ThemeNotFoundError(ThemeError):
    """Exception raised when no theme file exists for a name."""
    pass


class ThemeIsDirectoryError(ThemeError):
    """Exception raised when a theme name resolves to a directory."""
    pass


class FileOperationError(StarthemeError):
    """Exception raised when a filesystem call fails."""

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        operation: Optional[str] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Path the operation was applied to
            operation: Operation that failed (stat, remove, symlink, readlink)
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.path = str(path) if path is not None else None
        self.operation = operation


class StatError(FileOperationError):
    """Exception raised when a path cannot be inspected."""

    def __init__(self, message: str, path: Optional[PathLike] = None, **kwargs: Any) -> None:
        super().__init__(message, path=path, operation="stat", **kwargs)


class RemoveFailedError(FileOperationError):
    """Exception raised when the existing configuration cannot be removed."""

    def __init__(self, message: str, path: Optional[PathLike] = None, **kwargs: Any) -> None:
        super().__init__(message, path=path, operation="remove", **kwargs)


class LinkCreateFailedError(FileOperationError):
    """Exception raised when the configuration symlink cannot be created."""

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        target: Optional[PathLike] = None,
        **kwargs: Any
    ) -> None:
        super().__init__(message, path=path, operation="symlink", **kwargs)
        self.target = str(target) if target is not None else None


class ReadlinkError(FileOperationError):
    """Exception raised when the configuration symlink cannot be read."""

    def __init__(self, message: str, path: Optional[PathLike] = None, **kwargs: Any) -> None:
        super().__init__(message, path=path, operation="readlink", **kwargs)


class UsageError(StarthemeError):
    """Base exception for malformed command lines."""
    pass


class MissingArgumentError(UsageError):
    """Exception raised when a command is missing a required argument."""

    def __init__(self, message: str = "missing arguments", argument: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument


class UnknownCommandError(UsageError):
    """Exception raised for a subcommand the CLI does not know."""

    def __init__(self, command: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown subcommand: {command}", **kwargs)
        self.command = command


def format_error_for_user(error: Exception, debug: bool = False) -> str:
    """Format an error message for user display.

    Args:
        error: The exception to format
        debug: Whether to include debug information

    Returns:
        Formatted error message
    """
    if isinstance(error, FileOperationError):
        message = f"✖ {error.message}"
        if debug:
            if error.path:
                message += f"\nPath: {error.path}"
            if error.operation:
                message += f"\nOperation: {error.operation}"
            if isinstance(error, LinkCreateFailedError) and error.target:
                message += f"\nTarget: {error.target}"
        return message

    if isinstance(error, ThemeError):
        message = f"✖ {error.message}"
        if debug and error.path:
            message += f"\nTheme file: {error.path}"
        return message

    if isinstance(error, DirectoryAccessError):
        message = f"✖ {error.message}"
        if debug and error.path:
            message += f"\nDirectory: {error.path}"
        return message

    # Default formatting
    if debug:
        return f"✖ {str(error)}\nType: {type(error).__name__}"
    else:
        return f"✖ {str(error)}"
