"""startheme package.

A command-line tool for hotswapping starship prompt themes by managing
the ~/.config/starship.toml symlink.
"""

__version__ = "0.1.0"
__description__ = "Hotswap starship themes by symlinking ~/.config/starship.toml"

# Re-export main classes for convenience
from .config import StarthemePaths
from .manager import ThemeManager
from .models import ActivationResult, ThemeState, ThemeStatus
from .render import OutputFormatter
from .exceptions import (
    StarthemeError,
    ConfigError,
    ValidationError,
    DirectoryAccessError,
    ThemeError,
    ThemeNotFoundError,
    ThemeIsDirectoryError,
    FileOperationError,
    StatError,
    RemoveFailedError,
    LinkCreateFailedError,
    ReadlinkError,
    UsageError,
    MissingArgumentError,
    UnknownCommandError,
)

__all__ = [
    "__version__",
    "__description__",
    "StarthemePaths",
    "ThemeManager",
    "ActivationResult",
    "ThemeState",
    "ThemeStatus",
    "OutputFormatter",
    "StarthemeError",
    "ConfigError",
    "ValidationError",
    "DirectoryAccessError",
    "ThemeError",
    "ThemeNotFoundError",
    "ThemeIsDirectoryError",
    "FileOperationError",
    "StatError",
    "RemoveFailedError",
    "LinkCreateFailedError",
    "ReadlinkError",
    "UsageError",
    "MissingArgumentError",
    "UnknownCommandError",
]
