"""Path configuration for startheme.

The layout is fixed and derived from the user's home directory: theme files
live in ``~/.config/starship/`` and starship reads ``~/.config/starship.toml``.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .exceptions import ConfigError

DEFAULT_EXTENSION = ".toml"


class StarthemePaths(BaseModel):
    """Filesystem locations the theme manager works on."""

    themes_dir: Path = Field(..., description="Directory holding theme files")
    config_path: Path = Field(..., description="Path starship reads its configuration from")
    extension: str = Field(default=DEFAULT_EXTENSION, description="Theme file extension")

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Validate extension format."""
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("Extension must start with '.' and not be empty")
        return v

    @classmethod
    def from_home(cls, home: Optional[Path] = None) -> "StarthemePaths":
        """Build the standard layout under a home directory.

        Args:
            home: Home directory. If None, uses the current user's.

        Returns:
            Paths for the given home directory

        Raises:
            ConfigError: If the home directory cannot be determined
        """
        if home is None:
            try:
                home = Path.home()
            except (RuntimeError, KeyError) as e:
                raise ConfigError(f"Error getting home directory: {e}") from e

        config_dir = Path(home) / ".config"
        return cls(
            themes_dir=config_dir / "starship",
            config_path=config_dir / "starship.toml",
        )

    def theme_file(self, theme_name: str) -> Path:
        """Get the file a theme name refers to."""
        return self.themes_dir / f"{theme_name}{self.extension}"

    def strip_extension(self, filename: str) -> str:
        """Remove the theme extension from a file name, if present."""
        if filename.endswith(self.extension):
            return filename[: -len(self.extension)]
        return filename
