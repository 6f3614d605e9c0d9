"""Theme switching on top of the filesystem.

Themes are files in the themes directory; the active one is whichever file
the managed configuration path symlinks to.
"""

import os
import stat
from pathlib import Path
from typing import Iterator, List, Optional

from .config import StarthemePaths
from .exceptions import (
    DirectoryAccessError,
    LinkCreateFailedError,
    ReadlinkError,
    RemoveFailedError,
    StatError,
    ThemeIsDirectoryError,
    ThemeNotFoundError,
)
from .models import ActivationResult, ThemeState, ThemeStatus


class ThemeManager:
    """Lists, activates and inspects starship themes."""

    def __init__(self, paths: Optional[StarthemePaths] = None) -> None:
        """Initialize the theme manager.

        Args:
            paths: Path layout to operate on. If None, uses the home directory layout.
        """
        self.paths = paths or StarthemePaths.from_home()

    @property
    def themes_dir(self) -> Path:
        return self.paths.themes_dir

    @property
    def config_path(self) -> Path:
        return self.paths.config_path

    def iter_themes(self) -> Iterator[str]:
        """Yield theme names in directory order.

        Raises:
            DirectoryAccessError: If the themes directory cannot be read
        """
        extension = self.paths.extension
        try:
            with os.scandir(self.themes_dir) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        continue
                    if entry.name.endswith(extension):
                        yield entry.name[: -len(extension)]
        except OSError as e:
            raise DirectoryAccessError(
                f"Error reading starship directory: {e}",
                path=self.themes_dir,
            ) from e

    def list_themes(self) -> List[str]:
        """List available theme names, sorted.

        Returns:
            Theme names without the file extension

        Raises:
            DirectoryAccessError: If the themes directory cannot be read
        """
        return sorted(self.iter_themes())

    def change_theme(self, theme_name: str, dry_run: bool = False) -> ActivationResult:
        """Point the configuration path at a theme file.

        Whatever currently occupies the configuration path is removed without
        a backup. If creating the link fails after the removal, the
        configuration path is left absent.

        Args:
            theme_name: Theme to activate
            dry_run: Check the theme and report without changing anything

        Returns:
            Details of the activation

        Raises:
            ThemeNotFoundError: If there is no file for the theme
            ThemeIsDirectoryError: If the theme name resolves to a directory
            StatError: If a path cannot be inspected
            RemoveFailedError: If the existing configuration cannot be removed
            LinkCreateFailedError: If the symlink cannot be created
        """
        theme_file = os.path.abspath(self.paths.theme_file(theme_name))

        try:
            info = os.stat(theme_file)
        except FileNotFoundError as e:
            raise ThemeNotFoundError(
                f"{theme_name}: No such file or directory",
                theme_name=theme_name,
                path=theme_file,
            ) from e
        except OSError as e:
            raise StatError(f"Error checking theme file: {e}", path=theme_file) from e

        if stat.S_ISDIR(info.st_mode):
            raise ThemeIsDirectoryError(
                f"{theme_name} is a directory",
                theme_name=theme_name,
                path=theme_file,
            )

        config_path = self.config_path
        existing = self._lstat(config_path, "Error checking config")

        if not dry_run:
            if existing is not None:
                self._remove(config_path, existing)

            try:
                os.symlink(theme_file, config_path)
            except OSError as e:
                raise LinkCreateFailedError(
                    f"Error creating symlink: {e}",
                    path=config_path,
                    target=theme_file,
                ) from e

        return ActivationResult(
            theme=theme_name,
            target=theme_file,
            config_path=str(config_path),
            replaced=existing is not None,
            dry_run=dry_run,
        )

    def current_theme(self) -> ThemeStatus:
        """Report which theme the configuration path points at.

        A missing path or a path that is not a symlink are normal outcomes,
        reported through the returned state.

        Raises:
            StatError: If the configuration path cannot be inspected
            ReadlinkError: If the symlink target cannot be read
        """
        config_path = self.config_path
        info = self._lstat(config_path, "Error checking config")

        if info is None:
            return ThemeStatus(state=ThemeState.ABSENT, config_path=str(config_path))

        if not stat.S_ISLNK(info.st_mode):
            return ThemeStatus(state=ThemeState.UNMANAGED, config_path=str(config_path))

        try:
            target = os.readlink(config_path)
        except OSError as e:
            raise ReadlinkError(f"Error reading symlink: {e}", path=config_path) from e

        theme_name = self.paths.strip_extension(os.path.basename(target.rstrip(os.sep)) or target)
        return ThemeStatus(
            state=ThemeState.ACTIVE,
            theme=theme_name,
            target=target,
            config_path=str(config_path),
        )

    def _lstat(self, path: Path, context: str) -> Optional[os.stat_result]:
        """Stat a path without following symlinks; None if it does not exist."""
        try:
            return os.lstat(path)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StatError(f"{context}: {e}", path=path) from e

    def _remove(self, path: Path, info: os.stat_result) -> None:
        try:
            if stat.S_ISDIR(info.st_mode):
                os.rmdir(path)
            else:
                os.unlink(path)
        except OSError as e:
            raise RemoveFailedError(f"Error removing existing config: {e}", path=path) from e
