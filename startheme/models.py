"""Result models for startheme."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ThemeState(str, Enum):
    """What occupies the managed configuration path."""

    ACTIVE = "active"
    ABSENT = "absent"
    UNMANAGED = "unmanaged"


class ThemeStatus(BaseModel):
    """Outcome of inspecting the managed configuration path."""

    state: ThemeState = Field(..., description="Kind of entry found at the config path")
    theme: Optional[str] = Field(None, description="Active theme name")
    target: Optional[str] = Field(None, description="Raw symlink target")
    config_path: str = Field(..., description="Inspected configuration path")

    @property
    def is_managed(self) -> bool:
        return self.state == ThemeState.ACTIVE


class ActivationResult(BaseModel):
    """Outcome of pointing the configuration link at a theme."""

    theme: str = Field(..., description="Activated theme name")
    target: str = Field(..., description="Theme file the link points at")
    config_path: str = Field(..., description="Managed configuration path")
    replaced: bool = Field(default=False, description="Whether an existing entry was removed")
    dry_run: bool = Field(default=False, description="Whether the filesystem was left untouched")
