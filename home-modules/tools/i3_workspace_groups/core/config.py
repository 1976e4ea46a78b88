"""Configuration for i3 workspace groups.

Settings are read from ``~/.config/i3/workspace-groups.json``. A missing file
means defaults; every field is optional.

Example file::

    {
        "group_size": 100,
        "default_group_name": "Default",
        "menu_command": "rofi",
        "menu_args": ["-dmenu", "-i"]
    }
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import ConfigError
from .naming import DEFAULT_GROUP_SIZE
from .sorted_hash import DEFAULT_SIZE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config/i3/workspace-groups.json"

# i3 parses workspace numbers into a signed 32-bit int
MAX_WORKSPACE_NUMBER = 2 ** 31 - 1


class WorkspaceGroupsConfig(BaseModel):
    """User settings for workspace groups."""

    group_size: int = Field(default=DEFAULT_GROUP_SIZE, ge=10, le=10000)
    max_groups: int = Field(default=DEFAULT_SIZE, ge=4)
    default_group_name: str = Field(default="Default", min_length=1)
    menu_command: str = Field(default="rofi", min_length=1)
    menu_args: List[str] = Field(default_factory=lambda: ["-dmenu", "-i"])

    @field_validator("default_group_name")
    @classmethod
    def group_name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("default_group_name cannot be blank")
        return v

    @model_validator(mode="after")
    def numbers_fit_in_i3(self) -> "WorkspaceGroupsConfig":
        if self.group_size * self.max_groups > MAX_WORKSPACE_NUMBER:
            raise ValueError(
                f"group_size * max_groups = {self.group_size * self.max_groups} "
                f"exceeds the largest i3 workspace number {MAX_WORKSPACE_NUMBER}"
            )
        return self


def load_config(config_path: Optional[Path] = None) -> WorkspaceGroupsConfig:
    """Load configuration from JSON.

    Args:
        config_path: Path to the config file (default: ~/.config/i3/workspace-groups.json)

    Returns:
        Parsed configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid JSON or holds invalid values
    """
    path = Path(config_path).expanduser() if config_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return WorkspaceGroupsConfig()

    try:
        with path.open("r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")

    try:
        config = WorkspaceGroupsConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}")

    logger.debug(f"Loaded config from {path}: {config.model_dump()}")
    return config
