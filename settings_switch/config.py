"""Runtime settings for the profile switcher.

Settings are resolved once per invocation from defaults and ``CC_SWITCH_*``
environment overrides.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from .loader.env import EnvironmentLoader
from .models.schemas import BaseConfig

LIVE_SETTINGS_RELATIVE_PATH = Path(".claude") / "settings.json"
STORE_RELATIVE_PATH = Path(".cc-switch")
PROFILE_FILE_NAME = "settings.json"
STATE_FILE_NAME = "state.json"

ENV_SCHEMA = {
    "home_dir": {"type": "path"},
    "live_settings_path": {"type": "path"},
    "store_dir": {"type": "path"},
    "log_level": {"type": "str"},
    "log_config": {"type": "path"},
    "log_file": {"type": "path"},
}


class SwitchSettings(BaseConfig):
    """Locations and logging options for one invocation."""

    home_dir: Path = Field(
        default_factory=Path.home, description="User home directory"
    )
    live_settings_path: Path = Field(
        description="Live settings document swapped on switch"
    )
    store_dir: Path = Field(description="Directory holding profiles and state")
    profile_file_name: str = Field(
        default=PROFILE_FILE_NAME, description="Blob file name inside a profile directory"
    )
    log_level: str = Field(default="WARNING", description="Console log level")
    log_config: Optional[Path] = Field(
        default=None, description="Optional YAML logging configuration"
    )
    log_file: Optional[Path] = Field(default=None, description="Optional log file")

    @model_validator(mode="before")
    @classmethod
    def derive_locations(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        home = Path(data.get("home_dir") or Path.home()).expanduser()
        data["home_dir"] = home
        if not data.get("live_settings_path"):
            data["live_settings_path"] = home / LIVE_SETTINGS_RELATIVE_PATH
        if not data.get("store_dir"):
            data["store_dir"] = home / STORE_RELATIVE_PATH
        return data

    @field_validator("home_dir", "live_settings_path", "store_dir")
    @classmethod
    def absolute_path(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.strip().upper() or "WARNING"

    @property
    def profiles_dir(self) -> Path:
        return self.store_dir / "profiles"

    @property
    def state_file(self) -> Path:
        return self.store_dir / STATE_FILE_NAME

    @classmethod
    def from_environment(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "SwitchSettings":
        """Build settings from ``CC_SWITCH_*`` variables.

        Args:
            environ: Environment mapping to read (defaults to os.environ)

        Returns:
            Resolved settings
        """
        loader = EnvironmentLoader(environ=environ)
        return cls(**loader.load_with_schema(ENV_SCHEMA))
