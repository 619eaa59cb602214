"""Location resolution for profiles, the state record and live settings.

No validation and no I/O happens here; callers validate profile names first.
"""

from pathlib import Path
from typing import Optional

from .config import SwitchSettings


class PathResolver:
    """Maps profile names to storage locations under the store root."""

    def __init__(self, settings: Optional[SwitchSettings] = None):
        self.settings = settings or SwitchSettings.from_environment()

    @property
    def store_root(self) -> Path:
        return self.settings.profiles_dir

    def live_path(self) -> Path:
        return self.settings.live_settings_path

    def state_path(self) -> Path:
        return self.settings.state_file

    def profile_dir(self, name: str) -> Path:
        """Directory named exactly as the profile."""
        return self.store_root / name

    def profile_path(self, name: str) -> Path:
        """Blob file stored inside the profile directory."""
        return self.profile_dir(name) / self.settings.profile_file_name

    def display_path(self, path: Path) -> str:
        """Render ``path`` relative to the home directory when it lies beneath it."""
        try:
            relative = path.relative_to(self.settings.home_dir)
        except ValueError:
            return str(path)
        return f"~/{relative.as_posix()}"
