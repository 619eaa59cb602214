"""Mirror-then-replace profile switching.

``switch_to`` runs four ordered steps, each an atomic single-file write:

1. mirror: live settings -> current active profile slot (always, even when
   the target is already active, so in-place edits are never lost)
2. stop here if the target is already active
3. replace: target profile blob -> live settings
4. commit: state record points at the target

A crash between steps leaves a state that a repeated switch to the same
target repairs.
"""

import logging
from typing import Optional

from ..errors import (
    FilesystemError,
    LiveSettingsNotFoundError,
    ProfileAlreadyActiveError,
    ProfileNotFoundError,
)
from ..paths import PathResolver
from ..storage.atomic import AtomicFileWriter
from ..storage.state import StateStore
from ..validation import require_valid_name
from .store import ProfileStore

LIVE_SETTINGS_MISSING = (
    "No {path} found. Run the host application once to generate it, "
    "or run the setup script provided by your provider."
)


class SwitchEngine:
    """Swaps the live settings document for a stored profile."""

    def __init__(
        self,
        resolver: PathResolver,
        state_store: StateStore,
        profile_store: ProfileStore,
        writer: Optional[AtomicFileWriter] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.resolver = resolver
        self.state_store = state_store
        self.profile_store = profile_store
        self.logger = logger or logging.getLogger(__name__)
        self.writer = writer or AtomicFileWriter(logger=self.logger)

    def _missing_live_settings(self) -> LiveSettingsNotFoundError:
        live_path = self.resolver.live_path()
        return LiveSettingsNotFoundError(
            LIVE_SETTINGS_MISSING.format(path=self.resolver.display_path(live_path))
        )

    def require_live_settings(self) -> None:
        """Fail with the setup diagnostic when the live document is absent.

        Raises:
            LiveSettingsNotFoundError: If the live settings file does not exist
        """
        if not self.resolver.live_path().exists():
            raise self._missing_live_settings()

    def read_live_settings(self) -> bytes:
        live_path = self.resolver.live_path()
        try:
            return live_path.read_bytes()
        except FileNotFoundError as e:
            raise self._missing_live_settings() from e
        except OSError as e:
            raise FilesystemError(f"Failed to read {live_path}: {e}") from e

    def switch_to(self, target: str) -> None:
        """Make ``target`` the active profile.

        Args:
            target: Profile to install as the live settings

        Raises:
            ProfileValidationError: If ``target`` is not a valid name
            LiveSettingsNotFoundError: If the live settings document is missing
            ProfileNotFoundError: If ``target`` has no storage
            ProfileAlreadyActiveError: If ``target`` is already active; the
                mirror step has still been performed
        """
        require_valid_name(target)
        self.require_live_settings()

        if not self.profile_store.exists(target):
            raise ProfileNotFoundError(f'Profile "{target}" does not exist')

        active = self.state_store.read().active_profile

        # Mirror
        self.profile_store.mirror(active, self.read_live_settings())

        if target == active:
            raise ProfileAlreadyActiveError(f'Profile "{target}" is already active')

        # Replace
        self.writer.write(self.resolver.live_path(), self.profile_store.read(target))

        # Commit
        self.state_store.update(active_profile=target)

        self.logger.info(f"Switched profile from '{active}' to '{target}'")
