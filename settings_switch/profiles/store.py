"""Profile storage.

Profiles are directories under the store root, named exactly as the profile
and each holding one settings blob. The directory listing is the only index.
Every mutator re-checks existence on disk instead of trusting cached state.
"""

import logging
import shutil
from typing import Optional

from ..errors import (
    ActiveProfileGuardError,
    FilesystemError,
    ProfileConflictError,
    ProfileNotFoundError,
)
from ..models.schemas import CreateProfileOptions, ProfileInfo
from ..paths import PathResolver
from ..storage.atomic import AtomicFileWriter
from ..storage.state import StateStore
from ..validation import require_valid_name
from .templates import apply_template


class ProfileStore:
    """Lists, creates, deletes and renames stored profiles."""

    def __init__(
        self,
        resolver: PathResolver,
        state_store: StateStore,
        writer: Optional[AtomicFileWriter] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the profile store.

        Args:
            resolver: Path resolver for profile and live settings locations
            state_store: State store holding the active-profile pointer
            writer: Atomic writer (creates one if None)
            logger: Logger instance (creates one if None)
        """
        self.resolver = resolver
        self.state_store = state_store
        self.logger = logger or logging.getLogger(__name__)
        self.writer = writer or AtomicFileWriter(logger=self.logger)

    def list_profiles(self) -> list[ProfileInfo]:
        """List profiles, active first, the rest in ascending name order.

        Returns:
            Profile entries; empty when the store root was just created
        """
        active = self.state_store.read().active_profile
        root = self.resolver.store_root

        try:
            root.mkdir(parents=True, exist_ok=True)
            entries = list(root.iterdir())
        except OSError as e:
            raise FilesystemError(f"Failed to list profiles in {root}: {e}") from e

        profiles = []
        for entry in entries:
            if not entry.is_dir():
                self.logger.debug(f"Skipping non-directory entry in profile store: {entry}")
                continue
            profiles.append(ProfileInfo(name=entry.name, is_active=entry.name == active))

        return sorted(profiles, key=lambda p: (not p.is_active, p.name))

    def exists(self, name: str) -> bool:
        return self.resolver.profile_dir(name).exists()

    def read(self, name: str) -> bytes:
        """Return the stored settings blob of a profile.

        Raises:
            ProfileNotFoundError: If the profile has no storage
        """
        require_valid_name(name)
        if not self.exists(name):
            raise ProfileNotFoundError(f'Profile "{name}" does not exist')

        profile_path = self.resolver.profile_path(name)
        try:
            return profile_path.read_bytes()
        except OSError as e:
            raise FilesystemError(f"Failed to read profile {profile_path}: {e}") from e

    def mirror(self, name: str, blob: bytes) -> None:
        """Overwrite a profile's slot with ``blob``, creating it if needed."""
        self.writer.write(self.resolver.profile_path(name), blob)
        self.logger.debug(f"Mirrored live settings into profile: {name}")

    def create(
        self,
        name: str,
        source_blob: bytes,
        options: Optional[CreateProfileOptions] = None,
    ) -> ProfileInfo:
        """Create a profile holding ``source_blob``.

        A bare create leaves the active profile untouched. Creating from a
        provider template also mirrors ``source_blob`` into the current
        active profile, installs the templated blob as the live settings and
        makes the new profile active.

        Args:
            name: New profile name
            source_blob: Current live settings content
            options: Optional template and API key

        Returns:
            The created profile entry

        Raises:
            ProfileValidationError: If the name or template input is rejected
            ProfileConflictError: If the profile already exists
        """
        require_valid_name(name)
        if self.exists(name):
            raise ProfileConflictError(f'Profile "{name}" already exists')

        active = self.state_store.read().active_profile

        if options is None or options.template is None:
            self.writer.write(self.resolver.profile_path(name), source_blob)
            self.logger.info(f"Created profile: {name}")
            return ProfileInfo(name=name, is_active=name == active)

        templated = apply_template(source_blob, options.template, options.api_key())

        self.mirror(active, source_blob)
        self.writer.write(self.resolver.profile_path(name), templated)
        self.writer.write(self.resolver.live_path(), templated)
        self.state_store.update(active_profile=name)

        self.logger.info(
            f"Created profile '{name}' from template '{options.template.value}' and made it active"
        )
        return ProfileInfo(name=name, is_active=True)

    def delete(self, name: str) -> None:
        """Delete a profile and all of its storage.

        Raises:
            ProfileNotFoundError: If the profile does not exist
            ActiveProfileGuardError: If the profile is active
        """
        require_valid_name(name)
        if not self.exists(name):
            raise ProfileNotFoundError(f'Profile "{name}" does not exist')

        if name == self.state_store.read().active_profile:
            raise ActiveProfileGuardError(
                f'Cannot delete active profile "{name}". Switch to another profile first.'
            )

        profile_dir = self.resolver.profile_dir(name)
        try:
            shutil.rmtree(profile_dir)
        except FileNotFoundError:
            self.logger.debug(f"Profile directory already removed: {profile_dir}")
        except OSError as e:
            raise FilesystemError(f"Failed to delete profile {profile_dir}: {e}") from e

        self.logger.info(f"Deleted profile: {name}")

    def rename(self, old_name: str, new_name: str) -> None:
        """Rename a profile directory, keeping its content untouched.

        Renaming a profile to its own name succeeds without touching disk.
        If the renamed profile is active, the state record follows it.

        Raises:
            ProfileNotFoundError: If ``old_name`` does not exist
            ProfileConflictError: If ``new_name`` already exists
        """
        require_valid_name(old_name, "old")
        require_valid_name(new_name, "new")

        if not self.exists(old_name):
            raise ProfileNotFoundError(f'Profile "{old_name}" does not exist')

        if old_name == new_name:
            return

        if self.exists(new_name):
            raise ProfileConflictError(f'Profile "{new_name}" already exists')

        active = self.state_store.read().active_profile
        old_dir = self.resolver.profile_dir(old_name)
        new_dir = self.resolver.profile_dir(new_name)
        try:
            old_dir.rename(new_dir)
        except OSError as e:
            raise FilesystemError(
                f"Failed to rename profile {old_dir} to {new_dir}: {e}"
            ) from e

        if old_name == active:
            self.state_store.update(active_profile=new_name)
            self.logger.info(f"Active profile follows rename: {new_name}")

        self.logger.info(f"Renamed profile '{old_name}' to '{new_name}'")
