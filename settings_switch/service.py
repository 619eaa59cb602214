"""Core API for the presentation layer.

ProfileSwitchService wires the stores and the switch engine together for one
invocation. The module-level functions build a fresh service from the
environment on every call.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .config import SwitchSettings
from .errors import ProfileConflictError, ProfileValidationError
from .models.schemas import ActiveProfileStatus, CreateProfileOptions, ProfileInfo
from .paths import PathResolver
from .profiles.store import ProfileStore
from .profiles.switcher import SwitchEngine
from .storage.atomic import AtomicFileWriter
from .storage.state import StateStore
from .validation import require_valid_name


def _options_error_message(error: ValidationError) -> str:
    first = error.errors()[0]
    cause = first.get("ctx", {}).get("error")
    if cause is not None:
        return str(cause)
    return f"Invalid create option {'.'.join(str(p) for p in first['loc'])}: {first['msg']}"


def build_create_options(
    template: Optional[str] = None, secret: Optional[str] = None
) -> Optional[CreateProfileOptions]:
    """Validate raw create options.

    Returns:
        None when neither option is given, otherwise the validated options

    Raises:
        ProfileValidationError: On an unknown template or a bad combination
    """
    if template is None and secret is None:
        return None
    try:
        return CreateProfileOptions(template=template, secret=secret)
    except ValidationError as e:
        raise ProfileValidationError(_options_error_message(e)) from e


class ProfileSwitchService:
    """Profile operations exposed to the CLI."""

    def __init__(
        self,
        settings: Optional[SwitchSettings] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the service.

        Args:
            settings: Runtime settings (read from the environment if None)
            logger: Logger instance (creates one if None)
        """
        self.settings = settings or SwitchSettings.from_environment()
        self.logger = logger or logging.getLogger(__name__)

        self.resolver = PathResolver(self.settings)
        self.writer = AtomicFileWriter()
        self.state_store = StateStore(self.resolver.state_path(), writer=self.writer)
        self.profile_store = ProfileStore(
            self.resolver, self.state_store, writer=self.writer
        )
        self.engine = SwitchEngine(
            self.resolver, self.state_store, self.profile_store, writer=self.writer
        )

    def list_profiles(self) -> list[ProfileInfo]:
        return self.profile_store.list_profiles()

    def get_active_profile_status(self) -> ActiveProfileStatus:
        name = self.state_store.read().active_profile
        return ActiveProfileStatus(name=name, exists=self.profile_store.exists(name))

    def switch_profile(self, name: str) -> None:
        self.engine.switch_to(name)

    def create_profile(
        self, name: str, options: Optional[CreateProfileOptions] = None
    ) -> ProfileInfo:
        """Create a profile from the current live settings.

        Args:
            name: New profile name
            options: Optional provider template and API key

        Returns:
            The created profile entry

        Raises:
            ProfileConflictError: If the profile already exists
            LiveSettingsNotFoundError: If there is no live settings document to copy
        """
        require_valid_name(name)
        if self.profile_store.exists(name):
            raise ProfileConflictError(f'Profile "{name}" already exists')

        self.require_live_settings()
        live_blob = self.engine.read_live_settings()
        return self.profile_store.create(name, live_blob, options)

    def require_live_settings(self) -> None:
        """Raise LiveSettingsNotFoundError when there is no live document to copy."""
        self.engine.require_live_settings()

    def delete_profile(self, name: str) -> None:
        self.profile_store.delete(name)

    def rename_profile(self, old_name: str, new_name: str) -> None:
        self.profile_store.rename(old_name, new_name)


def list_profiles() -> list[ProfileInfo]:
    return ProfileSwitchService().list_profiles()


def get_active_profile_status() -> ActiveProfileStatus:
    return ProfileSwitchService().get_active_profile_status()


def switch_profile(name: str) -> None:
    ProfileSwitchService().switch_profile(name)


def create_profile(
    name: str, template: Optional[str] = None, secret: Optional[str] = None
) -> ProfileInfo:
    return ProfileSwitchService().create_profile(
        name, build_create_options(template, secret)
    )


def delete_profile(name: str) -> None:
    ProfileSwitchService().delete_profile(name)


def rename_profile(old_name: str, new_name: str) -> None:
    ProfileSwitchService().rename_profile(old_name, new_name)
