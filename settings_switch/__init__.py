"""Local profile manager for a single settings file.

Keeps named copies of the live settings document and swaps the live document
for one of them on command, tracking which copy is active.
"""

__version__ = "1.0.0"

from .config import SwitchSettings
from .errors import (
    ActiveProfileGuardError,
    CorruptStateError,
    FilesystemError,
    LiveSettingsNotFoundError,
    ProfileAlreadyActiveError,
    ProfileConflictError,
    ProfileNotFoundError,
    ProfileSwitchError,
    ProfileValidationError,
    TemplateError,
)
from .models.schemas import (
    ActiveProfileStatus,
    CreateProfileOptions,
    ProfileInfo,
    ProviderTemplate,
    StateRecord,
)
from .service import (
    ProfileSwitchService,
    create_profile,
    delete_profile,
    get_active_profile_status,
    list_profiles,
    rename_profile,
    switch_profile,
)

__all__ = [
    "ActiveProfileGuardError",
    "ActiveProfileStatus",
    "CorruptStateError",
    "CreateProfileOptions",
    "FilesystemError",
    "LiveSettingsNotFoundError",
    "ProfileAlreadyActiveError",
    "ProfileConflictError",
    "ProfileInfo",
    "ProfileNotFoundError",
    "ProfileSwitchError",
    "ProfileSwitchService",
    "ProfileValidationError",
    "ProviderTemplate",
    "StateRecord",
    "SwitchSettings",
    "TemplateError",
    "__version__",
    "create_profile",
    "delete_profile",
    "get_active_profile_status",
    "list_profiles",
    "rename_profile",
    "switch_profile",
]
