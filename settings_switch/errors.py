"""Exception hierarchy for profile switching.

Every failure raised by the core derives from ProfileSwitchError and carries
a human-readable reason as its message, so callers can surface ``str(err)``
verbatim.
"""


class ProfileSwitchError(Exception):
    """Base exception for profile switching errors."""

    pass


class ProfileValidationError(ProfileSwitchError):
    """Raised when a profile name or create option is rejected."""

    pass


class TemplateError(ProfileValidationError):
    """Raised when a provider template cannot be applied to a settings blob."""

    pass


class ProfileNotFoundError(ProfileSwitchError):
    """Raised when a profile has no storage in the store."""

    pass


class LiveSettingsNotFoundError(ProfileNotFoundError):
    """Raised when the live settings document does not exist."""

    pass


class ProfileConflictError(ProfileSwitchError):
    """Raised when an operation would collide with an existing profile."""

    pass


class ProfileAlreadyActiveError(ProfileConflictError):
    """Raised when switching to the profile that is already active."""

    pass


class ActiveProfileGuardError(ProfileSwitchError):
    """Raised when deleting the profile that is currently active."""

    pass


class CorruptStateError(ProfileSwitchError):
    """Raised when the state record cannot be parsed."""

    pass


class FilesystemError(ProfileSwitchError):
    """Raised when the underlying filesystem operation fails."""

    pass
