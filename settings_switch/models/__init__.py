"""Data models for profile state and the core API."""

from .schemas import (
    DEFAULT_PROFILE_NAME,
    ActiveProfileStatus,
    BaseConfig,
    CreateProfileOptions,
    ProfileInfo,
    ProviderTemplate,
    StateRecord,
)

__all__ = [
    "DEFAULT_PROFILE_NAME",
    "ActiveProfileStatus",
    "BaseConfig",
    "CreateProfileOptions",
    "ProfileInfo",
    "ProviderTemplate",
    "StateRecord",
]
