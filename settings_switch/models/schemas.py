"""Pydantic models for the profile state and the core API.

This module defines the data exchanged between the stores, the switch engine
and the presentation layer:
- StateRecord: the persisted active-profile pointer
- ProfileInfo / ActiveProfileStatus: read-only views returned to callers
- ProviderTemplate / CreateProfileOptions: the recognised create options
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator, model_validator

from ..validation import validate_profile_name

DEFAULT_PROFILE_NAME = "default"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Base Classes
# =============================================================================


class BaseConfig(BaseModel):
    """Base model with strict field handling."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )


# =============================================================================
# State Record
# =============================================================================


class StateRecord(BaseModel):
    """Persisted active-profile pointer.

    Serialised with the camelCase keys of the on-disk format. Unknown keys are
    kept so that an update never drops fields written by another version.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    active_profile: str = Field(
        default=DEFAULT_PROFILE_NAME,
        alias="activeProfile",
        min_length=1,
        description="Name of the profile mirrored into the live settings",
    )
    last_synced_at: datetime = Field(
        default_factory=utc_now,
        alias="lastSyncedAt",
        description="Time of the last state update",
    )

    @field_validator("active_profile")
    @classmethod
    def storable_name(cls, value: str) -> str:
        # The pointer is used to build a storage path during mirroring
        result = validate_profile_name(value)
        if not result.valid:
            raise ValueError(result.error)
        return value

    def to_json_bytes(self) -> bytes:
        data = self.model_dump(mode="json", by_alias=True)
        return (json.dumps(data, indent=2, ensure_ascii=False) + "\n").encode("utf-8")


# =============================================================================
# Views
# =============================================================================


class ProfileInfo(BaseConfig):
    """Profile entry as listed from the store."""

    name: str = Field(description="Profile name")
    is_active: bool = Field(default=False, description="Whether the profile is active")


class ActiveProfileStatus(BaseConfig):
    """Active profile name plus whether its storage exists."""

    name: str = Field(description="Active profile name from the state record")
    exists: bool = Field(description="Whether the profile directory exists")


# =============================================================================
# Create Options
# =============================================================================


class ProviderTemplate(str, Enum):
    """Provider templates that can seed a new profile."""

    ANTHROPIC = "anthropic"
    MOONSHOT = "moonshot"
    ZAI = "zai"
    MINIMAX = "minimax"


class CreateProfileOptions(BaseConfig):
    """Recognised options for profile creation.

    ``template`` accepts a template name or alias. ``secret`` is the provider
    API key and is only meaningful together with a template.
    """

    template: Optional[ProviderTemplate] = Field(
        default=None, description="Provider template applied to the new profile"
    )
    secret: Optional[SecretStr] = Field(
        default=None, description="Provider API key written into the profile"
    )

    @field_validator("template", mode="before")
    @classmethod
    def resolve_template(cls, value: Any) -> Any:
        if value is None or isinstance(value, ProviderTemplate):
            return value
        from ..profiles.templates import resolve_template_name

        resolved = resolve_template_name(str(value))
        if resolved is None:
            raise ValueError(f'Unknown template "{value}"')
        return resolved

    @field_validator("secret", mode="before")
    @classmethod
    def blank_secret_is_absent(cls, value: Any) -> Any:
        if isinstance(value, SecretStr):
            value = value.get_secret_value()
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @model_validator(mode="after")
    def check_combination(self) -> "CreateProfileOptions":
        if self.template is None:
            if self.secret is not None:
                raise ValueError("API key can only be used with a template")
            return self

        from ..profiles.templates import get_template_definition

        definition = get_template_definition(self.template)
        if definition.requires_api_key and self.secret is None:
            raise ValueError(f'API key is required for template "{definition.label}"')
        return self

    def api_key(self) -> Optional[str]:
        return self.secret.get_secret_value() if self.secret else None
