"""Profile name validation.

Checks run in a fixed order and the first violation is reported, so the
message for a given name is always the same.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .errors import ProfileValidationError

RESERVED_PROFILE_NAMES = frozenset({"help", "version"})
TRAVERSAL_TOKENS = ("..", "/", "\\")
_SAFE_NAME = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class NameValidation:
    """Outcome of validating a candidate profile name."""

    valid: bool
    error: Optional[str] = None


def validate_profile_name(name: str) -> NameValidation:
    trimmed = name.strip()
    if not trimmed:
        return NameValidation(False, "Profile name cannot be empty")

    if name != trimmed:
        return NameValidation(
            False, "Profile name cannot contain leading or trailing spaces"
        )

    if trimmed.lower() in RESERVED_PROFILE_NAMES:
        return NameValidation(
            False, f'Profile name "{trimmed}" is reserved. Choose a different name.'
        )

    if any(token in trimmed for token in TRAVERSAL_TOKENS):
        return NameValidation(False, 'Profile name cannot contain "..", "/", or "\\"')

    if not _SAFE_NAME.fullmatch(trimmed):
        return NameValidation(
            False,
            "Profile name can only contain letters, numbers, hyphens, and underscores",
        )

    return NameValidation(True)


def require_valid_name(name: str, label: str = "") -> str:
    """Return ``name`` unchanged or raise ProfileValidationError.

    Args:
        name: Candidate profile name
        label: Optional qualifier used in the message, e.g. ``"old"``

    Raises:
        ProfileValidationError: If the name is rejected
    """
    result = validate_profile_name(name)
    if not result.valid:
        if label:
            raise ProfileValidationError(f"Invalid {label} profile name: {result.error}")
        raise ProfileValidationError(result.error)
    return name
